"""Alter hook registry for built widget slots.

Lets applications adjust every slot element a widget builds without touching
the widget type itself.

Example:
    from pyqt_fieldform.forms.alter_hooks import register_widget_alter

    def add_css_class(element, form_state, context):
        element.setdefault("#attributes", {}).setdefault("class", []).append("my-widget")

    register_widget_alter("field_widget_text_textfield_form", add_css_class)
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Dict, Iterable, List

if TYPE_CHECKING:
    from .field_types import FieldDefinition, FieldInstance
    from .form_state import FormState

logger = logging.getLogger(__name__)

# Hook run for every widget type
WIDGET_FORM_HOOK = "field_widget_form"


@dataclass
class WidgetAlterContext:
    """Context passed to widget alter callbacks."""
    form: Dict[str, Any]
    field: 'FieldDefinition'
    instance: 'FieldInstance'
    langcode: str
    items: List[Dict[str, Any]]
    delta: int
    is_default_value_form: bool = False


# Callbacks mutate the element in place
WidgetAlterCallback = Callable[[Dict[str, Any], 'FormState', WidgetAlterContext], None]


def widget_type_hook(widget_id: str) -> str:
    """Name of the hook run only for one widget type."""
    return f"field_widget_{widget_id}_form"


class WidgetAlterRegistry:
    """Registry of alter callbacks by hook name."""

    _callbacks: Dict[str, List[WidgetAlterCallback]] = {}

    @classmethod
    def register(cls, hook: str, callback: WidgetAlterCallback) -> None:
        cls._callbacks.setdefault(hook, []).append(callback)

    @classmethod
    def unregister(cls, hook: str, callback: WidgetAlterCallback) -> None:
        callbacks = cls._callbacks.get(hook, [])
        if callback in callbacks:
            callbacks.remove(callback)

    @classmethod
    def get_callbacks(cls, hook: str) -> List[WidgetAlterCallback]:
        return list(cls._callbacks.get(hook, []))

    @classmethod
    def alter(cls, hooks: Iterable[str], element: Dict[str, Any], form_state: 'FormState',
              context: WidgetAlterContext) -> Dict[str, Any]:
        """Run the callbacks of every hook, in hook order then registration order."""
        for hook in hooks:
            for callback in cls.get_callbacks(hook):
                logger.debug(f"Running {hook} alter {getattr(callback, '__name__', callback)}")
                callback(element, form_state, context)
        return element


def register_widget_alter(hook: str, callback: WidgetAlterCallback) -> None:
    """Register an alter callback.

    Args:
        hook: WIDGET_FORM_HOOK or widget_type_hook(widget_id)
        callback: Callable taking (element, form_state, context)
    """
    WidgetAlterRegistry.register(hook, callback)
