"""
Widget type dispatcher with fail-loud ABC checking.

Replaces duck typing (hasattr checks) with explicit isinstance checks against
the capability ABCs. The one required capability fails loud; optional
capabilities fall back to their documented defaults.

Design Philosophy:
- Explicit over implicit
- Fail-loud over fail-silent
- Type-safe over duck-typed
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Optional

from pyqt_fieldform.protocols.widget_protocols import (
    ErrorElementLocator, FormValueMassager, SettingsFormProvider, SlotElementBuilder,
)

if TYPE_CHECKING:
    from .field_widget import FieldWidget
    from .form_state import FieldError, FormState


class WidgetDispatcher:
    """
    ABC-based widget type dispatch - NO DUCK TYPING.

    Example:
        # BEFORE (duck typing):
        if hasattr(impl, 'massage_form_values'):
            values = impl.massage_form_values(widget, values, form, form_state)

        # AFTER (ABC-based):
        values = WidgetDispatcher.massage_form_values(impl, widget, values, form, form_state)
    """

    @staticmethod
    def form_element(impl: Any, widget: 'FieldWidget', items: List[Dict[str, Any]], delta: int,
                     element: Dict[str, Any], langcode: str, form: Dict[str, Any],
                     form_state: 'FormState') -> Optional[Dict[str, Any]]:
        """
        Build one slot using explicit ABC check.

        Raises:
            TypeError: If impl doesn't implement SlotElementBuilder ABC
        """
        if not isinstance(impl, SlotElementBuilder):
            raise TypeError(
                f"Widget type {type(impl).__name__} does not implement SlotElementBuilder ABC. "
                f"Add SlotElementBuilder to its base classes and implement form_element() method."
            )
        return impl.form_element(widget, items, delta, element, langcode, form, form_state)

    @staticmethod
    def settings_form(impl: Any, widget: 'FieldWidget', form: Dict[str, Any],
                      form_state: 'FormState') -> Dict[str, Any]:
        """Settings form of the widget type; empty without SettingsFormProvider."""
        if not isinstance(impl, SettingsFormProvider):
            return {}
        return impl.settings_form(widget, form, form_state)

    @staticmethod
    def error_element(impl: Any, widget: 'FieldWidget', element: Dict[str, Any],
                      error: 'FieldError', form: Dict[str, Any],
                      form_state: 'FormState') -> Dict[str, Any]:
        """Element to report an error on; the element itself without ErrorElementLocator."""
        if not isinstance(impl, ErrorElementLocator):
            return element
        return impl.error_element(widget, element, error, form, form_state)

    @staticmethod
    def massage_form_values(impl: Any, widget: 'FieldWidget', values: Any,
                            form: Dict[str, Any], form_state: 'FormState') -> Any:
        """Submitted values as items; unchanged without FormValueMassager."""
        if not isinstance(impl, FormValueMassager):
            return values
        return impl.massage_form_values(widget, values, form, form_state)
