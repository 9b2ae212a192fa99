"""
Widget type registry with metaclass auto-registration.

Widget types auto-register when their classes are defined, eliminating manual
registration boilerplate.

Design:
- WidgetMeta metaclass handles auto-registration
- WIDGET_IMPLEMENTATIONS: Global registry of widget type definitions
- WIDGET_CAPABILITIES: Tracks which capability ABCs each widget type implements
- Fail-loud if a widget type declares an id without the SlotElementBuilder ABC
"""

from abc import ABCMeta
from dataclasses import dataclass, field
from typing import Any, Dict, List, Set, Tuple, Type
import logging

from pyqt_fieldform.exceptions import UnknownWidgetError, WidgetRegistrationError
from pyqt_fieldform.protocols.widget_protocols import (
    ErrorElementLocator, FormValueMassager, SettingsFormProvider, SlotElementBuilder,
)

logger = logging.getLogger(__name__)

CAPABILITY_TYPES = (SlotElementBuilder, SettingsFormProvider, ErrorElementLocator, FormValueMassager)


@dataclass(frozen=True)
class WidgetDefinition:
    """Declared properties of a widget type."""
    widget_id: str
    widget_class: Type
    label: str = ""
    field_types: Tuple[str, ...] = ()
    # True when one element handles every value of the field
    multiple_values: bool = False
    default_settings: Dict[str, Any] = field(default_factory=dict)


# Global registry of widget types
# Maps widget_id -> WidgetDefinition
WIDGET_IMPLEMENTATIONS: Dict[str, WidgetDefinition] = {}

# Maps widget class -> set of capability ABCs
WIDGET_CAPABILITIES: Dict[Type, Set[Type]] = {}


class WidgetMeta(ABCMeta):
    """
    Metaclass for automatic widget type registration.

    1. Only registers concrete classes (no abstract methods)
    2. Requires _widget_id attribute for identification
    3. Requires the SlotElementBuilder capability
    4. Tracks capabilities (which ABCs implemented)

    Example:
        class TextfieldWidget(SlotElementBuilder, metaclass=WidgetMeta):
            _widget_id = "text_textfield"
            _field_types = ("text",)
            _default_settings = {"size": 60}

            def form_element(self, widget, items, delta, element, langcode, form, form_state):
                ...

    The widget type auto-registers in WIDGET_IMPLEMENTATIONS["text_textfield"]
    when the class is defined.
    """

    def __new__(mcs, name, bases, attrs):
        new_class = super().__new__(mcs, name, bases, attrs)

        abstract_methods = getattr(new_class, '__abstractmethods__', None)
        if abstract_methods:
            logger.debug(
                f"Skipping registration for {name} - abstract methods remaining: "
                f"{set(abstract_methods)}"
            )
            return new_class

        widget_id = attrs.get('_widget_id')
        if widget_id is None:
            # Intermediate base class
            logger.debug(f"Skipping registration for {name} - no _widget_id attribute")
            return new_class

        if not issubclass(new_class, SlotElementBuilder):
            raise WidgetRegistrationError(
                f"Widget type {name} ('{widget_id}') does not implement SlotElementBuilder. "
                f"Add SlotElementBuilder to its base classes and implement form_element()."
            )

        if widget_id in WIDGET_IMPLEMENTATIONS:
            existing = WIDGET_IMPLEMENTATIONS[widget_id].widget_class
            logger.warning(
                f"Widget ID '{widget_id}' already registered to {existing.__name__}. "
                f"Overwriting with {name}."
            )

        WIDGET_IMPLEMENTATIONS[widget_id] = WidgetDefinition(
            widget_id=widget_id,
            widget_class=new_class,
            label=getattr(new_class, '_label', name),
            field_types=tuple(getattr(new_class, '_field_types', ())),
            multiple_values=bool(getattr(new_class, '_multiple_values', False)),
            default_settings=dict(getattr(new_class, '_default_settings', {})),
        )

        capabilities = {abc_type for abc_type in CAPABILITY_TYPES if issubclass(new_class, abc_type)}
        WIDGET_CAPABILITIES[new_class] = capabilities

        logger.debug(
            f"Auto-registered {name} as '{widget_id}' with capabilities: "
            f"{sorted(c.__name__ for c in capabilities)}"
        )
        return new_class


def get_widget_definition(widget_id: str) -> WidgetDefinition:
    """
    Get a widget type definition by ID.

    Raises:
        UnknownWidgetError: If widget_id not registered
    """
    if widget_id not in WIDGET_IMPLEMENTATIONS:
        raise UnknownWidgetError(
            f"No widget registered with ID '{widget_id}'. "
            f"Available widgets: {list(WIDGET_IMPLEMENTATIONS.keys())}"
        )
    return WIDGET_IMPLEMENTATIONS[widget_id]


def get_widget_class(widget_id: str) -> Type:
    """
    Get widget type class by ID.

    Raises:
        UnknownWidgetError: If widget_id not registered
    """
    return get_widget_definition(widget_id).widget_class


def get_widget_capabilities(widget_class: Type) -> Set[Type]:
    """Get the capability ABCs that a widget type class implements."""
    return WIDGET_CAPABILITIES.get(widget_class, set())


def list_widgets_for_field_type(field_type: str) -> List[WidgetDefinition]:
    """
    Find all widget types that can edit a field type.

    Example:
        >>> [d.widget_id for d in list_widgets_for_field_type("list_text")]
        ['options_select', 'options_buttons']
    """
    return [
        definition
        for definition in WIDGET_IMPLEMENTATIONS.values()
        if field_type in definition.field_types
    ]
