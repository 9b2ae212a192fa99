"""
Text widget types.

With text processing enabled on the instance, the slot becomes a
``text_format`` element carrying ``#format``; the format selector rendered for
it is what the editor attachment controller later binds editors to.
"""

from typing import Any, Dict, List, Optional

from pyqt_fieldform.forms.widget_registry import WidgetMeta
from pyqt_fieldform.protocols.widget_protocols import (
    ErrorElementLocator, SettingsFormProvider, SlotElementBuilder,
)


def item_column(items: List[Dict[str, Any]], delta: int, column: str) -> Any:
    """Stored value of one column at delta, None for missing items."""
    if delta < len(items) and isinstance(items[delta], dict):
        return items[delta].get(column)
    return None


def _with_text_format(widget, items, delta, element: Dict[Any, Any],
                      main_widget: Dict[Any, Any]) -> Dict[Any, Any]:
    if widget.instance.settings.get("text_processing"):
        element = dict(main_widget)
        element["#type"] = "text_format"
        element["#format"] = item_column(items, delta, "format")
        element["#base_type"] = main_widget["#type"]
    else:
        element["value"] = main_widget
    return element


def _placeholder_setting(widget) -> Dict[str, Any]:
    return {
        "#type": "textfield",
        "#title": "Placeholder",
        "#default_value": widget.get_setting("placeholder"),
        "#description": "Text that will be shown inside the field until a value is entered.",
    }


class TextfieldWidget(SlotElementBuilder, SettingsFormProvider, ErrorElementLocator,
                      metaclass=WidgetMeta):
    """Single-line text input."""

    _widget_id = "text_textfield"
    _label = "Text field"
    _field_types = ("text",)
    _default_settings = {"size": 60, "placeholder": ""}

    def form_element(self, widget, items, delta, element, langcode, form, form_state) -> Optional[Dict[Any, Any]]:
        main_widget = {
            "#type": "textfield",
            "#default_value": item_column(items, delta, "value"),
            "#size": widget.get_setting("size"),
            "#placeholder": widget.get_setting("placeholder"),
            "#maxlength": widget.field.settings.get("max_length"),
            "#attributes": {"class": ["text-full"]},
        }
        main_widget.update(element)
        return _with_text_format(widget, items, delta, element, main_widget)

    def settings_form(self, widget, form, form_state) -> Dict[str, Any]:
        return {
            "size": {
                "#type": "number",
                "#title": "Size of textfield",
                "#default_value": widget.get_setting("size"),
                "#required": True,
                "#min": 1,
            },
            "placeholder": _placeholder_setting(widget),
        }

    def error_element(self, widget, element, error, form, form_state) -> Dict[Any, Any]:
        return element.get("value", element)


class TextareaWidget(SlotElementBuilder, SettingsFormProvider, ErrorElementLocator,
                     metaclass=WidgetMeta):
    """Multi-line text input."""

    _widget_id = "text_textarea"
    _label = "Text area (multiple rows)"
    _field_types = ("text_long",)
    _default_settings = {"rows": 5, "placeholder": ""}

    def form_element(self, widget, items, delta, element, langcode, form, form_state) -> Optional[Dict[Any, Any]]:
        main_widget = {
            "#type": "textarea",
            "#default_value": item_column(items, delta, "value"),
            "#rows": widget.get_setting("rows"),
            "#placeholder": widget.get_setting("placeholder"),
            "#attributes": {"class": ["text-full"]},
        }
        main_widget.update(element)
        return _with_text_format(widget, items, delta, element, main_widget)

    def settings_form(self, widget, form, form_state) -> Dict[str, Any]:
        return {
            "rows": {
                "#type": "number",
                "#title": "Rows",
                "#default_value": widget.get_setting("rows"),
                "#required": True,
                "#min": 1,
            },
            "placeholder": _placeholder_setting(widget),
        }

    def error_element(self, widget, element, error, form, form_state) -> Dict[Any, Any]:
        return element.get("value", element)
