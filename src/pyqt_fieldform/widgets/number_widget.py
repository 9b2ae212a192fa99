"""Number widget type."""

from typing import Any, Dict, Optional

from pyqt_fieldform.forms.widget_registry import WidgetMeta
from pyqt_fieldform.protocols.widget_protocols import (
    ErrorElementLocator, SettingsFormProvider, SlotElementBuilder,
)

from .text_widgets import item_column


def _step(field) -> Any:
    if field.type == "number_decimal":
        return 10 ** -int(field.settings.get("scale", 2))
    if field.type == "number_float":
        return "any"
    return 1


class NumberWidget(SlotElementBuilder, SettingsFormProvider, ErrorElementLocator,
                   metaclass=WidgetMeta):
    _widget_id = "number"
    _label = "Number field"
    _field_types = ("number_integer", "number_decimal", "number_float")
    _default_settings = {"placeholder": ""}

    def form_element(self, widget, items, delta, element, langcode, form, form_state) -> Optional[Dict[Any, Any]]:
        settings = widget.instance.settings
        value_element = {
            "#type": "number",
            "#default_value": item_column(items, delta, "value"),
            "#placeholder": widget.get_setting("placeholder"),
            "#step": _step(widget.field),
        }
        value_element.update(element)
        if settings.get("min") is not None:
            value_element["#min"] = settings["min"]
        if settings.get("max") is not None:
            value_element["#max"] = settings["max"]
        if settings.get("prefix"):
            value_element["#field_prefix"] = settings["prefix"]
        if settings.get("suffix"):
            value_element["#field_suffix"] = settings["suffix"]
        return {"value": value_element}

    def settings_form(self, widget, form, form_state) -> Dict[str, Any]:
        return {
            "placeholder": {
                "#type": "textfield",
                "#title": "Placeholder",
                "#default_value": widget.get_setting("placeholder"),
            },
        }

    def error_element(self, widget, element, error, form, form_state) -> Dict[Any, Any]:
        return element.get("value", element)
