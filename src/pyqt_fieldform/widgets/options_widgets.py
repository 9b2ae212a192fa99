"""
Options widget types.

Both handle every value of the field in one element (multiple_values) and
submit selected keys, which massage_form_values() turns into items.
"""

from typing import Any, Dict, List

from pyqt_fieldform.forms.render_tree import check_plain
from pyqt_fieldform.forms.widget_registry import WidgetMeta
from pyqt_fieldform.protocols.widget_protocols import FormValueMassager, SlotElementBuilder

# Option key meaning "no value"
NONE_OPTION = "_none"

_UNCHECKED = (None, "", 0, False)


def allowed_options(widget) -> Dict[Any, str]:
    allowed = widget.field.settings.get("allowed_values", {})
    return {key: check_plain(str(label)) for key, label in allowed.items()}


def selected_keys(items: List[Dict[str, Any]]) -> List[Any]:
    return [
        item["value"] for item in items
        if isinstance(item, dict) and item.get("value") not in (None, "")
    ]


def massage_selection(values: Any) -> List[Dict[str, Any]]:
    """Selected option keys as items, whatever shape the element submitted."""
    if values is None:
        keys: List[Any] = []
    elif isinstance(values, dict):
        # Checkboxes submit key -> key for checked boxes, key -> 0 otherwise
        keys = [key for key, checked in values.items() if checked not in _UNCHECKED]
    elif isinstance(values, (list, tuple)):
        keys = list(values)
    else:
        keys = [values]
    return [{"value": key} for key in keys if key != NONE_OPTION and key not in (None, "")]


class OptionsSelectWidget(SlotElementBuilder, FormValueMassager, metaclass=WidgetMeta):
    """Select list of allowed values."""

    _widget_id = "options_select"
    _label = "Select list"
    _field_types = ("list_text", "list_integer")
    _multiple_values = True

    def form_element(self, widget, items, delta, element, langcode, form, form_state):
        options = allowed_options(widget)
        multiple = widget.field.is_multiple and len(options) > 1
        required = widget.instance.required
        selected = selected_keys(items)

        if not multiple:
            none_label = "- Select a value -" if required else "- None -"
            options = {NONE_OPTION: none_label, **options}
        elif not required:
            options = {NONE_OPTION: "- None -", **options}

        element.update({
            "#type": "select",
            "#options": options,
            "#multiple": multiple,
            "#required": required,
            "#default_value": selected if multiple else (selected[0] if selected else NONE_OPTION),
        })
        return element

    def massage_form_values(self, widget, values, form, form_state):
        return massage_selection(values)


class OptionsButtonsWidget(SlotElementBuilder, FormValueMassager, metaclass=WidgetMeta):
    """Check boxes for multiple-value fields, radio buttons otherwise."""

    _widget_id = "options_buttons"
    _label = "Check boxes/radio buttons"
    _field_types = ("list_text", "list_integer")
    _multiple_values = True

    def form_element(self, widget, items, delta, element, langcode, form, form_state):
        options = allowed_options(widget)
        multiple = widget.field.is_multiple
        required = widget.instance.required
        selected = selected_keys(items)

        if multiple:
            element.update({
                "#type": "checkboxes",
                "#options": options,
                "#default_value": selected,
            })
        else:
            if not required:
                options = {NONE_OPTION: "N/A", **options}
            element.update({
                "#type": "radios",
                "#options": options,
                "#default_value": selected[0] if selected else (None if required else NONE_OPTION),
            })
        element["#required"] = required
        return element

    def massage_form_values(self, widget, values, form, form_state):
        return massage_selection(values)
