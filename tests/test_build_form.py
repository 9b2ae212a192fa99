"""Tests for FieldWidget.build_form()."""

import pytest

from pyqt_fieldform.exceptions import UnknownWidgetError
from pyqt_fieldform.forms.alter_hooks import (
    WIDGET_FORM_HOOK, WidgetAlterRegistry, widget_type_hook,
)
from pyqt_fieldform.forms.field_types import FieldDefinition
from pyqt_fieldform.forms.field_widget import FieldWidget
from pyqt_fieldform.forms.form_state import get_field_state
from pyqt_fieldform.forms.render_tree import element_children
from pyqt_fieldform.protocols.form_config import FieldFormConfig, set_form_config


def build(field, instance, items, entity, form_state, **kwargs):
    widget = FieldWidget.from_instance(field, instance)
    result = widget.build_form(entity, "und", items, {"#parents": []}, form_state, **kwargs)
    return result[field.field_name]


def deltas(elements):
    return [key for key in element_children(elements) if isinstance(key, int)]


def test_unlimited_field_renders_one_slot_per_item(make_field, entity, form_state):
    field, instance = make_field()
    container = build(field, instance, [{"value": "a"}, {"value": "b"}], entity, form_state)
    elements = container["und"]

    assert deltas(elements) == [0, 1]
    assert elements[0]["value"]["#default_value"] == "a"
    assert elements[1]["value"]["#default_value"] == "b"
    assert elements["#max_delta"] == 1
    assert elements["#theme"] == "field_multiple_value_form"


def test_unlimited_field_without_items_renders_one_empty_slot(make_field, entity, form_state):
    field, instance = make_field()
    elements = build(field, instance, [], entity, form_state)["und"]

    assert deltas(elements) == [0]
    assert elements[0]["value"]["#default_value"] is None
    assert get_field_state([], "field_tags", "und", form_state).items_count == 1


def test_limited_field_renders_cardinality_slots(make_field, entity, form_state):
    field, instance = make_field(cardinality=3)
    elements = build(field, instance, [{"value": "a"}], entity, form_state)["und"]

    assert deltas(elements) == [0, 1, 2]
    assert "add_more" not in elements
    assert elements["#max_delta"] == 2


def test_add_more_button_for_unlimited_field(make_field, entity, form_state):
    field, instance = make_field()
    elements = build(field, instance, [{"value": "a"}], entity, form_state)["und"]

    button = elements["add_more"]
    assert button["#type"] == "submit"
    assert button["#name"] == "field_tags_add_more"
    assert button["#value"] == "Add another item"
    assert button["#limit_validation_errors"] == [["field_tags", "und"]]
    assert button["#ajax"]["wrapper"] == "field-tags-add-more-wrapper"
    assert elements["#prefix"] == '<div id="field-tags-add-more-wrapper">'
    assert elements["#suffix"] == "</div>"


def test_no_add_more_button_on_programmed_submit(make_field, entity, form_state):
    field, instance = make_field()
    form_state.programmed = True
    elements = build(field, instance, [{"value": "a"}], entity, form_state)["und"]

    assert "add_more" not in elements


def test_add_more_label_from_config(make_field, entity, form_state):
    set_form_config(FieldFormConfig(add_more_label="Add tag"))
    field, instance = make_field()
    elements = build(field, instance, [], entity, form_state)["und"]

    assert elements["add_more"]["#value"] == "Add tag"


def test_weight_controls_for_multiple_field(make_field, entity, form_state):
    field, instance = make_field()
    items = [{"value": "a"}, {"value": "b", "_weight": 7}]
    elements = build(field, instance, items, entity, form_state)["und"]

    weight = elements[0]["_weight"]
    assert weight["#type"] == "weight"
    assert weight["#title"] == "Weight for row 1"
    assert weight["#title_display"] == "invisible"
    assert weight["#delta"] == 1
    assert weight["#default_value"] == 0
    assert elements[1]["_weight"]["#default_value"] == 7


def test_single_value_field_has_no_weight_and_keeps_title(make_field, entity, form_state):
    field, instance = make_field(cardinality=1, required=True)
    elements = build(field, instance, [{"value": "a"}], entity, form_state)["und"]

    assert deltas(elements) == [0]
    assert "_weight" not in elements[0]
    assert elements[0]["value"]["#title"] == "Tags"
    assert elements[0]["value"]["#description"] == "Keywords"
    assert elements[0]["#required"] is True


def test_multiple_field_title_and_required_on_table(make_field, entity, form_state):
    field, instance = make_field(required=True)
    elements = build(field, instance, [{"value": "a"}, {"value": "b"}], entity, form_state)["und"]

    assert elements["#title"] == "Tags"
    assert elements["#description"] == "Keywords"
    assert elements["#required"] is True
    assert elements[0]["#title"] == ""
    assert elements[0]["#required"] is False
    assert elements[1]["#required"] is False


def test_title_is_escaped(make_field, entity, form_state):
    field, instance = make_field()
    instance.label = "<b>Tags</b>"
    elements = build(field, instance, [], entity, form_state)["und"]

    assert elements["#title"] == "&lt;b&gt;Tags&lt;/b&gt;"


def test_description_filter_from_config(make_field, entity, form_state):
    set_form_config(FieldFormConfig(description_filter=str.upper))
    field, instance = make_field()
    elements = build(field, instance, [], entity, form_state)["und"]

    assert elements["#description"] == "KEYWORDS"


def test_slot_context_properties(make_field, entity, form_state):
    field, instance = make_field()
    slot = build(field, instance, [{"value": "a"}], entity, form_state)["und"][0]

    assert slot["#entity_type"] == "node"
    assert slot["#bundle"] == "article"
    assert slot["#entity"] is entity
    assert slot["#field_name"] == "field_tags"
    assert slot["#language"] == "und"
    assert slot["#field_parents"] == []
    assert slot["#columns"] == ["value"]
    assert slot["#delta"] == 0
    assert slot["#weight"] == 0


def test_container_properties(make_field, entity, form_state):
    field, instance = make_field()
    instance.widget.weight = 4
    container = build(field, instance, [], entity, form_state)

    assert container["#type"] == "container"
    assert container["#attributes"]["class"] == [
        "field-type-text", "field-name-field-tags", "field-widget-text-textfield",
    ]
    assert container["#weight"] == 4
    assert container["#tree"] is True
    assert container["#language"] == "und"
    assert container["#access"] is True
    assert container["und"]["#field_name"] == "field_tags"
    assert container["und"]["#field_parents"] == []


def test_container_access_from_config(make_field, entity, form_state):
    checked = []

    def deny(op, field, checked_entity):
        checked.append((op, field.field_name, checked_entity))
        return False

    set_form_config(FieldFormConfig(field_access=deny))
    field, instance = make_field()
    container = build(field, instance, [], entity, form_state)

    assert container["#access"] is False
    assert checked == [("edit", "field_tags", entity)]


def test_get_delta_builds_single_slot(make_field, entity, form_state):
    field, instance = make_field()
    items = [{"value": "a"}, {"value": "b"}]
    elements = build(field, instance, items, entity, form_state, get_delta=1)["und"]

    assert deltas(elements) == [1]
    assert elements[1]["value"]["#default_value"] == "b"
    assert elements[1]["#title"] == "Tags"
    assert "add_more" not in elements


def test_text_processing_renders_text_format(make_field, entity, form_state):
    field, instance = make_field(instance_settings={"text_processing": True})
    slot = build(field, instance, [{"value": "<p>a</p>", "format": "full_html"}],
                 entity, form_state)["und"][0]

    assert slot["#type"] == "text_format"
    assert slot["#base_type"] == "textfield"
    assert slot["#format"] == "full_html"
    assert slot["#default_value"] == "<p>a</p>"


def test_multiple_values_widget_builds_one_element(entity, form_state, make_field):
    _, instance = make_field(field_name="field_colors", field_type="list_text",
                             widget="options_select")
    field = FieldDefinition(field_name="field_colors", type="list_text", cardinality=-1,
                            settings={"allowed_values": {"red": "Red", "blue": "Blue"}})
    elements = build(field, instance, [{"value": "red"}], entity, form_state)["und"]

    assert deltas(elements) == []
    assert elements["#type"] == "select"
    assert elements["#multiple"] is True
    assert elements["#default_value"] == ["red"]
    assert elements["#title"] == "Tags"
    assert "add_more" not in elements


def test_alter_hooks_run_generic_then_type_specific(make_field, entity, form_state):
    calls = []

    def generic(element, state, context):
        calls.append(("generic", context.delta))

    def specific(element, state, context):
        calls.append(("specific", context.delta))
        element["#altered"] = context.instance.label

    WidgetAlterRegistry.register(WIDGET_FORM_HOOK, generic)
    WidgetAlterRegistry.register(widget_type_hook("text_textfield"), specific)
    try:
        field, instance = make_field(cardinality=2)
        elements = build(field, instance, [], entity, form_state)["und"]
    finally:
        WidgetAlterRegistry.unregister(WIDGET_FORM_HOOK, generic)
        WidgetAlterRegistry.unregister(widget_type_hook("text_textfield"), specific)

    assert calls == [("generic", 0), ("specific", 0), ("generic", 1), ("specific", 1)]
    assert elements[0]["#altered"] == "Tags"


def test_alter_context_flags_default_value_form(make_field, form_state):
    from pyqt_fieldform.forms.field_types import Entity

    seen = []
    hook = widget_type_hook("text_textfield")
    callback = lambda element, state, context: seen.append(context.is_default_value_form)
    WidgetAlterRegistry.register(hook, callback)
    try:
        field, instance = make_field(cardinality=1)
        build(field, instance, [], Entity("node", "article", field_ui_default_value=True), form_state)
    finally:
        WidgetAlterRegistry.unregister(hook, callback)

    assert seen == [True]


def test_unknown_widget_type(make_field):
    field, instance = make_field(widget="no_such_widget")

    with pytest.raises(UnknownWidgetError):
        FieldWidget.from_instance(field, instance)


def test_instance_without_widget(make_field):
    field, instance = make_field()
    instance.widget = None

    with pytest.raises(ValueError):
        FieldWidget.from_instance(field, instance)
