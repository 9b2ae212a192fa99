"""Tests for validation error flagging."""

from pyqt_fieldform.forms.field_types import FieldDefinition
from pyqt_fieldform.forms.field_widget import FieldWidget
from pyqt_fieldform.forms.form_state import FieldError, get_field_state
from pyqt_fieldform.protocols.form_config import FieldFormConfig, set_form_config


def submit(widget, form, form_state, entity, values):
    form_state.values = {widget.field.field_name: {"und": values}}
    items = []
    widget.extract_form_values(entity, "und", items, form, form_state)
    return items


def test_error_lands_on_submitted_slot_after_reorder(make_field, build_cycle, entity, form_state):
    field, instance = make_field()
    widget, form = build_cycle(field, instance, [{"value": "a"}, {"value": "b"}, {"value": "c"}])
    items = submit(widget, form, form_state, entity, {
        0: {"value": "a", "_weight": "3"},
        1: {"value": "b", "_weight": "1"},
        2: {"value": "c", "_weight": "2"},
    })
    assert items[0] == {"value": "b"}

    field_state = get_field_state([], "field_tags", "und", form_state)
    field_state.add_error(0, FieldError("text_max_length", "Value b is too long."))
    widget.flag_errors(entity, "und", items, form, form_state)

    assert form_state.errors == {"field_tags][und][1][value": "Value b is too long."}


def test_errors_are_cleared_after_flagging(make_field, build_cycle, entity, form_state):
    field, instance = make_field()
    widget, form = build_cycle(field, instance, [{"value": "a"}])
    field_state = get_field_state([], "field_tags", "und", form_state)
    field_state.add_error(0, FieldError("invalid", "Invalid."))

    widget.flag_errors(entity, "und", [], form, form_state)

    assert field_state.errors == {}
    assert form_state.errors == {"field_tags][und][0][value": "Invalid."}


def test_delta_without_extraction_maps_to_itself(make_field, build_cycle, entity, form_state):
    field, instance = make_field(cardinality=3)
    widget, form = build_cycle(field, instance, [])
    get_field_state([], "field_tags", "und", form_state).add_error(2, FieldError("invalid", "Third."))

    widget.flag_errors(entity, "und", [], form, form_state)

    assert form_state.errors == {"field_tags][und][2][value": "Third."}


def test_first_error_per_element_wins(make_field, build_cycle, entity, form_state):
    field, instance = make_field()
    widget, form = build_cycle(field, instance, [{"value": "a"}])
    field_state = get_field_state([], "field_tags", "und", form_state)
    field_state.add_error(0, FieldError("first", "First."))
    field_state.add_error(0, FieldError("second", "Second."))

    widget.flag_errors(entity, "und", [], form, form_state)

    assert form_state.errors == {"field_tags][und][0][value": "First."}


def test_multiple_values_widget_reports_on_whole_element(build_cycle, make_field, entity, form_state):
    field = FieldDefinition(field_name="field_colors", type="list_text", cardinality=-1,
                            settings={"allowed_values": {"red": "Red", "blue": "Blue"}})
    _, instance = make_field(field_name="field_colors", widget="options_select")
    widget, form = build_cycle(field, instance, [{"value": "red"}])
    field_state = get_field_state([], "field_colors", "und", form_state)
    field_state.add_error(1, FieldError("list_illegal_value", "Illegal value."))

    widget.flag_errors(entity, "und", [], form, form_state)

    assert form_state.errors == {"field_colors][und": "Illegal value."}


def test_inaccessible_field_keeps_errors(make_field, build_cycle, entity, form_state):
    set_form_config(FieldFormConfig(field_access=lambda op, field, checked: False))
    field, instance = make_field()
    widget, form = build_cycle(field, instance, [{"value": "a"}])
    field_state = get_field_state([], "field_tags", "und", form_state)
    field_state.add_error(0, FieldError("invalid", "Invalid."))

    widget.flag_errors(entity, "und", [], form, form_state)

    assert form_state.errors == {}
    assert 0 in field_state.errors


def test_no_errors_is_a_no_op(make_field, build_cycle, entity, form_state):
    field, instance = make_field()
    widget, form = build_cycle(field, instance, [{"value": "a"}])

    widget.flag_errors(entity, "und", [], form, form_state)

    assert form_state.errors == {}


def test_unfinalized_form_keeps_errors(make_field, entity, form_state):
    field, instance = make_field()
    widget = FieldWidget.from_instance(field, instance)
    form = {"#parents": []}
    form.update(widget.build_form(entity, "und", [], form, form_state))
    field_state = get_field_state([], "field_tags", "und", form_state)
    field_state.add_error(0, FieldError("invalid", "Invalid."))

    widget.flag_errors(entity, "und", [], form, form_state)

    assert form_state.errors == {}
    assert 0 in field_state.errors


def test_missing_slot_reports_on_whole_widget(make_field, build_cycle, entity, form_state):
    field, instance = make_field(cardinality=2)
    widget, form = build_cycle(field, instance, [])
    get_field_state([], "field_tags", "und", form_state).add_error(5, FieldError("invalid", "Gone."))

    widget.flag_errors(entity, "und", [], form, form_state)

    # Widget elements have no "value" child, so the error stays on them
    assert form_state.errors == {"field_tags][und": "Gone."}


def test_number_widget_missing_slot_reports_on_whole_widget(make_field, build_cycle, entity, form_state):
    field = FieldDefinition(field_name="field_count", type="number_integer", cardinality=-1)
    _, instance = make_field(field_name="field_count", widget="number")
    widget, form = build_cycle(field, instance, [{"value": 1}])
    get_field_state([], "field_count", "und", form_state).add_error(3, FieldError("range", "Too big."))

    widget.flag_errors(entity, "und", [], form, form_state)

    assert form_state.errors == {"field_count][und": "Too big."}


def test_number_widget_error_on_value_element(make_field, build_cycle, entity, form_state):
    field = FieldDefinition(field_name="field_count", type="number_integer", cardinality=-1)
    _, instance = make_field(field_name="field_count", widget="number")
    widget, form = build_cycle(field, instance, [{"value": 1}])
    get_field_state([], "field_count", "und", form_state).add_error(0, FieldError("range", "Too big."))

    widget.flag_errors(entity, "und", [], form, form_state)

    assert form_state.errors == {"field_count][und][0][value": "Too big."}
