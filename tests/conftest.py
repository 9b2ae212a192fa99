"""pytest configuration and fixtures for pyqt-fieldform tests."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PyQt6.QtWidgets import QApplication

from pyqt_fieldform.forms.field_types import (
    CARDINALITY_UNLIMITED, Entity, FieldDefinition, FieldInstance, WidgetSettings,
)
from pyqt_fieldform.forms.form_state import FormState
from pyqt_fieldform.protocols.form_config import set_form_config


@pytest.fixture(scope="session")
def qapp():
    """Create QApplication instance for tests."""
    app = QApplication.instance() or QApplication([])
    yield app
    # Don't quit - may cause issues with other tests


@pytest.fixture(autouse=True)
def reset_form_config():
    set_form_config(None)
    yield
    set_form_config(None)


@pytest.fixture
def entity():
    return Entity(entity_type="node", bundle="article")


@pytest.fixture
def form_state():
    return FormState()


def make_text_field(cardinality=CARDINALITY_UNLIMITED, required=False, widget="text_textfield",
                    field_name="field_tags", field_type="text", instance_settings=None):
    """Field definition and instance pair for tests."""
    field = FieldDefinition(field_name=field_name, type=field_type, cardinality=cardinality)
    instance = FieldInstance(
        field_name=field_name,
        entity_type="node",
        bundle="article",
        label="Tags",
        description="Keywords",
        required=required,
        settings=dict(instance_settings or {}),
        widget=WidgetSettings(type=widget),
    )
    return field, instance


@pytest.fixture
def make_field():
    return make_text_field


@pytest.fixture
def build_cycle(entity, form_state):
    """Build a field widget into a form and finalize it."""
    from pyqt_fieldform.forms.field_widget import FieldWidget
    from pyqt_fieldform.forms.form_state import finalize_form

    def build(field, instance, items, langcode="und"):
        widget = FieldWidget.from_instance(field, instance)
        form = {"#parents": []}
        form.update(widget.build_form(entity, langcode, items, form, form_state))
        form = finalize_form(form, form_state)
        return widget, form

    return build
