"""
Field widget forms.

Field model, per-cycle form state, the widget type registry and FieldWidget,
which builds, extracts and flags errors for one field instance.
"""

from __future__ import annotations

import importlib
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .field_widget import FieldWidget
    from .field_types import (
        CARDINALITY_UNLIMITED,
        Entity,
        FieldDefinition,
        FieldInstance,
        WidgetSettings,
        register_field_type,
    )
    from .form_state import FieldError, FieldRenderState, FormState, finalize_form
    from .widget_registry import (
        WidgetMeta,
        WIDGET_IMPLEMENTATIONS,
        WIDGET_CAPABILITIES,
        get_widget_class,
        get_widget_capabilities,
    )
    from .alter_hooks import WidgetAlterContext, register_widget_alter

_EXPORTS = {
    "FieldWidget": ("pyqt_fieldform.forms.field_widget", "FieldWidget"),
    "CARDINALITY_UNLIMITED": ("pyqt_fieldform.forms.field_types", "CARDINALITY_UNLIMITED"),
    "Entity": ("pyqt_fieldform.forms.field_types", "Entity"),
    "FieldDefinition": ("pyqt_fieldform.forms.field_types", "FieldDefinition"),
    "FieldInstance": ("pyqt_fieldform.forms.field_types", "FieldInstance"),
    "WidgetSettings": ("pyqt_fieldform.forms.field_types", "WidgetSettings"),
    "register_field_type": ("pyqt_fieldform.forms.field_types", "register_field_type"),
    "FieldError": ("pyqt_fieldform.forms.form_state", "FieldError"),
    "FieldRenderState": ("pyqt_fieldform.forms.form_state", "FieldRenderState"),
    "FormState": ("pyqt_fieldform.forms.form_state", "FormState"),
    "finalize_form": ("pyqt_fieldform.forms.form_state", "finalize_form"),
    "get_field_state": ("pyqt_fieldform.forms.form_state", "get_field_state"),
    "WidgetMeta": ("pyqt_fieldform.forms.widget_registry", "WidgetMeta"),
    "WIDGET_IMPLEMENTATIONS": ("pyqt_fieldform.forms.widget_registry", "WIDGET_IMPLEMENTATIONS"),
    "WIDGET_CAPABILITIES": ("pyqt_fieldform.forms.widget_registry", "WIDGET_CAPABILITIES"),
    "get_widget_class": ("pyqt_fieldform.forms.widget_registry", "get_widget_class"),
    "get_widget_capabilities": ("pyqt_fieldform.forms.widget_registry", "get_widget_capabilities"),
    "WidgetDispatcher": ("pyqt_fieldform.forms.widget_dispatcher", "WidgetDispatcher"),
    "WidgetAlterContext": ("pyqt_fieldform.forms.alter_hooks", "WidgetAlterContext"),
    "register_widget_alter": ("pyqt_fieldform.forms.alter_hooks", "register_widget_alter"),
}


def __getattr__(name: str):
    if name in _EXPORTS:
        module_name, attr = _EXPORTS[name]
        module = importlib.import_module(module_name)
        value = getattr(module, attr)
        globals()[name] = value
        return value
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = list(_EXPORTS.keys())
