"""
Capability contracts, configuration and PyQt6 adapters.

ABC-based contracts that eliminate duck typing in favor of explicit,
fail-loud inheritance-based architecture.
"""

from .widget_protocols import (
    SlotElementBuilder,
    SettingsFormProvider,
    ErrorElementLocator,
    FormValueMassager,
)
from .editor_protocols import (
    DetachTrigger,
    TextEditor,
    FormatSelector,
    ChangeSignalEmitter,
)
from .widget_adapters import (
    FormatSelectAdapter,
    FormatDisplayAdapter,
    PyQtWidgetMeta,
)
from .form_config import FieldFormConfig, set_form_config, get_form_config

__all__ = [
    "SlotElementBuilder",
    "SettingsFormProvider",
    "ErrorElementLocator",
    "FormValueMassager",
    "DetachTrigger",
    "TextEditor",
    "FormatSelector",
    "ChangeSignalEmitter",
    "FormatSelectAdapter",
    "FormatDisplayAdapter",
    "PyQtWidgetMeta",
    "FieldFormConfig",
    "set_form_config",
    "get_form_config",
]
