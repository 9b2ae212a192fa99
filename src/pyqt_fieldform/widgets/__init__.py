"""
Built-in widget types.

Importing this package registers every widget type in WIDGET_IMPLEMENTATIONS.
"""

from .text_widgets import TextfieldWidget, TextareaWidget
from .number_widget import NumberWidget
from .options_widgets import OptionsSelectWidget, OptionsButtonsWidget

__all__ = [
    "TextfieldWidget",
    "TextareaWidget",
    "NumberWidget",
    "OptionsSelectWidget",
    "OptionsButtonsWidget",
]
