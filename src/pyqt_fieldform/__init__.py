"""
pyqt-fieldform: multi-value field widgets and rich-text editor attachment for PyQt6.

Two loosely related layers:

- Widget form builder: renders field values through pluggable widget types,
  extracts submitted values (drag-and-drop reordering, empty filtering) and
  maps validation errors back onto the rendered slots.
- Editor attachment controller: attaches the rich-text editor registered for
  the active text format to a text field, switches editors when the format
  selector changes and serializes editor content on form submit.

Architecture:
- Tier 1 (Core): logging and sorting helpers
- Tier 2 (Protocols): capability ABCs, configuration, PyQt6 adapters
- Tier 3 (Forms/Services): field model, form state, build/extract/flag
- Tier 4 (Editor): editor registry, dispatch, behaviors, attachment controller
"""

__version__ = "0.1.0"

__all__ = [
    "__version__",
]
