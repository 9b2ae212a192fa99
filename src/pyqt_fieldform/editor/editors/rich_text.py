"""
Rich-text editor overlaying a plain text field.

The field holds HTML source: its text is loaded as markup on attach and
replaced with the editor HTML on every detach. The editor widget takes the
field's place in its layout while attached; the field stays hidden underneath.
"""

import logging
from typing import Any, Dict, Mapping, Optional

from PyQt6.QtWidgets import QLineEdit, QPlainTextEdit, QTextEdit, QWidget

from pyqt_fieldform.protocols.editor_protocols import DetachTrigger, TextEditor

logger = logging.getLogger(__name__)


def field_text(field: QWidget) -> str:
    if isinstance(field, QLineEdit):
        return field.text()
    if isinstance(field, (QPlainTextEdit, QTextEdit)):
        return field.toPlainText()
    raise TypeError(f"Unsupported text field type: {type(field).__name__}")


def set_field_text(field: QWidget, text: str) -> None:
    if isinstance(field, QLineEdit):
        field.setText(text)
    elif isinstance(field, (QPlainTextEdit, QTextEdit)):
        field.setPlainText(text)
    else:
        raise TypeError(f"Unsupported text field type: {type(field).__name__}")


class RichTextEditor(TextEditor):
    """QTextEdit based editor, one instance per attached field."""

    def __init__(self):
        self._instances: Dict[QWidget, QTextEdit] = {}

    def instance_for(self, field: QWidget) -> Optional[QTextEdit]:
        return self._instances.get(field)

    def attach(self, field: QWidget, format_config: Mapping[str, Any]) -> None:
        if field in self._instances:
            logger.debug(f"Editor already attached to {field.objectName()}")
            return

        content = field_text(field)
        parent = field.parentWidget()
        editor = QTextEdit(parent)
        editor.setObjectName(f"{field.objectName()}-editor")
        editor.setHtml(content)
        if format_config.get("placeholder"):
            editor.setPlaceholderText(format_config["placeholder"])

        was_hidden = field.isHidden()
        layout = parent.layout() if parent is not None else None
        if layout is not None:
            layout.replaceWidget(field, editor)
        field.hide()
        if parent is not None:
            editor.setHidden(was_hidden)

        self._instances[field] = editor
        logger.debug(f"Attached rich-text editor to {field.objectName()}")

    def detach(self, field: QWidget, format_config: Mapping[str, Any],
               trigger: Optional[str] = None) -> None:
        editor = self._instances.get(field)
        if editor is None:
            return

        set_field_text(field, editor.toHtml())
        if trigger == DetachTrigger.SERIALIZE:
            return

        del self._instances[field]
        parent = editor.parentWidget()
        layout = parent.layout() if parent is not None else None
        if layout is not None:
            layout.replaceWidget(editor, field)
        editor.hide()
        field.show()
        editor.deleteLater()
        logger.debug(f"Detached rich-text editor from {field.objectName()}")
