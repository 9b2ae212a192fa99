"""Submittable form container."""

from dataclasses import dataclass
from typing import Optional

from PyQt6.QtWidgets import QWidget
from PyQt6.QtCore import pyqtSignal


@dataclass
class SubmitEvent:
    """Passed to submit handlers; any handler may cancel the submit."""
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class EditorForm(QWidget):
    """
    Form widget that notifies its controls before submitting.

    Handlers connected to ``submitted`` run in connection order; ``accepted``
    is emitted afterwards unless one of them cancelled the submit.
    """

    submitted = pyqtSignal(object)  # SubmitEvent
    accepted = pyqtSignal()

    def submit(self) -> bool:
        """Submit the form; returns False if a handler cancelled it."""
        event = SubmitEvent()
        self.submitted.emit(event)
        if event.default_prevented:
            return False
        self.accepted.emit()
        return True


def enclosing_form(widget: QWidget) -> Optional[EditorForm]:
    """Closest EditorForm ancestor of widget."""
    parent = widget.parentWidget()
    while parent is not None:
        if isinstance(parent, EditorForm):
            return parent
        parent = parent.parentWidget()
    return None
