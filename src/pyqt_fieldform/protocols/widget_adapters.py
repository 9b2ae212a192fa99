"""
Format selector adapters that wrap Qt widgets to implement the editor ABCs.

Normalizes Qt's inconsistent APIs:
- QComboBox.currentData() vs a fixed format stored on a QLabel
- QComboBox.currentIndexChanged vs no change signal at all

A ``FormatSelectAdapter`` is the selection control (the user can switch
formats). A ``FormatDisplayAdapter`` shows the only format available to the
user and never changes, so it has no change signal.
"""

from abc import ABCMeta
from typing import Any, Callable, Dict, Iterable, Optional, Tuple

from PyQt6.QtWidgets import QComboBox, QLabel
from PyQt6.QtCore import QObject

from .editor_protocols import ChangeSignalEmitter, FormatSelector


# PyQt-specific metaclass that combines ABCMeta with Qt's metaclass
_QtMetaclass = type(QObject)


class PyQtWidgetMeta(_QtMetaclass, ABCMeta):
    """Metaclass for PyQt widgets that need ABC support."""
    pass


class FormatSelectAdapter(QComboBox, FormatSelector, ChangeSignalEmitter,
                          metaclass=PyQtWidgetMeta):
    """
    Text format select list bound to a text field.

    Stores format ids in itemData and format labels as display text.
    """

    def __init__(self, editor_for: Optional[str] = None, parent=None):
        super().__init__(parent)
        self._editor_for = editor_for
        self._change_slots: Dict[Callable[[Any], None], Callable[[int], None]] = {}
        self.editor_state = None

    def set_formats(self, formats: Iterable[Tuple[str, str]]) -> None:
        """
        Populate the list.

        Args:
            formats: (format_id, label) pairs in display order
        """
        self.clear()
        for format_id, label in formats:
            self.addItem(label, format_id)

    def set_format_id(self, format_id: Optional[str]) -> None:
        """Select the item holding format_id; clears the selection if absent."""
        for i in range(self.count()):
            if self.itemData(i) == format_id:
                self.setCurrentIndex(i)
                return
        self.setCurrentIndex(-1)

    def get_format_id(self) -> Optional[str]:
        """Implement FormatSelector ABC."""
        if self.currentIndex() < 0:
            return None
        return self.itemData(self.currentIndex())

    def editor_for(self) -> Optional[str]:
        """Implement FormatSelector ABC."""
        return self._editor_for

    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        if callback in self._change_slots:
            return
        slot = lambda _index: callback(self.get_format_id())
        self._change_slots[callback] = slot
        self.currentIndexChanged.connect(slot)

    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """Implement ChangeSignalEmitter ABC."""
        slot = self._change_slots.pop(callback, None)
        if slot is None:
            return
        try:
            self.currentIndexChanged.disconnect(slot)
        except TypeError:
            # Signal not connected - ignore
            pass


class FormatDisplayAdapter(QLabel, FormatSelector, metaclass=PyQtWidgetMeta):
    """
    Read-only format indicator bound to a text field.

    Used when a single format is available, so the format never changes.
    """

    def __init__(self, format_id: Optional[str] = None, editor_for: Optional[str] = None,
                 label: str = "", parent=None):
        super().__init__(label, parent)
        self._format_id = format_id
        self._editor_for = editor_for
        self.editor_state = None

    def get_format_id(self) -> Optional[str]:
        """Implement FormatSelector ABC."""
        return self._format_id

    def editor_for(self) -> Optional[str]:
        """Implement FormatSelector ABC."""
        return self._editor_for
