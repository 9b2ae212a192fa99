"""
Editor attachment ABC contracts.

Contracts between the editor attachment controller, the controls it scans
and the editor implementations it dispatches to.
"""

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any, Callable, Mapping, Optional


class DetachTrigger(str, Enum):
    """
    Detach modes other than teardown.

    Teardown is expressed by passing ``None`` as the trigger.
    """
    SERIALIZE = "serialize"


class TextEditor(ABC):
    """
    ABC for rich-text editor implementations registered by name.

    Example:
        class MyEditor(TextEditor):
            def attach(self, field, format_config):
                ...

            def detach(self, field, format_config, trigger=None):
                ...

        register_editor("my_editor", MyEditor())
    """

    @abstractmethod
    def attach(self, field: Any, format_config: Mapping[str, Any]) -> None:
        """
        Enable the editor on a text field.

        Args:
            field: The text field widget
            format_config: Settings of the active format, including ``editor``
        """
        pass

    @abstractmethod
    def detach(
        self,
        field: Any,
        format_config: Mapping[str, Any],
        trigger: Optional[str] = None,
    ) -> None:
        """
        Disable the editor on a text field.

        Args:
            field: The text field widget
            format_config: Settings of the format the editor was attached for
            trigger: None to destroy the editor instance,
                ``DetachTrigger.SERIALIZE`` to only write the editor content
                back into the field
        """
        pass


class FormatSelector(ABC):
    """
    ABC for controls that pick the text format of a text field.

    The controller keeps its per-control activation state in ``editor_state``.
    """

    editor_state: Any = None

    @abstractmethod
    def get_format_id(self) -> Optional[str]:
        """Return the currently selected format id."""
        pass

    @abstractmethod
    def editor_for(self) -> Optional[str]:
        """Return the object name of the associated text field."""
        pass


class ChangeSignalEmitter(ABC):
    """
    ABC for controls that emit change signals.

    Provides explicit contract for signal connection, eliminating duck typing
    of signal names (textChanged vs valueChanged vs currentIndexChanged).
    """

    @abstractmethod
    def connect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Connect callback to the control's change signal.

        Args:
            callback: Function receiving the new value.
        """
        pass

    @abstractmethod
    def disconnect_change_signal(self, callback: Callable[[Any], None]) -> None:
        """
        Disconnect a callback previously passed to connect_change_signal().
        """
        pass
