"""Editor implementation registry.

Process-wide mapping of editor name to implementation. Applications register
their editors once at startup; the attachment controller only reads it.

Example:
    from pyqt_fieldform.editor import register_editor
    from pyqt_fieldform.editor.editors import RichTextEditor

    register_editor("rich_text", RichTextEditor())
"""

import logging
from typing import Dict, Optional

from pyqt_fieldform.protocols.editor_protocols import TextEditor

logger = logging.getLogger(__name__)

# Maps editor name -> implementation
EDITOR_IMPLEMENTATIONS: Dict[str, TextEditor] = {}


def register_editor(name: str, editor: TextEditor) -> None:
    """Register an editor implementation.

    Args:
        name: Name referenced by the ``editor`` key of format settings
        editor: Object implementing the TextEditor ABC

    Raises:
        TypeError: If editor doesn't implement TextEditor ABC
    """
    if not isinstance(editor, TextEditor):
        raise TypeError(
            f"Editor {type(editor).__name__} does not implement TextEditor ABC. "
            f"Add TextEditor to its base classes and implement attach()/detach()."
        )
    if name in EDITOR_IMPLEMENTATIONS:
        logger.warning(
            f"Editor '{name}' already registered to {type(EDITOR_IMPLEMENTATIONS[name]).__name__}. "
            f"Overwriting with {type(editor).__name__}."
        )
    EDITOR_IMPLEMENTATIONS[name] = editor
    logger.debug(f"Registered editor '{name}' ({type(editor).__name__})")


def get_editor(name: str) -> Optional[TextEditor]:
    """Get the editor registered under name.

    Returns:
        The editor, or None if not registered
    """
    return EDITOR_IMPLEMENTATIONS.get(name)
