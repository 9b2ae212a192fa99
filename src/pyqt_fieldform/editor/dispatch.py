"""Attach/detach dispatch to the editor named by a format's settings."""

import logging
from typing import Any, Mapping, Optional

from .registry import get_editor

logger = logging.getLogger(__name__)


def _editor_for_format(format_config: Optional[Mapping[str, Any]]):
    if not format_config or not format_config.get("editor"):
        return None
    name = format_config["editor"]
    editor = get_editor(name)
    if editor is None:
        logger.warning(f"No editor registered as '{name}', ignoring")
    return editor


def editor_attach(field: Any, format_config: Optional[Mapping[str, Any]]) -> None:
    """Attach the format's editor to field; no-op when the format has none."""
    editor = _editor_for_format(format_config)
    if editor is not None:
        editor.attach(field, format_config)


def editor_detach(field: Any, format_config: Optional[Mapping[str, Any]],
                  trigger: Optional[str] = None) -> None:
    """Detach the format's editor from field; no-op when the format has none."""
    editor = _editor_for_format(format_config)
    if editor is not None:
        editor.detach(field, format_config, trigger)
