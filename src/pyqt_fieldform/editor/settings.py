"""Editor page settings."""

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

# Key of the editor settings within the page settings
SETTINGS_KEY = "editor"


@dataclass
class EditorSettings:
    """
    Format settings read from ``settings["editor"]``.

    Attributes:
        formats: format id -> ``{"editor": name, **editor options}``
    """
    formats: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    @classmethod
    def from_settings(cls, settings: Optional[Mapping[str, Any]]) -> Optional['EditorSettings']:
        """Parse page settings; None when they carry no editor settings."""
        if not settings:
            return None
        editor_settings = settings.get(SETTINGS_KEY)
        if isinstance(editor_settings, EditorSettings):
            return editor_settings
        if not editor_settings:
            return None
        return cls(formats=dict(editor_settings.get("formats", {})))

    def format_config(self, format_id: Optional[str]) -> Optional[Dict[str, Any]]:
        if format_id is None:
            return None
        return self.formats.get(format_id)
