"""
Render tree helpers.

A render tree is a nested dict. Keys starting with ``#`` are properties of the
element, every other key is a child element (deltas are int keys).
"""

import html
import re
from typing import Any, Dict, List, Sequence, Tuple

RenderElement = Dict[Any, Any]

_HTML_ID_INVALID = re.compile(r"[^A-Za-z0-9\-_:.]")
_HTML_CLASS_INVALID = re.compile(r"[^A-Za-z0-9\-_]")


def is_property(key: Any) -> bool:
    return isinstance(key, str) and key.startswith("#")


def element_children(element: RenderElement) -> List[Any]:
    """Return the child keys of an element, in insertion order."""
    return [key for key in element if not is_property(key)]


def get_nested_value(tree: Any, path: Sequence[Any]) -> Tuple[Any, bool]:
    """
    Look up a value by key path.

    Returns:
        (value, key_exists). value is None when the path does not exist.
    """
    current = tree
    for key in path:
        if isinstance(current, dict) and key in current:
            current = current[key]
        elif isinstance(current, list) and isinstance(key, int) and 0 <= key < len(current):
            current = current[key]
        else:
            return None, False
    return current, True


def set_nested_value(tree: Dict[Any, Any], path: Sequence[Any], value: Any) -> None:
    """Set a value by key path, creating intermediate dicts."""
    if not path:
        raise ValueError("Cannot set a value at an empty path")
    current = tree
    for key in path[:-1]:
        current = current.setdefault(key, {})
    current[path[-1]] = value


def check_plain(text: str) -> str:
    """Escape text for display inside markup."""
    return html.escape(text or "", quote=True)


def html_class(name: str) -> str:
    """Normalize a name into a CSS class."""
    name = name.lower().replace("_", "-").replace(" ", "-")
    return _HTML_CLASS_INVALID.sub("", name)


def html_id_base(name: str) -> str:
    base = name.lower()
    for char in (" ", "_", "[", "]"):
        base = base.replace(char, "-")
    base = _HTML_ID_INVALID.sub("", base)
    return re.sub(r"-+", "-", base)


def unique_html_id(seen_ids: Dict[str, int], name: str) -> str:
    """
    Return an HTML id unique within one request.

    Args:
        seen_ids: Per-request counter storage (FormState.html_ids)
        name: Id candidate
    """
    base = html_id_base(name)
    if base in seen_ids:
        seen_ids[base] += 1
        return f"{base}--{seen_ids[base]}"
    seen_ids[base] = 1
    return base
