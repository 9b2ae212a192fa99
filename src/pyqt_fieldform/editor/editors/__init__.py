"""Bundled editor implementations."""

from .rich_text import RichTextEditor

__all__ = ["RichTextEditor"]
