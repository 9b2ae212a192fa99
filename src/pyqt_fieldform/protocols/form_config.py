"""Base configuration class for field forms.

Provides hooks for applications to customize widget building and editor
attachment.
"""

import logging
from typing import Any, Callable, Optional
from dataclasses import dataclass


# (operation, field, entity) -> allowed
FieldAccessCallback = Callable[[str, Any, Any], bool]


@dataclass
class FieldFormConfig:
    """Base configuration for field form behavior.

    Applications can subclass this to provide custom configuration.

    Attributes:
        add_more_label: Label of the "add another item" button
        weight_title_template: Title of the per-row weight control, formatted
            with ``number`` (1-based row number)
        field_access: Access check for the field container; None allows all
        description_filter: Sanitization/token replacement applied to
            instance descriptions; None leaves them untouched
        log_level: Level set on the package logger by setup_logging()
        log_dir: Directory for the log file; None logs to stderr
        logger_name: Logger configured by setup_logging()
    """

    add_more_label: str = "Add another item"
    weight_title_template: str = "Weight for row {number}"
    field_access: Optional[FieldAccessCallback] = None
    description_filter: Optional[Callable[[str], str]] = None
    log_level: int = logging.WARNING
    log_dir: Optional[str] = None
    logger_name: str = "pyqt_fieldform"
    log_filename: str = "pyqt_fieldform.log"


# Global config instance (set by application)
_form_config: Optional[FieldFormConfig] = None


def set_form_config(config: Optional[FieldFormConfig]) -> None:
    """Set the global field form configuration.

    Args:
        config: FieldFormConfig instance, or None to restore defaults
    """
    global _form_config
    _form_config = config


def get_form_config() -> FieldFormConfig:
    """Get the current field form configuration.

    Returns:
        Current FieldFormConfig or default if not set
    """
    if _form_config is None:
        return FieldFormConfig()
    return _form_config
