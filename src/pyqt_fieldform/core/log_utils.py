"""
Logging setup for pyqt-fieldform.

Modules log through ``logging.getLogger(__name__)``; applications call
setup_logging() once to route the package logger to stderr or a log file.
"""

import logging
from pathlib import Path
from typing import Optional

from pyqt_fieldform.protocols.form_config import FieldFormConfig, get_form_config

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Marks handlers installed by setup_logging()
_HANDLER_MARKER = "_pyqt_fieldform_handler"


def get_log_file_path(config: Optional[FieldFormConfig] = None) -> Optional[Path]:
    """Log file configured for the package; None when logging to stderr."""
    config = config or get_form_config()
    if not config.log_dir:
        return None
    return Path(config.log_dir) / config.log_filename


def setup_logging(config: Optional[FieldFormConfig] = None) -> logging.Logger:
    """
    Configure the package logger.

    Replaces any handler installed by a previous call, so calling it again
    with a new config switches destination and level.

    Returns:
        The configured logger
    """
    config = config or get_form_config()
    package_logger = logging.getLogger(config.logger_name)
    package_logger.setLevel(config.log_level)

    for handler in list(package_logger.handlers):
        if getattr(handler, _HANDLER_MARKER, False):
            package_logger.removeHandler(handler)
            handler.close()

    log_path = get_log_file_path(config)
    if log_path is not None:
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handler: logging.Handler = logging.FileHandler(log_path, encoding="utf-8")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    setattr(handler, _HANDLER_MARKER, True)
    package_logger.addHandler(handler)

    logger.debug(f"Logging configured: level={logging.getLevelName(config.log_level)} "
                 f"destination={log_path or 'stderr'}")
    return package_logger
