"""
Core utilities.

Domain-free helpers shared by the form and editor layers.
"""

from .log_utils import get_log_file_path, setup_logging
from .sort_utils import WEIGHT_KEY, item_weight, weight_sort

__all__ = [
    "WEIGHT_KEY",
    "get_log_file_path",
    "item_weight",
    "setup_logging",
    "weight_sort",
]
