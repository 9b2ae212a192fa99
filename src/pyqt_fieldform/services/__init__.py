"""
Service layer for field widgets.

Stateless algorithms shared by every widget type: submitted value
extraction, error flagging and the "add another item" callbacks.
"""

from .value_extraction_service import ValueExtractionService
from .error_flagging_service import ErrorFlaggingService
from .add_more_service import AddMoreService

__all__ = [
    "ValueExtractionService",
    "ErrorFlaggingService",
    "AddMoreService",
]
