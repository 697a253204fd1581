"""
Helpers that connect the completion core to textual-autocomplete.
"""

from .applier import ApplyResult, CompletionApplier, compute_search_string, context_from_state
from .items import FILE_PREFIX, FOLDER_PREFIX, to_dropdown_item

__all__ = [
    "ApplyResult",
    "CompletionApplier",
    "compute_search_string",
    "context_from_state",
    "FILE_PREFIX",
    "FOLDER_PREFIX",
    "to_dropdown_item",
]
