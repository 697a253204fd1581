"""Shared domain types."""

from asyncpath.domain.types.context import CursorContext
from asyncpath.domain.types.entries import CandidateEntry, EntryKind, FileStat
from asyncpath.domain.types.preview import Documentation, MarkupKind, PreviewResult

__all__ = [
    "CursorContext",
    "CandidateEntry",
    "EntryKind",
    "FileStat",
    "Documentation",
    "MarkupKind",
    "PreviewResult",
]
