"""asyncpath - resolve the path before the cursor and complete it asynchronously."""

from asyncpath.application import (
    BackgroundScanner,
    CompletionOrchestrator,
    DocumentPreviewer,
    PathResolver,
    ScanRequest,
    format_preview,
)
from asyncpath.core import PathCompletionOptions
from asyncpath.domain.types import (
    CandidateEntry,
    CursorContext,
    Documentation,
    EntryKind,
    FileStat,
    MarkupKind,
    PreviewResult,
)

__version__ = "0.1.0"

__all__ = [
    "BackgroundScanner",
    "CandidateEntry",
    "CompletionOrchestrator",
    "CursorContext",
    "Documentation",
    "DocumentPreviewer",
    "EntryKind",
    "FileStat",
    "MarkupKind",
    "PathCompletionOptions",
    "PathResolver",
    "PreviewResult",
    "ScanRequest",
    "format_preview",
]
