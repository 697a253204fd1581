"""Application layer - resolution, scanning, previewing and their orchestration."""

from asyncpath.application.formatting import format_preview
from asyncpath.application.orchestrator import CompletionOrchestrator, ScanRequest
from asyncpath.application.previewer import DocumentPreviewer
from asyncpath.application.resolver import PathResolver
from asyncpath.application.scanner import BackgroundScanner

__all__ = [
    "BackgroundScanner",
    "CompletionOrchestrator",
    "DocumentPreviewer",
    "PathResolver",
    "ScanRequest",
    "format_preview",
]
