"""
Orchestrator that owns the lifecycle of completion and documentation requests.
"""

from __future__ import annotations

import asyncio
import dataclasses
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Callable, Mapping, Optional, Union

from asyncpath.application.formatting import format_preview
from asyncpath.application.previewer import DocumentPreviewer
from asyncpath.application.resolver import PathResolver
from asyncpath.application.scanner import BackgroundScanner
from asyncpath.core.config import PathCompletionOptions
from asyncpath.domain.exceptions import AsyncPathError, ScanError
from asyncpath.domain.types import CandidateEntry, CursorContext, Documentation
from asyncpath.logger import get_logger

if TYPE_CHECKING:
    from loguru import Logger

OptionsInput = Optional[Union[PathCompletionOptions, Mapping[str, Any]]]


@dataclass(frozen=True, slots=True)
class ScanRequest:
    """The synchronous half of a completion request."""

    dirname: str
    include_hidden: bool
    options: PathCompletionOptions


class CompletionOrchestrator:
    """Resolves, scans and previews on behalf of a host completion engine."""

    def __init__(
        self,
        resolver: PathResolver | None = None,
        scanner: BackgroundScanner | None = None,
        previewer: DocumentPreviewer | None = None,
        diagnostics: Logger | None = None,
    ) -> None:
        self.resolver = resolver or PathResolver()
        self.scanner = scanner or BackgroundScanner()
        self.previewer = previewer or DocumentPreviewer()
        self._log = diagnostics if diagnostics is not None else get_logger("orchestrator")

    def prepare(self, context: CursorContext, options: OptionsInput = None) -> ScanRequest | None:
        """
        Validate options, resolve the directory and decide hidden-file visibility.

        Returns:
            The scan to run, or None when no directory can be resolved

        Raises:
            ValidationError: If the options are invalid
        """
        merged = PathCompletionOptions.merge(options)
        self._log.debug(
            f"complete called with input {context.line_before_cursor!r}, offset {context.offset}"
        )
        dirname = self.resolver.resolve(context, merged)
        self._log.debug(f"resolver returned {dirname!r}")
        if dirname is None:
            return None
        return ScanRequest(dirname=dirname, include_hidden=include_hidden(context, merged), options=merged)

    def complete(
        self,
        context: CursorContext,
        callback: Callable[[list[CandidateEntry]], None],
        options: OptionsInput = None,
    ) -> asyncio.Task | None:
        """
        Deliver candidates for ``context`` to ``callback`` on the running loop.

        Unresolved input delivers an empty list immediately and returns None.
        """
        request = self.prepare(context, options)
        if request is None:
            callback([])
            return None

        async def deliver() -> None:
            callback(await self.scan(request))

        return asyncio.get_running_loop().create_task(deliver())

    async def complete_async(self, context: CursorContext, options: OptionsInput = None) -> list[CandidateEntry]:
        request = self.prepare(context, options)
        if request is None:
            return []
        return await self.scan(request)

    async def scan(self, request: ScanRequest) -> list[CandidateEntry]:
        """Run a prepared scan; scanner errors become an empty result."""
        try:
            entries = await self.scanner.scan_async(request.dirname, request.include_hidden, request.options)
        except ScanError as e:
            self._log.debug(f"scanner returned error: {e}")
            return []
        except AsyncPathError as e:
            self._log.error(f"scan of {request.dirname!r} failed: {e}")
            return []
        self._log.debug(f"scanner returned {len(entries)} candidates")
        return entries

    async def document(self, data: Mapping[str, Any], options: OptionsInput = None) -> Documentation | None:
        """
        Build documentation for a candidate's ``data`` bag.

        Only regular files are previewed; anything else yields None.

        Raises:
            PreviewError: If the preview worker failed
        """
        if _stat_type(data.get("stat")) != "file":
            return None
        merged = PathCompletionOptions.merge(options)
        path = data["path"]
        result = await self.previewer.preview_async(path, merged.max_lines)
        return format_preview(result, path)

    async def resolve_async(self, entry: CandidateEntry, options: OptionsInput = None) -> CandidateEntry:
        """Return ``entry`` with documentation attached, or unchanged when it is not a file."""
        documentation = await self.document(entry.data, options)
        if documentation is None:
            return entry
        return dataclasses.replace(entry, documentation=documentation)

    def resolve(
        self,
        entry: CandidateEntry,
        callback: Callable[[CandidateEntry], None],
        options: OptionsInput = None,
    ) -> asyncio.Task | None:
        """Callback flavour of :meth:`resolve_async`; non-files are returned right away."""
        if _stat_type(entry.stat) != "file":
            callback(entry)
            return None

        async def deliver() -> None:
            callback(await self.resolve_async(entry, options))

        return asyncio.get_running_loop().create_task(deliver())


def include_hidden(context: CursorContext, options: PathCompletionOptions) -> bool:
    """Dot-files are shown by default, or when a '.' sits at or just before the word start."""
    return (
        options.show_hidden_files_by_default
        or context.char_at(context.offset) == "."
        or context.char_at(context.offset - 1) == "."
    )


def _stat_type(stat: Any) -> str | None:
    if stat is None:
        return None
    if isinstance(stat, Mapping):
        return stat.get("type")
    return getattr(stat, "type", None)
