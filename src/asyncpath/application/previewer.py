"""
DocumentPreviewer - reads the first kilobyte of a file on a worker thread.

Filesystem conditions (unreadable, empty or binary files) become placeholder
results. Failures of the worker itself are hard errors.
"""

from __future__ import annotations

import asyncio
import re
from typing import Callable, Optional

from asyncpath.domain.exceptions import AsyncPathError, PreviewError, WorkerError
from asyncpath.domain.protocols import FileSystem
from asyncpath.domain.types import PreviewResult
from asyncpath.domain.types.preview import BINARY_FILE, CANNOT_READ, EMPTY_FILE
from asyncpath.infrastructure.filesystem import LocalFileSystem
from asyncpath.infrastructure.worker import run_in_worker
from asyncpath.logger import get_logger

logger = get_logger("previewer")

READ_WINDOW = 1024

# Only CR, LF and CRLF end a line; form feeds and other separators stay in it.
_LINE_BREAK = re.compile(r"\r\n|\r|\n")

PreviewCallback = Callable[[Optional[AsyncPathError], Optional[PreviewResult]], None]


class DocumentPreviewer:
    """Bounded, non-blocking file previews."""

    def __init__(self, filesystem: FileSystem | None = None, read_window: int = READ_WINDOW) -> None:
        self.filesystem: FileSystem = filesystem or LocalFileSystem()
        self.read_window = read_window

    def preview(self, path: str, max_lines: int, callback: PreviewCallback) -> asyncio.Task:
        """Preview ``path`` and deliver ``callback(error, result)`` on the running loop."""

        async def deliver() -> None:
            try:
                result = await self.preview_async(path, max_lines)
            except PreviewError as e:
                callback(e, None)
                return
            callback(None, result)

        return asyncio.get_running_loop().create_task(deliver())

    async def preview_async(self, path: str, max_lines: int) -> PreviewResult:
        """
        Preview ``path`` on a worker thread.

        Raises:
            PreviewError: If the worker failed or returned a malformed result
        """
        try:
            payload = await run_in_worker(self.read, path, max_lines, name=f"asyncpath-preview:{path}")
        except WorkerError as e:
            raise PreviewError(f"Worker error while fetching file doc: {e}") from e
        if not isinstance(payload, PreviewResult):
            raise PreviewError(f"Unexpected problem de-serializing item info: {payload!r}")
        return payload

    def read(self, path: str, max_lines: int) -> PreviewResult:
        """Blocking preview; runs on the worker thread."""
        try:
            window = self.filesystem.read_prefix(path, self.read_window)
        except OSError as e:
            logger.debug(f"Cannot read {path!r}: {e}")
            return PreviewResult.placeholder(CANNOT_READ)

        if not window:
            return PreviewResult.placeholder(EMPTY_FILE)
        if b"\0" in window:
            return PreviewResult.placeholder(BINARY_FILE)

        lines = _LINE_BREAK.split(window.decode("utf-8", errors="replace"))
        if lines[-1] == "":
            lines.pop()
        if 0 <= max_lines < len(lines):
            return PreviewResult.text(lines[:max_lines], truncated=True)
        return PreviewResult.text(lines)
