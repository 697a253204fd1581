"""
BackgroundScanner - lists a directory on a worker thread.

The worker only receives the directory, the hidden flag and the two
trailing-slash flags, and returns a fresh list of candidates. Results keep
the filesystem's iteration order; ranking belongs to the host.
"""

from __future__ import annotations

import asyncio
import errno
import os
from typing import Callable, Optional

from asyncpath.core.config import PathCompletionOptions
from asyncpath.domain.exceptions import AsyncPathError, PayloadError, ScanError
from asyncpath.domain.protocols import DirectoryEntry, FileSystem
from asyncpath.domain.types import CandidateEntry, EntryKind, FileStat
from asyncpath.infrastructure.filesystem import LocalFileSystem
from asyncpath.infrastructure.worker import run_in_worker
from asyncpath.logger import get_logger

logger = get_logger("scanner")

ScanCallback = Callable[[Optional[AsyncPathError], Optional[list[CandidateEntry]]], None]


class BackgroundScanner:
    """Produces completion candidates for a directory without blocking the loop."""

    def __init__(self, filesystem: FileSystem | None = None) -> None:
        self.filesystem: FileSystem = filesystem or LocalFileSystem()

    def scan(
        self,
        dirname: str,
        include_hidden: bool,
        options: PathCompletionOptions,
        callback: ScanCallback,
    ) -> asyncio.Task:
        """
        Scan ``dirname`` and deliver ``callback(error, entries)`` exactly once.

        Must be called from a running event loop; the callback runs on it.

        Returns:
            The task delivering the result
        """

        async def deliver() -> None:
            try:
                entries = await self.scan_async(dirname, include_hidden, options)
            except AsyncPathError as e:
                callback(e, None)
                return
            callback(None, entries)

        return asyncio.get_running_loop().create_task(deliver())

    async def scan_async(
        self,
        dirname: str,
        include_hidden: bool,
        options: PathCompletionOptions,
    ) -> list[CandidateEntry]:
        """
        Scan ``dirname`` on a worker thread.

        Raises:
            ScanError: If the directory cannot be opened or iterated
            WorkerError: If the worker itself failed
            PayloadError: If the worker returned something other than candidates
        """
        logger.debug(f"Scanning {dirname!r} (include_hidden={include_hidden})")
        payload = await run_in_worker(
            self.collect,
            dirname,
            include_hidden,
            options.label_trailing_slash,
            options.trailing_slash,
            name=f"asyncpath-scan:{dirname}",
        )
        if not isinstance(payload, list) or not all(isinstance(item, CandidateEntry) for item in payload):
            raise PayloadError(f"Problem de-serializing file entries for {dirname}")
        logger.debug(f"Scan of {dirname!r} returned {len(payload)} candidates")
        return payload

    def collect(
        self,
        dirname: str,
        include_hidden: bool,
        label_trailing_slash: bool,
        trailing_slash: bool,
    ) -> list[CandidateEntry]:
        """Blocking scan; runs on the worker thread."""
        items: list[CandidateEntry] = []
        try:
            for entry in self.filesystem.scandir(dirname):
                if not include_hidden and entry.name.startswith("."):
                    continue
                item = self._create_item(dirname, entry, label_trailing_slash, trailing_slash)
                if item is not None:
                    items.append(item)
        except OSError as e:
            raise ScanError(dirname, e) from e
        return items

    def _create_item(
        self,
        dirname: str,
        entry: DirectoryEntry,
        label_trailing_slash: bool,
        trailing_slash: bool,
    ) -> CandidateEntry | None:
        path = os.path.join(dirname, entry.name)
        stat, lstat = self._stat_entry(path, entry)
        if stat is None and lstat is None:
            return None

        fs_type = stat.type if stat is not None else entry.type
        name = entry.name
        if fs_type == "directory":
            return CandidateEntry(
                name=name,
                kind=EntryKind.DIRECTORY,
                label=name + "/" if label_trailing_slash else name,
                insert_text=name + "/",
                filter_text=name,
                word=name + "/" if trailing_slash else name,
                path=path,
                type=fs_type,
                stat=stat,
                lstat=lstat,
            )
        return CandidateEntry(
            name=name,
            kind=EntryKind.FILE,
            label=name,
            insert_text=name,
            filter_text=name,
            word=name,
            path=path,
            type=fs_type,
            stat=stat,
            lstat=lstat,
        )

    def _stat_entry(self, path: str, entry: DirectoryEntry) -> tuple[FileStat | None, FileStat | None]:
        """Stat an entry, falling back to the link itself for unstatable symlink targets.

        Returns ``(None, None)`` when the entry must be omitted.
        """
        try:
            return self.filesystem.stat(path), None
        except FileNotFoundError:
            # Dangling link, or the entry vanished since the listing
            return None, None
        except OSError as e:
            if entry.type != "link" or e.errno == errno.ELOOP:
                logger.debug(f"Skipping {path!r}: {e}")
                return None, None
        try:
            return None, self.filesystem.lstat(path)
        except OSError:
            return None, None

