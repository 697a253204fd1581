"""Local filesystem implementation of the FileSystem protocol."""

import os
from typing import Iterator

from asyncpath.domain.protocols import DirectoryEntry
from asyncpath.domain.types import FileStat


class LocalFileSystem:
    """Blocking access to the local filesystem through ``os``."""

    def scandir(self, path: str) -> Iterator[DirectoryEntry]:
        with os.scandir(path) as entries:
            for entry in entries:
                yield DirectoryEntry(entry.name, _entry_type(entry))

    def stat(self, path: str) -> FileStat:
        return FileStat.from_stat_result(os.stat(path))

    def lstat(self, path: str) -> FileStat:
        return FileStat.from_stat_result(os.lstat(path))

    def read_prefix(self, path: str, size: int) -> bytes:
        with open(path, "rb") as handle:
            return handle.read(size)


def _entry_type(entry: os.DirEntry) -> str:
    if entry.is_symlink():
        return "link"
    if entry.is_dir(follow_symlinks=False):
        return "directory"
    if entry.is_file(follow_symlinks=False):
        return "file"
    return "unknown"
