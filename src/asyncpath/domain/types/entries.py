"""Candidate entries produced by a directory scan."""

from __future__ import annotations

import stat as stat_module
from dataclasses import dataclass
from enum import Enum
from typing import Any

from asyncpath.domain.types.preview import Documentation

__all__ = ["EntryKind", "FileStat", "CandidateEntry"]


class EntryKind(Enum):
    """Completion item kind reported to the host."""

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class FileStat:
    """The parts of ``os.stat_result`` the completion layer cares about."""

    type: str
    size: int
    mtime: float
    mode: int

    @classmethod
    def from_stat_result(cls, result) -> "FileStat":
        return cls(
            type=file_type(result.st_mode),
            size=result.st_size,
            mtime=result.st_mtime,
            mode=result.st_mode,
        )


def file_type(mode: int) -> str:
    """Name a stat mode the way libuv does."""
    if stat_module.S_ISDIR(mode):
        return "directory"
    if stat_module.S_ISREG(mode):
        return "file"
    if stat_module.S_ISLNK(mode):
        return "link"
    if stat_module.S_ISFIFO(mode):
        return "fifo"
    if stat_module.S_ISSOCK(mode):
        return "socket"
    if stat_module.S_ISCHR(mode):
        return "char"
    if stat_module.S_ISBLK(mode):
        return "block"
    return "unknown"


@dataclass(frozen=True, slots=True)
class CandidateEntry:
    """One completable filesystem entry."""

    name: str
    kind: EntryKind
    label: str
    insert_text: str
    filter_text: str
    word: str
    path: str
    type: str
    stat: FileStat | None = None
    lstat: FileStat | None = None
    documentation: Documentation | None = None

    @property
    def is_directory(self) -> bool:
        return self.kind is EntryKind.DIRECTORY

    @property
    def data(self) -> dict[str, Any]:
        """Opaque bag carried to the documentation request."""
        return {"path": self.path, "type": self.type, "stat": self.stat}
