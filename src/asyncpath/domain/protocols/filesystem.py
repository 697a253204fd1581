"""Filesystem protocol."""

from typing import Iterator, NamedTuple, Protocol

from asyncpath.domain.types import FileStat

__all__ = ["DirectoryEntry", "FileSystem"]


class DirectoryEntry(NamedTuple):
    """A raw directory entry: its name and the type reported by the listing."""

    name: str
    type: str


class FileSystem(Protocol):
    """Protocol for the list/stat/read capability.

    All methods block and raise ``OSError`` on failure; callers run them on a
    worker thread.
    """

    def scandir(self, path: str) -> Iterator[DirectoryEntry]:
        """Iterate the entries of a directory.

        Args:
            path: Absolute directory path

        Returns:
            Iterator over raw entries, in filesystem order
        """
        ...

    def stat(self, path: str) -> FileStat:
        """Stat a path, following symbolic links."""
        ...

    def lstat(self, path: str) -> FileStat:
        """Stat a path without following a final symbolic link."""
        ...

    def read_prefix(self, path: str, size: int) -> bytes:
        """Read at most ``size`` bytes from the start of a file.

        Args:
            path: Absolute file path
            size: Maximum number of bytes

        Returns:
            The bytes read, empty for an empty file
        """
        ...
