"""Domain protocols - interfaces for the capabilities the core consumes.

Using protocols keeps the scanner and previewer independent of the real
filesystem, which makes them easy to exercise with stubs in tests.
"""

from asyncpath.domain.protocols.filesystem import DirectoryEntry, FileSystem

__all__ = ["DirectoryEntry", "FileSystem"]
