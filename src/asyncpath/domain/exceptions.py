"""Exceptions raised while scanning directories and previewing files."""

__all__ = [
    "AsyncPathError",
    "ScanError",
    "WorkerError",
    "PayloadError",
    "PreviewError",
]


class AsyncPathError(Exception):
    """Base class for all asyncpath errors."""


class ScanError(AsyncPathError):
    """A directory could not be opened or iterated.

    This is a filesystem condition (missing directory, permission denied,
    not a directory), never an infrastructure failure.
    """

    def __init__(self, dirname: str, cause: OSError) -> None:
        super().__init__(f"cannot scan {dirname}: {cause.strerror or cause}")
        self.dirname = dirname
        self.cause = cause


class WorkerError(AsyncPathError):
    """The worker thread failed while running its job."""


class PayloadError(AsyncPathError):
    """A worker returned a result of the wrong shape."""


class PreviewError(AsyncPathError):
    """A documentation preview failed for infrastructure reasons."""
