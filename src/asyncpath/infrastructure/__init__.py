"""Infrastructure layer - the local filesystem and the per-request worker threads."""

from asyncpath.infrastructure.filesystem import LocalFileSystem
from asyncpath.infrastructure.worker import run_in_worker

__all__ = ["LocalFileSystem", "run_in_worker"]
