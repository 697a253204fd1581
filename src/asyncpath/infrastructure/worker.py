"""
Per-request worker threads.

Each call to :func:`run_in_worker` starts one dedicated thread. The thread
receives only the arguments given at spawn time and hands its result back to
the event loop that requested it, so callbacks always run on the control
thread. There is no pool and no queue shared between requests.
"""

import asyncio
import threading
from typing import Any, Callable

from asyncpath.domain.exceptions import AsyncPathError, WorkerError
from asyncpath.logger import get_logger

logger = get_logger("worker")


def run_in_worker(func: Callable[..., Any], *args: Any, name: str = "asyncpath-worker") -> asyncio.Future:
    """
    Run ``func(*args)`` on a new daemon thread.

    Args:
        func: Blocking callable
        *args: Immutable request inputs
        name: Thread name, also used in error messages

    Returns:
        Future resolved on the running loop with the result. Domain errors
        raised by ``func`` are passed through; anything else becomes a
        :class:`WorkerError`.
    """
    loop = asyncio.get_running_loop()
    future: asyncio.Future = loop.create_future()

    def _settle(result: Any, error: BaseException | None) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
        else:
            future.set_result(result)

    def _run() -> None:
        result: Any = None
        error: BaseException | None = None
        try:
            result = func(*args)
        except AsyncPathError as exc:
            error = exc
        except Exception as exc:
            error = WorkerError(f"{name} failed: {exc!r}")
            error.__cause__ = exc
        try:
            loop.call_soon_threadsafe(_settle, result, error)
        except RuntimeError:
            logger.debug(f"{name} finished after its event loop closed; result dropped")

    threading.Thread(target=_run, name=name, daemon=True).start()
    return future
