"""Diagnostics for asyncpath, built on loguru.

Library code only ever calls :func:`get_logger`. The ``asyncpath`` namespace
is disabled when this module is imported, so nothing is written until an
application calls :func:`setup_logger` (the CLI does this for ``--debug``
and for ``ASYNCPATH_DEBUG=1``).
"""

import os
import sys
import tempfile
from typing import Optional

from loguru import logger

DEBUG_ENV_VAR = "ASYNCPATH_DEBUG"
DEBUG_LOG_FILENAME = "asyncpath-debug.log"

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> <level>{level: <7}</level> "
    "<cyan>{extra[name]}</cyan> {message}"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <7} {extra[name]}:{function}:{line} {message}"

# Silent until an application calls setup_logger().
logger.disable("asyncpath")

# Last file sink target, reused when setup_logger() is called without one
_log_file_path: Optional[str] = None


def default_log_file() -> str:
    """Debug log location: ``asyncpath-debug.log`` in the temp directory."""
    return os.path.join(tempfile.gettempdir(), DEBUG_LOG_FILENAME)


def setup_logger(
    log_file: Optional[str] = None,
    log_level: str = "INFO",
    rotation: str = "10 MB",
    retention: str = "7 days",
    compression: str = "zip",
    console_output: bool = False,
) -> None:
    """
    Replace all sinks with a rotating file sink and, optionally, stderr.

    Args:
        log_file: File to write; defaults to the last one used, then :func:`default_log_file`
        log_level: Minimum level for both sinks
        rotation: When the file rolls over
        retention: How long rolled files are kept
        compression: Format for rolled files
        console_output: Also log to stderr
    """
    global _log_file_path

    if log_file is not None:
        _log_file_path = os.path.abspath(log_file)
    elif _log_file_path is None:
        _log_file_path = default_log_file()

    logger.remove()
    if console_output:
        logger.add(sys.stderr, level=log_level, format=CONSOLE_FORMAT, colorize=True, filter=_with_default_name)
    logger.add(
        _log_file_path,
        level=log_level,
        format=FILE_FORMAT,
        rotation=rotation,
        retention=retention,
        compression=compression,
        encoding="utf-8",
        filter=_with_default_name,
    )
    logger.enable("asyncpath")


def setup_logger_from_env(environ: Optional[dict[str, str]] = None) -> bool:
    """Start debug logging to :func:`default_log_file` when ``ASYNCPATH_DEBUG=1``.

    Returns:
        Whether logging was turned on
    """
    env = os.environ if environ is None else environ
    if env.get(DEBUG_ENV_VAR) != "1":
        return False
    setup_logger(log_file=default_log_file(), log_level="DEBUG")
    get_logger("logger").debug(f"Debug log enabled by {DEBUG_ENV_VAR}")
    return True


def _with_default_name(record) -> bool:
    # Records from unbound loggers fall back to their module name.
    record["extra"].setdefault("name", record["name"])
    return True


def get_logger(name: Optional[str] = None):
    """Logger tagged with ``name``, shown in every record it emits."""
    if name:
        return logger.bind(name=name)
    return logger
