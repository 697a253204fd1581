import pytest
from loguru import logger

from asyncpath.application.resolver import PathResolver
from asyncpath.core.grammar import POSIX_GRAMMAR
from asyncpath.domain.types import CursorContext
from asyncpath.logger import get_logger, setup_logger, setup_logger_from_env


@pytest.fixture
def restore_logging():
    yield
    logger.remove()
    logger.disable("asyncpath")


def test_importing_package_keeps_logger_module() -> None:
    import asyncpath
    import asyncpath.logger as package_logger

    assert asyncpath.logger is package_logger
    assert asyncpath.__version__ == "0.1.0"


def test_package_is_silent_until_configured(tmp_path, restore_logging) -> None:
    log_file = tmp_path / "quiet.log"
    logger.remove()
    handler = logger.add(str(log_file), level="DEBUG")

    PathResolver(POSIX_GRAMMAR, home="/h", environ={}).resolve_against(CursorContext.from_text("src/"), "/w")
    logger.remove(handler)

    assert log_file.read_text(encoding="utf-8") == ""


def test_setup_logger_enables_package_diagnostics(tmp_path, restore_logging) -> None:
    log_file = tmp_path / "debug.log"
    setup_logger(log_file=str(log_file), log_level="DEBUG")

    PathResolver(POSIX_GRAMMAR, home="/h", environ={}).resolve_against(CursorContext.from_text("src/"), "/w")
    get_logger("tests").info("plain message")

    content = log_file.read_text(encoding="utf-8")
    assert "Rule relative resolved 'src/'" in content
    assert "resolver" in content
    assert "plain message" in content


def test_setup_logger_from_env(restore_logging) -> None:
    assert setup_logger_from_env({}) is False
    assert setup_logger_from_env({"ASYNCPATH_DEBUG": "0"}) is False
