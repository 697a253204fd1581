import os

import pytest
from pydantic import ValidationError

from asyncpath.core.config import PathCompletionOptions, default_get_cwd, load_options_from_env
from asyncpath.domain.types import CursorContext


def test_defaults() -> None:
    options = PathCompletionOptions()

    assert options.trailing_slash is False
    assert options.label_trailing_slash is True
    assert options.show_hidden_files_by_default is False
    assert options.max_lines == 20
    assert options.get_cwd is default_get_cwd


def test_merge_accepts_none_instance_and_mapping() -> None:
    custom = PathCompletionOptions(trailing_slash=True)

    assert PathCompletionOptions.merge(None) == PathCompletionOptions()
    assert PathCompletionOptions.merge(custom) is custom
    assert PathCompletionOptions.merge({"label_trailing_slash": False}).label_trailing_slash is False


def test_cwd_provider_alias() -> None:
    options = PathCompletionOptions.merge({"cwd_provider": lambda _context: "/srv"})

    assert options.cwd_for(CursorContext("x/")) == "/srv"


@pytest.mark.parametrize(
    "overrides",
    [
        {"trailing_slash": "true"},
        {"label_trailing_slash": 1},
        {"max_lines": 2.5},
        {"get_cwd": "/tmp"},
        {"colour": "blue"},
    ],
)
def test_invalid_overrides(overrides) -> None:
    with pytest.raises(ValidationError):
        PathCompletionOptions.merge(overrides)


def test_options_are_frozen() -> None:
    options = PathCompletionOptions()

    with pytest.raises(ValidationError):
        options.trailing_slash = True


def test_command_line_mode_ignores_cwd_provider(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    options = PathCompletionOptions(get_cwd=lambda _context: "/elsewhere")

    assert options.cwd_for(CursorContext("x", command_line_mode=True)) == os.getcwd()
    assert options.cwd_for(CursorContext("x")) == "/elsewhere"


def test_default_get_cwd(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)

    assert default_get_cwd(CursorContext("", buffer_path="/a/b/c.txt")) == "/a/b"
    assert default_get_cwd(CursorContext("")) == os.getcwd()


def test_load_options_from_env() -> None:
    options = load_options_from_env(
        {
            "ASYNCPATH_TRAILING_SLASH": "yes",
            "ASYNCPATH_LABEL_TRAILING_SLASH": "0",
            "ASYNCPATH_SHOW_HIDDEN": "True",
            "ASYNCPATH_MAX_LINES": "5",
        }
    )

    assert options.trailing_slash is True
    assert options.label_trailing_slash is False
    assert options.show_hidden_files_by_default is True
    assert options.max_lines == 5


def test_load_options_from_empty_env() -> None:
    assert load_options_from_env({}) == PathCompletionOptions()


@pytest.mark.parametrize(
    "environ",
    [
        {"ASYNCPATH_TRAILING_SLASH": "maybe"},
        {"ASYNCPATH_MAX_LINES": "many"},
    ],
)
def test_load_options_from_env_rejects_bad_values(environ) -> None:
    with pytest.raises(ValueError):
        load_options_from_env(environ)
