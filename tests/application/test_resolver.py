import os

import pytest

from asyncpath.application.guards import ABSOLUTE_GUARDS
from asyncpath.application.resolver import DEFAULT_RULES, PathResolver, RuleInput
from asyncpath.core.config import PathCompletionOptions
from asyncpath.core.grammar import POSIX_GRAMMAR, WINDOWS_GRAMMAR
from asyncpath.domain.types import CursorContext

CWD = "/home/u/project"


def resolve(resolver: PathResolver, text: str, cwd: str = CWD, **kwargs) -> str | None:
    return resolver.resolve_against(CursorContext.from_text(text, **kwargs), cwd)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("../", "/home/u"),
        ("../src/", "/home/u/src"),
        ("../src/ma", "/home/u/src"),
        ("x = ../lib/", "/home/u/lib"),
    ],
)
def test_parent_paths_resolve_against_parent_of_cwd(resolver, text, expected) -> None:
    assert resolve(resolver, text) == expected


@pytest.mark.parametrize(
    "text, expected",
    [
        ("~/", "/home/u"),
        ("~/docs/", "/home/u/docs"),
        ("~/docs/rea", "/home/u/docs"),
        ("cd ~/docs/notes/", "/home/u/docs/notes"),
    ],
)
def test_home_paths(resolver, text, expected) -> None:
    assert resolve(resolver, text) == expected


def test_environment_variable_prefix(resolver) -> None:
    assert resolve(resolver, "$PROJECT/src/") == "/srv/project/src"


def test_unset_environment_variable_is_unresolved(resolver) -> None:
    assert resolve(resolver, "$MISSING/src/") is None


def test_single_dot_is_cwd(resolver) -> None:
    assert resolve(resolver, ".") == CWD


@pytest.mark.parametrize(
    "text, expected",
    [
        (".git/", "/home/u/project/.git"),
        ("./src/", "/home/u/project/src"),
        ("./", "/home/u/project"),
    ],
)
def test_dot_prefixed_relative_paths(resolver, text, expected) -> None:
    assert resolve(resolver, text) == expected


def test_quoted_path_is_relative_to_cwd(resolver) -> None:
    assert resolve(resolver, 'open("src/') == "/home/u/project/src"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("src/components/", "/home/u/project/src/components"),
        ("see lib/", "/home/u/project/lib"),
        ("v2/", "/home/u/project/v2"),
    ],
)
def test_relative_paths_without_dot_prefix(resolver, text, expected) -> None:
    assert resolve(resolver, text) == expected


def test_relative_path_from_root(resolver) -> None:
    assert resolve(resolver, "lua/", cwd="/root") == "/root/lua"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("/usr/", "/usr"),
        ("/usr/lo", "/usr"),
        ("/", "/"),
        ("cat /etc/", "/etc"),
    ],
)
def test_absolute_paths(resolver, text, expected) -> None:
    assert resolve(resolver, text) == expected


@pytest.mark.parametrize(
    "text",
    [
        "http://example.com/",
        "https://github.com/user/",
        "</",
        "<div></",
        "x = 10 /",
        "a = 10/",
        "(a + b)/",
        "2/",
    ],
)
def test_look_alikes_are_unresolved(resolver, text) -> None:
    assert resolve(resolver, text) is None


def test_slash_comment_is_unresolved_only_in_slash_comment_buffers(resolver) -> None:
    assert resolve(resolver, "//", filetype="c", comment_string="// %s") is None
    assert resolve(resolver, "//", filetype="python", comment_string="# %s") == "/"
    assert resolve(resolver, "//", comment_string="// %s") == "/"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("", CWD),
        ("REA", CWD),
        ("foo/bar:", "/home/u/project/foo"),
    ],
)
def test_text_without_path_falls_back_to_cwd(resolver, text, expected) -> None:
    assert resolve(resolver, text) == expected


def test_resolution_is_idempotent(resolver) -> None:
    context = CursorContext.from_text("../src/")
    first = resolver.resolve_against(context, CWD)
    second = resolver.resolve_against(context, CWD)
    assert first == second == "/home/u/src"


def test_resolve_uses_cwd_provider() -> None:
    resolver = PathResolver(POSIX_GRAMMAR, home="/home/u", environ={})
    options = PathCompletionOptions(get_cwd=lambda _context: "/opt/app")

    assert resolver.resolve(CursorContext.from_text("conf/"), options) == "/opt/app/conf"


def test_command_line_mode_uses_process_cwd(tmp_path, monkeypatch) -> None:
    monkeypatch.chdir(tmp_path)
    resolver = PathResolver(POSIX_GRAMMAR, home="/home/u", environ={})
    options = PathCompletionOptions(get_cwd=lambda _context: "/somewhere/else")
    context = CursorContext.from_text("sub/", command_line_mode=True)

    assert resolver.resolve(context, options) == os.path.join(os.getcwd(), "sub")


def test_default_cwd_is_directory_of_buffer() -> None:
    resolver = PathResolver(POSIX_GRAMMAR, home="/home/u", environ={})
    context = CursorContext.from_text("./", buffer_path="/work/repo/main.py")

    assert resolver.resolve(context, PathCompletionOptions()) == "/work/repo"


def test_rule_table_can_be_trimmed() -> None:
    rules = tuple(rule for rule in DEFAULT_RULES if rule.name != "relative")
    resolver = PathResolver(POSIX_GRAMMAR, rules=rules, home="/home/u", environ={})

    # Without the relative rule "lua/" falls through to the absolute rule,
    # whose letter-before-slash guard rejects it.
    assert resolve(resolver, "lua/") is None


def test_absolute_guard_policy_can_be_replaced() -> None:
    resolver = PathResolver(POSIX_GRAMMAR, absolute_guards=(), home="/home/u", environ={})

    assert resolve(resolver, "http://example.com/") == "/example.com"


def test_rules_are_testable_in_isolation(resolver) -> None:
    rules = {rule.name: rule for rule in DEFAULT_RULES}
    context = CursorContext.from_text("~/docs/")
    state = RuleInput(
        match=resolver.locate("~/docs/"),
        cwd=CWD,
        context=context,
        grammar=POSIX_GRAMMAR,
        home="/home/u",
        environ={},
        absolute_guards=ABSOLUTE_GUARDS,
    )

    assert rules["home"].resolve(state) == "/home/u/docs/"
    assert rules["parent"].resolve(state) is None
    assert rules["drive"].resolve(state) is None


def test_locate_splits_prefix_and_dirname(resolver) -> None:
    match = resolver.locate("x = ../lib/ma")

    assert match is not None
    assert match.prefix == "x = ../"
    assert match.dirname == "lib/"


class TestWindowsGrammar:
    @pytest.fixture
    def windows(self) -> PathResolver:
        return PathResolver(WINDOWS_GRAMMAR, home="C:\\Users\\u", environ={"APPDATA": "C:\\Users\\u\\AppData"})

    def test_drive_letter(self, windows) -> None:
        assert resolve(windows, "C:\\Users\\", cwd="C:\\work") == "C:\\Users"
        assert resolve(windows, "D:/data/", cwd="C:\\work") == "D:\\data"

    def test_backslash_parent(self, windows) -> None:
        assert resolve(windows, "..\\src\\", cwd="C:\\work\\proj") == "C:\\work\\src"

    def test_home(self, windows) -> None:
        assert resolve(windows, "~\\docs\\", cwd="C:\\work") == "C:\\Users\\u\\docs"

    def test_environment(self, windows) -> None:
        assert resolve(windows, "$APPDATA\\npm\\", cwd="C:\\work") == "C:\\Users\\u\\AppData\\npm"
