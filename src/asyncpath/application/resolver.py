"""
Resolve the text before the cursor into an absolute directory.

The text is free-form, so resolution is a sequence of heuristics. After a few
special cases, a table of named rules is tried in order and the first rule
that produces a directory wins. Every result is canonicalised by the grammar
without touching the filesystem, so resolving the same context twice always
gives the same answer.
"""

from __future__ import annotations

import os
import re
from dataclasses import dataclass
from typing import Callable, Mapping

from asyncpath.application.guards import ABSOLUTE_GUARDS, RELATIVE_GUARDS, PathGuard, first_rejection
from asyncpath.core.config import PathCompletionOptions
from asyncpath.core.grammar import PathGrammar, default_grammar
from asyncpath.domain.types import CursorContext
from asyncpath.logger import get_logger

logger = get_logger("resolver")

__all__ = [
    "PathMatch",
    "RuleInput",
    "ResolutionRule",
    "DEFAULT_RULES",
    "PathResolver",
]

_TRAILING_ALPHA = re.compile(r"[A-Za-z]*\Z")
_ENV_VAR = re.compile(r"\$([A-Za-z_]+)[/\\]\Z")
_DRIVE = re.compile(r"([A-Za-z]:)[/\\]\Z")


@dataclass(frozen=True, slots=True)
class PathMatch:
    """A path located in the line before the cursor.

    ``prefix`` runs up to and including the character where the path starts;
    ``dirname`` is the rest of the line without the partial name being typed.
    """

    line: str
    prefix: str
    dirname: str


@dataclass(frozen=True, slots=True)
class RuleInput:
    """Everything a resolution rule may look at."""

    match: PathMatch
    cwd: str
    context: CursorContext
    grammar: PathGrammar
    home: str
    environ: Mapping[str, str]
    relative_guards: tuple[PathGuard, ...] = RELATIVE_GUARDS
    absolute_guards: tuple[PathGuard, ...] = ABSOLUTE_GUARDS

    @property
    def prefix(self) -> str:
        return self.match.prefix

    @property
    def dirname(self) -> str:
        return self.match.dirname

    def ends_with(self, marker: str) -> bool:
        """True when the prefix ends in ``marker`` followed by a separator."""
        prefix = self.prefix
        return self.grammar.ends_with_separator(prefix) and prefix[:-1].endswith(marker)


@dataclass(frozen=True, slots=True)
class ResolutionRule:
    """A named heuristic; ``resolve`` returns None when it does not apply."""

    name: str
    resolve: Callable[[RuleInput], str | None]


def _join(*parts: str) -> str:
    return "/".join(parts)


def _parent(state: RuleInput) -> str | None:
    if state.ends_with(".."):
        return _join(state.cwd, "..", state.dirname)
    return None


def _current_or_quoted(state: RuleInput) -> str | None:
    if state.ends_with(".") or state.prefix.endswith(('"', "'")):
        return _join(state.cwd, state.dirname)
    return None


def _home(state: RuleInput) -> str | None:
    if state.ends_with("~"):
        return _join(state.home, state.dirname)
    return None


def _environment(state: RuleInput) -> str | None:
    found = _ENV_VAR.search(state.prefix)
    if not found or not state.grammar.ends_with_separator(state.prefix):
        return None
    value = state.environ.get(found.group(1))
    if value is None:
        return None
    return _join(value, state.dirname)


def _drive(state: RuleInput) -> str | None:
    if not state.grammar.windows:
        return None
    found = _DRIVE.search(state.prefix)
    if found:
        return _join(found.group(1), state.dirname)
    return None


def _relative(state: RuleInput) -> str | None:
    prefix = state.prefix
    if not state.grammar.ends_with_separator(prefix):
        return None
    head = prefix[:-1]
    if not head or head[-1].isspace():
        return None
    token = head.split()[-1].lstrip("'\"`")
    if not token or token[0] in "~$" or state.grammar.is_separator(token[0]):
        return None
    guard = first_rejection(state.relative_guards, prefix, state.context)
    if guard is not None:
        logger.debug(f"Relative path {prefix!r} rejected by {guard.name}")
        return None
    return _join(state.cwd, token, state.dirname)


def _absolute(state: RuleInput) -> str | None:
    if not state.prefix.endswith("/"):
        return None
    guard = first_rejection(state.absolute_guards, state.prefix, state.context)
    if guard is not None:
        logger.debug(f"Absolute path {state.prefix!r} rejected by {guard.name}")
        return None
    return "/" + state.dirname


DEFAULT_RULES: tuple[ResolutionRule, ...] = (
    ResolutionRule("parent", _parent),
    ResolutionRule("current-or-quoted", _current_or_quoted),
    ResolutionRule("home", _home),
    ResolutionRule("environment", _environment),
    ResolutionRule("drive", _drive),
    ResolutionRule("relative", _relative),
    ResolutionRule("absolute", _absolute),
)


class PathResolver:
    """Turns the line before the cursor into an absolute directory, or None."""

    def __init__(
        self,
        grammar: PathGrammar | None = None,
        *,
        rules: tuple[ResolutionRule, ...] = DEFAULT_RULES,
        relative_guards: tuple[PathGuard, ...] = RELATIVE_GUARDS,
        absolute_guards: tuple[PathGuard, ...] = ABSOLUTE_GUARDS,
        home: str | None = None,
        environ: Mapping[str, str] | None = None,
    ) -> None:
        self.grammar = grammar or default_grammar()
        self.rules = rules
        self.relative_guards = relative_guards
        self.absolute_guards = absolute_guards
        self._home = home
        self._environ = environ

    def resolve(self, context: CursorContext, options: PathCompletionOptions) -> str | None:
        """Resolve ``context`` against the base directory chosen by ``options``."""
        return self.resolve_against(context, options.cwd_for(context))

    def locate(self, line: str) -> PathMatch | None:
        """Find where a path starts in ``line``."""
        start = self.grammar.split_point(line)
        if start is None:
            return None
        return PathMatch(
            line=line,
            prefix=line[: start + 1],
            dirname=_TRAILING_ALPHA.sub("", line[start + 1 :]),
        )

    def resolve_against(self, context: CursorContext, cwd: str) -> str | None:
        line = context.line_before_cursor
        canonical = self.grammar.canonical
        match = self.locate(line)

        if match is None:
            last_sep = self.grammar.last_separator(line)
            if last_sep >= 0:
                # "lua/" style input that the path pattern does not cover
                return canonical(_join(cwd, line[: last_sep + 1]))
            # Bare word: list the current directory
            return canonical(cwd)

        if line == ".":
            return canonical(cwd)

        if line.startswith(".") and self.grammar.ends_with_separator(line):
            return canonical(_join(cwd, line[:-1]))

        state = RuleInput(
            match=match,
            cwd=cwd,
            context=context,
            grammar=self.grammar,
            home=self._home if self._home is not None else os.path.expanduser("~"),
            environ=self._environ if self._environ is not None else os.environ,
            relative_guards=self.relative_guards,
            absolute_guards=self.absolute_guards,
        )
        for rule in self.rules:
            resolved = rule.resolve(state)
            if resolved is not None:
                logger.debug(f"Rule {rule.name} resolved {line!r} to {resolved!r}")
                return canonical(resolved)

        logger.debug(f"No rule resolved {line!r}")
        return None
