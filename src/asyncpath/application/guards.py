"""
False-positive guards for path-like text.

Text ending in a separator is not always a path: URLs, closing HTML tags,
divisions and comment markers all look like one. Each guard is a named
predicate over the path prefix; a resolver rejects a candidate directory as
soon as one guard of its policy fires. Policies are plain tuples so callers
can extend or replace them.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from asyncpath.domain.types import CursorContext

__all__ = [
    "PathGuard",
    "LETTER_BEFORE_SLASH",
    "URL_SCHEME",
    "HTML_CLOSING_TAG",
    "ARITHMETIC",
    "NUMBER_DIVISION",
    "SLASH_COMMENT",
    "RELATIVE_GUARDS",
    "ABSOLUTE_GUARDS",
    "is_slash_comment",
    "first_rejection",
]


@dataclass(frozen=True, slots=True)
class PathGuard:
    """A named predicate that rejects a prefix as a path."""

    name: str
    rejects: Callable[[str, CursorContext], bool]


def _matches(pattern: str) -> Callable[[str, CursorContext], bool]:
    compiled = re.compile(pattern)
    return lambda prefix, _context: compiled.search(prefix) is not None


def is_slash_comment(context: CursorContext) -> bool:
    """True when the buffer uses ``//`` or ``/*`` comments and has a filetype."""
    comment = context.comment_string
    return bool(context.filetype) and ("/*" in comment or "//" in comment)


def _slash_comment(prefix: str, context: CursorContext) -> bool:
    return re.fullmatch(r"[\s/]*", prefix) is not None and is_slash_comment(context)


# "a/" in "http://host/a/" style URL components
LETTER_BEFORE_SLASH = PathGuard("letter-before-slash", _matches(r"[A-Za-z]/\Z"))
URL_SCHEME = PathGuard("url-scheme", _matches(r"[A-Za-z]+://?\Z"))
HTML_CLOSING_TAG = PathGuard("html-closing-tag", _matches(r"</\Z"))
ARITHMETIC = PathGuard("arithmetic", _matches(r"[\d)]\s*/\Z"))
# A bare number or a closing parenthesis before the slash, "x = 10/" or "(a+b)/";
# "v2/" stays a directory name.
NUMBER_DIVISION = PathGuard(
    "number-division", _matches(r"(?:\A|[^\w.])\d+(?:\.\d+)?\s*/\Z|\)\s*/\Z")
)
SLASH_COMMENT = PathGuard("slash-comment", _slash_comment)

RELATIVE_GUARDS: tuple[PathGuard, ...] = (URL_SCHEME, HTML_CLOSING_TAG, NUMBER_DIVISION)

ABSOLUTE_GUARDS: tuple[PathGuard, ...] = (
    LETTER_BEFORE_SLASH,
    URL_SCHEME,
    HTML_CLOSING_TAG,
    ARITHMETIC,
    SLASH_COMMENT,
)


def first_rejection(
    guards: tuple[PathGuard, ...], prefix: str, context: CursorContext
) -> PathGuard | None:
    """Return the first guard that rejects ``prefix``, if any."""
    for guard in guards:
        if guard.rejects(prefix, context):
            return guard
    return None
