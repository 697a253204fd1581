"""Platform path grammars.

A grammar bundles everything the resolver needs to know about a platform's
paths: which characters separate segments, the backward pattern that finds
where a path starts in free text, and the ``os.path`` flavour used to
canonicalise results.
"""

from __future__ import annotations

import ntpath
import os
import posixpath
import re
from dataclasses import dataclass
from types import ModuleType

from asyncpath.domain.types.context import NAME_CHAR

__all__ = ["PathGrammar", "POSIX_GRAMMAR", "WINDOWS_GRAMMAR", "TRIGGER_CHARACTERS", "default_grammar"]

# Last character of a segment: a name character that is not a space, '.' or '~'.
SEGMENT_END_CHAR = r"""[^/\\:*?<>'"`| .~]"""


def _path_pattern(introducers: str) -> re.Pattern[str]:
    # Segments like "/name" or ".name" or '"name', then one more path-introducing
    # character followed by nothing but the partial name up to the cursor.
    segment = rf"[{introducers}]{NAME_CHAR}*{SEGMENT_END_CHAR}"
    return re.compile(rf"(?:{segment})*[{introducers}](?={NAME_CHAR}*\Z)")


@dataclass(frozen=True)
class PathGrammar:
    """Separators, path pattern and canonicalisation for one platform."""

    name: str
    separators: str
    path_pattern: re.Pattern[str]
    pathmod: ModuleType
    windows: bool = False

    @property
    def trigger_characters(self) -> tuple[str, ...]:
        return tuple(self.separators) + (".",)

    def is_separator(self, char: str) -> bool:
        return bool(char) and char in self.separators

    def ends_with_separator(self, text: str) -> bool:
        return bool(text) and text[-1] in self.separators

    def last_separator(self, text: str) -> int:
        """Index of the last separator in ``text``, or -1."""
        return max(text.rfind(sep) for sep in self.separators)

    def split_point(self, text: str) -> int | None:
        """Index where the path before the cursor starts, or None."""
        match = self.path_pattern.search(text)
        return match.start() if match else None

    def canonical(self, path: str) -> str:
        """Normalise ``.``/``..`` and separators without touching the disk."""
        path = self.pathmod.normpath(path)
        if not self.windows:
            if path.startswith("//"):
                path = "/" + path.lstrip("/")
            if not path.startswith("/"):
                path = posixpath.normpath(posixpath.join(os.getcwd(), path))
        return path


POSIX_GRAMMAR = PathGrammar(
    name="posix",
    separators="/",
    path_pattern=_path_pattern(r'/."'),
    pathmod=posixpath,
)

WINDOWS_GRAMMAR = PathGrammar(
    name="windows",
    separators="/\\",
    path_pattern=_path_pattern(r'/\\."'),
    pathmod=ntpath,
    windows=True,
)


def default_grammar() -> PathGrammar:
    """Grammar of the running platform."""
    return WINDOWS_GRAMMAR if os.name == "nt" else POSIX_GRAMMAR


# Characters after which a host should ask for completions on this platform.
TRIGGER_CHARACTERS = default_grammar().trigger_characters
