"""Cursor context handed to the resolver by the host."""

from __future__ import annotations

import re
from dataclasses import dataclass

__all__ = ["CursorContext", "NAME_CHAR", "KEYWORD_PATTERN"]

# One character that may appear in a path segment name.
NAME_CHAR = r"""[^/\\:*?<>'"`|]"""

# The word being completed: the run of name characters ending at the cursor.
KEYWORD_PATTERN = re.compile(NAME_CHAR + r"*\Z")


@dataclass(frozen=True, slots=True)
class CursorContext:
    """Snapshot of the line before the cursor for one completion request.

    ``offset`` is the 0-based index where the word being completed starts,
    which is where a host's keyword pattern places the completion.
    """

    line_before_cursor: str
    offset: int = 0
    buffer_path: str | None = None
    command_line_mode: bool = False
    filetype: str = ""
    comment_string: str = ""

    def __post_init__(self) -> None:
        if self.offset < 0:
            raise ValueError("offset must be >= 0")

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "CursorContext":
        """Build a context whose offset is the start of the trailing keyword."""
        match = KEYWORD_PATTERN.search(text)
        offset = match.start() if match else len(text)
        return cls(line_before_cursor=text, offset=offset, **kwargs)

    @property
    def keyword(self) -> str:
        """Partial name typed so far."""
        return self.line_before_cursor[self.offset :]

    def char_at(self, index: int) -> str:
        """Character at ``index``, or an empty string when out of range."""
        if 0 <= index < len(self.line_before_cursor):
            return self.line_before_cursor[index]
        return ""
