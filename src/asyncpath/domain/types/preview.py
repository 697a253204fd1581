"""File preview results and their formatted documentation."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Sequence

__all__ = [
    "PreviewResult",
    "MarkupKind",
    "Documentation",
    "CANNOT_READ",
    "EMPTY_FILE",
    "BINARY_FILE",
]

CANNOT_READ = "cannot read this file"
EMPTY_FILE = "empty file"
BINARY_FILE = "binary file"


@dataclass(frozen=True, slots=True)
class PreviewResult:
    """Leading content of a file, or a placeholder when it cannot be shown."""

    binary: bool
    placeholder_text: str | None = None
    lines: tuple[str, ...] = ()
    truncated: bool = False

    @classmethod
    def placeholder(cls, text: str) -> "PreviewResult":
        return cls(binary=True, placeholder_text=text)

    @classmethod
    def text(cls, lines: Sequence[str], truncated: bool = False) -> "PreviewResult":
        return cls(binary=False, lines=tuple(lines), truncated=truncated)


class MarkupKind(str, Enum):
    PLAINTEXT = "plaintext"
    MARKDOWN = "markdown"


@dataclass(frozen=True, slots=True)
class Documentation:
    kind: MarkupKind
    value: str
