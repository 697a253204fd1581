"""
Utilities for applying selected path candidates to the input field.
"""

from __future__ import annotations

from dataclasses import dataclass

from textual_autocomplete import TargetState

from asyncpath.domain.types import CandidateEntry, CursorContext
from asyncpath.logger import get_logger

logger = get_logger("autocomplete.applier")


@dataclass(slots=True)
class ApplyResult:
    """Result of applying a completion value."""

    text: str
    cursor: int


def context_from_state(state: TargetState, **kwargs) -> CursorContext:
    """Cursor context for the text before the cursor of ``state``."""
    return CursorContext.from_text(state.text[: state.cursor_position], **kwargs)


def compute_search_string(text: str, cursor_position: int) -> str:
    """The partial name being typed, used by the dropdown to filter candidates."""
    return CursorContext.from_text(text[:cursor_position]).keyword


class CompletionApplier:
    """Replaces the partial name before the cursor with a candidate's insert text."""

    def apply(self, entry: CandidateEntry, state: TargetState) -> ApplyResult:
        return self.apply_text(entry.insert_text, state)

    def apply_text(self, insert_text: str, state: TargetState) -> ApplyResult:
        text_before_cursor = state.text[: state.cursor_position]
        text_after_cursor = state.text[state.cursor_position :]
        context = CursorContext.from_text(text_before_cursor)

        new_before = text_before_cursor[: context.offset] + insert_text
        logger.debug(f"apply: {insert_text!r} replacing {context.keyword!r}")
        return ApplyResult(text=new_before + text_after_cursor, cursor=len(new_before))
