"""
Path completion overlay for Textual ``Input`` widgets.
"""

from __future__ import annotations

from typing import Any, Mapping

from textual.message import Message
from textual.widgets import Input
from textual_autocomplete import AutoComplete, DropdownItem, TargetState

from asyncpath.application.orchestrator import CompletionOrchestrator, ScanRequest
from asyncpath.core.config import PathCompletionOptions
from asyncpath.domain.types import CandidateEntry, Documentation
from asyncpath.logger import get_logger
from asyncpath.presentation.completion import (
    CompletionApplier,
    compute_search_string,
    context_from_state,
    to_dropdown_item,
)

logger = get_logger("path_autocomplete")


class PathAutoComplete(AutoComplete):
    """Overlay listing directory entries for the path before the cursor.

    Scans run in Textual workers. Each new directory bumps a sequence number
    and results from older scans are dropped when they arrive.
    """

    class DocumentationReady(Message):
        """Posted when the preview of an applied file candidate is ready."""

        def __init__(self, entry: CandidateEntry, documentation: Documentation | None) -> None:
            super().__init__()
            self.entry = entry
            self.documentation = documentation

    def __init__(
        self,
        target: Input,
        orchestrator: CompletionOrchestrator | None = None,
        *,
        options: PathCompletionOptions | Mapping[str, Any] | None = None,
        buffer_path: str | None = None,
    ) -> None:
        self._orchestrator = orchestrator or CompletionOrchestrator()
        self._options = PathCompletionOptions.merge(options)
        self._buffer_path = buffer_path
        self._applier = CompletionApplier()
        self._entries: dict[str, CandidateEntry] = {}
        self._request_key: tuple[str, bool] | None = None
        self._sequence = 0
        super().__init__(target=target, candidates=self._collect_candidates)

    def _collect_candidates(self, state: TargetState) -> list[DropdownItem]:
        context = context_from_state(state, buffer_path=self._buffer_path)
        request = self._orchestrator.prepare(context, self._options)
        key = (request.dirname, request.include_hidden) if request else None
        if key != self._request_key:
            self._request_key = key
            self._sequence += 1
            self._entries = {}
            if request is not None:
                self.run_worker(self._refresh(request, self._sequence), group="path-scan")
        return [to_dropdown_item(entry) for entry in self._entries.values()]

    async def _refresh(self, request: ScanRequest, sequence: int) -> None:
        entries = await self._orchestrator.scan(request)
        if sequence != self._sequence:
            logger.debug(f"Dropping stale scan of {request.dirname!r}")
            return
        self._entries = {entry.label: entry for entry in entries}
        logger.debug(f"Collected {len(entries)} candidates from {request.dirname!r}")
        self._align_and_rebuild()

    def get_search_string(self, target_state: TargetState) -> str:
        return compute_search_string(target_state.text, target_state.cursor_position)

    def should_show_dropdown(self, search_string: str) -> bool:
        if self.option_list.option_count == 0:
            return False
        text_before_cursor = self.target.value[: self.target.cursor_position]
        return bool(search_string) or text_before_cursor.endswith(("/", "\\", "."))

    def apply_completion(self, value: str, state: TargetState) -> None:
        entry = self._entries.get(value)
        if entry is None:
            result = self._applier.apply_text(value, state)
        else:
            result = self._applier.apply(entry, state)
        self.target.value = result.text
        self.target.cursor_position = result.cursor
        logger.debug(f"Applied completion; new cursor={result.cursor}")
        if entry is not None and not entry.is_directory:
            self.run_worker(self._document(entry), group="path-doc")

    async def _document(self, entry: CandidateEntry) -> None:
        documentation = await self._orchestrator.document(entry.data, self._options)
        self.post_message(self.DocumentationReady(entry, documentation))

    def _align_and_rebuild(self) -> None:
        self._align_to_target()
        self._target_state = self._get_target_state()
        search_string = self.get_search_string(self._target_state)
        self._rebuild_options(self._target_state, search_string)
