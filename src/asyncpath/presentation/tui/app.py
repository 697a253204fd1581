"""
PathCompleteApp - a minimal Textual application around PathAutoComplete.
"""

from __future__ import annotations

import os

from rich.markdown import Markdown
from rich.text import Text
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import VerticalScroll
from textual.widgets import Footer, Header, Input, Static

from asyncpath.application.orchestrator import CompletionOrchestrator
from asyncpath.core.config import PathCompletionOptions
from asyncpath.domain.types import MarkupKind
from asyncpath.logger import get_logger
from asyncpath.presentation.widgets import PathAutoComplete

logger = get_logger("tui")


class PathCompleteApp(App):
    """
    Type a path, pick a candidate, read the file preview.

    Layout:
    ┌──────────────────────────────┐
    │            Header            │
    ├──────────────────────────────┤
    │  Input (with path dropdown)  │
    ├──────────────────────────────┤
    │     Documentation preview    │
    ├──────────────────────────────┤
    │            Footer            │
    └──────────────────────────────┘
    """

    TITLE = "asyncpath"
    SUB_TITLE = "Asynchronous path completion"

    CSS = """
    #path-input {
        margin: 1 1 0 1;
    }
    #documentation-scroll {
        margin: 1;
        border: round $accent;
    }
    """

    BINDINGS = [
        Binding("ctrl+q", "quit", "Quit", priority=True),
        Binding("ctrl+l", "clear", "Clear"),
    ]

    def __init__(
        self,
        cwd: str | None = None,
        options: PathCompletionOptions | None = None,
        orchestrator: CompletionOrchestrator | None = None,
    ) -> None:
        super().__init__()
        self.cwd = os.path.abspath(cwd or os.getcwd())
        base = options or PathCompletionOptions()
        self.options = base.model_copy(update={"get_cwd": lambda _context: self.cwd})
        self.orchestrator = orchestrator or CompletionOrchestrator()

    def compose(self) -> ComposeResult:
        yield Header()
        path_input = Input(placeholder="Type a path: ./, ../, ~/, $HOME/ ...", id="path-input")
        yield path_input
        yield PathAutoComplete(path_input, self.orchestrator, options=self.options)
        with VerticalScroll(id="documentation-scroll"):
            yield Static(id="documentation")
        yield Footer()

    def on_mount(self) -> None:
        self.sub_title = self.cwd
        self.query_one("#path-input", Input).focus()

    def on_path_auto_complete_documentation_ready(self, message: PathAutoComplete.DocumentationReady) -> None:
        documentation = message.documentation
        static = self.query_one("#documentation", Static)
        if documentation is None:
            static.update("")
        elif documentation.kind is MarkupKind.MARKDOWN:
            static.update(Markdown(documentation.value))
        else:
            static.update(Text(documentation.value))
        logger.debug(f"Showing documentation for {message.entry.path!r}")

    def action_clear(self) -> None:
        self.query_one("#path-input", Input).value = ""
        self.query_one("#documentation", Static).update("")
