import asyncio
import os
from pathlib import Path
from typing import Optional

import typer
from dotenv import load_dotenv
from rich.console import Console
from rich.markdown import Markdown
from rich.table import Table
from rich.text import Text

from asyncpath.application.orchestrator import CompletionOrchestrator
from asyncpath.core.config import load_options_from_env
from asyncpath.domain.types import CandidateEntry, CursorContext, FileStat, MarkupKind
from asyncpath.logger import get_logger, setup_logger, setup_logger_from_env
from asyncpath.utils import format_mtime, format_size

load_dotenv()

console = Console(soft_wrap=True)

cli = typer.Typer(
    name="asyncpath",
    help="Resolve the path before a cursor, list its entries and preview files",
    epilog="""
    Examples:
    $ asyncpath complete "../src/" --cwd ~/project
    $ asyncpath preview README.md --max-lines 5
    """,
    add_completion=False,
)


@cli.callback()
def main(
    debug: bool = typer.Option(False, "--debug", help="Log debug diagnostics to the console"),
):
    """asyncpath command line."""
    if debug:
        setup_logger(log_level="DEBUG", console_output=True)
    else:
        setup_logger_from_env()


@cli.command()
def complete(
    line: str = typer.Argument(..., help="Text before the cursor"),
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Base directory for relative paths"),
    hidden: Optional[bool] = typer.Option(None, "--hidden/--no-hidden", help="Show dot-files"),
    trailing_slash: Optional[bool] = typer.Option(None, "--trailing-slash/--no-trailing-slash"),
    label_trailing_slash: Optional[bool] = typer.Option(
        None, "--label-trailing-slash/--no-label-trailing-slash", help="Show '/' after directory labels"
    ),
):
    """List completion candidates for LINE."""
    logger = get_logger("cli")
    base_dir = str(cwd.expanduser().resolve()) if cwd else os.getcwd()
    updates = {"get_cwd": lambda _context: base_dir}
    for field, value in (
        ("show_hidden_files_by_default", hidden),
        ("trailing_slash", trailing_slash),
        ("label_trailing_slash", label_trailing_slash),
    ):
        if value is not None:
            updates[field] = value
    options = load_options_from_env().model_copy(update=updates)

    context = CursorContext.from_text(line)
    orchestrator = CompletionOrchestrator()
    request = orchestrator.prepare(context, options)
    if request is None:
        logger.info(f"No directory for {line!r}")
        console.print("no completions")
        return

    entries = asyncio.run(orchestrator.scan(request))
    if not entries:
        console.print(f"no completions in {request.dirname}")
        return
    console.print(_candidates_table(request.dirname, entries))


@cli.command()
def preview(
    path: Path = typer.Argument(..., help="File to preview"),
    max_lines: Optional[int] = typer.Option(None, "--max-lines", help="Maximum lines; negative for all"),
):
    """Show the documentation preview of PATH."""
    target = path.expanduser().resolve()
    try:
        stat = FileStat.from_stat_result(target.stat())
    except OSError as e:
        console.print(f"[red]cannot stat {target}: {e.strerror}[/red]")
        raise typer.Exit(code=1)

    options = load_options_from_env()
    if max_lines is not None:
        options = options.model_copy(update={"max_lines": max_lines})

    orchestrator = CompletionOrchestrator()
    documentation = asyncio.run(orchestrator.document({"path": str(target), "stat": stat}, options))
    if documentation is None:
        console.print(f"{target} is not a regular file")
        raise typer.Exit(code=1)
    if documentation.kind is MarkupKind.MARKDOWN:
        console.print(Markdown(documentation.value))
    else:
        console.print(Text(documentation.value))


@cli.command()
def tui(
    cwd: Optional[Path] = typer.Option(None, "--cwd", help="Base directory for relative paths"),
):
    """Run the interactive demo."""
    from asyncpath.presentation.tui import PathCompleteApp

    PathCompleteApp(cwd=str(cwd.expanduser()) if cwd else None, options=load_options_from_env()).run()


def _candidates_table(dirname: str, entries: list[CandidateEntry]) -> Table:
    table = Table(title=dirname, title_justify="left")
    table.add_column("Label")
    table.add_column("Kind")
    table.add_column("Size", justify="right")
    table.add_column("Modified")
    for entry in entries:
        stat = entry.stat
        table.add_row(
            Text(entry.label),
            entry.kind.value,
            format_size(stat.size) if stat else "-",
            format_mtime(stat.mtime) if stat else "-",
        )
    return table


if __name__ == "__main__":
    cli()
