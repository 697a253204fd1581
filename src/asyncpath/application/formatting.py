"""Turn file previews into documentation for the completion menu."""

from __future__ import annotations

from pygments.lexers import guess_lexer, guess_lexer_for_filename
from pygments.lexers.special import TextLexer
from pygments.util import ClassNotFound

from asyncpath.domain.types import Documentation, MarkupKind, PreviewResult

__all__ = ["detect_filetype", "format_preview"]


def detect_filetype(lines: tuple[str, ...] | list[str], path: str | None = None) -> str | None:
    """
    Classify preview content for syntax highlighting.

    The file name is tried first, then the content alone.

    Returns:
        A Pygments lexer alias such as ``"python"``, or None for plain text
    """
    text = "\n".join(lines)
    lexer = None
    if path:
        try:
            lexer = guess_lexer_for_filename(path, text)
        except ClassNotFound:
            lexer = None
    if lexer is None:
        try:
            lexer = guess_lexer(text)
        except ClassNotFound:
            return None
    if isinstance(lexer, TextLexer) or not lexer.aliases:
        return None
    return lexer.aliases[0]


def format_preview(result: PreviewResult, path: str | None = None) -> Documentation:
    """Placeholders and unclassified text stay plain; classified text is fenced Markdown."""
    if result.binary:
        return Documentation(kind=MarkupKind.PLAINTEXT, value=result.placeholder_text or "")

    filetype = detect_filetype(result.lines, path)
    if filetype is None:
        return Documentation(kind=MarkupKind.PLAINTEXT, value="\n".join(result.lines))

    fenced = [f"```{filetype}", *result.lines, "```"]
    return Documentation(kind=MarkupKind.MARKDOWN, value="\n".join(fenced))
