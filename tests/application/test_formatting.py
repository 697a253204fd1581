from asyncpath.application.formatting import detect_filetype, format_preview
from asyncpath.domain.types import MarkupKind, PreviewResult
from asyncpath.domain.types.preview import BINARY_FILE


def test_placeholder_is_plain_text() -> None:
    documentation = format_preview(PreviewResult.placeholder(BINARY_FILE), "/x/blob.bin")

    assert documentation.kind is MarkupKind.PLAINTEXT
    assert documentation.value == BINARY_FILE


def test_source_file_is_fenced_markdown() -> None:
    lines = ("import os", "", "print(os.getcwd())")

    documentation = format_preview(PreviewResult.text(lines), "/x/main.py")

    assert documentation.kind is MarkupKind.MARKDOWN
    assert documentation.value == "```python\nimport os\n\nprint(os.getcwd())\n```"


def test_plain_text_file_is_not_fenced() -> None:
    documentation = format_preview(PreviewResult.text(("just", "words")), "/x/notes.txt")

    assert documentation.kind is MarkupKind.PLAINTEXT
    assert documentation.value == "just\nwords"


def test_detect_filetype_uses_file_name() -> None:
    assert detect_filetype(["{\"a\": 1}"], "data.json") == "json"
    assert detect_filetype(["hello"], "readme.txt") is None
