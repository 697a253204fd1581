from asyncpath.utils import format_mtime, format_size


def test_format_size() -> None:
    assert format_size(0) == "0 B"
    assert format_size(512) == "512 B"
    assert format_size(1536) == "1.5 KB"
    assert format_size(3 * 1024 * 1024) == "3.0 MB"


def test_format_mtime() -> None:
    assert format_mtime(0) == "----------"
    assert len(format_mtime(1_700_000_000)) == len("2023-11-14 22:13")
