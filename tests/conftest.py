"""Shared fixtures for asyncpath tests."""

import os
from pathlib import Path

import pytest

from asyncpath.application.resolver import PathResolver
from asyncpath.core.grammar import POSIX_GRAMMAR


@pytest.fixture
def resolver() -> PathResolver:
    """A POSIX resolver with a fixed home and environment."""
    return PathResolver(
        POSIX_GRAMMAR,
        home="/home/u",
        environ={"PROJECT": "/srv/project", "HOME": "/home/u"},
    )


@pytest.fixture
def tree(tmp_path: Path) -> Path:
    """A small directory with files, a dot-file, a subdirectory and symlinks.

    tree/
        a.txt
        .hidden
        lib/
            inner.py
        linkdir -> lib
        broken -> missing
    """
    (tmp_path / "a.txt").write_text("alpha\n", encoding="utf-8")
    (tmp_path / ".hidden").write_text("secret\n", encoding="utf-8")
    (tmp_path / "lib").mkdir()
    (tmp_path / "lib" / "inner.py").write_text("import os\n", encoding="utf-8")
    os.symlink(tmp_path / "lib", tmp_path / "linkdir")
    os.symlink(tmp_path / "missing", tmp_path / "broken")
    return tmp_path
