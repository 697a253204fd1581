"""Core building blocks shared by the application layer: options and path grammars."""

from asyncpath.core.config import PathCompletionOptions, load_options_from_env
from asyncpath.core.grammar import (
    POSIX_GRAMMAR,
    TRIGGER_CHARACTERS,
    WINDOWS_GRAMMAR,
    PathGrammar,
    default_grammar,
)

__all__ = [
    "PathCompletionOptions",
    "load_options_from_env",
    "PathGrammar",
    "POSIX_GRAMMAR",
    "WINDOWS_GRAMMAR",
    "TRIGGER_CHARACTERS",
    "default_grammar",
]
