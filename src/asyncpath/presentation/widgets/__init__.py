"""Textual widgets."""

from .autocomplete import PathAutoComplete

__all__ = ["PathAutoComplete"]
