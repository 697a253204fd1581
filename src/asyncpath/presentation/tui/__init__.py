"""Demo Textual application."""

from .app import PathCompleteApp

__all__ = ["PathCompleteApp"]
