"""
asyncpath presentation layer - hosts for the completion core.

This package contains:
- completion: helpers that adapt candidates to textual-autocomplete
- widgets: the PathAutoComplete overlay for Textual inputs
- tui: a small demo application built on Textual and Rich
"""
