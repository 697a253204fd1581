"""Dropdown items for path candidates."""

from textual_autocomplete import DropdownItem

from asyncpath.domain.types import CandidateEntry

FOLDER_PREFIX = "📁 "
FILE_PREFIX = "📄 "


def to_dropdown_item(entry: CandidateEntry) -> DropdownItem:
    prefix = FOLDER_PREFIX if entry.is_directory else FILE_PREFIX
    return DropdownItem(main=entry.label, prefix=prefix)
