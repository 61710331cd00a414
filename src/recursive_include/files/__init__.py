"""Filesystem traversal and classification for recursive-include."""

from recursive_include.files.discover import list_entries
from recursive_include.files.discover import traverse
from recursive_include.files.markers import classify
from recursive_include.files.markers import is_visible_directory
from recursive_include.files.markers import matches_marker

__all__ = [
    "classify",
    "is_visible_directory",
    "list_entries",
    "matches_marker",
    "traverse",
]
