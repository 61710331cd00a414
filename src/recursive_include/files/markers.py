"""Marker detection and directory classification.

Nothing here touches the filesystem: entries are listed by the caller and
passed in, so every decision can be tested from plain data.
"""

from collections.abc import Iterable

from recursive_include.models import ClassificationResult
from recursive_include.models import DirectoryEntry
from recursive_include.models import ExternalBuild
from recursive_include.models import MarkerConfig
from recursive_include.models import Module
from recursive_include.models import NoMarker

DEFAULT_CONFIG = MarkerConfig()


def matches_marker(
    name: str, marker: str, config: MarkerConfig = DEFAULT_CONFIG
) -> bool:
    """Check if a file name is the marker, in either syntax.

    Args:
        name: File name to check
        marker: Base marker name, e.g. "build.gradle"
        config: Supplies the secondary-syntax suffix

    Returns:
        True for "build.gradle" and "build.gradle.kts" alike
    """
    return name == marker or name == f"{marker}{config.script_suffix}"


def is_visible_directory(
    entry: DirectoryEntry, config: MarkerConfig = DEFAULT_CONFIG
) -> bool:
    """Check if an entry is a directory worth descending into.

    Hidden directories and the build output directory are never visited.
    """
    return (
        entry.is_dir
        and not entry.name.startswith(config.hidden_prefix)
        and entry.name != config.build_dir_name
    )


def classify(
    directory: DirectoryEntry,
    children: Iterable[DirectoryEntry],
    config: MarkerConfig = DEFAULT_CONFIG,
) -> tuple[ClassificationResult, list[DirectoryEntry]]:
    """Classify a directory from its children.

    A standalone build marker wins over a module marker regardless of listing
    order. When several module markers are present the first one listed is
    reported.

    Args:
        directory: The directory being classified
        children: Its immediate children, in listing order
        config: Marker naming conventions

    Returns:
        Tuple of (result, subdirectories). Subdirectories are the visible
        directories to recurse into, and are empty unless result is NoMarker.
    """
    subdirectories: list[DirectoryEntry] = []
    module_marker: DirectoryEntry | None = None

    for child in children:
        if is_visible_directory(child, config):
            subdirectories.append(child)
        elif not child.is_file:
            continue
        elif matches_marker(child.name, config.settings_marker, config):
            return ExternalBuild(path=directory.path, marker=child.path), []
        elif module_marker is None and matches_marker(
            child.name, config.module_marker, config
        ):
            module_marker = child

    if module_marker is not None:
        module = Module(
            path=directory.path, marker=module_marker.path, name=directory.name
        )
        return module, []
    return NoMarker(), subdirectories
