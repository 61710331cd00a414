"""Recursive directory traversal."""

import logging
from collections.abc import Iterator
from pathlib import Path

from recursive_include.files.markers import DEFAULT_CONFIG
from recursive_include.files.markers import classify
from recursive_include.files.markers import is_visible_directory
from recursive_include.files.paths import relativize
from recursive_include.models import DirectoryEntry
from recursive_include.models import ExternalBuild
from recursive_include.models import IncludeBuild
from recursive_include.models import IncludeModule
from recursive_include.models import LinkDirective
from recursive_include.models import MarkerConfig
from recursive_include.models import Module
from recursive_include.models import RootContext

logger = logging.getLogger(__name__)


def list_entries(directory: Path, sort: bool = False) -> list[DirectoryEntry]:
    """List the immediate children of a directory.

    Symlinks are reported as what they point to. A directory that cannot be
    read (permissions, removed mid-walk) is treated as empty.

    Args:
        directory: Directory to list
        sort: If True, order children by name instead of listing order

    Returns:
        List of DirectoryEntry, one per child
    """
    try:
        paths = list(directory.iterdir())
    except OSError as e:
        logger.debug("Cannot list %s, treating as empty: %s", directory, e)
        return []

    if sort:
        paths.sort(key=lambda p: p.name)

    return [
        DirectoryEntry(
            path=path,
            is_dir=path.is_dir(),
            is_file=path.is_file(),
        )
        for path in paths
    ]


def traverse(
    root: RootContext,
    config: MarkerConfig = DEFAULT_CONFIG,
    sort: bool = False,
) -> Iterator[LinkDirective]:
    """Walk the tree below root and yield a directive per marked directory.

    Directories are visited depth first, siblings in listing order (or by name
    when sort is True). Descent stops at the first directory holding a marker.
    The root directory itself is never classified. Symlinked directories are
    followed, but a directory reached a second time (through a link cycle or a
    second link to the same target) is skipped.

    Args:
        root: Traversal root
        config: Marker naming conventions
        sort: If True, visit siblings in name order

    Yields:
        IncludeBuild or IncludeModule, in traversal order
    """
    seen = {_real_path(root.root_dir)}
    for entry in list_entries(root.root_dir, sort=sort):
        if is_visible_directory(entry, config):
            yield from _visit(root, entry, config, sort, seen)


def _visit(
    root: RootContext,
    directory: DirectoryEntry,
    config: MarkerConfig,
    sort: bool,
    seen: set[Path],
) -> Iterator[LinkDirective]:
    real_path = _real_path(directory.path)
    if real_path in seen:
        logger.debug("Already visited %s as %s, skipping", directory.path, real_path)
        return
    seen.add(real_path)

    children = list_entries(directory.path, sort=sort)
    result, subdirectories = classify(directory, children, config)

    if isinstance(result, ExternalBuild):
        logger.debug("Standalone build marker: %s", result.marker)
        yield IncludeBuild(relative_path=relativize(root, result.marker))
    elif isinstance(result, Module):
        logger.debug("Module marker: %s", result.marker)
        yield IncludeModule(
            name=result.name, relative_path=relativize(root, result.marker)
        )
    else:
        logger.debug(
            "Subdirectories of %s: %s",
            directory.path,
            [d.name for d in subdirectories],
        )
        for subdirectory in subdirectories:
            yield from _visit(root, subdirectory, config, sort, seen)


def _real_path(directory: Path) -> Path:
    """Resolve symlinks, falling back to the literal path if that fails."""
    try:
        return directory.resolve()
    except (OSError, RuntimeError):
        # RuntimeError: symlink loop on Python < 3.13
        return directory
