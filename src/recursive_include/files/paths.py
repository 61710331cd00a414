"""Path normalization and relativization utilities."""

from pathlib import Path

from recursive_include.exceptions import RootDirectoryError
from recursive_include.models import RootContext


def normalize_root_dir(root_dir: Path) -> Path:
    """Normalize and validate the traversal root.

    Args:
        root_dir: Directory to scan

    Returns:
        Absolute path to root directory

    Raises:
        RootDirectoryError: If root_dir does not exist or is not a directory
    """
    root_dir = root_dir.resolve()

    if not root_dir.exists():
        raise RootDirectoryError(f"Root directory does not exist: {root_dir}")
    if not root_dir.is_dir():
        raise RootDirectoryError(f"Root path is not a directory: {root_dir}")

    return root_dir


def relativize(root: RootContext, marker_file: Path) -> str:
    """Get the directory holding marker_file, relative to the root.

    Args:
        root: Traversal root
        marker_file: Absolute path to a marker file below the root

    Returns:
        Forward-slash path without a leading slash, e.g.
        "exampleplatform/javaapi"

    Raises:
        ValueError: If marker_file is not below the root
    """
    return marker_file.parent.relative_to(root.root_dir).as_posix()
