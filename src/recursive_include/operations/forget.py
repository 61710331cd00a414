"""Look up and remove saved scans."""

from pathlib import Path

from recursive_include.registry import Registry
from recursive_include.registry import ScanRecord


def find_build(root_dir: Path, registry_path: Path) -> ScanRecord:
    """Get the saved scan of a root directory.

    Args:
        root_dir: Root directory that was scanned (resolved to absolute, but
            need not exist anymore)
        registry_path: Path to registry file

    Raises:
        BuildNotFoundError: If root_dir was never scanned
    """
    return Registry.load(registry_path).get(root_dir)


def forget_build(root_dir: Path, registry_path: Path) -> ScanRecord:
    """Remove the saved scan of a root directory.

    Args:
        root_dir: Root directory that was scanned
        registry_path: Path to registry file

    Returns:
        The removed ScanRecord

    Raises:
        BuildNotFoundError: If root_dir was never scanned
    """
    registry = Registry.load(registry_path)
    record = registry.remove(root_dir)
    registry.save(registry_path)
    return record
