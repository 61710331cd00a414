"""Saved scans, one record per root directory.

The registry file looks like::

    {
      "version": 1,
      "scans": [
        {
          "root_dir": "/work/platform",
          "scanned_at": "2026-01-01T00:00:00+00:00",
          "sorted": true,
          "build": {"root_name": "platform", "included_builds": [], "projects": []}
        }
      ]
    }
"""

import json
import os
import tempfile
from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self

from platformdirs import user_state_path

from recursive_include.exceptions import BuildNotFoundError
from recursive_include.exceptions import DuplicateModuleError
from recursive_include.exceptions import RegistryValidationError
from recursive_include.exceptions import RegistryVersionError
from recursive_include.registrar import BuildSettings

REGISTRY_VERSION = 1


@dataclass
class ScanRecord:
    """The build graph found below one root, and how the scan was run."""

    root_dir: Path  # Absolute, resolved
    settings: BuildSettings
    sorted_siblings: bool
    scanned_at: str  # UTC ISO 8601 timestamp

    def to_dict(self) -> dict:
        return {
            "root_dir": str(self.root_dir),
            "scanned_at": self.scanned_at,
            "sorted": self.sorted_siblings,
            "build": self.settings.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from a "scans" item, rejecting relative roots."""
        root_dir = Path(data["root_dir"])
        if not root_dir.is_absolute():
            raise RegistryValidationError(f"Scan root is not absolute: {root_dir}")

        try:
            settings = BuildSettings.from_dict(data["build"])
        except DuplicateModuleError as e:
            raise RegistryValidationError(f"Inconsistent build for {root_dir}: {e}")

        return cls(
            root_dir=root_dir,
            settings=settings,
            sorted_siblings=bool(data["sorted"]),
            scanned_at=data["scanned_at"],
        )


@dataclass
class Registry:
    """Every saved scan, keyed by root directory."""

    scans: dict[Path, ScanRecord] = field(default_factory=dict)

    @classmethod
    def default_path(cls) -> Path:
        """Get default registry location using platformdirs."""
        return user_state_path("recursive-include") / "registry.json"

    @classmethod
    def load(cls, path: Path) -> Self:
        """Read the registry at path. A missing file is an empty registry.

        Raises:
            RegistryValidationError: If the file is not a well-formed registry
            RegistryVersionError: If the file was written by a newer version
        """
        try:
            text = path.read_text()
        except FileNotFoundError:
            return cls()

        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise RegistryValidationError(f"{path} is not valid JSON: {e}") from e

        if not isinstance(data, dict) or not isinstance(data.get("version"), int):
            raise RegistryValidationError(f"{path} has no integer 'version' field")
        if data["version"] > REGISTRY_VERSION:
            raise RegistryVersionError(
                f"{path} has version {data['version']}, "
                f"this release reads up to {REGISTRY_VERSION}"
            )

        registry = cls()
        try:
            for item in data["scans"]:
                record = ScanRecord.from_dict(item)
                if record.root_dir in registry.scans:
                    raise RegistryValidationError(
                        f"{path} lists {record.root_dir} more than once"
                    )
                registry.scans[record.root_dir] = record
        except (KeyError, TypeError) as e:
            raise RegistryValidationError(f"{path} has a malformed scan: {e!r}") from e
        return registry

    def save(self, path: Path) -> None:
        """Replace the registry at path in one step."""
        path.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "version": REGISTRY_VERSION,
            "scans": [self.scans[root].to_dict() for root in sorted(self.scans)],
        }

        fd, temp_name = tempfile.mkstemp(dir=path.parent, suffix=".json")
        try:
            with os.fdopen(fd, "w") as f:
                json.dump(data, f, indent=2)
            os.replace(temp_name, path)
        except BaseException:
            os.unlink(temp_name)
            raise

    def get(self, root_dir: Path) -> ScanRecord:
        """Get the scan of root_dir (resolved; it need not exist anymore).

        Raises:
            BuildNotFoundError: If root_dir was never scanned
        """
        key = root_dir.resolve()
        try:
            return self.scans[key]
        except KeyError as e:
            raise BuildNotFoundError(f"No saved build for '{key}'") from e

    def put(self, record: ScanRecord) -> None:
        """Add a scan, replacing any earlier scan of the same root."""
        self.scans[record.root_dir] = record

    def remove(self, root_dir: Path) -> ScanRecord:
        """Remove and return the scan of root_dir.

        Raises:
            BuildNotFoundError: If root_dir was never scanned
        """
        record = self.get(root_dir)
        del self.scans[record.root_dir]
        return record
