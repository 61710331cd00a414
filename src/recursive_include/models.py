"""Data models for recursive-include."""

from dataclasses import dataclass
from dataclasses import field
from pathlib import Path
from typing import Self


@dataclass(frozen=True)
class MarkerConfig:
    """Naming conventions used to classify directories."""

    hidden_prefix: str = "."
    build_dir_name: str = "build"
    settings_marker: str = "settings.gradle"  # Standalone build marker
    module_marker: str = "build.gradle"
    script_suffix: str = ".kts"  # Secondary syntax, e.g. build.gradle.kts


@dataclass(frozen=True)
class RootContext:
    """The directory where classification begins."""

    root_dir: Path  # Absolute
    name: str  # Display name of the build graph

    @classmethod
    def from_path(cls, root_dir: Path, name: str | None = None) -> Self:
        """Create a context, defaulting the name to the root directory's name.

        A filesystem root such as "/" has no name, so its full path is used.
        """
        if name is None:
            name = root_dir.name or str(root_dir)
        return cls(root_dir=root_dir, name=name)


@dataclass(frozen=True)
class DirectoryEntry:
    """One child of a listed directory."""

    path: Path
    is_dir: bool
    is_file: bool

    @property
    def name(self) -> str:
        return self.path.name


@dataclass(frozen=True)
class ExternalBuild:
    """Directory holds a standalone build marker."""

    path: Path  # Directory containing the marker
    marker: Path


@dataclass(frozen=True)
class Module:
    """Directory holds a module marker and no standalone build marker."""

    path: Path
    marker: Path
    name: str


@dataclass(frozen=True)
class NoMarker:
    """Directory holds no marker; its visible subdirectories should be visited."""


ClassificationResult = ExternalBuild | Module | NoMarker


@dataclass(frozen=True)
class IncludeBuild:
    """Include the build rooted at relative_path as a linked external build."""

    relative_path: str


@dataclass(frozen=True)
class IncludeModule:
    """Include the module rooted at relative_path under the given name."""

    name: str
    relative_path: str

    @property
    def project_path(self) -> str:
        """Project path as registered in the build graph (e.g. ':javaapi')."""
        return f":{self.name}"


LinkDirective = IncludeBuild | IncludeModule


@dataclass
class IncludePlan:
    """Plan for what a scan would register."""

    root_name: str
    root_dir: Path
    directives: list[LinkDirective] = field(default_factory=list)
    sorted_siblings: bool = False  # Whether siblings were visited in name order

    @property
    def builds(self) -> list[IncludeBuild]:
        return [d for d in self.directives if isinstance(d, IncludeBuild)]

    @property
    def modules(self) -> list[IncludeModule]:
        return [d for d in self.directives if isinstance(d, IncludeModule)]


@dataclass
class ProjectEntry:
    """A module registered in a build graph."""

    name: str
    project_dir: str  # Relative to the root, forward slashes

    @property
    def project_path(self) -> str:
        return f":{self.name}"
