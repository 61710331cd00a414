"""Build-graph registrars that receive discovered builds and modules."""

from dataclasses import dataclass
from dataclasses import field
from typing import Protocol
from typing import Self

from recursive_include.exceptions import DuplicateModuleError
from recursive_include.models import ProjectEntry


class Registrar(Protocol):
    """Host API for declaring the build hierarchy."""

    def set_root_name(self, name: str) -> None: ...

    def include_build(self, relative_path: str) -> None: ...

    def include_module(self, name: str, relative_path: str) -> None: ...


@dataclass
class BuildSettings:
    """In-memory build graph: a root name, linked builds and modules."""

    root_name: str = ""
    included_builds: list[str] = field(default_factory=list)
    projects: dict[str, ProjectEntry] = field(default_factory=dict)  # path -> entry

    def set_root_name(self, name: str) -> None:
        self.root_name = name

    def include_build(self, relative_path: str) -> None:
        if relative_path not in self.included_builds:
            self.included_builds.append(relative_path)

    def include_module(self, name: str, relative_path: str) -> None:
        """Register a module as project ':name' located at relative_path.

        Raises:
            DuplicateModuleError: If name is already registered for a
                different directory
        """
        entry = ProjectEntry(name=name, project_dir=relative_path)
        existing = self.projects.get(entry.project_path)
        if existing is not None:
            if existing.project_dir != relative_path:
                raise DuplicateModuleError(name, existing.project_dir, relative_path)
            return
        self.projects[entry.project_path] = entry

    def to_dict(self) -> dict:
        """Convert to JSON-serializable dict."""
        return {
            "root_name": self.root_name,
            "included_builds": list(self.included_builds),
            "projects": [
                {"name": p.name, "project_dir": p.project_dir}
                for p in self.projects.values()
            ],
        }

    @classmethod
    def from_dict(cls, data: dict) -> Self:
        """Create from dict loaded from JSON."""
        settings = cls(
            root_name=data["root_name"],
            included_builds=list(data["included_builds"]),
        )
        for project in data["projects"]:
            settings.include_module(project["name"], project["project_dir"])
        return settings
