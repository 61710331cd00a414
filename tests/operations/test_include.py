"""Tests for include operations."""

from pathlib import Path
from unittest.mock import MagicMock
from unittest.mock import call
from unittest.mock import patch

import pytest

from recursive_include.exceptions import DuplicateModuleError
from recursive_include.exceptions import RootDirectoryError
from recursive_include.models import IncludeBuild
from recursive_include.models import IncludeModule
from recursive_include.models import IncludePlan
from recursive_include.operations import apply_directives
from recursive_include.operations import compute_include_plan
from recursive_include.operations import execute_include_plan
from recursive_include.operations import include_recursive
from recursive_include.registrar import BuildSettings
from recursive_include.registry import Registry


def touch(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.touch()


@pytest.fixture
def platform_dir(tmp_path):
    """A root with a linked build, two modules and some noise."""
    root = tmp_path / "platform"
    touch(root / "settings.gradle.kts")
    touch(root / "apps" / "web" / "build.gradle.kts")
    touch(root / "apps" / "web" / "src" / "build.gradle")
    touch(root / "libs" / "core" / "build.gradle")
    touch(root / "tools" / "plugin" / "settings.gradle")
    touch(root / "tools" / "plugin" / "build.gradle")
    touch(root / "build" / "tmp" / "build.gradle")
    touch(root / ".gradle" / "cache" / "settings.gradle")
    return root


class TestComputeIncludePlan:
    """Tests for compute_include_plan()."""

    def test_calls_normalize_root_dir(self, platform_dir):
        """Test that compute_include_plan calls normalize_root_dir."""
        with patch(
            "recursive_include.operations.include.normalize_root_dir",
            return_value=platform_dir,
        ) as mock_normalize:
            compute_include_plan(platform_dir)
            mock_normalize.assert_called_once_with(platform_dir)

    def test_plan_contents(self, platform_dir):
        plan = compute_include_plan(platform_dir, sort=True)

        assert plan.root_name == "platform"
        assert plan.root_dir == platform_dir.resolve()
        assert plan.directives == [
            IncludeModule(name="web", relative_path="apps/web"),
            IncludeModule(name="core", relative_path="libs/core"),
            IncludeBuild(relative_path="tools/plugin"),
        ]
        assert plan.builds == [IncludeBuild(relative_path="tools/plugin")]
        assert [m.name for m in plan.modules] == ["web", "core"]

    def test_custom_root_name(self, platform_dir):
        plan = compute_include_plan(platform_dir, name="example")

        assert plan.root_name == "example"

    def test_records_sort_option(self, platform_dir):
        assert compute_include_plan(platform_dir, sort=True).sorted_siblings
        assert not compute_include_plan(platform_dir).sorted_siblings

    def test_relative_root_is_resolved(self, platform_dir, monkeypatch):
        monkeypatch.chdir(platform_dir.parent)

        plan = compute_include_plan(Path("platform"), sort=True)

        assert plan.root_dir.is_absolute()
        assert plan.root_name == "platform"
        assert len(plan.directives) == 3

    def test_empty_root(self, tmp_path):
        plan = compute_include_plan(tmp_path)

        assert plan.directives == []

    def test_missing_root_raises(self, tmp_path):
        with pytest.raises(RootDirectoryError):
            compute_include_plan(tmp_path / "missing")


class TestApplyDirectives:
    """Tests for apply_directives()."""

    def test_calls_registrar_in_order(self):
        """Test that the root name comes first, then directives in plan order."""
        plan = IncludePlan(
            root_name="platform",
            root_dir=Path("/work/platform"),
            directives=[
                IncludeModule(name="web", relative_path="apps/web"),
                IncludeBuild(relative_path="tools/plugin"),
                IncludeModule(name="core", relative_path="libs/core"),
            ],
        )
        registrar = MagicMock()

        apply_directives(plan, registrar)

        assert registrar.mock_calls == [
            call.set_root_name("platform"),
            call.include_module("web", "apps/web"),
            call.include_build("tools/plugin"),
            call.include_module("core", "libs/core"),
        ]

    def test_duplicate_module_names_surface_from_registrar(self, tmp_path):
        """Test that duplicate names are rejected by the registrar, not the scan."""
        touch(tmp_path / "apps" / "core" / "build.gradle")
        touch(tmp_path / "libs" / "core" / "build.gradle")
        plan = compute_include_plan(tmp_path, sort=True)

        assert len(plan.modules) == 2
        with pytest.raises(DuplicateModuleError):
            apply_directives(plan, BuildSettings())


class TestIncludeRecursive:
    """Tests for include_recursive()."""

    def test_registers_everything(self, platform_dir):
        settings = BuildSettings()

        include_recursive(platform_dir, settings, sort=True)

        assert settings.root_name == "platform"
        assert settings.included_builds == ["tools/plugin"]
        assert {p: e.project_dir for p, e in settings.projects.items()} == {
            ":web": "apps/web",
            ":core": "libs/core",
        }

    def test_custom_root_name(self, platform_dir):
        """Test that the root display name can be overridden."""
        settings = BuildSettings()

        plan = include_recursive(platform_dir, settings, name="example")

        assert plan.root_name == "example"
        assert settings.root_name == "example"


class TestExecuteIncludePlan:
    """Tests for execute_include_plan()."""

    def test_saves_scan(self, platform_dir, tmp_path):
        registry_path = tmp_path / "registry.json"
        plan = compute_include_plan(platform_dir, sort=True)

        record = execute_include_plan(plan, registry_path)

        registry = Registry.load(registry_path)
        assert registry.scans == {platform_dir.resolve(): record}
        assert record.settings.included_builds == ["tools/plugin"]
        assert record.sorted_siblings is True
        assert record.scanned_at.endswith("+00:00")

    def test_rescan_replaces_previous_entry(self, platform_dir, tmp_path):
        """Test that scanning a root again overwrites its saved graph."""
        registry_path = tmp_path / "registry.json"
        execute_include_plan(compute_include_plan(platform_dir), registry_path)
        touch(platform_dir / "libs" / "extra" / "build.gradle")

        execute_include_plan(compute_include_plan(platform_dir), registry_path)

        registry = Registry.load(registry_path)
        assert len(registry.scans) == 1
        record = registry.get(platform_dir)
        assert ":extra" in record.settings.projects
        assert record.sorted_siblings is False

    def test_keeps_other_roots(self, tmp_path):
        registry_path = tmp_path / "registry.json"
        touch(tmp_path / "one" / "a" / "build.gradle")
        touch(tmp_path / "two" / "b" / "build.gradle")

        execute_include_plan(compute_include_plan(tmp_path / "one"), registry_path)
        execute_include_plan(compute_include_plan(tmp_path / "two"), registry_path)

        registry = Registry.load(registry_path)
        names = sorted(r.settings.root_name for r in registry.scans.values())
        assert names == ["one", "two"]

    def test_duplicate_module_does_not_save(self, tmp_path):
        registry_path = tmp_path / "state" / "registry.json"
        root = tmp_path / "root"
        touch(root / "a" / "core" / "build.gradle")
        touch(root / "b" / "core" / "build.gradle")
        plan = compute_include_plan(root)

        with pytest.raises(DuplicateModuleError):
            execute_include_plan(plan, registry_path)

        assert not registry_path.exists()
