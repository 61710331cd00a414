"""Scan a root directory and register what it contains."""

import logging
from datetime import UTC
from datetime import datetime
from pathlib import Path

from recursive_include.files.discover import traverse
from recursive_include.files.markers import DEFAULT_CONFIG
from recursive_include.files.paths import normalize_root_dir
from recursive_include.models import IncludeBuild
from recursive_include.models import IncludePlan
from recursive_include.models import MarkerConfig
from recursive_include.models import RootContext
from recursive_include.registrar import BuildSettings
from recursive_include.registrar import Registrar
from recursive_include.registry import Registry
from recursive_include.registry import ScanRecord

logger = logging.getLogger(__name__)


def compute_include_plan(
    root_dir: Path,
    config: MarkerConfig = DEFAULT_CONFIG,
    sort: bool = False,
    name: str | None = None,
) -> IncludePlan:
    """Compute the builds and modules found below root_dir.

    Args:
        root_dir: Directory to scan (will be resolved to absolute)
        config: Marker naming conventions
        sort: If True, visit sibling directories in name order
        name: Display name for the build graph (default: root_dir's name)

    Returns:
        IncludePlan with directives in traversal order

    Raises:
        RootDirectoryError: If root_dir does not exist or is not a directory
    """
    root_dir = normalize_root_dir(root_dir)
    root = RootContext.from_path(root_dir, name=name)

    directives = list(traverse(root, config=config, sort=sort))
    logger.debug("Found %d directives below %s", len(directives), root_dir)

    return IncludePlan(
        root_name=root.name,
        root_dir=root_dir,
        directives=directives,
        sorted_siblings=sort,
    )


def apply_directives(plan: IncludePlan, registrar: Registrar) -> None:
    """Declare the root name, then every directive in plan order.

    Args:
        plan: IncludePlan to apply
        registrar: Build graph receiving the declarations

    Raises:
        DuplicateModuleError: If the registrar rejects a module name
    """
    registrar.set_root_name(plan.root_name)
    for directive in plan.directives:
        if isinstance(directive, IncludeBuild):
            registrar.include_build(directive.relative_path)
        else:
            registrar.include_module(directive.name, directive.relative_path)


def include_recursive(
    root_dir: Path,
    registrar: Registrar,
    config: MarkerConfig = DEFAULT_CONFIG,
    sort: bool = False,
    name: str | None = None,
) -> IncludePlan:
    """Scan root_dir and register everything found with registrar.

    Args:
        root_dir: Directory to scan
        registrar: Build graph receiving the declarations
        config: Marker naming conventions
        sort: If True, visit sibling directories in name order
        name: Display name for the build graph (default: root_dir's name)

    Returns:
        The applied IncludePlan
    """
    plan = compute_include_plan(root_dir, config=config, sort=sort, name=name)
    apply_directives(plan, registrar)
    return plan


def execute_include_plan(plan: IncludePlan, registry_path: Path) -> ScanRecord:
    """Apply a plan to fresh settings and save them in the registry.

    A previous scan of the same root is replaced. Nothing is saved if the
    settings reject a directive.

    Args:
        plan: IncludePlan to execute
        registry_path: Path to registry file

    Returns:
        The saved ScanRecord
    """
    settings = BuildSettings()
    apply_directives(plan, settings)

    record = ScanRecord(
        root_dir=plan.root_dir,
        settings=settings,
        sorted_siblings=plan.sorted_siblings,
        scanned_at=datetime.now(UTC).isoformat(),
    )
    registry = Registry.load(registry_path)
    registry.put(record)
    registry.save(registry_path)

    return record
