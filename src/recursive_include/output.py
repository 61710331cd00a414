"""Output formatting for recursive-include operations."""

from pathlib import Path

import typer

from recursive_include.exceptions import DuplicateModuleError
from recursive_include.models import IncludeBuild
from recursive_include.models import IncludePlan
from recursive_include.registry import ScanRecord


def print_include_plan(plan: IncludePlan, dry_run: bool = False) -> None:
    """Print include plan to stdout.

    Args:
        plan: IncludePlan to print
        dry_run: If True, use "Would" language instead of present tense
    """
    build_verb = "Would include builds" if dry_run else "Including builds"
    module_verb = "Would include modules" if dry_run else "Including modules"

    typer.secho(
        f"Root project: {plan.root_name} ({_display_path(plan.root_dir)})",
        fg=typer.colors.BRIGHT_BLACK,
    )

    if plan.builds:
        typer.secho(f"{build_verb}:", fg=typer.colors.BRIGHT_BLACK)
        for build in plan.builds:
            typer.secho(f"  {build.relative_path}", fg=typer.colors.BRIGHT_BLACK)

    if plan.modules:
        typer.secho(f"{module_verb}:", fg=typer.colors.BRIGHT_BLACK)
        for module in plan.modules:
            typer.secho(
                f"  {module.project_path} -> {module.relative_path}",
                fg=typer.colors.BRIGHT_BLACK,
            )

    # Summary line
    num_builds = len(plan.builds)
    num_modules = len(plan.modules)
    parts = []
    if num_builds > 0:
        parts.append(f"{num_builds} build{'s' if num_builds != 1 else ''}")
    if num_modules > 0:
        parts.append(f"{num_modules} module{'s' if num_modules != 1 else ''}")

    summary = ", ".join(parts) if parts else "nothing found"
    action = "Would include" if dry_run else "Included"
    typer.secho(
        f"✓ {action} {plan.root_name} ({summary})", fg=typer.colors.GREEN, bold=True
    )


def print_directives(plan: IncludePlan) -> None:
    """Print one directive per line, in traversal order, for scripting."""
    for directive in plan.directives:
        if isinstance(directive, IncludeBuild):
            typer.echo(f"build\t{directive.relative_path}")
        else:
            typer.echo(f"module\t{directive.name}\t{directive.relative_path}")


def print_scan(record: ScanRecord) -> None:
    """Print a saved build graph and how it was scanned."""
    settings = record.settings
    typer.secho(
        f"{settings.root_name} ({_display_path(record.root_dir)})",
        fg=typer.colors.GREEN,
        bold=True,
    )
    order = "name order" if record.sorted_siblings else "listing order"
    typer.secho(
        f"Scanned {record.scanned_at} ({order})", fg=typer.colors.BRIGHT_BLACK
    )
    if settings.included_builds:
        typer.echo("Included builds:")
        for path in settings.included_builds:
            typer.echo(f"  {path}")
    if settings.projects:
        typer.echo("Modules:")
        for project_path, entry in settings.projects.items():
            typer.echo(f"  {project_path} -> {entry.project_dir}")
    if not settings.included_builds and not settings.projects:
        typer.secho("  (empty)", fg=typer.colors.BRIGHT_BLACK)


def print_duplicate_module_error(error: DuplicateModuleError) -> None:
    """Print duplicate module error to stderr."""
    typer.secho(
        f"✗ Duplicate module name '{error.name}':",
        fg=typer.colors.RED,
        bold=True,
        err=True,
    )
    typer.secho(f"  {error.existing_dir}", err=True)
    typer.secho(f"  {error.new_dir}", err=True)
    typer.secho("\nRename one of the directories so module names are unique", err=True)


def _display_path(path: Path) -> str:
    """Format path for display, using ~ for home directory.

    Args:
        path: Path to format

    Returns:
        String representation with ~ substitution if applicable
    """
    try:
        rel_path = path.relative_to(Path.home())
        return f"~/{rel_path}"
    except ValueError:
        # Not under home
        return str(path)
