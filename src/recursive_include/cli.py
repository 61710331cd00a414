"""Command-line interface for recursive-include."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from recursive_include import __version__
from recursive_include.exceptions import BuildNotFoundError
from recursive_include.exceptions import DuplicateModuleError
from recursive_include.exceptions import RecursiveIncludeError
from recursive_include.exceptions import RegistryValidationError
from recursive_include.exceptions import RegistryVersionError
from recursive_include.exceptions import RootDirectoryError
from recursive_include.operations import compute_include_plan
from recursive_include.operations import execute_include_plan
from recursive_include.operations import find_build
from recursive_include.operations import forget_build
from recursive_include.output import print_directives
from recursive_include.output import print_duplicate_module_error
from recursive_include.output import print_include_plan
from recursive_include.output import print_scan
from recursive_include.registry import Registry

app = typer.Typer(help="Discover Gradle builds and modules in a directory tree")

RegistryOption = Annotated[
    Path | None,
    typer.Option("--registry", help="Registry file (default: user state dir)"),
]
DryRunOption = Annotated[
    bool, typer.Option("--dry-run", "-n", help="Show what would be done")
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"recursive-include {__version__}")
        raise typer.Exit()


@app.callback()
def main_callback(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version", callback=version_callback, is_eager=True, help="Show version"
        ),
    ] = None,
    verbose: Annotated[
        bool, typer.Option("--verbose", "-v", help="Log each directory visited")
    ] = False,
) -> None:
    """Discover Gradle builds and modules in a directory tree."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command()
def scan(
    root: Annotated[Path, typer.Argument(help="Root directory to scan")],
    dry_run: DryRunOption = False,
    sort: Annotated[
        bool,
        typer.Option(help="Visit sibling directories in name order"),
    ] = True,
    name: Annotated[
        str | None,
        typer.Option(help="Root project name (default: root directory name)"),
    ] = None,
    plain: Annotated[
        bool, typer.Option("--plain", help="Print one tab-separated line per entry")
    ] = False,
    registry: RegistryOption = None,
) -> None:
    """Scan a directory tree and save the builds and modules found."""
    registry_path = registry or Registry.default_path()

    try:
        plan = compute_include_plan(root, sort=sort, name=name)
        if plain:
            print_directives(plan)
        else:
            print_include_plan(plan, dry_run=dry_run)

        if not dry_run:
            execute_include_plan(plan, registry_path)
    except RootDirectoryError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except DuplicateModuleError as e:
        print_duplicate_module_error(e)
        raise typer.Exit(1) from None
    except (RegistryValidationError, RegistryVersionError) as e:
        typer.secho(f"✗ Registry error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except PermissionError as e:
        typer.secho(
            f"✗ Permission denied: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None
    except RecursiveIncludeError as e:
        typer.secho(f"✗ Error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None


@app.command()
def show(
    root: Annotated[Path, typer.Argument(help="Root directory that was scanned")],
    registry: RegistryOption = None,
) -> None:
    """Show the saved build graph for a root directory."""
    registry_path = registry or Registry.default_path()

    try:
        print_scan(find_build(root, registry_path))
    except BuildNotFoundError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except (RegistryValidationError, RegistryVersionError) as e:
        typer.secho(f"✗ Registry error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None


@app.command()
def forget(
    root: Annotated[Path, typer.Argument(help="Root directory that was scanned")],
    dry_run: DryRunOption = False,
    registry: RegistryOption = None,
) -> None:
    """Remove the saved build graph for a root directory."""
    registry_path = registry or Registry.default_path()

    try:
        if dry_run:
            record = find_build(root, registry_path)
        else:
            record = forget_build(root, registry_path)
        action = "Would forget" if dry_run else "Forgot"
        typer.secho(
            f"✓ {action} {record.settings.root_name}",
            fg=typer.colors.GREEN,
            bold=True,
        )
    except BuildNotFoundError as e:
        typer.secho(f"✗ {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except (RegistryValidationError, RegistryVersionError) as e:
        typer.secho(f"✗ Registry error: {e}", fg=typer.colors.RED, bold=True, err=True)
        raise typer.Exit(1) from None
    except OSError as e:
        typer.secho(
            f"✗ Filesystem error: {e}", fg=typer.colors.RED, bold=True, err=True
        )
        raise typer.Exit(1) from None


def main() -> None:
    """Main entry point for the recursive-include CLI."""
    app()


if __name__ == "__main__":
    main()
