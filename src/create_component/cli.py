"""Command-line interface for create-component.

Scaffolds a React function component and its SCSS partial inside the
project's components directory.

Example:
    >>> # From terminal:
    >>> # create-component ExampleButton
    >>> # create-component --version
    >>> # create-component -v MyCard   # debug logging on stderr
"""

from typing import Annotated, NoReturn, Optional

import typer

from create_component import __version__
from create_component.errors import (
    MissingComponentNameError,
    ScaffoldError,
    ScaffoldWriteError,
)
from create_component.naming import derive_style_token, validate_component_name
from create_component.observability import (
    bind_context,
    clear_context,
    configure_logging,
    get_logger,
)
from create_component.paths import locate_components_dir
from create_component.writer import write_component

app = typer.Typer(help="Scaffold a component and its stylesheet.", add_completion=False)

logger = get_logger(__name__)

USAGE = "Usage: create-component ComponentName"

ERROR_ICON = "❌"
WARNING_ICON = "⚠️"


def _version_callback(value: bool) -> None:
    """Print the version and exit when requested."""
    if value:
        typer.echo(__version__)
        raise typer.Exit()


VERSION_OPTION = typer.Option(
    False,
    "--version",
    help="Show create-component version and exit.",
    callback=_version_callback,
    is_eager=True,
)
VERBOSE_OPTION = typer.Option(False, "--verbose", "-v", help="Enable debug logging on stderr.")


def _fail(exc: ScaffoldError) -> NoReturn:
    """Report a fatal error on stderr and exit with status 1."""
    typer.echo(f"{ERROR_ICON} {exc.message}", err=True)
    raise typer.Exit(1) from exc


# Dash-prefixed or extra tokens reach name validation instead of the option
# parser, so every bad invocation exits 1 with a ❌ line.
@app.command(context_settings={"ignore_unknown_options": True, "allow_extra_args": True})
def create(
    name: Annotated[
        Optional[str],
        typer.Argument(help="Component name in PascalCase (e.g. ExampleButton).", show_default=False),
    ] = None,
    version: bool = VERSION_OPTION,
    verbose: bool = VERBOSE_OPTION,
) -> None:
    """Create COMPONENTS_DIR/NAME/NAME.tsx and its _name.scss partial."""
    configure_logging(log_level="DEBUG" if verbose else None, force=True)
    clear_context()

    try:
        component_name = validate_component_name(name)
    except MissingComponentNameError as exc:
        typer.echo(f"{ERROR_ICON} {exc.message}", err=True)
        typer.echo(USAGE)
        raise typer.Exit(1) from exc
    except ScaffoldError as exc:
        _fail(exc)

    bind_context(component=component_name)

    try:
        located = locate_components_dir()
    except ScaffoldError as exc:
        _fail(exc)
    if located.created:
        typer.echo(f"📁 No components folder found. Creating: {located.path}")
    else:
        typer.echo(f"🔍 Found components folder: {located.path}")

    style_token = derive_style_token(component_name)

    try:
        result = write_component(located.path, component_name, style_token)
    except ScaffoldWriteError as exc:
        typer.echo(f"{ERROR_ICON} {exc.message}", err=True)
        if exc.rollback_error is not None:
            typer.echo(
                f"{WARNING_ICON} Could not remove partial component folder {exc.path}: "
                f"{exc.rollback_error}",
                err=True,
            )
        raise typer.Exit(1) from exc
    except ScaffoldError as exc:
        _fail(exc)

    source_rel, style_rel = result.relative_files
    typer.echo(f'✅ Component "{result.name}" created successfully!')
    typer.echo(f"📁 Created in: {result.components_dir}/")
    typer.echo(f"📄 Created: {source_rel}")
    typer.echo(f"🎨 Created: {style_rel}")
    logger.debug("scaffold.completed", style_token=style_token)


def main() -> None:
    """Run the create-component CLI."""
    app()


if __name__ == "__main__":
    main()
