"""Scaffold writer: creates the component directory and its two files.

The writer refuses to touch an existing component directory. If creating
the directory or writing either file fails, the partially written
directory is removed before the error is raised.
"""

from __future__ import annotations

import shutil
from pathlib import Path

from create_component.errors import ComponentExistsError, ScaffoldWriteError
from create_component.models import ScaffoldResult
from create_component.observability import get_logger, is_debug_mode
from create_component.paths import exists
from create_component.templates import (
    render_source,
    render_stylesheet,
    source_filename,
    stylesheet_filename,
)

logger = get_logger(__name__)


def component_dir_for(components_dir: Path, name: str) -> Path:
    """Return the directory a component named name is written to."""
    return Path(components_dir) / name


def ensure_available(components_dir: Path, name: str) -> Path:
    """Return the component directory, failing if it already exists.

    Raises:
        ComponentExistsError: If the component directory is present.
    """
    component_dir = component_dir_for(components_dir, name)
    if exists(component_dir):
        raise ComponentExistsError(name, component_dir)
    return component_dir


def rollback(component_dir: Path) -> OSError | None:
    """Recursively delete a partially written component directory.

    Never raises. Returns the error that prevented the deletion, or None if
    the directory is gone (or was never created).
    """
    if not exists(component_dir):
        return None
    try:
        shutil.rmtree(component_dir)
    except OSError as exc:
        logger.warning("scaffold.rollback.failed", path=str(component_dir), error=str(exc))
        return exc
    logger.info("scaffold.rollback.completed", path=str(component_dir))
    return None


def write_component(components_dir: Path, name: str, style_token: str) -> ScaffoldResult:
    """Write ``{name}.tsx`` and ``_{style_token}.scss`` under ``components_dir/name``.

    Args:
        components_dir: Existing components directory.
        name: Validated PascalCase component name.
        style_token: Token derived from name.

    Returns:
        ScaffoldResult describing the written files.

    Raises:
        ComponentExistsError: If the component directory already exists.
        ScaffoldWriteError: If any filesystem step fails; the partial
            directory has been rolled back.
    """
    components_dir = Path(components_dir)
    component_dir = ensure_available(components_dir, name)
    source_file = component_dir / source_filename(name)
    style_file = component_dir / stylesheet_filename(style_token)

    try:
        component_dir.mkdir(parents=True, exist_ok=True)
        source_file.write_text(render_source(name, style_token), encoding="utf-8")
        style_file.write_text(render_stylesheet(style_token), encoding="utf-8")
    except OSError as exc:
        logger.error(
            "scaffold.write.failed",
            path=str(component_dir),
            error=str(exc),
            exc_info=is_debug_mode(),
        )
        rollback_error = rollback(component_dir)
        raise ScaffoldWriteError(name, component_dir, str(exc), rollback_error) from exc

    logger.info("scaffold.write.completed", path=str(component_dir))
    return ScaffoldResult(
        name=name,
        style_token=style_token,
        components_dir=components_dir,
        component_dir=component_dir,
        source_file=source_file,
        style_file=style_file,
    )
