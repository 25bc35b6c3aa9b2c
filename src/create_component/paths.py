"""Filesystem probing and components directory discovery.

The locator walks an ordered tuple of candidate directories relative to the
project root and returns the first one that exists as a directory. When
none does, it creates ``src/components``.

Example:
    >>> located = locate_components_dir(Path("/work/app"))
    >>> located.path
    PosixPath('/work/app/src/components')
"""

from __future__ import annotations

import os
from collections.abc import Sequence
from pathlib import Path

from create_component.errors import ComponentsDirError
from create_component.models import ComponentsDirectory
from create_component.observability import get_logger

logger = get_logger(__name__)

# Common component directory layouts, highest priority first
COMPONENT_DIR_CANDIDATES: tuple[Path, ...] = (
    Path("components"),
    Path("src", "components"),
    Path("app", "components"),
    Path("src", "app", "components"),
    Path("lib", "components"),
    Path("src", "lib", "components"),
)

# Created when no candidate exists
DEFAULT_COMPONENTS_DIR = Path("src", "components")


def exists(path: Path | str) -> bool:
    """Return True if the path can be accessed.

    Every access failure (missing entry, permission denied, broken link)
    is reported as False.
    """
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def is_directory(path: Path | str) -> bool:
    """Return True if the path exists and is a directory."""
    if not exists(path):
        return False
    try:
        return Path(path).is_dir()
    except OSError:
        return False


def locate_components_dir(
    root: Path | None = None,
    candidates: Sequence[Path] = COMPONENT_DIR_CANDIDATES,
) -> ComponentsDirectory:
    """Find the components directory under root, creating the default one if needed.

    Args:
        root: Project root; defaults to the current working directory.
        candidates: Relative directories to probe, in priority order.

    Returns:
        The first candidate that is an existing directory, or the newly
        created default directory (``created=True``).

    Raises:
        ComponentsDirError: If the default directory cannot be created.
    """
    base = Path.cwd() if root is None else Path(root)

    for candidate in candidates:
        path = base / candidate
        logger.debug("scaffold.locator.probe", candidate=str(candidate))
        if is_directory(path):
            logger.info("scaffold.locator.found", path=str(path))
            return ComponentsDirectory(path=path, created=False)

    create_path = base / DEFAULT_COMPONENTS_DIR
    try:
        create_path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        logger.error("scaffold.locator.create_failed", path=str(create_path), error=str(exc))
        raise ComponentsDirError(create_path, str(exc)) from exc

    logger.info("scaffold.locator.created", path=str(create_path))
    return ComponentsDirectory(path=create_path, created=True)
