"""Scaffold Error Taxonomy.

This module defines the error hierarchy for create-component, providing
structured error handling with specific error codes and context
information. Every failure is terminal for a single invocation; the CLI
prints the message and exits non-zero.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any


class ScaffoldError(Exception):
    """Base exception for all scaffolding errors.

    Attributes:
        code: Error code following the scaffold:<area>/<reason> pattern
        message: Human-readable error message
        details: Optional additional error context
    """

    def __init__(self, code: str, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Serialize to ``{code, message, details}`` dict."""
        return {
            "code": self.code,
            "message": self.message,
            "details": self.details,
        }


class MissingComponentNameError(ScaffoldError):
    """Raised when no component name was supplied on the command line."""

    def __init__(self, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="scaffold:usage/missing_name",
            message="Please provide a component name",
            details=details or {},
        )


class InvalidComponentNameError(ScaffoldError):
    """Raised when a component name is not PascalCase.

    Attributes:
        name: The rejected name
    """

    def __init__(self, name: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="scaffold:validation/invalid_name",
            message="Component name should be in PascalCase (e.g., ExampleButton)",
            details={"name": name, **(details or {})},
        )
        self.name = name


class ComponentExistsError(ScaffoldError):
    """Raised when the target component directory is already present.

    Nothing is created or overwritten when this is raised.

    Attributes:
        name: Component name
        path: The existing component directory
    """

    def __init__(self, name: str, path: Path, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="scaffold:collision/component_exists",
            message=f'Component "{name}" already exists',
            details={"name": name, "path": str(path), **(details or {})},
        )
        self.name = name
        self.path = path


class ComponentsDirError(ScaffoldError):
    """Raised when the default components directory cannot be created.

    Attributes:
        path: The directory that could not be created
        reason: Underlying OS error text
    """

    def __init__(self, path: Path, reason: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(
            code="scaffold:filesystem/components_dir",
            message=f"Could not create components folder: {reason}",
            details={"path": str(path), "reason": reason, **(details or {})},
        )
        self.path = path
        self.reason = reason


class ScaffoldWriteError(ScaffoldError):
    """Raised when creating the component directory or one of its files fails.

    The partially written directory has already been rolled back (best
    effort) by the time this is raised.

    Attributes:
        name: Component name
        path: The component directory that was being written
        reason: Underlying OS error text
        rollback_error: The error raised while removing the partial
            directory, or None if the rollback succeeded
    """

    def __init__(
        self,
        name: str,
        path: Path,
        reason: str,
        rollback_error: OSError | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        super().__init__(
            code="scaffold:filesystem/write_failed",
            message=f"Error creating component: {reason}",
            details={
                "name": name,
                "path": str(path),
                "reason": reason,
                "rollback_failed": rollback_error is not None,
                **(details or {}),
            },
        )
        self.name = name
        self.path = path
        self.reason = reason
        self.rollback_error = rollback_error
