"""Result models passed between the locator, the writer and the CLI.

All models are frozen and reject unknown fields, so a result handed to the
CLI cannot be altered on the way.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict


class ScaffoldBaseModel(BaseModel):
    """Base model for scaffolding results."""

    model_config = ConfigDict(
        # Immutability: prevents accidental mutations after creation
        frozen=True,
        # Strict validation: reject unknown fields to catch typos
        extra="forbid",
        validate_default=True,
    )


class ComponentsDirectory(ScaffoldBaseModel):
    """Components directory chosen by the locator.

    Attributes:
        path: Absolute path of an existing directory
        created: True when the locator had to create it
    """

    path: Path
    created: bool = False


class ScaffoldResult(ScaffoldBaseModel):
    """Files produced by a successful scaffold.

    Example:
        >>> result.source_file.name
        'ExampleButton.tsx'
        >>> result.style_file.name
        '_example-button.scss'
    """

    name: str
    style_token: str
    components_dir: Path
    component_dir: Path
    source_file: Path
    style_file: Path

    @property
    def relative_files(self) -> tuple[str, str]:
        """Return the source and stylesheet paths relative to the components directory."""
        return (
            self.source_file.relative_to(self.components_dir).as_posix(),
            self.style_file.relative_to(self.components_dir).as_posix(),
        )
