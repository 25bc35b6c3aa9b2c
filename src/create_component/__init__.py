"""create-component: scaffold a front-end component and its stylesheet.

Example:
    >>> from create_component import derive_style_token, locate_components_dir, write_component
    >>> located = locate_components_dir()
    >>> write_component(located.path, "ExampleButton", derive_style_token("ExampleButton"))
"""

__version__ = "0.1.0"

from create_component.errors import (  # noqa: E402
    ComponentExistsError,
    ComponentsDirError,
    InvalidComponentNameError,
    MissingComponentNameError,
    ScaffoldError,
    ScaffoldWriteError,
)
from create_component.models import ComponentsDirectory, ScaffoldResult  # noqa: E402
from create_component.naming import derive_style_token, validate_component_name  # noqa: E402
from create_component.paths import exists, locate_components_dir  # noqa: E402
from create_component.writer import write_component  # noqa: E402

__all__ = [
    "ComponentExistsError",
    "ComponentsDirError",
    "ComponentsDirectory",
    "InvalidComponentNameError",
    "MissingComponentNameError",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldWriteError",
    "__version__",
    "derive_style_token",
    "exists",
    "locate_components_dir",
    "validate_component_name",
    "write_component",
]
