"""Component name validation and style token derivation."""

import re

from create_component.errors import InvalidComponentNameError, MissingComponentNameError

# PascalCase: leading uppercase letter, alphanumeric tail, no separators
PASCAL_CASE_PATTERN = re.compile(r"^[A-Z][a-zA-Z0-9]*$")

STYLE_TOKEN_SEPARATOR = "-"

_UPPERCASE_LETTER = re.compile(r"([A-Z])")


def validate_component_name(raw: str | None) -> str:
    """Return raw unchanged if it is a usable component name.

    Raises:
        MissingComponentNameError: If raw is None or empty.
        InvalidComponentNameError: If raw is not PascalCase.
    """
    if not raw:
        raise MissingComponentNameError()
    # fullmatch: "$" alone would accept a trailing newline
    if PASCAL_CASE_PATTERN.fullmatch(raw) is None:
        raise InvalidComponentNameError(raw)
    return raw


def derive_style_token(name: str) -> str:
    """Convert a PascalCase name to the kebab-case token used for the stylesheet.

    Example:
        >>> derive_style_token("ExampleButton")
        'example-button'
    """
    hyphenated = _UPPERCASE_LETTER.sub(rf"{STYLE_TOKEN_SEPARATOR}\1", name).lower()
    return hyphenated[1:]
