"""File templates for a scaffolded component."""

SOURCE_EXTENSION = "tsx"
STYLE_EXTENSION = "scss"

SOURCE_TEMPLATE = """import "./{stylesheet}";

export default function {name}() {{
  return (
    <div className="{token}">
      <h1>{name}</h1>
    </div>
  );
}}
"""

STYLESHEET_TEMPLATE = """.{token} {{
  // Add your styles here

}}
"""


def source_filename(name: str) -> str:
    """Return the component source filename, e.g. ``ExampleButton.tsx``."""
    return f"{name}.{SOURCE_EXTENSION}"


def stylesheet_filename(token: str) -> str:
    """Return the partial stylesheet filename, e.g. ``_example-button.scss``."""
    return f"_{token}.{STYLE_EXTENSION}"


def render_source(name: str, token: str) -> str:
    """Render the function component that imports its stylesheet."""
    return SOURCE_TEMPLATE.format(name=name, token=token, stylesheet=stylesheet_filename(token))


def render_stylesheet(token: str) -> str:
    """Render the placeholder rule for the component class."""
    return STYLESHEET_TEMPLATE.format(token=token)
