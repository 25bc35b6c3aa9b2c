"""Allow ``python -m create_component``."""

from create_component.cli import main

main()
