"""Allow ``python -m workflow_tui <file>``."""

from workflow_tui.cli import cli

cli()
