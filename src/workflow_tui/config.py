"""Client configuration — reads settings from environment variables.

All settings have defaults suitable for interactive use.  Command-line
flags take precedence; ``load_settings`` only supplies the fallbacks.
"""

import os
from dataclasses import dataclass, replace

from workflow_tui.constants import BACK_COMMAND


@dataclass(frozen=True)
class TUISettings:
    """Immutable client configuration read from the environment at startup."""

    # Engine import path, "package.module:attribute" (None → must be given on the CLI)
    engine: str | None = None

    # Logging goes to stderr; WARNING keeps the interactive transcript clean
    log_level: str = "WARNING"

    # Reserved word recognised at every prompt
    back_command: str = BACK_COMMAND

    def with_overrides(self, **overrides) -> "TUISettings":
        """Return a copy with every non-None override applied."""
        changes = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **changes)


def load_settings() -> TUISettings:
    """Build settings from ``WORKFLOW_TUI_*`` environment variables."""
    back = os.getenv("WORKFLOW_TUI_BACK_COMMAND", BACK_COMMAND).strip().lower()

    return TUISettings(
        engine=os.getenv("WORKFLOW_TUI_ENGINE") or None,
        log_level=os.getenv("WORKFLOW_TUI_LOG_LEVEL", "WARNING").upper(),
        back_command=back or BACK_COMMAND,
    )
