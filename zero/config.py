"""Aexis Zero configuration.

Runtime settings for the scaffolder.  Nothing here is collected by the
wizard; these are the knobs an operator may want to change without editing
code (where brand assets live, whether tools run in CI mode).
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field

from zero.utils import CommandContext

_DEFAULT_ASSETS_DIR = Path(__file__).parent / "assets"

_FALSE_VALUES = {"0", "false", "no", "off"}


class Settings(BaseModel):
    """Global scaffolder settings.

    Created once by the CLI entry point and handed to the orchestrator.
    """

    assets_dir: Path = Field(
        default=_DEFAULT_ASSETS_DIR,
        description="Directory holding icon.svg, icon.png and social.png",
    )
    ci: bool = Field(
        default=True,
        description="Export CI=1 to spawned tools so they never prompt",
    )
    allowed_entries: frozenset[str] = Field(
        default=frozenset({".git", ".gitignore", ".gitkeep"}),
        description="Entries ignored when checking that the target is empty",
    )
    subprocess_env: dict[str, str] = Field(default_factory=dict)

    def command_context(self) -> CommandContext:
        """Build the subprocess context every external call runs with."""
        env = dict(self.subprocess_env)
        if self.ci:
            env.setdefault("CI", "1")
        return CommandContext(env=env)

    @classmethod
    def from_env(cls) -> "Settings":
        """Build ``Settings`` from environment variables.

        Recognised variables (all optional):
            ZERO_ASSETS_DIR, ZERO_CI.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("ZERO_ASSETS_DIR"):
            kwargs["assets_dir"] = Path(os.environ["ZERO_ASSETS_DIR"]).expanduser()
        if os.environ.get("ZERO_CI"):
            kwargs["ci"] = os.environ["ZERO_CI"].strip().lower() not in _FALSE_VALUES
        return cls(**kwargs)
