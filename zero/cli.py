"""Command-line entry point for ``zero``.

Runs the interactive wizard, then scaffolds the project it describes.
"""

from __future__ import annotations

import argparse
import asyncio
import sys

from zero import __version__
from zero.config import Settings
from zero.env import assert_package_manager_available
from zero.errors import ZeroError
from zero.scaffolder import ScaffoldOrchestrator
from zero.utils import print_banner, print_error
from zero.wizard import Prompter, run_wizard


def build_parser() -> argparse.ArgumentParser:
    return argparse.ArgumentParser(
        prog="zero",
        description="Aexis Zero -- scaffold a Next.js or Expo app with optional modules",
        epilog="Run without arguments to start the interactive wizard.",
    )


def run(prompter: Prompter | None = None) -> int:
    """Run the wizard and scaffolder; return the process exit code."""
    print_banner(f"Aexis Zero v{__version__}")
    config = run_wizard(prompter)
    if config is None:
        return 0

    try:
        settings = Settings.from_env()
        assert_package_manager_available(config.package_manager)
        orchestrator = ScaffoldOrchestrator(config, settings)
        asyncio.run(orchestrator.run())
    except (ZeroError, OSError, ValueError) as exc:
        print_error(f"Error: {exc}")
        return 1
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``zero`` and ``python -m zero``."""
    parser = build_parser()
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.parse_args(argv)
    sys.exit(run())


if __name__ == "__main__":
    main()
