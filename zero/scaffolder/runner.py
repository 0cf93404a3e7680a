"""Upstream scaffold invocation with a fallback chain of argument sets.

The flags accepted by ``create-next-app`` and ``create-expo-app`` differ
between releases.  Instead of sniffing versions, every framework declares an
ordered list of argument sets and the runner tries them in turn until one
succeeds.
"""

from __future__ import annotations

from pathlib import Path

from zero.errors import ScaffoldCommandError
from zero.models import FrameworkId
from zero.registry import FrameworkDefinition, PackageManagerDefinition
from zero.utils import CommandContext, format_command, print_warning


def build_scaffold_arg_sets(
    framework: FrameworkDefinition, manager: PackageManagerDefinition
) -> list[tuple[str, ...]]:
    """Return candidate argument sets, most specific first.

    For Next.js every base set is first tried with the package manager's
    ``--use-*`` flag, then all base sets are tried again without it.
    """
    base = list(framework.scaffold.arg_sets)
    if framework.id != FrameworkId.NEXTJS or not manager.next_flag:
        return base
    with_flag = [(*args, manager.next_flag) for args in base]
    return with_flag + base


def build_scaffold_command(
    manager: PackageManagerDefinition,
    package_name: str,
    target_arg: str,
    args: tuple[str, ...],
) -> list[str]:
    return [manager.runner.command, *manager.runner.args, package_name, target_arg, *args]


async def run_scaffold_command(
    framework: FrameworkDefinition,
    manager: PackageManagerDefinition,
    target_arg: str,
    context: CommandContext,
    cwd: str | Path | None = None,
) -> list[str]:
    """Run the scaffold command, falling back through the argument sets.

    Returns:
        The command line that succeeded.

    Raises:
        ScaffoldCommandError: After every candidate failed, listing each
            attempt's failure.
    """
    failures: list[str] = []
    for args in build_scaffold_arg_sets(framework, manager):
        cmd = build_scaffold_command(manager, framework.scaffold.package_name, target_arg, args)
        try:
            returncode, _stdout, stderr = await context.run(cmd, cwd=cwd)
        except OSError as exc:
            failures.append(f"{format_command(cmd)}: {exc}")
            continue
        if returncode == 0:
            return cmd
        detail = f": {stderr}" if stderr else ""
        failures.append(f"{format_command(cmd)} exited with code {returncode}{detail}")
        print_warning(f"  Scaffold attempt {len(failures)} failed, trying the next argument set...")
    raise ScaffoldCommandError(failures)
