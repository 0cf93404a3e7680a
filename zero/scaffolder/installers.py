"""Dependency installation through the selected package manager."""

from __future__ import annotations

from collections.abc import Iterable
from pathlib import Path

from zero.errors import InstallError
from zero.models import FrameworkId, ModuleId
from zero.registry import PackageManagerDefinition, get_module_packages
from zero.utils import CommandContext


async def _run_install(cmd: list[str], target_dir: Path, context: CommandContext) -> None:
    try:
        returncode, _stdout, stderr = await context.run(cmd, cwd=target_dir)
    except OSError as exc:
        raise InstallError(cmd, -1, str(exc)) from exc
    if returncode != 0:
        raise InstallError(cmd, returncode, stderr)


async def install_base_dependencies(
    target_dir: Path,
    manager: PackageManagerDefinition,
    packages: Iterable[str],
    context: CommandContext,
) -> list[str]:
    """Add the framework packages, or run a plain install when there are none.

    Returns:
        The command that was executed.
    """
    unique = sorted(set(packages))
    cmd = [*manager.add, *unique] if unique else list(manager.install)
    await _run_install(cmd, target_dir, context)
    return cmd


async def install_module_packages(
    framework: FrameworkId,
    module_ids: Iterable[ModuleId],
    target_dir: Path,
    manager: PackageManagerDefinition,
    context: CommandContext,
) -> list[str] | None:
    """Add the packages the selected modules need; skipped when there are none."""
    packages = get_module_packages(module_ids, framework)
    if not packages:
        return None
    cmd = [*manager.add, *packages]
    await _run_install(cmd, target_dir, context)
    return cmd
