"""Host platform detection and package manager availability checks."""

from __future__ import annotations

import platform as _platform
import shutil

from zero.errors import PackageManagerNotFoundError
from zero.models import PackageManagerId, Platform, ShellFlavor
from zero.registry import get_package_manager_definition

_SYSTEM_MAP: dict[str, Platform] = {
    "darwin": Platform.MACOS,
    "windows": Platform.WINDOWS,
    "linux": Platform.LINUX,
}

_INSTALL_HINTS: dict[str, str] = {
    "npm": "Install Node.js (https://nodejs.org), which ships npm",
    "pnpm": "Install pnpm (https://pnpm.io/installation)",
    "yarn": "Install yarn (https://yarnpkg.com/getting-started/install)",
    "bun": "Install bun (https://bun.sh)",
}


def detect_platform(system: str | None = None) -> Platform:
    """Map the host OS to a :class:`Platform`; unknown systems count as Linux."""
    name = (system if system is not None else _platform.system()).lower()
    return _SYSTEM_MAP.get(name, Platform.LINUX)


def detect_shell(platform: Platform | None = None) -> ShellFlavor:
    if platform is None:
        platform = detect_platform()
    return ShellFlavor.POWERSHELL if platform == Platform.WINDOWS else ShellFlavor.POSIX


def is_command_available(command: str) -> bool:
    """Return ``True`` if *command* resolves on ``PATH``."""
    return shutil.which(command) is not None


def assert_package_manager_available(package_manager: PackageManagerId | str) -> None:
    """Fail early when the chosen package manager cannot be executed.

    Raises:
        PackageManagerNotFoundError: With platform/shell context and an
            install hint.
    """
    manager = get_package_manager_definition(package_manager)
    if is_command_available(manager.executable):
        return

    platform = detect_platform()
    shell = detect_shell(platform)
    hint = _INSTALL_HINTS.get(manager.id.value, f"Install {manager.label}")
    raise PackageManagerNotFoundError(
        f"{manager.label} is required but was not found in PATH. "
        f"({platform.value}/{shell.value}) {hint} and retry."
    )
