"""Environment detection for the host running the scaffolder."""

from zero.env.detect import (
    assert_package_manager_available,
    detect_platform,
    detect_shell,
    is_command_available,
)

__all__ = [
    "assert_package_manager_available",
    "detect_platform",
    "detect_shell",
    "is_command_available",
]
