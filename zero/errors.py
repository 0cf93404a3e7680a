"""Exception hierarchy for the Aexis Zero scaffolder.

Every error the CLI knows how to report derives from :class:`ZeroError`.  The
messages are written for the end user: they name what went wrong and, where
possible, what to do about it.
"""

from __future__ import annotations


class ZeroError(Exception):
    """Base class for all expected, user-facing failures."""


class UnknownDefinitionError(ZeroError, ValueError):
    """Raised when a framework, module or package manager id is not registered."""

    def __init__(self, kind: str, value: str) -> None:
        self.kind = kind
        self.value = value
        super().__init__(f"Unknown {kind}: {value}")


class PackageManagerNotFoundError(ZeroError):
    """Raised when the selected package manager is not on ``PATH``."""


class TargetDirectoryError(ZeroError):
    """Raised when the target directory cannot be used for a new project."""


class TargetPermissionError(TargetDirectoryError):
    """Raised when the target directory cannot be created or written to."""


class ScaffoldCommandError(ZeroError):
    """Raised when every scaffold argument set has failed."""

    def __init__(self, attempts: list[str]) -> None:
        self.attempts = attempts
        if attempts:
            message = (
                f"Scaffold failed after {len(attempts)} attempts:\n"
                + "\n".join(attempts)
            )
        else:
            message = "Scaffold failed for unknown reasons."
        super().__init__(message)


class MissingAssetsError(ZeroError):
    """Raised when one or more brand asset source files are absent."""

    def __init__(self, missing: list[str]) -> None:
        self.missing = missing
        super().__init__(
            "Missing asset files. Add them to the assets directory:\n"
            + "\n".join(missing)
        )


class InstallError(ZeroError):
    """Raised when a package manager install/add command exits non-zero."""

    def __init__(self, command: list[str], returncode: int, detail: str = "") -> None:
        self.command = command
        self.returncode = returncode
        message = f"`{' '.join(command)}` exited with code {returncode}"
        if detail:
            message = f"{message}: {detail}"
        super().__init__(message)
