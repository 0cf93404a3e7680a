"""Package manager definitions: how to run, install, add and start dev."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from zero.errors import UnknownDefinitionError
from zero.models import PackageManagerId


class PackageRunner(BaseModel):
    """Runs a package without installing it locally (``npx``, ``pnpm dlx``...)."""

    model_config = ConfigDict(frozen=True)

    command: str
    args: tuple[str, ...] = ()


class PackageManagerDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: PackageManagerId
    label: str
    runner: PackageRunner
    install: tuple[str, ...]
    add: tuple[str, ...]
    dev: tuple[str, ...]
    next_flag: str | None = None

    @property
    def executable(self) -> str:
        """The binary that must be on ``PATH`` for this manager to work."""
        return self.install[0]


PACKAGE_MANAGERS: tuple[PackageManagerDefinition, ...] = (
    PackageManagerDefinition(
        id=PackageManagerId.NPM,
        label="npm",
        runner=PackageRunner(command="npx"),
        install=("npm", "install"),
        add=("npm", "install"),
        dev=("npm", "run", "dev"),
        next_flag="--use-npm",
    ),
    PackageManagerDefinition(
        id=PackageManagerId.PNPM,
        label="pnpm",
        runner=PackageRunner(command="pnpm", args=("dlx",)),
        install=("pnpm", "install"),
        add=("pnpm", "add"),
        dev=("pnpm", "dev"),
        next_flag="--use-pnpm",
    ),
    PackageManagerDefinition(
        id=PackageManagerId.YARN,
        label="yarn",
        runner=PackageRunner(command="yarn", args=("dlx",)),
        install=("yarn", "install"),
        add=("yarn", "add"),
        dev=("yarn", "dev"),
        next_flag="--use-yarn",
    ),
    PackageManagerDefinition(
        id=PackageManagerId.BUN,
        label="bun",
        runner=PackageRunner(command="bunx"),
        install=("bun", "install"),
        add=("bun", "add"),
        dev=("bun", "run", "dev"),
        next_flag="--use-bun",
    ),
)


def get_package_manager_definition(
    manager_id: PackageManagerId | str,
) -> PackageManagerDefinition:
    """Look up a package manager by id.

    Raises:
        UnknownDefinitionError: If *manager_id* is not registered.
    """
    for manager in PACKAGE_MANAGERS:
        if manager.id == manager_id:
            return manager
    raise UnknownDefinitionError(
        "package manager", str(getattr(manager_id, "value", manager_id))
    )
