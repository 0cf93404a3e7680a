"""Environment variables every project of a framework expects.

Both frameworks currently start from an empty list: all variables come from
the selected modules.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from zero.models import FrameworkId


class EnvVarHelp(BaseModel):
    """Documentation for one environment variable of a generated project.

    ``frameworks`` limits the variable to some stacks; ``None`` means it
    applies everywhere.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    description: str
    url: str | None = None
    frameworks: tuple[FrameworkId, ...] | None = None

    def applies_to(self, framework: FrameworkId | str) -> bool:
        return self.frameworks is None or framework in self.frameworks


BASE_ENV: dict[FrameworkId, tuple[EnvVarHelp, ...]] = {
    FrameworkId.NEXTJS: (),
    FrameworkId.EXPO: (),
}


def get_base_env_help(framework: FrameworkId | str) -> list[EnvVarHelp]:
    return [
        item
        for item in BASE_ENV.get(FrameworkId(framework), ())
        if item.applies_to(framework)
    ]


def get_base_env_vars(framework: FrameworkId | str) -> list[str]:
    return [item.key for item in get_base_env_help(framework)]
