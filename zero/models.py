"""Core value types shared by the wizard, registry and scaffolder."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator


class Platform(str, Enum):
    MACOS = "macos"
    LINUX = "linux"
    WINDOWS = "windows"


class ShellFlavor(str, Enum):
    POSIX = "posix"
    POWERSHELL = "powershell"


class FrameworkId(str, Enum):
    NEXTJS = "nextjs"
    EXPO = "expo"


class ModuleId(str, Enum):
    NEON = "neon"
    CLERK = "clerk"
    PAYLOAD = "payload"
    STRIPE = "stripe"
    EMAIL = "email"


class PackageManagerId(str, Enum):
    NPM = "npm"
    PNPM = "pnpm"
    YARN = "yarn"
    BUN = "bun"


class ProjectConfig(BaseModel):
    """Answers collected by the wizard.

    Instances are immutable; the wizard only builds one once every step has
    been submitted and the user chose to continue.
    """

    model_config = ConfigDict(frozen=True)

    directory: str = Field(default=".", description="Target directory, relative to the cwd")
    app_name: str = Field(..., min_length=1, description="Human readable app name")
    domain: str = Field(default="", description="Optional production domain")
    framework: FrameworkId = Field(default=FrameworkId.NEXTJS)
    modules: tuple[ModuleId, ...] = Field(default_factory=tuple)
    package_manager: PackageManagerId = Field(default=PackageManagerId.NPM)

    @field_validator("directory", mode="before")
    @classmethod
    def _default_directory(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip() or "."
        return value

    @field_validator("app_name", "domain", mode="before")
    @classmethod
    def _strip(cls, value: object) -> object:
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("modules", mode="after")
    @classmethod
    def _dedupe_modules(cls, value: tuple[ModuleId, ...]) -> tuple[ModuleId, ...]:
        return tuple(dict.fromkeys(value))
