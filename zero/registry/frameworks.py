"""Framework definitions: base packages and how to scaffold each stack."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from zero.errors import UnknownDefinitionError
from zero.models import FrameworkId


class ScaffoldSpec(BaseModel):
    """The upstream generator and its argument sets, most specific first."""

    model_config = ConfigDict(frozen=True)

    package_name: str
    arg_sets: tuple[tuple[str, ...], ...]


class FrameworkDefinition(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: FrameworkId
    label: str
    description: str
    packages: tuple[str, ...]
    scaffold: ScaffoldSpec


_NEXT_BASE_ARGS = (
    "--ts",
    "--eslint",
    "--tailwind",
    "--turbo",
    "--app",
    "--no-src-dir",
    "--import-alias",
    "@/*",
)

FRAMEWORKS: tuple[FrameworkDefinition, ...] = (
    FrameworkDefinition(
        id=FrameworkId.NEXTJS,
        label="Next.js",
        description="React framework with App Router and Tailwind.",
        packages=(
            "class-variance-authority",
            "clsx",
            "lucide-react",
            "tailwind-merge",
            "tailwindcss-animate",
            "@radix-ui/react-slot",
        ),
        scaffold=ScaffoldSpec(
            package_name="create-next-app@latest",
            arg_sets=(
                (*_NEXT_BASE_ARGS, "--skip-install"),
                _NEXT_BASE_ARGS,
                # Releases without --turbo.
                tuple(arg for arg in _NEXT_BASE_ARGS if arg != "--turbo"),
            ),
        ),
    ),
    FrameworkDefinition(
        id=FrameworkId.EXPO,
        label="Expo (React Native)",
        description="Expo app with Router and EAS configuration.",
        packages=(
            "expo-router",
            "expo-font",
            "@expo-google-fonts/geist-mono",
            "tamagui",
            "@tamagui/config",
            "@tamagui/animations-react-native",
            "@tamagui/metro-plugin",
            "@tamagui/babel-plugin",
            "react-native-svg",
        ),
        scaffold=ScaffoldSpec(
            package_name="create-expo-app",
            arg_sets=(
                ("--template", "expo-router", "--yes", "--no-install"),
                ("--template", "expo-router", "--yes"),
                ("--yes", "--no-install"),
                ("--yes",),
                (),
            ),
        ),
    ),
)


def get_framework_definition(framework_id: FrameworkId | str) -> FrameworkDefinition:
    """Look up a framework by id.

    Raises:
        UnknownDefinitionError: If *framework_id* is not registered.
    """
    for framework in FRAMEWORKS:
        if framework.id == framework_id:
            return framework
    raise UnknownDefinitionError("framework", str(getattr(framework_id, "value", framework_id)))
