"""Unit tests for framework, base env and package manager definitions."""

from __future__ import annotations

import pytest

from zero.errors import UnknownDefinitionError
from zero.models import FrameworkId, PackageManagerId
from zero.registry import (
    FRAMEWORKS,
    PACKAGE_MANAGERS,
    get_base_env_help,
    get_base_env_vars,
    get_framework_definition,
    get_package_manager_definition,
)

pytestmark = pytest.mark.unit


class TestFrameworks:
    def test_nextjs_is_first(self):
        assert FRAMEWORKS[0].id == FrameworkId.NEXTJS

    def test_lookup(self):
        framework = get_framework_definition("expo")
        assert framework.id == FrameworkId.EXPO
        assert framework.scaffold.package_name == "create-expo-app"

    def test_unknown_framework(self):
        with pytest.raises(UnknownDefinitionError, match="Unknown framework: svelte"):
            get_framework_definition("svelte")

    def test_nextjs_arg_sets_most_specific_first(self):
        arg_sets = get_framework_definition(FrameworkId.NEXTJS).scaffold.arg_sets
        assert "--skip-install" in arg_sets[0]
        assert "--skip-install" not in arg_sets[1]
        assert "--turbo" not in arg_sets[-1]
        assert all("--app" in args for args in arg_sets)

    def test_expo_arg_sets_end_with_bare_invocation(self):
        arg_sets = get_framework_definition(FrameworkId.EXPO).scaffold.arg_sets
        assert arg_sets[0][:2] == ("--template", "expo-router")
        assert arg_sets[-1] == ()

    def test_base_packages(self):
        assert "tailwind-merge" in get_framework_definition(FrameworkId.NEXTJS).packages
        assert "expo-router" in get_framework_definition(FrameworkId.EXPO).packages


class TestBaseEnv:
    @pytest.mark.parametrize("framework", list(FrameworkId))
    def test_base_env_is_empty(self, framework):
        assert get_base_env_help(framework) == []
        assert get_base_env_vars(framework) == []


class TestPackageManagers:
    def test_registry_order(self):
        assert [manager.id for manager in PACKAGE_MANAGERS] == [
            PackageManagerId.NPM,
            PackageManagerId.PNPM,
            PackageManagerId.YARN,
            PackageManagerId.BUN,
        ]

    @pytest.mark.parametrize(
        ("manager_id", "runner", "add", "dev"),
        [
            ("npm", ["npx"], ("npm", "install"), ("npm", "run", "dev")),
            ("pnpm", ["pnpm", "dlx"], ("pnpm", "add"), ("pnpm", "dev")),
            ("yarn", ["yarn", "dlx"], ("yarn", "add"), ("yarn", "dev")),
            ("bun", ["bunx"], ("bun", "add"), ("bun", "run", "dev")),
        ],
    )
    def test_commands(self, manager_id, runner, add, dev):
        manager = get_package_manager_definition(manager_id)
        assert [manager.runner.command, *manager.runner.args] == runner
        assert manager.add == add
        assert manager.dev == dev
        assert manager.next_flag == f"--use-{manager_id}"

    def test_executable(self):
        assert get_package_manager_definition("pnpm").executable == "pnpm"

    def test_unknown_manager(self):
        with pytest.raises(UnknownDefinitionError, match="Unknown package manager: deno"):
            get_package_manager_definition("deno")
