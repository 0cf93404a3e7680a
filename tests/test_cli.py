"""Unit tests for the ``zero`` entry point (zero.cli)."""

from __future__ import annotations

from unittest.mock import AsyncMock, MagicMock, patch

import pytest

from zero import __version__
from zero.cli import main, run
from zero.errors import PackageManagerNotFoundError, ScaffoldCommandError
from zero.models import ProjectConfig

pytestmark = pytest.mark.unit


@pytest.fixture
def config() -> ProjectConfig:
    return ProjectConfig(app_name="Demo")


class TestRun:
    def test_cancelled_wizard_exits_zero(self):
        with patch("zero.cli.run_wizard", return_value=None), patch(
            "zero.cli.ScaffoldOrchestrator"
        ) as orchestrator:
            assert run() == 0
        orchestrator.assert_not_called()

    def test_success(self, config):
        instance = MagicMock()
        instance.run = AsyncMock()
        with patch("zero.cli.run_wizard", return_value=config), patch(
            "zero.cli.assert_package_manager_available"
        ) as check, patch("zero.cli.ScaffoldOrchestrator", return_value=instance) as cls:
            assert run() == 0
        check.assert_called_once_with(config.package_manager)
        assert cls.call_args.args[0] is config
        instance.run.assert_awaited_once()

    def test_missing_package_manager(self, config, capsys):
        error = PackageManagerNotFoundError("npm is required but was not found in PATH.")
        with patch("zero.cli.run_wizard", return_value=config), patch(
            "zero.cli.assert_package_manager_available", side_effect=error
        ), patch("zero.cli.ScaffoldOrchestrator") as orchestrator:
            assert run() == 1
        orchestrator.assert_not_called()
        assert "npm is required" in capsys.readouterr().err

    @pytest.mark.parametrize(
        "error",
        [
            ScaffoldCommandError(["npx create-next-app@latest . exited with code 1"]),
            OSError("disk full"),
            ValueError("bad value"),
        ],
    )
    def test_errors_exit_one(self, config, error, capsys):
        instance = MagicMock()
        instance.run = AsyncMock(side_effect=error)
        with patch("zero.cli.run_wizard", return_value=config), patch(
            "zero.cli.assert_package_manager_available"
        ), patch("zero.cli.ScaffoldOrchestrator", return_value=instance):
            assert run() == 1
        assert "Error:" in capsys.readouterr().err


class TestMain:
    def test_exit_code(self):
        with patch("zero.cli.run", return_value=0):
            with pytest.raises(SystemExit) as exc_info:
                main([])
        assert exc_info.value.code == 0

    def test_version(self, capsys):
        with pytest.raises(SystemExit):
            main(["--version"])
        assert __version__ in capsys.readouterr().out

    def test_unknown_argument(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["--force"])
        assert exc_info.value.code == 2
