"""Shared pytest fixtures for the Aexis Zero test suite.

Provides reusable fixtures for:
- Temporary target and working directories
- A scripted prompter that drives the wizard without a terminal
- A fake command context that records external commands
- Brand asset source files created with Pillow
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import Any
from unittest.mock import AsyncMock, MagicMock

import pytest
from PIL import Image

from zero.config import Settings
from zero.utils import CommandContext
from zero.wizard import Choice


# ---------------------------------------------------------------------------
# Paths & Directories
# ---------------------------------------------------------------------------

@pytest.fixture
def workdir(tmp_path: Path) -> Path:
    """Working directory the orchestrator resolves targets against."""
    path = tmp_path / "work"
    path.mkdir()
    yield path


# ---------------------------------------------------------------------------
# Brand assets
# ---------------------------------------------------------------------------

@pytest.fixture
def brand_assets(tmp_path: Path) -> Path:
    """Directory containing ``icon.svg``, ``icon.png`` and ``social.png``."""
    assets = tmp_path / "brand"
    assets.mkdir()
    (assets / "icon.svg").write_text(
        '<svg xmlns="http://www.w3.org/2000/svg" width="64" height="64"/>\n',
        encoding="utf-8",
    )
    Image.new("RGBA", (64, 64), (28, 25, 23, 255)).save(assets / "icon.png")
    Image.new("RGB", (240, 126), (231, 229, 228)).save(assets / "social.png")
    yield assets


@pytest.fixture
def settings(brand_assets: Path) -> Settings:
    """Settings pointing at the temporary brand assets."""
    return Settings(assets_dir=brand_assets)


# ---------------------------------------------------------------------------
# Mock command context
# ---------------------------------------------------------------------------

@pytest.fixture
def fake_context():
    """Factory for a ``CommandContext`` whose ``run`` never spawns a process.

    Usage:
        def test_install(fake_context):
            context = fake_context(results=[(1, "", "boom"), (0, "", "")])
            ...
            context.run.assert_awaited()

    Each call to ``run`` consumes the next result; once they are exhausted
    every further call succeeds.
    """
    def factory(results: Sequence[Any] = ()) -> MagicMock:
        pending = list(results)

        async def run(cmd: list[str], cwd: Any = None) -> tuple[int, str, str]:
            if not pending:
                return (0, "", "")
            result = pending.pop(0)
            if isinstance(result, BaseException):
                raise result
            return result

        context = MagicMock(spec=CommandContext)
        context.run = AsyncMock(side_effect=run)
        return context

    return factory


@pytest.fixture
def called_commands():
    """Returns a helper listing the commands passed to ``context.run``."""
    def commands(context: MagicMock) -> list[list[str]]:
        return [list(call.args[0]) for call in context.run.await_args_list]

    return commands


# ---------------------------------------------------------------------------
# Scripted prompter
# ---------------------------------------------------------------------------

class ScriptedPrompter:
    """A ``Prompter`` that replays canned answers.

    Answers are consumed in order by ``text``, ``select`` and
    ``multiselect``.  An answer that is an exception instance is raised
    instead, which is how tests simulate Ctrl-C or end of input.
    """

    def __init__(self, answers: Sequence[Any]) -> None:
        self.answers = list(answers)
        self.asked: list[str] = []
        self.notes: list[tuple[str, list[str]]] = []
        self.errors: list[str] = []
        self.cancelled: list[str] = []

    def _next(self, message: str) -> Any:
        self.asked.append(message)
        if not self.answers:
            raise AssertionError(f"No scripted answer left for {message!r}")
        answer = self.answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        return answer

    def text(self, message: str, default: str = "", placeholder: str = "") -> str:
        return self._next(message)

    def select(self, message: str, choices: Sequence[Choice], default: Any = None) -> Any:
        answer = self._next(message)
        assert answer in [choice.value for choice in choices], answer
        return answer

    def multiselect(
        self, message: str, choices: Sequence[Choice], defaults: Sequence[Any] = ()
    ) -> list[Any]:
        return list(self._next(message))

    def note(self, title: str, lines: Sequence[str]) -> None:
        self.notes.append((title, list(lines)))

    def error(self, message: str) -> None:
        self.errors.append(message)

    def cancel(self, message: str) -> None:
        self.cancelled.append(message)


@pytest.fixture
def scripted_prompter():
    """Factory building a :class:`ScriptedPrompter` from a list of answers."""
    return ScriptedPrompter
