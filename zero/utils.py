"""Shared utility functions for Aexis Zero.

Provides async command execution, the explicit subprocess context used by
every external call, JSON I/O, file-system helpers and Rich-based console
output.  Console output is the tool's only log channel.
"""

from __future__ import annotations

import asyncio
import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.rule import Rule
from rich.table import Table

console = Console()
err_console = Console(stderr=True)

# ---------------------------------------------------------------------------
# Async command execution
# ---------------------------------------------------------------------------


async def run_command(
    cmd: list[str],
    cwd: str | Path | None = None,
    timeout: int | None = None,
    capture: bool = True,
    env: dict[str, str] | None = None,
) -> tuple[int, str, str]:
    """Run a command asynchronously.

    Args:
        cmd: Program and arguments; no shell is involved.
        cwd: Working directory for the child process.
        timeout: Maximum wall-clock seconds before the process is killed.
            ``None`` waits for the process however long it takes.
        capture: Whether to capture stdout/stderr (if ``False`` they inherit
            the parent's streams).
        env: Optional extra environment variables merged on top of ``os.environ``.

    Returns:
        A ``(returncode, stdout, stderr)`` tuple.  If *capture* is ``False``
        the stdout/stderr strings will be empty.

    Raises:
        FileNotFoundError: If the executable does not exist.
    """
    merged_env: dict[str, str] | None = None
    if env:
        merged_env = {**os.environ, **env}

    stdout_pipe = asyncio.subprocess.PIPE if capture else None
    stderr_pipe = asyncio.subprocess.PIPE if capture else None

    process = await asyncio.create_subprocess_exec(
        *cmd,
        stdout=stdout_pipe,
        stderr=stderr_pipe,
        cwd=str(cwd) if cwd else None,
        env=merged_env,
    )

    try:
        stdout_bytes, stderr_bytes = await asyncio.wait_for(
            process.communicate(), timeout=timeout
        )
    except asyncio.TimeoutError:
        process.kill()
        await process.wait()
        return (
            -1,
            "",
            f"Command timed out after {timeout}s: {format_command(cmd)}",
        )

    stdout_str = (stdout_bytes or b"").decode("utf-8", errors="replace").strip()
    stderr_str = (stderr_bytes or b"").decode("utf-8", errors="replace").strip()
    return (process.returncode or 0, stdout_str, stderr_str)


@dataclass(frozen=True)
class CommandContext:
    """How external tools are spawned.

    Carries the environment overrides (``CI=1`` by default so that the
    scaffolding tools never stop to ask questions) and whether output is
    captured or streamed to the terminal.  It is passed explicitly to every
    call site instead of mutating ``os.environ``.
    """

    env: dict[str, str] = field(default_factory=lambda: {"CI": "1"})
    capture: bool = False
    timeout: int | None = None

    async def run(
        self, cmd: list[str], cwd: str | Path | None = None
    ) -> tuple[int, str, str]:
        """Run *cmd* with this context's environment and stream settings."""
        return await run_command(
            cmd,
            cwd=cwd,
            timeout=self.timeout,
            capture=self.capture,
            env=dict(self.env),
        )


def format_command(cmd: list[str]) -> str:
    """Render a command for messages."""
    return " ".join(cmd)


# ---------------------------------------------------------------------------
# String helpers
# ---------------------------------------------------------------------------


def quote_path(path: str) -> str:
    """Double-quote *path* when it contains whitespace.

    Examples::

        quote_path("my-app")  -> "my-app"
        quote_path("my app")  -> '"my app"'
    """
    if any(ch.isspace() for ch in path):
        return f'"{path}"'
    return path


# ---------------------------------------------------------------------------
# JSON I/O
# ---------------------------------------------------------------------------


def load_json(path: str | Path, default: Any = None) -> Any:
    """Load and parse a JSON file.

    Args:
        path: Path to the JSON file.
        default: Returned when the file does not exist.

    Returns:
        The parsed document, or *default* for a missing file.

    Raises:
        json.JSONDecodeError: If the file is not valid JSON.
        OSError: For any read error other than the file being absent.
    """
    try:
        raw = Path(path).read_text(encoding="utf-8")
    except FileNotFoundError:
        return default
    return json.loads(raw)


def dump_json(data: Any) -> str:
    """Serialise *data* as 2-space indented JSON with a trailing newline."""
    return json.dumps(data, indent=2, ensure_ascii=False) + "\n"


def save_json(data: Any, path: str | Path) -> Path:
    """Save data as pretty-printed JSON.

    Parent directories are created automatically.
    """
    file_path = Path(path)
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(dump_json(data), encoding="utf-8")
    return file_path


# ---------------------------------------------------------------------------
# File-system helpers
# ---------------------------------------------------------------------------


def ensure_dir(path: str | Path) -> Path:
    """Create a directory (and parents) if it does not exist."""
    dir_path = Path(path)
    dir_path.mkdir(parents=True, exist_ok=True)
    return dir_path


def write_text(path: Path, content: str) -> Path:
    """Create parent dirs and write *content*, replacing any existing file."""
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(content, encoding="utf-8")
    return path


# ---------------------------------------------------------------------------
# Rich output helpers
# ---------------------------------------------------------------------------


def print_banner(title: str) -> None:
    """Print the full-width title rule shown at startup."""
    console.print()
    console.print(Rule(f"[bold bright_cyan] {title} [/bold bright_cyan]", style="bright_cyan"))
    console.print()


def print_step(message: str) -> None:
    """Print a pipeline step line."""
    console.print(f"[bold cyan]>[/bold cyan] {escape(message)}")


def print_summary_table(data: dict[str, str], title: str = "Summary") -> None:
    """Print a two-column key/value summary table.

    Args:
        data: Mapping of label -> value.
        title: Table title.
    """
    table = Table(title=title, show_header=True, header_style="bold cyan")
    table.add_column("Item", style="dim", no_wrap=True)
    table.add_column("Value")

    for key, value in data.items():
        table.add_row(escape(key), escape(str(value)))

    console.print(table)
    console.print()


def print_next_steps(commands: list[str]) -> None:
    """Print the numbered follow-up commands in a panel."""
    body = "\n".join(f"{index}) {escape(command)}" for index, command in enumerate(commands, 1))
    console.print()
    console.print(Panel(body, title="Next steps", style="green", expand=False))


def print_success(message: str) -> None:
    """Print a green success message."""
    console.print(f"[bold green]{escape(message)}[/bold green]")


def print_error(message: str) -> None:
    """Print a red error message to stderr."""
    err_console.print(f"[bold red]{escape(message)}[/bold red]")


def print_warning(message: str) -> None:
    """Print a yellow warning message."""
    console.print(f"[bold yellow]{escape(message)}[/bold yellow]")
