"""Terminal prompts for the wizard.

The wizard talks to the user only through the :class:`Prompter` protocol.
:class:`RichPrompter` is the interactive implementation built on
``rich.prompt``; tests drive the wizard with a scripted prompter instead.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Any, Protocol

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from zero.utils import console as default_console


class WizardCancelled(Exception):
    """The user interrupted a prompt (Ctrl+C / end of input) or chose Cancel."""


@dataclass(frozen=True)
class Choice:
    value: Any
    label: str
    hint: str = ""


class Prompter(Protocol):
    def text(self, message: str, default: str = "", placeholder: str = "") -> str: ...

    def select(self, message: str, choices: Sequence[Choice], default: Any = None) -> Any: ...

    def multiselect(
        self, message: str, choices: Sequence[Choice], defaults: Sequence[Any] = ()
    ) -> list[Any]: ...

    def note(self, title: str, lines: Sequence[str]) -> None: ...

    def error(self, message: str) -> None: ...

    def cancel(self, message: str) -> None: ...


_CLEAR_WORDS = {"none", "-"}


def parse_selection(raw: str, count: int) -> list[int]:
    """Parse ``"1, 3"`` into zero-based indexes.

    Blank input and ``none``/``-`` select nothing.  Duplicates are ignored and
    the result keeps the order of the choices, not of the input.

    Raises:
        ValueError: For non-numeric or out-of-range entries.
    """
    text = raw.strip().lower()
    if not text or text in _CLEAR_WORDS:
        return []
    picked: set[int] = set()
    for part in text.replace(" ", ",").split(","):
        if not part:
            continue
        if not part.isdigit():
            raise ValueError(f"'{part}' is not a number")
        index = int(part) - 1
        if index < 0 or index >= count:
            raise ValueError(f"{part} is not between 1 and {count}")
        picked.add(index)
    return sorted(picked)


class RichPrompter:
    """Interactive prompter using ``rich.prompt.Prompt``.

    ``KeyboardInterrupt`` and ``EOFError`` raised while waiting for input are
    converted to :class:`WizardCancelled`.
    """

    def __init__(self, console: Console | None = None) -> None:
        self.console = console or default_console

    def _ask(self, message: str, **kwargs: Any) -> str:
        try:
            return Prompt.ask(message, console=self.console, **kwargs)
        except (KeyboardInterrupt, EOFError) as exc:
            raise WizardCancelled() from exc

    def text(self, message: str, default: str = "", placeholder: str = "") -> str:
        label = f"[bold]{message}[/bold]"
        if placeholder and not default:
            label += f" [dim]({placeholder})[/dim]"
        return self._ask(label, default=default, show_default=bool(default))

    def _print_choices(
        self, choices: Sequence[Choice], marked: set[int] | None = None
    ) -> None:
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column(justify="right", style="cyan")
        table.add_column()
        table.add_column(style="dim")
        for index, choice in enumerate(choices):
            number = str(index + 1)
            if marked is not None:
                number = escape(f"{'[x]' if index in marked else '[ ]'} {number}")
            table.add_row(number, choice.label, choice.hint)
        self.console.print(table)

    def select(self, message: str, choices: Sequence[Choice], default: Any = None) -> Any:
        self._print_choices(choices)
        default_index = 0
        for index, choice in enumerate(choices):
            if choice.value == default:
                default_index = index
                break
        answer = self._ask(
            f"[bold]{message}[/bold]",
            choices=[str(index + 1) for index in range(len(choices))],
            default=str(default_index + 1),
        )
        return choices[int(answer) - 1].value

    def multiselect(
        self, message: str, choices: Sequence[Choice], defaults: Sequence[Any] = ()
    ) -> list[Any]:
        marked = {index for index, choice in enumerate(choices) if choice.value in defaults}
        self._print_choices(choices, marked)
        default = ",".join(str(index + 1) for index in sorted(marked))
        while True:
            answer = self._ask(
                f"[bold]{message}[/bold] [dim](comma-separated numbers, 'none' to clear)[/dim]",
                default=default,
                show_default=bool(default),
            )
            try:
                indexes = parse_selection(answer, len(choices))
            except ValueError as exc:
                self.error(str(exc))
                continue
            return [choices[index].value for index in indexes]

    def note(self, title: str, lines: Sequence[str]) -> None:
        self.console.print(Panel(escape("\n".join(lines)), title=title, style="cyan", expand=False))

    def error(self, message: str) -> None:
        self.console.print(f"[bold red]{escape(message)}[/bold red]")

    def cancel(self, message: str) -> None:
        self.console.print(f"[yellow]{message}[/yellow]")
