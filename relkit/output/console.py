"""Console output abstraction.

Services talk to a ``ConsoleProtocol`` instead of printing directly, so the
release pipeline can run against Rich in production and a recording console
in tests. Progress goes to stdout; errors and hints go to stderr.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Protocol

__all__ = [
    "Style",
    "ConsoleProtocol",
    "RichConsole",
    "MockConsole",
    "OutputRecord",
]


class Style(Enum):
    """Text styles for console output."""

    DEFAULT = auto()
    SUCCESS = auto()
    ERROR = auto()
    INFO = auto()
    DIM = auto()  # echoed commands, hints

    def __str__(self) -> str:
        return self.name.lower()


class ConsoleProtocol(Protocol):
    """Protocol for console output."""

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        """Print a progress message to stdout."""
        ...

    def success(self, message: str) -> None: ...

    def error(self, message: str, *, hint: str | None = None) -> None:
        """Print a diagnostic (and optional hint) to stderr."""
        ...

    def info(self, message: str) -> None: ...

    def newline(self) -> None: ...


class RichConsole:
    """Console backed by Rich."""

    def __init__(self) -> None:
        # Import Rich lazily to avoid import-time dependency
        from rich.console import Console

        # Diagnostics stay on one line regardless of terminal width.
        self._console = Console(soft_wrap=True)
        self._err_console = Console(stderr=True, soft_wrap=True)
        self._style_map = {
            Style.DEFAULT: "",
            Style.SUCCESS: "green",
            Style.ERROR: "red bold",
            Style.INFO: "cyan",
            Style.DIM: "dim",
        }

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        rich_style = self._style_map.get(style, "")
        # Tags and commands contain brackets; never treat them as markup.
        if rich_style:
            self._console.print(message, style=rich_style, markup=False, highlight=False)
        else:
            self._console.print(message, markup=False, highlight=False)

    def success(self, message: str) -> None:
        self._console.print("[green]OK[/green] ", end="")
        self._console.print(message, markup=False)

    def error(self, message: str, *, hint: str | None = None) -> None:
        self._err_console.print("[red bold]error:[/red bold] ", end="")
        self._err_console.print(message, markup=False, highlight=False)
        if hint:
            self._err_console.print(f"hint: {hint}", style="dim", markup=False, highlight=False)

    def info(self, message: str) -> None:
        self._console.print("[cyan]info:[/cyan] ", end="")
        self._console.print(message, markup=False, highlight=False)

    def newline(self) -> None:
        self._console.print()


@dataclass
class OutputRecord:
    """A single output record for MockConsole."""

    message: str
    style: Style
    stderr: bool = False


def _empty_outputs() -> list[OutputRecord]:
    return []


@dataclass
class MockConsole:
    """Console that records output for tests."""

    outputs: list[OutputRecord] = field(default_factory=_empty_outputs)

    def print(self, message: str, style: Style = Style.DEFAULT) -> None:
        self.outputs.append(OutputRecord(message, style))

    def success(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"OK {message}", Style.SUCCESS))

    def error(self, message: str, *, hint: str | None = None) -> None:
        self.outputs.append(OutputRecord(f"error: {message}", Style.ERROR, stderr=True))
        if hint:
            self.outputs.append(OutputRecord(f"hint: {hint}", Style.DIM, stderr=True))

    def info(self, message: str) -> None:
        self.outputs.append(OutputRecord(f"info: {message}", Style.INFO))

    def newline(self) -> None:
        self.outputs.append(OutputRecord("", Style.DEFAULT))

    # Test helper methods

    @property
    def messages(self) -> list[str]:
        return [o.message for o in self.outputs]

    @property
    def text(self) -> str:
        return "\n".join(self.messages)

    @property
    def stderr_text(self) -> str:
        return "\n".join(o.message for o in self.outputs if o.stderr)

    def has_error(self) -> bool:
        return any(o.style == Style.ERROR for o in self.outputs)

    def has_success(self) -> bool:
        return any(o.style == Style.SUCCESS for o in self.outputs)

    def find(self, substring: str) -> list[OutputRecord]:
        """Find all outputs containing a substring."""
        return [o for o in self.outputs if substring in o.message]
