"""Shared types for colour-type: RGB, HSL, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, NamedTuple


class RGB(NamedTuple):
    """Red, green and blue channels, each 0-255."""

    r: int
    g: int
    b: int


class HSL(NamedTuple):
    """Hue in degrees, saturation and lightness in [0, 1]."""

    h: float
    s: float
    l: float  # noqa: E741


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='negate', help='Invert each colour')

        @command.run
        def run(values, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def execute(self, values: list[Any], report: Report, args: Any) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(values, report, args)


@dataclass
class Report:
    """Accumulates one entry per input for text/JSON output."""

    command: str = ''
    entries: list[dict[str, Any]] = field(default_factory=list)
    errors: list[str] = field(default_factory=list)

    def add(self, source: Any, data: dict[str, Any]) -> None:
        """Add the result computed for one input."""
        self.entries.append({'input': source, **data})

    def add_error(self, message: str) -> None:
        self.errors.append(message)

    @property
    def ok(self) -> bool:
        return not self.errors
