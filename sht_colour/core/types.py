"""CLI plumbing types for sht-colour: Command and Report."""

from __future__ import annotations

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any


class Command:
    """A self-registering CLI command.

    Usage in a command module:

        command = Command(name='to-rgb', help='Convert SHT codes to hex and RGB')

        @command.arguments
        def arguments(parser):
            parser.add_argument('codes', nargs='+')

        @command.run
        def run(args, report):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register the argparse configuration function."""
        self._arguments_fn = fn
        return fn

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, args: argparse.Namespace, report: Report) -> None:
        """Execute the command's run function."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        self._run_fn(args, report)


@dataclass
class Report:
    """Accumulates one row per input for text/JSON output."""

    command: str = ''
    precision: int | None = None
    rows: list[dict[str, Any]] = field(default_factory=list)
    ok_count: int = 0
    error_count: int = 0

    def add(self, input_text: str, data: dict[str, Any]) -> None:
        """Add a successful result for one input."""
        self.rows.append({'input': input_text, 'ok': True, **data})
        self.ok_count += 1

    def add_error(self, input_text: str, error: ValueError) -> None:
        """Record a failed input; the error kind is kept when the error has one."""
        kind = getattr(error, 'kind', None)
        self.rows.append(
            {
                'input': input_text,
                'ok': False,
                'error': type(error).__name__,
                'kind': kind.value if kind is not None else None,
                'message': str(error),
            }
        )
        self.error_count += 1

    @property
    def failed(self) -> bool:
        return self.error_count > 0
