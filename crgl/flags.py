"""Building subcommand flag definitions with auto-assigned shorthands."""

import argparse
from collections.abc import Callable
from typing import Any

# argparse always owns -h/--help
RESERVED_SHORTS = frozenset({'h'})


class FlagRegistry:
    """Tracks which shorthand characters are already taken across the CLI.

    A registry lives only while the parser is being built. It is passed to
    every subcommand registration so that no two flags share a shorthand.
    """

    def __init__(self, reserved: frozenset[str] = RESERVED_SHORTS) -> None:
        self._shorts: list[str] = list(reserved)
        self.fallbacks: list[tuple[str, str]] = []

    @property
    def shorts(self) -> tuple[str, ...]:
        """Characters assigned so far, including reserved ones."""
        return tuple(self._shorts)

    def __contains__(self, short: str) -> bool:
        return short in self._shorts

    def assign_short(self, name: str) -> str:
        """Pick the first unused character of ``name`` as its shorthand.

        When every character is already taken, the first character is
        returned without being recorded and the clash is accepted.
        """
        for short in name:
            if not short.isalnum() or short in self._shorts:
                continue
            self._shorts.append(short)
            return short

        fallback = name[0]
        self.fallbacks.append((name, fallback))
        return fallback


class SubcommandBuilder:
    """Adds arguments to one subparser, drawing shorthands from a shared registry."""

    def __init__(self, parser: argparse.ArgumentParser, registry: FlagRegistry) -> None:
        self.parser = parser
        self.registry = registry
        self._local_shorts: set[str] = set()

    def _option_strings(self, name: str) -> list[str]:
        short = self.registry.assign_short(name)
        long_name = f'--{name}'
        if short in self._local_shorts:
            return [long_name]
        self._local_shorts.add(short)
        return [f'-{short}', long_name]

    def add_positional(
        self,
        name: str,
        *,
        required: bool,
        help: str,  # noqa: A002
        type: Callable[[str], Any] | None = None,  # noqa: A002
    ) -> argparse.Action:
        """Add a positional argument; optional positionals may be omitted."""
        if required:
            return self.parser.add_argument(name, type=type, help=help)
        return self.parser.add_argument(name, nargs='?', default=None, type=type, help=help)

    def add_value_flag(
        self,
        name: str,
        *,
        help: str,  # noqa: A002
        required: bool = False,
        choices: tuple[str, ...] | None = None,
    ) -> argparse.Action:
        """Add an option that takes a string value."""
        return self.parser.add_argument(
            *self._option_strings(name),
            dest=name,
            required=required,
            choices=choices,
            default=None,
            help=help,
        )

    def add_bool_flag(self, name: str, *, default: bool, help: str) -> argparse.Action:  # noqa: A002
        """Add a presence-only flag with a stated default applied when absent."""
        return self.parser.add_argument(
            *self._option_strings(name),
            dest=name,
            action='store_true',
            default=default,
            help=f'{help} (defaults to {str(default).lower()})',
        )

    def add_toggle_flag(self, name: str, *, default: bool, help: str) -> argparse.Action:  # noqa: A002
        """Add a paired '--<name>' / '--no-<name>' flag; neither form takes a value."""
        return self.parser.add_argument(
            *self._option_strings(name),
            dest=name,
            action=argparse.BooleanOptionalAction,
            default=default,
            help=f'{help} (defaults to {str(default).lower()})',
        )
