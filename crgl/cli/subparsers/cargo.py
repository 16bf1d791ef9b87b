"""crgl cargo subcommand: forward arguments to cargo untouched."""

import argparse

from crgl.flags import FlagRegistry
from crgl.models import CargoCommand

from . import _shared


def _build_record(namespace: argparse.Namespace) -> CargoCommand:
    return CargoCommand(commands=tuple(namespace.commands))


def register(subparsers: argparse._SubParsersAction, _registry: FlagRegistry) -> None:
    """Register the cargo passthrough subcommand."""
    parser = subparsers.add_parser(
        'cargo',
        parents=[_shared.build_common_parent()],
        help='Run an arbitrary cargo command',
    )
    parser.add_argument(
        'commands',
        nargs=argparse.REMAINDER,
        help='Arguments passed to cargo as-is',
    )
    # Leading options cargo understands but crgl does not are folded back in
    # by parse_args_to_model
    parser.set_defaults(build_record=_build_record, passthrough=True)
