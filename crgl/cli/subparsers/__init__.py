"""Subparser registrations for the crgl CLI."""

import argparse

from crgl.flags import FlagRegistry

from . import add, cargo, init, new, template


def register_all(subparsers: argparse._SubParsersAction, registry: FlagRegistry) -> None:
    """Register all crgl subcommands.

    Registration order fixes which shorthand each flag receives.
    """
    new.register(subparsers, registry)
    add.register(subparsers, registry)
    init.register(subparsers, registry)
    template.register(subparsers, registry)
    cargo.register(subparsers, registry)
