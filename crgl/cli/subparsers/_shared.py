"""Helpers shared by the crgl subparsers."""

import argparse

from crgl.models import RunOptions


def build_common_parent() -> argparse.ArgumentParser:
    """Options accepted by every subcommand.

    These are long-only so they never take a shorthand from the registry.
    """
    parent = argparse.ArgumentParser(add_help=False)
    parent.add_argument(
        '--cargo',
        default='cargo',
        metavar='PATH',
        help='Cargo executable to invoke (default: %(default)s)',
    )
    parent.add_argument(
        '--dry-run',
        action='store_true',
        help='Print the cargo command instead of running it',
    )
    parent.add_argument(
        '--verbose',
        action='store_true',
        help='Enable verbose logging',
    )
    return parent


def build_run_options(namespace: argparse.Namespace) -> RunOptions:
    """Collect the shared options from a parsed namespace."""
    return RunOptions(
        cargo=namespace.cargo,
        dry_run=namespace.dry_run,
        verbose=namespace.verbose,
    )
