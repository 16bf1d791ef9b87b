"""crgl init subcommand."""

import argparse

from crgl.argparse import EDITIONS
from crgl.flags import FlagRegistry, SubcommandBuilder
from crgl.models import InitCommand

from . import _shared


def _build_record(namespace: argparse.Namespace) -> InitCommand:
    return InitCommand(
        path=namespace.path,
        git=namespace.git,
        bin=namespace.bin,
        lib=namespace.lib,
        edition=namespace.edition,
        quiet=namespace.quiet,
    )


def register(subparsers: argparse._SubParsersAction, registry: FlagRegistry) -> None:
    """Register the init subcommand."""
    parser = subparsers.add_parser(
        'init',
        parents=[_shared.build_common_parent()],
        help='Create a project in an existing directory',
    )
    builder = SubcommandBuilder(parser, registry)
    builder.add_positional(
        'path',
        required=False,
        help='Directory to initialize (defaults to current directory)',
    )
    # Unlike new, git is opt-in here
    builder.add_bool_flag('git', default=False, help='Initialize a git repository')
    builder.add_bool_flag('bin', default=False, help='Create a binary project')
    builder.add_bool_flag('lib', default=False, help='Create a library project')
    builder.add_value_flag('edition', choices=EDITIONS, help='Rust edition to use')
    builder.add_bool_flag('quiet', default=False, help='Do not print cargo log messages')
    parser.set_defaults(build_record=_build_record)
