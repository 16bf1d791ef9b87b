"""crgl new subcommand."""

import argparse

from crgl.argparse import EDITIONS, argparse_name
from crgl.flags import FlagRegistry, SubcommandBuilder
from crgl.models import NewCommand

from . import _shared


def _build_record(namespace: argparse.Namespace) -> NewCommand:
    return NewCommand(
        name=namespace.name,
        template=namespace.template,
        path=namespace.path,
        git=namespace.git,
        bin=namespace.bin,
        lib=namespace.lib,
        edition=namespace.edition,
        quiet=namespace.quiet,
    )


def register(subparsers: argparse._SubParsersAction, registry: FlagRegistry) -> None:
    """Register the new subcommand."""
    parser = subparsers.add_parser(
        'new',
        parents=[_shared.build_common_parent()],
        help='Create a new project',
    )
    builder = SubcommandBuilder(parser, registry)
    builder.add_positional(
        'name',
        required=True,
        type=argparse_name,
        help='The name of the project',
    )
    builder.add_value_flag('template', help='The template to use')
    builder.add_value_flag(
        'path',
        help='The path to create the project in (defaults to current directory)',
    )
    builder.add_toggle_flag(
        'git',
        default=True,
        help='Initialize a git repository in the project',
    )
    builder.add_bool_flag('bin', default=False, help='Create a binary project')
    builder.add_bool_flag('lib', default=False, help='Create a library project')
    builder.add_value_flag('edition', choices=EDITIONS, help='Rust edition to use')
    builder.add_bool_flag('quiet', default=False, help='Do not print cargo log messages')
    parser.set_defaults(build_record=_build_record)
