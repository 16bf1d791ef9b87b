"""crgl add subcommand."""

import argparse

from crgl.argparse import argparse_name
from crgl.flags import FlagRegistry, SubcommandBuilder
from crgl.models import AddCommand

from . import _shared


def _build_record(namespace: argparse.Namespace) -> AddCommand:
    return AddCommand(
        name=namespace.name,
        version=namespace.version,
        features=namespace.features,
    )


def register(subparsers: argparse._SubParsersAction, registry: FlagRegistry) -> None:
    """Register the add subcommand."""
    parser = subparsers.add_parser(
        'add',
        parents=[_shared.build_common_parent()],
        help='Add a dependency to the current project',
    )
    builder = SubcommandBuilder(parser, registry)
    builder.add_positional(
        'name',
        required=True,
        type=argparse_name,
        help='The name of the dependency',
    )
    builder.add_value_flag('version', help='Version requirement for the dependency')
    builder.add_value_flag('features', help='Comma separated features to enable')
    parser.set_defaults(build_record=_build_record)
