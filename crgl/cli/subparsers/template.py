"""crgl template subcommand."""

import argparse

from crgl.flags import FlagRegistry, SubcommandBuilder
from crgl.models import TemplateCommand

from . import _shared


def _build_record(namespace: argparse.Namespace) -> TemplateCommand:
    return TemplateCommand(name=namespace.name, path=namespace.path)


def register(subparsers: argparse._SubParsersAction, registry: FlagRegistry) -> None:
    """Register the template subcommand."""
    parser = subparsers.add_parser(
        'template',
        parents=[_shared.build_common_parent()],
        help='Declare a project template',
    )
    builder = SubcommandBuilder(parser, registry)
    builder.add_value_flag('name', required=True, help='The name of the template')
    builder.add_value_flag('path', required=True, help='Where the template lives')
    parser.set_defaults(build_record=_build_record)
