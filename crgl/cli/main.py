"""Main CLI entry point for crgl."""

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from crgl.cli.subparsers import register_all
from crgl.cli.subparsers._shared import build_run_options
from crgl.flags import FlagRegistry
from crgl.logging import configure_logging, get_logger
from crgl.models import CommandRecord, RunOptions, TemplateCommand
from crgl.runner import run_cargo
from crgl.translate import build_cargo_args

logger = get_logger(__name__)


def build_parser(registry: FlagRegistry | None = None) -> argparse.ArgumentParser:
    """Build the top-level argument parser."""
    parser = argparse.ArgumentParser(
        prog='crgl',
        description='Cargo Limp Like Templater',
    )
    subparsers = parser.add_subparsers(dest='command', required=True, metavar='COMMAND')
    if registry is None:
        registry = FlagRegistry()
    register_all(subparsers, registry)
    return parser


def _validation_message(exc: ValidationError) -> str:
    return '; '.join(error['msg'] for error in exc.errors())


def parse_args_to_model(
    argv: Sequence[str] | None = None,
    registry: FlagRegistry | None = None,
) -> tuple[CommandRecord, RunOptions]:
    """Parse command line arguments into a typed command record and run options."""
    parser = build_parser(registry)
    namespace, extras = parser.parse_known_args(argv)
    if extras:
        if not getattr(namespace, 'passthrough', False):
            parser.error(f'unrecognized arguments: {" ".join(extras)}')
        namespace.commands = [*extras, *namespace.commands]

    try:
        record = namespace.build_record(namespace)
    except ValidationError as exc:
        parser.error(_validation_message(exc))

    return record, build_run_options(namespace)


def run(record: CommandRecord, options: RunOptions) -> int:
    """Translate a command record and run the resulting cargo command."""
    cargo_args = build_cargo_args(record)
    if cargo_args is None:
        if isinstance(record, TemplateCommand):
            logger.info('template_declared', name=record.name, path=record.path)
        return 0

    logger.debug(
        'translated_command',
        cargo_args=cargo_args,
        _verbose_record=record.model_dump(mode='json'),
    )
    return run_cargo(cargo_args, options)


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point for the crgl CLI."""
    registry = FlagRegistry()
    record, options = parse_args_to_model(argv, registry)

    # Configure logging first
    configure_logging(verbose=options.verbose)

    for flag, short in registry.fallbacks:
        logger.debug('shorthand_exhausted', flag=flag, fallback=short)

    logger.debug(
        'starting_crgl',
        command=record.command,
        dry_run=options.dry_run,
        _verbose_options=options.model_dump(mode='json'),
    )

    try:
        return run(record, options)
    except Exception as e:  # noqa: BLE001 - top-level CLI guard
        logger.exception('cli_operation_failed', error=str(e))
        sys.stderr.write(f'Error: {e}\n')
        return 1


if __name__ == '__main__':
    sys.exit(main())
