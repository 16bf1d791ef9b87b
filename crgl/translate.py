"""Translate parsed command records into cargo argument lists."""

from pathlib import Path

from crgl.logging import get_logger
from crgl.models import (
    AddCommand,
    CargoCommand,
    CommandRecord,
    InitCommand,
    NewCommand,
    TemplateCommand,
)

logger = get_logger(__name__)

NO_VCS = ['--vcs', 'none']


def _project_flags(
    *,
    git: bool,
    edition: str | None,
    bin: bool,  # noqa: A002
    lib: bool,
    quiet: bool,
) -> list[str]:
    """Flags shared by ``cargo new`` and ``cargo init``, in schema order."""
    args: list[str] = []
    if not git:
        args.extend(NO_VCS)
    if edition:
        args.extend(['--edition', edition])
    if bin:
        args.append('--bin')
    if lib:
        args.append('--lib')
    if quiet:
        args.append('--quiet')
    return args


def build_new_args(record: NewCommand) -> list[str]:
    """Build ``cargo new`` arguments, or ``cargo generate`` when a template is set."""
    if record.template:
        return build_generate_args(record)

    target = str(Path(record.path) / record.name) if record.path else record.name
    return [
        'new',
        *_project_flags(
            git=record.git,
            edition=record.edition,
            bin=record.bin,
            lib=record.lib,
            quiet=record.quiet,
        ),
        target,
    ]


def build_generate_args(record: NewCommand) -> list[str]:
    """Build ``cargo generate`` arguments for a templated project."""
    if record.edition:
        logger.warning(
            'edition_ignored_for_template',
            edition=record.edition,
            template=record.template,
        )

    args = ['generate', '--git', record.template]
    if record.path:
        args.extend(['--destination', record.path])
    if not record.git:
        args.extend(NO_VCS)
    if record.bin:
        args.append('--bin')
    if record.lib:
        args.append('--lib')
    if record.quiet:
        args.append('--silent')
    args.extend(['--name', record.name])
    return args


def build_add_args(record: AddCommand) -> list[str]:
    """Build ``cargo add`` arguments; a version is pinned as ``name@version``."""
    args = ['add']
    if record.features:
        args.extend(['--features', record.features])
    args.append(f'{record.name}@{record.version}' if record.version else record.name)
    return args


def build_init_args(record: InitCommand) -> list[str]:
    """Build ``cargo init`` arguments."""
    args = [
        'init',
        *_project_flags(
            git=record.git,
            edition=record.edition,
            bin=record.bin,
            lib=record.lib,
            quiet=record.quiet,
        ),
    ]
    if record.path:
        args.append(record.path)
    return args


def build_cargo_args(record: CommandRecord) -> list[str] | None:
    """Map a command record to the cargo argument list it stands for.

    Returns None for records that do not run anything.
    """
    if isinstance(record, NewCommand):
        return build_new_args(record)
    if isinstance(record, AddCommand):
        return build_add_args(record)
    if isinstance(record, InitCommand):
        return build_init_args(record)
    if isinstance(record, TemplateCommand):
        return None
    if isinstance(record, CargoCommand):
        return list(record.commands)

    msg = f'Unsupported command record: {record!r}'
    raise TypeError(msg)
