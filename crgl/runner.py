"""Running cargo as a child process."""

import shlex
import subprocess
import sys

from crgl.logging import get_logger
from crgl.models import RunOptions

logger = get_logger(__name__)


class CargoSpawnError(RuntimeError):
    """Raised when the cargo executable cannot be started."""


def format_command(cmd: list[str]) -> str:
    """Render a command line the way a shell user would type it."""
    return shlex.join(cmd)


def run_cargo(args: list[str], options: RunOptions) -> int:
    """Run cargo with ``args`` and wait for it to finish.

    The child shares this process's stdin, stdout and stderr. Its exit code
    is returned as-is.
    """
    cmd = [options.cargo, *args]

    if options.dry_run:
        logger.info('dry_run_mode', command=format_command(cmd))
        sys.stdout.write(f'{format_command(cmd)}\n')
        return 0

    logger.info(
        'running_cargo',
        command=format_command(cmd),
        _verbose_argv=cmd,
    )
    try:
        result = subprocess.run(  # noqa: S603 - executing cargo
            cmd,
            check=False,
            shell=False,
        )
    except (FileNotFoundError, PermissionError) as e:
        msg = f'Failed to start {options.cargo}: {e}'
        raise CargoSpawnError(msg) from e

    if result.returncode == 0:
        logger.debug('cargo_exited', returncode=result.returncode)
    else:
        logger.warning(
            'cargo_failed',
            returncode=result.returncode,
            command=format_command(cmd),
        )
    # Killed by signal N: report 128 + N like a shell does
    if result.returncode < 0:
        return 128 - result.returncode
    return result.returncode
