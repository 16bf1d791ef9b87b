"""Argparse type callables for crgl arguments."""

from argparse import ArgumentTypeError

EDITIONS = ('2015', '2018', '2021', '2024')


def argparse_name(value: str) -> str:
    """Validate a package or template name."""
    name = value.strip()
    if not name:
        msg = 'Name cannot be empty'
        raise ArgumentTypeError(msg)
    if name.startswith('-'):
        msg = f'Name must not start with a dash: {value}'
        raise ArgumentTypeError(msg)
    return name
