"""crgl: a small front-end that forwards project commands to cargo."""

import logging

__version__ = '0.0.0.dev0'

logging.getLogger(__name__).addHandler(logging.NullHandler())
