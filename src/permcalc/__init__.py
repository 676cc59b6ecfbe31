"""
The permcalc package.

An interactive calculator for the effective UNIX file permissions produced by a mode and a umask.
"""

__version__ = "0.1.0"

import logging

from .cli import Result, Session, SessionState, calculate, main
from .errors import OctalFormatError, PermcalcError, PermissionRangeError
from .octal import format_octal4, parse_octal4, read_permission, validate_octal4
from .permissions import compute_effective, format_symbolic, format_triad


logging.getLogger(__name__).addHandler(logging.NullHandler())
