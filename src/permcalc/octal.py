"""The octal module contains utilities for validating, parsing, and formatting 4-digit octal
permission strings."""

import typing as t

from .errors import OctalFormatError, PermissionRangeError
from .types import Field, OctalStr, PermissionValue


OCTAL_WIDTH = 4
OCTAL_DIGITS = "01234567"
PERMISSION_MASK = 0o777


def validate_octal4(token: t.Any) -> bool:
    """
    Return whether `token` is a 4-digit octal numeral like ``"0644"``.

    Only the characters ``0`` through ``7`` are accepted. Signs, whitespace, prefixes like ``0o``,
    and the digits ``8`` and ``9`` are all rejected.

    Args:
        token: Value to check.
    """
    if not isinstance(token, str) or len(token) != OCTAL_WIDTH:
        return False
    return all(char in OCTAL_DIGITS for char in token)


def parse_octal4(token: OctalStr) -> PermissionValue:
    """
    Return integer value of a 4-digit octal numeral.

    The result is in the range ``0`` to ``0o7777``. No permission range check is applied here; see
    :func:`read_permission` for that.

    Args:
        token: Octal numeral that passes :func:`validate_octal4`.

    Raises:
        ValueError: When `token` is not a 4-digit octal numeral.
    """
    if not validate_octal4(token):
        raise ValueError(f"Invalid 4-digit octal numeral: {token!r}")

    value = 0
    for char in token:
        value = value * 8 + (ord(char) - ord("0"))
    return value


def read_permission(token: t.Any, field: Field) -> PermissionValue:
    """
    Return permission value parsed from a user supplied token.

    The token is first checked to be a 4-digit octal numeral and then checked to fit in the 9
    permission bits. Values like ``"1000"`` are well-formed octal numerals but exceed ``0o777``.

    Args:
        token: User supplied token.
        field: Name of the value being read (``"mode"`` or ``"umask"``) used in error messages.

    Raises:
        OctalFormatError: When `token` is not a 4-digit octal numeral.
        PermissionRangeError: When the parsed value is greater than ``0o777``.
    """
    if not validate_octal4(token):
        raise OctalFormatError.for_field(field)

    value = parse_octal4(token)

    if value > PERMISSION_MASK:
        raise PermissionRangeError.for_field(field)

    return value


def format_octal4(value: PermissionValue) -> OctalStr:
    """Return the permission bits of `value` as a zero-padded 4-digit octal string."""
    return f"{value & PERMISSION_MASK:0{OCTAL_WIDTH}o}"
