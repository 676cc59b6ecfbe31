"""The permissions module contains the umask arithmetic and symbolic permission rendering."""

import stat
import typing as t

from .octal import PERMISSION_MASK
from .types import PermissionValue


# Bit tested for each character position of a triad once the triad has been shifted down to the
# "other" bits.
TRIAD_SYMBOLS: t.Tuple[t.Tuple[str, int], ...] = (
    ("r", stat.S_IROTH),
    ("w", stat.S_IWOTH),
    ("x", stat.S_IXOTH),
)

# Shift that brings each user class down to the low 3 bits, in display order.
TRIAD_SHIFTS: t.Dict[str, int] = {
    "u": 6,
    "g": 3,
    "o": 0,
}

TRIAD_MASK = stat.S_IRWXO


def compute_effective(mode: PermissionValue, umask: PermissionValue) -> PermissionValue:
    """
    Return the effective permissions granted when creating a file with `mode` under `umask`.

    A permission bit is set in the result only when it is requested by `mode` and not blocked by
    `umask`. The complement of `umask` has every bit above the permission bits set, so the result
    is masked back down to ``0o777``.

    Args:
        mode: Requested permission bits.
        umask: Permission bits to remove.
    """
    return (mode & ~umask) & PERMISSION_MASK


def format_triad(bits: int) -> str:
    """Return ``rwx`` style string for a single 3-bit permission group."""
    return "".join(symbol if bits & bit else "-" for symbol, bit in TRIAD_SYMBOLS)


def format_symbolic(value: PermissionValue) -> str:
    """
    Return 9 character symbolic form of the permission bits of `value`.

    Examples::

        format_symbolic(0o644)  # "rw-r--r--"
        format_symbolic(0o755)  # "rwxr-xr-x"

    Args:
        value: Permission value. Only the lower 9 bits are used.
    """
    return "".join(format_triad((value >> shift) & TRIAD_MASK) for shift in TRIAD_SHIFTS.values())
