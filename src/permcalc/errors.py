"""The errors module contains the exceptions raised for invalid permission values."""

import typing as t

from .types import ErrorCode, Field


class PermcalcError(Exception):
    """
    General permission calculator error.

    The string form of the error is the single diagnostic line printed by the interactive session.
    """

    code: ErrorCode

    def __init__(self, message: str, *, orig_exc: t.Optional[Exception] = None):
        super().__init__(message)
        self.message = message
        self.orig_exc = orig_exc

    def __str__(self) -> str:
        return f"ERROR: {self.code}: {self.message}"


class OctalFormatError(PermcalcError):
    """Raised when a token is not a 4-digit octal numeral."""

    code: ErrorCode = "E_OCTAL"

    @classmethod
    def for_field(
        cls, field: Field, *, orig_exc: t.Optional[Exception] = None
    ) -> "OctalFormatError":
        return cls(f"{field} must be 4-digit octal (0000-0777)", orig_exc=orig_exc)


class PermissionRangeError(PermcalcError):
    """Raised when a parsed value does not fit in the 9 permission bits."""

    code: ErrorCode = "E_RANGE"

    @classmethod
    def for_field(cls, field: Field) -> "PermissionRangeError":
        return cls(f"{field} out of range (0000-0777)")
