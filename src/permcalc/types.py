"""The types module contains common type annotation definitions."""

import typing as t

from typing_extensions import Literal, Protocol, get_args


OctalStr = str
PermissionValue = int
ErrorCode = Literal["E_OCTAL", "E_RANGE"]
Field = Literal["mode", "umask"]


class TextIn(Protocol):
    def __iter__(self) -> t.Iterator[str]:
        ...  # pragma: no cover


class TextOut(Protocol):
    def write(self, s: str) -> int:
        ...  # pragma: no cover

    def flush(self) -> None:
        ...  # pragma: no cover


ERROR_CODES: t.Tuple[str, ...] = get_args(ErrorCode)
