"""The cli module contains the interactive permission calculator session."""

from enum import Enum
import logging
import sys
import typing as t

from .errors import OctalFormatError, PermcalcError
from .octal import format_octal4, read_permission, validate_octal4
from .permissions import compute_effective, format_symbolic
from .types import Field, OctalStr, PermissionValue, TextIn, TextOut


logger = logging.getLogger(__name__)

PROMPT_MODE = "Enter file mode (4-digit octal, e.g., 0644): "
PROMPT_UMASK = "Enter umask (4-digit octal, e.g., 0022): "


class SessionState(Enum):
    START = "start"
    MODE_READ = "mode_read"
    MODE_VALID = "mode_valid"
    UMASK_READ = "umask_read"
    UMASK_VALID = "umask_valid"
    COMPUTED = "computed"
    DONE = "done"
    ERROR = "error"


EXIT_CODES: t.Dict[SessionState, int] = {
    SessionState.DONE: 0,
    SessionState.ERROR: 1,
}


class Result(t.NamedTuple):
    """Outcome of a successful calculation."""

    mode: PermissionValue
    umask: PermissionValue
    effective: PermissionValue

    @property
    def octal(self) -> OctalStr:
        return format_octal4(self.effective)

    @property
    def symbolic(self) -> str:
        return format_symbolic(self.effective)


def iter_tokens(stream: TextIn) -> t.Iterator[str]:
    """
    Yield whitespace-delimited tokens from `stream`.

    Lines are only read from the stream when more tokens are requested, so input following the
    last token consumed is left unread.
    """
    for line in stream:
        yield from line.split()


def prompt_token(prompt: str, tokens: t.Iterator[str], stdout: TextOut) -> str:
    """Write `prompt` and return the next token or an empty string at end of input."""
    stdout.write(prompt)
    stdout.flush()
    return next(tokens, "")


def check_format(token: str, field: Field) -> None:
    """Raise :class:`OctalFormatError` when `token` is not a 4-digit octal numeral."""
    if not validate_octal4(token):
        raise OctalFormatError.for_field(field)


def calculate(mode_token: str, umask_token: str) -> Result:
    """
    Return the effective permissions for a mode and umask given as 4-digit octal strings.

    Both tokens are checked for octal format before either value is range checked.

    Args:
        mode_token: Requested mode, e.g. ``"0644"``.
        umask_token: Umask, e.g. ``"0022"``.

    Raises:
        OctalFormatError: When either token is not a 4-digit octal numeral.
        PermissionRangeError: When either value is greater than ``0o777``.
    """
    check_format(mode_token, "mode")
    check_format(umask_token, "umask")

    mode = read_permission(mode_token, "mode")
    umask = read_permission(umask_token, "umask")

    return Result(mode=mode, umask=umask, effective=compute_effective(mode, umask))


class Session:
    """
    Interactive session that prompts for a mode and umask and prints the effective permissions.

    The umask is only prompted for once the mode has been accepted as a 4-digit octal numeral. The
    first error ends the session.

    Args:
        stdin: Text stream to read tokens from.
        stdout: Text stream to write prompts and results to.
    """

    def __init__(self, stdin: TextIn, stdout: TextOut):
        self.stdout = stdout
        self.tokens = iter_tokens(stdin)
        self.state = SessionState.START
        self.error: t.Optional[PermcalcError] = None

    def _transition(self, state: SessionState) -> None:
        logger.debug("session: %s -> %s", self.state.name, state.name)
        self.state = state

    def run(self) -> int:
        """Run the session and return the process exit code."""
        try:
            result = self._run()
        except PermcalcError as exc:
            logger.debug("session: failed with %s", exc.code)
            self.error = exc
            self._transition(SessionState.ERROR)
            self.stdout.write(f"{exc}\n")
        else:
            self.stdout.write(f"\nOK: EFFECTIVE {result.octal}\n")
            self.stdout.write(f"OK: SYMBOLIC {result.symbolic}\n")
            self._transition(SessionState.DONE)

        self.stdout.flush()
        return EXIT_CODES[self.state]

    def _read_token(self, prompt: str, field: Field, state: SessionState) -> str:
        # Undecodable input is reported as a malformed token.
        try:
            return prompt_token(prompt, self.tokens, self.stdout)
        except UnicodeDecodeError as exc:
            raise OctalFormatError.for_field(field, orig_exc=exc) from exc
        finally:
            self._transition(state)

    def _run(self) -> Result:
        mode_token = self._read_token(PROMPT_MODE, "mode", SessionState.MODE_READ)
        check_format(mode_token, "mode")
        self._transition(SessionState.MODE_VALID)

        umask_token = self._read_token(PROMPT_UMASK, "umask", SessionState.UMASK_READ)
        check_format(umask_token, "umask")
        self._transition(SessionState.UMASK_VALID)

        result = calculate(mode_token, umask_token)
        logger.debug(
            "session: mode=%o umask=%o effective=%o", result.mode, result.umask, result.effective
        )
        self._transition(SessionState.COMPUTED)
        return result


def main(stdin: t.Optional[TextIn] = None, stdout: t.Optional[TextOut] = None) -> int:
    """
    Run the interactive permission calculator and return its exit code.

    Args:
        stdin: Input stream. Defaults to ``sys.stdin``.
        stdout: Output stream. Defaults to ``sys.stdout``.
    """
    if stdin is None:
        stdin = sys.stdin
    if stdout is None:
        stdout = sys.stdout
    return Session(stdin, stdout).run()


def run() -> None:
    sys.exit(main())
