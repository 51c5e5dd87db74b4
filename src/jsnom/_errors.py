"""Parse failure categories and the exception that carries them."""

from enum import Enum

type Position = int


class ErrorKind(Enum):
    """
    Closed set of parse failure categories.

    Each failure raised by the scanner or the parser carries exactly one.
    """

    UNEXPECTED_END_OF_INPUT = "unexpected_end_of_input"
    UNEXPECTED_TOKEN = "unexpected_token"
    INVALID_ESCAPE = "invalid_escape"
    INVALID_NUMBER = "invalid_number"
    INVALID_UTF8 = "invalid_utf8"
    TRAILING_DATA = "trailing_data"
    NESTING_TOO_DEEP = "nesting_too_deep"


class JSONDecodeError(ValueError):
    """
    Handles JSON parsing failures with precise position information.

    Carries the failure category and the byte offset where the problem was
    detected. Line and column numbers are derived from that offset, with
    columns counted in bytes.
    """

    def __init__(
        self, kind: ErrorKind, msg: str, doc: bytes = b"", pos: Position = 0
    ) -> None:
        if not isinstance(kind, ErrorKind):
            raise TypeError("kind must be an ErrorKind")
        if not isinstance(msg, str):
            raise TypeError("msg must be a string")
        if not isinstance(pos, int) or pos < 0:
            raise ValueError("pos must be a non-negative integer")

        self.kind = kind
        self.msg = msg
        self.doc = doc
        self.pos = pos

        self.lineno = doc.count(b"\n", 0, pos) + 1 if doc else 1
        self.colno = pos - doc.rfind(b"\n", 0, pos) if doc else pos + 1

        super().__init__(f"{msg} at line {self.lineno}, column {self.colno}")

    def __reduce__(self) -> tuple[type, tuple[ErrorKind, str, bytes, int]]:
        return self.__class__, (self.kind, self.msg, self.doc, self.pos)
