"""
Lexical scanning of a UTF-8 JSON buffer.

The scanner keeps no cursor of its own: ``next_token`` is a function of the
buffer and the offset it is given, so one scanner can be shared by any number
of readers of the same buffer.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Any

from ._errors import ErrorKind
from ._errors import JSONDecodeError
from ._errors import Position
from ._profile import ProfileContext

_WHITESPACE = frozenset(b" \t\n\r")
_DIGITS = frozenset(b"0123456789")
_HEX_DIGITS = frozenset(b"0123456789abcdefABCDEF")
_EXPONENT = frozenset(b"eE")
_SIGNS = frozenset(b"+-")

_QUOTE = ord('"')
_BACKSLASH = ord("\\")
_MINUS = ord("-")
_PLUS = ord("+")
_DOT = ord(".")
_ZERO = ord("0")
_LOWER_U = ord("u")
_CONTROL_LIMIT = 0x20

_BOM = b"\xef\xbb\xbf"

_ESCAPES = {
    ord('"'): '"',
    ord("\\"): "\\",
    ord("/"): "/",
    ord("b"): "\b",
    ord("f"): "\f",
    ord("n"): "\n",
    ord("r"): "\r",
    ord("t"): "\t",
}


class TokenKind(Enum):
    """Lexical categories produced by the scanner."""

    BEGIN_OBJECT = "{"
    END_OBJECT = "}"
    BEGIN_ARRAY = "["
    END_ARRAY = "]"
    COLON = ":"
    COMMA = ","
    TRUE = "true"
    FALSE = "false"
    NULL = "null"
    STRING = "string"
    NUMBER = "number"


_STRUCTURAL = {
    ord("{"): TokenKind.BEGIN_OBJECT,
    ord("}"): TokenKind.END_OBJECT,
    ord("["): TokenKind.BEGIN_ARRAY,
    ord("]"): TokenKind.END_ARRAY,
    ord(":"): TokenKind.COLON,
    ord(","): TokenKind.COMMA,
}

_KEYWORDS: dict[int, tuple[bytes, TokenKind, bool | None]] = {
    ord("t"): (b"true", TokenKind.TRUE, True),
    ord("f"): (b"false", TokenKind.FALSE, False),
    ord("n"): (b"null", TokenKind.NULL, None),
}


@dataclass(frozen=True)
class Token:
    """
    A lexically recognized unit and its byte span.

    ``value`` holds the decoded payload: the text of a string, the float of a
    number, the Python constant of a keyword, or the punctuation character.
    """

    kind: TokenKind
    value: Any
    start: Position
    end: Position


def _first_invalid_utf8(data: bytes) -> Position | None:
    try:
        data.decode("utf-8")
    except UnicodeDecodeError as exc:
        return exc.start
    return None


class Scanner:
    """
    Tokenizes a JSON buffer on demand.

    Byte-by-byte scanning of structural punctuation, keywords, strings and
    numbers. String escapes are decoded while scanning.
    """

    def __init__(self, data: bytes) -> None:
        self.data = data
        self.length = len(data)
        self._invalid_utf8_at = _first_invalid_utf8(data)

    def error(
        self, kind: ErrorKind, msg: str, pos: Position
    ) -> JSONDecodeError:
        """Builds an error positioned in this scanner's buffer."""
        return JSONDecodeError(kind, msg, self.data, pos)

    def skip_whitespace(self, pos: Position) -> Position:
        """Returns the first offset at or after pos that is not whitespace."""
        data = self.data
        while pos < self.length and data[pos] in _WHITESPACE:
            pos += 1
        return pos

    def next_token(self, pos: Position) -> Token | None:
        """Returns the token following pos, or None at end of input."""
        pos = self.skip_whitespace(pos)
        if pos >= self.length:
            return None

        byte = self.data[pos]

        if byte in _STRUCTURAL:
            return Token(_STRUCTURAL[byte], chr(byte), pos, pos + 1)
        elif byte == _QUOTE:
            return self.scan_string(pos)
        elif byte in _DIGITS or byte in (_MINUS, _PLUS, _DOT):
            return self.scan_number(pos)
        elif byte in _KEYWORDS:
            return self.scan_keyword(pos)
        else:
            raise self._unexpected_byte(pos)

    def _unexpected_byte(self, pos: Position) -> JSONDecodeError:
        if pos == self._invalid_utf8_at:
            return self.error(ErrorKind.INVALID_UTF8, "Invalid UTF-8 byte", pos)
        if pos == 0 and self.data.startswith(_BOM):
            return self.error(
                ErrorKind.UNEXPECTED_TOKEN,
                "JSON input should not start with a UTF-8 BOM",
                pos,
            )

        byte = self.data[pos]
        shown = repr(chr(byte)) if byte < 0x80 else f"byte 0x{byte:02x}"
        return self.error(
            ErrorKind.UNEXPECTED_TOKEN, f"Unexpected character {shown}", pos
        )

    def scan_keyword(self, pos: Position) -> Token:
        """Scans true, false or null; only a full match is accepted."""
        with ProfileContext("scan_keyword") as prof:
            literal, kind, value = _KEYWORDS[self.data[pos]]
            for offset, expected in enumerate(literal):
                i = pos + offset
                if i >= self.length:
                    raise self.error(
                        ErrorKind.UNEXPECTED_END_OF_INPUT,
                        f"Truncated literal, expecting {literal.decode()!r}",
                        i,
                    )
                if self.data[i] != expected:
                    if i == self._invalid_utf8_at:
                        raise self._unexpected_byte(i)
                    raise self.error(
                        ErrorKind.UNEXPECTED_TOKEN,
                        f"Invalid literal, expecting {literal.decode()!r}",
                        i,
                    )
            prof.consumed(pos, pos + len(literal))
            return Token(kind, value, pos, pos + len(literal))

    def _scan_digits(self, pos: Position) -> Position:
        while pos < self.length and self.data[pos] in _DIGITS:
            pos += 1
        return pos

    def _require_digit(self, pos: Position, msg: str) -> None:
        if pos >= self.length or self.data[pos] not in _DIGITS:
            raise self.error(ErrorKind.INVALID_NUMBER, msg, pos)

    def scan_number(self, pos: Position) -> Token:
        """Scans a number following the JSON number grammar."""
        with ProfileContext("scan_number") as prof:
            data = self.data
            i = pos

            if data[i] == _MINUS:
                i += 1

            self._require_digit(i, "Expecting digit")
            if data[i] == _ZERO:
                i += 1
                if i < self.length and data[i] in _DIGITS:
                    raise self.error(
                        ErrorKind.INVALID_NUMBER, "Leading zeros not allowed", i
                    )
            else:
                i = self._scan_digits(i)

            if i < self.length and data[i] == _DOT:
                i += 1
                self._require_digit(i, "Expecting digit after decimal point")
                i = self._scan_digits(i)

            if i < self.length and data[i] in _EXPONENT:
                i += 1
                if i < self.length and data[i] in _SIGNS:
                    i += 1
                self._require_digit(i, "Expecting digit in exponent")
                i = self._scan_digits(i)

            text = data[pos:i].decode("ascii")
            prof.consumed(pos, i)
            return Token(TokenKind.NUMBER, float(text), pos, i)

    def _decode(self, start: Position, end: Position) -> str:
        try:
            return self.data[start:end].decode("utf-8")
        except UnicodeDecodeError as exc:
            raise self.error(
                ErrorKind.INVALID_UTF8, "Invalid UTF-8 byte", start + exc.start
            ) from exc

    def scan_string(self, pos: Position) -> Token:
        """Scans a quoted string, decoding escapes into the token value."""
        with ProfileContext("scan_string") as prof:
            data = self.data
            chunks: list[str] = []
            i = run_start = pos + 1

            while i < self.length:
                byte = data[i]
                if byte == _QUOTE:
                    chunks.append(self._decode(run_start, i))
                    prof.consumed(pos, i + 1)
                    return Token(TokenKind.STRING, "".join(chunks), pos, i + 1)
                elif byte == _BACKSLASH:
                    chunks.append(self._decode(run_start, i))
                    char, i = self._scan_escape(i)
                    chunks.append(char)
                    run_start = i
                elif byte < _CONTROL_LIMIT:
                    self._decode(run_start, i)
                    raise self.error(
                        ErrorKind.UNEXPECTED_TOKEN,
                        "Invalid control character in string",
                        i,
                    )
                else:
                    i += 1

            self._decode(run_start, i)
            raise self.error(
                ErrorKind.UNEXPECTED_END_OF_INPUT,
                f"Unterminated string starting at offset {pos}",
                self.length,
            )

    def _scan_hex4(self, pos: Position) -> int:
        """Reads the four hex digits of the \\u escape whose backslash is at pos."""
        start = pos + 2
        for i in range(start, start + 4):
            if i >= self.length:
                raise self.error(
                    ErrorKind.UNEXPECTED_END_OF_INPUT,
                    "Incomplete unicode escape sequence",
                    self.length,
                )
            if self.data[i] not in _HEX_DIGITS:
                if i == self._invalid_utf8_at:
                    raise self._unexpected_byte(i)
                raise self.error(
                    ErrorKind.INVALID_ESCAPE,
                    "Invalid unicode escape sequence",
                    pos,
                )
        return int(self.data[start : start + 4].decode("ascii"), 16)

    def _scan_escape(self, pos: Position) -> tuple[str, Position]:
        """Decodes the escape at pos, returning the text and the next offset."""
        if pos + 1 >= self.length:
            raise self.error(
                ErrorKind.UNEXPECTED_END_OF_INPUT,
                "Unterminated escape sequence",
                self.length,
            )

        code = self.data[pos + 1]
        if code in _ESCAPES:
            return _ESCAPES[code], pos + 2
        if code != _LOWER_U:
            if pos + 1 == self._invalid_utf8_at:
                raise self._unexpected_byte(pos + 1)
            shown = chr(code) if code < 0x80 else f"x{code:02x}"
            raise self.error(
                ErrorKind.INVALID_ESCAPE, f"Invalid escape sequence: \\{shown}", pos
            )

        unit = self._scan_hex4(pos)
        if 0xDC00 <= unit <= 0xDFFF:
            raise self.error(
                ErrorKind.INVALID_ESCAPE, "Unpaired low surrogate", pos
            )
        if not 0xD800 <= unit <= 0xDBFF:
            return chr(unit), pos + 6

        # High surrogate: must be followed by a \u escape of a low surrogate
        low_pos = pos + 6
        if low_pos >= self.length or (
            self.data[low_pos] == _BACKSLASH and low_pos + 1 >= self.length
        ):
            raise self.error(
                ErrorKind.UNEXPECTED_END_OF_INPUT,
                "Unterminated string after high surrogate",
                self.length,
            )
        if (
            self.data[low_pos] == _BACKSLASH
            and self.data[low_pos + 1] == _LOWER_U
        ):
            low = self._scan_hex4(low_pos)
            if 0xDC00 <= low <= 0xDFFF:
                char = chr(0x10000 + ((unit - 0xD800) << 10) + (low - 0xDC00))
                return char, low_pos + 6

        raise self.error(ErrorKind.INVALID_ESCAPE, "Unpaired high surrogate", pos)
