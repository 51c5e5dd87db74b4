"""
Recursive descent reduction of scanner tokens into a value tree.

The parser decides every production from the kind of the next token alone and
never re-scans a consumed token. Nesting is bounded by ``ParseConfig.max_depth``.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any

from ._errors import ErrorKind
from ._errors import JSONDecodeError
from ._profile import ProfileContext
from ._scanner import Scanner
from ._scanner import Token
from ._scanner import TokenKind
from ._values import Array
from ._values import Bool
from ._values import Null
from ._values import Number
from ._values import Object
from ._values import String
from ._values import Value

log = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 256

_VARIANTS: dict[TokenKind, type[Value]] = {
    TokenKind.NULL: Null,
    TokenKind.TRUE: Bool,
    TokenKind.FALSE: Bool,
    TokenKind.NUMBER: Number,
    TokenKind.STRING: String,
    TokenKind.BEGIN_ARRAY: Array,
    TokenKind.BEGIN_OBJECT: Object,
}


class ParseState(Enum):
    """Grammar positions of the reducer, used to describe what was expected."""

    EXPECT_VALUE = "Expecting value"
    EXPECT_KEY = "Expecting property name enclosed in double quotes"
    EXPECT_COLON = "Expecting ':' delimiter"
    EXPECT_SEPARATOR_OR_CLOSE = "Expecting ',' delimiter"
    DONE = "Extra data"


@dataclass(frozen=True)
class ParseConfig:
    """
    Configures parsing behavior with immutable settings.

    Built from the keyword arguments of every parse entry point.
    """

    max_depth: int = DEFAULT_MAX_DEPTH

    def __post_init__(self) -> None:
        if isinstance(self.max_depth, bool) or not isinstance(
            self.max_depth, int
        ):
            raise TypeError("max_depth must be an integer")
        if self.max_depth < 1:
            raise ValueError("max_depth must be a positive integer")


class JsonParser:
    """
    Builds a value tree from the token stream of one buffer.

    Each instance owns its cursor and depth counter and is used for a single
    document.
    """

    def __init__(self, scanner: Scanner, config: ParseConfig) -> None:
        self.scanner = scanner
        self.config = config
        self.pos = 0
        self.depth = 0
        self._key_cache: dict[str, str] = {}

    def next_token(self) -> Token | None:
        """Consumes and returns the next token, or None at end of input."""
        token = self.scanner.next_token(self.pos)
        if token is not None:
            self.pos = token.end
        return token

    def _unexpected(
        self, state: ParseState, token: Token | None
    ) -> JSONDecodeError:
        if token is None:
            return self.scanner.error(
                ErrorKind.UNEXPECTED_END_OF_INPUT,
                state.value,
                self.scanner.length,
            )
        return self.scanner.error(
            ErrorKind.UNEXPECTED_TOKEN, state.value, token.start
        )

    def _descend(self, token: Token) -> None:
        if self.depth >= self.config.max_depth:
            raise self.scanner.error(
                ErrorKind.NESTING_TOO_DEEP,
                f"Nesting deeper than {self.config.max_depth} levels",
                token.start,
            )
        self.depth += 1

    def parse_document(self, expected: type[Value] | None = None) -> Value:
        """
        Parses the single top-level value and rejects anything after it.

        When expected is given, the root value must be of that variant.
        """
        token = self.next_token()
        if expected is not None and token is not None:
            variant = _VARIANTS.get(token.kind)
            if variant is not None and variant is not expected:
                raise self.scanner.error(
                    ErrorKind.UNEXPECTED_TOKEN,
                    f"Expecting {expected.__name__.lower()}",
                    token.start,
                )

        result = self.parse_value(token)

        # Only whitespace may follow the root value
        end = self.scanner.skip_whitespace(self.pos)
        if end < self.scanner.length:
            raise self.scanner.error(
                ErrorKind.TRAILING_DATA, ParseState.DONE.value, end
            )
        return result

    def parse_value(self, token: Token | None) -> Value:
        """Reduces the value that starts with token."""
        if token is None:
            raise self._unexpected(ParseState.EXPECT_VALUE, token)

        kind = token.kind
        if kind is TokenKind.STRING:
            return String(token.value)
        elif kind is TokenKind.NUMBER:
            return Number(token.value)
        elif kind is TokenKind.TRUE or kind is TokenKind.FALSE:
            return Bool(token.value)
        elif kind is TokenKind.NULL:
            return Null()
        elif kind is TokenKind.BEGIN_ARRAY:
            return self.parse_array(token)
        elif kind is TokenKind.BEGIN_OBJECT:
            return self.parse_object(token)
        else:
            raise self._unexpected(ParseState.EXPECT_VALUE, token)

    def _intern_key(self, key: str) -> str:
        """Makes repeated keys across objects share one string object."""
        return self._key_cache.setdefault(key, key)

    def _close_or_continue(
        self, close: TokenKind, container: str, next_state: ParseState
    ) -> Token | None:
        """
        Consumes the separator after a member or element.

        Returns the token starting the next member, or None once the
        container is closed.
        """
        token = self.next_token()
        if token is not None and token.kind is close:
            return None
        if token is None or token.kind is not TokenKind.COMMA:
            raise self._unexpected(ParseState.EXPECT_SEPARATOR_OR_CLOSE, token)

        comma = token
        token = self.next_token()
        if token is None:
            raise self._unexpected(next_state, token)
        if token.kind is close:
            raise self.scanner.error(
                ErrorKind.UNEXPECTED_TOKEN,
                f"Illegal trailing comma before end of {container}",
                comma.start,
            )
        return token

    def parse_array(self, open_token: Token) -> Array:
        """Parses the elements of an array whose '[' is open_token."""
        with ProfileContext("parse_array") as prof:
            self._descend(open_token)
            items: list[Value] = []

            token = self.next_token()
            if token is None or token.kind is not TokenKind.END_ARRAY:
                while True:
                    items.append(self.parse_value(token))
                    token = self._close_or_continue(
                        TokenKind.END_ARRAY, "array", ParseState.EXPECT_VALUE
                    )
                    if token is None:
                        break

            self.depth -= 1
            prof.consumed(open_token.start, self.pos)
            return Array(items)

    def parse_object(self, open_token: Token) -> Object:
        """Parses the members of an object whose '{' is open_token."""
        with ProfileContext("parse_object") as prof:
            self._descend(open_token)
            members: dict[str, Value] = {}

            token = self.next_token()
            if token is None or token.kind is not TokenKind.END_OBJECT:
                while True:
                    if token is None or token.kind is not TokenKind.STRING:
                        raise self._unexpected(ParseState.EXPECT_KEY, token)
                    key = self._intern_key(token.value)

                    token = self.next_token()
                    if token is None or token.kind is not TokenKind.COLON:
                        raise self._unexpected(ParseState.EXPECT_COLON, token)

                    value = self.parse_value(self.next_token())
                    # Last value wins and moves the key to its last position
                    members.pop(key, None)
                    members[key] = value

                    token = self._close_or_continue(
                        TokenKind.END_OBJECT, "object", ParseState.EXPECT_KEY
                    )
                    if token is None:
                        break

            self.depth -= 1
            prof.consumed(open_token.start, self.pos)
            return Object(members)


def _as_bytes(text: Any) -> bytes:
    if isinstance(text, str):
        # Lone surrogates survive encoding and are rejected as invalid UTF-8
        return text.encode("utf-8", "surrogatepass")
    if isinstance(text, bytes):
        return text
    if isinstance(text, bytearray | memoryview):
        return bytes(text)
    raise TypeError(
        f"the JSON document must be str or bytes, not {type(text).__name__}"
    )


def parse_document(
    text: str | bytes, expected: type[Value] | None = None, **kwargs: Any
) -> Value:
    """
    Parses one complete JSON document into a value tree.

    Validates input type and delegates to the parser with an immutable
    configuration built from kwargs.
    """
    config = ParseConfig(**kwargs)
    data = _as_bytes(text)

    with ProfileContext("parse_document", len(data)):
        scanner = Scanner(data)
        parser = JsonParser(scanner, config)
        try:
            return parser.parse_document(expected)
        except RecursionError as exc:
            log.debug("Interpreter stack exhausted at byte %d", parser.pos)
            raise scanner.error(
                ErrorKind.NESTING_TOO_DEEP,
                "Nesting exceeds the interpreter stack",
                parser.pos,
            ) from exc
        except JSONDecodeError as exc:
            log.debug(
                "JSON parse failed: %s (%s at byte %d)",
                exc.msg,
                exc.kind.value,
                exc.pos,
            )
            raise
