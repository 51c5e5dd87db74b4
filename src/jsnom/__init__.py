"""
A small and ergonomic JSON parser.

Parses one complete UTF-8 JSON document into an immutable tree of typed
values, or raises ``JSONDecodeError`` naming the failure category and the byte
offset of the first violation.

    >>> import jsnom
    >>> jsnom.parse("[null, null, true]")
    Array(items=(Null(), Null(), Bool(value=True)))
"""

from typing import Any

from ._errors import ErrorKind
from ._errors import JSONDecodeError
from ._parser import DEFAULT_MAX_DEPTH
from ._parser import JsonParser
from ._parser import ParseConfig
from ._parser import ParseState
from ._parser import parse_document
from ._profile import HotPathStats
from ._profile import clear_hot_path_stats
from ._profile import get_hot_path_stats
from ._profile import profiling_enabled
from ._profile import set_profiling
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

__version__ = "0.1.0"


def parse(text: str | bytes, **kwargs: Any) -> Value:
    """
    Parses a JSON document of any root variant.

    Accepts ``str`` or UTF-8 ``bytes``. Keyword arguments build a
    ``ParseConfig``.
    """
    return parse_document(text, None, **kwargs)


def parse_null(text: str | bytes, **kwargs: Any) -> Null:
    """Parses a document whose root must be ``null``."""
    return Null.from_str(text, **kwargs)


def parse_bool(text: str | bytes, **kwargs: Any) -> Bool:
    """Parses a document whose root must be ``true`` or ``false``."""
    return Bool.from_str(text, **kwargs)


def parse_number(text: str | bytes, **kwargs: Any) -> Number:
    return Number.from_str(text, **kwargs)


def parse_string(text: str | bytes, **kwargs: Any) -> String:
    return String.from_str(text, **kwargs)


def parse_array(text: str | bytes, **kwargs: Any) -> Array:
    """Parses a document whose root must be an array."""
    return Array.from_str(text, **kwargs)


def parse_object(text: str | bytes, **kwargs: Any) -> Object:
    """Parses a document whose root must be an object."""
    return Object.from_str(text, **kwargs)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "Array",
    "Bool",
    "ErrorKind",
    "HotPathStats",
    "JSONDecodeError",
    "JsonParser",
    "Null",
    "Number",
    "Object",
    "ParseConfig",
    "ParseState",
    "Scanner",
    "String",
    "Token",
    "TokenKind",
    "Value",
    "clear_hot_path_stats",
    "get_hot_path_stats",
    "parse",
    "parse_array",
    "parse_bool",
    "parse_null",
    "parse_number",
    "parse_object",
    "parse_string",
    "profiling_enabled",
    "set_profiling",
]
