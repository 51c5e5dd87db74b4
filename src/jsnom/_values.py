"""
The value tree produced by a successful parse.

``Value`` is the base of a closed union of frozen dataclasses. Numbers are
IEEE-754 doubles, so integers beyond 2**53 lose precision and equality is
exact float equality. Objects keep the last value of a repeated key, compare
equal regardless of member order, and iterate in the order each key was last
seen.
"""

from collections.abc import Iterable
from collections.abc import Mapping
from dataclasses import dataclass
from dataclasses import field
from typing import Any
from typing import Self


class Value:
    """Base class of every node in a parsed JSON tree."""

    __slots__ = ()

    @classmethod
    def from_str(cls, text: str | bytes, **kwargs: Any) -> Self:
        """
        Parses a complete JSON document.

        On a concrete subclass the root value must also be of that variant,
        e.g. ``Array.from_str("{}")`` fails at offset 0.
        """
        from ._parser import parse_document

        expected = None if cls is Value else cls
        return parse_document(text, expected, **kwargs)  # type: ignore[return-value]


@dataclass(frozen=True, slots=True)
class Null(Value):
    """The ``null`` literal."""


@dataclass(frozen=True, slots=True)
class Bool(Value):
    value: bool

    def __post_init__(self) -> None:
        if not isinstance(self.value, bool):
            raise TypeError(
                f"Bool value must be bool, not {type(self.value).__name__}"
            )


@dataclass(frozen=True, slots=True)
class Number(Value):
    value: float

    def __post_init__(self) -> None:
        if isinstance(self.value, bool) or not isinstance(self.value, int | float):
            raise TypeError(
                f"Number value must be int or float, not {type(self.value).__name__}"
            )
        value = float(self.value)
        if value != value:
            raise ValueError("Number value must not be NaN")
        object.__setattr__(self, "value", value)


@dataclass(frozen=True, slots=True)
class String(Value):
    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise TypeError(
                f"String value must be str, not {type(self.value).__name__}"
            )


@dataclass(frozen=True, slots=True)
class Array(Value):
    """Ordered sequence of values; any iterable is stored as a tuple."""

    items: tuple[Value, ...] = ()

    def __post_init__(self) -> None:
        items = tuple(self.items)
        for item in items:
            if not isinstance(item, Value):
                raise TypeError(
                    f"Array items must be Value, not {type(item).__name__}"
                )
        object.__setattr__(self, "items", items)


@dataclass(frozen=True, slots=True)
class Object(Value):
    """
    Mapping from string keys to values.

    The mapping passed in is copied, so the object exclusively owns its
    members. Equality and hashing ignore member order.
    """

    members: dict[str, Value] = field(default_factory=dict)

    def __post_init__(self) -> None:
        source: Mapping[str, Value] | Iterable[tuple[str, Value]] = self.members
        members = dict(source)
        for key, value in members.items():
            if not isinstance(key, str):
                raise TypeError(
                    f"Object keys must be str, not {type(key).__name__}"
                )
            if not isinstance(value, Value):
                raise TypeError(
                    f"Object values must be Value, not {type(value).__name__}"
                )
        object.__setattr__(self, "members", members)

    def __hash__(self) -> int:
        return hash(frozenset(self.members.items()))
