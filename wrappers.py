"""Small value types returned by LazyList operations."""

from typing import Any, Callable, NamedTuple

from errors import UnsupportedShapeError


class Pair(NamedTuple):
    """Two-element tuple produced by zip() and from_map()."""
    first: Any
    second: Any

    def fst(self):
        return self.first

    def snd(self):
        return self.second

    def swap(self) -> "Pair":
        return Pair(self.second, self.first)

    def __repr__(self):
        return f"({self.first!r}, {self.second!r})"


def as_pair(element) -> tuple:
    """Return element if it is a 2-tuple (a Pair or a plain tuple), else raise UnsupportedShapeError."""
    if isinstance(element, tuple) and len(element) == 2:
        return element
    raise UnsupportedShapeError("a pair", element)


class BooleanAnswer:
    """
    Fluent wrapper around a boolean query result.

        seq.if_any(lambda x: x > 4).then(found).or_else(missing)
    """

    def __init__(self, value: bool):
        self._value = bool(value)

    def then(self, action: Callable[[], Any]) -> "BooleanAnswer":
        if self._value:
            action()
        return self

    def or_else(self, action: Callable[[], Any]) -> None:
        if not self._value:
            action()

    def __bool__(self):
        return self._value

    def __repr__(self):
        return f"BooleanAnswer({self._value})"
