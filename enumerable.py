"""
Ordinal provider: successor/predecessor steps for the element types that
have one.

Range constructors (LazyList.from_, from_to, ...) never inspect element
types themselves. They receive an Ordinal adapter, either passed
explicitly or resolved once from the start value by ordinal_for().
"""

import sys
import functools
from decimal import Decimal
from fractions import Fraction
from typing import Any, Callable, Optional

from errors import NotEnumerableError


class Ordinal:
    """Capability adapter: how to step through one ordered domain."""

    name = "ordinal"

    def advance(self, value, steps) -> Optional[Any]:
        """Return value moved by ``steps`` positions, or None past the domain's end."""
        raise NotImplementedError

    def distance(self, start, end):
        """Number of steps from start to end (negative when end lies below start)."""
        raise NotImplementedError

    def successor(self, value) -> Optional[Any]:
        return self.advance(value, 1)

    def predecessor(self, value) -> Optional[Any]:
        return self.advance(value, -1)

    def __repr__(self):
        return f"<{type(self).__name__} {self.name}>"


class IntegralOrdinal(Ordinal):
    """A domain that maps one-to-one onto a (possibly bounded) range of integers."""

    def __init__(self, name: str, encode: Callable[[Any], int], decode: Callable[[int], Any],
                 lower: Optional[int] = None, upper: Optional[int] = None):
        self.name = name
        self._encode = encode
        self._decode = decode
        self.lower = lower
        self.upper = upper

    def advance(self, value, steps):
        position = self._encode(value) + steps
        if self.lower is not None and position < self.lower:
            return None
        if self.upper is not None and position > self.upper:
            return None
        return self._decode(position)

    def distance(self, start, end):
        return self._encode(end) - self._encode(start)


class NumericOrdinal(Ordinal):
    """Unbounded numbers stepped by plain addition (float, Decimal, Fraction)."""

    def __init__(self, name: str = "numeric"):
        self.name = name

    def advance(self, value, steps):
        return value + steps

    def distance(self, start, end):
        return end - start


def _character_code(value) -> int:
    if not isinstance(value, str) or len(value) != 1:
        raise NotEnumerableError(value)
    return ord(value)


INTEGER = IntegralOrdinal("int", int, int)
BOOLEAN = IntegralOrdinal("bool", int, bool, 0, 1)
CHARACTER = IntegralOrdinal("character", _character_code, chr, 0, sys.maxunicode)
BYTE = IntegralOrdinal("byte", int, int, 0, 255)
NUMERIC = NumericOrdinal()


@functools.singledispatch
def ordinal_for(value) -> Ordinal:
    """Resolve the default Ordinal for a start value."""
    raise NotEnumerableError(value)


@ordinal_for.register(bool)
def _(value):
    return BOOLEAN


@ordinal_for.register(int)
def _(value):
    return INTEGER


@ordinal_for.register(str)
def _(value):
    if len(value) != 1:
        raise NotEnumerableError(value)
    return CHARACTER


@ordinal_for.register(float)
@ordinal_for.register(Decimal)
@ordinal_for.register(Fraction)
def _(value):
    return NUMERIC


def successor(value, ordinal: Optional[Ordinal] = None):
    """Next value, or None when value is the last of a bounded domain (True, chr(sys.maxunicode))."""
    return (ordinal or ordinal_for(value)).successor(value)


def predecessor(value, ordinal: Optional[Ordinal] = None):
    return (ordinal or ordinal_for(value)).predecessor(value)
