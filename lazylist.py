"""
LazyList: a list whose elements are generated on demand and cached.

A LazyList is a realized buffer (the elements computed so far) plus a
generation step. Calling the step either appends exactly one new element
to the buffer and returns it, or returns None, after which the list is
sealed for good. Elements are never None.

Derived lists (map, filter, append, zip_with, ...) own their buffer and
read their source through a _Cursor, which only ever drives the source's
own step. Nothing in this module writes into another list's buffer.

Bounded queries (length_is_at_least, get, any on a hit, ...) terminate on
infinite lists. Total operations (length, last, reverse, str, ==, folds)
do not, just like their Haskell counterparts:

    >>> LazyList.from_(0).length_is_at_least(1000)
    True
    >>> LazyList.from_string("anna").reverse().as_string()
    'anna'
"""

import io
import sys
import logging
import numbers
import functools
import itertools
from typing import Any, Callable, Iterable, List, Optional

from errors import (
    EmptyListError,
    IndexOutOfRangeError,
    NullElementError,
    UnimplementedError,
    UnsupportedShapeError,
)
from enumerable import Ordinal, ordinal_for
from mapview import LazyMapView
from models import get_settings
from wrappers import BooleanAnswer, Pair, as_pair

logger = logging.getLogger(__name__)

LT = -1
EQ = 0
GT = 1

# marks the end of a plain Python iterator
_END = object()


def _sealed_step(buffer):
    return None


def _require(element):
    if element is None:
        raise NullElementError()
    return element


def _character(element) -> str:
    if isinstance(element, str) and len(element) == 1:
        return element
    raise UnsupportedShapeError("a character", element)


def _byte(element) -> int:
    if isinstance(element, int) and not isinstance(element, bool) and 0 <= element <= 255:
        return element
    raise UnsupportedShapeError("a byte (int 0..255)", element)


def _number(element):
    if isinstance(element, numbers.Number):
        return element
    raise UnsupportedShapeError("a number", element)


def _text(element) -> str:
    if isinstance(element, str):
        return element
    if isinstance(element, LazyList):
        return element.as_string()
    raise UnsupportedShapeError("a string", element)


def _element_text(element) -> str:
    # nested lazy lists print their full contents, like nested Python lists
    if isinstance(element, LazyList):
        return str(element)
    return repr(element)


def _coerce(other) -> "LazyList":
    if isinstance(other, LazyList):
        return other
    if other is None:
        raise NullElementError("Expected a LazyList or an iterable, got None")
    return LazyList.view(other)


class _Cursor:
    """
    Read-only position into another LazyList.

    peek() drives the source's own step until the position is realized and
    returns the element there, or None once the source is sealed before it.
    Callers that apply a function to the element peek, apply, then advance,
    so an exception leaves the position on the element that caused it.
    """

    def __init__(self, source: "LazyList", position: int = 0):
        self._source = source
        self.position = position

    def peek(self):
        if not self._source._realize(self.position):
            return None
        return self._source._buffer[self.position]

    def advance(self) -> None:
        self.position += 1

    def pull(self):
        value = self.peek()
        if value is not None:
            self.advance()
        return value


class LazyByteStream(io.RawIOBase):
    """Readable binary stream over a LazyList of ints in 0..255."""

    def __init__(self, source: "LazyList"):
        super().__init__()
        self._source = source
        self._position = 0

    def readable(self):
        return True

    def readinto(self, buffer):
        count = 0
        while count < len(buffer) and self._source._realize(self._position):
            buffer[count] = _byte(self._source._buffer[self._position])
            self._position += 1
            count += 1
        return count


@functools.total_ordering
class LazyList:
    """
    A list with lazy evaluation: elements are only computed when they are
    needed, and every element is computed at most once.

    LazyList(iterable) copies a finite iterable eagerly; use LazyList.view()
    for a lazy view of an iterator, or one of the other constructors for
    generated (possibly infinite) lists.
    """

    LT = LT
    EQ = EQ
    GT = GT

    def __init__(self, iterable: Optional[Iterable] = None):
        self._buffer: List[Any] = []
        self._step = _sealed_step
        self._sealed = True
        self._finish: Optional[Callable[[], Any]] = None
        if iterable is not None:
            for element in iterable:
                self._buffer.append(_require(element))

    # --------- generation engine ----------
    @classmethod
    def _from_step(cls, step, buffer=None) -> "LazyList":
        seq = cls()
        seq._buffer = buffer if buffer is not None else []
        seq._step = step
        seq._sealed = False
        return seq

    @classmethod
    def _from_pull(cls, pull) -> "LazyList":
        """Build a list whose step appends whatever pull() returns."""
        def step(buffer):
            value = pull()
            if value is not None:
                buffer.append(value)
            return value
        return cls._from_step(step)

    def _advance(self):
        """Invoke the generation step once; returns the new element, or None once sealed."""
        if self._sealed:
            return None
        value = self._step(self._buffer)
        if value is None:
            self._sealed = True
            self._step = _sealed_step  # drop references to upstream lists
            logger.debug(f"LazyList sealed at length {len(self._buffer)}")
        return value

    def _realize(self, index: int) -> bool:
        """Generate elements until position ``index`` exists; False if the list ends first."""
        while len(self._buffer) <= index:
            if self._advance() is None:
                return False
        return True

    def _fill(self) -> None:
        while self._advance() is not None:
            pass

    @property
    def realized_length(self) -> int:
        """Number of elements generated so far (never pulls)."""
        return len(self._buffer)

    @property
    def is_sealed(self) -> bool:
        """True once the step has reported the end of the list."""
        return self._sealed

    def close(self) -> None:
        """
        Stop generating. The list is sealed at its realized length and an
        underlying byte source is closed if it is still open. Calling close()
        again does nothing.

            >>> with LazyList.from_file("data.bin") as data:
            ...     header = data.take(4).to_list()
        """
        if not self._sealed:
            self._sealed = True
            self._step = _sealed_step
            logger.debug(f"LazyList closed at length {len(self._buffer)}")
        if self._finish is not None:
            finish, self._finish = self._finish, None
            finish()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_value, traceback):
        self.close()
        return False

    # --------- constructors ----------
    @classmethod
    def empty(cls) -> "LazyList":
        return cls()

    @classmethod
    def of(cls, *elements) -> "LazyList":
        """Finite list literal. Not lazy."""
        return cls(elements)

    @classmethod
    def pure(cls, element) -> "LazyList":
        return cls.of(element)

    @classmethod
    def cons(cls, head, tail: Optional["LazyList"] = None) -> "LazyList":
        """
        head followed by tail, i.e. (x:xs). cons(None, None) is the empty list
        and cons(x, None) the single-element list.
        """
        if head is None:
            if tail is not None:
                raise NullElementError("A LazyList head may not be None when a tail is given")
            return cls.empty()
        if tail is None:
            return cls.of(head)
        return cls.of(head).append(tail)

    @classmethod
    def view(cls, iterable: Iterable) -> "LazyList":
        """
        Lazy view of an iterable. Elements are pulled from a single iterator
        only when needed, so changes to the underlying collection show up if
        they happen before the view reaches them.

        An iterator cannot be rewound, so an exception it raises (or a None
        it yields) is raised again by every later attempt to extend the view.
        """
        iterator = iter(iterable)
        failure = None

        def step(buffer):
            nonlocal failure
            if failure is not None:
                raise failure
            try:
                element = next(iterator, _END)
                if element is _END:
                    return None
                buffer.append(_require(element))
            except Exception as error:
                failure = error
                raise
            return element
        return cls._from_step(step)

    @classmethod
    def generate(cls, step: Callable[[List[Any]], Any], initial: Iterable = ()) -> "LazyList":
        """
        Raw constructor: ``step(buffer)`` must append the next element to
        buffer and return it, or return None when there is nothing left.
        """
        return cls._from_step(step, [_require(element) for element in initial])

    @classmethod
    def repeat(cls, value) -> "LazyList":
        """Infinite list of value."""
        _require(value)

        def step(buffer):
            buffer.append(value)
            return value
        return cls._from_step(step)

    @classmethod
    def replicate(cls, n: int, value) -> "LazyList":
        """value repeated n times; lazy, so n may be huge."""
        _require(value)
        produced = 0

        def pull():
            nonlocal produced
            if produced >= n:
                return None
            produced += 1
            return value
        return cls._from_pull(pull)

    @classmethod
    def iterate(cls, function: Callable[[Any], Any], start) -> "LazyList":
        """[start, f(start), f(f(start)), ...]"""
        current = None

        def pull():
            nonlocal current
            current = start if current is None else function(current)
            return _require(current)
        return cls._from_pull(pull)

    @classmethod
    def recursive_definition(cls, first, second, function: Callable[[Any, Any], Any]) -> "LazyList":
        """
        xs = first : second : zipWith function xs (tail xs)

        e.g. LazyList.recursive_definition(0, 1, operator.add) is the Fibonacci sequence.
        """
        window = (_require(first), _require(second))
        produced = 0  # independent of the buffer, which callers may edit

        def step(buffer):
            nonlocal window, produced
            if produced < 2:
                value = window[produced]
            else:
                value = _require(function(*window))
                window = (window[1], value)
            produced += 1
            buffer.append(value)
            return value
        return cls._from_step(step)

    @classmethod
    def comprehension(cls, source: Iterable, predicate: Optional[Callable[[Any], bool]] = None,
                      mapping: Optional[Callable[[Any], Any]] = None) -> "LazyList":
        """[mapping x | x <- source, predicate x]"""
        predicate = predicate or (lambda x: True)
        mapping = mapping or (lambda x: x)
        return cls.view(mapping(x) for x in source if predicate(x))

    @classmethod
    def comprehension2(cls, function: Callable[[Any, Any], Any], source1: Iterable, source2: Iterable,
                       predicate: Optional[Callable[[Any, Any], bool]] = None) -> "LazyList":
        """
        [function x y | x <- source1, y <- source2, predicate x y]

        source2 is walked once per x, so an infinite source2 never gets past
        the first x (as in Haskell).
        """
        predicate = predicate or (lambda x, y: True)
        inner = _coerce(source2)
        return cls.view(function(x, y) for x in source1 for y in inner if predicate(x, y))

    @classmethod
    def comprehension3(cls, function: Callable[[Any, Any, Any], Any], source1: Iterable,
                       source2: Iterable, source3: Iterable,
                       predicate: Optional[Callable[[Any, Any, Any], bool]] = None) -> "LazyList":
        """[function x y z | x <- source1, y <- source2, z <- source3, predicate x y z]"""
        predicate = predicate or (lambda x, y, z: True)
        middle = _coerce(source2)
        inner = _coerce(source3)
        return cls.view(
            function(x, y, z)
            for x in source1 for y in middle for z in inner
            if predicate(x, y, z)
        )

    # --------- enumerations ----------
    @classmethod
    def _progression(cls, start, delta, end, ordinal: Ordinal) -> "LazyList":
        pending = _require(start)

        def pull():
            nonlocal pending
            if pending is None:
                return None
            if end is not None:
                remaining = ordinal.distance(pending, end)
                if (delta > 0 and remaining < 0) or (delta < 0 and remaining > 0):
                    pending = None
                    return None
            value = pending
            pending = ordinal.advance(value, delta)
            return value
        return cls._from_pull(pull)

    @classmethod
    def from_(cls, start, ordinal: Optional[Ordinal] = None) -> "LazyList":
        """[start ..]; finite only when the domain has a last value (True, a byte's 255)."""
        ordinal = ordinal or ordinal_for(_require(start))
        return cls._progression(start, 1, None, ordinal)

    @classmethod
    def from_then(cls, start, then, ordinal: Optional[Ordinal] = None) -> "LazyList":
        """[start, then ..]"""
        ordinal = ordinal or ordinal_for(_require(start))
        return cls._progression(start, ordinal.distance(start, then), None, ordinal)

    @classmethod
    def from_to(cls, start, end, ordinal: Optional[Ordinal] = None) -> "LazyList":
        """[start .. end], inclusive; counts down when end lies below start."""
        ordinal = ordinal or ordinal_for(_require(start))
        delta = 1 if ordinal.distance(start, _require(end)) >= 0 else -1
        return cls._progression(start, delta, end, ordinal)

    @classmethod
    def from_then_to(cls, start, then, end, ordinal: Optional[Ordinal] = None) -> "LazyList":
        """[start, then .. end], inclusive."""
        ordinal = ordinal or ordinal_for(_require(start))
        delta = ordinal.distance(start, then)
        if delta == 0:
            return cls.repeat(start) if ordinal.distance(start, _require(end)) >= 0 else cls.empty()
        return cls._progression(start, delta, _require(end), ordinal)

    # --------- other sources ----------
    @classmethod
    def concat_all(cls, lists: Iterable) -> "LazyList":
        """Concatenate a (possibly lazy) list of lists."""
        return _coerce(lists).concat()

    @classmethod
    def from_string(cls, text: str) -> "LazyList":
        return cls(text)

    @classmethod
    def from_map(cls, mapping) -> "LazyList":
        """Copy of a mapping as a list of Pair(key, value)."""
        return cls(Pair(key, value) for key, value in mapping.items())

    @classmethod
    def from_byte_source(cls, read: Callable[[], Optional[int]],
                         close: Optional[Callable[[], Any]] = None) -> "LazyList":
        """
        Lazy list of the bytes returned by read() until it returns None.
        close() is called exactly once: when the source runs dry, when it
        fails, or when the list is closed first (see LazyList.close).
        A failed read is raised again by every later attempt to extend the list.
        """
        closed = False
        failure = None

        def finish():
            nonlocal closed
            if not closed:
                closed = True
                if close is not None:
                    close()
                logger.debug("Byte source closed")

        def pull():
            nonlocal failure
            if failure is not None:
                raise failure
            if closed:
                return None
            try:
                byte = read()
            except OSError as error:
                logger.error("Reading from byte source failed", exc_info=True)
                failure = error
                finish()
                raise
            if byte is None:
                finish()
            return byte
        seq = cls._from_pull(pull)
        seq._finish = finish
        return seq

    @classmethod
    def from_stream(cls, stream) -> "LazyList":
        """Lazy list of ints read one byte at a time from a binary stream."""
        def read():
            chunk = stream.read(1)
            return chunk[0] if chunk else None
        return cls.from_byte_source(read, stream.close)

    @classmethod
    def from_file(cls, path) -> "LazyList":
        return cls.from_stream(open(path, "rb"))

    @classmethod
    def from_ascii_file(cls, path) -> "LazyList":
        """Lazy list of the characters of a single-byte encoded text file."""
        raw = cls.from_file(path)
        characters = raw.map(chr)
        characters._finish = raw.close
        return characters

    # --------- iteration and indexing ----------
    def __iter__(self):
        position = 0
        while self._realize(position):
            yield self._buffer[position]
            position += 1

    def __reversed__(self):
        return iter(self.reverse())

    def get(self, index: int):
        """Element at index, generating up to it if needed."""
        if index < 0:
            raise IndexOutOfRangeError(index)
        if not self._realize(index):
            raise IndexOutOfRangeError(index, len(self._buffer))
        return self._buffer[index]

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._slice(key)
        return self.get(key)

    def _slice(self, key: slice) -> "LazyList":
        for bound in (key.start, key.stop):
            if bound is not None and bound < 0:
                raise IndexOutOfRangeError(bound)
        return LazyList.view(itertools.islice(iter(self), key.start, key.stop, key.step))

    def to_list(self) -> list:
        # plain iteration: list(self) would consult __len__ as a length hint,
        # and CPython discards a TypeError raised there
        return [element for element in self]

    # --------- bounded queries ----------
    def length(self) -> int:
        """Full length. Never returns on an infinite list; prefer the length_* checks."""
        self._fill()
        return len(self._buffer)

    def __len__(self):
        return self.length()

    def length_is_at_least(self, n: int) -> bool:
        if len(self._buffer) >= n:
            return True
        return self._realize(n - 1)

    def length_is_at_most(self, n: int) -> bool:
        if n < 0:
            return False
        return not self._realize(n)

    def length_equals(self, n: int) -> bool:
        return self.length_is_at_least(n) and self.length_is_at_most(n)

    def is_empty(self) -> bool:
        return not self._realize(0)

    def __bool__(self):
        return self._realize(0)

    def elem(self, value) -> bool:
        """Linear search. On an infinite list this only returns once value is found."""
        if value is None:
            return False
        for element in self:
            if element == value:
                return True
        return False

    def __contains__(self, value):
        return self.elem(value)

    def contains_all(self, values: Iterable) -> bool:
        return all(self.elem(value) for value in values)

    def index_of(self, value) -> int:
        """Position of the first occurrence of value, or -1."""
        _require(value)
        for position, element in enumerate(self):
            if element == value:
                return position
        return -1

    def index(self, value) -> int:
        position = self.index_of(value)
        if position < 0:
            raise ValueError(f"{value!r} is not in LazyList")
        return position

    def last_index_of(self, value) -> int:
        _require(value)
        self._fill()
        for position in range(len(self._buffer) - 1, -1, -1):
            if self._buffer[position] == value:
                return position
        return -1

    def all(self, predicate: Callable[[Any], bool]) -> bool:
        """True if every element satisfies predicate. Cannot return True on an infinite list."""
        return all(predicate(element) for element in self)

    def any(self, predicate: Callable[[Any], bool]) -> bool:
        """True if some element satisfies predicate. Cannot return False on an infinite list."""
        return any(predicate(element) for element in self)

    def is_ordered_by(self, relation: Callable[[Any, Any], bool]) -> bool:
        """True if relation(x, y) holds for every adjacent pair."""
        previous = _END
        for element in self:
            if previous is not _END and not relation(previous, element):
                return False
            previous = element
        return True

    def head(self):
        if not self._realize(0):
            raise EmptyListError("head of an empty LazyList")
        return self._buffer[0]

    def head_or_none(self):
        return self._buffer[0] if self._realize(0) else None

    def last(self):
        self._fill()
        if not self._buffer:
            raise EmptyListError("last of an empty LazyList")
        return self._buffer[-1]

    def last_or_none(self):
        self._fill()
        return self._buffer[-1] if self._buffer else None

    def lookup(self, key):
        """Value of the first Pair whose first element equals key, or None."""
        for element in self:
            first, second = as_pair(element)
            if first == key:
                return second
        return None

    # --------- chainable operators (lazy) ----------
    def tail(self) -> "LazyList":
        if not self._realize(0):
            raise EmptyListError("tail of an empty LazyList")
        return self.drop(1)

    def init(self) -> "LazyList":
        """Everything but the last element."""
        if not self._realize(0):
            raise EmptyListError("init of an empty LazyList")
        cursor = _Cursor(self)
        pending = cursor.pull()

        def pull():
            nonlocal pending
            following = cursor.pull()
            if following is None:
                return None
            value, pending = pending, following
            return value
        return LazyList._from_pull(pull)

    def take(self, n: int) -> "LazyList":
        """First n elements; finite even when this list is not."""
        cursor = _Cursor(self)
        remaining = n

        def pull():
            nonlocal remaining
            if remaining <= 0:
                return None
            value = cursor.pull()
            if value is not None:
                remaining -= 1
            return value
        return LazyList._from_pull(pull)

    def drop(self, n: int) -> "LazyList":
        return LazyList._from_pull(_Cursor(self, max(n, 0)).pull)

    def split_at(self, index: int) -> Pair:
        return Pair(self.take(index), self.drop(index))

    def map(self, function: Callable[[Any], Any]) -> "LazyList":
        cursor = _Cursor(self)

        def pull():
            value = cursor.peek()
            if value is None:
                return None
            mapped = function(value)
            if mapped is None:
                raise NullElementError(f"map function returned None for {value!r}")
            cursor.advance()
            return mapped
        return LazyList._from_pull(pull)

    def fmap(self, function: Callable[[Any], Any]) -> "LazyList":
        return self.map(function)

    def filter(self, predicate: Callable[[Any], bool]) -> "LazyList":
        """
        Elements satisfying predicate. Asking for an element of the result
        loops forever when an infinite source has no further match.
        """
        cursor = _Cursor(self)

        def pull():
            while True:
                value = cursor.peek()
                if value is None:
                    return None
                keep = predicate(value)
                cursor.advance()
                if keep:
                    return value
        return LazyList._from_pull(pull)

    def take_while(self, predicate: Callable[[Any], bool]) -> "LazyList":
        cursor = _Cursor(self)
        done = False

        def pull():
            nonlocal done
            if done:
                return None
            value = cursor.peek()
            if value is None or not predicate(value):
                done = True
                return None
            cursor.advance()
            return value
        return LazyList._from_pull(pull)

    def drop_while(self, predicate: Callable[[Any], bool]) -> "LazyList":
        cursor = _Cursor(self)
        dropping = True

        def pull():
            nonlocal dropping
            while dropping:
                value = cursor.peek()
                if value is None or not predicate(value):
                    break
                cursor.advance()
            dropping = False
            return cursor.pull()
        return LazyList._from_pull(pull)

    def append(self, other) -> "LazyList":
        """
        This list followed by other (Haskell's ++). When this list is
        infinite the result is this list and other is never reached.
        """
        cursors = [_Cursor(self), _Cursor(_coerce(other))]

        def pull():
            while cursors:
                value = cursors[0].pull()
                if value is not None:
                    return value
                cursors.pop(0)
            return None
        return LazyList._from_pull(pull)

    def __add__(self, other):
        if not isinstance(other, (LazyList, list, tuple)):
            return NotImplemented
        return self.append(other)

    def __radd__(self, other):
        if not isinstance(other, (list, tuple)):
            return NotImplemented
        return _coerce(other).append(self)

    def concat(self) -> "LazyList":
        """
        Flatten one level: a list of lists becomes a list of their elements,
        a list of strings becomes a list of characters.
        """
        outer = _Cursor(self)
        inner = None

        def pull():
            nonlocal inner
            while True:
                if inner is not None:
                    value = inner.pull()
                    if value is not None:
                        return value
                segment = outer.peek()
                if segment is None:
                    return None
                if not hasattr(segment, "__iter__"):
                    raise UnsupportedShapeError("a list or a string", segment)
                inner = _Cursor(_coerce(segment))
                outer.advance()
        return LazyList._from_pull(pull)

    def cycle(self) -> "LazyList":
        """
        Infinite repetition of this list. The list has to be fully evaluated
        already (call force() first on a finite generated list).
        """
        if not self._sealed and self._advance() is not None:
            logger.debug("Refusing to cycle a partially evaluated LazyList")
            raise UnimplementedError("unsupported: cycle of partially evaluated sequence")
        if not self._buffer:
            raise EmptyListError("cannot cycle an empty LazyList")
        period = tuple(self._buffer)
        position = 0

        def pull():
            nonlocal position
            value = period[position % len(period)]
            position += 1
            return value
        return LazyList._from_pull(pull)

    def zip_with(self, function: Callable[[Any, Any], Any], other) -> "LazyList":
        """function applied pairwise; ends with the shorter list."""
        other = _coerce(other)
        position = 0

        def pull():
            nonlocal position
            try:
                left = self.get(position)
                right = other.get(position)
            except IndexOutOfRangeError:
                return None
            value = _require(function(left, right))
            position += 1
            return value
        return LazyList._from_pull(pull)

    def zip(self, other) -> "LazyList":
        return self.zip_with(Pair, other)

    def unzip(self) -> Pair:
        """Split a list of pairs into the list of firsts and the list of seconds."""
        return Pair(self.map(lambda element: as_pair(element)[0]),
                    self.map(lambda element: as_pair(element)[1]))

    def union(self, other) -> "LazyList":
        """This list followed by the distinct elements of other that it lacks."""
        other = _coerce(other)
        return self.append(other.nub().filter(lambda element: not self.elem(element)))

    def intersect(self, other) -> "LazyList":
        """Elements of this list that also occur in other (other should be finite)."""
        other = _coerce(other)
        return self.filter(other.elem)

    def intersect_ordered(self, other) -> "LazyList":
        """Common elements of two ascending lists, by merging; both may be infinite."""
        left = _Cursor(self)
        right = _Cursor(_coerce(other))

        def pull():
            while True:
                x = left.peek()
                y = right.peek()
                if x is None or y is None:
                    return None
                if x == y:
                    left.advance()
                    right.advance()
                    return x
                if x < y:
                    left.advance()
                else:
                    right.advance()
        return LazyList._from_pull(pull)

    def without(self, other) -> "LazyList":
        """Haskell's (\\\\): drop the first occurrence of each element of the finite list other."""
        cursor = _Cursor(self)
        pending = None

        def pull():
            nonlocal pending
            if pending is None:
                pending = _coerce(other).to_list()
            while True:
                value = cursor.pull()
                if value is None:
                    return None
                if value in pending:
                    pending.remove(value)
                    continue
                return value
        return LazyList._from_pull(pull)

    def except_(self, other) -> "LazyList":
        return self.without(other)

    def minus(self, other) -> "LazyList":
        return self.without(other)

    def nub(self) -> "LazyList":
        """First occurrence of every element, in order."""
        cursor = _Cursor(self)

        def step(buffer):
            # checks against the result's own buffer, not the source's
            while True:
                value = cursor.pull()
                if value is None:
                    return None
                if value not in buffer:
                    buffer.append(value)
                    return value
        return LazyList._from_step(step)

    def reverse(self) -> "LazyList":
        """Reversed copy. Needs the whole list."""
        self._fill()
        return LazyList(reversed(self._buffer))

    # --------- scans ----------
    def scanl(self, function: Callable[[Any, Any], Any], initial) -> "LazyList":
        """[initial, f(initial, x0), f(f(initial, x0), x1), ...]"""
        cursor = _Cursor(self)
        accumulator = None

        def pull():
            nonlocal accumulator
            if accumulator is None:
                accumulator = _require(initial)
                return accumulator
            value = cursor.peek()
            if value is None:
                return None
            accumulator = _require(function(accumulator, value))
            cursor.advance()
            return accumulator
        return LazyList._from_pull(pull)

    def scanl1(self, function: Callable[[Any, Any], Any]) -> "LazyList":
        cursor = _Cursor(self)
        accumulator = None

        def pull():
            nonlocal accumulator
            value = cursor.peek()
            if value is None:
                return None
            accumulator = value if accumulator is None else _require(function(accumulator, value))
            cursor.advance()
            return accumulator
        return LazyList._from_pull(pull)

    def scanr(self, function: Callable[[Any, Any], Any], initial) -> "LazyList":
        """Right scan; needs the whole list. The last element is initial."""
        results = [_require(initial)]
        for element in reversed(self.to_list()):
            results.append(_require(function(element, results[-1])))
        results.reverse()
        return LazyList(results)

    def scanr1(self, function: Callable[[Any, Any], Any]) -> "LazyList":
        elements = self.to_list()
        if not elements:
            return LazyList.empty()
        results = [elements[-1]]
        for element in reversed(elements[:-1]):
            results.append(_require(function(element, results[-1])))
        results.reverse()
        return LazyList(results)

    # --------- reducing operations (force evaluation) ----------
    def foldr(self, function: Callable[[Any, Any], Any], initial):
        accumulator = initial
        for element in reversed(self.to_list()):
            accumulator = function(element, accumulator)
        return accumulator

    def foldl(self, function: Callable[[Any, Any], Any], initial):
        accumulator = initial
        for element in self:
            accumulator = function(accumulator, element)
        return accumulator

    def foldr1(self, function: Callable[[Any, Any], Any]):
        elements = self.to_list()
        if not elements:
            raise EmptyListError("foldr1 of an empty LazyList")
        accumulator = elements[-1]
        for element in reversed(elements[:-1]):
            accumulator = function(element, accumulator)
        return accumulator

    def foldl1(self, function: Callable[[Any, Any], Any]):
        accumulator = self.head()
        for element in self.drop(1):
            accumulator = function(accumulator, element)
        return accumulator

    def minimum(self, key: Optional[Callable[[Any], Any]] = None):
        """Smallest element; the earliest one wins a tie."""
        key = key or (lambda x: x)
        return self.foldl1(lambda best, element: element if key(element) < key(best) else best)

    def maximum(self, key: Optional[Callable[[Any], Any]] = None):
        """Largest element; the earliest one wins a tie."""
        key = key or (lambda x: x)
        return self.foldl1(lambda best, element: element if key(element) > key(best) else best)

    def sum(self, start=0):
        """Return the sum of all elements"""
        return self.foldl(lambda total, element: total + _number(element), start)

    def product(self, start=1):
        return self.foldl(lambda total, element: total * _number(element), start)

    def average(self):
        count = self.length()
        if count == 0:
            raise EmptyListError("average of an empty LazyList")
        return self.sum() / count

    # --------- sequencing ----------
    def seq(self, obj):
        return obj

    def deepseq(self, obj):
        """Fully evaluate this list, then return obj."""
        self._fill()
        return obj

    def force(self) -> "LazyList":
        """Fully evaluate this list and return it."""
        self._fill()
        return self

    def traverse(self) -> "LazyList":
        return self.force()

    def traverse_and_then(self, action: Callable[["LazyList"], Any]) -> None:
        self.force()
        action(self)

    def for_each_and_then(self, action: Callable[[Any], Any]) -> "LazyList":
        for element in self:
            action(element)
        return self

    def for_each_with_index(self, action: Callable[[Any, int], Any]) -> "LazyList":
        for index, element in enumerate(self):
            action(element, index)
        return self

    def for_each_with_index_and_length(self, action: Callable[[Any, int, int], Any]) -> "LazyList":
        length = self.length()
        for index, element in enumerate(self):
            action(element, index, length)
        return self

    # --------- fluent boolean answers ----------
    def if_any(self, predicate) -> BooleanAnswer:
        return BooleanAnswer(self.any(predicate))

    def if_all(self, predicate) -> BooleanAnswer:
        return BooleanAnswer(self.all(predicate))

    def if_length_is_at_least(self, n: int) -> BooleanAnswer:
        return BooleanAnswer(self.length_is_at_least(n))

    def if_length_is_at_most(self, n: int) -> BooleanAnswer:
        return BooleanAnswer(self.length_is_at_most(n))

    def if_elem(self, value) -> BooleanAnswer:
        return BooleanAnswer(self.elem(value))

    def if_contains_all(self, values: Iterable) -> BooleanAnswer:
        return BooleanAnswer(self.contains_all(values))

    def if_is_empty(self) -> BooleanAnswer:
        return BooleanAnswer(self.is_empty())

    def if_equals(self, other) -> BooleanAnswer:
        return BooleanAnswer(self == other)

    # --------- strings ----------
    def show(self) -> "LazyList":
        """Lazy list of the characters of str(self); usable on infinite lists."""
        def characters():
            yield "["
            for position, element in enumerate(self):
                if position:
                    yield from ", "
                yield from _element_text(element)
            yield "]"
        return LazyList.view(characters())

    def as_string(self) -> str:
        """Join a list of characters into a str."""
        return "".join(_character(element) for element in self)

    def lines(self) -> "LazyList":
        """Split a list of characters at newlines (Haskell's lines)."""
        def produce():
            current = []
            for element in self:
                character = _character(element)
                if character == "\n":
                    yield "".join(current)
                    current = []
                else:
                    current.append(character)
            if current:
                yield "".join(current)
        return LazyList.view(produce())

    def unlines(self) -> "LazyList":
        """Characters of every line followed by a newline."""
        return self.map(lambda line: _text(line) + "\n").concat()

    def words(self) -> "LazyList":
        """Split a list of characters at whitespace, dropping empty words."""
        def produce():
            current = []
            for element in self:
                character = _character(element)
                if character.isspace():
                    if current:
                        yield "".join(current)
                        current = []
                else:
                    current.append(character)
            if current:
                yield "".join(current)
        return LazyList.view(produce())

    def unwords(self) -> "LazyList":
        """Characters of the words joined by single spaces."""
        def characters():
            for position, word in enumerate(self):
                if position:
                    yield " "
                yield from _text(word)
        return LazyList.view(characters())

    def split(self, delimiter: str) -> "LazyList":
        """Lazy str.split(delimiter) over a list of characters."""
        if not delimiter:
            raise ValueError("empty separator")
        pattern = list(delimiter)

        def produce():
            current = []
            for element in self:
                current.append(_character(element))
                if current[-len(pattern):] == pattern:
                    del current[-len(pattern):]
                    yield "".join(current)
                    current = []
            yield "".join(current)
        return LazyList.view(produce())

    def print_to(self, stream=None) -> None:
        """Print element by element, flushing each; never returns on an infinite list."""
        stream = stream or sys.stdout
        stream.write("[")
        stream.flush()
        for position, element in enumerate(self):
            if position:
                stream.write(", ")
            stream.write(_element_text(element))
            stream.flush()
        stream.write("]")
        stream.flush()

    # --------- bytes ----------
    def as_stream(self) -> LazyByteStream:
        return LazyByteStream(self)

    def write_to_stream(self, stream) -> None:
        """Write every element as one byte, then close the stream."""
        try:
            for element in self:
                stream.write(bytes([_byte(element)]))
        except OSError:
            logger.error("Writing LazyList to stream failed", exc_info=True)
            raise
        finally:
            stream.close()

    def write_as_binary_to_file(self, path) -> None:
        self.write_to_stream(open(path, "wb"))

    def write_as_string_to_text_file(self, path, encoding: str = "utf-8") -> None:
        with open(path, "w", encoding=encoding) as handle:
            for element in self:
                handle.write(_character(element))

    # --------- map view ----------
    def view_as_map(self) -> LazyMapView:
        """Mutable mapping view over a list of pairs; see LazyMapView."""
        return LazyMapView(self)

    # --------- editing the realized prefix ----------
    def set(self, index: int, value):
        """Replace the element at index and return the old one."""
        _require(value)
        if index < 0 or not self._realize(index):
            raise IndexOutOfRangeError(index, len(self._buffer))
        previous = self._buffer[index]
        self._buffer[index] = value
        return previous

    def __setitem__(self, index, value):
        self.set(index, value)

    def insert(self, index: int, value) -> None:
        """Insert before index; every position before index is generated first."""
        _require(value)
        if index < 0 or (index > 0 and not self._realize(index - 1)):
            raise IndexOutOfRangeError(index, len(self._buffer))
        self._buffer.insert(index, value)

    def add(self, value) -> None:
        """Append one element at the very end (needs the whole list)."""
        _require(value)
        self._fill()
        self._buffer.append(value)

    def extend(self, values: Iterable) -> None:
        values = [_require(value) for value in values]
        self._fill()
        self._buffer.extend(values)

    def remove(self, value) -> bool:
        """Remove the first occurrence of value; False if there is none."""
        if value is None:
            return False
        position = self.index_of(value)
        if position < 0:
            return False
        del self._buffer[position]
        return True

    def remove_at(self, index: int):
        if index < 0 or not self._realize(index):
            raise IndexOutOfRangeError(index, len(self._buffer))
        return self._buffer.pop(index)

    def __delitem__(self, index):
        self.remove_at(index)

    def remove_all(self, values: Iterable) -> bool:
        values = _coerce(values).to_list()
        self._fill()
        kept = [element for element in self._buffer if element not in values]
        changed = len(kept) != len(self._buffer)
        self._buffer[:] = kept
        return changed

    def retain_all(self, values: Iterable) -> bool:
        values = _coerce(values).to_list()
        self._fill()
        kept = [element for element in self._buffer if element in values]
        changed = len(kept) != len(self._buffer)
        self._buffer[:] = kept
        return changed

    def clear(self) -> None:
        """Remove every element and stop generating."""
        self._buffer.clear()
        self.close()

    # --------- comparison ----------
    def __eq__(self, other):
        if other is self:
            return True
        # no tuples: a tuple is hashable and would have to hash like this list
        if not isinstance(other, (LazyList, list)):
            return NotImplemented
        for mine, theirs in itertools.zip_longest(self, other, fillvalue=_END):
            if mine is _END or theirs is _END or mine != theirs:
                return False
        return True

    def __hash__(self):
        # first element only: equal lists hash equally and infinite lists still hash
        return hash(self._buffer[0]) if self._realize(0) else 0

    def compare_to(self, other) -> int:
        """Lexicographic comparison returning LT, EQ or GT."""
        for mine, theirs in itertools.zip_longest(self, other, fillvalue=_END):
            if mine is _END:
                return LT
            if theirs is _END:
                return GT
            if mine < theirs:
                return LT
            if theirs < mine:
                return GT
        return EQ

    def __lt__(self, other):
        if not isinstance(other, (LazyList, list, tuple)):
            return NotImplemented
        return self.compare_to(other) == LT

    # --------- text ----------
    def __str__(self):
        return "[" + ", ".join(_element_text(element) for element in self) + "]"

    def __repr__(self):
        preview = get_settings().repr_preview
        shown = ", ".join(repr(element) for element in self._buffer[:preview])
        if len(self._buffer) > preview:
            shown += ", ..."
        state = "sealed" if self._sealed else "growing"
        return f"LazyList([{shown}], {state})"
