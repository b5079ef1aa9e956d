"""
Error taxonomy for lazy lists.

Every error derives from LazyListError and from the builtin exception a
plain Python caller would expect, so ``except IndexError`` keeps working.
"""


class LazyListError(Exception):
    """Base class for all lazy list errors."""
    pass


class EmptyListError(LazyListError, ValueError):
    """Raised when head/last/minimum/... is requested from an empty list."""

    def __init__(self, message="Operation requires a non-empty LazyList"):
        super().__init__(message)


class IndexOutOfRangeError(LazyListError, IndexError):
    """Raised when a position lies before 0 or past the sealed end."""

    def __init__(self, index=None, length=None):
        if index is None:
            message = "LazyList index out of range"
        elif length is None:
            message = f"LazyList index out of range: {index}"
        else:
            message = f"LazyList index out of range: {index} (length {length})"
        super().__init__(message)
        self.index = index
        self.length = length


class NotEnumerableError(LazyListError, TypeError):
    """Raised when a successor is requested for a value without an ordering step."""

    def __init__(self, value=None):
        super().__init__(f"{type(value).__name__} value {value!r} is not enumerable")
        self.value = value


class NullElementError(LazyListError, ValueError):
    """Raised when None is offered where a list element is required."""

    def __init__(self, message="None values are not permitted in a LazyList"):
        super().__init__(message)


class UnsupportedShapeError(LazyListError, TypeError):
    """Raised when an operation needs pairs, characters, numbers or bytes and gets something else."""

    def __init__(self, expected, value=None):
        super().__init__(f"Expected {expected}, got {type(value).__name__} {value!r}")
        self.expected = expected
        self.value = value


class UnimplementedError(LazyListError, NotImplementedError):
    """Raised by operations whose behaviour is deliberately left open."""
    pass
