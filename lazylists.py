"""
Well-known integer sequences as infinite LazyLists.

    >>> from lazylists import prime_numbers
    >>> prime_numbers().take(5).to_list()
    [2, 3, 5, 7, 11]
"""

from lazylist import LazyList


def natural_numbers() -> LazyList:
    return LazyList.from_(0)


def even_numbers() -> LazyList:
    return LazyList.from_then(0, 2)


def odd_numbers() -> LazyList:
    return LazyList.from_then(1, 3)


def square_numbers() -> LazyList:
    return natural_numbers().map(lambda x: x * x)


def cube_numbers() -> LazyList:
    return natural_numbers().map(lambda x: x * x * x)


def _factorial_step(buffer):
    # buffer[n] == n!
    value = buffer[-1] * len(buffer)
    buffer.append(value)
    return value


def factorials() -> LazyList:
    """0!, 1!, 2!, ..."""
    return LazyList.generate(_factorial_step, [1])


def _doubling_step(buffer):
    value = buffer[-1] * 2
    buffer.append(value)
    return value


def powers_of_two() -> LazyList:
    return LazyList.generate(_doubling_step, [1])


def _additive_step(buffer):
    value = buffer[-1] + buffer[-2]
    buffer.append(value)
    return value


def fibonacci_numbers() -> LazyList:
    """0, 1, 1, 2, 3, 5, ..."""
    return LazyList.generate(_additive_step, [0, 1])


def lucas_numbers() -> LazyList:
    """2, 1, 3, 4, 7, 11, ..."""
    return LazyList.generate(_additive_step, [2, 1])


def _is_prime(candidate, primes) -> bool:
    for prime in primes:
        if prime * prime > candidate:
            return True
        if candidate % prime == 0:
            return False
    return True


def _prime_step(buffer):
    """Append the next prime, found by trial division with the primes found so far."""
    candidate = buffer[-1] + 1
    while not _is_prime(candidate, buffer):
        candidate += 1
    buffer.append(candidate)
    return candidate


def prime_numbers() -> LazyList:
    return LazyList.generate(_prime_step, [2])
