import operator
from lazylist import LazyList
import lazylists


class TestSequences:
    """Test the pre-built infinite sequences"""

    def test_simple_progressions(self):
        """Test naturals, evens and odds"""
        assert lazylists.natural_numbers().take(5) == [0, 1, 2, 3, 4]
        assert lazylists.even_numbers().take(4) == [0, 2, 4, 6]
        assert lazylists.odd_numbers().take(4) == [1, 3, 5, 7]

    def test_powers(self):
        """Test squares, cubes and powers of two"""
        assert lazylists.square_numbers().take(5) == [0, 1, 4, 9, 16]
        assert lazylists.cube_numbers().take(4) == [0, 1, 8, 27]
        assert lazylists.powers_of_two().take(6) == [1, 2, 4, 8, 16, 32]

    def test_factorials(self):
        """Test factorials start at 0!"""
        assert lazylists.factorials().take(6) == [1, 1, 2, 6, 24, 120]
        assert lazylists.factorials().get(20) == 2432902008176640000

    def test_recurrences(self):
        """Test Fibonacci and Lucas numbers"""
        assert lazylists.fibonacci_numbers().take(8) == [0, 1, 1, 2, 3, 5, 8, 13]
        assert lazylists.lucas_numbers().take(6) == [2, 1, 3, 4, 7, 11]
        assert lazylists.fibonacci_numbers().take(30) == LazyList.recursive_definition(0, 1, operator.add).take(30)

    def test_primes(self):
        """Test the prime numbers"""
        primes = lazylists.prime_numbers()
        assert primes.take(10) == [2, 3, 5, 7, 11, 13, 17, 19, 23, 29]
        assert primes.get(99) == 541, "The 100th prime is 541"

    def test_sequences_are_independent(self):
        """Test each call returns a fresh list"""
        first = lazylists.prime_numbers()
        first.get(50)
        second = lazylists.prime_numbers()
        assert second.realized_length == 1
        assert first is not second


class TestConstructors:
    """Test the generic constructors"""

    def test_repeat_and_replicate(self):
        """Test constant lists"""
        assert LazyList.repeat("x").take(3) == ["x", "x", "x"]
        assert LazyList.replicate(3, 7) == [7, 7, 7]
        assert LazyList.replicate(0, 7).is_empty()
        assert LazyList.replicate(10 ** 12, 1).take(2) == [1, 1]

    def test_iterate(self):
        """Test repeated application"""
        assert LazyList.iterate(lambda x: x * 3, 1).take(5) == [1, 3, 9, 27, 81]

    def test_generate(self):
        """Test the raw step constructor"""
        def countdown(buffer):
            if buffer[-1] == 0:
                return None
            value = buffer[-1] - 1
            buffer.append(value)
            return value

        assert LazyList.generate(countdown, [3]) == [3, 2, 1, 0]

    def test_view(self):
        """Test lazy views over iterators"""
        pulled = []

        def source():
            for value in range(5):
                pulled.append(value)
                yield value

        seq = LazyList.view(source())
        assert seq.take(2) == [0, 1]
        assert pulled == [0, 1]
        assert seq.length() == 5

    def test_comprehensions(self):
        """Test list comprehensions over one, two and three sources"""
        evens_squared = LazyList.comprehension(range(10), lambda x: x % 2 == 0, lambda x: x * x)
        assert evens_squared == [0, 4, 16, 36, 64]
        assert LazyList.comprehension(iter([1, 2])) == [1, 2]

        pairs = LazyList.comprehension2(lambda x, y: (x, y), [1, 2], iter("ab"))
        assert pairs == [(1, "a"), (1, "b"), (2, "a"), (2, "b")]

        triples = LazyList.comprehension3(
            lambda a, b, c: (a, b, c),
            range(1, 15), range(1, 15), range(1, 15),
            lambda a, b, c: a < b and a * a + b * b == c * c,
        )
        assert triples.take(3) == [(3, 4, 5), (5, 12, 13), (6, 8, 10)]

    def test_comprehension_over_infinite_source(self):
        """Test a comprehension stays lazy over an infinite source"""
        odds = LazyList.comprehension(LazyList.from_(0), lambda x: x % 2 == 1)
        assert odds.take(3) == [1, 3, 5]

    def test_of_and_pure(self):
        """Test literal lists"""
        assert LazyList.of() == []
        assert LazyList.pure(4) == [4]
        assert LazyList([1, 2]) == [1, 2]
