import operator
from lazylist import LazyList
from lazylists import prime_numbers
from conftest import interruptible_naturals, runs_forever


class TestSetOperations:
    """Test list operations with set-like semantics"""

    def test_union(self):
        """Test union keeps the left list and adds the missing distinct right elements"""
        result = LazyList.of(1, 2, 2, 3, 4).union(LazyList.of(2, 3, 5, 4, 6))
        assert result == [1, 2, 2, 3, 4, 5, 6], f"Unexpected union: {result}"

    def test_union_with_empty(self):
        """Test union with an empty side"""
        assert LazyList.empty().union([1, 1, 2]) == [1, 2]
        assert LazyList.of(1, 1).union([]) == [1, 1]

    def test_intersect(self):
        """Test intersect keeps the left order and duplicates"""
        assert LazyList.from_to(1, 6).intersect(LazyList.of(5, 3, 1)) == [1, 3, 5]
        assert LazyList.of(1, 1, 2).intersect([1]) == [1, 1]

    def test_intersect_infinite_left(self):
        """Test intersect of an infinite list with a finite one"""
        matches = LazyList.from_(6).intersect([0, 5, 10, 15, 20])
        assert matches.take(3) == [10, 15, 20]

    def test_intersect_infinite_left_beyond_matches(self):
        """Test asking for a fourth match never returns"""
        seq, stop = interruptible_naturals()
        matches = seq.drop(6).intersect([0, 5, 10, 15, 20])
        assert runs_forever(lambda: matches.get(3), stop)

    def test_intersect_ordered_infinite(self):
        """Test merging two ascending infinite lists"""
        fibonacci = LazyList.recursive_definition(0, 1, operator.add)
        common = fibonacci.intersect_ordered(prime_numbers())
        assert common.take(6) == [2, 3, 5, 13, 89, 233], f"Unexpected common values: {common.take(6)}"

    def test_intersect_ordered_finite(self):
        """Test merging ends with the shorter list"""
        assert LazyList.of(1, 3, 5, 7).intersect_ordered([3, 4, 5]) == [3, 5]
        assert LazyList.empty().intersect_ordered([1]).is_empty()

    def test_without(self):
        """Test removing the first occurrence of each element of another list"""
        assert LazyList.from_to(1, 10).without([1, 2, 4, 5, 7, 9, 10]) == [3, 6, 8]
        assert LazyList.of(1, 2, 1, 2).without([1, 2, 2]) == [1]
        assert LazyList.of(1, 2).except_([3]) == [1, 2]
        assert LazyList.from_(0).minus([0, 2]).take(3) == [1, 3, 4]

    def test_nub(self):
        """Test removing duplicates"""
        assert LazyList.of(3, 1, 3, 2, 1).nub() == [3, 1, 2]
        assert LazyList.from_string("mississippi").nub().as_string() == "misp"
        assert LazyList.of(0, 1).cycle().nub().take(2) == [0, 1]
