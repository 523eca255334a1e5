"""
Tests for limiting operators (Take, TakeWhile, TakeWhilePeek, StepBy)
"""

import itertools

import pytest

from rustlike.core.iterator import LazyIterator, PeekableLazyIterator
from rustlike.operators.limit import StepBy, Take, TakeWhile, TakeWhilePeek


class TestTakeOperator:
    """Test Take operator"""

    def test_take_limits(self):
        """Test that at most n values are yielded"""
        assert list(Take([1, 2, 3, 4, 5], 2)) == [1, 2]

    def test_take_more_than_available(self):
        """Test take larger than the source"""
        assert list(Take([1, 2], 10)) == [1, 2]

    def test_take_zero(self, pull_counter):
        """Test take(0) yields nothing and pulls nothing"""
        source = LazyIterator([1, 2, 3]).inspect(pull_counter)
        assert list(Take(source, 0)) == []
        assert pull_counter.count == 0

    def test_take_never_pulls_extra(self, pull_counter):
        """Test that the (n+1)-th value is never requested"""
        result = LazyIterator([1, 2, 3, 4, 5]).inspect(pull_counter).take(3).collect()

        assert result == [1, 2, 3]
        assert pull_counter.seen == [1, 2, 3]

    def test_take_endless_source(self):
        """Test take terminates over an infinite iterator"""
        assert list(Take(itertools.count(), 4)) == [0, 1, 2, 3]

    def test_take_fuses(self):
        """Test that an exhausted take keeps reporting done"""
        it = LazyIterator([1, 2, 3]).take(1)
        assert it.next().value == 1
        assert it.next().done
        assert it.next().done


class TestTakeWhileOperator:
    """Test TakeWhile operator"""

    def test_take_while_prefix(self):
        """Test values are yielded until the predicate fails"""
        assert list(TakeWhile([1, 2, 5, 1], lambda x: x < 3)) == [1, 2]

    def test_take_while_drops_failing_value(self):
        """Test that the first failing value is consumed and lost"""
        upstream = LazyIterator([1, 2, 5, 6])
        assert upstream.take_while(lambda x: x < 3).collect() == [1, 2]
        assert upstream.collect() == [6]

    def test_take_while_all_fail(self):
        """Test predicate failing on the first value"""
        assert list(TakeWhile([9, 1], lambda x: x < 3)) == []


class TestTakeWhilePeekOperator:
    """Test TakeWhilePeek operator"""

    def test_failing_value_stays(self):
        """Test that the first failing value is left for the next pull"""
        peekable = PeekableLazyIterator([1, 2, 5, 6])

        assert list(TakeWhilePeek(peekable, lambda x: x < 3)) == [1, 2]
        assert peekable.next().value == 5
        assert peekable.collect() == [6]

    def test_exhausted_source(self):
        """Test running off the end of the source"""
        peekable = PeekableLazyIterator([1, 2])
        assert list(TakeWhilePeek(peekable, lambda x: True)) == [1, 2]
        assert peekable.next().done


class TestStepByOperator:
    """Test StepBy operator"""

    def test_step_by_three(self):
        """Test first value then every third"""
        assert list(StepBy(range(1, 10), 3)) == [1, 4, 7]

    def test_step_by_one(self):
        """Test step of 1 yields everything"""
        assert list(StepBy([1, 2, 3], 1)) == [1, 2, 3]

    def test_step_by_short_tail(self):
        """Test source ending while values are being skipped"""
        assert list(StepBy([1, 2, 3, 4], 3)) == [1, 4]

    def test_step_by_empty(self):
        """Test empty source"""
        assert list(StepBy([], 2)) == []

    @pytest.mark.parametrize("step", [0, -1])
    def test_step_by_invalid(self, step):
        """Test that steps below 1 are rejected"""
        with pytest.raises(ValueError, match="must be >= 1"):
            StepBy([1, 2], step)
