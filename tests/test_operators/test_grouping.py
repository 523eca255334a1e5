"""
Tests for grouping operators (Window, ArrayChunks)
"""

import pytest

from rustlike.core.iterator import LazyIterator
from rustlike.operators.grouping import ArrayChunks, Window


class TestWindowOperator:
    """Test Window operator"""

    def test_window_overlapping(self):
        """Test windows slide by one value"""
        assert list(Window([1, 2, 3, 4], 2)) == [[1, 2], [2, 3], [3, 4]]

    def test_window_size_of_source(self):
        """Test one window when size equals the source length"""
        assert list(Window([1, 2, 3], 3)) == [[1, 2, 3]]

    def test_window_larger_than_source(self):
        """Test no window when the source is too short"""
        assert list(Window([1, 2], 3)) == []

    def test_window_lists_are_independent(self):
        """Test yielded windows are not mutated by later pulls"""
        windows = list(Window(range(4), 2))
        assert windows[0] == [0, 1]
        assert windows[0] is not windows[1]

    def test_window_endless_source(self):
        """Test windows over an infinite iterator"""
        result = LazyIterator(range(10**9)).window(3).take(2).collect()
        assert result == [[0, 1, 2], [1, 2, 3]]

    def test_window_invalid(self):
        """Test size below 1 is rejected"""
        with pytest.raises(ValueError, match="Window size"):
            Window([1], 0)


class TestArrayChunksOperator:
    """Test ArrayChunks operator"""

    def test_chunks_even(self):
        """Test source splits into full chunks"""
        assert list(ArrayChunks([1, 2, 3, 4], 2)) == [[1, 2], [3, 4]]

    def test_chunks_short_tail(self):
        """Test the last chunk holds the leftovers"""
        assert list(ArrayChunks([1, 2, 3, 4, 5], 2)) == [[1, 2], [3, 4], [5]]

    def test_chunks_empty(self):
        """Test empty source yields no chunk"""
        assert list(ArrayChunks([], 3)) == []

    def test_chunks_invalid(self):
        """Test size below 1 is rejected"""
        with pytest.raises(ValueError, match="Chunk size"):
            ArrayChunks([1], -2)
