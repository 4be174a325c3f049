"""Unit tests for batch chunk planning."""

from __future__ import annotations

import pytest

from twist.sdk.runtime.batch import chunk


class TestChunk:
    """Test chunk() slicing."""

    def test_empty_input(self):
        """Empty input yields no chunks."""
        assert chunk([], 10) == []

    def test_exact_multiple(self):
        """Input of an exact multiple splits evenly."""
        result = chunk(list(range(20)), 10)
        assert [len(c) for c in result] == [10, 10]

    def test_remainder_in_last_chunk(self):
        """Last chunk carries the remainder."""
        result = chunk(list(range(23)), 10)
        assert [len(c) for c in result] == [10, 10, 3]
        assert result[2] == [20, 21, 22]

    def test_smaller_than_size(self):
        """Input smaller than the size stays in one chunk."""
        assert chunk(["a", "b"], 10) == [["a", "b"]]

    @pytest.mark.parametrize("n", [0, 1, 9, 10, 11, 19, 20, 21, 33])
    @pytest.mark.parametrize("size", [1, 3, 10])
    def test_concatenation_reconstructs_input(self, n, size):
        """Flattening the chunks gives back the input in order."""
        items = list(range(n))
        result = chunk(items, size)
        assert [x for c in result for x in c] == items
        assert all(0 < len(c) <= size for c in result)

    def test_accepts_tuples(self):
        """Any sequence is accepted and chunks are lists."""
        assert chunk((1, 2, 3), 2) == [[1, 2], [3]]

    @pytest.mark.parametrize("size", [0, -1])
    def test_invalid_size(self, size):
        """Size below one is rejected."""
        with pytest.raises(ValueError, match="at least 1"):
            chunk([1, 2, 3], size)
