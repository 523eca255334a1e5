"""
Tests for range notation parsing
"""

import math

import pytest

from rustlike.core.range_parser import RangeParseError, RangeSpec, build_range, parse_range


class TestParseRange:
    """Test parse_range()"""

    def test_exclusive(self):
        """Test end is excluded with .."""
        assert parse_range("1..5") == RangeSpec(1, 4)

    def test_inclusive(self):
        """Test end is kept with ..="""
        assert parse_range("1..=5") == RangeSpec(1, 5)

    def test_default_start(self):
        """Test omitted start means 0"""
        assert parse_range("..5") == RangeSpec(0, 4)
        assert parse_range("..=5") == RangeSpec(0, 5)

    def test_open_end(self):
        """Test omitted end means infinity"""
        spec = parse_range("3..")
        assert spec.start == 3
        assert math.isinf(spec.end)
        assert not spec.is_bounded

    def test_fully_open(self):
        """Test bare .."""
        assert parse_range("..") == RangeSpec(0, math.inf)

    def test_inclusive_without_end(self):
        """Test ..= with no end is still open"""
        assert parse_range("2..=") == RangeSpec(2, math.inf)

    def test_whitespace(self):
        """Test surrounding whitespace is ignored"""
        assert parse_range("  1..3 ") == RangeSpec(1, 2)

    def test_multi_digit(self):
        """Test larger numbers"""
        assert parse_range("10..=250") == RangeSpec(10, 250)

    def test_empty_range(self):
        """Test a range with no values still parses"""
        spec = parse_range("5..5")
        assert spec.end < spec.start

    @pytest.mark.parametrize("notation", ["", "1", "1...5", "a..b", "-1..5", "1..-5", "1.5..3", "1 .. 5"])
    def test_invalid(self, notation):
        """Test malformed notation is rejected"""
        with pytest.raises(RangeParseError, match="Invalid range"):
            parse_range(notation)

    def test_not_a_string(self):
        """Test non-string input"""
        with pytest.raises(RangeParseError, match="must be a string"):
            parse_range(5)

    def test_error_is_value_error(self):
        """Test callers can catch ValueError"""
        with pytest.raises(ValueError):
            parse_range("x")


class TestBuildRange:
    """Test build_range()"""

    def test_build_exclusive(self):
        assert build_range(1, 5) == "1..5"

    def test_build_inclusive(self):
        assert build_range(1, 5, inclusive=True) == "1..=5"

    def test_build_open(self):
        assert build_range(3) == "3.."

    def test_build_default_start(self):
        assert build_range(0, 5) == "..5"

    @pytest.mark.parametrize("notation", ["1..5", "1..=5", "3..", "..7"])
    def test_build_parses_back(self, notation):
        """Test built notation parses to the same bounds"""
        spec = parse_range(notation)
        assert parse_range(build_range(spec.start, spec.end, inclusive=True)) == spec
