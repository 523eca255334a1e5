"""
Tests for the Option type
"""

import pytest

from rustlike.core.option import NOTHING, Option, OptionKind, Some, UnwrapError
from rustlike.core.result import Err, Ok


class TestConstruction:
    """Test building Options"""

    def test_some(self):
        """Test Some carries its value"""
        value = Some(3)
        assert value.kind is OptionKind.SOME
        assert value.is_some()
        assert not value.is_none()

    def test_nothing(self):
        """Test NOTHING is the empty variant"""
        assert NOTHING.kind is OptionKind.NONE
        assert NOTHING.is_none()

    def test_from_nullable(self):
        """Test None maps to NOTHING and anything else to Some"""
        assert Option.from_nullable(None) is NOTHING
        assert Option.from_nullable(0) == Some(0)

    def test_some_none_is_some(self):
        """Test Some(None) is still a Some"""
        assert Some(None).is_some()


class TestUnwrap:
    """Test extracting values"""

    def test_unwrap(self):
        assert Some("x").unwrap() == "x"

    def test_unwrap_nothing(self):
        """Test unwrapping NOTHING raises"""
        with pytest.raises(UnwrapError, match="on a `None` value"):
            NOTHING.unwrap()

    def test_expect(self):
        """Test expect message on NOTHING"""
        assert Some(1).expect("a number") == 1
        with pytest.raises(UnwrapError, match="Expected a number"):
            NOTHING.expect("a number")

    def test_unwrap_or(self):
        assert Some(1).unwrap_or(5) == 1
        assert NOTHING.unwrap_or(5) == 5

    def test_unwrap_or_else(self):
        assert Some(1).unwrap_or_else(lambda: 5) == 1
        assert NOTHING.unwrap_or_else(lambda: 5) == 5

    def test_unwrap_error_is_runtime_error(self):
        with pytest.raises(RuntimeError):
            NOTHING.unwrap()


class TestCombinators:
    """Test transforming Options"""

    def test_map(self):
        assert Some(2).map(lambda x: x * 3) == Some(6)
        assert NOTHING.map(lambda x: x * 3) is NOTHING

    def test_map_or(self):
        assert Some(2).map_or(str, "none") == "2"
        assert NOTHING.map_or(str, "none") == "none"

    def test_map_or_else(self):
        assert Some(2).map_or_else(str, lambda: "none") == "2"
        assert NOTHING.map_or_else(str, lambda: "none") == "none"

    def test_and_then(self):
        """Test chaining Option-returning operations"""

        def half(x):
            return Some(x // 2) if x % 2 == 0 else NOTHING

        assert Some(8).and_then(half).and_then(half) == Some(2)
        assert Some(6).and_then(half).and_then(half) is NOTHING
        assert NOTHING.and_then(half) is NOTHING

    def test_or_else(self):
        assert Some(1).or_else(lambda: Some(2)) == Some(1)
        assert NOTHING.or_else(lambda: Some(2)) == Some(2)

    def test_filter(self):
        assert Some(4).filter(lambda x: x > 3) == Some(4)
        assert Some(2).filter(lambda x: x > 3) is NOTHING
        assert NOTHING.filter(lambda x: True) is NOTHING

    def test_inspect(self):
        seen = []
        assert Some(1).inspect(seen.append) == Some(1)
        NOTHING.inspect(seen.append)
        assert seen == [1]

    def test_flatten(self):
        assert Some(Some(1)).flatten() == Some(1)
        assert Some(NOTHING).flatten() is NOTHING
        assert Some(1).flatten() == Some(1)

    def test_ok_or(self):
        """Test conversion to Result"""
        assert Some(1).ok_or("missing") == Ok(1)
        assert NOTHING.ok_or("missing") == Err("missing")


class TestProtocols:
    """Test Python protocol support"""

    def test_bool(self):
        assert Some(0)
        assert not NOTHING

    def test_iter(self):
        assert list(Some(1)) == [1]
        assert list(NOTHING) == []

    def test_equality(self):
        assert Some(1) == Some(1)
        assert Some(1) != Some(2)
        assert Some(None) != NOTHING
        assert Some(1) != 1

    def test_hashable(self):
        assert len({Some(1), Some(1), NOTHING}) == 2

    def test_repr(self):
        assert repr(Some("a")) == "Some('a')"
        assert repr(NOTHING) == "NOTHING"
