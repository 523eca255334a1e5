"""
Tests for the Result type
"""

import pytest

from rustlike.core.option import NOTHING, Some, UnwrapError
from rustlike.core.result import Err, Ok, ResultKind, try_call


class TestConstruction:
    """Test building Results"""

    def test_ok(self):
        value = Ok(1)
        assert value.kind is ResultKind.OK
        assert value.is_ok()
        assert not value.is_err()

    def test_err(self):
        value = Err("bad")
        assert value.kind is ResultKind.ERR
        assert value.is_err()

    def test_try_call_ok(self):
        """Test a successful call"""
        assert try_call(int, "42") == Ok(42)

    def test_try_call_err(self):
        """Test a raising call captures the exception"""
        result = try_call(int, "x")
        assert result.is_err()
        assert isinstance(result.unwrap_err(), ValueError)

    def test_try_call_kwargs(self):
        """Test keyword arguments are forwarded"""
        assert try_call(int, "ff", base=16) == Ok(255)


class TestUnwrap:
    """Test extracting values"""

    def test_unwrap_ok(self):
        assert Ok("v").unwrap() == "v"

    def test_unwrap_err_reraises_exception(self):
        """Test an exception payload is raised as is"""
        with pytest.raises(KeyError):
            Err(KeyError("k")).unwrap()

    def test_unwrap_err_plain_payload(self):
        """Test a non-exception payload raises UnwrapError"""
        with pytest.raises(UnwrapError, match="'bad'"):
            Err("bad").unwrap()

    def test_unwrap_err(self):
        assert Err("bad").unwrap_err() == "bad"
        with pytest.raises(UnwrapError):
            Ok(1).unwrap_err()

    def test_expect(self):
        assert Ok(1).expect("value") == 1
        with pytest.raises(UnwrapError, match="need value"):
            Err("bad").expect("need value")

    def test_unwrap_or(self):
        assert Ok(1).unwrap_or(0) == 1
        assert Err("bad").unwrap_or(0) == 0

    def test_unwrap_or_else(self):
        assert Err("bad").unwrap_or_else(len) == 3
        assert Ok(1).unwrap_or_else(len) == 1


class TestCombinators:
    """Test transforming Results"""

    def test_map(self):
        assert Ok(2).map(lambda x: x + 1) == Ok(3)
        assert Err("e").map(lambda x: x + 1) == Err("e")

    def test_map_err(self):
        assert Err("e").map_err(str.upper) == Err("E")
        assert Ok(1).map_err(str.upper) == Ok(1)

    def test_map_or(self):
        assert Ok(2).map_or(str, "-") == "2"
        assert Err("e").map_or(str, "-") == "-"

    def test_map_or_else(self):
        assert Ok(2).map_or_else(str, len) == "2"
        assert Err("eee").map_or_else(str, len) == 3

    def test_and_then(self):
        """Test chaining fallible operations"""

        def parse(text):
            return try_call(int, text)

        assert Ok("7").and_then(parse) == Ok(7)
        assert Ok("x").and_then(parse).is_err()
        assert Err("e").and_then(parse) == Err("e")

    def test_or_else(self):
        assert Err("e").or_else(lambda e: Ok(len(e))) == Ok(1)
        assert Ok(1).or_else(lambda e: Ok(0)) == Ok(1)

    def test_inspect(self):
        seen = []
        Ok(1).inspect(seen.append)
        Err(2).inspect(seen.append)
        Err(3).inspect_err(seen.append)
        Ok(4).inspect_err(seen.append)
        assert seen == [1, 3]

    def test_ok_err(self):
        """Test conversion to Option"""
        assert Ok(1).ok() == Some(1)
        assert Err("e").ok() is NOTHING
        assert Err("e").err() == Some("e")
        assert Ok(1).err() is NOTHING

    def test_flatten(self):
        assert Ok(Ok(1)).flatten() == Ok(1)
        assert Ok(Err("e")).flatten() == Err("e")
        assert Err("e").flatten() == Err("e")


class TestProtocols:
    """Test Python protocol support"""

    def test_bool(self):
        assert Ok(0)
        assert not Err("e")

    def test_equality(self):
        assert Ok(1) == Ok(1)
        assert Ok(1) != Err(1)

    def test_repr(self):
        assert repr(Ok(42)) == "Ok(42)"
        assert repr(Err("bad")) == "Err('bad')"
