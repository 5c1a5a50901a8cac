"""Tests for relkit.core.result module."""

import pytest

from relkit.core.result import Err, Ok, Result, is_err, is_ok


class TestOk:
    def test_value_and_flags(self) -> None:
        result = Ok("0.2.1")
        assert result.value == "0.2.1"
        assert result.is_ok() is True
        assert result.is_err() is False

    def test_unwrap_ignores_default(self) -> None:
        assert Ok(3).unwrap() == 3
        assert Ok(3).unwrap_or(0) == 3

    def test_map_transforms_value(self) -> None:
        assert Ok(2).map(lambda v: v + 1) == Ok(3)

    def test_map_err_is_noop(self) -> None:
        result: Ok[int] = Ok(2)
        assert result.map_err(str.upper) is result


class TestErr:
    def test_error_and_flags(self) -> None:
        result = Err("boom")
        assert result.error == "boom"
        assert result.is_ok() is False
        assert result.is_err() is True

    def test_unwrap_raises(self) -> None:
        with pytest.raises(ValueError, match="called unwrap on Err"):
            Err("boom").unwrap()

    def test_unwrap_or_returns_default(self) -> None:
        assert Err("boom").unwrap_or(7) == 7

    def test_map_err_transforms_error(self) -> None:
        assert Err("boom").map_err(str.upper) == Err("BOOM")

    def test_map_is_noop(self) -> None:
        result = Err("boom")
        assert result.map(lambda v: v) is result


def test_type_guards() -> None:
    ok: Result[int, str] = Ok(1)
    err: Result[int, str] = Err("x")
    assert is_ok(ok) and not is_err(ok)
    assert is_err(err) and not is_ok(err)


def test_repr() -> None:
    assert repr(Ok("1.0.0")) == "Ok('1.0.0')"
    assert repr(Err("bad")) == "Err('bad')"
