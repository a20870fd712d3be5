"""Tests for relnotes.core.result module."""

import pytest

from relnotes.core.result import Err, Ok, Result


def test_ok_map_err_is_noop() -> None:
    assert Ok(42).map_err(lambda e: f"error: {e}") == Ok(42)


def test_err_map_err() -> None:
    assert Err("boom").map_err(str.upper) == Err("BOOM")


def test_is_frozen() -> None:
    result = Ok(1)
    with pytest.raises(AttributeError):
        result.value = 2  # type: ignore[misc]


def test_pattern_matching() -> None:
    result: Result[int, str] = Err("bad")
    match result:
        case Ok(value):
            pytest.fail(f"unexpected Ok({value})")
        case Err(error):
            assert error == "bad"
