"""Tests for tlr.core.result module."""

from __future__ import annotations

import pytest

from tlr.core.result import Err, Ok


class TestOk:
    def test_equality(self) -> None:
        assert Ok("target/release/terra-link") == Ok("target/release/terra-link")
        assert Ok(1) != Err(1)

    def test_repr(self) -> None:
        assert repr(Ok("a")) == "Ok('a')"


class TestErr:
    def test_repr(self) -> None:
        assert repr(Err(101)) == "Err(101)"

    def test_frozen(self) -> None:
        result = Err("boom")
        with pytest.raises(AttributeError):
            result.error = "other"  # type: ignore[misc]


class TestPatternMatching:
    def test_match_ok(self) -> None:
        match Ok(5):
            case Ok(value):
                assert value == 5
            case Err(_):
                pytest.fail("expected Ok")

    def test_match_err(self) -> None:
        match Err("bad"):
            case Ok(_):
                pytest.fail("expected Err")
            case Err(error):
                assert error == "bad"
