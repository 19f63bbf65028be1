"""Tests for playpub.core.result module."""

import pytest

from playpub.core.result import Err, Ok, Result


class TestOk:
    """Tests for Ok type."""

    def test_create_ok(self) -> None:
        """Ok holds its value."""
        assert Ok(42).value == 42

    def test_equality(self) -> None:
        """Ok values compare by content."""
        assert Ok("a.aab") == Ok("a.aab")
        assert Ok("a.aab") != Err("a.aab")

    def test_frozen(self) -> None:
        """Ok is immutable."""
        result = Ok(42)
        with pytest.raises(AttributeError):
            result.value = 0  # type: ignore[misc]

    def test_repr(self) -> None:
        """Ok repr shows the wrapped value."""
        assert repr(Ok("a.aab")) == "Ok('a.aab')"


class TestErr:
    """Tests for Err type."""

    def test_create_err(self) -> None:
        """Err holds its error."""
        assert Err("no artifacts").error == "no artifacts"

    def test_frozen(self) -> None:
        """Err is immutable."""
        result = Err("x")
        with pytest.raises(AttributeError):
            result.error = "y"  # type: ignore[misc]

    def test_repr(self) -> None:
        """Err repr shows the wrapped error."""
        assert repr(Err("no artifacts")) == "Err('no artifacts')"


class TestPatternMatching:
    """Tests for matching on Result values."""

    def test_match_ok(self) -> None:
        """An Ok result matches the Ok case."""
        result: Result[int, str] = Ok(1)
        match result:
            case Ok(value):
                assert value == 1
            case Err(error):
                pytest.fail(f"unexpected {error}")

    def test_match_err(self) -> None:
        """An Err result matches the Err case."""
        result: Result[int, str] = Err("bad")
        match result:
            case Ok(value):
                pytest.fail(f"unexpected {value}")
            case Err(error):
                assert error == "bad"
