"""Unit tests for Ok/Err result types."""

import pytest

from tpa_quote_engine.core.result_types import Err, Ok, Result


class TestResultTypes:
    def test_ok(self) -> None:
        result = Ok(42)

        assert result.is_ok()
        assert not result.is_err()
        assert result.unwrap() == 42
        assert result.ok_value == 42
        assert result.err_value is None
        assert result.unwrap_or(0) == 42

    def test_err(self) -> None:
        result = Err("boom")

        assert result.is_err()
        assert result.err_value == "boom"
        assert result.unwrap_err() == "boom"
        assert result.unwrap_or(0) == 0

    def test_unwrap_err_on_ok_raises(self) -> None:
        with pytest.raises(ValueError):
            Ok(1).unwrap_err()

    def test_unwrap_on_err_raises(self) -> None:
        with pytest.raises(ValueError, match="boom"):
            Err("boom").unwrap()

    def test_map_err(self) -> None:
        assert Err("boom").map_err(lambda e: f"context: {e}").unwrap_err() == "context: boom"
        assert Ok(1).map_err(lambda e: f"context: {e}").unwrap() == 1

    def test_factories(self) -> None:
        assert Result.ok(1) == Ok(1)
        assert Result.err("x") == Err("x")
