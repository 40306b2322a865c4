"""Unit tests for in-memory stores and reference-number retry."""

from datetime import datetime, timedelta
from decimal import Decimal

import pytest

from tpa_quote_engine.models.quote import QuoteResult
from tpa_quote_engine.services.stores import (
    DuplicateReferenceError,
    QuoteStore,
    insert_with_retry,
)


def _quote(number: str, now: datetime) -> QuoteResult:
    return QuoteResult(
        quote_number=number,
        tenant_id="tenant-test",
        product_id="cac-elevate-vsc",
        tier="Gold",
        term_months=48,
        vehicle_class="A",
        base_premium=Decimal("100.00"),
        taxes=Decimal("6.50"),
        fees=Decimal("50.00"),
        total_premium=Decimal("156.50"),
        tax_rate=Decimal("0.065"),
        created_at=now,
        expires_at=now + timedelta(days=30),
    )


class TestQuoteStore:
    @pytest.mark.asyncio
    async def test_duplicate_number_rejected(self, now: datetime) -> None:
        store = QuoteStore()
        await store.add(_quote("QTE-1-AAAAAA", now))

        with pytest.raises(DuplicateReferenceError) as exc_info:
            await store.add(_quote("QTE-1-AAAAAA", now))

        assert exc_info.value.reference == "QTE-1-AAAAAA"

    @pytest.mark.asyncio
    async def test_get_returns_stored_quote(self, now: datetime) -> None:
        store = QuoteStore()
        await store.add(_quote("QTE-1-AAAAAA", now))

        assert (await store.get("QTE-1-AAAAAA")).quote_number == "QTE-1-AAAAAA"
        assert await store.get("QTE-2-BBBBBB") is None


class TestInsertWithRetry:
    @pytest.mark.asyncio
    async def test_regenerates_on_collision(self, now: datetime) -> None:
        store = QuoteStore()
        await store.add(_quote("QTE-1-TAKEN0", now))
        numbers = iter(["QTE-1-TAKEN0", "QTE-1-FREE00"])

        result = await insert_with_retry(
            lambda: _quote(next(numbers), now), store.add, attempts=3
        )

        assert result.is_ok()
        assert result.unwrap().quote_number == "QTE-1-FREE00"
        assert await store.get("QTE-1-FREE00") is not None

    @pytest.mark.asyncio
    async def test_gives_up_after_attempts(self, now: datetime) -> None:
        store = QuoteStore()
        await store.add(_quote("QTE-1-TAKEN0", now))

        result = await insert_with_retry(
            lambda: _quote("QTE-1-TAKEN0", now), store.add, attempts=2
        )

        assert result.is_err()
        assert result.err_value == (
            "Could not allocate a unique reference number after 2 attempts"
        )
