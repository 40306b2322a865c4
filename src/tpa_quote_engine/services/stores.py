# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""In-memory persistence for quotes and special quote requests.

Persistence is owned by the application, not the pricing core. These
stores stand in for the relational tables and enforce the same unique
constraint on reference numbers so collisions surface to the services.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import TypeVar
from uuid import UUID

from beartype import beartype

from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.quote import QuoteResult
from ..models.special_quote import SpecialQuoteRequest

logger = get_logger(__name__)

T = TypeVar("T")


class DuplicateReferenceError(Exception):
    """A quote or request number is already taken."""

    def __init__(self, reference: str) -> None:
        self.reference = reference
        super().__init__(f"Reference number {reference} already exists")


@beartype
class QuoteStore:
    """Priced quotes keyed by quote number."""

    def __init__(self) -> None:
        self._quotes: dict[str, QuoteResult] = {}
        self._lock = asyncio.Lock()

    async def add(self, quote: QuoteResult) -> None:
        async with self._lock:
            if quote.quote_number in self._quotes:
                raise DuplicateReferenceError(quote.quote_number)
            self._quotes[quote.quote_number] = quote

    async def get(self, quote_number: str) -> QuoteResult | None:
        return self._quotes.get(quote_number)


@beartype
class SpecialQuoteRequestStore:
    """Special quote requests keyed by id, unique on request number."""

    def __init__(self) -> None:
        self._requests: dict[UUID, SpecialQuoteRequest] = {}
        self._numbers: set[str] = set()
        self._lock = asyncio.Lock()

    async def add(self, request: SpecialQuoteRequest) -> None:
        async with self._lock:
            if request.request_number in self._numbers:
                raise DuplicateReferenceError(request.request_number)
            self._numbers.add(request.request_number)
            self._requests[request.id] = request

    async def replace(self, request: SpecialQuoteRequest) -> None:
        async with self._lock:
            if request.id not in self._requests:
                raise KeyError(str(request.id))
            self._requests[request.id] = request

    async def get(self, request_id: UUID) -> SpecialQuoteRequest | None:
        return self._requests.get(request_id)

    async def list_for_tenant(self, tenant_id: str) -> list[SpecialQuoteRequest]:
        requests = [r for r in self._requests.values() if r.tenant_id == tenant_id]
        return sorted(requests, key=lambda r: r.created_at, reverse=True)


@beartype
async def insert_with_retry(
    build: Callable[[], T],
    insert: Callable[[T], Awaitable[None]],
    attempts: int,
) -> Result[T, str]:
    """Build a record and insert it, rebuilding when its number collides.

    ``build`` must generate a fresh reference number on every call.
    """
    for attempt in range(1, attempts + 1):
        record = build()
        try:
            await insert(record)
        except DuplicateReferenceError as e:
            logger.warning(
                "Reference number collision (attempt %d/%d): %s",
                attempt,
                attempts,
                e.reference,
            )
            continue
        return Ok(record)

    return Err(f"Could not allocate a unique reference number after {attempts} attempts")
