"""Unit tests for reference number generation."""

import re
from datetime import datetime, timezone

from tpa_quote_engine.services.rating.identifiers import generate_reference_number


class TestGenerateReferenceNumber:
    def test_format(self) -> None:
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)

        number = generate_reference_number("QTE-", now)

        assert re.fullmatch(r"QTE-1735689600000-[0-9A-Z]{6}", number)

    def test_random_suffix_differs(self) -> None:
        now = datetime(2025, 1, 1, tzinfo=timezone.utc)

        numbers = {generate_reference_number("SQR-", now) for _ in range(20)}

        assert len(numbers) > 1
