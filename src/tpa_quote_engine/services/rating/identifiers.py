# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Human-readable reference numbers for quotes and special requests.

Format: ``<prefix><epoch millis>-<6 random base36 chars>``. Uniqueness is
advisory only; stores enforce it and callers regenerate on collision.
"""

import secrets
import string
from datetime import datetime
from typing import Final

from beartype import beartype

_SUFFIX_ALPHABET: Final = string.digits + string.ascii_uppercase
_SUFFIX_LENGTH: Final = 6


@beartype
def generate_reference_number(prefix: str, now: datetime) -> str:
    """Build a reference number from a timestamp and a random component."""
    millis = int(now.timestamp() * 1000)
    suffix = "".join(secrets.choice(_SUFFIX_ALPHABET) for _ in range(_SUFFIX_LENGTH))
    return f"{prefix}{millis}-{suffix}"
