# PolicyCore - Policy Decision Management System
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Business logic service layer."""

from ..core.result_types import Err, Ok, Result
from .catalog import ProductCatalog
from .quote_service import QuoteService
from .special_quote_service import SpecialQuoteRequestService
from .stores import DuplicateReferenceError, QuoteStore, SpecialQuoteRequestStore

__all__ = [
    "Result",
    "Ok",
    "Err",
    "ProductCatalog",
    "QuoteService",
    "SpecialQuoteRequestService",
    "QuoteStore",
    "SpecialQuoteRequestStore",
    "DuplicateReferenceError",
]
