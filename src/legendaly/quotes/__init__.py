"""Quote generation package for legendaly.

This package provides the model client, batch parser and quote models.
"""

from .client import call_with_retry, create_client
from .errors import (
    ErrorKind,
    QuoteAPIError,
    QuoteAuthError,
    QuoteError,
    classify_error,
)
from .models import ParseResult, QuoteRecord
from .parser import parse_batch

__all__ = [
    "ErrorKind",
    "ParseResult",
    "QuoteAPIError",
    "QuoteAuthError",
    "QuoteError",
    "QuoteRecord",
    "call_with_retry",
    "classify_error",
    "create_client",
    "parse_batch",
]
