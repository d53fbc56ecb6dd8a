"""
Domain package for Quotebook.

Exports the quote model, its status enum, the validation entry point and the
error taxonomy. Keep this package free of storage concerns.
"""

from quotebook.domain.errors import (
    InvariantViolation,
    QuotebookError,
    QuoteNotFoundError,
    QuoteValidationError,
)
from quotebook.domain.models import Item, Status
from quotebook.domain.validation import validate

__all__ = [
    "Item",
    "Status",
    "validate",
    "QuotebookError",
    "QuoteValidationError",
    "QuoteNotFoundError",
    "InvariantViolation",
]
