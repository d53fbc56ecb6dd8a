"""
Error taxonomy for Quotebook.

Validation failures are recoverable and raised before any write. Lookups by id
never raise; they return ``None``. ``InvariantViolation`` signals a store bug
and should not be retried.
"""

from __future__ import annotations


class QuotebookError(Exception):
    """Base class for all Quotebook errors."""


class QuoteValidationError(QuotebookError, ValueError):
    """
    Raised when a quote violates a field constraint.

    The ``reason`` attribute holds the human-readable message suitable for
    surfacing to a client.
    """

    def __init__(self, reason: str) -> None:
        super().__init__(reason)
        self.reason = reason


class QuoteNotFoundError(QuotebookError, LookupError):
    """Raised when an update targets an id the store does not hold."""

    def __init__(self, item_id: int) -> None:
        super().__init__(f"Quote {item_id} not found")
        self.item_id = item_id


class InvariantViolation(QuotebookError, RuntimeError):
    """Store invariant broken (e.g. duplicate id assignment)."""


__all__ = [
    "QuotebookError",
    "QuoteValidationError",
    "QuoteNotFoundError",
    "InvariantViolation",
]
