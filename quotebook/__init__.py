"""
Quotebook - an in-process store for quotes with queries and aggregations.

This package provides:

- A thread-safe in-memory repository with monotonic id assignment
- Validation of quote fields on every write path
- Read-only queries by status, category, tag, author, rating, date and text
- Aggregations: grouping, unique values, tag set operations, tag popularity
- Bulk lifecycle transitions (archiving inactive quotes)
"""

from __future__ import annotations

__version__ = "0.1.0"
__license__ = "MIT"

# Public API exports
from quotebook.config import Settings, get_settings
from quotebook.domain import (
    InvariantViolation,
    Item,
    QuotebookError,
    QuoteNotFoundError,
    QuoteValidationError,
    Status,
    validate,
)
from quotebook.repository import AbstractQuoteRepository, InMemoryQuoteRepository, QuoteRepository
from quotebook.services import AggregationEngine, QueryEngine, QuoteService
from quotebook.utils.logging import configure_logging, get_logger

__all__ = [
    # Version info
    "__version__",
    "__license__",
    # Configuration
    "Settings",
    "get_settings",
    # Domain
    "Item",
    "Status",
    "validate",
    "QuotebookError",
    "QuoteValidationError",
    "QuoteNotFoundError",
    "InvariantViolation",
    # Storage
    "QuoteRepository",
    "AbstractQuoteRepository",
    "InMemoryQuoteRepository",
    # Services
    "QueryEngine",
    "AggregationEngine",
    "QuoteService",
    # Logging
    "configure_logging",
    "get_logger",
]
