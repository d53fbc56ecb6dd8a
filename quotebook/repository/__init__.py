"""
Repository package for Quotebook.

Re-exports the repository contract and the in-memory implementation.
"""

from quotebook.repository.abstract import AbstractQuoteRepository, QuoteRepository
from quotebook.repository.memory import InMemoryQuoteRepository

__all__ = [
    "AbstractQuoteRepository",
    "QuoteRepository",
    "InMemoryQuoteRepository",
]
