"""
Services package for Quotebook.

Re-exports the query and aggregation engines and the quote service facade.
"""

from quotebook.services.aggregations import AggregationEngine
from quotebook.services.queries import QueryEngine
from quotebook.services.quote_service import QuoteService

__all__ = [
    "AggregationEngine",
    "QueryEngine",
    "QuoteService",
]
