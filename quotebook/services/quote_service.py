"""
Quote service: validated writes, bulk lifecycle transitions and a single
facade over the query and aggregation engines.

Usage:
    from quotebook.repository import InMemoryQuoteRepository
    from quotebook.services import QuoteService

    service = QuoteService(InMemoryQuoteRepository())
    saved = service.create(Item(title="On brevity", author="Pascal"))
    service.search("brevity")
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, Iterable, List, Optional, Set

from quotebook.domain.errors import QuoteNotFoundError
from quotebook.domain.models import Item, Status
from quotebook.domain.validation import validate
from quotebook.repository.abstract import QuoteRepository
from quotebook.services.aggregations import AggregationEngine
from quotebook.services.queries import QueryEngine
from quotebook.utils.logging import get_logger

log = get_logger(__name__)


class QuoteService:
    """
    Business operations on quotes.

    All writes made through this class are validated first; a rejected quote
    leaves the repository untouched.
    """

    def __init__(self, repository: QuoteRepository) -> None:
        self._repository = repository
        self._queries = QueryEngine(repository)
        self._aggregations = AggregationEngine(repository)

    @property
    def repository(self) -> QuoteRepository:
        return self._repository

    # ------------------------------------------------------------------
    # CRUD
    # ------------------------------------------------------------------

    def create(self, item: Item) -> Item:
        validate(item)
        saved = self._repository.save(item)
        log.info("Quote created", extra={"item_id": saved.id})
        return saved

    def create_all(self, items: Iterable[Item]) -> List[Item]:
        """
        Validate every quote, then save them in order.

        Validation happens up front so one bad quote rejects the whole batch
        before anything is written.
        """
        batch = list(items)
        for item in batch:
            validate(item)
        saved = self._repository.save_all(batch)
        log.info("Quotes created", extra={"count": len(saved)})
        return saved

    def update(self, item_id: int, item: Item) -> Item:
        """
        Replace the quote stored under ``item_id``.

        The stored creation time is kept. The lookup and the save are separate
        repository calls, so a delete landing in between is undone by the save
        (last write wins, as with archiving).

        Raises
        ------
        QuoteValidationError
            If ``item`` breaks a field constraint.
        QuoteNotFoundError
            If no quote with ``item_id`` exists.
        """
        validate(item)
        current = self._repository.find_by_id(item_id)
        if current is None:
            raise QuoteNotFoundError(item_id)
        item.id = item_id
        item.created_at = current.created_at
        saved = self._repository.save(item)
        log.info("Quote updated", extra={"item_id": item_id})
        return saved

    def get(self, item_id: int) -> Optional[Item]:
        return self._repository.find_by_id(item_id)

    def list_all(self) -> List[Item]:
        return self._repository.find_all()

    def delete(self, item_id: int) -> bool:
        """
        Delete a quote; returns False when there was nothing to delete.

        Check and delete are separate calls, so two concurrent deletes of the
        same id may both return True.
        """
        if not self._repository.exists_by_id(item_id):
            return False
        self._repository.delete_by_id(item_id)
        log.info("Quote deleted", extra={"item_id": item_id})
        return True

    def count(self) -> int:
        return self._repository.count()

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------

    def archive_inactive_items(self) -> int:
        """
        Move every INACTIVE quote to ARCHIVED and return how many moved.

        This reads, modifies and writes back in separate steps. A concurrent
        update to one of the same quotes in between is overwritten (last write
        wins).
        """
        inactive = self._queries.find_by_status(Status.INACTIVE)
        for item in inactive:
            item.status = Status.ARCHIVED
        self._repository.save_all(inactive)
        log.info("Archived inactive quotes", extra={"count": len(inactive)})
        return len(inactive)

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def find_by_status(self, status: Status) -> List[Item]:
        return self._queries.find_by_status(status)

    def find_by_category(self, category: Optional[str]) -> List[Item]:
        return self._queries.find_by_category(category)

    def find_by_tag(self, tag: Optional[str]) -> List[Item]:
        return self._queries.find_by_tag(tag)

    def find_by_title_containing(self, term: Optional[str]) -> List[Item]:
        return self._queries.find_by_title_containing(term)

    def find_by_author(self, author: Optional[str]) -> List[Item]:
        return self._queries.find_by_author(author)

    def find_favorites(self) -> List[Item]:
        return self._queries.find_favorites()

    def find_by_min_rating(self, min_rating: float) -> List[Item]:
        return self._queries.find_by_min_rating(min_rating)

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Item]:
        return self._queries.find_by_date_range(start, end)

    def search(self, query: Optional[str]) -> List[Item]:
        return self._queries.search(query)

    # ------------------------------------------------------------------
    # Aggregations
    # ------------------------------------------------------------------

    def group_by_category(self) -> Dict[str, List[Item]]:
        return self._aggregations.group_by_category()

    def get_all_unique_tags(self) -> Set[str]:
        return self._aggregations.get_all_unique_tags()

    def get_all_unique_categories(self) -> Set[str]:
        return self._aggregations.get_all_unique_categories()

    def count_by_status(self) -> Dict[Status, int]:
        return self._aggregations.count_by_status()

    def find_by_all_tags(self, tags: Optional[Iterable[str]]) -> List[Item]:
        return self._aggregations.find_by_all_tags(tags)

    def find_by_any_tag(self, tags: Optional[Iterable[str]]) -> List[Item]:
        return self._aggregations.find_by_any_tag(tags)

    def get_most_popular_tags(self, limit: int) -> List[str]:
        return self._aggregations.get_most_popular_tags(limit)

    def statistics(self, limit: int = 5) -> Dict[str, Any]:
        """Summary of the collection, shaped for JSON output."""
        return {
            "total": self.count(),
            "by_status": {
                status.value: count
                for status, count in sorted(
                    self.count_by_status().items(), key=lambda pair: pair[0].value
                )
            },
            "categories": sorted(self.get_all_unique_categories()),
            "unique_tags": len(self.get_all_unique_tags()),
            "popular_tags": self.get_most_popular_tags(limit),
        }


__all__ = ["QuoteService"]
