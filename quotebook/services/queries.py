"""
Read-only derived queries over a repository snapshot.

Every query pulls a full ``find_all()`` snapshot and filters it; nothing is
indexed. Results are new lists that keep snapshot order. Missing or blank
string arguments yield an empty result, never "match everything".
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List, Optional

from quotebook.domain.models import Item, Status
from quotebook.repository.abstract import QuoteRepository


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _contains_ignore_case(haystack: Optional[str], needle: str) -> bool:
    return haystack is not None and needle in haystack.lower()


class QueryEngine:
    """Filters over the quotes held by ``repository``."""

    def __init__(self, repository: QuoteRepository) -> None:
        self._repository = repository

    def _filter(self, predicate: Callable[[Item], bool]) -> List[Item]:
        return [item for item in self._repository.find_all() if predicate(item)]

    def find_by_status(self, status: Status) -> List[Item]:
        return self._filter(lambda item: item.status == status)

    def find_by_category(self, category: Optional[str]) -> List[Item]:
        if category is None:
            return []
        return self._filter(lambda item: item.category == category)

    def find_by_tag(self, tag: Optional[str]) -> List[Item]:
        if _is_blank(tag):
            return []
        return self._filter(lambda item: item.has_tag(tag))

    def find_by_title_containing(self, term: Optional[str]) -> List[Item]:
        """Case-insensitive substring match on the title."""
        if _is_blank(term):
            return []
        needle = term.lower()
        return self._filter(lambda item: _contains_ignore_case(item.title, needle))

    def find_by_author(self, author: Optional[str]) -> List[Item]:
        if _is_blank(author):
            return []
        return self._filter(lambda item: item.author == author)

    def find_favorites(self) -> List[Item]:
        return self._filter(lambda item: item.favorite)

    def find_by_min_rating(self, min_rating: float) -> List[Item]:
        return self._filter(lambda item: item.rating >= min_rating)

    def find_by_date_range(self, start: datetime, end: datetime) -> List[Item]:
        """Quotes created strictly between ``start`` and ``end``."""
        return self._filter(lambda item: start < item.created_at < end)

    def search(self, query: Optional[str]) -> List[Item]:
        """
        Free-text search across title, description and category.

        Author and tags are deliberately not searched. The query is trimmed
        and compared case-insensitively.
        """
        if _is_blank(query):
            return []
        needle = query.strip().lower()
        return self._filter(
            lambda item: _contains_ignore_case(item.title, needle)
            or _contains_ignore_case(item.description, needle)
            or _contains_ignore_case(item.category, needle)
        )


__all__ = ["QueryEngine"]
