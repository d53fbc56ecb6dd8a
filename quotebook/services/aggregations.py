"""
Aggregations over a repository snapshot: grouping, counting, tag set
operations and popularity ranking.
"""

from __future__ import annotations

from collections import Counter
from typing import Dict, Iterable, List, Optional, Set

from quotebook.domain.models import Item, Status
from quotebook.repository.abstract import QuoteRepository


class AggregationEngine:
    """Computes summaries of the quotes held by ``repository``."""

    def __init__(self, repository: QuoteRepository) -> None:
        self._repository = repository

    def group_by_category(self) -> Dict[str, List[Item]]:
        """Quotes keyed by category. Uncategorised quotes are left out."""
        groups: Dict[str, List[Item]] = {}
        for item in self._repository.find_all():
            if item.category is not None:
                groups.setdefault(item.category, []).append(item)
        return groups

    def get_all_unique_tags(self) -> Set[str]:
        tags: Set[str] = set()
        for item in self._repository.find_all():
            tags |= item.tags
        return tags

    def get_all_unique_categories(self) -> Set[str]:
        return {
            item.category for item in self._repository.find_all() if item.category is not None
        }

    def count_by_status(self) -> Dict[Status, int]:
        """Number of quotes per status; statuses with no quotes are absent."""
        return dict(Counter(item.status for item in self._repository.find_all()))

    def find_by_all_tags(self, tags: Optional[Iterable[str]]) -> List[Item]:
        """Quotes carrying every tag in ``tags``. Empty input matches nothing."""
        wanted = set(tags or ())
        if not wanted:
            return []
        return [item for item in self._repository.find_all() if wanted <= item.tags]

    def find_by_any_tag(self, tags: Optional[Iterable[str]]) -> List[Item]:
        """Quotes carrying at least one tag in ``tags``. Empty input matches nothing."""
        wanted = set(tags or ())
        if not wanted:
            return []
        return [item for item in self._repository.find_all() if not wanted.isdisjoint(item.tags)]

    def tag_counts(self) -> Counter:
        return Counter(tag for item in self._repository.find_all() for tag in item.tags)

    def get_most_popular_tags(self, limit: int) -> List[str]:
        """
        Top ``limit`` tags by number of quotes carrying them.

        Equal counts are ordered by tag name so the ranking is reproducible.
        """
        if limit <= 0:
            return []
        ranked = sorted(self.tag_counts().items(), key=lambda pair: (-pair[1], pair[0]))
        return [tag for tag, _ in ranked[:limit]]


__all__ = ["AggregationEngine"]
