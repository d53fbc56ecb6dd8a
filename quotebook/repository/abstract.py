"""
Repository contract for Quotebook.

The query, aggregation and lifecycle layers depend on ``QuoteRepository``
rather than on a concrete store, so any identity-keyed storage satisfying the
protocol can back them.
"""

from __future__ import annotations

import abc
from typing import Iterable, List, Optional, Protocol, runtime_checkable

from quotebook.domain.models import Item


@runtime_checkable
class QuoteRepository(Protocol):
    """
    Identity-keyed storage for quotes.

    Implementations assign ids on first save and never reuse them. Reads
    return records the caller may mutate freely without affecting storage.
    """

    def save(self, item: Item) -> Item:
        """Insert or overwrite ``item`` by id, assigning one if absent."""
        ...

    def save_all(self, items: Iterable[Item]) -> List[Item]:
        """Save each item in order. Fails fast without rolling back."""
        ...

    def find_by_id(self, item_id: int) -> Optional[Item]:
        """Return the stored quote or ``None``."""
        ...

    def find_all(self) -> List[Item]:
        """Return a point-in-time snapshot of every stored quote."""
        ...

    def exists_by_id(self, item_id: int) -> bool: ...

    def count(self) -> int: ...

    def delete_by_id(self, item_id: int) -> None:
        """Remove the quote if present; no-op otherwise."""
        ...

    def delete_all(self) -> None:
        """Clear storage and reset the id sequence."""
        ...


class AbstractQuoteRepository(abc.ABC):
    """
    ABC helper for class-based implementations.

    Subclasses implement the primitive operations; ``save_all`` is derived.
    """

    @abc.abstractmethod
    def save(self, item: Item) -> Item:  # pragma: no cover - interface only
        raise NotImplementedError

    @abc.abstractmethod
    def find_by_id(self, item_id: int) -> Optional[Item]:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def find_all(self) -> List[Item]:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def exists_by_id(self, item_id: int) -> bool:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def count(self) -> int:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def delete_by_id(self, item_id: int) -> None:  # pragma: no cover
        raise NotImplementedError

    @abc.abstractmethod
    def delete_all(self) -> None:  # pragma: no cover
        raise NotImplementedError

    def save_all(self, items: Iterable[Item]) -> List[Item]:
        return [self.save(item) for item in items]


__all__ = [
    "QuoteRepository",
    "AbstractQuoteRepository",
]
