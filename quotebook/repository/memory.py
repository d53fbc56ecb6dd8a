"""
Thread-safe in-memory quote repository.

A single ``threading.Lock`` guards both the storage dict and the id sequence.
Records are deep-copied on the way in and on the way out, so no caller ever
holds a reference into storage and no read can observe a half-written record.

Nothing here validates; route writes through ``QuoteService`` for that.
"""

from __future__ import annotations

import threading
from typing import Dict, List, Optional

from quotebook.domain.errors import InvariantViolation
from quotebook.domain.models import Item
from quotebook.repository.abstract import AbstractQuoteRepository
from quotebook.utils.logging import get_logger

log = get_logger(__name__)

_FIRST_ID = 1


class InMemoryQuoteRepository(AbstractQuoteRepository):
    """
    Identity-keyed quote storage living in process memory.

    Ids start at 1 and only move forward for the lifetime of the instance,
    except through ``delete_all`` which resets them.
    """

    def __init__(self) -> None:
        self._storage: Dict[int, Item] = {}
        self._next_id = _FIRST_ID
        self._lock = threading.Lock()

    def save(self, item: Item) -> Item:
        """
        Insert or overwrite ``item``.

        A quote without an id receives the next sequence value; the caller's
        object is updated with it. An explicit id at or past the sequence
        pushes the sequence beyond it so later assignments cannot collide.
        """
        with self._lock:
            if item.id is None:
                new_id = self._next_id
                if new_id in self._storage:
                    raise InvariantViolation(f"id {new_id} assigned twice")
                self._next_id += 1
                item.id = new_id
                log.debug("Assigned quote id", extra={"item_id": new_id})
            elif item.id >= self._next_id:
                self._next_id = item.id + 1
            stored = item.model_copy(deep=True)
            self._storage[stored.id] = stored
            return stored.model_copy(deep=True)

    def find_by_id(self, item_id: int) -> Optional[Item]:
        with self._lock:
            stored = self._storage.get(item_id)
            return stored.model_copy(deep=True) if stored is not None else None

    def find_all(self) -> List[Item]:
        with self._lock:
            return [item.model_copy(deep=True) for item in self._storage.values()]

    def exists_by_id(self, item_id: int) -> bool:
        with self._lock:
            return item_id in self._storage

    def count(self) -> int:
        with self._lock:
            return len(self._storage)

    def delete_by_id(self, item_id: int) -> None:
        with self._lock:
            self._storage.pop(item_id, None)

    def delete_all(self) -> None:
        """
        Drop every quote and restart ids at 1.

        Callers must ensure no other writer is active; a save racing with this
        call may land before or after the reset.
        """
        with self._lock:
            dropped = len(self._storage)
            self._storage.clear()
            self._next_id = _FIRST_ID
        log.debug("Repository reset", extra={"dropped": dropped})


__all__ = ["InMemoryQuoteRepository"]
