"""
Sample quote generation and JSON import/export for Quotebook.

Generation is deterministic for a given seed so CLI output and tests are
reproducible. The JSON file is an exchange format for the CLI only; the
repository never reads or writes it.
"""

from __future__ import annotations

import random
from datetime import datetime, timedelta
from pathlib import Path
from typing import List

from pydantic import TypeAdapter

from quotebook.domain.models import Item, Status

_ITEMS = TypeAdapter(List[Item])

_AUTHORS = ["Seneca", "Marcus Aurelius", "Epictetus", "Ada Lovelace", "Grace Hopper", None]
_CATEGORIES = ["philosophy", "science", "computing", "humor", None]
_TAGS = ["wisdom", "time", "courage", "machines", "curiosity", "work", "life"]
_SUBJECTS = ["Time", "Courage", "Machines", "Curiosity", "Work", "Patience", "Change"]
_STATUS_WEIGHTS = {Status.ACTIVE: 6, Status.INACTIVE: 3, Status.ARCHIVED: 1}

_EPOCH = datetime(2024, 1, 1)


def generate_items(count: int, seed: int = 42) -> List[Item]:
    """
    Build ``count`` valid, id-less quotes from a seeded RNG.
    """
    rng = random.Random(seed)
    statuses = list(_STATUS_WEIGHTS)
    weights = list(_STATUS_WEIGHTS.values())

    items: List[Item] = []
    for i in range(count):
        subject = rng.choice(_SUBJECTS)
        items.append(
            Item(
                title=f"On {subject} #{i + 1}",
                description=f"A reflection on {subject.lower()}.",
                author=rng.choice(_AUTHORS),
                category=rng.choice(_CATEGORIES),
                tags=set(rng.sample(_TAGS, rng.randint(0, 3))),
                rating=round(rng.uniform(0, 5), 1),
                favorite=rng.random() < 0.2,
                status=rng.choices(statuses, weights=weights)[0],
                created_at=_EPOCH + timedelta(hours=i),
            )
        )
    return items


def dump_items(items: List[Item], path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(_ITEMS.dump_json(items, indent=2))


def load_items(path: Path) -> List[Item]:
    """Parse a JSON array of quotes. Ids in the file are kept as-is."""
    return _ITEMS.validate_json(path.read_bytes())


__all__ = ["generate_items", "dump_items", "load_items"]
