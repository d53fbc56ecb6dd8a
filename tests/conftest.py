"""
Pytest configuration for Quotebook.

Provides fixtures for:
- A fresh in-memory repository per test
- A quote service bound to that repository
- Deterministic sample quotes
"""

from __future__ import annotations

from datetime import datetime
from typing import Callable, List

import pytest

from quotebook.domain.models import Item, Status
from quotebook.repository.memory import InMemoryQuoteRepository
from quotebook.seed import generate_items
from quotebook.services.quote_service import QuoteService


@pytest.fixture
def repository() -> InMemoryQuoteRepository:
    return InMemoryQuoteRepository()


@pytest.fixture
def service(repository: InMemoryQuoteRepository) -> QuoteService:
    return QuoteService(repository)


@pytest.fixture
def make_item() -> Callable[..., Item]:
    """
    Factory for valid quotes; keyword arguments override the defaults.
    """

    def _make(**overrides) -> Item:
        fields = {
            "title": "Untitled",
            "created_at": datetime(2024, 6, 1, 12, 0),
        }
        fields.update(overrides)
        return Item(**fields)

    return _make


@pytest.fixture
def sample_items() -> List[Item]:
    return generate_items(30, seed=7)


@pytest.fixture
def populated(service: QuoteService, make_item: Callable[..., Item]) -> QuoteService:
    """
    Service holding a small hand-built collection.
    """
    service.create_all(
        [
            make_item(
                title="Catalog of Virtues",
                description="Patience is bitter, but its fruit is sweet.",
                author="Rousseau",
                category="philosophy",
                tags={"wisdom", "patience"},
                rating=4.5,
                favorite=True,
            ),
            make_item(
                title="Debugging",
                description="If debugging is removing bugs, programming is putting them in.",
                author="Dijkstra",
                category="computing",
                tags={"humor", "work"},
                rating=3.0,
                status=Status.INACTIVE,
            ),
            make_item(
                title="On Machines",
                description="The Analytical Engine weaves algebraic patterns.",
                author="Ada Lovelace",
                category="computing",
                tags={"machines", "wisdom"},
                rating=5.0,
                favorite=True,
            ),
            make_item(
                title="Untethered",
                description=None,
                author=None,
                category=None,
                tags={"cat"},
                rating=1.0,
                status=Status.ARCHIVED,
            ),
        ]
    )
    return service
