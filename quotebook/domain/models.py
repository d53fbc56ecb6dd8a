"""
Domain models for Quotebook.

Defines the quote record and its status enum. The model enforces field types
only; length and range constraints are checked by
``quotebook.domain.validation.validate`` so that violations are reported
instead of coerced.
"""
from __future__ import annotations

from datetime import datetime
from enum import Enum
from typing import Optional, Set

from pydantic import BaseModel, Field


class Status(str, Enum):
    """Lifecycle status of a quote."""

    ACTIVE = "ACTIVE"
    INACTIVE = "INACTIVE"
    ARCHIVED = "ARCHIVED"


class Item(BaseModel):
    """
    A single quote.

    ``id`` stays ``None`` until the repository assigns one on first save.
    """

    id: Optional[int] = Field(None, description="Store-assigned identity.")
    title: str = Field(..., description="Short title of the quote.")
    description: Optional[str] = Field(None, description="Full quote text.")
    author: Optional[str] = Field(None, description="Who said or wrote it.")
    category: Optional[str] = Field(None, description="Free-form category label.")
    tags: Set[str] = Field(default_factory=set, description="Unordered labels.")
    rating: float = Field(0.0, description="Score between 0 and 5.")
    favorite: bool = Field(False, description="Marked as a favorite.")
    status: Status = Field(Status.ACTIVE, description="Lifecycle status.")
    created_at: datetime = Field(default_factory=datetime.now, description="Creation time.")

    model_config = {
        "populate_by_name": True,
        "arbitrary_types_allowed": False,
    }

    def has_tag(self, tag: str) -> bool:
        return tag in self.tags


__all__ = ["Item", "Status"]
