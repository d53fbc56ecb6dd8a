"""
Write-path validation for quotes.

``validate`` is pure and synchronous. It must be called on every create and
update path; the repository itself accepts anything it is given.
"""

from __future__ import annotations

from typing import Optional

from quotebook.domain.errors import QuoteValidationError
from quotebook.domain.models import Item
from quotebook.utils.logging import get_logger

MAX_TITLE_LENGTH = 100
MAX_DESCRIPTION_LENGTH = 1000
MAX_AUTHOR_LENGTH = 100
MIN_RATING = 0.0
MAX_RATING = 5.0

log = get_logger(__name__)


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _check(item: Optional[Item]) -> None:
    if item is None:
        raise QuoteValidationError("Item cannot be null")
    if _is_blank(item.title):
        raise QuoteValidationError("Title is required")
    if len(item.title) > MAX_TITLE_LENGTH:
        raise QuoteValidationError(f"Title cannot exceed {MAX_TITLE_LENGTH} characters")
    if item.description is not None and len(item.description) > MAX_DESCRIPTION_LENGTH:
        raise QuoteValidationError(
            f"Quote text cannot exceed {MAX_DESCRIPTION_LENGTH} characters"
        )
    if item.author is not None and _is_blank(item.author):
        raise QuoteValidationError("Author cannot be empty if provided")
    if item.author is not None and len(item.author) > MAX_AUTHOR_LENGTH:
        raise QuoteValidationError(f"Author name cannot exceed {MAX_AUTHOR_LENGTH} characters")
    # Chained comparison also rejects NaN.
    if not MIN_RATING <= item.rating <= MAX_RATING:
        raise QuoteValidationError("Rating must be between 0 and 5")
    if item.category is not None and _is_blank(item.category):
        raise QuoteValidationError("Category cannot be empty if provided")


def validate(item: Optional[Item]) -> None:
    """
    Check every field constraint of ``item``.

    Raises
    ------
    QuoteValidationError
        On the first violated constraint, with a descriptive ``reason``.
    """
    try:
        _check(item)
    except QuoteValidationError as exc:
        log.warning("Quote rejected", extra={"reason": exc.reason})
        raise


__all__ = [
    "validate",
    "MAX_TITLE_LENGTH",
    "MAX_DESCRIPTION_LENGTH",
    "MAX_AUTHOR_LENGTH",
]
