"""Pagination helpers — cursor-shape validation and client-side offset slicing."""

from __future__ import annotations

from typing import Sequence, TypeVar

from discussion_tools.domain.exceptions import InvalidParameterError
from discussion_tools.domain.value_objects import PaginationRequest

T = TypeVar("T")


def validate_pagination(req: PaginationRequest) -> None:
    """Reject contradictory cursor pagination shapes.

    Rules are checked in a fixed order and the first failure wins.
    """
    if req.first is not None and req.last is not None:
        raise InvalidParameterError("only one of 'first' or 'last' may be specified")
    if req.after is not None and req.before is not None:
        raise InvalidParameterError("only one of 'after' or 'before' may be specified")
    if req.after is not None and req.last is not None:
        raise InvalidParameterError("'after' cannot be used with 'last'; use 'before' instead")
    if req.before is not None and req.first is not None:
        raise InvalidParameterError("'before' cannot be used with 'first'; use 'after' instead")


def paginate_offset(items: Sequence[T], page: int, per_page: int) -> list[T]:
    """Return the 1-based *page* of *items*; pages past the end are empty."""
    start = (page - 1) * per_page
    if start >= len(items):
        return []
    return list(items[start : start + per_page])
