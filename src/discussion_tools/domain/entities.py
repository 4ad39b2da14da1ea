"""Domain entities — pure data structures with no external dependencies."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class DiscussionState(str, Enum):
    """State filter accepted by the listing tool."""

    OPEN = "open"
    CLOSED = "closed"
    ALL = "all"


class SortField(str, Enum):
    """Fields the platform can order discussions by."""

    CREATED_AT = "CREATED_AT"
    UPDATED_AT = "UPDATED_AT"


class SortDirection(str, Enum):
    ASC = "ASC"
    DESC = "DESC"


@dataclass(frozen=True, slots=True)
class Category:
    """A discussion category — ``id`` is the platform's opaque node id."""

    id: str
    name: str


@dataclass(frozen=True, slots=True)
class DiscussionSummary:
    """One entry of a discussion listing.

    ``state`` and ``labels`` are only known when the listing came from the
    REST transport; the GraphQL listing leaves them empty.
    """

    number: int
    title: str
    created_at: datetime
    url: str
    category: Category | None = None
    state: str | None = None
    labels: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class DiscussionDetail:
    """A single discussion as returned by ``get_discussion``."""

    number: int
    body: str
    state: str
    created_at: datetime
    url: str


@dataclass(frozen=True, slots=True)
class Comment:
    body: str


@dataclass(frozen=True, slots=True)
class FilterSet:
    """Client-side filters, combined with logical AND."""

    since: datetime | None = None
    state: DiscussionState | None = None
    labels: frozenset[str] = field(default_factory=frozenset)

    @property
    def is_active(self) -> bool:
        """True when at least one filter would drop items."""
        return (
            self.since is not None
            or (self.state is not None and self.state is not DiscussionState.ALL)
            or bool(self.labels)
        )
