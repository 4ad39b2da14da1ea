"""Port: discussion page fetcher — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Protocol

from discussion_tools.domain.entities import DiscussionSummary
from discussion_tools.domain.value_objects import RepoRef


class ResourceFetcher(Protocol):
    """Abstract contract for offset-paginated discussion listing."""

    async def fetch_page(
        self, repo: RepoRef, page: int, per_page: int
    ) -> list[DiscussionSummary]:
        """Return one page of discussions; an empty list means no more pages."""
        ...
