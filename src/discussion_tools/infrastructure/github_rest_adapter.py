"""GitHub REST API adapter — implements the ResourceFetcher port."""

from __future__ import annotations

import logging
from datetime import datetime

import httpx
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from discussion_tools.domain.entities import Category, DiscussionSummary
from discussion_tools.domain.exceptions import QueryError, ResourceFetchError
from discussion_tools.domain.value_objects import RepoRef
from discussion_tools.infrastructure.github_headers import api_headers

logger = logging.getLogger(__name__)


class _RestLabel(BaseModel):
    model_config = ConfigDict(extra="ignore")

    name: str


class _RestCategory(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: int | str
    node_id: str | None = None
    name: str


class _RestDiscussion(BaseModel):
    """One element of ``GET /repos/{owner}/{repo}/discussions``."""

    model_config = ConfigDict(extra="ignore")

    number: int
    title: str = ""
    created_at: datetime
    html_url: str
    state: str | None = None
    labels: list[_RestLabel] = Field(default_factory=list)
    category: _RestCategory | None = None

    def to_entity(self) -> DiscussionSummary:
        category = None
        if self.category is not None:
            category = Category(
                id=self.category.node_id or str(self.category.id),
                name=self.category.name,
            )
        return DiscussionSummary(
            number=self.number,
            title=self.title,
            created_at=self.created_at,
            url=self.html_url,
            category=category,
            state=self.state,
            labels=tuple(label.name for label in self.labels),
        )


class GitHubRestAdapter:
    """Concrete ResourceFetcher backed by the GitHub v3 REST API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        base_url: str = "https://api.github.com",
    ) -> None:
        self._client = client
        self._base_url = base_url.rstrip("/")
        self._api_headers = api_headers(token)

    async def fetch_page(
        self, repo: RepoRef, page: int, per_page: int
    ) -> list[DiscussionSummary]:
        """GET /repos/{owner}/{repo}/discussions?page=&per_page= → [DiscussionSummary]."""
        url = f"{self._base_url}/repos/{repo.owner}/{repo.repo}/discussions"
        try:
            resp = await self._client.get(
                url,
                headers=self._api_headers,
                params={"page": str(page), "per_page": str(per_page)},
            )
        except httpx.HTTPError as exc:
            raise QueryError(f"Network error fetching {url}: {exc}") from exc

        if resp.status_code != 200:
            raise ResourceFetchError(resp.status_code, resp.text)

        try:
            raw = resp.json()
            return [_RestDiscussion.model_validate(item).to_entity() for item in raw]
        except (ValueError, TypeError, ValidationError) as exc:
            raise QueryError(f"failed to decode response body from {url}: {exc}") from exc
