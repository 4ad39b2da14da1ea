"""GitHub GraphQL adapter — implements the QueryExecutor port."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from discussion_tools.domain.exceptions import QueryError
from discussion_tools.infrastructure.github_headers import api_headers

logger = logging.getLogger(__name__)


class GitHubGraphQLAdapter:
    """Concrete ``QueryExecutor`` backed by the GitHub v4 GraphQL API."""

    def __init__(
        self,
        client: httpx.AsyncClient,
        token: str | None = None,
        endpoint: str = "https://api.github.com/graphql",
    ) -> None:
        self._client = client
        self._endpoint = endpoint
        self._headers = api_headers(token)

    async def execute(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """POST the query and return ``data``, translating failures to QueryError."""
        try:
            resp = await self._client.post(
                self._endpoint,
                headers=self._headers,
                json={"query": query, "variables": variables},
            )
        except httpx.HTTPError as exc:
            raise QueryError(f"Network error calling {self._endpoint}: {exc}") from exc

        if resp.status_code != 200:
            raise QueryError(
                f"GitHub GraphQL API returned HTTP {resp.status_code}: {resp.text}"
            )

        try:
            payload = resp.json()
        except ValueError as exc:
            raise QueryError(f"GitHub GraphQL API returned invalid JSON: {exc}") from exc

        errors = payload.get("errors")
        if errors:
            messages = "; ".join(str(err.get("message", err)) for err in errors)
            logger.debug("GraphQL errors for variables %s: %s", variables, messages)
            raise QueryError(messages)

        data = payload.get("data")
        if not isinstance(data, dict):
            raise QueryError("GitHub GraphQL API returned no data.")
        return data
