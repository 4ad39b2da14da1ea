"""FastAPI dependency injection wiring."""

from __future__ import annotations

import httpx

from discussion_tools.infrastructure.config import get_settings
from discussion_tools.infrastructure.github_graphql_adapter import GitHubGraphQLAdapter
from discussion_tools.infrastructure.github_rest_adapter import GitHubRestAdapter
from discussion_tools.services.discussions import DiscussionsUseCase

_http_client: httpx.AsyncClient | None = None


async def startup() -> None:
    """Initialise shared resources — called from the lifespan context manager."""
    global _http_client  # noqa: PLW0603

    settings = get_settings()
    _http_client = httpx.AsyncClient(
        timeout=httpx.Timeout(settings.request_timeout_seconds)
    )


async def shutdown() -> None:
    """Release shared resources."""
    global _http_client  # noqa: PLW0603

    if _http_client:
        await _http_client.aclose()
        _http_client = None


def get_use_case() -> DiscussionsUseCase:
    """Build a use case with freshly injected adapters over the shared client."""
    settings = get_settings()

    assert _http_client is not None, "startup() was not called"

    token = settings.github_token.get_secret_value() if settings.github_token else None
    return DiscussionsUseCase(
        query_executor=GitHubGraphQLAdapter(
            client=_http_client, token=token, endpoint=settings.github_graphql_url
        ),
        resource_fetcher=GitHubRestAdapter(
            client=_http_client, token=token, base_url=settings.github_api_url
        ),
    )
