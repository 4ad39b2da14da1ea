"""Full-pagination aggregator for filters the REST listing cannot apply.

The offset-paginated listing only understands ``page`` / ``per_page``, so
when a filter is active every page is downloaded, filtered here, and the
caller's page is cut out of the filtered result.
"""

from __future__ import annotations

import logging
from typing import Awaitable, Callable

from discussion_tools.domain.entities import DiscussionSummary, FilterSet
from discussion_tools.domain.exceptions import DiscussionToolsError, OperationCancelledError
from discussion_tools.domain.ports.resource_fetcher import ResourceFetcher
from discussion_tools.domain.value_objects import RepoRef
from discussion_tools.services.discussion_filters import apply_filters
from discussion_tools.services.pagination import paginate_offset

logger = logging.getLogger(__name__)

# Maximum page size accepted by the REST listing.
FETCH_PAGE_SIZE = 100

CancelProbe = Callable[[], Awaitable[bool]]


async def _fetch_all(
    fetcher: ResourceFetcher, repo: RepoRef, should_cancel: CancelProbe | None
) -> list[DiscussionSummary]:
    collected: list[DiscussionSummary] = []
    page = 1

    while True:
        try:
            batch = await fetcher.fetch_page(repo, page, FETCH_PAGE_SIZE)
        except DiscussionToolsError:
            logger.warning("failed to list discussions on page %d for %s", page, repo.full_name)
            raise

        if not batch:
            break

        collected.extend(batch)
        logger.debug("Fetched page %d (%d discussions) for %s", page, len(batch), repo.full_name)
        page += 1

        if should_cancel is not None and await should_cancel():
            raise OperationCancelledError(
                f"listing discussions for {repo.full_name} was cancelled after {page - 1} page(s)"
            )

    return collected


async def list_all_filtered(
    fetcher: ResourceFetcher,
    repo: RepoRef,
    filters: FilterSet,
    page: int,
    per_page: int,
    should_cancel: CancelProbe | None = None,
) -> list[DiscussionSummary]:
    """Return the requested page of discussions matching *filters*.

    Without an active filter this is a single passthrough fetch of
    ``page`` / ``per_page``.
    """
    if not filters.is_active:
        return await fetcher.fetch_page(repo, page, per_page)

    everything = await _fetch_all(fetcher, repo, should_cancel)
    filtered = apply_filters(everything, filters)
    logger.info(
        "%d of %d discussions in %s match the filters",
        len(filtered),
        len(everything),
        repo.full_name,
    )
    return paginate_offset(filtered, page, per_page)
