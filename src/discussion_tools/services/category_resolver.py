"""Category resolution — map category names to the platform's opaque ids."""

from __future__ import annotations

import logging
from typing import Any

from discussion_tools.domain.exceptions import QueryError
from discussion_tools.domain.ports.query_executor import QueryExecutor
from discussion_tools.domain.value_objects import RepoRef
from discussion_tools.services.queries import (
    LIST_CATEGORIES_QUERY,
    CategoriesResponse,
    decode,
    repository_or_raise,
)

logger = logging.getLogger(__name__)

CATEGORY_PAGE_SIZE = 100


async def resolve_categories(executor: QueryExecutor, repo: RepoRef) -> dict[str, str]:
    """Return the complete ``name → id`` mapping for *repo*'s categories.

    Pages through the category listing until the platform reports no further
    pages.  A transport error on any page propagates; nothing partial is
    returned.  If two categories share a name, the one listed last wins.
    """
    mapping: dict[str, str] = {}
    cursor: str | None = None
    round_trips = 0

    while True:
        variables: dict[str, Any] = {
            "owner": repo.owner,
            "repo": repo.repo,
            "first": CATEGORY_PAGE_SIZE,
        }
        if cursor is not None:
            variables["after"] = cursor

        data = await executor.execute(LIST_CATEGORIES_QUERY, variables)
        round_trips += 1
        response = decode(CategoriesResponse, data)
        connection = repository_or_raise(response.repository, repo).discussion_categories

        for node in connection.nodes:
            mapping[node.name] = node.id

        if not connection.page_info.has_next_page:
            break
        next_cursor = connection.page_info.end_cursor
        if next_cursor is None or next_cursor == cursor:
            raise QueryError(
                f"category listing for {repo.full_name} reported more pages "
                f"without advancing its cursor (endCursor={next_cursor!r})"
            )
        cursor = next_cursor

    logger.debug(
        "Resolved %d categories for %s in %d round trip(s)",
        len(mapping),
        repo.full_name,
        round_trips,
    )
    return mapping
