"""Discussion query composer — one GraphQL listing query per invocation."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any

from discussion_tools.domain.entities import DiscussionSummary, SortDirection, SortField
from discussion_tools.domain.exceptions import CategoryNotFoundError
from discussion_tools.domain.ports.query_executor import QueryExecutor
from discussion_tools.domain.value_objects import PaginationRequest, RepoRef
from discussion_tools.services.category_resolver import resolve_categories
from discussion_tools.services.queries import (
    LIST_DISCUSSIONS_QUERY,
    DiscussionsResponse,
    decode,
    repository_or_raise,
)

logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 30


@dataclass(frozen=True, slots=True)
class DiscussionQuery:
    """Everything the listing query can filter and order on natively."""

    pagination: PaginationRequest = PaginationRequest()
    category: str | None = None
    sort: SortField | None = None
    direction: SortDirection | None = None
    answered: bool | None = None


def build_variables(
    repo: RepoRef, query: DiscussionQuery, category_id: str | None = None
) -> dict[str, Any]:
    """Compose the variable set for :data:`LIST_DISCUSSIONS_QUERY`.

    Unset options are left out entirely so the platform applies its defaults.
    """
    variables: dict[str, Any] = {"owner": repo.owner, "repo": repo.repo}
    variables.update(query.pagination.as_variables(DEFAULT_PAGE_SIZE))

    if category_id:
        variables["categoryId"] = category_id

    if query.sort is not None or query.direction is not None:
        variables["orderBy"] = {
            "field": (query.sort or SortField.CREATED_AT).value,
            "direction": (query.direction or SortDirection.DESC).value,
        }

    if query.answered is not None:
        variables["answered"] = query.answered

    return variables


async def fetch_discussions(
    executor: QueryExecutor, repo: RepoRef, query: DiscussionQuery
) -> list[DiscussionSummary]:
    """Resolve the category (if any), run the listing query once, decode the nodes.

    The pagination shape must already have been validated.
    """
    category_id: str | None = None
    if query.category:
        categories = await resolve_categories(executor, repo)
        category_id = categories.get(query.category)
        if category_id is None:
            raise CategoryNotFoundError(query.category)

    variables = build_variables(repo, query, category_id)
    data = await executor.execute(LIST_DISCUSSIONS_QUERY, variables)
    response = decode(DiscussionsResponse, data)
    connection = repository_or_raise(response.repository, repo).discussions

    logger.debug("Listed %d discussions for %s", len(connection.nodes), repo.full_name)
    return [node.to_entity() for node in connection.nodes]
