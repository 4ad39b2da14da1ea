"""Discussion tools use case — the entry point for the business logic.

This depends only on the two ports (:class:`QueryExecutor` and
:class:`ResourceFetcher`) and the pure service modules.  The interface layer
injects concrete adapters at runtime.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from discussion_tools.domain.entities import (
    Category,
    Comment,
    DiscussionDetail,
    DiscussionState,
    DiscussionSummary,
    FilterSet,
    SortDirection,
    SortField,
)
from discussion_tools.domain.exceptions import DiscussionNotFoundError, InvalidParameterError
from discussion_tools.domain.ports.query_executor import QueryExecutor
from discussion_tools.domain.ports.resource_fetcher import ResourceFetcher
from discussion_tools.domain.value_objects import PaginationRequest, RepoRef, parse_iso_timestamp
from discussion_tools.services.aggregator import CancelProbe, list_all_filtered
from discussion_tools.services.discussion_query import (
    DEFAULT_PAGE_SIZE,
    DiscussionQuery,
    fetch_discussions,
)
from discussion_tools.services.discussion_filters import apply_filters
from discussion_tools.services.pagination import validate_pagination
from discussion_tools.services.queries import (
    GET_DISCUSSION_COMMENTS_QUERY,
    GET_DISCUSSION_QUERY,
    LIST_CATEGORIES_QUERY,
    CategoriesResponse,
    CommentsResponse,
    DiscussionResponse,
    decode,
    repository_or_raise,
)

logger = logging.getLogger(__name__)

CATEGORY_DEFAULT_PAGE_SIZE = 25


def _positive_or(value: int | None, default: int) -> int:
    return value if value is not None and value > 0 else default


@dataclass(frozen=True, slots=True)
class ListDiscussionsParams:
    """Typed arguments of ``list_discussions``."""

    owner: str
    repo: str
    category: str | None = None
    since: str | None = None
    sort: SortField | None = None
    direction: SortDirection | None = None
    first: int | None = None
    last: int | None = None
    after: str | None = None
    before: str | None = None
    answered: bool | None = None
    state: DiscussionState | None = None
    labels: tuple[str, ...] = field(default_factory=tuple)
    page: int | None = None
    per_page: int | None = None

    @property
    def pagination(self) -> PaginationRequest:
        return PaginationRequest(
            first=self.first, last=self.last, after=self.after, before=self.before
        )

    def offset_mode_arguments(self) -> list[str]:
        """Names of supplied arguments only the offset-paginated listing serves."""
        names: list[str] = []
        if self.state is not None and self.state is not DiscussionState.ALL:
            names.append("state")
        if self.labels:
            names.append("labels")
        if self.page is not None:
            names.append("page")
        if self.per_page is not None:
            names.append("perPage")
        return names

    def cursor_mode_arguments(self) -> list[str]:
        """Names of supplied arguments only the GraphQL listing serves."""
        candidates = {
            "first": self.first,
            "last": self.last,
            "after": self.after,
            "before": self.before,
            "category": self.category,
            "sort": self.sort,
            "direction": self.direction,
            "answered": self.answered,
        }
        return [name for name, value in candidates.items() if value is not None]


class DiscussionsUseCase:
    """Read-only discussion tools over the injected transports.

    Parameters
    ----------
    query_executor:
        Adapter that runs GraphQL queries.
    resource_fetcher:
        Adapter that lists discussions page by page over REST.
    """

    def __init__(
        self,
        query_executor: QueryExecutor,
        resource_fetcher: ResourceFetcher,
    ) -> None:
        self._executor = query_executor
        self._fetcher = resource_fetcher

    # ── list_discussions ────────────────────────────────────────────────

    async def list_discussions(
        self,
        params: ListDiscussionsParams,
        should_cancel: CancelProbe | None = None,
    ) -> list[DiscussionSummary]:
        """List discussions, choosing the cursor or offset listing from the arguments.

        All argument validation happens before the first network call.
        """
        repo = RepoRef(params.owner, params.repo)
        validate_pagination(params.pagination)
        since = parse_iso_timestamp(params.since) if params.since else None

        offset_args = params.offset_mode_arguments()
        cursor_args = params.cursor_mode_arguments()
        if offset_args and cursor_args:
            raise InvalidParameterError(
                f"{', '.join(repr(a) for a in offset_args)} cannot be combined with "
                f"{', '.join(repr(a) for a in cursor_args)}"
            )

        # A lone since filter needs every page; the cursor listing returns only one.
        if offset_args or (since is not None and not cursor_args):
            filters = FilterSet(
                since=since, state=params.state, labels=frozenset(params.labels)
            )
            logger.info("Listing discussions for %s (offset mode)", repo.full_name)
            return await list_all_filtered(
                self._fetcher,
                repo,
                filters,
                page=_positive_or(params.page, 1),
                per_page=_positive_or(params.per_page, DEFAULT_PAGE_SIZE),
                should_cancel=should_cancel,
            )

        logger.info("Listing discussions for %s (cursor mode)", repo.full_name)
        query = DiscussionQuery(
            pagination=params.pagination,
            category=params.category,
            sort=params.sort,
            direction=params.direction,
            answered=params.answered,
        )
        discussions = await fetch_discussions(self._executor, repo, query)
        return apply_filters(discussions, FilterSet(since=since))

    # ── get_discussion ──────────────────────────────────────────────────

    async def get_discussion(self, owner: str, repo: str, number: int) -> DiscussionDetail:
        """Return a single discussion by number."""
        ref = RepoRef(owner, repo)
        data = await self._executor.execute(
            GET_DISCUSSION_QUERY, {"owner": ref.owner, "repo": ref.repo, "number": number}
        )
        response = decode(DiscussionResponse, data)
        node = repository_or_raise(response.repository, ref).discussion
        if node is None:
            raise DiscussionNotFoundError(
                f"discussion #{number} not found in {ref.full_name}"
            )
        return node.to_entity()

    # ── get_discussion_comments ─────────────────────────────────────────

    async def get_discussion_comments(
        self, owner: str, repo: str, number: int
    ) -> list[Comment]:
        """Return the first 100 comments of a discussion."""
        ref = RepoRef(owner, repo)
        data = await self._executor.execute(
            GET_DISCUSSION_COMMENTS_QUERY,
            {"owner": ref.owner, "repo": ref.repo, "number": number},
        )
        response = decode(CommentsResponse, data)
        discussion = repository_or_raise(response.repository, ref).discussion
        if discussion is None:
            raise DiscussionNotFoundError(
                f"discussion #{number} not found in {ref.full_name}"
            )
        return [node.to_entity() for node in discussion.comments.nodes]

    # ── list_discussion_categories ──────────────────────────────────────

    async def list_discussion_categories(
        self,
        owner: str,
        repo: str,
        pagination: PaginationRequest = PaginationRequest(),
    ) -> list[Category]:
        """Return one page of the repository's discussion categories."""
        ref = RepoRef(owner, repo)
        validate_pagination(pagination)

        variables: dict[str, Any] = {"owner": ref.owner, "repo": ref.repo}
        variables.update(pagination.as_variables(CATEGORY_DEFAULT_PAGE_SIZE))
        data = await self._executor.execute(LIST_CATEGORIES_QUERY, variables)
        response = decode(CategoriesResponse, data)
        connection = repository_or_raise(response.repository, ref).discussion_categories
        return [node.to_entity() for node in connection.nodes]
