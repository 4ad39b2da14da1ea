"""Pydantic request / response DTOs for the tool boundary."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_validator

from discussion_tools.domain.entities import (
    Category,
    Comment,
    DiscussionDetail,
    DiscussionState,
    DiscussionSummary,
    SortDirection,
    SortField,
)
from discussion_tools.domain.value_objects import PaginationRequest
from discussion_tools.services.discussions import ListDiscussionsParams


class _Request(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    owner: str = Field(min_length=1, description="Repository owner")
    repo: str = Field(min_length=1, description="Repository name")

    @field_validator("owner", "repo")
    @classmethod
    def _strip(cls, v: str) -> str:
        stripped = v.strip()
        if not stripped:
            msg = "must not be blank."
            raise ValueError(msg)
        return stripped


class _CursorPagination(BaseModel):
    first: int | None = Field(default=None, ge=1, le=100)
    last: int | None = Field(default=None, ge=1, le=100)
    after: str | None = None
    before: str | None = None

    def to_pagination(self) -> PaginationRequest:
        return PaginationRequest(
            first=self.first, last=self.last, after=self.after, before=self.before
        )


class ListDiscussionsRequest(_Request, _CursorPagination):
    """Request body for ``POST /tools/list_discussions``."""

    category: str | None = Field(default=None, description="Category name to filter by")
    since: str | None = Field(default=None, description="ISO 8601 creation-date lower bound")
    sort: SortField | None = None
    direction: SortDirection | None = None
    answered: bool | None = None
    state: DiscussionState | None = None
    labels: list[str] = Field(default_factory=list)
    page: int | None = Field(default=None, ge=1)
    per_page: int | None = Field(default=None, ge=1, le=100, alias="perPage")

    def to_params(self) -> ListDiscussionsParams:
        return ListDiscussionsParams(
            owner=self.owner,
            repo=self.repo,
            category=self.category,
            since=self.since,
            sort=self.sort,
            direction=self.direction,
            first=self.first,
            last=self.last,
            after=self.after,
            before=self.before,
            answered=self.answered,
            state=self.state,
            labels=tuple(self.labels),
            page=self.page,
            per_page=self.per_page,
        )


class DiscussionNumberRequest(_Request):
    """Request body for the single-discussion tools."""

    discussion_number: int = Field(ge=1, alias="discussionNumber")


class ListCategoriesRequest(_Request, _CursorPagination):
    """Request body for ``POST /tools/list_discussion_categories``."""


# ── Responses ───────────────────────────────────────────────────────────────


class _Response(BaseModel):
    model_config = ConfigDict(populate_by_name=True)


class CategoryOut(_Response):
    id: str
    name: str

    @classmethod
    def from_entity(cls, category: Category) -> CategoryOut:
        return cls(id=category.id, name=category.name)


class DiscussionSummaryOut(_Response):
    number: int
    title: str
    created_at: datetime = Field(serialization_alias="createdAt")
    url: str
    category: CategoryOut | None = None
    state: str | None = None
    labels: list[str] = Field(default_factory=list)

    @classmethod
    def from_entity(cls, d: DiscussionSummary) -> DiscussionSummaryOut:
        return cls(
            number=d.number,
            title=d.title,
            created_at=d.created_at,
            url=d.url,
            category=CategoryOut.from_entity(d.category) if d.category else None,
            state=d.state,
            labels=list(d.labels),
        )


class DiscussionDetailOut(_Response):
    number: int
    body: str
    state: str
    created_at: datetime = Field(serialization_alias="createdAt")
    url: str

    @classmethod
    def from_entity(cls, d: DiscussionDetail) -> DiscussionDetailOut:
        return cls(
            number=d.number, body=d.body, state=d.state, created_at=d.created_at, url=d.url
        )


class CommentOut(_Response):
    body: str

    @classmethod
    def from_entity(cls, comment: Comment) -> CommentOut:
        return cls(body=comment.body)


class ToolDescriptor(BaseModel):
    """One entry of the ``GET /tools`` catalogue."""

    name: str
    title: str
    description: str
    read_only: bool = Field(default=True, serialization_alias="readOnly")


class ErrorResponse(BaseModel):
    """Standard error envelope returned on all failure paths."""

    status: str = "error"
    message: str
