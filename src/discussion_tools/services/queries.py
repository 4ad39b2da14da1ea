"""GraphQL query documents and the response schemas they decode into.

Each response is validated once here; the rest of the code only sees the
domain entities produced by the ``to_*`` helpers.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from discussion_tools.domain.entities import Category, Comment, DiscussionDetail, DiscussionSummary
from discussion_tools.domain.exceptions import QueryError
from discussion_tools.domain.value_objects import RepoRef

# ── Query documents ─────────────────────────────────────────────────────────

LIST_CATEGORIES_QUERY = """\
query($owner: String!, $repo: String!, $first: Int, $last: Int, $after: String, $before: String) {
  repository(owner: $owner, name: $repo) {
    discussionCategories(first: $first, last: $last, after: $after, before: $before) {
      nodes { id name }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

LIST_DISCUSSIONS_QUERY = """\
query(
  $owner: String!, $repo: String!,
  $first: Int, $last: Int, $after: String, $before: String,
  $categoryId: ID, $orderBy: DiscussionOrder, $answered: Boolean
) {
  repository(owner: $owner, name: $repo) {
    discussions(
      first: $first, last: $last, after: $after, before: $before,
      categoryId: $categoryId, orderBy: $orderBy, answered: $answered
    ) {
      nodes {
        number
        title
        createdAt
        url
        category { id name }
      }
      pageInfo { hasNextPage endCursor }
    }
  }
}
"""

GET_DISCUSSION_QUERY = """\
query($owner: String!, $repo: String!, $number: Int!) {
  repository(owner: $owner, name: $repo) {
    discussion(number: $number) {
      number
      body
      closed
      createdAt
      url
    }
  }
}
"""

GET_DISCUSSION_COMMENTS_QUERY = """\
query($owner: String!, $repo: String!, $number: Int!) {
  repository(owner: $owner, name: $repo) {
    discussion(number: $number) {
      comments(first: 100) {
        nodes { body }
      }
    }
  }
}
"""

# ── Response schemas ────────────────────────────────────────────────────────


class _Schema(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore", frozen=True)


class PageInfoNode(_Schema):
    has_next_page: bool = Field(alias="hasNextPage")
    end_cursor: str | None = Field(default=None, alias="endCursor")


class CategoryNode(_Schema):
    id: str
    name: str

    def to_entity(self) -> Category:
        return Category(id=self.id, name=self.name)


class CategoryConnection(_Schema):
    nodes: list[CategoryNode] = Field(default_factory=list)
    page_info: PageInfoNode = Field(alias="pageInfo")


class DiscussionNode(_Schema):
    number: int
    title: str
    created_at: datetime = Field(alias="createdAt")
    url: str
    category: CategoryNode | None = None

    def to_entity(self) -> DiscussionSummary:
        return DiscussionSummary(
            number=self.number,
            title=self.title,
            created_at=self.created_at,
            url=self.url,
            category=self.category.to_entity() if self.category else None,
        )


class DiscussionConnection(_Schema):
    nodes: list[DiscussionNode] = Field(default_factory=list)
    page_info: PageInfoNode = Field(alias="pageInfo")


class DiscussionDetailNode(_Schema):
    number: int
    body: str
    closed: bool
    created_at: datetime = Field(alias="createdAt")
    url: str

    def to_entity(self) -> DiscussionDetail:
        return DiscussionDetail(
            number=self.number,
            body=self.body,
            state="closed" if self.closed else "open",
            created_at=self.created_at,
            url=self.url,
        )


class CommentNode(_Schema):
    body: str

    def to_entity(self) -> Comment:
        return Comment(body=self.body)


class CommentConnection(_Schema):
    nodes: list[CommentNode] = Field(default_factory=list)


class DiscussionWithComments(_Schema):
    comments: CommentConnection


class CategoriesRepository(_Schema):
    discussion_categories: CategoryConnection = Field(alias="discussionCategories")


class DiscussionsRepository(_Schema):
    discussions: DiscussionConnection


class DiscussionRepository(_Schema):
    discussion: DiscussionDetailNode | None = None


class CommentsRepository(_Schema):
    discussion: DiscussionWithComments | None = None


class CategoriesResponse(_Schema):
    repository: CategoriesRepository | None = None


class DiscussionsResponse(_Schema):
    repository: DiscussionsRepository | None = None


class DiscussionResponse(_Schema):
    repository: DiscussionRepository | None = None


class CommentsResponse(_Schema):
    repository: CommentsRepository | None = None


# ── Decoding helpers ────────────────────────────────────────────────────────

_R = TypeVar("_R", bound=_Schema)


def decode(schema: type[_R], data: dict[str, Any]) -> _R:
    """Validate a raw ``data`` object against *schema*."""
    try:
        return schema.model_validate(data)
    except ValidationError as exc:
        raise QueryError(f"unexpected response shape for {schema.__name__}: {exc}") from exc


def repository_or_raise(repository: _R | None, repo: RepoRef) -> _R:
    """Return the ``repository`` field, or fail when the platform returned null."""
    if repository is None:
        raise QueryError(f"Could not resolve to a Repository with the name '{repo.full_name}'.")
    return repository
