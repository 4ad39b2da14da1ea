"""Tool routes — thin controllers that delegate to the use case."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Depends, Request

from discussion_tools.interface.dependencies import get_use_case
from discussion_tools.interface.schemas import (
    CategoryOut,
    CommentOut,
    DiscussionDetailOut,
    DiscussionNumberRequest,
    DiscussionSummaryOut,
    ErrorResponse,
    ListCategoriesRequest,
    ListDiscussionsRequest,
    ToolDescriptor,
)
from discussion_tools.services.discussions import DiscussionsUseCase

router = APIRouter(prefix="/tools")

_ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    404: {"model": ErrorResponse, "description": "Category or discussion not found"},
    422: {"model": ErrorResponse, "description": "Invalid or conflicting arguments"},
    499: {"model": ErrorResponse, "description": "Request cancelled by the client"},
    502: {"model": ErrorResponse, "description": "GitHub API error"},
}

TOOLS: list[ToolDescriptor] = [
    ToolDescriptor(
        name="list_discussions",
        title="List discussions",
        description="List discussions for a repository",
    ),
    ToolDescriptor(
        name="get_discussion",
        title="Get discussion",
        description="Get a specific discussion by number",
    ),
    ToolDescriptor(
        name="get_discussion_comments",
        title="Get discussion comments",
        description="Get comments from a discussion",
    ),
    ToolDescriptor(
        name="list_discussion_categories",
        title="List discussion categories",
        description="List discussion categories with their id and name, for a repository",
    ),
]


@router.get("", response_model=list[ToolDescriptor])
async def list_tools() -> list[ToolDescriptor]:
    """Describe the available tools."""
    return TOOLS


@router.post(
    "/list_discussions",
    response_model=list[DiscussionSummaryOut],
    responses=_ERROR_RESPONSES,
)
async def list_discussions(
    body: ListDiscussionsRequest,
    request: Request,
    use_case: DiscussionsUseCase = Depends(get_use_case),
) -> list[DiscussionSummaryOut]:
    """List discussions, optionally filtered by category, date, state or labels."""
    discussions = await use_case.list_discussions(
        body.to_params(), should_cancel=request.is_disconnected
    )
    return [DiscussionSummaryOut.from_entity(d) for d in discussions]


@router.post(
    "/get_discussion",
    response_model=DiscussionDetailOut,
    responses=_ERROR_RESPONSES,
)
async def get_discussion(
    body: DiscussionNumberRequest,
    use_case: DiscussionsUseCase = Depends(get_use_case),
) -> DiscussionDetailOut:
    """Get a specific discussion by number."""
    discussion = await use_case.get_discussion(body.owner, body.repo, body.discussion_number)
    return DiscussionDetailOut.from_entity(discussion)


@router.post(
    "/get_discussion_comments",
    response_model=list[CommentOut],
    responses=_ERROR_RESPONSES,
)
async def get_discussion_comments(
    body: DiscussionNumberRequest,
    use_case: DiscussionsUseCase = Depends(get_use_case),
) -> list[CommentOut]:
    """Get the first 100 comments of a discussion."""
    comments = await use_case.get_discussion_comments(
        body.owner, body.repo, body.discussion_number
    )
    return [CommentOut.from_entity(c) for c in comments]


@router.post(
    "/list_discussion_categories",
    response_model=list[CategoryOut],
    responses=_ERROR_RESPONSES,
)
async def list_discussion_categories(
    body: ListCategoriesRequest,
    use_case: DiscussionsUseCase = Depends(get_use_case),
) -> list[CategoryOut]:
    """List discussion categories for a repository."""
    categories = await use_case.list_discussion_categories(
        body.owner, body.repo, body.to_pagination()
    )
    return [CategoryOut.from_entity(c) for c in categories]
