"""Domain exception hierarchy.

Each exception maps to a specific HTTP status code at the interface layer.
Inner layers raise these; the outermost error-handler translates them.
"""

from __future__ import annotations


class DiscussionToolsError(Exception):
    """Base exception for the entire application."""


# ── Input validation ────────────────────────────────────────────────────────


class InvalidParameterError(DiscussionToolsError):
    """A tool argument is missing, malformed, or conflicts with another one."""


# ── Lookup errors ───────────────────────────────────────────────────────────


class CategoryNotFoundError(DiscussionToolsError):
    """The requested category name does not exist in the repository."""

    def __init__(self, name: str) -> None:
        super().__init__(f"category '{name}' not found")
        self.name = name


class DiscussionNotFoundError(DiscussionToolsError):
    """No discussion with the requested number exists."""


# ── Transport errors ────────────────────────────────────────────────────────


class QueryError(DiscussionToolsError):
    """The GraphQL endpoint rejected the query or could not be reached."""


class ResourceFetchError(DiscussionToolsError):
    """A REST resource fetch returned a non-200 response."""

    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"unexpected status code: {status_code}, body: {body}")
        self.status_code = status_code
        self.body = body


# ── Control flow ────────────────────────────────────────────────────────────


class OperationCancelledError(DiscussionToolsError):
    """The caller went away before the operation finished."""
