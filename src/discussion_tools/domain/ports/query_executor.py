"""Port: GraphQL query executor — defined by the domain, implemented by infrastructure."""

from __future__ import annotations

from typing import Any, Protocol


class QueryExecutor(Protocol):
    """Abstract contract for running a GraphQL query against the platform."""

    async def execute(self, query: str, variables: dict[str, Any]) -> dict[str, Any]:
        """Run *query* with *variables* and return the response ``data`` object.

        Raises :class:`~discussion_tools.domain.exceptions.QueryError` when the
        platform rejects the query or cannot be reached.
        """
        ...
