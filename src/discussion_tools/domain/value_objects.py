"""Value objects — self-validating domain primitives."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, timezone

from discussion_tools.domain.exceptions import InvalidParameterError


@dataclass(frozen=True, slots=True)
class RepoRef:
    """An ``owner/repo`` pair naming a repository."""

    owner: str
    repo: str

    def __post_init__(self) -> None:
        if not self.owner:
            raise InvalidParameterError("missing required parameter: owner")
        if not self.repo:
            raise InvalidParameterError("missing required parameter: repo")

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


@dataclass(frozen=True, slots=True)
class PaginationRequest:
    """Cursor pagination shape: a count (``first``/``last``) and a cursor."""

    first: int | None = None
    last: int | None = None
    after: str | None = None
    before: str | None = None

    def as_variables(self, default_first: int) -> dict[str, int | str]:
        """Return GraphQL variables, defaulting to ``first`` when no count is given."""
        variables: dict[str, int | str] = {}
        if self.last is not None:
            variables["last"] = self.last
        else:
            variables["first"] = self.first if self.first is not None else default_first
        if self.after is not None:
            variables["after"] = self.after
        if self.before is not None:
            variables["before"] = self.before
        return variables


def parse_iso_timestamp(value: str) -> datetime:
    """Parse an ISO-8601 date-time or plain date into an aware UTC datetime.

    ``2023-01-15`` is read as midnight UTC; date-times without an offset are
    assumed to be UTC.
    """
    text = value.strip()
    try:
        if len(text) == 10:
            parsed_date = date.fromisoformat(text)
            return datetime(
                parsed_date.year, parsed_date.month, parsed_date.day, tzinfo=timezone.utc
            )
        parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    except ValueError as exc:
        raise InvalidParameterError(
            f"invalid ISO 8601 timestamp: '{value}' "
            "(supported formats: YYYY-MM-DDTHH:MM:SSZ or YYYY-MM-DD)"
        ) from exc

    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)
