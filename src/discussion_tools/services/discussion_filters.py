"""Post-fetch filter pipeline for discussion listings.

The listing transports filter on fewer fields than the tool exposes, so the
remaining predicates run here, after the data has been fetched.  Every
predicate is pure; the pipeline keeps the relative order of the survivors.
"""

from __future__ import annotations

from typing import Callable, Iterable

from discussion_tools.domain.entities import DiscussionState, DiscussionSummary, FilterSet

Predicate = Callable[[DiscussionSummary], bool]


def _build_predicates(filters: FilterSet) -> list[Predicate]:
    predicates: list[Predicate] = []

    if filters.since is not None:
        since = filters.since
        predicates.append(lambda d: d.created_at > since)

    if filters.state is not None and filters.state is not DiscussionState.ALL:
        wanted = filters.state.value
        predicates.append(lambda d: d.state == wanted)

    if filters.labels:
        required = filters.labels
        predicates.append(lambda d: required.issubset(d.labels))

    return predicates


def apply_filters(
    items: Iterable[DiscussionSummary], filters: FilterSet
) -> list[DiscussionSummary]:
    """Keep the items matching every active filter (since → state → labels)."""
    predicates = _build_predicates(filters)
    if not predicates:
        return list(items)
    return [item for item in items if all(p(item) for p in predicates)]
