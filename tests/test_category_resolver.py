"""
Unit tests for category name → id resolution across paginated responses.
"""

import math

import pytest

from discussion_tools.domain.exceptions import QueryError
from discussion_tools.domain.value_objects import RepoRef
from discussion_tools.services.category_resolver import resolve_categories
from fakes import FakeQueryExecutor, categories_page

REPO = RepoRef("owner", "repo")


def paged_categories(total, page_size=100):
    """Handler serving ``total`` categories, ``page_size`` at a time, keyed by cursor."""
    all_nodes = [(f"id-{i}", f"Category {i}") for i in range(total)]

    def handler(variables):
        start = int(variables.get("after") or 0)
        chunk = all_nodes[start:start + page_size]
        end = start + len(chunk)
        return categories_page(chunk, has_next=end < total, end_cursor=str(end))

    return handler


class TestResolveCategories:

    @pytest.mark.asyncio
    @pytest.mark.parametrize("total", [1, 100, 101, 250])
    async def test_round_trips_and_complete_mapping(self, total):
        executor = FakeQueryExecutor({"categories": paged_categories(total)})

        mapping = await resolve_categories(executor, REPO)

        assert len(executor.calls) == math.ceil(total / 100)
        assert len(mapping) == total
        assert mapping["Category 0"] == "id-0"
        assert mapping[f"Category {total - 1}"] == f"id-{total - 1}"

    @pytest.mark.asyncio
    async def test_first_request_has_no_cursor_and_follow_ups_do(self):
        executor = FakeQueryExecutor({"categories": paged_categories(150)})

        await resolve_categories(executor, REPO)

        first_vars, second_vars = executor.calls[0][1], executor.calls[1][1]
        assert "after" not in first_vars
        assert first_vars["first"] == 100
        assert second_vars["after"] == "100"

    @pytest.mark.asyncio
    async def test_error_on_later_page_discards_everything(self):
        pages = iter([
            categories_page([("1", "General")], has_next=True, end_cursor="c1"),
        ])

        def handler(variables):
            try:
                return next(pages)
            except StopIteration:
                raise QueryError("rate limited")

        executor = FakeQueryExecutor({"categories": handler})

        with pytest.raises(QueryError, match="rate limited"):
            await resolve_categories(executor, REPO)
        assert len(executor.calls) == 2

    @pytest.mark.asyncio
    async def test_missing_repository_is_a_query_error(self):
        executor = FakeQueryExecutor({"categories": lambda v: {"repository": None}})

        with pytest.raises(QueryError, match="owner/repo"):
            await resolve_categories(executor, REPO)

    @pytest.mark.asyncio
    async def test_duplicate_names_keep_the_last_listed(self):
        executor = FakeQueryExecutor({
            "categories": lambda v: categories_page([("1", "Ideas"), ("2", "Ideas")]),
        })

        assert await resolve_categories(executor, REPO) == {"Ideas": "2"}

    @pytest.mark.asyncio
    async def test_more_pages_without_a_cursor_is_an_error(self):
        executor = FakeQueryExecutor({
            "categories": lambda v: categories_page([("1", "General")], has_next=True, end_cursor=None),
        })

        with pytest.raises(QueryError, match="without advancing its cursor"):
            await resolve_categories(executor, REPO)
        assert len(executor.calls) == 1

    @pytest.mark.asyncio
    async def test_repeated_cursor_is_an_error(self):
        executor = FakeQueryExecutor({
            "categories": lambda v: categories_page([("1", "General")], has_next=True, end_cursor="same"),
        })

        with pytest.raises(QueryError, match="endCursor='same'"):
            await resolve_categories(executor, REPO)
        assert [v.get("after") for _, v in executor.calls] == [None, "same"]
