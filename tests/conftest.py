"""
Pytest configuration: shared discussion and category fixtures.
"""

import pytest

from discussion_tools.domain.entities import Category
from fakes import make_discussion, utc


@pytest.fixture
def three_discussions():
    """Discussions 1-3 created on the first of January, February and March 2023."""
    return [
        make_discussion(1, utc(2023, 1, 1), state="open", labels=("feature", "bug")),
        make_discussion(2, utc(2023, 2, 1), state="closed", labels=("feature",)),
        make_discussion(3, utc(2023, 3, 1), state="open", labels=("bug", "documentation")),
    ]


@pytest.fixture
def category_one():
    return Category(id="123", name="CategoryOne")


@pytest.fixture
def category_two():
    return Category(id="456", name="CategoryTwo")
