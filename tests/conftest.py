"""Shared test fixtures for kirigami."""

import pytest

from kirigami.layout.geometry import Region


@pytest.fixture
def square():
    """100x100 region at the origin."""
    return Region(0, 0, 100, 100)


@pytest.fixture
def offset_rect():
    """200x50 region away from the origin."""
    return Region(10, 20, 200, 50)


@pytest.fixture
def empty_region():
    """Zero-size region."""
    return Region(5, 5, 0, 0)
