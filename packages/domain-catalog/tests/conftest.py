"""Shared fixtures for domain-catalog tests."""

from __future__ import annotations

import pytest

from codeflix.domain.catalog.category import Category


@pytest.fixture()
def category() -> Category:
    """Create an active Category with a description."""
    return Category({"name": "Movie", "description": "first description"})
