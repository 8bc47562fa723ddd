"""Shared fixtures."""

import pytest

from app.repositories.db import get_write_connection


@pytest.fixture
def conn():
    """Fresh in-memory DuckDB with all tables."""
    c = get_write_connection(":memory:")
    yield c
    c.close()
