"""Shared pytest fixtures for rowbind unit and integration tests."""
from __future__ import annotations

import sqlite3
from collections.abc import Iterator

import pytest

from tests.fixtures import load_ddl


@pytest.fixture()
def db() -> Iterator[sqlite3.Connection]:
    """In-memory SQLite database with an empty ``messages`` table."""
    conn = sqlite3.connect(":memory:")
    conn.executescript(load_ddl("sqlite"))
    yield conn
    conn.close()
