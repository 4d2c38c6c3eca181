"""Shared fixtures: every test runs against its own fresh QueryState."""

from collections.abc import Iterator

import pytest

from querykit.state import QueryState, use_state


@pytest.fixture(autouse=True)
def query_state() -> Iterator[QueryState]:
    """Activate a fresh state so options and cache never leak between tests."""
    with use_state(QueryState()) as state:
        yield state
