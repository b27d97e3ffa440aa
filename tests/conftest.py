"""Shared test fixtures for all test modules."""

import pytest

from rollupy.adapters.buffer.in_memory import InMemoryMetricsBuffer


@pytest.fixture
def buffer() -> InMemoryMetricsBuffer:
    """Fixture providing an empty merging buffer."""
    return InMemoryMetricsBuffer()
