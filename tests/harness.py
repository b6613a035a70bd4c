"""Test harness for unit and integration tests.

Settings are loaded from environment variables (configure via .env or export).
"""

import pytest

from rolodex.util.di import Component
from tests.di import build_test_container


def create_env_fixture(unmock: set[Component] | None = None):
    """Factory for creating test environment fixtures.

    Creates a pytest fixture that builds a test container with the specified
    unmocking, yields it and closes it afterwards. Every test gets its own
    container, so APP-scoped state (the model, in-memory storage) is fresh.

    Args:
        unmock: Components to use real implementations for

    Returns:
        Pytest fixture function that yields Container

    Usage:
        # Unit tests - in-memory storage
        unit_env = create_env_fixture()

        def test_add(unit_env):
            logic = unit_env.get(LogicManager)
            ...
    """

    @pytest.fixture
    def _test_environment():
        container = build_test_container(unmock=unmock or set())
        yield container
        container.close()

    return _test_environment
