import pytest

from prismatic.patterns import registry


@pytest.fixture
def restore_registry():
    """Put the global pattern registry back the way it was after the test."""
    saved = dict(registry.COLOR_PATTERNS)
    yield registry.COLOR_PATTERNS
    registry.COLOR_PATTERNS.clear()
    registry.COLOR_PATTERNS.update(saved)
