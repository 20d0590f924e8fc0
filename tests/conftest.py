"""Shared pytest fixtures for tile-carousel tests."""

from collections.abc import Callable, Generator

import pytest
import structlog

from tile_carousel.adapters.memory_tiles import MemoryTileContainer
from tile_carousel.core.accessibility import AccessibilityToggler
from tile_carousel.core.navigator import Navigator
from tile_carousel.core.normalizer import Normalizer


@pytest.fixture(autouse=True)
def reset_structlog() -> Generator[None, None, None]:
    """Restore structlog defaults so no test inherits another's config."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


@pytest.fixture
def make_container() -> Callable[..., MemoryTileContainer]:
    """Provide a factory for mounted in-memory containers.

    Example:
        def test_something(make_container):
            container = make_container(10)            # tiles 0..9
            container = make_container(4, fillers=2)  # 4 real + 2 filler
    """

    def factory(count: int, fillers: int = 0) -> MemoryTileContainer:
        return MemoryTileContainer.from_contents(range(count), fillers=fillers)

    return factory


@pytest.fixture
def normalizer() -> Normalizer:
    """Provide a normalizer with marking enabled."""
    return Normalizer(AccessibilityToggler(enabled=True))


@pytest.fixture
def navigator() -> Navigator:
    return Navigator()
