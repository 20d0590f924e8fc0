"""Core carousel logic.

This module contains the platform-agnostic frame/tile state machine along
with the logging, configuration and error handling it relies on.
"""

from tile_carousel.core.accessibility import AccessibilityToggler, ToggleOperation
from tile_carousel.core.carousel import Carousel
from tile_carousel.core.config import (
    CarouselConfig,
    IncrementMode,
    TransitionHook,
    load_config,
)
from tile_carousel.core.errors import (
    CarouselError,
    ConfigurationError,
    ErrorCategory,
    StructuralPreconditionError,
)
from tile_carousel.core.logging import (
    bind_contextvars,
    clear_contextvars,
    configure_logging,
    get_logger,
    unbind_contextvars,
)
from tile_carousel.core.navigation import (
    Affordances,
    NavigationAction,
    NavigationController,
)
from tile_carousel.core.navigator import Navigator
from tile_carousel.core.normalizer import Normalizer, partition
from tile_carousel.core.state import CarouselSnapshot, CarouselState, Frame

__all__ = [
    # Carousel
    "Carousel",
    "CarouselSnapshot",
    "CarouselState",
    "Frame",
    "Navigator",
    "Normalizer",
    "partition",
    # Markers and affordances
    "AccessibilityToggler",
    "Affordances",
    "NavigationAction",
    "NavigationController",
    "ToggleOperation",
    # Configuration
    "CarouselConfig",
    "IncrementMode",
    "TransitionHook",
    "load_config",
    # Error handling
    "CarouselError",
    "ConfigurationError",
    "ErrorCategory",
    "StructuralPreconditionError",
    # Logging
    "bind_contextvars",
    "clear_contextvars",
    "configure_logging",
    "get_logger",
    "unbind_contextvars",
]
