"""Carousel configuration.

Options are validated with pydantic when a carousel is set up, so a bad
increment or an unknown option fails before any navigation is possible.
"""

from collections.abc import Callable, Mapping
from enum import Enum
from os import getenv
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from tile_carousel.core.errors import ConfigurationError

# Hooks receive a CarouselSnapshot; typed loosely to avoid an import cycle
TransitionHook = Callable[[Any], None]


class IncrementMode(str, Enum):
    """How far a single next/prev request moves the carousel."""

    FRAME = "frame"
    TILE = "tile"


class CarouselConfig(BaseModel):
    """Validated carousel options.

    Attributes:
        increment: Tiles per frame; also the frame-mode step size.
        increment_mode: Advance by a whole frame or by a single tile.
        accessible: When False, tiles are never marked visible/hidden or
            focusable/unfocusable.
        focus_on_change: Move focus to the current tile after a transition,
            if the tile supports it.
        tile_width: Externally measured width of one tile, used only to
            derive the presentation offset.
        prev_text: Label for the previous-frame affordance.
        next_text: Label for the next-frame affordance.
        pre_transition: Called with a snapshot before markers are updated.
        post_transition: Called with a snapshot once the transition settles.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", arbitrary_types_allowed=True)

    increment: int = Field(1, ge=1)
    increment_mode: IncrementMode = IncrementMode.FRAME
    accessible: bool = True
    focus_on_change: bool = True
    tile_width: float = Field(0.0, ge=0)
    prev_text: str = "Previous"
    next_text: str = "Next"
    pre_transition: TransitionHook | None = None
    post_transition: TransitionHook | None = None

    @field_validator("increment", mode="before")
    @classmethod
    def _reject_bool_increment(cls, value: Any) -> Any:
        if isinstance(value, bool):
            raise ValueError("increment must be an integer, not a boolean")
        return value

    @classmethod
    def from_env(cls, **overrides: Any) -> "CarouselConfig":
        """Build a config from CAROUSEL_* environment variables.

        Keyword arguments take precedence over the environment.

        Raises:
            ConfigurationError: If any resulting value is invalid.
        """
        options: dict[str, Any] = {}
        increment = getenv("CAROUSEL_INCREMENT")
        if increment is not None:
            options["increment"] = increment
        mode = getenv("CAROUSEL_INCREMENT_MODE")
        if mode is not None:
            options["increment_mode"] = mode.lower()
        accessible = getenv("CAROUSEL_ACCESSIBLE")
        if accessible is not None:
            options["accessible"] = accessible
        tile_width = getenv("CAROUSEL_TILE_WIDTH")
        if tile_width is not None:
            options["tile_width"] = tile_width
        options.update(overrides)
        return load_config(options)


def load_config(options: "CarouselConfig | Mapping[str, Any] | None" = None) -> CarouselConfig:
    """Normalize caller options into a CarouselConfig.

    Args:
        options: An existing config, a mapping of option names to values,
            or None for all defaults.

    Returns:
        The validated configuration.

    Raises:
        ConfigurationError: If validation fails.
    """
    if isinstance(options, CarouselConfig):
        return options
    try:
        return CarouselConfig.model_validate(dict(options or {}))
    except ValidationError as ex:
        raise ConfigurationError.from_exception(ex) from ex
