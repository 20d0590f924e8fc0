"""Initial frame partition and state construction."""

from collections.abc import Sequence

from tile_carousel.core.accessibility import AccessibilityToggler
from tile_carousel.core.config import CarouselConfig
from tile_carousel.core.logging import get_logger
from tile_carousel.core.state import CarouselState, Frame
from tile_carousel.ports.tiles import Tile

logger = get_logger(__name__)


def partition(tile_count: int, increment: int) -> tuple[Frame, ...]:
    """Split ``tile_count`` tiles into consecutive frames of ``increment``.

    The last frame holds the remainder and may be shorter. Zero tiles yield
    zero frames.

    Raises:
        ValueError: If increment is not positive.
    """
    if increment < 1:
        raise ValueError(f"increment must be positive, got {increment}")
    return tuple(
        Frame(start=start, length=min(increment, tile_count - start))
        for start in range(0, tile_count, increment)
    )


class Normalizer:
    """Builds a fresh ``CarouselState`` from a tile sequence."""

    def __init__(self, toggler: AccessibilityToggler) -> None:
        self._toggler = toggler

    def normalize(
        self,
        tiles: Sequence[Tile],
        config: CarouselConfig,
        previous: CarouselState[Tile] | None = None,
    ) -> CarouselState[Tile]:
        """Partition ``tiles`` and return a state positioned on frame 0.

        Args:
            tiles: Tiles in display order; copied into an owned tuple.
            config: Validated carousel options.
            previous: State being replaced by a rebuild. Its original lengths
                and first-run flag carry over.

        Returns:
            The populated state, with markers already applied.
        """
        owned = tuple(tiles)
        frames = partition(len(owned), config.increment)

        state: CarouselState[Tile] = CarouselState(
            tiles=owned,
            increment=config.increment,
            increment_mode=config.increment_mode,
            frames=frames,
            cur_tile=owned[0] if owned else None,
            orig_tile_length=previous.orig_tile_length if previous else len(owned),
            orig_frame_length=previous.orig_frame_length if previous else len(frames),
            tile_width=config.tile_width,
            accessibility_initialized=(
                previous.accessibility_initialized if previous else False
            ),
        )
        state.cur_frame = state.window(0)

        self._toggler.initialize(state)

        logger.info(
            "carousel_normalized",
            tile_count=state.cur_tile_length,
            frame_count=state.frame_count,
            increment=state.increment,
            increment_mode=state.increment_mode.value,
            tile_delta=state.tile_delta,
        )
        return state
