"""Visibility and focusability marking.

Exactly one frame's tiles are visible and focusable once a transition
settles. Every commit hides all tiles first and then shows the current
window, so no stale tile survives a change in window size.
"""

from collections.abc import Iterable
from enum import Enum

from tile_carousel.core.logging import get_logger
from tile_carousel.core.state import CarouselState
from tile_carousel.ports.tiles import Tile

logger = get_logger(__name__)


class ToggleOperation(str, Enum):
    HIDE = "hide"
    SHOW = "show"


class AccessibilityToggler:
    """Sets tile markers to match the active frame.

    Args:
        enabled: When False every method is a no-op, leaving markers to the
            host.
    """

    def __init__(self, enabled: bool = True) -> None:
        self.enabled = enabled

    def toggle(self, items: Iterable[Tile], operation: ToggleOperation) -> None:
        """Mark ``items`` hidden+unfocusable or visible+focusable.

        Filler tiles are skipped.
        """
        if not self.enabled:
            return
        show = operation is ToggleOperation.SHOW
        for item in items:
            if item.is_filler:
                continue
            item.set_visible(show)
            item.set_focusable(show)

    def initialize(self, state: CarouselState[Tile]) -> None:
        """Run the first-run pass and show the initial frame.

        The first-run pass makes the raw tile list unreachable by keyboard
        before any frame is shown. It happens once per carousel; later calls
        behave like ``commit``.
        """
        if self.enabled and not state.accessibility_initialized:
            for item in state.tiles:
                if not item.is_filler:
                    item.set_focusable(False)
            logger.debug("accessibility_initialized", tile_count=state.cur_tile_length)
        state.accessibility_initialized = True
        self.commit(state)

    def commit(self, state: CarouselState[Tile]) -> None:
        """Hide every tile, then show the tiles of the current window."""
        self.toggle(state.tiles, ToggleOperation.HIDE)
        self.toggle(state.cur_frame, ToggleOperation.SHOW)
