"""Prev/next affordance state derived from the carousel state."""

from dataclasses import dataclass
from enum import Enum

from tile_carousel.core.state import CarouselState


class NavigationAction(str, Enum):
    """Requests a host control can dispatch to a carousel."""

    NEXT = "next"
    PREV = "prev"


@dataclass(frozen=True)
class Affordances:
    """Enabled/disabled state and labels for the prev/next controls."""

    prev_disabled: bool
    next_disabled: bool
    prev_text: str = "Previous"
    next_text: str = "Next"


class NavigationController:
    """Recomputes affordances after every commit."""

    def __init__(self, prev_text: str = "Previous", next_text: str = "Next") -> None:
        self.prev_text = prev_text
        self.next_text = next_text
        self.affordances = Affordances(
            prev_disabled=True,
            next_disabled=True,
            prev_text=prev_text,
            next_text=next_text,
        )

    def update(self, state: CarouselState) -> Affordances:
        # A single frame (or no tiles at all) disables both controls
        single_frame = state.cur_tile_length <= state.increment
        self.affordances = Affordances(
            prev_disabled=single_frame or state.index == 0,
            next_disabled=single_frame
            or state.index + state.increment >= state.cur_tile_length,
            prev_text=self.prev_text,
            next_text=self.next_text,
        )
        return self.affordances
