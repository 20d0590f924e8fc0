"""Carousel navigation logic - platform agnostic.

Each ``*_target`` method answers "where would this request land?" and
returns None when the request is a no-op. ``commit`` then moves the state to
the target and recomputes every pointer.
"""

from tile_carousel.core.config import IncrementMode
from tile_carousel.core.state import CarouselState, T, ceil_div


class Navigator:
    """Computes clamped target indices and commits them to the state."""

    def _step(self, state: CarouselState[T]) -> int:
        if state.increment_mode is IncrementMode.TILE:
            return 1
        return state.increment

    def next_target(self, state: CarouselState[T]) -> int | None:
        """Index after a next request, clamped to the last window.

        At the upper boundary this returns the current index so the commit
        still runs and hooks fire.
        """
        if state.is_empty:
            return None
        return state.clamp(state.index + self._step(state))

    def prev_target(self, state: CarouselState[T]) -> int | None:
        """Index after a prev request, clamped to 0."""
        if state.is_empty:
            return None
        return state.clamp(state.index - self._step(state))

    def jump_target(self, state: CarouselState[T], frame: int) -> int | None:
        """Index of the 1-based ``frame``, or None for a no-op.

        Jumping past the last frame, or to the window already shown, does
        nothing. Numbers below 1 land on the first frame.
        """
        if state.is_empty or frame > state.frame_count:
            return None
        target = state.clamp(max(0, frame * state.increment - state.increment))
        if target == state.index:
            return None
        return target

    def reset_target(self, state: CarouselState[T]) -> int | None:
        """Always 0, even when already there; None only for an empty state."""
        if state.is_empty:
            return None
        return 0

    def commit(self, state: CarouselState[T], index: int) -> CarouselState[T]:
        """Move ``state`` to ``index`` and recompute all derived pointers.

        Pre-commit values are kept in the ``prev_*`` fields for hooks.
        """
        index = state.clamp(index)

        state.prev_index = state.index
        state.prev_tile = state.cur_tile
        state.prev_frame = state.cur_frame
        state.prev_frame_index = state.frame_index

        state.index = index
        state.frame_index = ceil_div(index, state.increment)
        state.offset = state.tile_width * index
        state.cur_frame = state.window(index)

        if (
            state.is_last_frame
            and state.tile_delta > 0
            and state.increment_mode is IncrementMode.FRAME
        ):
            # The last window slides back to stay full; point at the first
            # tile of the short final frame instead of the window start.
            state.cur_tile = state.tiles[index + state.tile_delta]
        else:
            state.cur_tile = state.tiles[index]
        return state
