"""Carousel root handle.

A ``Carousel`` owns one state and runs every navigation request as a single
synchronous transition:

    index -> pointers -> pre-hook -> markers -> affordances -> focus -> post-hook

Requests made while a transition is running (typically from inside a hook)
are queued and run in order once the current transition has settled.

Example:
    container = MemoryTileContainer.from_contents(range(10))
    carousel = Carousel(container, {"increment": 3})
    carousel.next().next()
    carousel.state.index  # 6
"""

from collections import deque
from collections.abc import Callable, Mapping
from itertools import count
from typing import Any

from tile_carousel.core.accessibility import AccessibilityToggler
from tile_carousel.core.config import CarouselConfig, load_config
from tile_carousel.core.errors import StructuralPreconditionError
from tile_carousel.core.logging import get_logger
from tile_carousel.core.navigation import (
    Affordances,
    NavigationAction,
    NavigationController,
)
from tile_carousel.core.navigator import Navigator
from tile_carousel.core.normalizer import Normalizer
from tile_carousel.core.state import CarouselSnapshot, CarouselState, Frame
from tile_carousel.ports.tiles import SupportsFocus, Tile, TileContainer

_carousel_ids = count(1)


class Carousel:
    """Frame/tile pager over a mounted tile container.

    Args:
        container: Mount point whose ``children`` are the tiles.
        config: A ``CarouselConfig``, a mapping of options, or None.
        carousel_id: Identifier bound onto every log event.

    Raises:
        ConfigurationError: If the options are invalid.
        StructuralPreconditionError: If the container has no parent.
    """

    def __init__(
        self,
        container: TileContainer,
        config: CarouselConfig | Mapping[str, Any] | None = None,
        carousel_id: str | None = None,
    ) -> None:
        self.config = load_config(config)
        self.carousel_id = carousel_id or f"carousel-{next(_carousel_ids)}"
        self._logger = get_logger(__name__, carousel_id=self.carousel_id)

        if container.parent is None:
            self._logger.error("carousel_mount_failed", reason="container has no parent")
            raise StructuralPreconditionError(
                f"Cannot mount {self.carousel_id}: tile container has no parent"
            )
        self.container = container

        self._toggler = AccessibilityToggler(enabled=self.config.accessible)
        self._normalizer = Normalizer(self._toggler)
        self._navigator = Navigator()
        self._controller = NavigationController(
            prev_text=self.config.prev_text,
            next_text=self.config.next_text,
        )
        self._pending: deque[Callable[[], None]] = deque()
        self._transitioning = False

        self.state: CarouselState[Tile] = self._normalizer.normalize(
            container.children, self.config
        )
        self._controller.update(self.state)

    # -------------------------------------------------------------------------
    # Read-only views
    # -------------------------------------------------------------------------

    @property
    def affordances(self) -> Affordances:
        return self._controller.affordances

    @property
    def busy(self) -> bool:
        """True while a transition is in flight."""
        return self._transitioning

    @property
    def frames(self) -> tuple[Frame, ...]:
        return self.state.frames

    def snapshot(self) -> CarouselSnapshot[Tile]:
        return self.state.snapshot()

    # -------------------------------------------------------------------------
    # Navigation
    # -------------------------------------------------------------------------

    def next(self) -> "Carousel":
        """Advance by one frame (or one tile in tile mode)."""
        return self._navigate("next", lambda: self._navigator.next_target(self.state))

    def prev(self) -> "Carousel":
        """Go back by one frame (or one tile in tile mode)."""
        return self._navigate("prev", lambda: self._navigator.prev_target(self.state))

    def jump_to_frame(self, frame: int | str) -> "Carousel":
        """Show the 1-based ``frame``.

        Malformed frame numbers are ignored like any other no-op request.
        """
        try:
            number = int(frame)
        except (TypeError, ValueError, OverflowError):
            self._logger.warning("navigation_ignored", request="jump_to_frame", frame=frame)
            return self
        return self._navigate(
            "jump_to_frame", lambda: self._navigator.jump_target(self.state, number)
        )

    def reset(self) -> "Carousel":
        """Return to the first frame."""
        return self._navigate("reset", lambda: self._navigator.reset_target(self.state))

    def handle_action(self, action: NavigationAction | str) -> "Carousel":
        """Dispatch a control action such as ``"next"`` or ``"prev"``."""
        try:
            action = NavigationAction(action)
        except ValueError:
            self._logger.warning("navigation_ignored", request="handle_action", action=action)
            return self
        if action is NavigationAction.NEXT:
            return self.next()
        return self.prev()

    def rebuild(self) -> "Carousel":
        """Re-read the container's tiles and start again from frame 1.

        The carousel never tracks changes to the container on its own.
        """
        return self._request("rebuild", self._rebuild)

    # -------------------------------------------------------------------------
    # Transition machinery
    # -------------------------------------------------------------------------

    def _navigate(self, name: str, target: Callable[[], int | None]) -> "Carousel":
        return self._request(name, lambda: self._move(name, target))

    def _request(self, name: str, action: Callable[[], None]) -> "Carousel":
        if self._transitioning:
            self._logger.debug("transition_queued", request=name)
            self._pending.append(action)
            return self

        try:
            self._run(action)
            while self._pending:
                self._run(self._pending.popleft())
        finally:
            self._pending.clear()
        return self

    def _run(self, action: Callable[[], None]) -> None:
        self._transitioning = True
        try:
            action()
        finally:
            self._transitioning = False

    def _move(self, name: str, target: Callable[[], int | None]) -> None:
        # Targets are computed when the request runs, not when it is queued
        index = target()
        if index is None:
            self._logger.debug("navigation_ignored", request=name, index=self.state.index)
            return

        state = self._navigator.commit(self.state, index)

        # Markers and affordances must follow the pointers even if the
        # pre-hook raises
        try:
            if self.config.pre_transition is not None:
                self.config.pre_transition(state.snapshot())
        finally:
            self._toggler.commit(state)
            self._controller.update(state)

        if self.config.focus_on_change and isinstance(state.cur_tile, SupportsFocus):
            state.cur_tile.focus()

        self._logger.debug(
            "transition_committed",
            request=name,
            index=state.index,
            prev_index=state.prev_index,
            frame_number=state.frame_number,
        )

        if self.config.post_transition is not None:
            self.config.post_transition(state.snapshot())

    def _rebuild(self) -> None:
        self.state = self._normalizer.normalize(
            self.container.children, self.config, previous=self.state
        )
        self._controller.update(self.state)
