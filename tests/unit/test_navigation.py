"""Tests for prev/next affordances."""

import pytest

from tile_carousel.adapters.memory_tiles import MemoryTile
from tile_carousel.core.navigation import Affordances, NavigationAction, NavigationController
from tile_carousel.core.normalizer import partition
from tile_carousel.core.state import CarouselState


def make_state(count: int, increment: int, index: int = 0) -> CarouselState:
    return CarouselState(
        tiles=tuple(MemoryTile() for _ in range(count)),
        increment=increment,
        frames=partition(count, increment),
        index=index,
    )


class TestNavigationController:
    """Tests for NavigationController.update."""

    def test_disabled_before_first_update(self) -> None:
        controller = NavigationController()
        assert controller.affordances.prev_disabled
        assert controller.affordances.next_disabled

    @pytest.mark.parametrize(
        ("index", "prev_disabled", "next_disabled"),
        [(0, True, False), (3, False, False), (6, False, False), (7, False, True)],
    )
    def test_ten_tiles_by_three(
        self, index: int, prev_disabled: bool, next_disabled: bool
    ) -> None:
        affordances = NavigationController().update(make_state(10, 3, index))
        assert affordances.prev_disabled is prev_disabled
        assert affordances.next_disabled is next_disabled

    @pytest.mark.parametrize(("count", "increment"), [(0, 1), (0, 3), (2, 3), (3, 3), (1, 1)])
    def test_single_frame_disables_both(self, count: int, increment: int) -> None:
        affordances = NavigationController().update(make_state(count, increment))
        assert affordances == Affordances(prev_disabled=True, next_disabled=True)

    def test_labels_are_carried(self) -> None:
        controller = NavigationController(prev_text="Back", next_text="Forward")
        affordances = controller.update(make_state(4, 1))
        assert affordances.prev_text == "Back"
        assert affordances.next_text == "Forward"

    def test_update_replaces_current_affordances(self) -> None:
        controller = NavigationController()
        affordances = controller.update(make_state(4, 1, index=2))
        assert controller.affordances is affordances


class TestNavigationAction:
    def test_values(self) -> None:
        assert NavigationAction("next") is NavigationAction.NEXT
        assert NavigationAction("prev") is NavigationAction.PREV
