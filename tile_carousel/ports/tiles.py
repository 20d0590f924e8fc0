"""Tile protocols.

This module defines the interfaces (Protocols) between the carousel core and
whatever surface actually displays the tiles. The core only ever sets two
markers on a tile and never creates, reorders, or destroys tiles.
"""

from collections.abc import Sequence
from typing import Protocol, runtime_checkable


class Tile(Protocol):
    """A single content unit the carousel can mark.

    Attributes:
        is_filler: True for structural placeholder tiles. Filler tiles are
            skipped by every marking pass.
    """

    @property
    def is_filler(self) -> bool: ...

    def set_visible(self, visible: bool) -> None:
        """Mark the tile as shown (True) or hidden (False)."""
        ...

    def set_focusable(self, focusable: bool) -> None:
        """Allow (True) or prevent (False) keyboard focus on the tile."""
        ...


@runtime_checkable
class SupportsFocus(Protocol):
    """A tile that can take keyboard focus after a transition."""

    def focus(self) -> None: ...


class TileContainer(Protocol):
    """The mount point holding the raw tile list.

    Attributes:
        parent: The enclosing container, or None when detached. A carousel
            cannot be mounted on a detached container.
        children: The tiles in display order.
    """

    @property
    def parent(self) -> object | None: ...

    @property
    def children(self) -> Sequence[Tile]: ...
