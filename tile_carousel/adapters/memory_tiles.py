"""In-memory implementation of the tile protocols.

``MemoryTile`` records the markers the carousel sets instead of rendering
anything, which makes it the adapter of choice for tests and headless hosts.
"""

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any


@dataclass(eq=False)
class MemoryTile:
    """A tile that stores its markers as plain attributes.

    Attributes:
        content: Arbitrary payload for the host; ignored by the carousel.
        visible: Last visibility marker set by the carousel.
        focusable: Last focusability marker set by the carousel.
        filler: Structural placeholder flag.
        focus_count: Number of times ``focus()`` was called.
    """

    content: Any = None
    visible: bool = True
    focusable: bool = True
    filler: bool = False
    focus_count: int = 0

    def __post_init__(self) -> None:
        # Fillers start hidden; the carousel never touches them afterwards
        if self.filler:
            self.visible = False
            self.focusable = False

    @property
    def is_filler(self) -> bool:
        return self.filler

    def set_visible(self, visible: bool) -> None:
        self.visible = visible

    def set_focusable(self, focusable: bool) -> None:
        self.focusable = focusable

    def focus(self) -> None:
        self.focus_count += 1

    def __repr__(self) -> str:
        kind = "filler" if self.filler else "tile"
        return f"MemoryTile({kind}, content={self.content!r})"


@dataclass
class MemoryTileContainer:
    """A mutable tile list attached to an optional parent.

    The carousel copies ``children`` when it normalizes, so later edits to
    this list only take effect after ``Carousel.rebuild()``.

    Example:
        container = MemoryTileContainer.from_contents(["a", "b", "c"])
        carousel = Carousel(container, {"increment": 2})
    """

    children: list[MemoryTile] = field(default_factory=list)
    parent: object | None = None

    @classmethod
    def from_contents(
        cls,
        contents: Iterable[Any],
        fillers: int = 0,
        parent: object | None = "root",
    ) -> "MemoryTileContainer":
        """Build a mounted container with one tile per content item.

        Args:
            contents: Payloads for the real tiles, in display order.
            fillers: Number of filler tiles appended after the real tiles.
            parent: Parent reference; pass None for a detached container.
        """
        tiles = [MemoryTile(content=item) for item in contents]
        tiles.extend(MemoryTile(filler=True) for _ in range(fillers))
        return cls(children=tiles, parent=parent)

    def append(self, content: Any) -> MemoryTile:
        """Add a real tile at the end of the list and return it."""
        tile = MemoryTile(content=content)
        self.children.append(tile)
        return tile
