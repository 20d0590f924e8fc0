"""Carousel state model - platform agnostic.

One ``CarouselState`` exists per carousel. It is created by the normalizer,
mutated in place by the navigator, and handed to hooks only as an immutable
``CarouselSnapshot``.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from tile_carousel.core.config import IncrementMode

T = TypeVar("T")


def ceil_div(numerator: int, denominator: int) -> int:
    """Integer ceiling division for non-negative numerators."""
    return -(-numerator // denominator)


@dataclass(frozen=True)
class Frame:
    """A window over the tile sequence.

    Attributes:
        start: Index of the first tile in the frame.
        length: Number of tiles in the frame; only the last frame may be
            shorter than the increment.
    """

    start: int
    length: int

    @property
    def stop(self) -> int:
        return self.start + self.length

    def tiles(self, sequence: "tuple[T, ...]") -> "tuple[T, ...]":
        return sequence[self.start : self.stop]


@dataclass(frozen=True)
class CarouselSnapshot(Generic[T]):
    """Read-only copy of the state handed to hooks and callers."""

    index: int
    prev_index: int | None
    frame_index: int
    frame_number: int
    prev_frame_index: int
    prev_frame_number: int
    cur_tile: T | None
    prev_tile: T | None
    cur_frame: tuple[T, ...]
    prev_frame: tuple[T, ...]
    cur_tile_length: int
    cur_frame_length: int
    tile_delta: int
    offset: float


@dataclass
class CarouselState(Generic[T]):
    """Mutable navigation record for a single carousel.

    Attributes:
        tiles: The owned tile sequence captured at normalization.
        increment: Nominal frame size.
        increment_mode: Whether next/prev step by frame or by tile.
        frames: Partition of ``tiles`` into consecutive frames.
        index: Offset of the first tile in the current window.
        prev_index: ``index`` before the last commit; None until one happens.
        frame_index: ``ceil(index / increment)``.
        prev_frame_index: ``frame_index`` before the last commit.
        cur_tile: Tile that represents the current frame.
        prev_tile: ``cur_tile`` before the last commit.
        cur_frame: Tiles in the current window.
        prev_frame: ``cur_frame`` before the last commit.
        orig_tile_length: Tile count at the first normalization.
        orig_frame_length: Frame count at the first normalization.
        tile_width: Externally supplied width of one tile.
        offset: ``tile_width * index``.
        accessibility_initialized: Set once the first-run marker pass is done.
    """

    tiles: tuple[T, ...]
    increment: int = 1
    increment_mode: IncrementMode = IncrementMode.FRAME
    frames: tuple[Frame, ...] = ()
    index: int = 0
    prev_index: int | None = None
    frame_index: int = 0
    prev_frame_index: int = 0
    cur_tile: T | None = None
    prev_tile: T | None = None
    cur_frame: tuple[T, ...] = ()
    prev_frame: tuple[T, ...] = ()
    orig_tile_length: int = 0
    orig_frame_length: int = 0
    tile_width: float = 0.0
    offset: float = 0.0
    accessibility_initialized: bool = False

    @property
    def frame_number(self) -> int:
        return self.frame_index + 1

    @property
    def prev_frame_number(self) -> int:
        return self.prev_frame_index + 1

    @property
    def cur_tile_length(self) -> int:
        return len(self.tiles)

    @property
    def cur_frame_length(self) -> int:
        """Number of frames in the current partition."""
        return len(self.frames)

    @property
    def frame_count(self) -> int:
        return len(self.frames)

    @property
    def tile_delta(self) -> int:
        """How many tiles the final frame is short of a full frame."""
        return self.increment * self.frame_count - self.cur_tile_length

    @property
    def frame_width(self) -> float:
        return self.increment * self.tile_width

    @property
    def max_index(self) -> int:
        return max(0, self.cur_tile_length - self.increment)

    @property
    def is_empty(self) -> bool:
        return not self.tiles

    @property
    def is_first_frame(self) -> bool:
        return self.index == 0

    @property
    def is_last_frame(self) -> bool:
        # Never true when there are fewer tiles than one increment
        return self.index == self.cur_tile_length - self.increment

    def clamp(self, candidate: int) -> int:
        """Clamp a candidate index into ``[0, max_index]``."""
        return min(max(candidate, 0), self.max_index)

    def window(self, index: int) -> tuple[T, ...]:
        """Tiles in the increment-sized window starting at ``index``."""
        return self.tiles[index : index + self.increment]

    def snapshot(self) -> CarouselSnapshot[T]:
        return CarouselSnapshot(
            index=self.index,
            prev_index=self.prev_index,
            frame_index=self.frame_index,
            frame_number=self.frame_number,
            prev_frame_index=self.prev_frame_index,
            prev_frame_number=self.prev_frame_number,
            cur_tile=self.cur_tile,
            prev_tile=self.prev_tile,
            cur_frame=self.cur_frame,
            prev_frame=self.prev_frame,
            cur_tile_length=self.cur_tile_length,
            cur_frame_length=self.cur_frame_length,
            tile_delta=self.tile_delta,
            offset=self.offset,
        )
