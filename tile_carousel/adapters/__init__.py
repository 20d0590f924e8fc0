"""Adapters implementing the tile protocols."""

from tile_carousel.adapters.memory_tiles import MemoryTile, MemoryTileContainer

__all__ = [
    "MemoryTile",
    "MemoryTileContainer",
]
