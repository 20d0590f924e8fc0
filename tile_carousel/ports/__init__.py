"""Ports (interfaces) for the carousel.

This module contains Protocol definitions for the boundary between the
carousel core and the surface that displays tiles.
"""

from tile_carousel.ports.tiles import SupportsFocus, Tile, TileContainer

__all__ = [
    "SupportsFocus",
    "Tile",
    "TileContainer",
]
