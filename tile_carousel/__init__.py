"""Frame/tile carousel state machine."""

from tile_carousel.core import Carousel, CarouselConfig, IncrementMode

__version__ = "1.0.0"

__all__ = ["Carousel", "CarouselConfig", "IncrementMode", "__version__"]
