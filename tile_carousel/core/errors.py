"""Error types raised while setting up a carousel.

Only setup can fail. Configuration problems and a missing mount parent are
permanent: they surface synchronously to the caller and are never retried.
Navigation requests never raise; out-of-range or malformed requests degrade
to logged no-ops.

Example:
    from tile_carousel.core.errors import ConfigurationError

    try:
        carousel = Carousel(container, {"increment": 0})
    except ConfigurationError as ex:
        logger.error("carousel_setup_failed", category=ex.category.name)
"""

from enum import Enum, auto


class ErrorCategory(Enum):
    """Classification of setup failures."""

    CONFIGURATION = auto()  # Invalid option value or unknown option
    STRUCTURAL = auto()  # Mount point is not attached to a parent container


class CarouselError(Exception):
    """Base class for carousel setup errors.

    Attributes:
        category: The specific type of failure.
        original_error: The underlying exception, if this error wraps one.
    """

    default_category = ErrorCategory.CONFIGURATION

    def __init__(
        self,
        message: str,
        category: ErrorCategory | None = None,
        original_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.category = category or self.default_category
        self.original_error = original_error

    @classmethod
    def from_exception(cls, ex: Exception) -> "CarouselError":
        """Create an error of this type wrapping an existing exception."""
        return cls(message=str(ex), original_error=ex)


class ConfigurationError(CarouselError):
    """Raised when carousel options are invalid (e.g. increment <= 0)."""

    default_category = ErrorCategory.CONFIGURATION


class StructuralPreconditionError(CarouselError):
    """Raised when the tile container has no parent to mount into."""

    default_category = ErrorCategory.STRUCTURAL
