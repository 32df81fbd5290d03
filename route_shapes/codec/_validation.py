"""Validation helpers for shape decoding.

Responsibilities:
- Decoder exception hierarchy (empty input, bad character, truncation, bounds)
- WGS 84 coordinate bounds checking under the configured bounds policy
"""

from __future__ import annotations

from route_shapes.core.constants import (
    BOUNDS_INCLUSIVE,
    MAX_LATITUDE,
    MAX_LONGITUDE,
    MIN_LATITUDE,
    MIN_LONGITUDE,
)
from route_shapes.core.exceptions import ValidationError

# ---------------------------------------------------------------------------
# Exceptions (public API, re-exported from route_shapes.codec)
# ---------------------------------------------------------------------------


class ShapeDecodeError(ValidationError):
    """Raised when an encoded shape cannot be decoded.

    Attributes:
        offset: Character offset into the encoded string where decoding
            stopped, or ``None`` when the failure is not positional.
    """

    default_stage = "decode_polyline6"
    default_code = "SHAPE_DECODE_FAILED"

    def __init__(self, message: str = "", *, offset: int | None = None, **kwargs: object) -> None:
        self.offset = offset
        super().__init__(message, **kwargs)


class EmptyShapeError(ShapeDecodeError):
    """Raised when the encoded shape is the empty string."""

    default_code = "SHAPE_EMPTY"


class InvalidCharacterError(ShapeDecodeError):
    """Raised when a character falls outside the polyline alphabet."""

    default_code = "SHAPE_INVALID_CHARACTER"

    def __init__(self, message: str = "", *, char: str = "", **kwargs: object) -> None:
        self.char = char
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


class TruncatedFieldError(ShapeDecodeError):
    """Raised when the input ends inside a field or between a lat/lon pair."""

    default_code = "SHAPE_TRUNCATED_FIELD"


class CoordinateOutOfRangeError(ShapeDecodeError):
    """Raised when a coordinate falls outside the accepted WGS 84 bounds.

    Attributes:
        index: Zero-based index of the offending point in the decoded
            sequence, or ``None`` for a standalone point.
    """

    default_code = "SHAPE_COORDINATE_OUT_OF_RANGE"

    def __init__(self, message: str = "", *, index: int | None = None, **kwargs: object) -> None:
        self.index = index
        super().__init__(message, **kwargs)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Coordinate validation
# ---------------------------------------------------------------------------


def _within(value: float, low: float, high: float, *, inclusive: bool) -> bool:
    if inclusive:
        return low <= value <= high
    return low < value < high


def validate_coordinate(
    lon: float,
    lat: float,
    *,
    bounds_policy: str,
    index: int | None = None,
    stage: str = "",
) -> None:
    """Validate a single ``(lon, lat)`` pair against WGS 84 bounds.

    Raises:
        CoordinateOutOfRangeError: If either axis is out of bounds
            (NaN is always out of bounds).
    """
    inclusive = bounds_policy == BOUNDS_INCLUSIVE
    brackets = ("[", "]") if inclusive else ("(", ")")
    where = f" at point {index}" if index is not None else ""

    if not _within(lat, MIN_LATITUDE, MAX_LATITUDE, inclusive=inclusive):
        msg = (
            f"Latitude {lat} out of WGS 84 range "
            f"{brackets[0]}{MIN_LATITUDE}, {MAX_LATITUDE}{brackets[1]}{where}"
        )
        raise CoordinateOutOfRangeError(msg, index=index, stage=stage)
    if not _within(lon, MIN_LONGITUDE, MAX_LONGITUDE, inclusive=inclusive):
        msg = (
            f"Longitude {lon} out of WGS 84 range "
            f"{brackets[0]}{MIN_LONGITUDE}, {MAX_LONGITUDE}{brackets[1]}{where}"
        )
        raise CoordinateOutOfRangeError(msg, index=index, stage=stage)
