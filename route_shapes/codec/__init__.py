"""Shape decoding.

Turns an encoded route shape into an ordered list of ``ShapePoint``.

The package is split into focused modules:
- **polyline6**: cursor-based polyline6 decoder
- **_validation**: decoder exceptions and WGS 84 bounds checks

``decode_shape`` is the format-aware entry point: it dispatches on a
``ShapeFormat`` and rejects every format without a decoder explicitly,
rather than guessing.
"""

from __future__ import annotations

import logging

from route_shapes.codec._validation import (
    CoordinateOutOfRangeError,
    EmptyShapeError,
    InvalidCharacterError,
    ShapeDecodeError,
    TruncatedFieldError,
    validate_coordinate,
)
from route_shapes.codec.polyline6 import decode_polyline6
from route_shapes.core.config import ShapeConfig
from route_shapes.core.exceptions import UnsupportedShapeFormatError
from route_shapes.models.shape import ShapeFormat, ShapePoint

logger = logging.getLogger("route_shapes.codec")

__all__ = [
    "CoordinateOutOfRangeError",
    "EmptyShapeError",
    "InvalidCharacterError",
    "ShapeDecodeError",
    "TruncatedFieldError",
    "UnsupportedShapeFormatError",
    "decode_polyline6",
    "decode_shape",
    "validate_coordinate",
]


def decode_shape(
    encoded: str,
    shape_format: ShapeFormat | str = ShapeFormat.POLYLINE6,
    *,
    config: ShapeConfig | None = None,
) -> list[ShapePoint]:
    """Decode ``encoded`` according to its declared ``shape_format``.

    Args:
        encoded: The encoded shape string.
        shape_format: A ``ShapeFormat`` member or its wire name
            (``"polyline6"``, ``"polyline5"``, ``"geojson"``, ``"no_shape"``).
        config: Decoder configuration passed through to the decoder.

    Raises:
        UnsupportedShapeFormatError: If the format is unknown or has no
            decoder in this package.
        ShapeDecodeError: If the shape itself is malformed.
    """
    if not isinstance(shape_format, ShapeFormat):
        try:
            shape_format = ShapeFormat(shape_format)
        except ValueError as exc:
            msg = f"Unknown shape format {shape_format!r}"
            raise UnsupportedShapeFormatError(msg) from exc

    if shape_format is ShapeFormat.POLYLINE6:
        return decode_polyline6(encoded, config=config)

    logger.warning("Rejected shape declared as unsupported format %s", shape_format.value)
    msg = f"Shape format {shape_format.value!r} cannot be decoded; only 'polyline6' is supported"
    raise UnsupportedShapeFormatError(msg)
