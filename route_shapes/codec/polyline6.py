"""Polyline6 shape decoder.

Decodes the Valhalla / OSRM ``polyline6`` encoding into ``ShapePoint``
objects.  The format is the Google encoded-polyline algorithm at six
decimal digits instead of five:

- every coordinate is stored as a delta from the previous point,
  latitude first, then longitude;
- each delta is zigzag-encoded, split into 5-bit groups
  (least-significant first) and written as printable ASCII by adding 63;
- bit ``0x20`` of a group marks that another group follows.

Reference: https://valhalla.github.io/valhalla/decoding/

The decoder reads through an explicit cursor, so malformed input always
ends in a typed ``ShapeDecodeError`` instead of an index error or a
silently wrong point.
"""

from __future__ import annotations

import logging

from route_shapes.codec._validation import (
    EmptyShapeError,
    InvalidCharacterError,
    ShapeDecodeError,
    TruncatedFieldError,
    validate_coordinate,
)
from route_shapes.core.config import ShapeConfig
from route_shapes.core.constants import (
    MAX_ENCODED_CHAR,
    MIN_ENCODED_CHAR,
    POLYLINE_CHAR_OFFSET,
    POLYLINE_CHUNK_BITS,
    POLYLINE_CHUNK_MASK,
    POLYLINE_CONTINUATION_BIT,
    POLYLINE6_INVERSE_SCALE,
)
from route_shapes.models.shape import ShapePoint

logger = logging.getLogger("route_shapes.codec.polyline6")

STAGE = "decode_polyline6"

# 13 groups carry 65 bits, more than any 64-bit delta needs.
MAX_FIELD_CHARS = 13

_DEFAULT_CONFIG = ShapeConfig()


class _ByteCursor:
    """Forward-only reader over an encoded shape, one field at a time."""

    __slots__ = ("_encoded", "_length", "_pos")

    def __init__(self, encoded: str) -> None:
        self._encoded = encoded
        self._length = len(encoded)
        self._pos = 0

    @property
    def position(self) -> int:
        return self._pos

    def at_end(self) -> bool:
        return self._pos >= self._length

    def read_field(self) -> int:
        """Read one zigzag-encoded field and return its signed value.

        Raises:
            TruncatedFieldError: If the input ends before the field's
                continuation chain terminates.
            InvalidCharacterError: If a character is outside ``'?'..'~'``.
            ShapeDecodeError: If the field runs longer than
                ``MAX_FIELD_CHARS`` characters.
        """
        start = self._pos
        result = 0
        shift = 0
        while True:
            if self._pos >= self._length:
                msg = (
                    f"Encoded shape ends inside a field: field starting at offset {start} "
                    f"has no terminating character (length {self._length})"
                )
                raise TruncatedFieldError(msg, offset=start)
            if self._pos - start >= MAX_FIELD_CHARS:
                msg = (
                    f"Field starting at offset {start} exceeds {MAX_FIELD_CHARS} characters"
                )
                raise ShapeDecodeError(msg, offset=start, code="SHAPE_FIELD_OVERFLOW")

            char = self._encoded[self._pos]
            code = ord(char)
            if not MIN_ENCODED_CHAR <= code <= MAX_ENCODED_CHAR:
                msg = (
                    f"Invalid character {char!r} (code {code}) at offset {self._pos}; "
                    f"polyline characters must be in {chr(MIN_ENCODED_CHAR)!r}..{chr(MAX_ENCODED_CHAR)!r}"
                )
                raise InvalidCharacterError(msg, offset=self._pos, char=char)

            chunk = code - POLYLINE_CHAR_OFFSET
            self._pos += 1
            result |= (chunk & POLYLINE_CHUNK_MASK) << shift
            shift += POLYLINE_CHUNK_BITS
            if chunk < POLYLINE_CONTINUATION_BIT:
                break

        return ~(result >> 1) if result & 1 else result >> 1


def decode_polyline6(encoded: str, *, config: ShapeConfig | None = None) -> list[ShapePoint]:
    """Decode a polyline6 string into an ordered list of points.

    The first point is absolute (its delta is taken from ``(0, 0)``);
    every later point is relative to the one before it.  Points are
    returned in input order, without deduplication.

    Args:
        encoded: The complete encoded shape, with no surrounding bytes.
        config: Decoder configuration.  Defaults to ``ShapeConfig()``,
            i.e. exclusive bounds.  The 1e-6 scale is fixed.

    Returns:
        List of ``ShapePoint`` objects, one per lat/lon field pair.

    Raises:
        TypeError: If ``encoded`` is not a ``str``.
        EmptyShapeError: If ``encoded`` is empty.
        InvalidCharacterError: If a character is outside the polyline alphabet.
        TruncatedFieldError: If the input ends inside a field or pair.
        CoordinateOutOfRangeError: If a decoded point is outside WGS 84
            bounds under ``config.bounds_policy``.
        ShapeDecodeError: If the input exceeds ``config.max_encoded_length``
            or a field is implausibly long.
    """
    if not isinstance(encoded, str):
        msg = f"encoded shape must be a str, got {type(encoded).__name__}"
        raise TypeError(msg)

    cfg = config or _DEFAULT_CONFIG
    try:
        points = _decode(encoded, cfg)
    except ShapeDecodeError as exc:
        logger.warning(
            "Polyline6 decode failed [%s] at offset %s: %s",
            exc.code,
            exc.offset,
            exc.message,
        )
        raise

    logger.debug("Decoded %d point(s) from %d-character polyline6 shape", len(points), len(encoded))
    return points


def _decode(encoded: str, config: ShapeConfig) -> list[ShapePoint]:
    if not encoded:
        msg = "Encoded shape is empty"
        raise EmptyShapeError(msg, offset=0)
    if len(encoded) > config.max_encoded_length:
        msg = (
            f"Encoded shape is {len(encoded)} characters, "
            f"limit is {config.max_encoded_length}"
        )
        raise ShapeDecodeError(msg, offset=config.max_encoded_length, code="SHAPE_TOO_LONG")

    inv = POLYLINE6_INVERSE_SCALE
    cursor = _ByteCursor(encoded)
    lat_int = 0
    lon_int = 0
    decoded: list[ShapePoint] = []

    while not cursor.at_end():
        lat_int += cursor.read_field()
        if cursor.at_end():
            msg = (
                f"Encoded shape ends after a latitude field at offset {cursor.position}; "
                "missing longitude"
            )
            raise TruncatedFieldError(msg, offset=cursor.position)
        lon_int += cursor.read_field()

        lon = lon_int * inv
        lat = lat_int * inv
        validate_coordinate(
            lon,
            lat,
            bounds_policy=config.bounds_policy,
            index=len(decoded),
            stage=STAGE,
        )
        decoded.append(ShapePoint(lon=lon, lat=lat))

    return decoded
