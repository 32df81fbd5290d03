"""Data model for decoded route shapes.

A ``ShapePoint`` is one WGS 84 vertex of a decoded path.  Sequences of
points are produced by ``route_shapes.codec.decode_polyline6`` (or by
deserialising literal coordinate pairs) and consumed by geometry and
storage code through the conversion helpers below.
"""

from __future__ import annotations

import enum
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING

from route_shapes.core.config import ShapeConfig
from route_shapes.core.exceptions import ShapeValidationError

if TYPE_CHECKING:
    import numpy as np
    from shapely.geometry import LineString, Point


class ShapeFormat(enum.Enum):
    """Encoding a shape is declared to use.

    Values are the wire names used by routing APIs in ``shape_format``.
    Only ``POLYLINE6`` can be decoded by this package; the other members
    exist so a dispatching caller can recognise and reject them.
    """

    POLYLINE6 = "polyline6"
    POLYLINE5 = "polyline5"
    GEOJSON = "geojson"
    NO_SHAPE = "no_shape"

    @property
    def is_decodable(self) -> bool:
        return self is ShapeFormat.POLYLINE6


@dataclass(frozen=True, slots=True)
class ShapePoint:
    """A single vertex of a route shape.

    Attributes:
        lon: Longitude in degrees (WGS 84), full double precision.
        lat: Latitude in degrees (WGS 84), full double precision.
    """

    lon: float
    lat: float

    def to_dict(self) -> dict[str, float]:
        return {"lon": self.lon, "lat": self.lat}

    @classmethod
    def from_dict(cls, data: Mapping[str, object]) -> ShapePoint:
        """Build a point from a literal ``{"lon": ..., "lat": ...}`` mapping.

        Raises:
            KeyError: If ``lon`` or ``lat`` is missing.
            TypeError, ValueError: If a value cannot be converted to float.
        """
        return cls(lon=float(data["lon"]), lat=float(data["lat"]))  # type: ignore[arg-type]

    def as_tuple(self) -> tuple[float, float]:
        """Return ``(lon, lat)``."""
        return (self.lon, self.lat)

    def validate(self, *, config: ShapeConfig | None = None) -> None:
        """Check the point against WGS 84 bounds under the configured policy.

        Raises:
            CoordinateOutOfRangeError: If the point is out of bounds.
        """
        from route_shapes.codec._validation import validate_coordinate

        cfg = config or ShapeConfig()
        validate_coordinate(self.lon, self.lat, bounds_policy=cfg.bounds_policy, stage="convert")

    def to_geometry_point(self, *, config: ShapeConfig | None = None) -> Point:
        """Convert to a shapely ``Point`` with ``x = lon`` and ``y = lat``.

        Raises:
            CoordinateOutOfRangeError: If the point is out of bounds.
        """
        from shapely.geometry import Point

        self.validate(config=config)
        return Point(self.lon, self.lat)

    def to_coordinate(self, *, config: ShapeConfig | None = None) -> tuple[np.float32, np.float32]:
        """Convert to a compact ``(lon, lat)`` pair of 32-bit floats.

        Each axis is rounded to the nearest representable ``float32``
        (about 7 significant digits); the precision loss is accepted in
        exchange for half the storage of the double-precision point.

        Raises:
            CoordinateOutOfRangeError: If the point is out of bounds.
        """
        import numpy as np

        self.validate(config=config)
        return (np.float32(self.lon), np.float32(self.lat))


# ---------------------------------------------------------------------------
# Sequence conversions
# ---------------------------------------------------------------------------


def to_line_string(points: Iterable[ShapePoint], *, config: ShapeConfig | None = None) -> LineString:
    """Build a shapely ``LineString`` from decoded shape points.

    Raises:
        ShapeValidationError: If fewer than two points are given.
        CoordinateOutOfRangeError: If any point is out of bounds.
    """
    from shapely.geometry import LineString

    vertices = [p.to_geometry_point(config=config) for p in points]
    if len(vertices) < 2:
        msg = f"A line string needs at least 2 points, got {len(vertices)}"
        raise ShapeValidationError(msg)
    return LineString(vertices)


def to_coordinate_array(
    points: Iterable[ShapePoint], *, config: ShapeConfig | None = None
) -> np.ndarray:
    """Pack decoded shape points into an ``(N, 2)`` float32 array of ``(lon, lat)`` rows.

    Raises:
        CoordinateOutOfRangeError: If any point is out of bounds.
    """
    import numpy as np

    rows = [p.to_coordinate(config=config) for p in points]
    return np.array(rows, dtype=np.float32).reshape(len(rows), 2)
