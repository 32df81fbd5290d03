"""Data models.

Defines the data structures exchanged with shape consumers:
- ShapePoint: A decoded WGS 84 vertex and its conversions
- ShapeFormat: Declared encoding of a shape

The pydantic field hook lives in ``route_shapes.models.schema`` and is
imported from there directly, since it depends on the codec.
"""

from route_shapes.models.shape import (
    ShapeFormat,
    ShapePoint,
    to_coordinate_array,
    to_line_string,
)

__all__ = [
    "ShapeFormat",
    "ShapePoint",
    "to_coordinate_array",
    "to_line_string",
]
