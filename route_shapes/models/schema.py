"""Pydantic hooks for decoding shapes during model validation.

Routing responses carry each leg's geometry as a polyline6 string next
to a ``shape_format`` tag.  ``Polyline6Shape`` lets a pydantic model
declare that field as ``list[ShapePoint]`` and have the string decoded
while the response is validated:

    class Leg(BaseModel):
        shape: Polyline6Shape

    Leg.model_validate({"shape": "_p~iF~ps|U_ulLnnqC"}).shape  # list[ShapePoint]

A non-string value fails pydantic's strict ``str`` validation and
surfaces as pydantic's own ``ValidationError``.  A string that is not a
valid polyline6 shape raises the decoder's ``ShapeDecodeError``
subclass unchanged.
"""

from __future__ import annotations

from typing import Annotated, Any

from pydantic import (
    BaseModel,
    PlainSerializer,
    PlainValidator,
    StrictStr,
    TypeAdapter,
    model_validator,
)

from route_shapes.codec.polyline6 import decode_polyline6
from route_shapes.core.exceptions import UnsupportedShapeFormatError
from route_shapes.models.shape import ShapeFormat, ShapePoint

_ENCODED_SHAPE = TypeAdapter(StrictStr)


def decode_shape_field(value: Any) -> list[ShapePoint]:
    """Extract the encoded string from ``value`` and decode it.

    Raises:
        pydantic.ValidationError: If ``value`` is not a string.
        ShapeDecodeError: If the string is not a valid polyline6 shape.
    """
    encoded = _ENCODED_SHAPE.validate_python(value)
    return decode_polyline6(encoded)


def _dump_shape(points: list[ShapePoint]) -> list[dict[str, float]]:
    return [p.to_dict() for p in points]


Polyline6Shape = Annotated[
    list[ShapePoint],
    PlainValidator(decode_shape_field),
    PlainSerializer(_dump_shape, return_type=list[dict[str, float]]),
]
"""Model field type: polyline6 string in, ``list[ShapePoint]`` out."""


class ShapedLeg(BaseModel):
    """A routed leg whose geometry arrives as an encoded shape.

    Attributes:
        shape_format: Declared encoding of ``shape``.
        shape: Decoded points, or ``None`` when the leg has no geometry.
    """

    shape_format: ShapeFormat = ShapeFormat.POLYLINE6
    shape: Polyline6Shape | None = None

    model_config = {"frozen": True}

    @model_validator(mode="before")
    @classmethod
    def _check_format(cls, data: Any) -> Any:
        if not isinstance(data, dict) or data.get("shape") is None:
            return data
        declared = data.get("shape_format", ShapeFormat.POLYLINE6)
        if declared not in (ShapeFormat.POLYLINE6, ShapeFormat.POLYLINE6.value):
            msg = f"Leg shape declared as {declared!r}; only 'polyline6' shapes can be decoded"
            raise UnsupportedShapeFormatError(msg, stage="deserialize_shape")
        return data

    @property
    def point_count(self) -> int:
        return len(self.shape) if self.shape else 0
