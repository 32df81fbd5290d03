"""Tests for the pydantic shape field hook.

Covers:
- Polyline6Shape decoding during model validation
- Non-string values rejected by pydantic itself
- Decoder errors propagating unchanged through model_validate
- ShapedLeg format checks and serialisation
"""

from __future__ import annotations

import pydantic
import pytest

from route_shapes.codec import EmptyShapeError, InvalidCharacterError, TruncatedFieldError
from route_shapes.core.exceptions import UnsupportedShapeFormatError
from route_shapes.models.schema import ShapedLeg, decode_shape_field
from route_shapes.models.shape import ShapeFormat, ShapePoint


class TestDecodeShapeField:
    """The plain function behind the field hook."""

    def test_decodes_string(self) -> None:
        assert decode_shape_field("??") == [ShapePoint(lon=0.0, lat=0.0)]

    @pytest.mark.parametrize("value", [42, None, ["??"], b"??"])
    def test_non_string_rejected_by_pydantic(self, value: object) -> None:
        with pytest.raises(pydantic.ValidationError):
            decode_shape_field(value)


class TestShapedLegValidation:
    """ShapedLeg.model_validate decodes the shape field."""

    def test_decodes_golden_shape(self, germany_shape: tuple[str, list[ShapePoint]]) -> None:
        encoded, expected = germany_shape
        leg = ShapedLeg.model_validate({"shape_format": "polyline6", "shape": encoded})
        assert leg.shape == expected
        assert leg.point_count == 71

    def test_format_defaults_to_polyline6(self) -> None:
        leg = ShapedLeg.model_validate({"shape": "??"})
        assert leg.shape_format is ShapeFormat.POLYLINE6

    def test_missing_shape(self) -> None:
        leg = ShapedLeg.model_validate({"shape_format": "no_shape"})
        assert leg.shape is None
        assert leg.point_count == 0

    def test_non_string_shape_is_pydantic_error(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ShapedLeg.model_validate({"shape": 12345})

    def test_truncated_shape_propagates(self, america_shape: tuple[str, list[ShapePoint]]) -> None:
        encoded, _ = america_shape
        with pytest.raises(TruncatedFieldError):
            ShapedLeg.model_validate({"shape": encoded[:-1]})

    def test_empty_shape_propagates(self) -> None:
        with pytest.raises(EmptyShapeError):
            ShapedLeg.model_validate({"shape": ""})

    def test_invalid_character_propagates(self) -> None:
        with pytest.raises(InvalidCharacterError):
            ShapedLeg.model_validate_json('{"shape": "?? "}')

    @pytest.mark.parametrize("declared", ["polyline5", "geojson", ShapeFormat.POLYLINE5])
    def test_unsupported_format_with_shape(self, declared: object) -> None:
        with pytest.raises(UnsupportedShapeFormatError) as exc_info:
            ShapedLeg.model_validate({"shape_format": declared, "shape": "??"})
        assert exc_info.value.stage == "deserialize_shape"

    def test_unknown_format_is_pydantic_error(self) -> None:
        with pytest.raises(pydantic.ValidationError):
            ShapedLeg.model_validate({"shape_format": "wkt"})

    def test_frozen(self) -> None:
        leg = ShapedLeg.model_validate({"shape": "??"})
        with pytest.raises(pydantic.ValidationError):
            leg.shape = None  # type: ignore[misc]


class TestShapedLegSerialisation:
    """Decoded shapes serialise as lon/lat objects."""

    def test_model_dump(self) -> None:
        leg = ShapedLeg.model_validate({"shape": "????"})
        dumped = leg.model_dump()
        assert dumped["shape_format"] is ShapeFormat.POLYLINE6
        assert dumped["shape"] == [{"lon": 0.0, "lat": 0.0}, {"lon": 0.0, "lat": 0.0}]

    def test_model_dump_json_mode(self) -> None:
        leg = ShapedLeg.model_validate({"shape_format": "no_shape"})
        assert leg.model_dump(mode="json") == {"shape_format": "no_shape", "shape": None}
