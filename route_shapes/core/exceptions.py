"""Shape-codec exception hierarchy.

Every error raised by ``route_shapes`` derives from ``ShapeError`` and
carries the structured context a caller needs to route it: which stage
failed and a machine-readable code.

Decoding is a pure, single-pass computation, so no error here is
retryable.  Errors fall into two categories:

- ``ValidationError``: the input (an encoded shape, a point, a setting)
  is malformed or breaks an invariant.
- ``ContractError``: the caller asked for something this package does
  not support, such as decoding a ``polyline5`` shape.
"""

from __future__ import annotations


class ShapeError(Exception):
    """Base exception for all shape-codec errors.

    Attributes:
        message: Human-readable error description.
        stage: Component that raised the error
            (e.g. ``"decode_polyline6"``, ``"config"``).
        code: Machine-readable error code (e.g. ``"SHAPE_TRUNCATED_FIELD"``).
        correlation_id: Optional caller-supplied identifier (feed, trip, leg).
    """

    #: Stage used when none is passed explicitly.
    default_stage: str = ""
    #: Code used when none is passed explicitly.
    default_code: str = ""
    #: Category reported by ``to_error_dict()``.
    category: str = "validation"

    def __init__(
        self,
        message: str = "",
        *,
        stage: str = "",
        code: str = "",
        correlation_id: str = "",
    ) -> None:
        self.message = message
        self.stage = stage or self.default_stage
        self.code = code or self.default_code
        self.correlation_id = correlation_id
        super().__init__(message)

    def to_error_dict(self) -> dict[str, object]:
        """Return the error as a dict with a fixed key set, for logs and API bodies."""
        return {
            "category": self.category,
            "code": self.code,
            "stage": self.stage,
            "message": self.message,
            "correlation_id": self.correlation_id,
        }


class ValidationError(ShapeError):
    """Malformed input or violated invariant."""

    category = "validation"


class ContractError(ShapeError):
    """Request outside the supported contract."""

    category = "contract"


class UnsupportedShapeFormatError(ContractError):
    """Raised when a shape is declared in a format this package cannot decode."""

    default_stage = "decode_shape"
    default_code = "SHAPE_FORMAT_UNSUPPORTED"


class ShapeValidationError(ValidationError):
    """Raised when decoded points cannot be turned into the requested geometry."""

    default_stage = "convert"
    default_code = "SHAPE_VALIDATION_FAILED"
