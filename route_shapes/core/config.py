"""Shape-codec configuration loaded from environment variables.

Defaults reproduce the reference decoder exactly: open-interval WGS 84
bounds.  Services that need to accept geometry touching the poles or
the antimeridian opt in with ``SHAPE_BOUNDS_POLICY=inclusive``.

The polyline6 scale (1e-6 degrees) is part of the format and is not
configurable; see ``route_shapes.core.constants.POLYLINE6_INVERSE_SCALE``.

Fail-fast validation:
    Every ``ShapeConfig`` is validated on construction, so a bad value
    raises ``ConfigValidationError`` whether it comes from the
    environment (``from_env()``) or from code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from route_shapes.core.constants import (
    BOUNDS_EXCLUSIVE,
    BOUNDS_INCLUSIVE,
    BOUNDS_POLICIES,
    DEFAULT_MAX_ENCODED_LENGTH,
)
from route_shapes.core.exceptions import ValidationError


class ConfigValidationError(ValidationError):
    """Raised when configuration values are out of valid range.

    Attributes:
        key: The setting (environment variable name) that failed validation.
        value: The invalid value.
    """

    default_stage = "config"
    default_code = "CONFIG_VALIDATION_FAILED"

    def __init__(self, key: str, value: object, message: str) -> None:
        self.key = key
        self.value = value
        super().__init__(f"Invalid configuration {key}={value!r}: {message}")


@dataclass(frozen=True, slots=True)
class ShapeConfig:
    """Immutable decoder configuration.

    Build one at service startup and pass it to every decode call.

    Attributes:
        bounds_policy: ``"exclusive"`` rejects lat ±90 and lon ±180 exactly;
            ``"inclusive"`` accepts them.  Must be lower case.
        max_encoded_length: Longest encoded string accepted, in characters.
    """

    bounds_policy: str = BOUNDS_EXCLUSIVE
    max_encoded_length: int = DEFAULT_MAX_ENCODED_LENGTH

    def __post_init__(self) -> None:
        _validate(self)

    @property
    def inclusive_bounds(self) -> bool:
        return self.bounds_policy == BOUNDS_INCLUSIVE

    @classmethod
    def from_env(cls) -> ShapeConfig:
        """Load and validate configuration from environment variables.

        ``SHAPE_BOUNDS_POLICY`` is case-insensitive here.

        Raises:
            ConfigValidationError: If a value is out of range or unknown.
            ValueError: If ``SHAPE_MAX_ENCODED_LENGTH`` is not an integer.
        """
        return cls(
            bounds_policy=os.getenv("SHAPE_BOUNDS_POLICY", BOUNDS_EXCLUSIVE).strip().lower(),
            max_encoded_length=int(
                os.getenv("SHAPE_MAX_ENCODED_LENGTH", str(DEFAULT_MAX_ENCODED_LENGTH))
            ),
        )


def _validate(config: ShapeConfig) -> None:
    """Validate configuration ranges.  Raises ``ConfigValidationError``."""
    if config.bounds_policy not in BOUNDS_POLICIES:
        raise ConfigValidationError(
            "SHAPE_BOUNDS_POLICY",
            config.bounds_policy,
            f"must be one of {', '.join(sorted(BOUNDS_POLICIES))}",
        )

    if config.max_encoded_length <= 0:
        raise ConfigValidationError(
            "SHAPE_MAX_ENCODED_LENGTH",
            config.max_encoded_length,
            "must be > 0 (characters)",
        )
