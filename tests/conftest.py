"""Shared pytest fixtures for the route_shapes test suite."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from route_shapes.models.shape import ShapePoint

# ---------------------------------------------------------------------------
# Path fixtures
# ---------------------------------------------------------------------------

TESTS_DIR = Path(__file__).parent
DATA_DIR = TESTS_DIR / "data"


@pytest.fixture()
def data_dir() -> Path:
    """Return the path to the test data directory."""
    return DATA_DIR


def _load_shape(name: str) -> tuple[str, list[ShapePoint]]:
    """Load an encoded shape and its expected ``[lon, lat]`` points."""
    raw = json.loads((DATA_DIR / name).read_text(encoding="utf-8"))
    expected = [ShapePoint(lon=lon, lat=lat) for lon, lat in raw["expected"]]
    return raw["encoded"], expected


# ---------------------------------------------------------------------------
# Golden shape fixtures (Valhalla optimized_route output, polyline6)
# ---------------------------------------------------------------------------


@pytest.fixture()
def america_shape() -> tuple[str, list[ShapePoint]]:
    """York County, Pennsylvania route: 180 points."""
    return _load_shape("shape_america.json")


@pytest.fixture()
def germany_shape() -> tuple[str, list[ShapePoint]]:
    """Garching bei München route: 71 points."""
    return _load_shape("shape_germany.json")


# ---------------------------------------------------------------------------
# Hand-encoded edge-case shapes
# ---------------------------------------------------------------------------

# "?" encodes a zero delta, so "??" is the single point (0, 0).
ORIGIN_SHAPE = "??"

# Latitude delta +90_000_000 (exactly 90 degrees), longitude delta 0.
NORTH_POLE_SHAPE = "_gdtjD?"

# Latitude delta 0, longitude delta -180_000_000 (exactly -180 degrees).
ANTIMERIDIAN_SHAPE = "?~niivI"

# Latitude delta +90_000_001 (one micro-degree past the pole).
PAST_POLE_SHAPE = "agdtjD?"


@pytest.fixture()
def origin_shape() -> str:
    return ORIGIN_SHAPE


@pytest.fixture()
def north_pole_shape() -> str:
    return NORTH_POLE_SHAPE


@pytest.fixture()
def antimeridian_shape() -> str:
    return ANTIMERIDIAN_SHAPE


@pytest.fixture()
def past_pole_shape() -> str:
    return PAST_POLE_SHAPE
