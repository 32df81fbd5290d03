"""Shared shape-codec constants.

Centralises the polyline wire-format numbers and WGS 84 bounds that the
decoder, the conversions and the configuration layer all agree on.
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Polyline wire format
# ---------------------------------------------------------------------------

POLYLINE_CHAR_OFFSET: int = 63
"""Printable-ASCII offset subtracted from every encoded character."""

POLYLINE_CHUNK_BITS: int = 5
"""Number of data bits carried by a single encoded character."""

POLYLINE_CHUNK_MASK: int = 0x1F
POLYLINE_CONTINUATION_BIT: int = 0x20

MIN_ENCODED_CHAR: int = POLYLINE_CHAR_OFFSET
MAX_ENCODED_CHAR: int = POLYLINE_CHAR_OFFSET + (POLYLINE_CONTINUATION_BIT | POLYLINE_CHUNK_MASK)

POLYLINE6_INVERSE_SCALE: float = 1.0 / 1e6
"""Degrees per encoded unit: polyline6 (Valhalla / OSRM) stores six decimal digits."""

DEFAULT_MAX_ENCODED_LENGTH: int = 1_000_000

# ---------------------------------------------------------------------------
# WGS 84 coordinate bounds
# ---------------------------------------------------------------------------

MIN_LONGITUDE = -180.0
MAX_LONGITUDE = 180.0
MIN_LATITUDE = -90.0
MAX_LATITUDE = 90.0

BOUNDS_EXCLUSIVE: str = "exclusive"
BOUNDS_INCLUSIVE: str = "inclusive"
BOUNDS_POLICIES: frozenset[str] = frozenset({BOUNDS_EXCLUSIVE, BOUNDS_INCLUSIVE})
