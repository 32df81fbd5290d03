"""Route shape decoding.

Decodes polyline6-encoded route geometry into WGS 84 ``ShapePoint``
sequences and converts those points for geometry (shapely) and compact
storage (float32) consumers.
"""

__version__ = "0.1.0"
