"""Pixel-space geometry derived from a generated board."""

from .hexes import GeometryConfig, InvalidHexSize, cell_center, hex_corner, hex_corners
from .intersections import IntersectionVertex, derive_intersections, shared_intersections
from .ports import DEFAULT_PORT_DIRECTION, PortAnchor, derive_port_anchor, derive_port_anchors, outward_direction

__all__ = [
    "DEFAULT_PORT_DIRECTION",
    "GeometryConfig",
    "IntersectionVertex",
    "InvalidHexSize",
    "PortAnchor",
    "cell_center",
    "derive_intersections",
    "derive_port_anchor",
    "derive_port_anchors",
    "hex_corner",
    "hex_corners",
    "outward_direction",
    "shared_intersections",
]
