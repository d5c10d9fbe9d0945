"""Randomized board generation and geometry for a 19-hex trading board."""

from catan_board.domain import Board, GenerationConfig, build_board, generate_board
from catan_board.geometry import GeometryConfig, derive_intersections, derive_port_anchors

__all__ = [
    "Board",
    "GenerationConfig",
    "GeometryConfig",
    "build_board",
    "derive_intersections",
    "derive_port_anchors",
    "generate_board",
]
