"""Board layout, data model and randomized generation."""

from .board import Board, Cell, Port, PortType, Resource, build_board
from .layout import AXIAL_DIRECTIONS, LAYOUT, PORT_SITES, AxialCoord, PortSite
from .neighbors import NEIGHBORS, are_adjacent, neighbor_indices
from .randomizer import (
    ConstraintUnsatisfied,
    GenerationConfig,
    GenerationResult,
    generate_board,
    generate_board_with_report,
    validate_port_types,
    validate_red_token_spacing,
    validate_standard_counts,
)

__all__ = [
    "AXIAL_DIRECTIONS",
    "LAYOUT",
    "NEIGHBORS",
    "PORT_SITES",
    "AxialCoord",
    "Board",
    "Cell",
    "ConstraintUnsatisfied",
    "GenerationConfig",
    "GenerationResult",
    "Port",
    "PortSite",
    "PortType",
    "Resource",
    "are_adjacent",
    "build_board",
    "generate_board",
    "generate_board_with_report",
    "neighbor_indices",
    "validate_port_types",
    "validate_red_token_spacing",
    "validate_standard_counts",
]
