from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

from catan_board.domain.layout import EDGE_COUNT, AxialCoord

Point = Tuple[float, float]
LatticeKey = Tuple[int, int]

DEFAULT_HEX_SIZE = 60.0
DEFAULT_PORT_OFFSET = 35.0
SQRT3 = math.sqrt(3)

# Corner i of a point-topped hex sits at 60*i - 30 degrees. In units of
# (size * sqrt(3) / 2, size / 2) every corner lands on an integer lattice.
CORNER_LATTICE_OFFSETS: Tuple[LatticeKey, ...] = (
    (1, -1),
    (1, 1),
    (0, 2),
    (-1, 1),
    (-1, -1),
    (0, -2),
)


class InvalidHexSize(ValueError):
    """Raised when a hex size is not a finite positive number."""


def validate_hex_size(hex_size: float) -> float:
    if isinstance(hex_size, bool) or not isinstance(hex_size, (int, float)):
        raise InvalidHexSize(f"Hex size must be a number, received {hex_size!r}.")
    if not math.isfinite(hex_size) or hex_size <= 0:
        raise InvalidHexSize(f"Hex size must be positive and finite, received {hex_size!r}.")
    return float(hex_size)


@dataclass(frozen=True)
class GeometryConfig:
    hex_size: float = DEFAULT_HEX_SIZE
    origin: Point = (0.0, 0.0)
    port_offset: float = DEFAULT_PORT_OFFSET

    def __post_init__(self) -> None:
        validate_hex_size(self.hex_size)
        if isinstance(self.port_offset, bool) or not isinstance(self.port_offset, (int, float)):
            raise ValueError(f"port_offset must be a number, received {self.port_offset!r}.")
        if not math.isfinite(self.port_offset) or self.port_offset < 0:
            raise ValueError(f"port_offset must be non-negative, received {self.port_offset!r}.")


def cell_center(coord: AxialCoord, hex_size: float, origin: Point = (0.0, 0.0)) -> Point:
    size = validate_hex_size(hex_size)
    x = size * (SQRT3 * coord.q + SQRT3 / 2 * coord.r)
    y = size * (1.5 * coord.r)
    return (origin[0] + x, origin[1] + y)


def hex_corner(center: Point, hex_size: float, corner_index: int) -> Point:
    size = validate_hex_size(hex_size)
    _check_corner_index(corner_index)
    angle_rad = math.radians(60 * corner_index - 30)
    return (
        center[0] + size * math.cos(angle_rad),
        center[1] + size * math.sin(angle_rad),
    )


def hex_corners(center: Point, hex_size: float) -> Tuple[Point, ...]:
    return tuple(hex_corner(center, hex_size, corner_index) for corner_index in range(EDGE_COUNT))


def corner_lattice_key(coord: AxialCoord, corner_index: int) -> LatticeKey:
    _check_corner_index(corner_index)
    dx, dy = CORNER_LATTICE_OFFSETS[corner_index]
    return (2 * coord.q + coord.r + dx, 3 * coord.r + dy)


def lattice_point(key: LatticeKey, hex_size: float, origin: Point = (0.0, 0.0)) -> Point:
    size = validate_hex_size(hex_size)
    return (
        origin[0] + key[0] * size * SQRT3 / 2,
        origin[1] + key[1] * size / 2,
    )


def edge_corner_indices(edge_index: int) -> Tuple[int, int]:
    _check_corner_index(edge_index)
    return (edge_index, (edge_index + 1) % EDGE_COUNT)


def _check_corner_index(index: int) -> None:
    if not 0 <= index < EDGE_COUNT:
        raise ValueError(f"Corner and edge indices must be in [0, {EDGE_COUNT - 1}], received {index}.")
