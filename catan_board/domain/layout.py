from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple

BOARD_RADIUS = 2
EDGE_COUNT = 6


@dataclass(frozen=True)
class AxialCoord:
    q: int
    r: int

    @property
    def s(self) -> int:
        return -self.q - self.r

    def __add__(self, other: "AxialCoord") -> "AxialCoord":
        return AxialCoord(self.q + other.q, self.r + other.r)

    def as_tuple(self) -> Tuple[int, int, int]:
        return (self.q, self.r, self.s)


@dataclass(frozen=True)
class PortSite:
    hex_index: int
    edge_index: int


AXIAL_DIRECTIONS: Tuple[AxialCoord, ...] = (
    AxialCoord(1, 0),
    AxialCoord(1, -1),
    AxialCoord(0, -1),
    AxialCoord(-1, 0),
    AxialCoord(-1, 1),
    AxialCoord(0, 1),
)


def generate_axial_coords(radius: int) -> List[AxialCoord]:
    """Return every coordinate within ``radius`` of the origin, row-major.

    Rows run top to bottom (increasing ``r``) and each row left to right, so
    for radius 2 the centre hex lands on index 9.
    """
    if radius < 0:
        raise ValueError(f"Board radius must be non-negative, received {radius}.")

    coords: List[AxialCoord] = []
    for q in range(-radius, radius + 1):
        r_min = max(-radius, -q - radius)
        r_max = min(radius, -q + radius)
        for r in range(r_min, r_max + 1):
            coords.append(AxialCoord(q, r))
    coords.sort(key=lambda item: (item.r, item.q))
    return coords


LAYOUT: Tuple[AxialCoord, ...] = tuple(generate_axial_coords(BOARD_RADIUS))
CENTER_INDEX = LAYOUT.index(AxialCoord(0, 0))

# Clockwise from the top-left coast.
PORT_SITES: Tuple[PortSite, ...] = (
    PortSite(hex_index=0, edge_index=4),
    PortSite(hex_index=1, edge_index=5),
    PortSite(hex_index=6, edge_index=0),
    PortSite(hex_index=11, edge_index=1),
    PortSite(hex_index=15, edge_index=1),
    PortSite(hex_index=18, edge_index=2),
    PortSite(hex_index=16, edge_index=3),
    PortSite(hex_index=12, edge_index=3),
    PortSite(hex_index=3, edge_index=4),
)
