from __future__ import annotations

import math
from dataclasses import dataclass
from typing import List, Tuple

from catan_board.domain.board import Board, Port

from .hexes import GeometryConfig, Point, cell_center, edge_corner_indices, hex_corner

Segment = Tuple[Point, Point]

DEFAULT_PORT_DIRECTION: Point = (0.0, -1.0)


@dataclass(frozen=True)
class PortAnchor:
    port: Port
    corners: Tuple[Point, Point]
    edge_midpoint: Point
    anchor: Point
    connectors: Tuple[Segment, Segment]


def outward_direction(origin_point: Point, target_point: Point) -> Point:
    """Unit vector from ``origin_point`` towards ``target_point``.

    Coincident points have no direction; ``DEFAULT_PORT_DIRECTION`` is used.
    """
    dx = target_point[0] - origin_point[0]
    dy = target_point[1] - origin_point[1]
    length = math.hypot(dx, dy)
    if length == 0.0 or not math.isfinite(length):
        return DEFAULT_PORT_DIRECTION
    return (dx / length, dy / length)


def derive_port_anchor(port: Port, board: Board, config: GeometryConfig = GeometryConfig()) -> PortAnchor:
    cell = board.get_cell(port.hex_index)
    center = cell_center(cell.coord, config.hex_size, config.origin)
    first_index, second_index = edge_corner_indices(port.edge_index)
    first = hex_corner(center, config.hex_size, first_index)
    second = hex_corner(center, config.hex_size, second_index)

    midpoint = ((first[0] + second[0]) / 2, (first[1] + second[1]) / 2)
    dir_x, dir_y = outward_direction(center, midpoint)
    anchor = (
        midpoint[0] + dir_x * config.port_offset,
        midpoint[1] + dir_y * config.port_offset,
    )
    return PortAnchor(
        port=port,
        corners=(first, second),
        edge_midpoint=midpoint,
        anchor=anchor,
        connectors=((first, anchor), (second, anchor)),
    )


def derive_port_anchors(board: Board, config: GeometryConfig = GeometryConfig()) -> List[PortAnchor]:
    return [derive_port_anchor(port, board, config) for port in board.ports]
