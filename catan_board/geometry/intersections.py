from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, List, Mapping, Optional, Tuple

from catan_board.analysis.scoring import pip_value
from catan_board.domain.board import Board, Cell, PortType, Resource
from catan_board.domain.layout import EDGE_COUNT

from .hexes import GeometryConfig, LatticeKey, Point, corner_lattice_key, edge_corner_indices, lattice_point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class IntersectionVertex:
    id: int
    position: Point
    lattice_key: LatticeKey
    incident_cells: Tuple[Cell, ...]
    total_pips: int
    resource_counts: Mapping[Resource, int]
    adjacent_vertex_ids: Tuple[int, ...]
    port_type: Optional[PortType] = None

    @property
    def incident_cell_ids(self) -> Tuple[int, ...]:
        return tuple(cell.id for cell in self.incident_cells)

    @property
    def resources(self) -> Tuple[Resource, ...]:
        return tuple(sorted(self.resource_counts, key=lambda resource: resource.value))


def derive_intersections(board: Board, config: GeometryConfig = GeometryConfig()) -> List[IntersectionVertex]:
    """Merge the corners of every cell into shared intersection vertices.

    Corners are matched on their integer lattice key, so two corners merge
    exactly when they coincide. Ids follow discovery order: cell by cell,
    corner by corner.
    """
    vertex_lookup: Dict[LatticeKey, int] = {}
    vertex_keys: List[LatticeKey] = []
    vertex_cells: List[List[Cell]] = []
    vertex_neighbors: List[set[int]] = []
    cell_vertex_ids: Dict[int, Tuple[int, ...]] = {}

    for cell in board.cells:
        corner_ids: List[int] = []
        for corner_index in range(EDGE_COUNT):
            key = corner_lattice_key(cell.coord, corner_index)
            vertex_id = vertex_lookup.get(key)
            if vertex_id is None:
                vertex_id = len(vertex_keys)
                vertex_lookup[key] = vertex_id
                vertex_keys.append(key)
                vertex_cells.append([])
                vertex_neighbors.append(set())
            corner_ids.append(vertex_id)
            vertex_cells[vertex_id].append(cell)

        for first, second in zip(corner_ids, corner_ids[1:] + corner_ids[:1]):
            vertex_neighbors[first].add(second)
            vertex_neighbors[second].add(first)
        cell_vertex_ids[cell.id] = tuple(corner_ids)

    port_types: Dict[int, PortType] = {}
    for port in board.ports:
        corner_ids = cell_vertex_ids[port.hex_index]
        for corner_index in edge_corner_indices(port.edge_index):
            port_types.setdefault(corner_ids[corner_index], port.port_type)

    vertices: List[IntersectionVertex] = []
    for vertex_id, key in enumerate(vertex_keys):
        cells = tuple(vertex_cells[vertex_id])
        resource_counts: Dict[Resource, int] = {}
        for cell in cells:
            if cell.resource is not Resource.DESERT:
                resource_counts[cell.resource] = resource_counts.get(cell.resource, 0) + 1
        vertices.append(
            IntersectionVertex(
                id=vertex_id,
                position=lattice_point(key, config.hex_size, config.origin),
                lattice_key=key,
                incident_cells=cells,
                total_pips=sum(pip_value(cell.number) for cell in cells),
                resource_counts=resource_counts,
                adjacent_vertex_ids=tuple(sorted(vertex_neighbors[vertex_id])),
                port_type=port_types.get(vertex_id),
            )
        )

    logger.debug("Derived %d intersections from %d cells", len(vertices), len(board.cells))
    return vertices


def shared_intersections(
    vertices: List[IntersectionVertex],
    first_cell_id: int,
    second_cell_id: int,
) -> List[IntersectionVertex]:
    return [
        vertex
        for vertex in vertices
        if first_cell_id in vertex.incident_cell_ids and second_cell_id in vertex.incident_cell_ids
    ]
