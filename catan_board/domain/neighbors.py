from __future__ import annotations

from typing import Dict, Sequence, Tuple

from .layout import AXIAL_DIRECTIONS, LAYOUT, AxialCoord

NeighborIndex = Tuple[Tuple[int, ...], ...]


def build_neighbor_index(layout: Sequence[AxialCoord]) -> NeighborIndex:
    """Map each layout index to the indices one unit step away.

    Neighbours are listed in ``AXIAL_DIRECTIONS`` order; steps leaving the
    layout are dropped, so coastal cells have fewer than six entries.
    """
    index_by_coord: Dict[AxialCoord, int] = {coord: index for index, coord in enumerate(layout)}
    neighbors = []
    for coord in layout:
        found = []
        for step in AXIAL_DIRECTIONS:
            neighbor_index = index_by_coord.get(coord + step)
            if neighbor_index is not None:
                found.append(neighbor_index)
        neighbors.append(tuple(found))
    return tuple(neighbors)


NEIGHBORS: NeighborIndex = build_neighbor_index(LAYOUT)


def neighbor_indices(cell_index: int) -> Tuple[int, ...]:
    if not 0 <= cell_index < len(NEIGHBORS):
        raise ValueError(f"Unknown cell index: {cell_index}.")
    return NEIGHBORS[cell_index]


def are_adjacent(first_index: int, second_index: int) -> bool:
    return second_index in neighbor_indices(first_index)
