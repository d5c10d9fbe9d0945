from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional

from catan_board.domain.board import Cell

if TYPE_CHECKING:
    from catan_board.geometry.intersections import IntersectionVertex

PIP_VALUES = {
    2: 1,
    3: 2,
    4: 3,
    5: 4,
    6: 5,
    8: 5,
    9: 4,
    10: 3,
    11: 2,
    12: 1,
}


def pip_value(token_number: Optional[int]) -> int:
    if token_number is None:
        return 0
    return PIP_VALUES.get(token_number, 0)


def cell_pips(cell: Cell) -> int:
    return pip_value(cell.number)


def rank_intersections(
    vertices: Iterable["IntersectionVertex"],
    *,
    top_n: Optional[int] = None,
) -> List["IntersectionVertex"]:
    """Order intersections best-first for settlement placement.

    Higher pip totals win, then wider resource variety, then the lower id so
    the ordering is stable across runs.
    """
    ranked = sorted(
        vertices,
        key=lambda vertex: (-vertex.total_pips, -len(vertex.resource_counts), vertex.id),
    )
    if top_n is not None:
        if top_n < 0:
            raise ValueError(f"top_n must be non-negative, received {top_n}.")
        return ranked[:top_n]
    return ranked
