from __future__ import annotations

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence, Tuple

from .layout import LAYOUT, PORT_SITES, AxialCoord, PortSite

TOKEN_NUMBERS = frozenset({2, 3, 4, 5, 6, 8, 9, 10, 11, 12})


class Resource(str, Enum):
    WOOD = "wood"
    BRICK = "brick"
    SHEEP = "sheep"
    WHEAT = "wheat"
    ORE = "ore"
    DESERT = "desert"


class PortType(str, Enum):
    GENERIC = "generic"
    WOOD = "wood"
    BRICK = "brick"
    SHEEP = "sheep"
    WHEAT = "wheat"
    ORE = "ore"

    @property
    def resource(self) -> Optional[Resource]:
        if self is PortType.GENERIC:
            return None
        return Resource(self.value)

    @property
    def trade_ratio(self) -> int:
        return 3 if self is PortType.GENERIC else 2

    @property
    def ratio_label(self) -> str:
        return f"{self.trade_ratio}:1"


RESOURCE_COUNTS: Dict[Resource, int] = {
    Resource.WOOD: 4,
    Resource.BRICK: 3,
    Resource.SHEEP: 4,
    Resource.WHEAT: 4,
    Resource.ORE: 3,
    Resource.DESERT: 1,
}

NUMBER_TOKENS = [2, 3, 3, 4, 4, 5, 5, 6, 6, 8, 8, 9, 9, 10, 10, 11, 11, 12]

PORT_TYPE_COUNTS: Dict[PortType, int] = {
    PortType.GENERIC: 4,
    PortType.WOOD: 1,
    PortType.BRICK: 1,
    PortType.SHEEP: 1,
    PortType.WHEAT: 1,
    PortType.ORE: 1,
}


@dataclass(frozen=True)
class Cell:
    id: int
    coord: AxialCoord
    resource: Resource
    number: Optional[int]

    @property
    def q(self) -> int:
        return self.coord.q

    @property
    def r(self) -> int:
        return self.coord.r

    @property
    def is_desert(self) -> bool:
        return self.resource is Resource.DESERT


@dataclass(frozen=True)
class Port:
    site: PortSite
    port_type: PortType

    @property
    def hex_index(self) -> int:
        return self.site.hex_index

    @property
    def edge_index(self) -> int:
        return self.site.edge_index


@dataclass(frozen=True)
class Board:
    cells: Tuple[Cell, ...]
    ports: Tuple[Port, ...]
    _cell_lookup: Dict[int, Cell] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "_cell_lookup", {cell.id: cell for cell in self.cells})

    def get_cell(self, cell_id: int) -> Cell:
        try:
            return self._cell_lookup[cell_id]
        except KeyError:
            raise ValueError(f"Unknown cell id: {cell_id}.") from None

    @property
    def desert(self) -> Cell:
        desert = next((cell for cell in self.cells if cell.is_desert), None)
        if desert is None:
            raise ValueError("Board has no desert cell.")
        return desert

    def numbers(self) -> List[int]:
        return [cell.number for cell in self.cells if cell.number is not None]


def build_board(
    resource_order: Sequence[Resource],
    token_order: Sequence[int],
    port_order: Optional[Sequence[PortType]] = None,
) -> Board:
    """Assemble a board from explicit resource, token and port orders.

    Each order must be a permutation of the standard set. Tokens are
    consumed in cell order, skipping the desert.
    """
    resources = list(resource_order)
    numbers = list(token_order)
    port_types = list(port_order) if port_order is not None else _default_port_order()

    if len(resources) != len(LAYOUT):
        raise ValueError(f"Expected {len(LAYOUT)} resources, received {len(resources)}.")

    if Counter(resources) != Counter(RESOURCE_COUNTS):
        raise ValueError(f"Resources must follow the standard counts {_format_counts(RESOURCE_COUNTS)}.")

    if len(numbers) != len(NUMBER_TOKENS):
        raise ValueError(f"Expected {len(NUMBER_TOKENS)} number tokens, received {len(numbers)}.")

    invalid_numbers = sorted({number for number in numbers if number not in TOKEN_NUMBERS})
    if invalid_numbers:
        raise ValueError(f"Invalid number tokens: {invalid_numbers}.")

    if sorted(numbers) != NUMBER_TOKENS:
        raise ValueError(f"Number tokens must be a permutation of {NUMBER_TOKENS}, received {sorted(numbers)}.")

    if len(port_types) != len(PORT_SITES):
        raise ValueError(f"Expected {len(PORT_SITES)} port types, received {len(port_types)}.")

    if Counter(port_types) != Counter(PORT_TYPE_COUNTS):
        raise ValueError(f"Port types must follow the standard counts {_format_counts(PORT_TYPE_COUNTS)}.")

    cells: List[Cell] = []
    number_index = 0
    for cell_id, coord in enumerate(LAYOUT):
        resource = resources[cell_id]
        if resource is Resource.DESERT:
            number = None
        else:
            number = numbers[number_index]
            number_index += 1
        cells.append(Cell(id=cell_id, coord=coord, resource=resource, number=number))

    ports = tuple(Port(site=site, port_type=port_type) for site, port_type in zip(PORT_SITES, port_types))
    return Board(cells=tuple(cells), ports=ports)


def _default_port_order() -> List[PortType]:
    return [
        PortType.GENERIC,
        PortType.BRICK,
        PortType.GENERIC,
        PortType.ORE,
        PortType.GENERIC,
        PortType.SHEEP,
        PortType.GENERIC,
        PortType.WHEAT,
        PortType.WOOD,
    ]


def _format_counts(counts: Dict) -> str:
    return "{" + ", ".join(f"{item.value}: {count}" for item, count in counts.items()) + "}"
