from __future__ import annotations

import logging
import random
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Protocol, Sequence

from .board import NUMBER_TOKENS, PORT_TYPE_COUNTS, RESOURCE_COUNTS, Board, Resource, build_board
from .neighbors import NEIGHBORS

logger = logging.getLogger(__name__)

RED_TOKEN_NUMBERS = {6, 8}

MAX_RANDOMIZATION_ATTEMPTS = 1_000


class Shuffler(Protocol):
    def shuffle(self, x: List) -> None: ...


@dataclass(frozen=True)
class GenerationConfig:
    max_attempts: int = MAX_RANDOMIZATION_ATTEMPTS
    strict: bool = False

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, received {self.max_attempts}.")


@dataclass(frozen=True)
class GenerationResult:
    board: Board
    satisfied: bool
    attempts: int


class ConstraintUnsatisfied(RuntimeError):
    """Raised in strict mode when no token layout keeps 6s and 8s apart."""

    def __init__(self, result: GenerationResult) -> None:
        super().__init__(
            "Unable to separate red number tokens "
            f"after {result.attempts} attempts."
        )
        self.result = result


def generate_board(
    rng: Optional[Shuffler] = None,
    *,
    seed: Optional[int] = None,
    config: GenerationConfig = GenerationConfig(),
) -> Board:
    return generate_board_with_report(rng, seed=seed, config=config).board


def generate_board_with_report(
    rng: Optional[Shuffler] = None,
    *,
    seed: Optional[int] = None,
    config: GenerationConfig = GenerationConfig(),
) -> GenerationResult:
    """Generate a fresh board and report whether the 6/8 rule was met.

    Resources are shuffled once; number tokens are reshuffled until no two
    red tokens touch or ``config.max_attempts`` is spent. On exhaustion the
    last assignment is kept and a warning is logged, unless ``config.strict``
    asks for :class:`ConstraintUnsatisfied` instead.
    """
    if rng is None:
        rng = random.Random(seed)

    resources = _pool(RESOURCE_COUNTS)
    rng.shuffle(resources)

    numbers: List[int] = []
    satisfied = False
    attempts = 0
    while attempts < config.max_attempts:
        attempts += 1
        numbers = NUMBER_TOKENS[:]
        rng.shuffle(numbers)
        if red_tokens_separated(resources, numbers):
            satisfied = True
            break

    port_types = _pool(PORT_TYPE_COUNTS)
    rng.shuffle(port_types)

    board = build_board(resource_order=resources, token_order=numbers, port_order=port_types)
    result = GenerationResult(board=board, satisfied=satisfied, attempts=attempts)

    if satisfied:
        logger.debug("Red token spacing satisfied after %d attempt(s)", attempts)
        return result

    if config.strict:
        raise ConstraintUnsatisfied(result)
    logger.warning(
        "Could not separate red number tokens in %d attempts; keeping the last assignment",
        attempts,
    )
    return result


def assign_numbers(resources: Sequence[Resource], numbers: Sequence[int]) -> List[Optional[int]]:
    """Spread ``numbers`` over the non-desert cells in index order."""
    assignment: List[Optional[int]] = []
    remaining = iter(numbers)
    for resource in resources:
        if resource is Resource.DESERT:
            assignment.append(None)
        else:
            assignment.append(next(remaining))
    return assignment


def red_tokens_separated(resources: Sequence[Resource], numbers: Sequence[int]) -> bool:
    assignment = assign_numbers(resources, numbers)
    for cell_index, number in enumerate(assignment):
        if number not in RED_TOKEN_NUMBERS:
            continue
        for neighbor_index in NEIGHBORS[cell_index]:
            if assignment[neighbor_index] in RED_TOKEN_NUMBERS:
                return False
    return True


def validate_standard_counts(board: Board) -> bool:
    resource_counts: Dict[Resource, int] = {resource: 0 for resource in RESOURCE_COUNTS}
    numbers = []
    for cell in board.cells:
        resource_counts[cell.resource] += 1
        if cell.resource is Resource.DESERT:
            if cell.number is not None:
                return False
        elif cell.number is None:
            return False
        else:
            numbers.append(cell.number)

    if resource_counts != RESOURCE_COUNTS:
        return False

    return sorted(numbers) == sorted(NUMBER_TOKENS)


def validate_red_token_spacing(board: Board) -> bool:
    red_cell_ids = {cell.id for cell in board.cells if cell.number in RED_TOKEN_NUMBERS}
    for cell_id in red_cell_ids:
        if red_cell_ids.intersection(NEIGHBORS[cell_id]):
            return False
    return True


def validate_port_types(board: Board) -> bool:
    return Counter(port.port_type for port in board.ports) == Counter(PORT_TYPE_COUNTS)


def _pool(counts: Dict) -> List:
    pool = []
    for item, count in counts.items():
        pool.extend([item] * count)
    return pool
