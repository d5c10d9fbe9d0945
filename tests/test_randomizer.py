import random
import unittest
from collections import Counter

from catan_board.domain.board import Board, PortType, Resource, build_board
from catan_board.domain.neighbors import NEIGHBORS
from catan_board.domain.randomizer import (
    NUMBER_TOKENS,
    PORT_TYPE_COUNTS,
    RESOURCE_COUNTS,
    ConstraintUnsatisfied,
    GenerationConfig,
    generate_board,
    generate_board_with_report,
    red_tokens_separated,
    validate_port_types,
    validate_red_token_spacing,
    validate_standard_counts,
)

FIXED_RESOURCES = [
    Resource.WOOD,
    Resource.BRICK,
    Resource.SHEEP,
    Resource.WHEAT,
    Resource.ORE,
    Resource.WOOD,
    Resource.SHEEP,
    Resource.WHEAT,
    Resource.BRICK,
    Resource.DESERT,
    Resource.ORE,
    Resource.WOOD,
    Resource.SHEEP,
    Resource.WHEAT,
    Resource.BRICK,
    Resource.ORE,
    Resource.WOOD,
    Resource.SHEEP,
    Resource.WHEAT,
]
SEPARATED_NUMBERS = [5, 2, 6, 3, 8, 10, 9, 12, 11, 4, 8, 10, 9, 4, 5, 6, 3, 11]
# Cells 0 and 1 are neighbours, so a leading 6, 8 always breaks the rule.
CLUSTERED_NUMBERS = [6, 8, 2, 3, 3, 4, 4, 5, 5, 6, 8, 9, 9, 10, 10, 11, 11, 12]
FIXED_PORTS = [
    PortType.WOOD,
    PortType.GENERIC,
    PortType.BRICK,
    PortType.GENERIC,
    PortType.SHEEP,
    PortType.GENERIC,
    PortType.WHEAT,
    PortType.GENERIC,
    PortType.ORE,
]


class ScriptedRandom:
    """Replaces each shuffle with a fixed order chosen by the pool's kind."""

    def __init__(self, resources, numbers, ports) -> None:
        self._orders = {Resource: resources, int: numbers, PortType: ports}
        self.number_shuffles = 0

    def shuffle(self, items) -> None:
        kind = type(items[0])
        if kind is int:
            self.number_shuffles += 1
        items[:] = list(self._orders[kind])


class RandomizerTests(unittest.TestCase):
    def test_randomized_board_has_standard_counts(self) -> None:
        board = generate_board(seed=42)
        self.assertTrue(validate_standard_counts(board))

    def test_desert_has_no_number_token(self) -> None:
        board = generate_board(seed=7)
        deserts = [cell for cell in board.cells if cell.resource is Resource.DESERT]
        self.assertEqual(len(deserts), 1)
        self.assertIsNone(deserts[0].number)
        self.assertIs(board.desert, deserts[0])

    def test_number_tokens_cover_official_set(self) -> None:
        board = generate_board(seed=99)
        self.assertEqual(sorted(board.numbers()), sorted(NUMBER_TOKENS))

    def test_resource_count_distribution_is_exact(self) -> None:
        board = generate_board(seed=101)
        actual_counts = {resource: 0 for resource in RESOURCE_COUNTS}
        for cell in board.cells:
            actual_counts[cell.resource] += 1
        self.assertEqual(actual_counts, RESOURCE_COUNTS)

    def test_port_types_are_standard_multiset(self) -> None:
        board = generate_board(seed=5)
        self.assertEqual(len(board.ports), 9)
        self.assertEqual(Counter(port.port_type for port in board.ports), Counter(PORT_TYPE_COUNTS))

    def test_same_seed_gives_same_board(self) -> None:
        self.assertEqual(generate_board(seed=2024), generate_board(seed=2024))

    def test_explicit_rng_is_used(self) -> None:
        first = generate_board(random.Random(11))
        second = generate_board(random.Random(11))
        self.assertEqual(first, second)

    def test_many_boards_hold_invariants(self) -> None:
        trials = 1000
        separated = 0
        for seed in range(trials):
            board = generate_board(seed=seed)
            self.assertTrue(validate_standard_counts(board), msg=f"Bad counts for seed {seed}")
            self.assertTrue(validate_port_types(board), msg=f"Bad ports for seed {seed}")
            for cell in board.cells:
                self.assertNotEqual(cell.number, 7)
                if cell.resource is not Resource.DESERT:
                    self.assertIsNotNone(cell.number)
            if validate_red_token_spacing(board):
                separated += 1
        self.assertGreaterEqual(separated / trials, 0.999)

    def test_report_flags_satisfied_boards(self) -> None:
        result = generate_board_with_report(seed=3)
        self.assertTrue(result.satisfied)
        self.assertGreaterEqual(result.attempts, 1)
        self.assertTrue(validate_red_token_spacing(result.board))


class ScriptedGenerationTests(unittest.TestCase):
    def test_fixed_shuffles_reproduce_expected_board(self) -> None:
        rng = ScriptedRandom(FIXED_RESOURCES, SEPARATED_NUMBERS, FIXED_PORTS)
        result = generate_board_with_report(rng)

        self.assertTrue(result.satisfied)
        self.assertEqual(result.attempts, 1)
        self.assertEqual(rng.number_shuffles, 1)
        self.assertEqual(result.board, build_board(FIXED_RESOURCES, SEPARATED_NUMBERS, FIXED_PORTS))

        board = result.board
        self.assertIs(board.get_cell(9).resource, Resource.DESERT)
        self.assertIsNone(board.get_cell(9).number)
        self.assertEqual(board.get_cell(8).number, 11)
        self.assertEqual(board.get_cell(10).number, 4)
        self.assertEqual(
            [cell.id for cell in board.cells if cell.number in (6, 8)],
            [2, 4, 11, 16],
        )
        self.assertEqual([port.port_type for port in board.ports], FIXED_PORTS)

    def test_exhausted_attempts_keep_last_assignment_and_warn(self) -> None:
        rng = ScriptedRandom(FIXED_RESOURCES, CLUSTERED_NUMBERS, FIXED_PORTS)
        with self.assertLogs("catan_board.domain.randomizer", level="WARNING") as captured:
            result = generate_board_with_report(rng, config=GenerationConfig(max_attempts=5))

        self.assertFalse(result.satisfied)
        self.assertEqual(result.attempts, 5)
        self.assertEqual(rng.number_shuffles, 5)
        self.assertFalse(validate_red_token_spacing(result.board))
        self.assertTrue(validate_standard_counts(result.board))
        self.assertIn("5 attempts", captured.output[0])

    def test_strict_mode_raises_typed_error(self) -> None:
        rng = ScriptedRandom(FIXED_RESOURCES, CLUSTERED_NUMBERS, FIXED_PORTS)
        with self.assertRaises(ConstraintUnsatisfied) as raised:
            generate_board(rng, config=GenerationConfig(max_attempts=3, strict=True))
        self.assertIsInstance(raised.exception, RuntimeError)
        self.assertFalse(raised.exception.result.satisfied)
        self.assertEqual(raised.exception.result.attempts, 3)

    def test_invalid_attempt_budget_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            GenerationConfig(max_attempts=0)

    def test_red_token_check_uses_neighbor_index(self) -> None:
        self.assertTrue(red_tokens_separated(FIXED_RESOURCES, SEPARATED_NUMBERS))
        self.assertFalse(red_tokens_separated(FIXED_RESOURCES, CLUSTERED_NUMBERS))
        self.assertIn(1, NEIGHBORS[0])


class BuildBoardTests(unittest.TestCase):
    def test_wrong_resource_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_board(FIXED_RESOURCES[:-1], SEPARATED_NUMBERS)

    def test_wrong_token_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_board(FIXED_RESOURCES, SEPARATED_NUMBERS[:-1])

    def test_seven_is_not_a_token(self) -> None:
        numbers = SEPARATED_NUMBERS[:]
        numbers[0] = 7
        with self.assertRaises(ValueError):
            build_board(FIXED_RESOURCES, numbers)

    def test_wrong_port_count_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_board(FIXED_RESOURCES, SEPARATED_NUMBERS, FIXED_PORTS[:-1])

    def test_default_port_order_is_standard(self) -> None:
        board = build_board(FIXED_RESOURCES, SEPARATED_NUMBERS)
        self.assertTrue(validate_port_types(board))
        self.assertEqual(board.ports[0].port_type.ratio_label, "3:1")
        self.assertEqual(board.ports[1].port_type.trade_ratio, 2)
        self.assertIs(board.ports[1].port_type.resource, Resource.BRICK)

    def test_unknown_cell_id_is_rejected(self) -> None:
        board = build_board(FIXED_RESOURCES, SEPARATED_NUMBERS)
        with self.assertRaises(ValueError):
            board.get_cell(42)

    def test_two_deserts_are_rejected(self) -> None:
        resources = FIXED_RESOURCES[:]
        resources[0] = Resource.DESERT
        with self.assertRaises(ValueError):
            build_board(resources, SEPARATED_NUMBERS[:-1])

    def test_missing_desert_is_rejected(self) -> None:
        resources = FIXED_RESOURCES[:]
        resources[9] = Resource.WOOD
        with self.assertRaises(ValueError):
            build_board(resources, SEPARATED_NUMBERS)
        with self.assertRaises(ValueError):
            build_board([Resource.WOOD] * 19, [2] * 19)

    def test_skewed_token_distribution_is_rejected(self) -> None:
        with self.assertRaises(ValueError):
            build_board(FIXED_RESOURCES, [6] * 18)
        numbers = SEPARATED_NUMBERS[:]
        numbers[0] = 6
        with self.assertRaises(ValueError):
            build_board(FIXED_RESOURCES, numbers)

    def test_five_generic_ports_are_rejected(self) -> None:
        ports = FIXED_PORTS[:]
        ports[0] = PortType.GENERIC
        self.assertEqual(ports.count(PortType.GENERIC), 5)
        with self.assertRaises(ValueError):
            build_board(FIXED_RESOURCES, SEPARATED_NUMBERS, ports)

    def test_desert_lookup_without_desert_raises_value_error(self) -> None:
        board = build_board(FIXED_RESOURCES, SEPARATED_NUMBERS)
        stripped = Board(
            cells=tuple(cell for cell in board.cells if not cell.is_desert),
            ports=board.ports,
        )
        with self.assertRaises(ValueError):
            stripped.desert


if __name__ == "__main__":
    unittest.main()
