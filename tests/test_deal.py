import random
import unittest
from collections import Counter

from pairs import (
    MAX_DISTINCT_PAIRS,
    VALUE_POOL,
    BoardConfigError,
    build_deck,
    deal_board,
    make_values,
)


class TestDeal(unittest.TestCase):
    def test_given_pool_when_inspecting_then_70_distinct_symbols_in_order(self):
        self.assertEqual(len(VALUE_POOL), 70)
        self.assertEqual(len(set(VALUE_POOL)), 70)
        self.assertEqual(MAX_DISTINCT_PAIRS, 70)
        self.assertTrue(VALUE_POOL.startswith('ABC'))
        self.assertTrue(VALUE_POOL.endswith('!@#$%^&*'))

    def test_given_pair_count_when_making_values_then_prefix_of_pool(self):
        self.assertEqual(make_values(3), ['A', 'B', 'C'])
        self.assertEqual(make_values(0), [])
        self.assertEqual(''.join(make_values(70)), VALUE_POOL)

    def test_given_more_pairs_than_pool_when_making_values_then_pool_wraps(self):
        values = make_values(72)
        self.assertEqual(values[70:], ['A', 'B'])

    def test_given_pair_count_when_building_deck_then_each_value_twice(self):
        self.assertEqual(build_deck(2), ['A', 'A', 'B', 'B'])

    def test_given_valid_sizes_when_dealing_then_every_value_appears_exactly_twice(self):
        for rows, cols in [(1, 2), (2, 2), (2, 3), (4, 4), (6, 6), (8, 8), (8, 17), (17, 8), (10, 14)]:
            board = deal_board(rows, cols, seed=rows * 100 + cols)
            counts = Counter(card.value for card in board.cells)
            self.assertEqual(len(counts), rows * cols // 2, (rows, cols))
            self.assertTrue(all(n == 2 for n in counts.values()), (rows, cols))
            self.assertTrue(all(not c.revealed and not c.matched for c in board.cells))

    def test_given_huge_board_when_dealing_then_values_repeat_beyond_pool(self):
        board = deal_board(12, 12, seed=1)  # 72 pairs
        counts = Counter(card.value for card in board.cells)
        self.assertEqual(len(counts), 70)
        self.assertEqual(counts['A'], 4)
        self.assertEqual(counts['B'], 4)
        self.assertEqual(counts['C'], 2)

    def test_given_same_seed_when_dealing_then_same_layout(self):
        a = deal_board(4, 4, seed=42)
        b = deal_board(4, 4, seed=42)
        self.assertEqual([c.value for c in a.cells], [c.value for c in b.cells])

    def test_given_injected_rng_when_dealing_then_rng_drives_shuffle(self):
        expected = build_deck(8)
        random.Random(7).shuffle(expected)
        board = deal_board(4, 4, seed=999, rng=random.Random(7))
        self.assertEqual([c.value for c in board.cells], expected)

    def test_given_many_deals_when_comparing_then_layouts_vary(self):
        layouts = {tuple(c.value for c in deal_board(4, 4, seed=s).cells) for s in range(20)}
        self.assertGreater(len(layouts), 1)

    def test_given_invalid_dimensions_when_dealing_then_config_error(self):
        for rows, cols in [(3, 3), (0, 2), (2, -2)]:
            with self.assertRaises(BoardConfigError):
                deal_board(rows, cols)


if __name__ == '__main__':
    unittest.main(verbosity=2)
