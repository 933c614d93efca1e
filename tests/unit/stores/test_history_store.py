"""Tests for selection-history ordering, eviction, and cursor semantics.

Covers forward-branch truncation on new selections, pruning with cursor
fix-up, and the boundaries of back/forward cursor moves.
"""

from __future__ import annotations

import random
import unittest

from recentstar.model.types import Direction
from recentstar.model.validation import ReferenceValidator
from recentstar.stores.history import HistoryStore


class _Item:
    def __init__(self, name: str, persistent: bool = True) -> None:
        self.name = name
        self.persistent = persistent
        self.alive = True

    def __repr__(self) -> str:
        return self.name


def _validator() -> ReferenceValidator:
    return ReferenceValidator(
        is_alive=lambda item: item.alive,
        is_persistent=lambda item: item.persistent,
    )


def _items(*names: str) -> list[_Item]:
    return [_Item(name) for name in names]


class HistoryRecordTests(unittest.TestCase):
    def test_records_most_recent_first(self) -> None:
        history = HistoryStore(_validator())
        a, b, c = _items("a", "b", "c")

        for item in (a, b, c):
            history.record_selection(item)

        self.assertEqual(history.entries, [c, b, a])
        self.assertEqual(history.cursor, 0)

    def test_max_size_evicts_oldest(self) -> None:
        history = HistoryStore(_validator(), max_size=3)
        a, b, c, d = _items("a", "b", "c", "d")

        for item in (a, b, c, d):
            history.record_selection(item)

        self.assertEqual(history.entries, [d, c, b])

    def test_reselecting_moves_item_to_front_without_duplicates(self) -> None:
        history = HistoryStore(_validator())
        a, b, c = _items("a", "b", "c")

        for item in (a, b, c, a):
            history.record_selection(item)

        self.assertEqual(history.entries, [a, c, b])

    def test_none_and_dead_items_are_ignored(self) -> None:
        history = HistoryStore(_validator())
        dead = _Item("dead")
        dead.alive = False

        history.record_selection(None)
        history.record_selection(dead)

        self.assertEqual(history.entries, [])

    def test_new_selection_after_back_drops_forward_branch(self) -> None:
        history = HistoryStore(_validator())
        a, b, c, x = _items("a", "b", "c", "x")
        for item in (a, b, c):
            history.record_selection(item)

        self.assertIs(history.move_cursor(Direction.BACK), b)
        self.assertEqual(history.cursor, 1)

        history.record_selection(x)

        self.assertEqual(history.entries, [x, b, a])
        self.assertEqual(history.cursor, 0)

    def test_truncation_removes_every_entry_in_front_of_cursor(self) -> None:
        history = HistoryStore(_validator())
        a, b, c, d, x = _items("a", "b", "c", "d", "x")
        for item in (a, b, c, d):
            history.record_selection(item)
        history.move_cursor(Direction.BACK)
        history.move_cursor(Direction.BACK)

        history.record_selection(x)

        self.assertEqual(history.entries, [x, b, a])

    def test_push_front_keeps_forward_branch(self) -> None:
        history = HistoryStore(_validator())
        a, b, c, p = _items("a", "b", "c", "p")
        for item in (a, b, c):
            history.record_selection(item)
        history.move_cursor(Direction.BACK)

        history.push_front(p)

        self.assertEqual(history.entries, [p, c, b, a])
        self.assertEqual(history.cursor, 1)

    def test_length_bound_holds_after_random_mutations(self) -> None:
        rng = random.Random(7)
        pool = _items(*"abcdefghij")
        history = HistoryStore(_validator(), max_size=4)

        for _ in range(300):
            action = rng.randrange(5)
            if action == 0:
                history.record_selection(rng.choice(pool))
            elif action == 1:
                history.push_front(rng.choice(pool))
            elif action == 2:
                history.move_cursor(rng.choice(list(Direction)))
            elif action == 3:
                history.set_max_size(rng.randint(1, 6))
            else:
                history.prune_invalid()
            self.assertLessEqual(len(history), history.max_size)
            self.assertEqual(len(set(map(id, history.entries))), len(history))
            if len(history):
                self.assertTrue(0 <= history.cursor < len(history))
            else:
                self.assertEqual(history.cursor, 0)


class HistoryCursorTests(unittest.TestCase):
    def test_empty_history_moves_are_noops(self) -> None:
        history = HistoryStore(_validator())

        self.assertIsNone(history.move_cursor(Direction.BACK))
        self.assertIsNone(history.move_cursor(Direction.FORWARD))
        self.assertEqual(history.cursor, 0)
        self.assertFalse(history.can_move(Direction.BACK))

    def test_single_entry_cursor_stays_at_zero(self) -> None:
        history = HistoryStore(_validator())
        (only,) = _items("only")
        history.record_selection(only)

        self.assertIs(history.move_cursor(Direction.BACK), only)
        self.assertIs(history.move_cursor(Direction.FORWARD), only)
        self.assertEqual(history.cursor, 0)

    def test_back_then_forward_restores_cursor(self) -> None:
        history = HistoryStore(_validator())
        for item in _items("a", "b", "c", "d"):
            history.record_selection(item)
        history.move_cursor(Direction.BACK)
        start = history.cursor

        history.move_cursor(Direction.BACK)
        history.move_cursor(Direction.FORWARD)

        self.assertEqual(history.cursor, start)

    def test_back_stops_at_oldest_entry(self) -> None:
        history = HistoryStore(_validator())
        a, b = _items("a", "b")
        history.record_selection(a)
        history.record_selection(b)

        history.move_cursor(Direction.BACK)
        self.assertFalse(history.can_move(Direction.BACK))
        self.assertIs(history.move_cursor(Direction.BACK), a)
        self.assertEqual(history.cursor, 1)


class HistoryMaintenanceTests(unittest.TestCase):
    def test_set_max_size_trims_and_ignores_non_positive(self) -> None:
        history = HistoryStore(_validator(), max_size=5)
        a, b, c, d = _items("a", "b", "c", "d")
        for item in (a, b, c, d):
            history.record_selection(item)

        history.set_max_size(0)
        self.assertEqual(history.max_size, 5)

        history.set_max_size(2)
        self.assertEqual(history.entries, [d, c])

    def test_shrinking_clamps_cursor(self) -> None:
        history = HistoryStore(_validator())
        for item in _items("a", "b", "c", "d"):
            history.record_selection(item)
        for _ in range(3):
            history.move_cursor(Direction.BACK)

        history.set_max_size(2)

        self.assertEqual(history.cursor, 1)

    def test_prune_invalid_shifts_cursor_for_removed_front_entries(self) -> None:
        history = HistoryStore(_validator())
        a, b, c = _items("a", "b", "c")
        d, e = _Item("d", persistent=False), _Item("e", persistent=False)
        for item in (a, b, c, d, e):
            history.record_selection(item)
        history.move_cursor(Direction.BACK)
        history.move_cursor(Direction.BACK)
        self.assertIs(history.current(), c)

        removed = history.prune_invalid()

        self.assertEqual(removed, [0, 1])
        self.assertEqual(history.entries, [c, b, a])
        self.assertEqual(history.cursor, 0)
        self.assertIs(history.current(), c)

    def test_prune_invalid_leaves_cursor_for_entries_behind_it(self) -> None:
        history = HistoryStore(_validator())
        a = _Item("a", persistent=False)
        b, c, d = _items("b", "c", "d")
        for item in (a, b, c, d):
            history.record_selection(item)
        history.move_cursor(Direction.BACK)

        history.prune_invalid()

        self.assertEqual(history.entries, [d, c, b])
        self.assertEqual(history.cursor, 1)

    def test_prune_invalid_is_idempotent(self) -> None:
        history = HistoryStore(_validator())
        items = [_Item("a"), _Item("b", persistent=False), _Item("c"), _Item("d", persistent=False)]
        for item in items:
            history.record_selection(item)
        history.move_cursor(Direction.BACK)
        history.move_cursor(Direction.BACK)

        history.prune_invalid()
        once = (history.entries, history.cursor)
        self.assertEqual(history.prune_invalid(), [])

        self.assertEqual((history.entries, history.cursor), once)

    def test_sweep_drops_dead_entries_and_clamps_cursor(self) -> None:
        history = HistoryStore(_validator())
        a, b = _items("a", "b")
        history.record_selection(a)
        history.record_selection(b)
        history.move_cursor(Direction.BACK)
        a.alive = False

        self.assertEqual(history.sweep(), 1)

        self.assertEqual(history.entries, [b])
        self.assertEqual(history.cursor, 0)

    def test_clear_resets_cursor(self) -> None:
        history = HistoryStore(_validator())
        for item in _items("a", "b"):
            history.record_selection(item)
        history.move_cursor(Direction.BACK)

        history.clear()

        self.assertEqual(history.entries, [])
        self.assertEqual(history.cursor, 0)
        self.assertIsNone(history.current())

    def test_rejects_non_positive_initial_size(self) -> None:
        with self.assertRaises(ValueError):
            HistoryStore(_validator(), max_size=0)


if __name__ == "__main__":
    unittest.main()
