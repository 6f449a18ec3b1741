# rubik_sim/tests/test_validator.py
import unittest

from rubik_sim.core.errors import InvalidStateError, RubikSimError
from rubik_sim.core.facelets import Color, solved_state
from rubik_sim.core.validator import color_counts, ensure_valid_state, is_valid_state


def with_sticker(state, face, row, col, value):
    grid = [list(r) for r in state[face]]
    grid[row][col] = value
    return state.replace_faces({face: grid})


class TestValidator(unittest.TestCase):
    def test_solved_is_valid(self):
        self.assertTrue(is_valid_state(solved_state()))

    def test_counts_of_solved(self):
        counts = color_counts(solved_state())
        self.assertEqual(counts, {c.value: 9 for c in Color})

    def test_duplicated_color_is_invalid(self):
        s = with_sticker(solved_state(), "U", 0, 0, Color.RED)
        self.assertFalse(is_valid_state(s))
        counts = color_counts(s)
        self.assertEqual(counts["W"], 8)
        self.assertEqual(counts["R"], 10)

    def test_swapped_stickers_still_pass(self):
        s = with_sticker(solved_state(), "U", 0, 0, Color.RED)
        s = with_sticker(s, "R", 0, 0, Color.WHITE)
        self.assertTrue(is_valid_state(s))

    def test_unknown_value_is_invalid(self):
        s = with_sticker(solved_state(), "F", 1, 1, "X")
        self.assertFalse(is_valid_state(s))
        self.assertEqual(color_counts(s)["X"], 1)

    def test_does_not_modify_state(self):
        s = with_sticker(solved_state(), "U", 0, 0, Color.RED)
        before = s.to_hashable()
        is_valid_state(s)
        self.assertEqual(s.to_hashable(), before)

    def test_ensure_returns_valid_state(self):
        s = solved_state()
        self.assertIs(ensure_valid_state(s), s)

    def test_ensure_raises_with_counts(self):
        s = with_sticker(solved_state(), "D", 2, 2, Color.BLUE)
        with self.assertRaises(InvalidStateError) as ctx:
            ensure_valid_state(s, "movimiento R")
        self.assertIn("movimiento R", str(ctx.exception))
        self.assertEqual(ctx.exception.counts["Y"], 8)
        self.assertEqual(ctx.exception.counts["B"], 10)
        self.assertIsInstance(ctx.exception, RubikSimError)


if __name__ == "__main__":
    unittest.main()
