# rubik_sim/tests/test_playback.py
import unittest

from rubik_sim.core.errors import InvalidStateError
from rubik_sim.core.facelets import solved_state
from rubik_sim.core.playback import BEFORE_FIRST, PlaybackController
from rubik_sim.logic.algebra import apply_move, apply_sequence
from rubik_sim.logic.moves import Move, parse_sequence
from rubik_sim.solve.solution import Solution


class Cube:
    """Cubo mínimo para el controlador: guarda el estado y registra los movimientos."""

    def __init__(self, state=None, fail_on=None):
        self.state = state if state is not None else solved_state()
        self.applied = []
        self.fail_on = fail_on

    def apply(self, move):
        if move == self.fail_on:
            raise InvalidStateError("roto")
        self.state = apply_move(self.state, move)
        self.applied.append(move)


class TestPlayback(unittest.TestCase):
    def setUp(self):
        self.moves = parse_sequence("R U R' U'")
        self.start = apply_sequence(solved_state(), parse_sequence("U R U' R'"))
        self.cube = Cube(self.start)
        self.pb = PlaybackController(Solution.from_moves(self.moves), self.cube.apply)

    def test_starts_before_first(self):
        self.assertEqual(self.pb.cursor, BEFORE_FIRST)
        self.assertTrue(self.pb.at_start)
        self.assertIsNone(self.pb.current_step)

    def test_next_applies_steps_in_order(self):
        for i in range(4):
            self.assertTrue(self.pb.next())
            self.assertEqual(self.pb.cursor, i)
            self.assertEqual(self.pb.current_step.move, self.moves[i])
        self.assertTrue(self.pb.at_end)
        self.assertEqual(self.cube.applied, self.moves)

    def test_next_at_end_is_noop(self):
        for _ in range(4):
            self.pb.next()
        state = self.cube.state
        self.assertFalse(self.pb.next())
        self.assertEqual(self.pb.cursor, 3)
        self.assertEqual(self.cube.state, state)

    def test_previous_before_first_is_noop(self):
        self.assertFalse(self.pb.previous())
        self.assertEqual(self.cube.applied, [])
        self.assertEqual(self.cube.state, self.start)

    def test_previous_applies_inverse(self):
        self.pb.next()
        self.pb.next()
        self.assertTrue(self.pb.previous())
        self.assertEqual(self.pb.cursor, 0)
        self.assertEqual(self.cube.applied[-1], Move.U_PRIME)

    def test_k_next_then_k_previous_restores_state(self):
        for k in range(5):
            cube = Cube(self.start)
            pb = PlaybackController(Solution.from_moves(self.moves), cube.apply)
            for _ in range(k):
                pb.next()
            for _ in range(k):
                pb.previous()
            self.assertEqual(cube.state, self.start, k)
            self.assertTrue(pb.at_start)

    def test_reset_keeps_cube(self):
        self.pb.next()
        state = self.cube.state
        self.pb.reset()
        self.assertTrue(self.pb.at_start)
        self.assertEqual(self.cube.state, state)

    def test_failed_step_keeps_cursor(self):
        cube = Cube(fail_on=Move.U)
        pb = PlaybackController(Solution.from_moves(self.moves), cube.apply)
        pb.next()
        pb.start_autoplay()
        with self.assertRaises(InvalidStateError):
            pb.next()
        self.assertEqual(pb.cursor, 0)
        self.assertFalse(pb.autoplaying)

    def test_empty_solution(self):
        pb = PlaybackController(Solution.empty(), self.cube.apply)
        self.assertTrue(pb.at_start)
        self.assertTrue(pb.at_end)
        self.assertFalse(pb.next())
        self.assertFalse(pb.start_autoplay())

    def test_solution_solves_cube(self):
        while self.pb.next():
            pass
        self.assertTrue(self.cube.state.is_solved())


class TestAutoplay(unittest.TestCase):
    def setUp(self):
        self.cube = Cube()
        self.pb = PlaybackController(Solution.from_moves(parse_sequence("R U F")), self.cube.apply)

    def test_tick_without_autoplay_does_nothing(self):
        self.assertFalse(self.pb.autoplay_tick())
        self.assertEqual(self.cube.applied, [])

    def test_autoplay_runs_to_end(self):
        self.assertTrue(self.pb.start_autoplay())
        ticks = 0
        while self.pb.autoplay_tick():
            ticks += 1
        self.assertEqual(ticks, 3)
        self.assertTrue(self.pb.at_end)
        self.assertFalse(self.pb.autoplaying)

    def test_stop_autoplay(self):
        self.pb.start_autoplay()
        self.pb.autoplay_tick()
        self.pb.stop_autoplay()
        self.assertFalse(self.pb.autoplay_tick())
        self.assertEqual(self.pb.cursor, 0)

    def test_cannot_start_at_end(self):
        for _ in range(3):
            self.pb.next()
        self.assertFalse(self.pb.start_autoplay())


if __name__ == "__main__":
    unittest.main()
