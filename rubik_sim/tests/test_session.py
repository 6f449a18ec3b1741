# rubik_sim/tests/test_session.py
import random
import unittest

from rubik_sim.config import SimSettings
from rubik_sim.core.errors import InvalidStateError
from rubik_sim.core.facelets import Color, solved_state
from rubik_sim.core.session import PuzzleSession
from rubik_sim.logic.algebra import apply_move, apply_sequence
from rubik_sim.logic.moves import Move, parse_sequence
from rubik_sim.solve.solution import Solution


def breaking_move_fn(bad_move):
    """Como `apply_move`, pero `bad_move` deja un sticker de más."""

    def move_fn(state, move):
        out = apply_move(state, move)
        if move == bad_move:
            grid = [list(r) for r in out["F"]]
            grid[1][1] = Color.WHITE
            out = out.replace_faces({"F": grid})
        return out

    return move_fn


class TestSessionMoves(unittest.TestCase):
    def test_starts_solved(self):
        s = PuzzleSession()
        self.assertTrue(s.is_solved())
        self.assertEqual(s.revision, 0)
        self.assertIsNone(s.playback)

    def test_apply_move_commits_and_bumps_revision(self):
        s = PuzzleSession()
        s.apply_move(Move.R)
        self.assertEqual(s.state, apply_move(solved_state(), Move.R))
        self.assertEqual(s.revision, 1)

    def test_invalid_move_is_rejected(self):
        s = PuzzleSession(move_fn=breaking_move_fn(Move.F))
        s.apply_move(Move.R)
        before = s.state
        with self.assertRaises(InvalidStateError):
            s.apply_move(Move.F)
        self.assertEqual(s.state, before)
        self.assertEqual(s.revision, 1)

    def test_make_move_logs_and_returns_false(self):
        s = PuzzleSession(move_fn=breaking_move_fn(Move.F))
        with self.assertLogs("rubik_sim.core.session", level="ERROR"):
            self.assertFalse(s.make_move(Move.F))
        self.assertTrue(s.is_solved())
        self.assertTrue(s.make_move(Move.U))

    def test_reset(self):
        s = PuzzleSession()
        s.apply_move(Move.R)
        s.load_solution(Solution.from_moves([Move.R_PRIME]))
        s.reset()
        self.assertTrue(s.is_solved())
        self.assertIsNone(s.solution)

    def test_scramble_uses_settings_length(self):
        s = PuzzleSession(SimSettings(scramble_length=8), rng=random.Random(1))
        result = s.scramble()
        self.assertEqual(len(result.moves), 8)
        self.assertEqual(s.state, result.state)
        self.assertFalse(s.is_solved())

    def test_scramble_with_zero_length_is_rejected(self):
        s = PuzzleSession(SimSettings(scramble_length=8), rng=random.Random(1))
        with self.assertRaises(ValueError):
            s.scramble(0)
        self.assertTrue(s.is_solved())
        self.assertEqual(s.revision, 0)

    def test_scramble_clears_solution(self):
        s = PuzzleSession(rng=random.Random(2))
        s.apply_move(Move.R)
        s.load_solution(Solution.from_moves([Move.R_PRIME]))
        s.scramble(5)
        self.assertIsNone(s.playback)

    def test_snapshot_reads_committed_state(self):
        s = PuzzleSession()
        s.apply_move(Move.U)
        snap = s.snapshot()
        self.assertEqual(snap.revision, 1)
        self.assertEqual(snap.get_facelet_color("F", 0, 0), Color.RED)
        s.apply_move(Move.U_PRIME)
        self.assertEqual(snap.get_facelet_color("F", 0, 0), Color.RED)
        self.assertTrue(s.snapshot().is_solved)


class TestSessionPlayback(unittest.TestCase):
    def setUp(self):
        self.session = PuzzleSession()
        for m in parse_sequence("R U R' U'"):
            self.session.apply_move(m)
        self.scrambled = self.session.state
        self.solution = Solution.from_moves(parse_sequence("U R U' R'"))

    def test_load_and_step_through(self):
        self.assertTrue(self.session.load_solution(self.solution, self.session.revision))
        while self.session.next_step():
            pass
        self.assertTrue(self.session.is_solved())
        while self.session.previous_step():
            pass
        self.assertEqual(self.session.state, self.scrambled)

    def test_stale_solution_is_ignored(self):
        revision = self.session.revision
        self.session.apply_move(Move.F)
        self.assertFalse(self.session.load_solution(self.solution, revision))
        self.assertIsNone(self.session.playback)

    def test_steps_without_solution(self):
        self.assertFalse(self.session.next_step())
        self.assertFalse(self.session.previous_step())
        self.assertFalse(self.session.start_autoplay())
        self.assertFalse(self.session.autoplay_tick())

    def test_reset_playback_keeps_cube(self):
        self.session.load_solution(self.solution)
        self.session.next_step()
        state = self.session.state
        self.session.reset_playback()
        self.assertTrue(self.session.playback.at_start)
        self.assertEqual(self.session.state, state)

    def test_user_move_stops_autoplay(self):
        self.session.load_solution(self.solution)
        self.assertTrue(self.session.start_autoplay())
        self.session.make_move(Move.D)
        self.assertFalse(self.session.autoplaying)
        self.assertFalse(self.session.autoplay_tick())

    def test_autoplay_tick_until_end(self):
        self.session.load_solution(self.solution)
        self.session.start_autoplay()
        ticks = 0
        while self.session.autoplay_tick():
            ticks += 1
        self.assertEqual(ticks, 4)
        self.assertTrue(self.session.is_solved())
        self.assertFalse(self.session.autoplaying)

    def test_invalid_playback_step_drops_solution(self):
        session = PuzzleSession(move_fn=breaking_move_fn(Move.R_PRIME))
        session.apply_move(Move.R)
        session.apply_move(Move.U_PRIME)
        session.load_solution(Solution.from_moves([Move.U, Move.R_PRIME]))
        session.next_step()
        state = session.state
        self.assertEqual(state, apply_sequence(solved_state(), [Move.R]))
        with self.assertLogs("rubik_sim.core.session", level="ERROR"):
            with self.assertRaises(InvalidStateError):
                session.next_step()
        self.assertEqual(session.state, state)
        self.assertIsNone(session.playback)


if __name__ == "__main__":
    unittest.main()
