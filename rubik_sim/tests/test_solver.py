# rubik_sim/tests/test_solver.py
import unittest

from rubik_sim.core.errors import SolutionUnavailableError
from rubik_sim.core.facelets import solved_state
from rubik_sim.logic.algebra import apply_sequence
from rubik_sim.logic.moves import Move, parse_sequence
from rubik_sim.solve.iddfs_solver import IddfsSolutionProvider, iddfs_solve
from rubik_sim.solve.scripted import SCRIPT, ScriptedSolutionProvider
from rubik_sim.solve.solution import Solution, SolutionStep


class TestSolver(unittest.TestCase):
    def test_solver_small_scramble(self):
        s = apply_sequence(solved_state(), parse_sequence("R U F'"))
        sol = iddfs_solve(s, max_depth=4)
        self.assertIsNotNone(sol)
        self.assertLessEqual(len(sol), 3)
        self.assertTrue(apply_sequence(s, sol).is_solved())

    def test_solved_needs_no_moves(self):
        self.assertEqual(iddfs_solve(solved_state()), [])

    def test_depth_too_small(self):
        s = apply_sequence(solved_state(), parse_sequence("R U"))
        self.assertIsNone(iddfs_solve(s, max_depth=1))

    def test_cancel(self):
        s = apply_sequence(solved_state(), parse_sequence("R U"))
        depths = []
        self.assertIsNone(iddfs_solve(s, 3, on_depth=depths.append, should_cancel=lambda: True))
        self.assertEqual(depths, [])

    def test_reports_depths(self):
        s = apply_sequence(solved_state(), parse_sequence("R U"))
        depths = []
        iddfs_solve(s, 4, on_depth=depths.append)
        self.assertEqual(depths, [1, 2])


class TestIddfsProvider(unittest.TestCase):
    def test_provider_returns_solution(self):
        s = apply_sequence(solved_state(), parse_sequence("F R"))
        solution = IddfsSolutionProvider(max_depth=3).generate_solution(s)
        self.assertIsInstance(solution, Solution)
        self.assertEqual(solution.moves, (Move.R_PRIME, Move.F_PRIME))
        self.assertTrue(apply_sequence(s, solution.moves).is_solved())

    def test_unavailable_when_too_deep(self):
        s = apply_sequence(solved_state(), parse_sequence("R U"))
        with self.assertRaises(SolutionUnavailableError):
            IddfsSolutionProvider(max_depth=1).generate_solution(s)

    def test_timeout(self):
        s = apply_sequence(solved_state(), parse_sequence("R U F L D B R U"))
        with self.assertRaises(SolutionUnavailableError):
            IddfsSolutionProvider(max_depth=8, timeout_s=0.05).generate_solution(s)

    def test_caller_cancel_stops_search(self):
        s = apply_sequence(solved_state(), parse_sequence("R U F L D B R U"))
        calls = []

        def cancel():
            calls.append(True)
            return len(calls) > 50

        with self.assertRaises(SolutionUnavailableError) as ctx:
            IddfsSolutionProvider(max_depth=8, timeout_s=None).generate_solution(s, should_cancel=cancel)
        self.assertIn("cancelada", str(ctx.exception))

    def test_rejects_bad_depth(self):
        with self.assertRaises(ValueError):
            IddfsSolutionProvider(max_depth=0)


class TestScriptedProvider(unittest.TestCase):
    def test_script_has_twenty_four_steps(self):
        s = apply_sequence(solved_state(), parse_sequence("R U"))
        solution = ScriptedSolutionProvider().generate_solution(s)
        self.assertEqual(solution.total_moves, 24)
        self.assertEqual(len(SCRIPT), 24)
        self.assertTrue(all(step.description for step in solution.steps))

    def test_solved_gives_empty_solution(self):
        solution = ScriptedSolutionProvider().generate_solution(solved_state())
        self.assertEqual(solution.total_moves, 0)

    def test_accepts_cancel_hook(self):
        s = apply_sequence(solved_state(), parse_sequence("F"))
        solution = ScriptedSolutionProvider().generate_solution(s, should_cancel=lambda: False)
        self.assertEqual(solution.total_moves, 24)


class TestSolution(unittest.TestCase):
    def test_from_moves_default_descriptions(self):
        solution = Solution.from_moves(["R", Move.U_PRIME])
        self.assertEqual(solution.moves, (Move.R, Move.U_PRIME))
        self.assertEqual(solution.steps[1], SolutionStep(Move.U_PRIME, "Paso 2: U'"))

    def test_from_moves_description_mismatch(self):
        with self.assertRaises(ValueError):
            Solution.from_moves([Move.R], ["a", "b"])

    def test_empty(self):
        self.assertEqual(Solution.empty().total_moves, 0)
        self.assertTrue(Solution.empty().is_valid)


if __name__ == "__main__":
    unittest.main()
