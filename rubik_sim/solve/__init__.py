# rubik_sim/solve/__init__.py
from rubik_sim.solve.iddfs_solver import IddfsSolutionProvider, iddfs_solve
from rubik_sim.solve.scripted import ScriptedSolutionProvider
from rubik_sim.solve.solution import Solution, SolutionProvider, SolutionStep

__all__ = [
    "IddfsSolutionProvider",
    "ScriptedSolutionProvider",
    "Solution",
    "SolutionProvider",
    "SolutionStep",
    "iddfs_solve",
]
