# rubik_sim/logic/__init__.py
from rubik_sim.logic.algebra import apply_move, apply_sequence
from rubik_sim.logic.moves import ALL_MOVES, Move, inverse_move, parse_sequence
from rubik_sim.logic.scramble import generate_scramble, scramble

__all__ = [
    "ALL_MOVES",
    "Move",
    "apply_move",
    "apply_sequence",
    "generate_scramble",
    "inverse_move",
    "parse_sequence",
    "scramble",
]
