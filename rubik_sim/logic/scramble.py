# rubik_sim/logic/scramble.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import List, Optional, Tuple

from rubik_sim.core.facelets import FaceletState, solved_state
from rubik_sim.core.validator import is_valid_state
from rubik_sim.logic.algebra import MoveFn, apply_move
from rubik_sim.logic.moves import ALL_MOVES, Move, format_sequence

logger = logging.getLogger(__name__)

DEFAULT_SCRAMBLE_LENGTH = 15
MAX_REDRAW_ATTEMPTS = 10


@dataclass(frozen=True)
class ScrambleResult:
    """Resultado de una mezcla.

    Attributes:
        state: Estado final (validado) o el estado resuelto si se abortó.
        moves: Movimientos aplicados; vacío si se abortó.
        aborted: True si algún paso produjo un estado inválido.
    """

    state: FaceletState
    moves: Tuple[Move, ...]
    aborted: bool = False


def _draw_move(rng: random.Random, last: Optional[Move]) -> Move:
    move = rng.choice(ALL_MOVES)
    attempts = 1
    # Se descarta el mismo movimiento o la misma cara que el anterior
    while (
        last is not None
        and attempts < MAX_REDRAW_ATTEMPTS
        and (move == last or move.face == last.face)
    ):
        move = rng.choice(ALL_MOVES)
        attempts += 1
    return move


def generate_scramble(
    n: int = DEFAULT_SCRAMBLE_LENGTH,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
) -> List[Move]:
    """Genera una secuencia de mezcla aleatoria con los 12 cuartos de vuelta.

    Cada movimiento se sortea de forma uniforme. Si coincide con el anterior o
    gira la misma cara, se vuelve a sortear (hasta `MAX_REDRAW_ATTEMPTS`
    intentos; agotados, se acepta el último sorteo).

    Args:
        n: Cantidad de movimientos a generar.
        seed: Semilla opcional para obtener resultados reproducibles.
        rng: Generador a usar; tiene prioridad sobre `seed`.

    Returns:
        Lista de movimientos.

    Raises:
        ValueError: Si `n` es menor o igual a 0.
    """
    if n <= 0:
        raise ValueError("n debe ser mayor que 0.")

    rng = rng if rng is not None else random.Random(seed)

    seq: List[Move] = []
    last: Optional[Move] = None
    for _ in range(n):
        last = _draw_move(rng, last)
        seq.append(last)
    return seq


def scramble(
    n: int = DEFAULT_SCRAMBLE_LENGTH,
    seed: Optional[int] = None,
    rng: Optional[random.Random] = None,
    apply: MoveFn = apply_move,
) -> ScrambleResult:
    """Mezcla el cubo partiendo SIEMPRE del estado resuelto.

    Después de cada movimiento se valida el estado. Si algún paso lo deja
    inválido, la mezcla se aborta y se devuelve el estado resuelto en lugar de
    un resultado parcial.

    Args:
        n: Cantidad de movimientos.
        seed: Semilla opcional.
        rng: Generador opcional (tiene prioridad sobre `seed`).
        apply: Función de movimiento (por defecto `apply_move`).

    Returns:
        Un `ScrambleResult`.
    """
    moves = generate_scramble(n, seed=seed, rng=rng)
    state = solved_state()

    for i, move in enumerate(moves, start=1):
        candidate = apply(state, move)
        if not is_valid_state(candidate):
            logger.error(
                "Paso %d: el movimiento %s dejó un estado inválido; se vuelve al estado resuelto (secuencia: %s)",
                i,
                move.value,
                format_sequence(moves[: i - 1]),
            )
            return ScrambleResult(solved_state(), (), aborted=True)
        state = candidate

    logger.info("Mezcla: %s", format_sequence(moves))
    return ScrambleResult(state, tuple(moves))
