# rubik_sim/logic/algebra.py
from __future__ import annotations

from typing import Callable, Dict, Iterable, List, Sequence, Tuple

from rubik_sim.core.facelets import (
    FACES,
    Cell,
    Face,
    FaceletState,
    rotate_face_clockwise,
)
from rubik_sim.logic.moves import Move

Strip = Tuple[Face, Tuple[Cell, Cell, Cell]]
Permutation = Tuple[int, ...]
MoveFn = Callable[[FaceletState, Move], FaceletState]


def _row(face: Face, r: int) -> Strip:
    return face, ((r, 0), (r, 1), (r, 2))


def _col(face: Face, c: int) -> Strip:
    return face, ((0, c), (1, c), (2, c))


def _rev(strip: Strip) -> Strip:
    face, cells = strip
    return face, (cells[2], cells[1], cells[0])


# Por cada cara: las 4 tiras vecinas en el orden en que viajan los stickers
# en un giro horario (los de la tira k pasan a la tira k+1, y la última a la primera).
# Una tira invertida se lee/escribe de atrás hacia adelante.
EDGE_CYCLES: Dict[Face, Tuple[Strip, Strip, Strip, Strip]] = {
    "U": (_row("F", 0), _row("L", 0), _row("B", 0), _row("R", 0)),
    "D": (_row("F", 2), _row("R", 2), _row("B", 2), _row("L", 2)),
    "R": (_col("U", 2), _rev(_col("B", 0)), _col("D", 2), _col("F", 2)),
    "L": (_col("U", 0), _col("F", 0), _col("D", 0), _rev(_col("B", 2))),
    "F": (_row("U", 2), _col("R", 0), _rev(_row("D", 0)), _rev(_col("L", 2))),
    "B": (_row("U", 0), _rev(_col("L", 0)), _rev(_row("D", 2)), _col("R", 2)),
}


def _apply_base_move_cw(state: FaceletState, face: Face) -> FaceletState:
    """Giro horario de `face`: rota la cara y cicla las 4 tiras vecinas.

    Es una biyección sobre las 54 celdas: cada sticker se reubica, ninguno se
    copia ni se pierde.
    """
    grids: Dict[Face, List[list]] = {f: [list(row) for row in state[f]] for f in FACES}
    grids[face] = [list(row) for row in rotate_face_clockwise(state[face])]

    cycle = EDGE_CYCLES[face]
    for k, (src_face, src_cells) in enumerate(cycle):
        dst_face, dst_cells = cycle[(k + 1) % 4]
        for (sr, sc), (dr, dc) in zip(src_cells, dst_cells):
            grids[dst_face][dr][dc] = state[src_face][sr][sc]

    return FaceletState.from_mapping(grids)


def apply_move(state: FaceletState, move: Move) -> FaceletState:
    """Aplica un cuarto de vuelta y devuelve un estado nuevo.

    Función pura y total: no modifica `state` y acepta cualquier entrada de
    54 celdas. El giro antihorario son tres giros horarios, así `m` y
    `m.inverse` son inversos exactos por construcción.

    Args:
        state: Estado de partida.
        move: Uno de los 12 movimientos (acepta también su texto, ej: "R'").

    Returns:
        El estado resultante.
    """
    move = Move(move)
    turns = 3 if move.is_prime else 1
    out = state
    for _ in range(turns):
        out = _apply_base_move_cw(out, move.face)
    return out


def apply_sequence(state: FaceletState, moves: Iterable[Move], move_fn: MoveFn = apply_move) -> FaceletState:
    """Aplica una secuencia de movimientos de izquierda a derecha."""
    for m in moves:
        state = move_fn(state, m)
    return state


# --------------------------
# Vista como permutación (54 índices)
# --------------------------
def index_state() -> FaceletState:
    """Estado cuyas celdas valen su propio índice 0..53 (orden de `FaceletState.cells`)."""
    return FaceletState(
        tuple(
            tuple(tuple(fi * 9 + r * 3 + c for c in range(3)) for r in range(3))
            for fi in range(len(FACES))
        )
    )


def move_permutation(move: Move) -> Permutation:
    """Movimiento como permutación: `perm[i]` es la celda de origen que termina en `i`."""
    return tuple(apply_move(index_state(), move).cells())


def compose_permutations(*perms: Sequence[int]) -> Permutation:
    """Composición en orden de aplicación (primero `perms[0]`)."""
    out: Permutation = tuple(range(54))
    for p in perms:
        out = tuple(out[p[i]] for i in range(54))
    return out


def permute(state: FaceletState, perm: Sequence[int]) -> FaceletState:
    """Aplica una permutación de `move_permutation` / `compose_permutations` a un estado."""
    cells = list(state.cells())
    moved = [cells[perm[i]] for i in range(54)]
    return FaceletState(
        tuple(
            tuple(tuple(moved[fi * 9 + r * 3 + c] for c in range(3)) for r in range(3))
            for fi in range(len(FACES))
        )
    )
