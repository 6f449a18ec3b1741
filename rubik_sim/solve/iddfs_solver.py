# rubik_sim/solve/iddfs_solver.py
from __future__ import annotations

import logging
import time
from typing import Callable, List, Optional, Set

from rubik_sim.core.errors import SolutionUnavailableError
from rubik_sim.core.facelets import FaceletState, StateHash
from rubik_sim.logic.algebra import apply_move
from rubik_sim.logic.moves import ALL_MOVES, Move
from rubik_sim.solve.solution import Solution

logger = logging.getLogger(__name__)

OnDepthCallback = Callable[[int], None]
ShouldCancelCallback = Callable[[], bool]


def iddfs_solve(
    state: FaceletState,
    max_depth: int = 6,
    on_depth: Optional[OnDepthCallback] = None,
    should_cancel: Optional[ShouldCancelCallback] = None,
) -> Optional[List[Move]]:
    """Profundización iterativa sobre los 12 cuartos de vuelta.

    Prueba límites 1, 2, ..., `max_depth`; con cada límite recorre el árbol en
    profundidad descartando el inverso del último giro y un tercer giro igual
    seguido (X X X es X').

    Args:
        state: Estado inicial (no se modifica).
        max_depth: Último límite a probar.
        on_depth: Se llama con cada límite antes de recorrerlo.
        should_cancel: Se consulta en cada nodo; True corta la búsqueda.

    Returns:
        Los movimientos que resuelven `state` (lista vacía si ya está resuelto),
        o None si no hay solución dentro del límite o se canceló.

    Notes:
        El costo crece como 11^profundidad: sirve para mezclas de pocos giros.
    """
    if state.is_solved():
        return []

    start_hash = state.to_hashable()

    for depth_limit in range(1, max_depth + 1):
        if should_cancel is not None and should_cancel():
            return None

        if on_depth is not None:
            on_depth(depth_limit)

        path: List[Move] = []
        seen_on_path: Set[StateHash] = {start_hash}

        res = _dfs(state, depth_limit, path, seen_on_path, should_cancel)
        if res is not None:
            return res

    return None


def _dfs(
    state: FaceletState,
    remaining: int,
    path: List[Move],
    seen_on_path: Set[StateHash],
    should_cancel: Optional[ShouldCancelCallback] = None,
) -> Optional[List[Move]]:
    """Un recorrido con límite fijo. `path` y `seen_on_path` se comparten y se deshacen al volver.

    Returns:
        Copia de `path` al encontrar el estado resuelto; None si la rama no llega.
    """
    if should_cancel is not None and should_cancel():
        return None

    if state.is_solved():
        return list(path)

    if remaining == 0:
        return None

    last = path[-1] if path else None
    prev = path[-2] if len(path) > 1 else None

    for mv in ALL_MOVES:
        # Poda 1: no deshacer el último movimiento
        if last is not None and mv == last.inverse:
            continue

        # Poda 2: X X X se escribe mejor como X'
        if last is not None and prev is not None and mv == last == prev:
            continue

        child = apply_move(state, mv)
        h = child.to_hashable()

        if h in seen_on_path:
            continue

        path.append(mv)
        seen_on_path.add(h)

        ans = _dfs(child, remaining - 1, path, seen_on_path, should_cancel)
        if ans is not None:
            return ans

        # Backtrack
        seen_on_path.remove(h)
        path.pop()

    return None


class IddfsSolutionProvider:
    """Solver real (búsqueda) detrás de la misma interfaz que el guion fijo.

    Args:
        max_depth: Profundidad máxima de la búsqueda.
        timeout_s: Tiempo máximo en segundos (None = sin límite).
        on_depth: Callback opcional de progreso.
    """

    def __init__(
        self,
        max_depth: int = 6,
        timeout_s: Optional[float] = 10.0,
        on_depth: Optional[OnDepthCallback] = None,
    ) -> None:
        if max_depth <= 0:
            raise ValueError("max_depth debe ser mayor que 0.")
        self.max_depth = max_depth
        self.timeout_s = timeout_s
        self.on_depth = on_depth

    def generate_solution(
        self,
        state: FaceletState,
        should_cancel: Optional[ShouldCancelCallback] = None,
    ) -> Solution:
        """Resuelve `state` o lanza `SolutionUnavailableError`.

        Args:
            state: Estado a resolver.
            should_cancel: Callback opcional del llamador (por ejemplo
                `QThread.isInterruptionRequested`); se combina con el timeout.
        """
        deadline = None if self.timeout_s is None else time.monotonic() + self.timeout_s
        timed_out = False
        cancelled = False

        def stop_search() -> bool:
            nonlocal timed_out, cancelled
            if should_cancel is not None and should_cancel():
                cancelled = True
            elif deadline is not None and time.monotonic() > deadline:
                timed_out = True
            return cancelled or timed_out

        moves = iddfs_solve(state, self.max_depth, self.on_depth, stop_search)
        if cancelled:
            raise SolutionUnavailableError("Búsqueda cancelada por el llamador.")
        if timed_out:
            raise SolutionUnavailableError(f"Búsqueda cancelada: se agotaron {self.timeout_s}s.")
        if moves is None:
            raise SolutionUnavailableError(
                f"No se encontró solución con profundidad {self.max_depth}."
            )

        logger.info("IDDFS encontró %d pasos", len(moves))
        return Solution.from_moves(moves)
