# rubik_sim/core/playback.py
from __future__ import annotations

import logging
from typing import Callable, Optional

from rubik_sim.core.errors import InvalidStateError
from rubik_sim.logic.moves import Move
from rubik_sim.solve.solution import Solution, SolutionStep

logger = logging.getLogger(__name__)

BEFORE_FIRST = -1


class PlaybackController:
    """Cursor sobre la lista de pasos de una solución.

    Estados:
        - `cursor == -1`: antes del primer paso.
        - `cursor == i`: el paso `i` ya fue aplicado.

    Transiciones:
        - `next`: aplica `steps[cursor + 1].move` y avanza. No hace nada al final.
        - `previous`: aplica el inverso de `steps[cursor].move` y retrocede.
          No hace nada antes del primer paso.
        - `reset`: vuelve el cursor a -1 sin tocar el cubo.
        - autoplay: cada tick es un `next`; se detiene al llegar al final.

    Args:
        solution: Solución a reproducir (solo lectura).
        apply_move: Función que valida y confirma un movimiento en el cubo
            vivo. Si lanza `InvalidStateError` el cursor no se mueve.
    """

    def __init__(self, solution: Solution, apply_move: Callable[[Move], object]) -> None:
        self._solution = solution
        self._apply = apply_move
        self._cursor = BEFORE_FIRST
        self._autoplaying = False

    # --------------------------
    # Lectura
    # --------------------------
    @property
    def solution(self) -> Solution:
        return self._solution

    @property
    def cursor(self) -> int:
        return self._cursor

    @property
    def at_start(self) -> bool:
        return self._cursor == BEFORE_FIRST

    @property
    def at_end(self) -> bool:
        return self._cursor >= self._solution.total_moves - 1

    @property
    def current_step(self) -> Optional[SolutionStep]:
        if self.at_start:
            return None
        return self._solution.steps[self._cursor]

    @property
    def autoplaying(self) -> bool:
        return self._autoplaying

    # --------------------------
    # Transiciones
    # --------------------------
    def next(self) -> bool:
        """Avanza un paso. Retorna False si ya estaba al final."""
        if self.at_end:
            return False

        step = self._solution.steps[self._cursor + 1]
        try:
            self._apply(step.move)
        except InvalidStateError:
            self._autoplaying = False
            raise
        self._cursor += 1
        logger.debug("Paso %d/%d: %s", self._cursor + 1, self._solution.total_moves, step.move.value)
        return True

    def previous(self) -> bool:
        """Deshace el paso actual con el movimiento inverso. Retorna False si no hay paso."""
        if self.at_start:
            return False

        step = self._solution.steps[self._cursor]
        self._apply(step.move.inverse)
        self._cursor -= 1
        logger.debug("Retroceso a %d: %s", self._cursor, step.move.inverse.value)
        return True

    def reset(self) -> None:
        """Solo reinicia el progreso; el estado del cubo se resetea aparte."""
        self._cursor = BEFORE_FIRST
        self._autoplaying = False

    # --------------------------
    # Autoplay
    # --------------------------
    def start_autoplay(self) -> bool:
        if self.at_end:
            self._autoplaying = False
            return False
        self._autoplaying = True
        return True

    def stop_autoplay(self) -> None:
        self._autoplaying = False

    def autoplay_tick(self) -> bool:
        """Un tick del temporizador: un `next` si el autoplay sigue activo.

        Returns:
            True si se aplicó un paso.
        """
        if not self._autoplaying:
            return False
        advanced = self.next()
        if self.at_end:
            self._autoplaying = False
        return advanced
