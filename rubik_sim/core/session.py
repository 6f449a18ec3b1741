# rubik_sim/core/session.py
from __future__ import annotations

import logging
import random
from typing import Optional

from rubik_sim.config import SimSettings
from rubik_sim.core.errors import InvalidStateError
from rubik_sim.core.facelets import FaceletState, solved_state
from rubik_sim.core.playback import PlaybackController
from rubik_sim.core.validator import ensure_valid_state
from rubik_sim.logic.algebra import MoveFn, apply_move
from rubik_sim.logic.moves import Move
from rubik_sim.logic.scramble import ScrambleResult, scramble
from rubik_sim.render.adapter import RenderSnapshot
from rubik_sim.solve.solution import Solution

logger = logging.getLogger(__name__)


class PuzzleSession:
    """Dueño del estado del cubo durante una sesión.

    Toda mutación pasa por aquí: se calcula el estado candidato con el álgebra
    de movimientos (función pura), se valida y solo entonces se confirma. El
    render lee `snapshot()` y nunca modifica nada.

    `revision` crece con cada cambio confirmado; sirve para descartar
    resultados asíncronos (solver) calculados sobre un estado viejo.

    Args:
        settings: Configuración (largo de mezcla, etc.).
        move_fn: Función de movimiento (por defecto `apply_move`).
        rng: Generador aleatorio para las mezclas.
    """

    def __init__(
        self,
        settings: Optional[SimSettings] = None,
        move_fn: MoveFn = apply_move,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.settings: SimSettings = settings or SimSettings()
        self._move_fn = move_fn
        self._rng = rng or random.Random()
        self._state: FaceletState = solved_state()
        self._revision = 0
        self._playback: Optional[PlaybackController] = None

    # --------------------------
    # Lectura
    # --------------------------
    @property
    def state(self) -> FaceletState:
        return self._state

    @property
    def revision(self) -> int:
        return self._revision

    @property
    def playback(self) -> Optional[PlaybackController]:
        return self._playback

    @property
    def solution(self) -> Optional[Solution]:
        return self._playback.solution if self._playback is not None else None

    def is_solved(self) -> bool:
        return self._state.is_solved()

    def snapshot(self) -> RenderSnapshot:
        return RenderSnapshot(self._state, self._revision)

    # --------------------------
    # Movimientos
    # --------------------------
    def _commit(self, state: FaceletState) -> None:
        self._state = state
        self._revision += 1

    def apply_move(self, move: Move) -> FaceletState:
        """Aplica un movimiento validando el resultado.

        Raises:
            InvalidStateError: Si el estado candidato es inválido. El estado
                confirmado no cambia.
        """
        move = Move(move)
        candidate = self._move_fn(self._state, move)
        ensure_valid_state(candidate, f"movimiento {move.value}")
        self._commit(candidate)
        return candidate

    def make_move(self, move: Move) -> bool:
        """Movimiento del usuario (teclado / botones).

        Detiene el autoplay. Si el movimiento produce un estado inválido se
        descarta y se registra el error.

        Returns:
            True si se aplicó.
        """
        self.stop_autoplay()
        try:
            self.apply_move(move)
        except InvalidStateError as exc:
            logger.error("Movimiento %s descartado: %s", Move(move).value, exc)
            return False
        return True

    def reset(self) -> None:
        """Reset completo: cubo resuelto y sin solución cargada."""
        self._playback = None
        self._commit(solved_state())
        logger.info("Cubo reiniciado")

    def scramble(self, n: Optional[int] = None) -> ScrambleResult:
        """Mezcla desde el estado resuelto y descarta la solución cargada."""
        result = scramble(
            self.settings.scramble_length if n is None else n,
            rng=self._rng,
            apply=self._move_fn,
        )
        self._playback = None
        self._commit(result.state)
        return result

    # --------------------------
    # Solución y reproducción
    # --------------------------
    def load_solution(self, solution: Solution, revision: Optional[int] = None) -> bool:
        """Carga una solución y deja el cursor antes del primer paso.

        Args:
            solution: Lista de pasos (no se verifica que resuelva el cubo).
            revision: Revisión para la que se calculó. Si el cubo cambió desde
                entonces, la solución se ignora.

        Returns:
            True si se cargó.
        """
        if revision is not None and revision != self._revision:
            logger.info(
                "Solución descartada: calculada para la revisión %d, actual %d",
                revision,
                self._revision,
            )
            return False
        self._playback = PlaybackController(solution, self._apply_playback_move)
        logger.info("Solución cargada: %d pasos", solution.total_moves)
        return True

    def clear_solution(self) -> None:
        self._playback = None

    def _apply_playback_move(self, move: Move) -> None:
        self.apply_move(move)

    def _step(self, forward: bool) -> bool:
        if self._playback is None:
            return False
        try:
            return self._playback.next() if forward else self._playback.previous()
        except InvalidStateError:
            # Estado corrupto durante la reproducción: se abandona la solución
            logger.error("Estado inválido durante la reproducción; se descarta la solución")
            self._playback = None
            raise

    def next_step(self) -> bool:
        return self._step(forward=True)

    def previous_step(self) -> bool:
        return self._step(forward=False)

    def reset_playback(self) -> None:
        """Reinicia el progreso de la reproducción (no toca el cubo)."""
        if self._playback is not None:
            self._playback.reset()

    def start_autoplay(self) -> bool:
        if self._playback is None:
            return False
        return self._playback.start_autoplay()

    def stop_autoplay(self) -> None:
        if self._playback is not None:
            self._playback.stop_autoplay()

    @property
    def autoplaying(self) -> bool:
        return self._playback is not None and self._playback.autoplaying

    def autoplay_tick(self) -> bool:
        if self._playback is None or not self._playback.autoplaying:
            return False
        try:
            return self._playback.autoplay_tick()
        except InvalidStateError:
            logger.error("Estado inválido durante el autoplay; se descarta la solución")
            self._playback = None
            raise
