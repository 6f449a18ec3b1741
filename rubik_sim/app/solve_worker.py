# rubik_sim/app/solve_worker.py
from __future__ import annotations

import traceback

from PySide6.QtCore import QThread, Signal

from rubik_sim.core.errors import SolutionUnavailableError
from rubik_sim.core.facelets import FaceletState
from rubik_sim.solve.solution import SolutionProvider

LATENCY_SLICE_MS = 20


class SolveWorker(QThread):
    """Hilo de trabajo para pedir una solución sin bloquear la UI.

    Espera la latencia simulada y luego consulta al proveedor sobre una copia
    del estado (inmutable), emitiendo señales con el resultado.

    Signals:
        finished_solution(object, int): La solución y la revisión del cubo para
            la que se calculó.
        error(str): Mensaje si el proveedor falla (o traceback si algo inesperado falla).

    Si se pide la interrupción (`requestInterruption`) no se emite nada.
    """

    finished_solution = Signal(object, int)
    error = Signal(str)

    def __init__(
        self,
        provider: SolutionProvider,
        state: FaceletState,
        revision: int,
        latency_ms: int = 0,
    ) -> None:
        """Crea el worker.

        Args:
            provider: Proveedor de soluciones.
            state: Estado a resolver. Es inmutable, así que la UI puede seguir
                cambiando el cubo sin condiciones de carrera.
            revision: Revisión de la sesión al momento del pedido.
            latency_ms: Demora simulada antes de consultar al proveedor.
        """
        super().__init__()
        self.provider = provider
        self.state: FaceletState = state
        self.revision: int = revision
        self.latency_ms: int = latency_ms

    def _wait_latency(self) -> bool:
        """Duerme la latencia en tramos cortos. Retorna False si se interrumpió."""
        waited = 0
        while waited < self.latency_ms:
            if self.isInterruptionRequested():
                return False
            step = min(LATENCY_SLICE_MS, self.latency_ms - waited)
            self.msleep(step)
            waited += step
        return not self.isInterruptionRequested()

    def run(self) -> None:
        """Punto de entrada del hilo."""
        if not self._wait_latency():
            return
        try:
            solution = self.provider.generate_solution(
                self.state, should_cancel=self.isInterruptionRequested
            )
        except SolutionUnavailableError as exc:
            if not self.isInterruptionRequested():
                self.error.emit(str(exc))
            return
        except Exception:
            self.error.emit(traceback.format_exc())
            return

        if self.isInterruptionRequested():
            return
        self.finished_solution.emit(solution, self.revision)
