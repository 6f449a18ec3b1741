# rubik_sim/app/autoplay.py
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, QTimer, Signal

from rubik_sim.core.errors import InvalidStateError
from rubik_sim.core.session import PuzzleSession

logger = logging.getLogger(__name__)


class AutoPlayer(QObject):
    """Temporizador que reproduce la solución cargada, un paso por tick.

    Cada tick es un `next` indivisible sobre la sesión. El timer se detiene en
    cuanto la sesión deja de estar en autoplay (fin de la solución, `stop`,
    movimiento del usuario, reset o mezcla), así ningún tick pendiente se
    aplica sobre un estado que el usuario ya cambió.

    Signals:
        stepped(int): Cursor después de cada paso.
        finished(): El autoplay terminó (por cualquier motivo).
    """

    stepped = Signal(int)
    finished = Signal()

    def __init__(self, session: PuzzleSession, interval_ms: Optional[int] = None, parent=None) -> None:
        super().__init__(parent)
        self.session = session
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms or session.settings.autoplay_interval_ms)
        self._timer.timeout.connect(self._on_tick)

    @property
    def running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> bool:
        """Arranca el autoplay. Retorna False si no hay pasos pendientes."""
        if not self.session.start_autoplay():
            return False
        self._timer.start()
        return True

    def stop(self) -> None:
        self.session.stop_autoplay()
        self._halt()

    def _halt(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            self.finished.emit()

    def _on_tick(self) -> None:
        if not self.session.autoplaying:
            self._halt()
            return

        try:
            self.session.autoplay_tick()
        except InvalidStateError as exc:
            logger.error("Autoplay detenido: %s", exc)
            self._halt()
            return

        playback = self.session.playback
        if playback is not None:
            self.stepped.emit(playback.cursor)
        if not self.session.autoplaying:
            self._halt()
