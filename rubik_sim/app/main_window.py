# rubik_sim/app/main_window.py
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent, QKeyEvent
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QMainWindow,
    QMessageBox,
    QProgressBar,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from rubik_sim.app.autoplay import AutoPlayer
from rubik_sim.app.keymap import action_for_key
from rubik_sim.app.solve_worker import SolveWorker
from rubik_sim.config import SimSettings
from rubik_sim.core.errors import InvalidStateError
from rubik_sim.core.session import PuzzleSession
from rubik_sim.logic.moves import ALL_MOVES, Move
from rubik_sim.render.cube_gl_widget import CubeGLWidget
from rubik_sim.solve.iddfs_solver import IddfsSolutionProvider
from rubik_sim.solve.scripted import ScriptedSolutionProvider
from rubik_sim.solve.solution import Solution, SolutionProvider

logger = logging.getLogger(__name__)


def build_provider(settings: SimSettings) -> SolutionProvider:
    if settings.solver == "iddfs":
        return IddfsSolutionProvider(settings.solve_max_depth, settings.solve_timeout_s)
    return ScriptedSolutionProvider()


class MainWindow(QMainWindow):
    """Ventana principal del simulador 3D.

    Esta clase coordina:
    - La sesión (`PuzzleSession`), única dueña del estado del cubo
    - La visualización 3D (`CubeGLWidget`), que solo lee snapshots
    - La búsqueda de solución en segundo plano (`SolveWorker`)
    - La reproducción paso a paso y el autoplay (`AutoPlayer`)
    """

    def __init__(self, settings: Optional[SimSettings] = None) -> None:
        super().__init__()
        self.setWindowTitle("Rubik 3D - PySide6")

        # --- Sesión + render ---
        self.settings: SimSettings = settings or SimSettings()
        self.session: PuzzleSession = PuzzleSession(self.settings)
        self.provider: SolutionProvider = build_provider(self.settings)
        self.gl_widget: CubeGLWidget = CubeGLWidget(self.session.snapshot(), self)

        self.autoplayer: AutoPlayer = AutoPlayer(self.session, parent=self)
        self._solve_worker: Optional[SolveWorker] = None

        # --- UI ---
        root = QWidget()
        root_layout = QHBoxLayout(root)
        root_layout.addWidget(self.gl_widget, 1)

        panel = QWidget()
        panel_layout = QVBoxLayout(panel)
        panel.setFixedWidth(320)

        self.lbl_state = QLabel("")
        panel_layout.addWidget(self.lbl_state)

        row_main = QHBoxLayout()
        self.btn_reset = QPushButton("Reset")
        self.btn_scramble = QPushButton("Scramble")
        row_main.addWidget(self.btn_reset)
        row_main.addWidget(self.btn_scramble)
        panel_layout.addLayout(row_main)

        # Un botón por cada cuarto de vuelta
        panel_layout.addWidget(QLabel("Movimientos (teclas u d l r f b, Shift = inverso)"))
        grid = QGridLayout()
        for i, mv in enumerate(ALL_MOVES):
            btn = QPushButton(mv.value)
            btn.clicked.connect(lambda _=False, m=mv: self.on_move(m))
            grid.addWidget(btn, i % 2, i // 2)
        panel_layout.addLayout(grid)

        # Solver
        panel_layout.addWidget(QLabel("Resolver"))
        row_solve = QHBoxLayout()
        self.btn_solve = QPushButton("Buscar solución")
        self.btn_cancel_solve = QPushButton("Cancelar")
        self.btn_cancel_solve.setEnabled(False)
        row_solve.addWidget(self.btn_solve)
        row_solve.addWidget(self.btn_cancel_solve)
        panel_layout.addLayout(row_solve)

        self.solve_status = QLabel("Listo.")
        panel_layout.addWidget(self.solve_status)

        self.solve_bar = QProgressBar()
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(0)
        panel_layout.addWidget(self.solve_bar)

        panel_layout.addWidget(QLabel("Pasos"))
        self.list_solution = QListWidget()
        panel_layout.addWidget(self.list_solution, 1)

        # Reproducción
        row_play = QHBoxLayout()
        self.btn_prev = QPushButton("Anterior")
        self.btn_next = QPushButton("Siguiente")
        self.btn_auto = QPushButton("Auto")
        self.btn_stop = QPushButton("Detener")
        self.btn_restart = QPushButton("Reiniciar")
        for b in (self.btn_prev, self.btn_next, self.btn_auto, self.btn_stop, self.btn_restart):
            row_play.addWidget(b)
        panel_layout.addLayout(row_play)

        # El teclado queda para la ventana (Espacio = mezclar, no "click" del botón con foco)
        for w in panel.findChildren(QPushButton):
            w.setFocusPolicy(Qt.NoFocus)
        self.list_solution.setFocusPolicy(Qt.NoFocus)

        root_layout.addWidget(panel)
        self.setCentralWidget(root)

        # --- Conexiones ---
        self.btn_reset.clicked.connect(self.on_reset)
        self.btn_scramble.clicked.connect(self.on_scramble)
        self.btn_solve.clicked.connect(self.on_find_solution)
        self.btn_cancel_solve.clicked.connect(self.cancel_solve_search)
        self.btn_prev.clicked.connect(self.on_previous_step)
        self.btn_next.clicked.connect(self.on_next_step)
        self.btn_auto.clicked.connect(self.on_autoplay)
        self.btn_stop.clicked.connect(self.autoplayer.stop)
        self.btn_restart.clicked.connect(self.on_restart_playback)

        self.autoplayer.stepped.connect(lambda _cursor: self._refresh())
        self.autoplayer.finished.connect(self._refresh)

        self.btn_reset.setShortcut("Ctrl+R")
        self.setFocusPolicy(Qt.StrongFocus)

        self._refresh()

    # -------------------
    # Helpers UI
    # -------------------
    def _refresh(self) -> None:
        """Actualiza render, etiqueta de estado, lista de pasos y botones."""
        self.gl_widget.set_snapshot(self.session.snapshot())
        self.lbl_state.setText(
            "Estado: resuelto ✅" if self.session.is_solved() else "Estado: mezclado 🔄"
        )

        playback = self.session.playback
        has_steps = playback is not None and playback.solution.total_moves > 0
        if playback is not None and 0 <= playback.cursor < self.list_solution.count():
            self.list_solution.setCurrentRow(playback.cursor)
        elif playback is None or playback.at_start:
            self.list_solution.clearSelection()

        self.btn_prev.setEnabled(has_steps and not playback.at_start)
        self.btn_next.setEnabled(has_steps and not playback.at_end)
        self.btn_auto.setEnabled(has_steps and not playback.at_end and not self.autoplayer.running)
        self.btn_stop.setEnabled(self.autoplayer.running)
        self.btn_restart.setEnabled(has_steps)

    def _show_solution(self, solution: Optional[Solution]) -> None:
        self.list_solution.clear()
        if solution is None:
            return
        for i, step in enumerate(solution.steps, start=1):
            self.list_solution.addItem(f"{i}. {step.move.value}: {step.description}")

    # -------------------
    # Acciones del cubo
    # -------------------
    def on_move(self, move: Move) -> None:
        if self.session.make_move(move):
            self._refresh()
        else:
            self.statusBar().showMessage(f"Movimiento {move.value} descartado", 2000)

    def on_reset(self) -> None:
        """Reset completo: cubo, solución, reproducción y búsqueda."""
        self.cancel_solve_search()
        self.autoplayer.stop()
        self.session.reset()
        self._show_solution(None)
        self.solve_status.setText("Listo.")
        self._refresh()

    def on_scramble(self) -> None:
        self.cancel_solve_search()
        self.autoplayer.stop()
        result = self.session.scramble()
        self._show_solution(None)
        if result.aborted:
            self.statusBar().showMessage("Mezcla abortada: se volvió al estado resuelto", 3000)
        else:
            self.statusBar().showMessage("Mezcla: " + " ".join(m.value for m in result.moves), 5000)
        self._refresh()

    def keyPressEvent(self, event: QKeyEvent) -> None:
        if event.key() == Qt.Key_Escape:
            key = "escape"
        elif event.key() == Qt.Key_Space:
            key = " "
        else:
            key = event.text()

        action = action_for_key(key, bool(event.modifiers() & Qt.ShiftModifier))
        if action is None:
            super().keyPressEvent(event)
            return

        if action.kind == "move":
            self.on_move(action.move)
        elif action.kind == "scramble":
            self.on_scramble()
        else:
            self.on_reset()
        event.accept()

    # -------------------
    # Reproducción
    # -------------------
    def _guarded_step(self, forward: bool) -> None:
        self.autoplayer.stop()
        try:
            if forward:
                self.session.next_step()
            else:
                self.session.previous_step()
        except InvalidStateError as exc:
            self._show_solution(None)
            QMessageBox.warning(self, "Estado inválido", str(exc))
        self._refresh()

    def on_next_step(self) -> None:
        self._guarded_step(forward=True)

    def on_previous_step(self) -> None:
        self._guarded_step(forward=False)

    def on_autoplay(self) -> None:
        self.autoplayer.start()
        self._refresh()

    def on_restart_playback(self) -> None:
        self.autoplayer.stop()
        self.session.reset_playback()
        self._refresh()

    # -------------------
    # Solver (thread)
    # -------------------
    def on_find_solution(self) -> None:
        """Lanza un hilo que pide la solución al proveedor configurado."""
        if self._solve_worker is not None and self._solve_worker.isRunning():
            return

        self.autoplayer.stop()
        self.session.clear_solution()
        self._show_solution(None)

        self.solve_status.setText("Buscando solución...")
        self.solve_bar.setRange(0, 0)  # indeterminado
        self.btn_solve.setEnabled(False)
        self.btn_cancel_solve.setEnabled(True)
        self._refresh()

        self._solve_worker = SolveWorker(
            self.provider,
            self.session.state,
            self.session.revision,
            self.settings.solve_latency_ms,
        )
        self._solve_worker.finished_solution.connect(self._on_solve_finished)
        self._solve_worker.error.connect(self._on_solve_error)
        self._solve_worker.finished.connect(self._on_solve_thread_finished)
        self._solve_worker.start()

    def _solve_done(self, text: str) -> None:
        self.solve_bar.setRange(0, 1)
        self.solve_bar.setValue(1)
        self.solve_status.setText(text)
        self.btn_solve.setEnabled(True)
        self.btn_cancel_solve.setEnabled(False)

    def _on_solve_finished(self, solution: Solution, revision: int) -> None:
        if not self.session.load_solution(solution, revision):
            self._solve_done("El cubo cambió durante la búsqueda; solución descartada.")
            return

        if solution.total_moves == 0:
            self._solve_done("El cubo ya está resuelto.")
        else:
            self._solve_done(f"Solución: {solution.total_moves} pasos.")
        self._show_solution(solution)
        self._refresh()

    def _on_solve_error(self, msg: str) -> None:
        logger.error("Error en la búsqueda de solución: %s", msg)
        self._solve_done("No se pudo obtener la solución.")

    def _on_solve_thread_finished(self) -> None:
        if self._solve_worker is not None:
            self._solve_worker.deleteLater()
            self._solve_worker = None

    def cancel_solve_search(self) -> None:
        """Cancela la búsqueda si está corriendo; su resultado no se aplicará."""
        if self._solve_worker is not None and self._solve_worker.isRunning():
            self._solve_worker.requestInterruption()
            self._solve_worker.wait(300)
            self._solve_done("Búsqueda cancelada.")

    def closeEvent(self, event: QCloseEvent) -> None:
        self.autoplayer.stop()
        if self._solve_worker is not None and self._solve_worker.isRunning():
            self._solve_worker.requestInterruption()
            self._solve_worker.wait(1500)
        event.accept()
