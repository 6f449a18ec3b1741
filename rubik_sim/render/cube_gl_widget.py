# rubik_sim/render/cube_gl_widget.py
from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from PySide6.QtCore import QPoint, Qt
from PySide6.QtGui import QMouseEvent, QWheelEvent
from PySide6.QtOpenGLWidgets import QOpenGLWidget

from OpenGL.GL import (
    glBegin,
    glClear,
    glClearColor,
    glColor3f,
    glEnable,
    glEnd,
    glLoadIdentity,
    glMatrixMode,
    glRotatef,
    glTranslatef,
    glVertex3f,
    glViewport,
    GL_COLOR_BUFFER_BIT,
    GL_DEPTH_BUFFER_BIT,
    GL_DEPTH_TEST,
    GL_MODELVIEW,
    GL_PROJECTION,
    GL_QUADS,
)
from OpenGL.GLU import gluPerspective

from rubik_sim.core.facelets import Color
from rubik_sim.render.adapter import RenderSnapshot, Vec3i, iter_exposed_facelets

Vec3f = Tuple[float, float, float]

PALETTE: Dict[Color, Vec3f] = {
    Color.WHITE: (1.0, 1.0, 1.0),
    Color.YELLOW: (1.0, 1.0, 0.0),
    Color.ORANGE: (1.0, 0.5, 0.0),
    Color.RED: (1.0, 0.0, 0.0),
    Color.GREEN: (0.0, 0.85, 0.0),
    Color.BLUE: (0.0, 0.35, 1.0),
}
PLASTIC: Vec3f = (0.05, 0.05, 0.06)
STEP = 2.0 / 3.0


class CubeGLWidget(QOpenGLWidget):
    """Widget OpenGL que dibuja el último estado confirmado del cubo.

    Solo lee: recibe un `RenderSnapshot` y nunca modifica el cubo.
    - Render OpenGL clásico (sin shaders).
    - Stickers 3x3 con "plástico" detrás.
    - Cámara orbital con botón derecho y zoom con la rueda.
    """

    def __init__(self, snapshot: Optional[RenderSnapshot] = None, parent=None) -> None:
        super().__init__(parent)
        self.snapshot: Optional[RenderSnapshot] = snapshot

        # Cámara / orbit
        self.yaw: float = 35.0
        self.pitch: float = -20.0
        self.distance: float = 6.0

        self._last_mouse_pos: QPoint = QPoint()
        self._orbiting: bool = False

        self.sticker_margin: float = 0.04
        self.sticker_offset: float = 0.01

        self.setFocusPolicy(Qt.NoFocus)

    def set_snapshot(self, snapshot: RenderSnapshot) -> None:
        self.snapshot = snapshot
        self.update()

    # --------------------------
    # OpenGL lifecycle
    # --------------------------
    def initializeGL(self) -> None:
        glClearColor(0.10, 0.10, 0.12, 1.0)
        glEnable(GL_DEPTH_TEST)

    def resizeGL(self, w: int, h: int) -> None:
        """Ajusta viewport y proyección (tiene en cuenta HiDPI)."""
        if h == 0:
            h = 1

        dpr = self.devicePixelRatioF()
        fb_w = int(w * dpr)
        fb_h = int(h * dpr)

        glViewport(0, 0, fb_w, fb_h)

        glMatrixMode(GL_PROJECTION)
        glLoadIdentity()
        gluPerspective(45.0, fb_w / float(fb_h), 0.1, 100.0)

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()

    def paintGL(self) -> None:
        glClear(GL_COLOR_BUFFER_BIT | GL_DEPTH_BUFFER_BIT)
        if self.snapshot is None:
            return

        glMatrixMode(GL_MODELVIEW)
        glLoadIdentity()
        glTranslatef(0.0, 0.0, -self.distance)
        glRotatef(self.pitch, 1.0, 0.0, 0.0)
        glRotatef(self.yaw, 0.0, 1.0, 0.0)

        self._draw_stickers()

    def _draw_stickers(self) -> None:
        glBegin(GL_QUADS)
        for pos, normal, face, r, c in iter_exposed_facelets():
            color = self.snapshot.get_facelet_color(face, r, c)

            # Base "plástico" un poco más grande y más atrás que el sticker
            glColor3f(*PLASTIC)
            for v in self._sticker_quad(pos, normal, 0.02, self.sticker_offset * 0.55):
                glVertex3f(*v)

            glColor3f(*PALETTE.get(color, (0.8, 0.8, 0.8)))
            for v in self._sticker_quad(pos, normal, self.sticker_margin, self.sticker_offset):
                glVertex3f(*v)
        glEnd()

    @staticmethod
    def _sticker_quad(pos: Vec3i, normal: Vec3i, margin: float, offset: float) -> List[Vec3f]:
        """Los 4 vértices del sticker que el cubie `pos` muestra hacia `normal`.

        El cubo ocupa [-1, 1] en cada eje; cada sticker mide 2/3.
        """
        axis = [abs(v) for v in normal].index(1)
        t1, t2 = [i for i in range(3) if i != axis]

        center = [p * STEP for p in pos]
        center[axis] = normal[axis] * (1.0 + offset)
        half = STEP / 2.0 - margin

        quad: List[Vec3f] = []
        for s1, s2 in ((-1, -1), (1, -1), (1, 1), (-1, 1)):
            v = list(center)
            v[t1] += s1 * half
            v[t2] += s2 * half
            quad.append((v[0], v[1], v[2]))
        return quad

    # --------------------------
    # Cámara
    # --------------------------
    def mousePressEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.RightButton:
            self._orbiting = True
            self._last_mouse_pos = event.pos()
            event.accept()
            return
        super().mousePressEvent(event)

    def mouseMoveEvent(self, event: QMouseEvent) -> None:
        if self._orbiting:
            dx = event.position().x() - self._last_mouse_pos.x()
            dy = event.position().y() - self._last_mouse_pos.y()
            self._last_mouse_pos = event.pos()

            sens = 0.4
            self.yaw += dx * sens
            self.pitch = max(-89.0, min(89.0, self.pitch + dy * sens))

            self.update()
            event.accept()
            return
        super().mouseMoveEvent(event)

    def mouseReleaseEvent(self, event: QMouseEvent) -> None:
        if event.button() == Qt.RightButton and self._orbiting:
            self._orbiting = False
            event.accept()
            return
        super().mouseReleaseEvent(event)

    def wheelEvent(self, event: QWheelEvent) -> None:
        delta = event.angleDelta().y() / 120.0
        self.distance = max(2.5, min(20.0, self.distance - delta * 0.3))
        self.update()
        event.accept()
