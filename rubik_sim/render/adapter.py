# rubik_sim/render/adapter.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterator, Tuple

from rubik_sim.core.facelets import FACES, Cell, Color, Face, FaceletState

Vec3i = Tuple[int, int, int]

# Normales por cara (x, y, z): x a la derecha, y hacia arriba, z hacia el frente
FACE_NORMAL: Dict[Face, Vec3i] = {
    "U": (0, 1, 0),
    "D": (0, -1, 0),
    "L": (-1, 0, 0),
    "R": (1, 0, 0),
    "F": (0, 0, 1),
    "B": (0, 0, -1),
}
_NORMAL_FACE: Dict[Vec3i, Face] = {n: f for f, n in FACE_NORMAL.items()}
_AXIS_VALUES = (-1, 0, 1)


def face_for_normal(normal: Vec3i) -> Face:
    """Cara cuya normal exterior es `normal`.

    Raises:
        ValueError: Si `normal` no es una de las 6 normales unitarias.
    """
    try:
        return _NORMAL_FACE[tuple(normal)]
    except KeyError:
        raise ValueError(f"Normal inválida: {normal}") from None


def cell_for_cubie_position(x: int, y: int, z: int, normal: Vec3i) -> Cell:
    """Celda (fila, columna) del sticker que muestra el cubie `(x, y, z)` hacia `normal`.

    Cada cara se ve desde afuera:
        - F: fila = 1-y, col = x+1
        - B: fila = 1-y, col = 1-x   (X invertido)
        - R: fila = 1-y, col = 1-z   (Z invertido)
        - L: fila = 1-y, col = z+1
        - U: fila = z+1, col = x+1   (fila 0 junto a B)
        - D: fila = 1-z, col = x+1   (fila 0 junto a F)

    Raises:
        ValueError: Si alguna coordenada no está en {-1, 0, 1} o si el cubie no
            toca la cara indicada por `normal`.
    """
    if any(v not in _AXIS_VALUES for v in (x, y, z)):
        raise ValueError(f"Coordenada fuera de la grilla: {(x, y, z)}")

    face = face_for_normal(normal)
    nx, ny, nz = normal
    if (nx and x != nx) or (ny and y != ny) or (nz and z != nz):
        raise ValueError(f"El cubie {(x, y, z)} no está en la cara {face}")

    if face == "F":
        return 1 - y, x + 1
    if face == "B":
        return 1 - y, 1 - x
    if face == "R":
        return 1 - y, 1 - z
    if face == "L":
        return 1 - y, z + 1
    if face == "U":
        return z + 1, x + 1
    return 1 - z, x + 1  # D


def cubie_position_for_cell(face: Face, row: int, col: int) -> Tuple[Vec3i, Vec3i]:
    """Inversa de `cell_for_cubie_position`: (posición del cubie, normal)."""
    if not (0 <= row < 3 and 0 <= col < 3):
        raise ValueError(f"Celda fuera de rango: ({row}, {col})")

    if face == "F":
        pos: Vec3i = (col - 1, 1 - row, 1)
    elif face == "B":
        pos = (1 - col, 1 - row, -1)
    elif face == "R":
        pos = (1, 1 - row, 1 - col)
    elif face == "L":
        pos = (-1, 1 - row, col - 1)
    elif face == "U":
        pos = (col - 1, 1, row - 1)
    elif face == "D":
        pos = (col - 1, -1, 1 - row)
    else:
        raise ValueError(f"Cara inválida: {face}")
    return pos, FACE_NORMAL[face]


def iter_exposed_facelets() -> Iterator[Tuple[Vec3i, Vec3i, Face, int, int]]:
    """Recorre los 26 cubies visibles y sus caras expuestas (54 stickers en total).

    Yields:
        `(posición, normal, cara, fila, columna)`.
    """
    for x in _AXIS_VALUES:
        for y in _AXIS_VALUES:
            for z in _AXIS_VALUES:
                for face in FACES:
                    normal = FACE_NORMAL[face]
                    if (x, y, z)[[abs(v) for v in normal].index(1)] != sum(normal):
                        continue
                    r, c = cell_for_cubie_position(x, y, z, normal)
                    yield (x, y, z), normal, face, r, c


@dataclass(frozen=True)
class RenderSnapshot:
    """Vista de solo lectura del último estado confirmado, para la capa de render."""

    state: FaceletState
    revision: int = 0

    def get_facelet_color(self, face: Face, row: int, col: int) -> Color:
        return self.state.color_at(face, row, col)

    @property
    def is_solved(self) -> bool:
        return self.state.is_solved()
