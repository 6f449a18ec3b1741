# rubik_sim/core/facelets.py
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterator, List, Literal, Mapping, Sequence, Tuple

Face = Literal["U", "D", "L", "R", "F", "B"]
Cell = Tuple[int, int]  # (fila, columna)
FaceGrid = Tuple[Tuple["Color", ...], ...]
StateHash = Tuple[Tuple["Color", ...], ...]

FACES: Tuple[Face, ...] = ("U", "D", "L", "R", "F", "B")


class Color(str, Enum):
    """Colores de los stickers (mismas letras que usa el render)."""

    WHITE = "W"
    YELLOW = "Y"
    ORANGE = "O"
    RED = "R"
    GREEN = "G"
    BLUE = "B"


SOLVED_COLORS: Dict[Face, Color] = {
    "U": Color.WHITE,
    "D": Color.YELLOW,
    "L": Color.ORANGE,
    "R": Color.RED,
    "F": Color.GREEN,
    "B": Color.BLUE,
}


def rotate_face_clockwise(face: Sequence[Sequence]) -> FaceGrid:
    """Rota una cara 3x3 90° en sentido horario.

    La celda `(i, j)` pasa a `(j, 2 - i)`.

    Args:
        face: Matriz 3x3 (filas de 3 valores).

    Returns:
        Nueva matriz 3x3 como tupla de tuplas.
    """
    # new[j][2 - i] = face[i][j]  =>  new[r][c] = face[2 - c][r]
    return tuple(tuple(face[2 - c][r] for c in range(3)) for r in range(3))


def rotate_face_counterclockwise(face: Sequence[Sequence]) -> FaceGrid:
    """Rotación antihoraria: tres rotaciones horarias seguidas."""
    out = _as_grid(face)
    for _ in range(3):
        out = rotate_face_clockwise(out)
    return out


def _as_grid(face: Sequence[Sequence]) -> FaceGrid:
    rows = tuple(tuple(row) for row in face)
    if len(rows) != 3 or any(len(row) != 3 for row in rows):
        raise ValueError("Cada cara debe ser una matriz 3x3.")
    return rows


@dataclass(frozen=True)
class FaceletState:
    """Estado inmutable de los 54 stickers del cubo.

    Representación:
        - `faces` contiene una matriz 3x3 por cara, en el orden de `FACES`
          (U, D, L, R, F, B).
        - Cada cara se ve desde afuera. En las caras laterales la fila 0 toca
          la cara U; en U la fila 0 toca B; en D la fila 0 toca F.

    Ningún método modifica la instancia: las "escrituras" devuelven un estado
    nuevo. El constructor solo valida la forma (6 x 3 x 3), no los colores, de
    modo que los movimientos son funciones totales sobre cualquier entrada.
    """

    faces: Tuple[FaceGrid, ...]

    def __post_init__(self) -> None:
        if len(self.faces) != len(FACES):
            raise ValueError(f"Se esperaban 6 caras, llegaron {len(self.faces)}.")
        object.__setattr__(self, "faces", tuple(_as_grid(f) for f in self.faces))

    # --------------------------
    # Construcción
    # --------------------------
    @classmethod
    def from_mapping(cls, faces: Mapping[Face, Sequence[Sequence]]) -> "FaceletState":
        """Crea un estado a partir de un dict `cara -> matriz 3x3`.

        Raises:
            ValueError: Si falta alguna cara o alguna matriz no es 3x3.
        """
        missing = [f for f in FACES if f not in faces]
        if missing:
            raise ValueError(f"Faltan caras: {', '.join(missing)}")
        return cls(tuple(_as_grid(faces[f]) for f in FACES))

    def replace_faces(self, updates: Mapping[Face, Sequence[Sequence]]) -> "FaceletState":
        """Devuelve un estado nuevo con las caras indicadas reemplazadas."""
        return FaceletState(
            tuple(
                _as_grid(updates[f]) if f in updates else self.faces[i]
                for i, f in enumerate(FACES)
            )
        )

    # --------------------------
    # Lectura
    # --------------------------
    def __getitem__(self, face: Face) -> FaceGrid:
        return self.faces[FACES.index(face)]

    def color_at(self, face: Face, row: int, col: int) -> Color:
        """Color del sticker `(row, col)` de `face`.

        Raises:
            IndexError: Si la fila o la columna están fuera de 0..2.
        """
        if not (0 <= row < 3 and 0 <= col < 3):
            raise IndexError(f"Celda fuera de rango: ({row}, {col})")
        return self[face][row][col]

    def cells(self) -> Iterator[Color]:
        """Itera los 54 stickers (orden de caras, luego fila-columna)."""
        for grid in self.faces:
            for row in grid:
                yield from row

    def to_hashable(self) -> StateHash:
        """Tupla de 6 tuplas con los 9 stickers por cara, en el orden de `FACES`."""
        return tuple(tuple(v for row in grid for v in row) for grid in self.faces)

    def to_dict(self) -> Dict[Face, List[List[Color]]]:
        return {f: [list(row) for row in self[f]] for f in FACES}

    def is_solved(self) -> bool:
        """Indica si cada cara tiene un único color y coincide con `SOLVED_COLORS`."""
        for f in FACES:
            if any(v != SOLVED_COLORS[f] for row in self[f] for v in row):
                return False
        return True


def solved_state() -> FaceletState:
    """Estado resuelto canónico (U blanco, D amarillo, L naranja, R rojo, F verde, B azul)."""
    return FaceletState(
        tuple(tuple((SOLVED_COLORS[f],) * 3 for _ in range(3)) for f in FACES)
    )
