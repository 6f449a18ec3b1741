# rubik_sim/logic/moves.py
from __future__ import annotations

from enum import Enum
from typing import Iterable, List, Set, Tuple

from rubik_sim.core.facelets import Face

VALID_FACES: Set[str] = {"U", "D", "L", "R", "F", "B"}
VALID_SUFFIX: Set[str] = {"", "'", "2"}


class Move(str, Enum):
    """Los 12 cuartos de vuelta: cara x sentido (horario / antihorario)."""

    U = "U"
    U_PRIME = "U'"
    D = "D"
    D_PRIME = "D'"
    L = "L"
    L_PRIME = "L'"
    R = "R"
    R_PRIME = "R'"
    F = "F"
    F_PRIME = "F'"
    B = "B"
    B_PRIME = "B'"

    @property
    def face(self) -> Face:
        return self.value[0]  # type: ignore[return-value]

    @property
    def is_prime(self) -> bool:
        return self.value.endswith("'")

    @property
    def inverse(self) -> "Move":
        return Move(self.face if self.is_prime else self.face + "'")

    @classmethod
    def of(cls, face: str, prime: bool = False) -> "Move":
        return cls(face + ("'" if prime else ""))

    def __str__(self) -> str:
        return self.value


ALL_MOVES: Tuple[Move, ...] = tuple(Move)


def normalize_token(tok: str) -> str:
    """Normaliza un token de movimiento a un formato estándar.

    Reglas principales:
    - Elimina espacios y convierte comilla tipográfica (’ o ‘) a comilla simple (').
    - Acepta notación de una cara con sufijo opcional:
        - ""  (ej: "R")
        - "'" (ej: "R'")
        - "2" (ej: "R2")
    - Corrige el caso típico "D2'" -> "D2" (ya que el inverso de un 180° es el mismo).

    Args:
        tok: Token de movimiento (por ejemplo: "R", "U'", "F2", "D2'").

    Returns:
        Token normalizado (por ejemplo: "D2'" -> "D2").

    Raises:
        ValueError: Si la cara no es válida o si el sufijo no es válido.
    """
    tok = tok.strip().replace("’", "'").replace("‘", "'")
    if not tok:
        return ""

    base = tok[0].upper()
    suf = tok[1:]

    if base not in VALID_FACES:
        raise ValueError(f"Movimiento inválido: {tok}")

    if suf == "2'":
        suf = "2"

    if suf not in VALID_SUFFIX:
        raise ValueError(f"Sufijo inválido en: {tok}")

    return base + suf


def expand_token(tok: str) -> List[Move]:
    """Convierte un token en cuartos de vuelta ("R2" -> [R, R])."""
    tok = normalize_token(tok)
    if not tok:
        return []
    if tok.endswith("2"):
        return [Move(tok[0])] * 2
    return [Move(tok)]


def inverse_move(m: "Move | str") -> Move:
    """Devuelve el movimiento inverso (alterna horario / antihorario).

    Ejemplos:
        - "R"  -> R'
        - "R'" -> R

    Raises:
        ValueError: Si `m` no es uno de los 12 cuartos de vuelta.
    """
    if isinstance(m, Move):
        return m.inverse
    tok = normalize_token(m)
    if not tok or tok.endswith("2"):
        raise ValueError(f"Se esperaba un cuarto de vuelta: {m!r}")
    return Move(tok).inverse


def parse_sequence(text: str) -> List[Move]:
    """Convierte una secuencia escrita como texto en una lista de movimientos.

    La entrada debe separar movimientos por espacios. Los giros dobles se
    expanden a dos cuartos de vuelta:
        "R U2 R' U'" -> [R, U, U, R', U']

    Raises:
        ValueError: Si algún token es inválido.
    """
    out: List[Move] = []
    for t in text.strip().split():
        out.extend(expand_token(t))
    return out


def format_sequence(moves: Iterable[Move]) -> str:
    return " ".join(m.value for m in moves)


def invert_sequence(moves: Iterable[Move]) -> List[Move]:
    """Secuencia inversa: orden invertido y cada movimiento invertido."""
    return [m.inverse for m in reversed(list(moves))]
