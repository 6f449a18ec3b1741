# rubik_sim/solve/solution.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Optional, Protocol, Sequence, Tuple

from rubik_sim.core.facelets import FaceletState
from rubik_sim.logic.moves import Move


@dataclass(frozen=True)
class SolutionStep:
    move: Move
    description: str = ""


@dataclass(frozen=True)
class Solution:
    """Lista ordenada y ya finalizada de pasos.

    El motor no verifica que los pasos resuelvan el cubo: solo los reproduce.
    """

    steps: Tuple[SolutionStep, ...] = ()
    is_valid: bool = True

    def __post_init__(self) -> None:
        object.__setattr__(self, "steps", tuple(self.steps))

    @property
    def total_moves(self) -> int:
        return len(self.steps)

    @property
    def moves(self) -> Tuple[Move, ...]:
        return tuple(s.move for s in self.steps)

    @classmethod
    def empty(cls) -> "Solution":
        return cls(())

    @classmethod
    def from_moves(
        cls,
        moves: Iterable[Move],
        descriptions: Optional[Sequence[str]] = None,
    ) -> "Solution":
        """Arma una solución a partir de movimientos (y descripciones opcionales)."""
        moves = [Move(m) for m in moves]
        if descriptions is None:
            descriptions = [f"Paso {i}: {m.value}" for i, m in enumerate(moves, start=1)]
        if len(descriptions) != len(moves):
            raise ValueError("Debe haber una descripción por movimiento.")
        return cls(tuple(SolutionStep(m, d) for m, d in zip(moves, descriptions)))


class SolutionProvider(Protocol):
    """Colaborador externo que produce una solución para un estado.

    Puede tardar (se ejecuta en un hilo aparte). Ante un fallo lanza
    `SolutionUnavailableError`. Si `should_cancel` devuelve True la búsqueda
    debe cortarse lo antes posible.
    """

    def generate_solution(
        self,
        state: FaceletState,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> Solution:
        ...
