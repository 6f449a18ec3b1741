# rubik_sim/solve/scripted.py
from __future__ import annotations

import logging
from typing import Callable, List, Optional, Tuple

from rubik_sim.core.facelets import FaceletState
from rubik_sim.logic.moves import Move
from rubik_sim.solve.solution import Solution, SolutionStep

logger = logging.getLogger(__name__)

# Guion fijo "capa por capa". No depende del estado: es una demostración de
# reproducción paso a paso, no un solver real (para eso está IddfsSolutionProvider).
SCRIPT: List[Tuple[str, str]] = [
    ("F", "Cruz blanca: primer paso"),
    ("R", "Cruz blanca: ajustar cara derecha"),
    ("U", "Cruz blanca: girar capa superior"),
    ("R'", "Cruz blanca: terminar ajuste derecho"),
    ("F'", "Cruz blanca: terminar ajuste frontal"),
    ("R", "Esquinas blancas: empezar"),
    ("D", "Esquinas blancas: ajustar capa inferior"),
    ("R'", "Esquinas blancas: insertar esquina"),
    ("D'", "Esquinas blancas: terminar"),
    ("U", "Capa media: empezar"),
    ("R", "Capa media: algoritmo de mano derecha"),
    ("U'", "Capa media: seguir algoritmo"),
    ("R'", "Capa media: terminar algoritmo"),
    ("F", "Cruz amarilla: F R U R' U' F' (1/6)"),
    ("R", "Cruz amarilla: F R U R' U' F' (2/6)"),
    ("U", "Cruz amarilla: F R U R' U' F' (3/6)"),
    ("R'", "Cruz amarilla: F R U R' U' F' (4/6)"),
    ("U'", "Cruz amarilla: F R U R' U' F' (5/6)"),
    ("F'", "Cruz amarilla: F R U R' U' F' (6/6)"),
    ("R", "Esquinas amarillas: R D' R' D (1/4)"),
    ("D'", "Esquinas amarillas: R D' R' D (2/4)"),
    ("R'", "Esquinas amarillas: R D' R' D (3/4)"),
    ("D", "Esquinas amarillas: R D' R' D (4/4)"),
    ("U", "Ajuste final"),
]


class ScriptedSolutionProvider:
    """Proveedor que devuelve siempre el mismo guion de 24 pasos.

    Si el cubo ya está resuelto devuelve una solución vacía.
    """

    def generate_solution(
        self,
        state: FaceletState,
        should_cancel: Optional[Callable[[], bool]] = None,
    ) -> Solution:
        if state.is_solved():
            logger.info("El cubo ya está resuelto; no hay pasos.")
            return Solution.empty()
        return Solution(tuple(SolutionStep(Move(m), d) for m, d in SCRIPT))
