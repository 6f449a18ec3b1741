# rubik_sim/core/validator.py
from __future__ import annotations

import logging
from collections import Counter
from typing import Dict

from rubik_sim.core.errors import InvalidStateError
from rubik_sim.core.facelets import Color, FaceletState

logger = logging.getLogger(__name__)

STICKERS_PER_COLOR = 9


def color_counts(state: FaceletState) -> Dict[str, int]:
    """Cuenta los stickers de cada color.

    Los valores que no son `Color` se cuentan con su `str`, así un estado
    corrupto se puede reportar sin excepciones.

    Returns:
        Dict `letra de color -> cantidad`, incluyendo los 6 colores aunque tengan 0.
    """
    counts: Counter = Counter()
    for v in state.cells():
        counts[v.value if isinstance(v, Color) else str(v)] += 1
    out: Dict[str, int] = {c.value: counts.pop(c.value, 0) for c in Color}
    out.update(counts)
    return out


def is_valid_state(state: FaceletState) -> bool:
    """Verifica que cada uno de los 6 colores aparezca exactamente 9 veces.

    Es un chequeo barato de cordura: no detecta configuraciones ilegales que
    conserven la cantidad por color (por ejemplo, dos stickers intercambiados).
    Nunca modifica el estado.
    """
    counts = color_counts(state)
    return len(counts) == len(Color) and all(
        counts[c.value] == STICKERS_PER_COLOR for c in Color
    )


def ensure_valid_state(state: FaceletState, context: str = "") -> FaceletState:
    """Devuelve `state` si es válido; si no, lanza `InvalidStateError`.

    Args:
        state: Estado candidato.
        context: Texto opcional para el mensaje (por ejemplo, el movimiento aplicado).

    Raises:
        InvalidStateError: Si algún color no aparece exactamente 9 veces.
    """
    if is_valid_state(state):
        return state

    counts = color_counts(state)
    bad = {k: v for k, v in counts.items() if v != STICKERS_PER_COLOR}
    where = f" ({context})" if context else ""
    logger.debug("Estado inválido%s: %s", where, bad)
    raise InvalidStateError(f"Estado inválido{where}: conteo de colores {bad}", counts)
