# rubik_sim/app/keymap.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Literal, Optional

from rubik_sim.logic.moves import VALID_FACES, Move

ActionKind = Literal["move", "scramble", "reset"]

SCRAMBLE_KEY = " "
RESET_KEY = "escape"


@dataclass(frozen=True)
class KeyAction:
    kind: ActionKind
    move: Optional[Move] = None


def action_for_key(key: str, shift: bool = False) -> Optional[KeyAction]:
    """Traduce una tecla a una acción del cubo.

    - u d l r f b: giro horario de esa cara; con Shift, antihorario.
    - Espacio: mezclar.
    - Escape: reset completo.

    Args:
        key: Texto de la tecla ("r", "R", " ", "escape", ...).
        shift: Si Shift estaba presionado.

    Returns:
        La acción, o None si la tecla no está asignada.
    """
    if key == SCRAMBLE_KEY:
        return KeyAction("scramble")

    k = key.lower()
    if k == RESET_KEY:
        return KeyAction("reset")

    if len(k) == 1 and k.upper() in VALID_FACES:
        return KeyAction("move", Move.of(k.upper(), prime=shift))

    return None
