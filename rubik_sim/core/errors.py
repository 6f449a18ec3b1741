# rubik_sim/core/errors.py
from __future__ import annotations

from typing import Dict, Optional


class RubikSimError(Exception):
    """Error base del simulador."""


class InvalidStateError(RubikSimError):
    """Un movimiento o un paso de mezcla produjo un estado que rompe el invariante de colores.

    El estado candidato nunca se confirma: quien llama conserva el último estado válido.

    Attributes:
        counts: Cantidad de stickers por color encontrada en el estado candidato.
    """

    def __init__(self, message: str, counts: Optional[Dict[str, int]] = None) -> None:
        super().__init__(message)
        self.counts: Dict[str, int] = dict(counts or {})


class SolutionUnavailableError(RubikSimError):
    """El proveedor de soluciones falló o agotó su tiempo."""
