# rubik_sim/config.py
from __future__ import annotations

import logging
import os
from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional

ENV_PREFIX = "RUBIK_SIM_"
SOLVERS = ("scripted", "iddfs")


@dataclass(frozen=True)
class SimSettings:
    """Parámetros ajustables del simulador.

    Attributes:
        scramble_length: Movimientos por mezcla.
        autoplay_interval_ms: Intervalo entre pasos del autoplay.
        solve_latency_ms: Demora simulada antes de entregar la solución.
        solver: "scripted" (guion fijo) o "iddfs" (búsqueda real).
        solve_max_depth: Profundidad máxima del IDDFS.
        solve_timeout_s: Tiempo máximo del IDDFS.
        log_level: Nivel de logging ("DEBUG", "INFO", ...).
    """

    scramble_length: int = 15
    autoplay_interval_ms: int = 1500
    solve_latency_ms: int = 1000
    solver: str = "scripted"
    solve_max_depth: int = 6
    solve_timeout_s: float = 10.0
    log_level: str = "INFO"

    def __post_init__(self) -> None:
        if self.scramble_length <= 0:
            raise ValueError("scramble_length debe ser mayor que 0.")
        if self.autoplay_interval_ms <= 0:
            raise ValueError("autoplay_interval_ms debe ser mayor que 0.")
        if self.solve_latency_ms < 0:
            raise ValueError("solve_latency_ms no puede ser negativo.")
        if self.solver not in SOLVERS:
            raise ValueError(f"solver debe ser uno de {SOLVERS}, no {self.solver!r}.")
        if self.solve_max_depth <= 0:
            raise ValueError("solve_max_depth debe ser mayor que 0.")
        if self.solve_timeout_s <= 0:
            raise ValueError("solve_timeout_s debe ser mayor que 0.")
        level = self.log_level.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"log_level inválido: {self.log_level!r}")
        object.__setattr__(self, "log_level", level)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "SimSettings":
        """Lee `RUBIK_SIM_<CAMPO>` (ej: RUBIK_SIM_SCRAMBLE_LENGTH=20).

        Raises:
            ValueError: Si algún valor no se puede convertir o no es válido.
        """
        environ = os.environ if environ is None else environ
        kwargs: Dict[str, Any] = {}
        for f in fields(cls):
            raw = environ.get(ENV_PREFIX + f.name.upper())
            if raw is None or raw.strip() == "":
                continue
            conv = type(f.default)
            try:
                kwargs[f.name] = conv(raw.strip())
            except ValueError:
                raise ValueError(f"{ENV_PREFIX}{f.name.upper()} inválido: {raw!r}") from None
        return cls(**kwargs)

    @property
    def log_level_value(self) -> int:
        return logging.getLevelName(self.log_level)
