# main.py
from __future__ import annotations

import logging
import sys
from typing import NoReturn

from PySide6.QtWidgets import QApplication

from rubik_sim.app.main_window import MainWindow
from rubik_sim.config import SimSettings


def main() -> NoReturn:
    """Punto de entrada de la aplicación.

    Lee la configuración del entorno (`RUBIK_SIM_*`), configura logging, crea
    la instancia de `QApplication`, construye la ventana principal
    (`MainWindow`) y ejecuta el loop de eventos de Qt.

    Returns:
        No retorna (finaliza el proceso con `sys.exit`).
    """
    settings = SimSettings.from_env()
    logging.basicConfig(
        level=settings.log_level_value,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = QApplication(sys.argv)
    w = MainWindow(settings)
    w.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
