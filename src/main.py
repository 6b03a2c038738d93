"""
Punto de entrada de la calculadora.

Ejecución:
    python3 src/main.py
    CALC_LOG_LEVEL=DEBUG python3 src/main.py
    CALC_VOICE=1 python3 src/main.py
"""

import logging
import os

from app.calculator_app import CalculatorApp
from config.settings import CalculatorConfig


def setup_logging(level=None):
    """
    Configura logging para la aplicación.

    Args:
        level (str): Nivel (DEBUG, INFO, WARNING, ERROR). Por defecto se lee
            de la variable de entorno CALC_LOG_LEVEL, o WARNING.
    """
    level = (level or os.environ.get("CALC_LOG_LEVEL", "WARNING")).upper()
    logging.basicConfig(
        level=getattr(logging, level, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def main():
    """
    Crea la configuración y ejecuta la aplicación.

    Manejo de errores:
        - KeyboardInterrupt (Ctrl+C): Cierre graceful por usuario
        - Exception general: Se registra con traceback y se termina con código 1
    """
    setup_logging()
    config = CalculatorConfig()
    config.voice_enabled = os.environ.get("CALC_VOICE", "0") not in ("", "0", "false")

    try:
        CalculatorApp(config).run()
    except KeyboardInterrupt:
        print("\nInterrumpido por el usuario")
    except Exception:
        logging.getLogger(__name__).exception("Error inesperado")
        return 1
    return 0


# ============================================================================
# PUNTO DE ENTRADA PRINCIPAL
# ============================================================================
if __name__ == "__main__":
    raise SystemExit(main())
