"""
Módulo de configuración de la calculadora.
Contiene la clase de configuración de entrada, display, errores y voz.
"""

from .settings import CalculatorConfig

__all__ = ['CalculatorConfig']
