"""
Módulo core con la lógica principal de la calculadora.
Contiene la máquina de estados, el formato numérico, la cola de
temporizadores y el mapeo de teclas.
"""

from .calculator import Calculator, evaluate
from .errors import CalculationOverflow, CalculatorError, DivideByZero, InvalidOperand
from .scheduler import ScheduledTask, TimerQueue

__all__ = [
    'Calculator',
    'evaluate',
    'CalculatorError',
    'DivideByZero',
    'CalculationOverflow',
    'InvalidOperand',
    'ScheduledTask',
    'TimerQueue',
]
