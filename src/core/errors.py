"""
Errores de cálculo de la calculadora.

Las funciones puras de core los lanzan; la máquina de estados los captura
y los convierte en un mensaje de error en el display.
"""


class CalculatorError(Exception):
    """Error base de la calculadora."""


class DivideByZero(CalculatorError, ZeroDivisionError):
    """División con el operando actual exactamente igual a cero."""


class CalculationOverflow(CalculatorError, OverflowError):
    """El resultado no es un número finito."""


class InvalidOperand(CalculatorError, ValueError):
    """El operando actual no se puede interpretar como número finito."""

    def __init__(self, text):
        super().__init__(f"Operando no numérico: {text!r}")
        self.text = text
