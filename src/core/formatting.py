"""
Funciones numéricas puras de la calculadora.

Redondeo de resultados, conversión número → texto y formato del display.
Ninguna de estas funciones modifica el estado de la calculadora.
"""

import math

import numpy as np

from .errors import InvalidOperand


# Épsilon de máquina para doble precisión (equivalente a Number.EPSILON)
EPSILON = float(np.finfo(float).eps)


def parse_operand(text):
    """
    Convierte el texto del operando en número.

    Args:
        text (str): Operando tal como se muestra (ej: "12.5", "0.")

    Returns:
        float: Valor numérico finito

    Raises:
        InvalidOperand: Si el texto no es un número finito
    """
    try:
        value = float(text)
    except (TypeError, ValueError):
        raise InvalidOperand(text) from None
    if not math.isfinite(value):
        raise InvalidOperand(text)
    return value


def round_result(value, decimals=9):
    """
    Redondea un resultado compensando el error de coma flotante.

    Suma el épsilon de máquina antes de redondear a `decimals` decimales
    (redondeo "half up", como Math.round):
        0.1 + 0.2 = 0.30000000000000004 → 0.3

    Args:
        value (float): Resultado sin redondear
        decimals (int): Número de decimales a conservar

    Returns:
        float: Resultado redondeado (inf si el valor no es finito)
    """
    scale = 10.0 ** decimals
    rounded = np.floor((value + EPSILON) * scale + 0.5) / scale
    return float(rounded)


def number_to_text(value):
    """
    Convierte un número en texto decimal plano, sin ceros finales.

    Ejemplos:
        8.0 → "8"
        0.3 → "0.3"
        -0.0 → "0"
    """
    if value == 0:
        value = 0.0  # Evita "-0"
    return np.format_float_positional(value, trim='-')


def format_display(text, max_length=12, exponent_digits=6):
    """
    Formatea el valor para el display.

    Args:
        text (str): Valor en texto decimal
        max_length (int): Longitud máxima antes de pasar a exponencial
        exponent_digits (int): Decimales en notación exponencial

    Returns:
        str: Texto tal cual, o en notación exponencial si es demasiado largo

    Ejemplo:
        "123456789012345" → "1.234568e+14"
    """
    if len(text) <= max_length:
        return text
    try:
        value = float(text)
    except ValueError:
        return text
    return f"{value:.{exponent_digits}e}"
