"""
Lógica de calculadora aritmética básica.

Este módulo contiene la clase Calculator, una máquina de estados que
interpreta tokens de entrada (dígitos, punto decimal, operador, igual,
borrado y retroceso) y produce el valor a mostrar en el display.
"""

import logging
import math
import operator

from config.settings import CalculatorConfig
from .errors import CalculationOverflow, CalculatorError, DivideByZero, InvalidOperand
from .formatting import format_display, number_to_text, parse_operand, round_result
from .scheduler import TimerQueue

logger = logging.getLogger(__name__)


OPERATORS = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
}


def evaluate(previous, op, current, decimals=9):
    """
    Calcula `previous op current` y redondea el resultado.

    Args:
        previous (float): Primer operando
        op (str): Operador ("+", "-", "*", "/")
        current (float): Segundo operando
        decimals (int): Decimales del redondeo

    Returns:
        float: Resultado redondeado

    Raises:
        DivideByZero: Si op es "/" y current es 0
        CalculationOverflow: Si el resultado no es finito
        KeyError: Si el operador no existe
    """
    if op == "/" and current == 0:
        raise DivideByZero(f"{previous} / 0")

    result = round_result(OPERATORS[op](previous, current), decimals)
    if not math.isfinite(result):
        raise CalculationOverflow(f"{previous} {op} {current}")
    return result


# ============================================================================
# CLASE: Calculator
# Propósito: Máquina de estados de la calculadora
# Responsabilidades:
#   - Construir el operando actual dígito a dígito
#   - Guardar operando previo y operador pendiente
#   - Evaluar en cadena al pulsar otro operador o igual
#   - Mostrar errores y programar su borrado automático
# ============================================================================
class Calculator:
    """
    Calculadora de un solo cálculo en curso.

    Modelo de operación:
        1. Usuario ingresa dígitos → se acumulan en current_operand
        2. Usuario pulsa operador → current_operand pasa a previous_operand
        3. Usuario ingresa el segundo operando
        4. Otro operador evalúa en cadena; = evalúa y termina el cálculo

    Variables de estado:
        - current_operand: Texto del operando actual ("0" al inicio)
        - previous_operand: Valor del operando anterior, o None
        - operator: Operador pendiente ("+", "-", "*", "/"), o None
        - waiting_for_operand: El próximo dígito empieza un operando nuevo
        - just_calculated: El último paso fue un = correcto

    Salida:
        - display_text: Último texto emitido al display
        - error_visible: True mientras se muestra un error
        - on_display: Callback opcional on_display(texto, error)

    Invariante: operator y previous_operand están ambos definidos o ambos
    a None.
    """

    def __init__(self, config=None, scheduler=None, on_display=None):
        """
        Inicializa la calculadora en estado vacío.

        Args:
            config (CalculatorConfig): Límites y mensajes (opcional)
            scheduler (TimerQueue): Cola para el borrado tras error (opcional)
            on_display (callable): Se llama con (texto, error) en cada emisión
        """
        self.config = config if config else CalculatorConfig()
        self.scheduler = scheduler if scheduler else TimerQueue()
        self.on_display = on_display

        self.display_text = "0"
        self.error_visible = False
        self._error_task = None

        self._reset_state()

    def _reset_state(self):
        self.current_operand = "0"
        self.previous_operand = None
        self.operator = None
        self.waiting_for_operand = False
        self.just_calculated = False

    # ========================================================================
    # SALIDA AL DISPLAY
    # ========================================================================
    def _emit(self):
        """Formatea y publica el operando actual en el display."""
        self.display_text = format_display(
            self.current_operand, self.config.display_max_length, self.config.exponent_digits)
        if self.on_display:
            self.on_display(self.display_text, self.error_visible)

    def _recover_from_error(self):
        """Si hay un error en pantalla, completa el borrado pendiente ya."""
        if self.error_visible:
            logger.debug("Entrada durante error: borrado anticipado")
            self.clear_all()

    # ========================================================================
    # OPERACIONES DE ENTRADA
    # ========================================================================
    def input_digit(self, digit):
        """
        Añade un dígito al operando actual.

        Args:
            digit (int | str): Dígito 0-9

        Returns:
            bool: True si se aceptó, False si se alcanzó el límite

        Comportamiento:
            - Tras un = empieza un cálculo nuevo
            - Si se espera operando o el actual es "0": lo reemplaza
            - Si no: lo añade al final (máximo 10 caracteres)
        """
        self._recover_from_error()
        digit = str(digit)

        if self.just_calculated:
            self.current_operand = "0"
            self.just_calculated = False

        if self.waiting_for_operand or self.current_operand == "0":
            self.current_operand = digit
            self.waiting_for_operand = False
        elif len(self.current_operand) < self.config.max_input_length:
            self.current_operand += digit
        else:
            self._emit()
            return False

        self._emit()
        return True

    def input_decimal(self):
        """
        Añade el punto decimal al operando actual.

        Returns:
            bool: True si se añadió, False si ya existía

        Comportamiento:
            - Tras un = empieza desde "0."
            - Si se espera operando: el nuevo operando es "0."
            - Si ya tiene punto: no hace nada (un solo decimal permitido)
        """
        self._recover_from_error()

        if self.just_calculated:
            self.current_operand = "0"
            self.just_calculated = False

        if self.waiting_for_operand:
            self.current_operand = "0."
            self.waiting_for_operand = False
        elif "." not in self.current_operand:
            self.current_operand += "."
        else:
            self._emit()
            return False

        self._emit()
        return True

    def input_operator(self, op):
        """
        Registra un operador, evaluando en cadena si hay uno pendiente.

        Args:
            op (str): Operador matemático ("+", "-", "*", "/")

        Returns:
            bool: True si el operador quedó pendiente, False si se abortó

        Ejemplo de flujo:
            5 + 3 *  → evalúa 5+3, muestra "8", queda "8 *"
            5 + *    → reemplaza el operador: queda "5 *"
        """
        if op not in OPERATORS:
            raise ValueError(f"Operador desconocido: {op!r}")
        self._recover_from_error()

        if self.previous_operand is None:
            try:
                self.previous_operand = parse_operand(self.current_operand)
            except InvalidOperand as e:
                logger.warning("Operador %s ignorado: %s", op, e)
                return False
        elif self.operator and not self.waiting_for_operand:
            result = self._perform_calculation()
            if result is None:
                return False
            self.current_operand = number_to_text(result)
            self.previous_operand = result
            self._emit()

        # Tras un = el resultado es el primer operando del nuevo cálculo
        self.just_calculated = False
        self.waiting_for_operand = True
        self.operator = op
        return True

    def _perform_calculation(self):
        """
        Evalúa previous_operand operator current_operand.

        Returns:
            float | None: Resultado redondeado, o None si hubo error (en
            ese caso el error ya se muestra en el display)
        """
        try:
            current = parse_operand(self.current_operand)
            result = evaluate(self.previous_operand, self.operator, current,
                              self.config.result_decimals)
        except InvalidOperand as e:
            logger.warning("Cálculo ignorado: %s", e)
            return None
        except CalculatorError as e:
            logger.info("Error de cálculo: %s", e)
            self.show_error(self._error_message(e))
            return None
        return result

    def _error_message(self, error):
        if isinstance(error, DivideByZero):
            return self.config.divide_by_zero_message
        if isinstance(error, CalculationOverflow):
            return self.config.overflow_message
        return str(error)

    def calculate(self):
        """
        Evalúa el cálculo pendiente (tecla =).

        Returns:
            tuple: (éxito: bool, resultado: str)
                - (True, "8"): Cálculo exitoso
                - (False, mensaje): Error mostrado en el display
                - (False, ""): No hay nada que calcular

        Solo actúa si hay operador y operando previo y ya se ingresó el
        segundo operando. Un segundo = seguido no hace nada.
        """
        self._recover_from_error()

        if (self.operator is None or self.previous_operand is None
                or self.waiting_for_operand):
            return False, ""

        result = self._perform_calculation()
        if result is None:
            return False, self.display_text if self.error_visible else ""

        self.current_operand = number_to_text(result)
        self.previous_operand = None
        self.operator = None
        self.waiting_for_operand = False
        self.just_calculated = True
        self._emit()
        return True, self.display_text

    # ========================================================================
    # BORRADO
    # ========================================================================
    def clear_all(self):
        """
        Borra TODO el estado de la calculadora (C = Clear).

        También quita el estilo de error y cancela el borrado automático
        pendiente si lo hubiera.
        """
        if self._error_task is not None:
            self._error_task.cancel()
            self._error_task = None
        self._reset_state()
        self.error_visible = False
        self._emit()

    def delete_last(self):
        """
        Borra el último carácter del operando (← = Backspace).

        Comportamiento:
            - Tras un =: equivale a clear_all()
            - Con más de un carácter: quita el último
            - Con un solo carácter: vuelve a "0"
        """
        self._recover_from_error()

        if self.just_calculated:
            self.clear_all()
            return

        if len(self.current_operand) > 1:
            self.current_operand = self.current_operand[:-1]
        else:
            self.current_operand = "0"
        self._emit()

    # ========================================================================
    # ERRORES
    # ========================================================================
    def show_error(self, message):
        """
        Muestra un mensaje de error y programa el borrado automático.

        Args:
            message (str): Texto a mostrar en el display

        El estado del cálculo no se modifica; clear_all() se ejecuta tras
        config.error_clear_delay segundos.
        """
        if self._error_task is not None:
            self._error_task.cancel()

        self.error_visible = True
        self.display_text = message
        if self.on_display:
            self.on_display(message, True)

        self._error_task = self.scheduler.schedule(
            self.config.error_clear_delay, self._auto_clear)

    def _auto_clear(self):
        self._error_task = None
        self.clear_all()

    # ========================================================================
    # LECTURA
    # ========================================================================
    def get_display(self):
        """Texto a mostrar en el display principal."""
        return self.display_text

    def get_expression(self):
        """
        Cálculo pendiente para el display secundario.

        Returns:
            str: "<operando previo> <operador>" (ej: "8 +"), o "" si no hay
        """
        if self.operator is None or self.previous_operand is None:
            return ""
        return f"{number_to_text(self.previous_operand)} {self.operator}"
