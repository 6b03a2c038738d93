"""
Interfaz de usuario y renderizado.

Este módulo contiene la clase UIRenderer que dibuja el display y el teclado
de la calculadora, y localiza el botón bajo el puntero.
"""

import cv2
import numpy as np

from config.settings import CalculatorConfig
from core.keymap import digit_action


# ============================================================================
# CLASE: Button
# Propósito: Botón del teclado en pantalla (posición en rejilla y acción)
# ============================================================================
class Button:
    """
    Botón del teclado en pantalla.

    Args:
        label (str): Texto del botón
        action (str): Acción que dispara (ej: "num_7", "add")
        col, row (int): Celda superior izquierda en la rejilla
        colspan, rowspan (int): Celdas que ocupa
    """

    def __init__(self, label, action, col, row, colspan=1, rowspan=1):
        self.label = label
        self.action = action
        self.col = col
        self.row = row
        self.colspan = colspan
        self.rowspan = rowspan
        self.rect = (0, 0, 0, 0)  # x, y, w, h en píxeles (lo fija el renderer)

    def contains(self, x, y):
        bx, by, bw, bh = self.rect
        return bx <= x < bx + bw and by <= y < by + bh


def default_keypad():
    """
    Teclado estándar de 4 columnas x 5 filas.

        C  <-  /  *
        7  8   9  -
        4  5   6  +
        1  2   3  =
        0      .  =
    """
    buttons = [
        Button("C", "clear_all", 0, 0),
        Button("<-", "backspace", 1, 0),
        Button("/", "divide", 2, 0),
        Button("*", "multiply", 3, 0),
        Button("-", "subtract", 3, 1),
        Button("+", "add", 3, 2),
        Button("=", "equal", 3, 3, rowspan=2),
        Button("0", digit_action(0), 0, 4, colspan=2),
        Button(".", "decimal", 2, 4),
    ]
    for digit in range(1, 10):
        col = (digit - 1) % 3
        row = 3 - (digit - 1) // 3
        buttons.append(Button(str(digit), digit_action(digit), col, row))
    return buttons


# ============================================================================
# CLASE: UIRenderer
# ============================================================================
class UIRenderer:
    """
    Renderizador de interfaz gráfica para la calculadora.

    Componentes visuales:
        1. Display principal: cálculo pendiente (arriba) y valor actual
        2. Teclado: botones de dígitos, operadores y control
        3. Feedback: mensaje temporal de la última acción
        4. Estado de error: display en rojo mientras se muestra un error
    """

    GRID_COLS = 4
    GRID_ROWS = 5
    MARGIN = 20
    GAP = 10
    DISPLAY_HEIGHT = 150

    # Colores BGR
    BG_COLOR = (30, 30, 30)
    DISPLAY_BG = (45, 45, 45)
    DISPLAY_BORDER = (255, 200, 100)
    ERROR_BORDER = (80, 80, 255)
    TEXT_COLOR = (255, 255, 255)
    EXPR_COLOR = (180, 180, 180)
    ERROR_TEXT = (100, 100, 255)
    DIGIT_BG = (70, 70, 70)
    OPERATOR_BG = (0, 140, 255)
    CONTROL_BG = (110, 110, 110)
    HOVER_DELTA = 40
    FLASH_BORDER = (255, 255, 255)
    FLASH_FRAMES = 4

    def __init__(self, config=None, buttons=None):
        """
        Inicializa el renderizador con las dimensiones de la ventana.

        Args:
            config (CalculatorConfig): Configuración (opcional)
            buttons (list[Button]): Teclado a dibujar (por defecto, estándar)
        """
        self.config = config if config else CalculatorConfig()
        self.width = self.config.window_width
        self.height = self.config.window_height
        self.buttons = buttons if buttons is not None else default_keypad()
        self.feedback_msg = ""               # Mensaje de feedback actual
        self.feedback_timer = 0              # Frames restantes para mostrar feedback
        self.feedback_color = (0, 255, 0)    # Color del feedback
        self.hover = None                    # Botón bajo el puntero
        self.flash_timer = 0                 # Frames de resaltado del display
        self._layout()

    def _layout(self):
        """Calcula el rectángulo en píxeles de cada botón."""
        top = self.MARGIN * 2 + self.DISPLAY_HEIGHT
        area_w = self.width - 2 * self.MARGIN
        area_h = self.height - top - self.MARGIN
        cell_w = (area_w - (self.GRID_COLS - 1) * self.GAP) / self.GRID_COLS
        cell_h = (area_h - (self.GRID_ROWS - 1) * self.GAP) / self.GRID_ROWS

        for b in self.buttons:
            x = self.MARGIN + b.col * (cell_w + self.GAP)
            y = top + b.row * (cell_h + self.GAP)
            w = b.colspan * cell_w + (b.colspan - 1) * self.GAP
            h = b.rowspan * cell_h + (b.rowspan - 1) * self.GAP
            b.rect = (int(x), int(y), int(w), int(h))

    def button_at(self, x, y):
        """
        Busca el botón bajo el puntero.

        Returns:
            Button | None: Botón en (x, y) o None si no hay ninguno
        """
        for b in self.buttons:
            if b.contains(x, y):
                return b
        return None

    def set_hover(self, x, y):
        self.hover = self.button_at(x, y)

    def notify_display(self, text, error):
        """
        Avisa de que el valor del display cambió.

        Un cambio normal resalta el borde del display durante FLASH_FRAMES
        frames; un error usa su propio estilo y cancela el resaltado.
        """
        self.flash_timer = 0 if error else self.FLASH_FRAMES

    def show_feedback(self, msg, color=(0, 255, 0), duration=20):
        """
        Muestra mensaje de feedback temporal.

        Args:
            msg (str): Mensaje a mostrar
            color (tuple): Color BGR del mensaje
            duration (int): Duración en frames
        """
        self.feedback_msg = msg
        self.feedback_color = color
        self.feedback_timer = duration

    def render(self, calc):
        """
        Dibuja un frame completo.

        Args:
            calc (Calculator): Calculadora con el estado a mostrar

        Returns:
            np.ndarray: Imagen BGR de height x width
        """
        img = np.full((self.height, self.width, 3), self.BG_COLOR, dtype=np.uint8)
        self.draw_display(img, calc)
        self.draw_keypad(img)
        self.draw_feedback(img)
        return img

    def draw_display(self, img, calc):
        """
        Dibuja el display principal de la calculadora.

        Componentes:
            1. Fondo oscuro con borde (rojo en estado de error)
            2. Cálculo pendiente en pequeño (ej: "8 +")
            3. Valor actual alineado a la derecha

        Tamaños dinámicos:
            - Textos cortos (<10 caracteres): Fuente 2.0
            - Textos largos: Fuente reducida hasta que quepa
        """
        x, y = self.MARGIN, self.MARGIN
        w, h = self.width - 2 * self.MARGIN, self.DISPLAY_HEIGHT
        error = calc.error_visible

        cv2.rectangle(img, (x, y), (x + w, y + h), self.DISPLAY_BG, -1)
        if error:
            border = self.ERROR_BORDER
        elif self.flash_timer > 0:
            self.flash_timer -= 1
            border = self.FLASH_BORDER
        else:
            border = self.DISPLAY_BORDER
        cv2.rectangle(img, (x, y), (x + w, y + h), border, 3)

        expr = calc.get_expression()
        if expr and not error:
            self._put_right(img, expr, x + w - 15, y + 45, 0.9, self.EXPR_COLOR, 2,
                            cv2.FONT_HERSHEY_SIMPLEX)

        display = calc.get_display()
        color = self.ERROR_TEXT if error else self.TEXT_COLOR
        font_scale = 2.0 if len(display) < 10 else 1.4
        # Reducir hasta que quepa en el display
        while font_scale > 0.5:
            text_w = cv2.getTextSize(display, cv2.FONT_HERSHEY_DUPLEX, font_scale, 2)[0][0]
            if text_w <= w - 30:
                break
            font_scale -= 0.1
        self._put_right(img, display, x + w - 15, y + h - 30, font_scale, color, 2)

    def draw_keypad(self, img):
        """Dibuja todos los botones, resaltando el que está bajo el puntero."""
        for b in self.buttons:
            bx, by, bw, bh = b.rect
            bg = self._button_color(b)
            if b is self.hover:
                bg = tuple(min(255, c + self.HOVER_DELTA) for c in bg)
            cv2.rectangle(img, (bx, by), (bx + bw, by + bh), bg, -1)
            cv2.rectangle(img, (bx, by), (bx + bw, by + bh), (20, 20, 20), 2)

            (tw, th), _ = cv2.getTextSize(b.label, cv2.FONT_HERSHEY_DUPLEX, 1.1, 2)
            tx = bx + (bw - tw) // 2
            ty = by + (bh + th) // 2
            cv2.putText(img, b.label, (tx, ty), cv2.FONT_HERSHEY_DUPLEX, 1.1,
                        self.TEXT_COLOR, 2)

    def _button_color(self, button):
        if button.action.startswith("num_") or button.action == "decimal":
            return self.DIGIT_BG
        if button.action in ("clear_all", "backspace"):
            return self.CONTROL_BG
        return self.OPERATOR_BG

    def draw_feedback(self, img):
        """
        Dibuja el mensaje de feedback temporal bajo el display.

        Efecto:
            - Desaparece con fade-out usando el contador de frames
        """
        if self.feedback_timer > 0:
            self.feedback_timer -= 1
            alpha = min(self.feedback_timer / 10.0, 1.0)
            color = tuple(int(c * alpha) for c in self.feedback_color)
            cv2.putText(img, self.feedback_msg,
                        (self.MARGIN, self.MARGIN + self.DISPLAY_HEIGHT + 15),
                        cv2.FONT_HERSHEY_SIMPLEX, 0.5, color, 1)

    def _put_right(self, img, text, right_x, baseline_y, scale, color, thickness,
                   font=cv2.FONT_HERSHEY_DUPLEX):
        text_w = cv2.getTextSize(text, font, scale, thickness)[0][0]
        cv2.putText(img, text, (right_x - text_w, baseline_y), font, scale, color, thickness)
