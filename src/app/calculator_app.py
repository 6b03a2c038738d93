"""
Aplicación principal que integra todos los componentes.

Este módulo contiene la clase CalculatorApp.
"""

import logging

import cv2

from config.settings import CalculatorConfig
from core.calculator import Calculator
from core.keymap import OPERATOR_ACTIONS, is_valid_action, key_name, key_to_action
from core.scheduler import TimerQueue
from ui.renderer import UIRenderer
from voice.feedback import VoiceFeedback

logger = logging.getLogger(__name__)


# ============================================================================
class CalculatorApp:
    """
    Aplicación principal de la calculadora.

    Arquitectura:
        - Calculator: Máquina de estados y display
        - TimerQueue: Tareas diferidas (borrado tras error)
        - UIRenderer: Renderizado del display y del teclado
        - VoiceFeedback: Anuncios por voz (opcional)
        - CalculatorApp: Coordinador y bucle principal

    Entrada:
        - Clic izquierdo sobre un botón del teclado en pantalla
        - Teclado físico (dígitos, + - * /, . o ",", = o Enter,
          Escape o C, Backspace)
    """

    def __init__(self, config=None, scheduler=None, voice=None):
        """
        Inicializa la aplicación. La ventana se crea en run().

        Args:
            config (CalculatorConfig): Configuración (opcional)
            scheduler (TimerQueue): Cola de temporizadores (opcional)
            voice (VoiceFeedback): Sistema de voz (opcional)
        """
        self.config = config if config else CalculatorConfig()
        self.scheduler = scheduler if scheduler else TimerQueue()
        self.ui = UIRenderer(self.config)
        self.calc = Calculator(self.config, self.scheduler, on_display=self._on_display)
        self.voice = voice if voice else VoiceFeedback(self.config)
        self.running = False

    def _on_display(self, text, error):
        logger.debug("Display: %r (error=%s)", text, error)
        self.ui.notify_display(text, error)

    def process(self, action):
        """
        Procesa una acción de entrada y actualiza el estado de la calculadora.

        Args:
            action (str): ID de la acción (ej: "num_5", "add", "equal")

        Returns:
            bool: True si la acción es conocida

        Feedback:
            - Verde: Dígitos y punto decimal
            - Naranja: Operadores
            - Cian: Resultado de cálculo
            - Rojo: Error o borrado
        """
        if not is_valid_action(action):
            logger.warning("Acción desconocida: %s", action)
            return False

        # ====================================================================
        # NÚMEROS (0-9): Añadir dígito a número actual
        # ====================================================================
        if action.startswith("num_"):
            digit = action.split("_")[1]
            if self.calc.input_digit(digit):
                self.ui.show_feedback(f"OK {digit}", (100, 255, 100))
                self.voice.speak_number(digit)

        # ====================================================================
        # PUNTO DECIMAL
        # ====================================================================
        elif action == "decimal":
            if self.calc.input_decimal():
                self.ui.show_feedback("OK .", (100, 255, 100))
                self.voice.speak("coma")

        # ====================================================================
        # OPERADORES (+ - * /)
        # ====================================================================
        elif action in OPERATOR_ACTIONS:
            op = OPERATOR_ACTIONS[action]
            if self.calc.input_operator(op):
                self.ui.show_feedback(f"{op} {action.upper()}", (0, 150, 255))
                self.voice.speak_operation(op)
            elif self.calc.error_visible:
                self._report_error()

        # ====================================================================
        # IGUAL (=): Calcular resultado
        # ====================================================================
        elif action == "equal":
            success, result = self.calc.calculate()
            if success:
                self.ui.show_feedback(f"= {result}", (255, 255, 0), 40)
                self.voice.speak_result(result)
            elif result:
                self._report_error()

        # ====================================================================
        # BORRAR TODO (C)
        # ====================================================================
        elif action == "clear_all":
            self.calc.clear_all()
            self.ui.show_feedback("TODO BORRADO", (80, 80, 255))
            self.voice.speak("todo borrado")

        # ====================================================================
        # BACKSPACE (<-): Borrar último carácter
        # ====================================================================
        elif action == "backspace":
            self.calc.delete_last()
            self.ui.show_feedback("<- BORRADO", (0, 200, 255))

        return True

    def _report_error(self):
        message = self.calc.get_display()
        self.ui.show_feedback("ERROR", (80, 80, 255), 40)
        self.voice.speak(message)

    def on_mouse(self, event, x, y, flags, param):
        """Callback de ratón de OpenCV: hover y clic sobre los botones."""
        if event == cv2.EVENT_MOUSEMOVE:
            self.ui.set_hover(x, y)
        elif event == cv2.EVENT_LBUTTONDOWN:
            button = self.ui.button_at(x, y)
            if button is not None:
                self.process(button.action)

    def on_key(self, code):
        """
        Procesa una tecla de cv2.waitKeyEx.

        Controles propios de la aplicación:
            - 'q': Salir
            - 'v': Activar/desactivar voz

        Returns:
            bool: False si la aplicación debe terminar
        """
        name = key_name(code)
        if name is None:
            return True
        if name == "q":
            return False
        if name == "v":
            enabled = self.voice.toggle()
            status = "ACTIVADA" if enabled else "DESACTIVADA"
            print(f"Voz: {status}")
            self.ui.show_feedback(f"VOZ {status}", (0, 255, 255), 40)
            return True

        action = key_to_action(name)
        if action is not None:
            self.process(action)
        return True

    def tick(self):
        """
        Avanza un frame: ejecuta las tareas vencidas y dibuja la interfaz.

        Returns:
            np.ndarray: Frame renderizado
        """
        self.scheduler.run_due()
        return self.ui.render(self.calc)

    def run(self):
        """
        Bucle principal de la aplicación.

        Ciclo de ejecución:
            1. Ejecutar tareas diferidas vencidas (borrado tras error)
            2. Renderizar display y teclado
            3. Mostrar frame y esperar tecla (config.frame_delay_ms)
            4. Repetir hasta 'q' o cierre de la ventana
        """
        title = self.config.window_title

        print("\n" + "=" * 50)
        print("CALCULADORA")
        print("=" * 50)
        print("\nTeclado: 0-9  + - * /  . o ,  = o Enter")
        print("Borrar todo: Escape o C | Retroceso: Backspace")
        print("Ratón: clic en los botones")
        print("\nPresiona 'q' para salir, 'v' para activar/desactivar voz")
        print("=" * 50 + "\n")

        cv2.namedWindow(title, cv2.WINDOW_AUTOSIZE)
        cv2.setMouseCallback(title, self.on_mouse)
        self.running = True

        try:
            while self.running:
                cv2.imshow(title, self.tick())
                key = cv2.waitKeyEx(self.config.frame_delay_ms)
                if key != -1 and not self.on_key(key):
                    break
                # Ventana cerrada con el botón del sistema
                if cv2.getWindowProperty(title, cv2.WND_PROP_VISIBLE) < 1:
                    break
        finally:
            self.running = False
            cv2.destroyAllWindows()
        print("\nOK Aplicacion cerrada correctamente")
