"""
Sistema de feedback por voz usando pyttsx3.

Este módulo proporciona síntesis de voz para anunciar dígitos, operaciones,
resultados y errores, ejecutándose en un hilo aparte para no bloquear la
ventana de la calculadora.
"""

import logging
import threading
from collections import deque

import pyttsx3

logger = logging.getLogger(__name__)


NUMBERS_ES = {
    "0": "cero", "1": "uno", "2": "dos", "3": "tres", "4": "cuatro",
    "5": "cinco", "6": "seis", "7": "siete", "8": "ocho", "9": "nueve",
}

OPERATIONS_ES = {
    "+": "más",
    "-": "menos",
    "*": "por",
    "/": "dividido entre",
}


def result_to_speech(result):
    """
    Convierte el texto de un resultado en una frase pronunciable.

    Ejemplos:
        "8" → "8"
        "-2.5" → "menos 2 coma 5"
        "1.000000e+14" → "1 coma 000000 por diez a la 14"
    """
    text = str(result)
    if "e" in text:
        mantissa, exponent = text.split("e")
        text = f"{mantissa} por diez a la {int(exponent)}"
    if text.startswith("-"):
        text = "menos " + text[1:]
    return text.replace(".", " coma ")


# ============================================================================
# CLASE: VoiceFeedback
# Propósito: Síntesis de voz para feedback auditivo
# Responsabilidades:
#   - Sintetizar texto a voz en español
#   - Ejecutar en hilo separado para no bloquear la UI
#   - Gestionar cola de mensajes para evitar solapamiento
# ============================================================================
class VoiceFeedback:
    """
    Sistema de feedback por voz usando pyttsx3.

    Características:
        - Ejecución asíncrona (no bloquea la aplicación)
        - Cola de mensajes (un mensaje a la vez, máximo 5 en espera)
        - Motor inicializado solo cuando la voz está activada
    """

    def __init__(self, config, engine_factory=pyttsx3.init):
        """
        Inicializa el sistema de voz.

        Args:
            config (CalculatorConfig): Preferencias de voz
            engine_factory (callable): Crea el motor de síntesis
        """
        self.config = config
        self.engine_factory = engine_factory
        self.engine = None
        self.is_speaking = False
        self.message_queue = deque(maxlen=5)
        self._lock = threading.Lock()

        if self.config.voice_enabled:
            self._init_engine()

    def _init_engine(self):
        """Crea y configura el motor. Si falla, desactiva la voz."""
        try:
            self.engine = self.engine_factory()
            self._configure_engine()
            logger.info("Sistema de voz inicializado correctamente")
        except Exception as e:
            logger.warning("No se pudo inicializar el sistema de voz: %s", e)
            self.engine = None
            self.config.voice_enabled = False

    def _configure_engine(self):
        """
        Configura volumen, velocidad y voz según las preferencias.
        Busca una voz cuyo id o idioma empiece por config.voice_language.
        """
        self.engine.setProperty('volume', self.config.voice_volume)
        self.engine.setProperty('rate', self.config.voice_rate)

        prefix = self.config.voice_language.lower()
        for voice in self.engine.getProperty('voices') or []:
            languages = [str(lang).lower() for lang in getattr(voice, 'languages', [])]
            voice_id = str(voice.id).lower()
            if any(prefix in lang for lang in languages) or f"{prefix}-" in voice_id:
                self.engine.setProperty('voice', voice.id)
                logger.info("Voz seleccionada: %s", voice.name)
                return

        logger.info("No se encontró voz '%s'. Usando voz predeterminada.", prefix)

    def toggle(self):
        """
        Activa o desactiva la voz.

        Returns:
            bool: Nuevo estado (True = activada)
        """
        self.config.voice_enabled = not self.config.voice_enabled
        if self.config.voice_enabled and self.engine is None:
            self._init_engine()
        return self.config.voice_enabled

    def speak(self, text):
        """
        Reproduce un mensaje de voz de forma asíncrona.

        Args:
            text (str): Texto a sintetizar
        """
        if not self.config.voice_enabled or not self.engine:
            return

        with self._lock:
            self.message_queue.append(text)
            if self.is_speaking:
                return
            self.is_speaking = True

        thread = threading.Thread(target=self._process_queue, daemon=True)
        thread.start()

    def _process_queue(self):
        """Procesa la cola de mensajes uno por uno."""
        while True:
            with self._lock:
                if not self.message_queue:
                    self.is_speaking = False
                    return
                message = self.message_queue.popleft()
            try:
                self.engine.say(message)
                self.engine.runAndWait()
            except Exception as e:
                logger.warning("Error al reproducir voz: %s", e)

    def speak_number(self, number):
        """Reproduce un dígito 0-9 en español."""
        self.speak(NUMBERS_ES.get(str(number), str(number)))

    def speak_operation(self, operation):
        """Reproduce el nombre de una operación (+, -, *, /) en español."""
        self.speak(OPERATIONS_ES.get(operation, operation))

    def speak_result(self, result):
        """Reproduce el resultado de un cálculo: "igual a X"."""
        self.speak(f"igual a {result_to_speech(result)}")
