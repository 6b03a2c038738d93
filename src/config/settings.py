"""
Configuración centralizada de la calculadora.

Este módulo contiene la clase CalculatorConfig con los límites de entrada,
el formato del display, los tiempos de error y las preferencias de voz y
ventana.
"""


# ============================================================================
# CLASE: CalculatorConfig
# Propósito: Configuración de la calculadora y de la interfaz
# Responsabilidades:
#   - Límites de entrada y precisión de resultados
#   - Formato del display (longitud máxima, notación exponencial)
#   - Mensajes y tiempo de autolimpieza tras un error
#   - Preferencias de voz y dimensiones de la ventana
# ============================================================================
class CalculatorConfig:
    """
    Configuración de la calculadora clásica.

    Grupos de opciones:
        - Entrada: longitud máxima del operando en construcción
        - Resultados: decimales de redondeo
        - Display: longitud antes de pasar a notación exponencial
        - Errores: mensajes y retardo de autolimpieza (segundos)
        - Voz: feedback auditivo opcional
        - Ventana: tamaño del lienzo y retardo por frame
    """

    def __init__(self):
        """Inicializa configuración con valores por defecto."""
        # ====================================================================
        # ENTRADA Y RESULTADOS
        # ====================================================================
        self.max_input_length = 10          # Dígitos máximos del operando
        self.result_decimals = 9            # Decimales al redondear resultados

        # ====================================================================
        # DISPLAY
        # ====================================================================
        self.display_max_length = 12        # A partir de aquí, notación exponencial
        self.exponent_digits = 6            # Decimales en notación exponencial

        # ====================================================================
        # ERRORES
        # ====================================================================
        self.error_clear_delay = 2.0        # Segundos hasta el borrado automático
        self.divide_by_zero_message = "No se puede dividir por cero"
        self.overflow_message = "Desbordamiento"

        # ====================================================================
        # VOZ
        # ====================================================================
        self.voice_enabled = False          # Activar/desactivar feedback por voz
        self.voice_volume = 0.8             # Volumen (0.0-1.0)
        self.voice_rate = 150               # Velocidad de habla (palabras por minuto)
        self.voice_language = 'es'          # Idioma ('es', 'en', etc.)

        # ====================================================================
        # VENTANA
        # ====================================================================
        self.window_title = "Calculadora"
        self.window_width = 420
        self.window_height = 620
        self.frame_delay_ms = 30            # Espera de cv2.waitKeyEx por frame
