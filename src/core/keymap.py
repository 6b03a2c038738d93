"""
Mapeo de teclas y botones a acciones de la calculadora.

Las acciones usan identificadores de texto ("num_5", "add", "equal"...)
que la aplicación despacha a la máquina de estados.
"""

# ============================================================================
# ACCIONES
# ============================================================================
OPERATOR_ACTIONS = {
    "add": "+",
    "subtract": "-",
    "multiply": "*",
    "divide": "/",
}

CONTROL_ACTIONS = ("decimal", "equal", "clear_all", "backspace")

# Códigos especiales devueltos por cv2.waitKeyEx → nombre de tecla
SPECIAL_KEY_CODES = {
    8: "Backspace",
    10: "Enter",
    13: "Enter",
    27: "Escape",
    127: "Backspace",
    65288: "Backspace",     # X11 / GTK
    65293: "Enter",
    65307: "Escape",
    65421: "Enter",         # Enter del teclado numérico
    65450: "*",
    65451: "+",
    65453: "-",
    65454: ".",
    65455: "/",
}
# Dígitos del teclado numérico (KP_0 .. KP_9)
SPECIAL_KEY_CODES.update({65456 + d: str(d) for d in range(10)})

KEY_ACTIONS = {
    "+": "add",
    "-": "subtract",
    "*": "multiply",
    "/": "divide",
    ".": "decimal",
    ",": "decimal",
    "=": "equal",
    "Enter": "equal",
    "Escape": "clear_all",
    "c": "clear_all",
    "C": "clear_all",
    "Backspace": "backspace",
}


def digit_action(digit):
    """Retorna la acción para un dígito 0-9 (ej: 5 → "num_5")."""
    return f"num_{int(digit)}"


def key_name(code):
    """
    Normaliza un código de tecla de OpenCV a nombre de tecla.

    Args:
        code (int | str): Código de cv2.waitKeyEx o nombre ya normalizado

    Returns:
        str | None: "Enter", "Escape", "Backspace", un carácter, o None
    """
    if isinstance(code, str):
        return code
    if code is None or code < 0:
        return None
    if code in SPECIAL_KEY_CODES:
        return SPECIAL_KEY_CODES[code]
    if code < 0x110000:
        return chr(code)
    return None


def key_to_action(code):
    """
    Traduce una tecla física a una acción de la calculadora.

    Returns:
        str | None: Identificador de acción, o None si la tecla no se usa
    """
    name = key_name(code)
    if name is None:
        return None
    if len(name) == 1 and name.isdigit() and name.isascii():
        return digit_action(name)
    return KEY_ACTIONS.get(name)


def is_valid_action(action):
    """True si `action` es una acción conocida por la calculadora."""
    if action.startswith("num_"):
        suffix = action[4:]
        return len(suffix) == 1 and suffix.isdigit()
    return action in OPERATOR_ACTIONS or action in CONTROL_ACTIONS
