"""
Módulo de interfaz de usuario.
Contiene el renderizador del display y del teclado en pantalla.
"""

from .renderer import Button, UIRenderer

__all__ = ['Button', 'UIRenderer']
