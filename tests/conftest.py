"""Fixtures compartidas: reloj simulado, cola de temporizadores y calculadora."""

import pytest

from config.settings import CalculatorConfig
from core.calculator import Calculator
from core.scheduler import TimerQueue


class FakeClock:
    """Reloj manual para simular el paso del tiempo."""

    def __init__(self, start=100.0):
        self.now = start

    def __call__(self):
        return self.now

    def advance(self, seconds):
        self.now += seconds


class DisplayRecorder:
    """Guarda cada emisión (texto, error) de la calculadora."""

    def __init__(self):
        self.emitted = []

    def __call__(self, text, error):
        self.emitted.append((text, error))

    @property
    def last(self):
        return self.emitted[-1] if self.emitted else None


@pytest.fixture
def config():
    return CalculatorConfig()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def scheduler(clock):
    return TimerQueue(clock=clock)


@pytest.fixture
def display():
    return DisplayRecorder()


@pytest.fixture
def calc(config, scheduler, display):
    return Calculator(config, scheduler, on_display=display)


def press(calc, keys):
    """Envía una secuencia de teclas ("5+3=") a la calculadora."""
    for key in keys:
        if key.isdigit():
            calc.input_digit(key)
        elif key == ".":
            calc.input_decimal()
        elif key in "+-*/":
            calc.input_operator(key)
        elif key == "=":
            calc.calculate()
        elif key == "C":
            calc.clear_all()
        elif key == "<":
            calc.delete_last()
        else:
            raise ValueError(f"Tecla de test desconocida: {key!r}")
