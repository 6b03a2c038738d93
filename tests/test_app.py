"""Tests de la aplicación: despacho de acciones, ratón y teclado."""

import pytest

cv2 = pytest.importorskip("cv2")

from app.calculator_app import CalculatorApp


class RecordingVoice:
    def __init__(self):
        self.spoken = []
        self.enabled = False

    def speak(self, text):
        self.spoken.append(text)

    def speak_number(self, number):
        self.spoken.append(("number", number))

    def speak_operation(self, op):
        self.spoken.append(("operation", op))

    def speak_result(self, result):
        self.spoken.append(("result", result))

    def toggle(self):
        self.enabled = not self.enabled
        return self.enabled


@pytest.fixture
def voice():
    return RecordingVoice()


@pytest.fixture
def app(config, scheduler, voice):
    return CalculatorApp(config, scheduler, voice)


def test_process_sequence(app, voice):
    for action in ["num_5", "add", "num_3", "equal"]:
        assert app.process(action) is True
    assert app.calc.get_display() == "8"
    assert voice.spoken == [
        ("number", "5"), ("operation", "+"), ("number", "3"), ("result", "8"),
    ]


def test_unknown_action(app):
    assert app.process("sqrt") is False
    assert app.calc.get_display() == "0"


def test_divide_by_zero_reported_and_cleared_on_tick(app, voice, clock, config):
    for action in ["num_6", "divide", "num_0", "equal"]:
        app.process(action)
    assert voice.spoken[-1] == config.divide_by_zero_message
    assert app.ui.feedback_msg == "ERROR"

    clock.advance(config.error_clear_delay)
    app.tick()
    assert app.calc.get_display() == "0"
    assert app.calc.error_visible is False


def test_keyboard_input(app):
    for code in [ord("1"), ord("2"), ord("."), ord("5"), ord("*"), ord("2"), 13]:
        assert app.on_key(code) is True
    assert app.calc.get_display() == "25"


def test_keyboard_clear_and_backspace(app):
    for code in [ord("4"), ord("2"), 8]:
        app.on_key(code)
    assert app.calc.get_display() == "4"
    app.on_key(27)
    assert app.calc.get_display() == "0"


def test_quit_key(app):
    assert app.on_key(ord("q")) is False


def test_voice_toggle_key(app, voice):
    app.on_key(ord("v"))
    assert voice.enabled is True
    assert app.ui.feedback_msg == "VOZ ACTIVADA"


def test_unmapped_key_ignored(app):
    assert app.on_key(ord("x")) is True
    assert app.on_key(-1) is True
    assert app.calc.get_display() == "0"


def _click(app, action):
    button = next(b for b in app.ui.buttons if b.action == action)
    x, y, w, h = button.rect
    app.on_mouse(cv2.EVENT_LBUTTONDOWN, x + w // 2, y + h // 2, 0, None)


def test_mouse_clicks(app):
    for action in ["num_9", "subtract", "num_4", "equal"]:
        _click(app, action)
    assert app.calc.get_display() == "5"


def test_mouse_move_sets_hover(app):
    button = app.ui.buttons[0]
    x, y, _, _ = button.rect
    app.on_mouse(cv2.EVENT_MOUSEMOVE, x + 1, y + 1, 0, None)
    assert app.ui.hover is button


def test_click_outside_buttons_does_nothing(app):
    app.on_mouse(cv2.EVENT_LBUTTONDOWN, 1, 1, 0, None)
    assert app.calc.get_display() == "0"


def test_display_changes_reach_renderer(app):
    assert app.ui.flash_timer == 0
    app.process("num_5")
    assert app.ui.flash_timer == app.ui.FLASH_FRAMES

    for action in ["divide", "num_0", "equal"]:
        app.process(action)
    assert app.calc.error_visible is True
    assert app.ui.flash_timer == 0


def test_tick_renders_frame(app, config):
    frame = app.tick()
    assert frame.shape == (config.window_height, config.window_width, 3)


def test_run_loop_until_quit(app, monkeypatch):
    calls = []
    keys = iter([ord("7"), -1, ord("q")])
    monkeypatch.setattr(cv2, "namedWindow", lambda *a: calls.append("named"))
    monkeypatch.setattr(cv2, "setMouseCallback", lambda *a: calls.append("mouse"))
    monkeypatch.setattr(cv2, "imshow", lambda *a: calls.append("show"))
    monkeypatch.setattr(cv2, "waitKeyEx", lambda delay: next(keys))
    monkeypatch.setattr(cv2, "getWindowProperty", lambda *a: 1.0)
    monkeypatch.setattr(cv2, "destroyAllWindows", lambda: calls.append("destroy"))

    app.run()
    assert app.calc.get_display() == "7"
    assert calls.count("show") == 3
    assert calls[-1] == "destroy"
    assert app.running is False
