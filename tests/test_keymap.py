"""Tests del mapeo de teclas a acciones."""

import pytest

from core.keymap import digit_action, is_valid_action, key_name, key_to_action


@pytest.mark.parametrize("key, action", [
    ("0", "num_0"),
    ("9", "num_9"),
    ("+", "add"),
    ("-", "subtract"),
    ("*", "multiply"),
    ("/", "divide"),
    (".", "decimal"),
    (",", "decimal"),
    ("=", "equal"),
    ("Enter", "equal"),
    ("Escape", "clear_all"),
    ("c", "clear_all"),
    ("C", "clear_all"),
    ("Backspace", "backspace"),
])
def test_key_names(key, action):
    assert key_to_action(key) == action


@pytest.mark.parametrize("code, action", [
    (ord("5"), "num_5"),
    (ord("+"), "add"),
    (13, "equal"),
    (10, "equal"),
    (27, "clear_all"),
    (8, "backspace"),
    (127, "backspace"),
    (65288, "backspace"),
    (65293, "equal"),
    (65421, "equal"),
])
def test_opencv_key_codes(code, action):
    assert key_to_action(code) == action


# --- Teclado numérico (GTK / X11) ---

@pytest.mark.parametrize("code, action", [
    (65456, "num_0"),
    (65461, "num_5"),
    (65465, "num_9"),
    (65450, "multiply"),
    (65451, "add"),
    (65453, "subtract"),
    (65454, "decimal"),
    (65455, "divide"),
])
def test_numeric_keypad_codes(code, action):
    assert key_to_action(code) == action


@pytest.mark.parametrize("key", ["x", "%", "q", -1, None, "٣"])
def test_unmapped_keys(key):
    assert key_to_action(key) is None


def test_key_name():
    assert key_name(ord("a")) == "a"
    assert key_name(27) == "Escape"
    assert key_name(-1) is None


def test_digit_action():
    assert digit_action(3) == "num_3"
    assert digit_action("7") == "num_7"


@pytest.mark.parametrize("action, valid", [
    ("num_4", True),
    ("add", True),
    ("decimal", True),
    ("backspace", True),
    ("num_10", False),
    ("num_", False),
    ("power", False),
])
def test_is_valid_action(action, valid):
    assert is_valid_action(action) is valid
