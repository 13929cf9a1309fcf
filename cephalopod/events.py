"""Keyboard key codes and modifier flags."""

from __future__ import annotations

import enum
from enum import auto


class KeyCode(enum.IntEnum):
    """Keys reported by keyboard events."""

    UNKNOWN = -1
    A = 0
    B = auto()
    C = auto()
    D = auto()
    E = auto()
    F = auto()
    G = auto()
    H = auto()
    I = auto()  # noqa: E741
    J = auto()
    K = auto()
    L = auto()
    M = auto()
    N = auto()
    O = auto()  # noqa: E741
    P = auto()
    Q = auto()
    R = auto()
    S = auto()
    T = auto()
    U = auto()
    V = auto()
    W = auto()
    X = auto()
    Y = auto()
    Z = auto()
    NUM0 = auto()
    NUM1 = auto()
    NUM2 = auto()
    NUM3 = auto()
    NUM4 = auto()
    NUM5 = auto()
    NUM6 = auto()
    NUM7 = auto()
    NUM8 = auto()
    NUM9 = auto()
    ESCAPE = auto()
    L_CONTROL = auto()
    L_SHIFT = auto()
    L_ALT = auto()
    L_SYSTEM = auto()
    R_CONTROL = auto()
    R_SHIFT = auto()
    R_ALT = auto()
    R_SYSTEM = auto()
    MENU = auto()
    L_BRACKET = auto()
    R_BRACKET = auto()
    SEMICOLON = auto()
    COMMA = auto()
    PERIOD = auto()
    QUOTE = auto()
    SLASH = auto()
    BACKSLASH = auto()
    TILDE = auto()
    EQUAL = auto()
    DASH = auto()
    SPACE = auto()
    RETURN = auto()
    BACKSPACE = auto()
    TAB = auto()
    PAGE_UP = auto()
    PAGE_DOWN = auto()
    END = auto()
    HOME = auto()
    INSERT = auto()
    DELETE = auto()
    ADD = auto()
    SUBTRACT = auto()
    MULTIPLY = auto()
    DIVIDE = auto()
    LEFT = auto()
    RIGHT = auto()
    UP = auto()
    DOWN = auto()
    NUMPAD0 = auto()
    NUMPAD1 = auto()
    NUMPAD2 = auto()
    NUMPAD3 = auto()
    NUMPAD4 = auto()
    NUMPAD5 = auto()
    NUMPAD6 = auto()
    NUMPAD7 = auto()
    NUMPAD8 = auto()
    NUMPAD9 = auto()
    F1 = auto()
    F2 = auto()
    F3 = auto()
    F4 = auto()
    F5 = auto()
    F6 = auto()
    F7 = auto()
    F8 = auto()
    F9 = auto()
    F10 = auto()
    F11 = auto()
    F12 = auto()
    F13 = auto()
    F14 = auto()
    F15 = auto()
    PAUSE = auto()
    APOSTROPHE = auto()
    ENTER = auto()
    CAPS_LOCK = auto()
    SCROLL_LOCK = auto()
    NUM_LOCK = auto()
    PRINT_SCREEN = auto()


class KeyModifiers(enum.IntFlag):
    """Modifier keys held during a key event."""

    SHIFT = 0x01
    CONTROL = 0x02
    ALT = 0x04
    SUPER = 0x08


def any_modifier(modifiers: KeyModifiers) -> bool:
    """True if at least one modifier flag is set."""
    return int(modifiers) != 0