"""Easing curves mapping normalised time in [0, 1] to progress."""

from __future__ import annotations

import math

_BACK_OVERSHOOT = 1.70158
_ELASTIC_PERIOD = 0.3


def back_in(t: float) -> float:
    s = _BACK_OVERSHOOT
    return t * t * ((s + 1) * t - s)


def back_out(t: float) -> float:
    s = _BACK_OVERSHOOT
    t -= 1
    return t * t * ((s + 1) * t + s) + 1


def back_in_out(t: float) -> float:
    s = _BACK_OVERSHOOT * 1.525
    t *= 2.0
    if t < 1:
        return 0.5 * (t * t * ((s + 1.0) * t - s))
    t -= 2
    return 0.5 * (t * t * ((s + 1.0) * t + s) + 2.0)


def bounce_out(t: float) -> float:
    if t < 1.0 / 2.75:
        return 7.5625 * t * t
    if t < 2.0 / 2.75:
        t -= 1.5 / 2.75
        return 7.5625 * t * t + 0.75
    if t < 2.5 / 2.75:
        t -= 2.25 / 2.75
        return 7.5625 * t * t + 0.9375
    t -= 2.625 / 2.75
    return 7.5625 * t * t + 0.984375


def bounce_in(t: float) -> float:
    return 1.0 - bounce_out(1.0 - t)


def bounce_in_out(t: float) -> float:
    if t < 0.5:
        return bounce_in(t * 2.0) * 0.5
    return 0.5 * bounce_out(2.0 * t - 1.0) + 0.5


def circ_in(t: float) -> float:
    return -1.0 * (math.sqrt(1 - t * t) - 1)


def circ_out(t: float) -> float:
    t -= 1.0
    return math.sqrt(1.0 - t * t)


def circ_in_out(t: float) -> float:
    t *= 2.0
    if t < 1:
        return -0.5 * (math.sqrt(1 - t * t) - 1)
    t -= 2.0
    return 0.5 * (math.sqrt(1 - t * t) + 1)


def cubic_in(t: float) -> float:
    return t * t * t


def cubic_out(t: float) -> float:
    t -= 1.0
    return t * t * t + 1.0


def cubic_in_out(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * t * t * t
    t -= 2.0
    return 0.5 * (t * t * t + 2.0)


def elastic_in(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    p = _ELASTIC_PERIOD
    s = p / 4
    t -= 1
    return -(2.0 ** (10.0 * t) * math.sin((t - s) * (2 * math.pi) / p))


def elastic_out(t: float) -> float:
    if t == 0:
        return 0.0
    if t == 1:
        return 1.0
    p = _ELASTIC_PERIOD
    s = p / 4.0
    return 2.0 ** (-10.0 * t) * math.sin((t - s) * (2.0 * math.pi) / p) + 1.0


def elastic_in_out(t: float) -> float:
    if t == 0:
        return 0.0
    t *= 2.0
    if t == 2.0:
        return 1.0
    p = _ELASTIC_PERIOD * 1.5
    s = p / 4
    t_minus_1 = t - 1.0
    wave = math.sin((t_minus_1 - s) * (2.0 * math.pi) / p)
    if t < 1:
        return -0.5 * (2.0 ** (10.0 * t_minus_1) * wave)
    return 2.0 ** (-10.0 * t_minus_1) * wave * 0.5 + 1.0


def expo_in(t: float) -> float:
    return 0.0 if t == 0.0 else 2.0 ** (10.0 * (t - 1.0))


def expo_out(t: float) -> float:
    return 1.0 if t == 1.0 else -(2.0 ** (-10.0 * t)) + 1.0


def expo_in_out(t: float) -> float:
    if t == 0.0:
        return 0.0
    if t == 1.0:
        return 1.0
    t *= 2.0
    e = 10 * (t - 1)
    if t < 1.0:
        return 0.5 * 2.0**e
    return 0.5 * (-(2.0 ** (-e)) + 2)


def quad_in(t: float) -> float:
    return t * t


def quad_out(t: float) -> float:
    return 2 * t - t * t


def quad_in_out(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * (t * t)
    t -= 1.0
    return t + 0.5 - 0.5 * t * t


def quart_in(t: float) -> float:
    return t * t * t * t


def quart_out(t: float) -> float:
    t -= 1.0
    return 1.0 - t * t * t * t


def quart_in_out(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * t * t * t * t
    t -= 2.0
    return 1.0 - 0.5 * t * t * t * t


def quint_in(t: float) -> float:
    return t * t * t * t * t


def quint_out(t: float) -> float:
    t -= 1.0
    return t * t * t * t * t + 1


def quint_in_out(t: float) -> float:
    t *= 2.0
    if t < 1.0:
        return 0.5 * t * t * t * t * t
    t -= 2.0
    return 0.5 * t * t * t * t * t + 1.0


def sine_in(t: float) -> float:
    return -1.0 * math.cos(t * (math.pi / 2.0)) + 1.0


def sine_out(t: float) -> float:
    return math.sin(t * (math.pi / 2.0))


def sine_in_out(t: float) -> float:
    return -0.5 * (math.cos(t * math.pi) - 1)