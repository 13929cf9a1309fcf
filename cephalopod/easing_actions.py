"""Actions whose progress follows an easing curve."""

from __future__ import annotations

import enum
from typing import Callable

from cephalopod import easing
from cephalopod.actions import Action
from cephalopod.actorstate import ActorState

EasingFunction = Callable[[float], float]


class EasingFunctionType(enum.Enum):
    """The family of easing curve."""

    BACK_FIRST = enum.auto()
    BOUNCY = enum.auto()
    CIRCULAR = enum.auto()
    CUBIC = enum.auto()
    ELASTIC = enum.auto()
    EXPONENTIAL = enum.auto()
    QUADRATIC = enum.auto()
    QUARTIC = enum.auto()
    QUINTIC = enum.auto()
    SINUSOIDAL = enum.auto()


class EasingType(enum.Enum):
    """Which end of the motion the curve eases."""

    IN = enum.auto()
    OUT = enum.auto()
    IN_OUT = enum.auto()


_F = EasingFunctionType
_E = EasingType

_EASING_FUNCTIONS: dict[tuple[EasingFunctionType, EasingType], EasingFunction] = {
    (_F.BACK_FIRST, _E.IN): easing.back_in,
    (_F.BACK_FIRST, _E.OUT): easing.back_out,
    (_F.BACK_FIRST, _E.IN_OUT): easing.back_in_out,
    (_F.BOUNCY, _E.IN): easing.bounce_in,
    (_F.BOUNCY, _E.OUT): easing.bounce_out,
    (_F.BOUNCY, _E.IN_OUT): easing.bounce_in_out,
    (_F.CIRCULAR, _E.IN): easing.circ_in,
    (_F.CIRCULAR, _E.OUT): easing.circ_out,
    (_F.CIRCULAR, _E.IN_OUT): easing.circ_in_out,
    (_F.CUBIC, _E.IN): easing.cubic_in,
    (_F.CUBIC, _E.OUT): easing.cubic_out,
    (_F.CUBIC, _E.IN_OUT): easing.cubic_in_out,
    (_F.ELASTIC, _E.IN): easing.elastic_in,
    (_F.ELASTIC, _E.OUT): easing.elastic_out,
    (_F.ELASTIC, _E.IN_OUT): easing.elastic_in_out,
    (_F.EXPONENTIAL, _E.IN): easing.expo_in,
    (_F.EXPONENTIAL, _E.OUT): easing.expo_out,
    (_F.EXPONENTIAL, _E.IN_OUT): easing.expo_in_out,
    (_F.QUADRATIC, _E.IN): easing.quad_in,
    (_F.QUADRATIC, _E.OUT): easing.quad_out,
    (_F.QUADRATIC, _E.IN_OUT): easing.quad_in_out,
    (_F.QUARTIC, _E.IN): easing.quart_in,
    (_F.QUARTIC, _E.OUT): easing.quart_out,
    (_F.QUARTIC, _E.IN_OUT): easing.quart_in_out,
    (_F.QUINTIC, _E.IN): easing.quint_in,
    (_F.QUINTIC, _E.OUT): easing.quint_out,
    (_F.QUINTIC, _E.IN_OUT): easing.quint_in_out,
    (_F.SINUSOIDAL, _E.IN): easing.sine_in,
    (_F.SINUSOIDAL, _E.OUT): easing.sine_out,
    (_F.SINUSOIDAL, _E.IN_OUT): easing.sine_in_out,
}


def easing_function(
    function_type: EasingFunctionType, easing_type: EasingType
) -> EasingFunction:
    """The easing curve for a curve family and easing direction."""
    try:
        return _EASING_FUNCTIONS[(function_type, easing_type)]
    except KeyError:
        raise ValueError(
            f"no easing function for {function_type!r} with {easing_type!r}"
        ) from None


def create_easing_action(
    function_type: EasingFunctionType, easing_type: EasingType, child_action: Action
) -> Action:
    """Wrap an action so that its normalised time passes through an easing curve."""
    curve = easing_function(function_type, easing_type)

    def eased(state: ActorState, t: float) -> None:
        child_action(state, curve(t))

    return Action(child_action.duration, eased)