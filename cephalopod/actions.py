"""Timed actions that drive an actor's state from normalised time."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Protocol

from cephalopod.actorstate import ActorState
from cephalopod.types import Vec2

ActionFunction = Callable[[ActorState, float], None]


class _HasAlpha(Protocol):
    @property
    def alpha(self) -> float: ...


@dataclass(frozen=True)
class Action:
    """A duration and a function applying the action at normalised time t."""

    duration: float
    function: ActionFunction

    def __call__(self, state: ActorState, t: float) -> None:
        self.function(state, t)


def create_move_by_action(duration: float, vec: Vec2) -> Action:
    def move(state: ActorState, t: float) -> None:
        state.move_by(Vec2(t * vec.x, t * vec.y))

    return Action(duration, move)


def create_rotate_by_action(duration: float, theta: float) -> Action:
    def rotate(state: ActorState, t: float) -> None:
        state.rotate_by(t * theta)

    return Action(duration, rotate)


def create_fade_by_action(duration: float, alpha: float) -> Action:
    def fade(state: ActorState, t: float) -> None:
        state.change_alpha_by(t * alpha)

    return Action(duration, fade)


def create_fade_out_action(duration: float, actor: _HasAlpha) -> Action:
    """Fade the actor's current alpha down to zero."""
    return create_fade_by_action(duration, -actor.alpha)


def create_simultaneous_actions(actions: Iterable[Action]) -> Action:
    """Run actions together; the result lasts as long as the longest."""
    children = list(actions)
    if not children:
        raise ValueError("at least one action is required")
    duration = max(a.duration for a in children)

    def run_all(state: ActorState, t: float) -> None:
        for action in children:
            action(state, min((t * duration) / action.duration, 1.0))

    return Action(duration, run_all)


def create_action_sequence(actions: Iterable[Action]) -> Action:
    """Run actions one after another."""
    children = list(actions)
    duration = sum(a.duration for a in children)

    def run_sequence(state: ActorState, t: float) -> None:
        time = t * duration
        start = 0.0
        for action in children:
            end = start + action.duration
            if time < start:
                return
            if time <= end:
                action_t = (time - start) / action.duration
            else:
                action_t = 1.0
            action(state, action_t)
            start += action.duration

    return Action(duration, run_sequence)


def create_animation_action(frames: Iterable[tuple[str, float]]) -> Action:
    """Step through (frame name, duration) pairs on the sprite sheet."""
    steps = list(frames)
    duration = sum(d for _, d in steps)

    def animate(state: ActorState, t: float) -> None:
        time = t * duration
        start = 0.0
        frame_name = ""
        for name, frame_duration in steps:
            end = start + frame_duration
            if start <= time <= end:
                frame_name = name
            start += frame_duration
        state.set_sprite_frame(frame_name)

    return Action(duration, animate)


def create_uniform_animation_action(frame_duration: float, frames: Iterable[str]) -> Action:
    """Animate frames that each last the same time."""
    return create_animation_action((name, frame_duration) for name in frames)