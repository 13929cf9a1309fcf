"""Runs an actor's actions frame by frame."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Iterable, Optional, Protocol

from cephalopod.actions import Action
from cephalopod.actorstate import ActorState
from cephalopod.signals import Signal, Slot
from cephalopod.types import Vec2


class _Scene(Protocol):
    update_actions_event: Signal


class _Parent(Protocol):
    def is_in_scene(self) -> bool: ...

    @property
    def scene(self) -> _Scene: ...

    @property
    def state(self) -> ActorState: ...

    def set_actor_state(self, state: ActorState) -> None: ...


@dataclass
class _ActionInProgress:
    id: int
    action: Action
    repeat: bool
    elapsed: float = 0.0
    complete: bool = False
    signal: Signal = field(default_factory=Signal)

    @property
    def pcnt_complete(self) -> float:
        duration = self.action.duration
        if duration == 0:
            return 1.0
        return self.elapsed / duration


class ActionPlayer(Slot):
    """Plays actions against an actor's state while the actor is in a scene."""

    def __init__(self, parent: _Parent) -> None:
        self._parent = parent
        self._initial_state: Optional[ActorState] = None
        self._actions: list[_ActionInProgress] = []
        self._update_signal: Optional[Signal] = None

    def has_actions(self) -> bool:
        return bool(self._actions)

    def is_running(self) -> bool:
        return self.has_actions() and self._parent.is_in_scene()

    def run(self) -> None:
        """Hook into the parent's scene updates and snapshot the parent's state."""
        if not self._parent.is_in_scene():
            return
        signal = self._parent.scene.update_actions_event
        signal.connect(self, self.update)
        self._update_signal = signal
        self._initial_state = self._parent.state.copy()

    def update(self, dt: float) -> None:
        """Advance every action by dt seconds and push the result to the parent."""
        if self._initial_state is None:
            return
        has_completed = False
        state = self._initial_state.copy()
        for aip in list(self._actions):
            duration = aip.action.duration
            aip.elapsed = min(aip.elapsed + dt, duration)
            aip.action(state, aip.pcnt_complete)
            if aip.elapsed == duration:
                has_completed = True
                self._finalize(aip)

        self._parent.set_actor_state(state)

        if has_completed:
            self._remove_actions(lambda aip: aip.complete and not aip.repeat)

    def apply_action(self, action: Action, repeat: bool = False, action_id: int = -1) -> None:
        """Add an action, starting playback if the parent is in a scene."""
        was_running = self.is_running()
        self._actions.append(_ActionInProgress(action_id, action, repeat))
        if not was_running and self._parent.is_in_scene():
            self.run()

    def apply_actions(self, actions: Iterable[Action]) -> None:
        for action in actions:
            self.apply_action(action)

    def remove_action(self, action_id: int) -> None:
        """Stop the actions with this id, keeping the progress they have made."""
        matching = [aip for aip in self._actions if aip.id == action_id]
        if not matching:
            return
        for aip in matching:
            self._finalize(aip, emit_signal=False)
        self._remove_actions(lambda aip: aip.id == action_id)

    def completion_signal(self, action_id: int) -> Signal:
        """The signal fired with the id when the action with this id completes."""
        for aip in self._actions:
            if aip.id == action_id:
                return aip.signal
        raise KeyError(action_id)

    def has_action(self, action_id: int) -> bool:
        return any(aip.id == action_id for aip in self._actions)

    def clear_actions(self) -> None:
        """Stop every action, keeping the progress they have made."""
        for aip in self._actions:
            self._finalize(aip, emit_signal=False)
        self._remove_actions(lambda aip: True)

    def move_by(self, vec: Vec2) -> None:
        self._baseline().move_by(vec)

    def rotate_by(self, theta: float) -> None:
        self._baseline().rotate_by(theta)

    def change_alpha_by(self, alpha: float) -> None:
        self._baseline().change_alpha_by(alpha)

    def change_scale_by(self, scale: Vec2) -> None:
        self._baseline().change_scale_by(scale)

    def _baseline(self) -> ActorState:
        if self._initial_state is None:
            raise RuntimeError("action player is not running")
        return self._initial_state

    def _finalize(self, aip: _ActionInProgress, emit_signal: bool = True) -> None:
        if self._initial_state is not None:
            aip.action(self._initial_state, aip.pcnt_complete)
        aip.complete = True
        aip.elapsed = 0.0
        if emit_signal:
            aip.signal.fire(aip.id)

    def _reset_actions(self) -> None:
        only_complete = True
        for aip in self._actions:
            if aip.complete:
                aip.complete = False
            else:
                only_complete = False
        if only_complete:
            self._initial_state = self._parent.state.copy()

    def _remove_actions(self, predicate: Callable[[_ActionInProgress], bool]) -> None:
        self._actions = [aip for aip in self._actions if not predicate(aip)]
        if not self._actions:
            self._initial_state = None
            if self._update_signal is not None:
                self._update_signal.disconnect(self)
                self._update_signal = None
        else:
            self._reset_actions()