# cephalopod

A small toolkit of game-engine parts that do not touch the screen. It covers
timed actions that animate an actor's state, easing curves, signals and slots,
3×3 affine transforms, and basic geometry types. It has no dependencies outside
the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `cephalopod.types` | `Vec2`, `Rect`, `ColorRGB`, `ColorRGBA`, `NormalizedColorRGBA`, and the `CoordinateMapping` and `CoordinateSystem` enums |
| `cephalopod.events` | `KeyCode`, the `KeyModifiers` flags and `any_modifier` |
| `cephalopod.signals` | `Signal` and `Slot` |
| `cephalopod.easing` | Easing curves `back`, `bounce`, `circ`, `cubic`, `elastic`, `expo`, `quad`, `quart`, `quint` and `sine`, each as `_in`, `_out` and `_in_out` |
| `cephalopod.matrix` | `Mat3x3`, for affine transforms of points and rectangles |
| `cephalopod.clock` | `Clock`, a restartable stopwatch that counts seconds |
| `cephalopod.actorstate` | `ActorState`, holding position, scale, rotation, alpha, anchor and sprite frame |
| `cephalopod.actions` | `Action` and the functions that create actions |
| `cephalopod.easing_actions` | `EasingFunctionType`, `EasingType`, `easing_function` and `create_easing_action` |
| `cephalopod.actionplayer` | `ActionPlayer`, which advances actions one frame at a time |

## Geometry

`Vec2` and `Rect` are frozen dataclasses. A `Rect` has `x2`, `y2`, `area`,
`location` and `size`. Its methods are `intersection_of`, `union_of`,
`intersects`, `contains` and `is_empty`. `inflate` returns a new rectangle that
is larger on every side.

`Mat3x3()` is the identity matrix. Pass nine values, in row-major order, to
build any other matrix. `translate`, `rotate` and `scale` return new matrices.
`rotate` and `scale` can take an optional center. `apply` transforms a `Vec2`.
`apply_rect` gives the bounding box of a transformed `Rect`. `inverse` returns
`None` when the matrix is singular. The `*` operator multiplies two matrices,
applies a matrix to a vector, or scales a matrix by a number.

## Actor state

`ActorState` holds an actor's geometry. `move_by`, `rotate_by`,
`change_scale_by` and `change_alpha_by` change it in place. Rotation stays
within `[0, 2π)` and alpha stays within `[0, 1]`. `transformation_matrix` is
the cached local-to-parent transform.

To use sprite frames, set `sprite_sheet` to any object that has
`frame_size(name)` and `frame(name)` methods. `set_sprite_frame` and `rect`
raise `ValueError` when no sprite sheet is set.

## Actions

An action pairs a duration with a function of `(state, t)`, where `t` runs
from 0 to 1. These functions create actions:

- `create_move_by_action`
- `create_rotate_by_action`
- `create_fade_by_action`
- `create_fade_out_action`
- `create_simultaneous_actions`
- `create_action_sequence`
- `create_animation_action`
- `create_uniform_animation_action`

```python
from cephalopod.types import Vec2
from cephalopod.actions import (
    create_move_by_action,
    create_rotate_by_action,
    create_action_sequence,
    create_simultaneous_actions,
)
from cephalopod.easing_actions import EasingFunctionType, EasingType, create_easing_action

slide = create_move_by_action(2.0, Vec2(100.0, 0.0))
spin = create_rotate_by_action(1.0, 3.14159)

together = create_simultaneous_actions([slide, spin])   # lasts 2.0 s
in_turn = create_action_sequence([slide, spin])         # lasts 3.0 s
bouncy = create_easing_action(EasingFunctionType.BOUNCY, EasingType.OUT, slide)
```

## Playing actions

`ActionPlayer` plays actions on behalf of a parent object. The parent must
provide four members:

- `is_in_scene()`
- a `scene` with an `update_actions_event` signal
- a `state` (an `ActorState`)
- `set_actor_state(state)`

While the parent is in a scene, the player listens to that signal and advances
its actions by the time passed with each firing:

```python
from cephalopod.actionplayer import ActionPlayer
from cephalopod.actions import create_move_by_action
from cephalopod.actorstate import ActorState
from cephalopod.signals import Signal
from cephalopod.types import Vec2

class Scene:
    def __init__(self):
        self.update_actions_event = Signal()

class Thing:
    def __init__(self, scene):
        self.scene = scene
        self.state = ActorState()

    def is_in_scene(self):
        return True

    def set_actor_state(self, state):
        self.state = state

scene = Scene()
thing = Thing(scene)
player = ActionPlayer(thing)
player.apply_action(create_move_by_action(1.0, Vec2(10.0, 0.0)))
scene.update_actions_event.fire(0.5)
scene.update_actions_event.fire(0.5)
assert thing.state.position.x == 10.0
```

Actions can repeat and can carry an id. For an action with an id, use
`completion_signal(action_id)` to get its completion signal, which raises
`KeyError` for an unknown id. When the action completes, the signal fires with
the id. `remove_action` and `clear_actions` stop actions but keep the progress
they have made. Stopping an action this way does not fire its completion
signal.

## Signals

```python
from cephalopod.signals import Signal, Slot

class Listener(Slot):
    def __init__(self):
        self.seen = []

    def on_value(self, value):
        self.seen.append(value)

signal = Signal()
listener = Listener()
signal.connect(listener, listener.on_value)
signal.fire(42)
assert listener.seen == [42]
```

A handler may connect or disconnect through a signal while that signal is
firing. The change waits until firing ends. `Signal.close` drops every
subscriber, and `Slot.disconnect_all` leaves every signal the slot is
connected to.

## What the package does not do

The package provides no actor or scene-graph class, no scene, no window, no
rendering, no input handling and no game loop. `ActionPlayer` works with any
parent object that has the members listed above. `KeyCode` and `KeyModifiers`
only describe keys; nothing in the package reads a keyboard.