"""The geometric and visual state of an actor."""

from __future__ import annotations

import copy as _copy
import math
from typing import Optional, Protocol

from cephalopod.matrix import Mat3x3
from cephalopod.types import Rect, Vec2


class FrameSource(Protocol):
    """Anything that knows the size and location of named sprite frames."""

    def frame_size(self, name: str) -> Vec2: ...

    def frame(self, name: str) -> Rect: ...


def _normalize_angle(angle: float) -> float:
    return angle % math.tau


def _sprite_matrix(
    size: Vec2, position: Vec2, anchor_pcnt: Vec2, scale: Vec2, rotation: float
) -> Mat3x3:
    origin_x = anchor_pcnt.x * size.x
    origin_y = anchor_pcnt.y * size.y
    cosine = math.cos(rotation)
    sine = math.sin(rotation)
    sxc = scale.x * cosine
    syc = scale.y * cosine
    sxs = scale.x * sine
    sys_ = scale.y * sine
    tx = -origin_x * sxc - origin_y * sys_ + position.x
    ty = origin_x * sxs - origin_y * syc + position.y
    return Mat3x3(sxc, sys_, tx, -sxs, syc, ty, 0, 0, 1)


class ActorState:
    """Position, scale, rotation, alpha, anchor and sprite frame of an actor."""

    def __init__(self) -> None:
        self.sprite_sheet: Optional[FrameSource] = None
        self._position = Vec2(0, 0)
        self._scale = Vec2(1, 1)
        self._rotation = 0.0
        self._alpha = 1.0
        self._anchor_pcnt = Vec2(0.5, 0.5)
        self._sprite_frame = ""
        self._frame_size = Vec2(0, 0)
        self._transform: Optional[Mat3x3] = None

    def copy(self) -> ActorState:
        """An independent copy sharing the same sprite sheet."""
        return _copy.copy(self)

    @property
    def position(self) -> Vec2:
        return self._position

    @property
    def scale(self) -> Vec2:
        return self._scale

    @property
    def rotation(self) -> float:
        return self._rotation

    @property
    def alpha(self) -> float:
        return self._alpha

    @property
    def anchor_pcnt(self) -> Vec2:
        return self._anchor_pcnt

    @property
    def sprite_frame(self) -> str:
        return self._sprite_frame

    @property
    def size(self) -> Vec2:
        return self._frame_size

    def move_by(self, vec: Vec2) -> None:
        self._position = self._position + vec
        self._transform = None

    def rotate_by(self, theta: float) -> None:
        """Rotate by theta radians, keeping the angle within [0, 2*pi)."""
        self._rotation = _normalize_angle(self._rotation + theta)
        self._transform = None

    def change_alpha_by(self, delta: float) -> None:
        """Change alpha, clamped to [0, 1]."""
        self._alpha = min(max(self._alpha + delta, 0.0), 1.0)

    def change_scale_by(self, scale: Vec2) -> None:
        self._scale = self._scale + scale
        self._transform = None

    def set_anchor_pcnt(self, pcnt: Vec2) -> None:
        """Set the anchor as a fraction of the frame size."""
        self._anchor_pcnt = pcnt
        self._transform = None

    @property
    def anchor_pt(self) -> Vec2:
        """The anchor in frame pixels."""
        return Vec2(
            self._anchor_pcnt.x * self._frame_size.x,
            self._anchor_pcnt.y * self._frame_size.y,
        )

    def set_sprite_frame(self, frame: str) -> None:
        """Select a frame of the sprite sheet and take on its size."""
        if self.sprite_sheet is None:
            raise ValueError("actor state has no sprite sheet")
        self._sprite_frame = frame
        self._frame_size = self.sprite_sheet.frame_size(frame)
        self._transform = None

    @property
    def rect(self) -> Rect:
        """Location of the current frame within the sprite sheet."""
        if self.sprite_sheet is None:
            raise ValueError("actor state has no sprite sheet")
        return self.sprite_sheet.frame(self._sprite_frame)

    @property
    def transformation_matrix(self) -> Mat3x3:
        """The local-to-parent transform, cached until the geometry changes."""
        if self._transform is None:
            self._transform = _sprite_matrix(
                self._frame_size,
                self._position,
                self._anchor_pcnt,
                self._scale,
                self._rotation,
            )
        return self._transform