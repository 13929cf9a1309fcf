"""Immutable 3x3 matrices for 2-D affine transformations."""

from __future__ import annotations

import math
from typing import Optional, Union

from cephalopod.types import Rect, Vec2

_Number = Union[int, float]


class Mat3x3:
    """A row-major 3x3 matrix; built with no arguments it is the identity."""

    __slots__ = ("_m",)

    IDENTITY: Mat3x3

    def __init__(self, *args: _Number) -> None:
        if not args:
            args = (1.0, 0.0, 0.0, 0.0, 1.0, 0.0, 0.0, 0.0, 1.0)
        if len(args) != 9:
            raise TypeError(f"Mat3x3 takes 0 or 9 values, got {len(args)}")
        self._m = tuple(float(a) for a in args)

    def values(self) -> tuple[float, ...]:
        """The nine entries in row-major order."""
        return self._m

    def determinant(self) -> float:
        a, b, c, d, e, f, g, h, i = self._m
        return a * (e * i - f * h) - b * (d * i - f * g) + c * (d * h - e * g)

    def inverse(self) -> Optional[Mat3x3]:
        """The inverse matrix, or None if the matrix is singular."""
        det = self.determinant()
        if det == 0:
            return None
        a, b, c, d, e, f, g, h, i = self._m
        cofactors = (
            e * i - f * h, c * h - b * i, b * f - c * e,
            f * g - d * i, a * i - c * g, c * d - a * f,
            d * h - e * g, b * g - a * h, a * e - b * d,
        )
        return Mat3x3(*(v / det for v in cofactors))

    def transposed(self) -> Mat3x3:
        a, b, c, d, e, f, g, h, i = self._m
        return Mat3x3(a, d, g, b, e, h, c, f, i)

    def apply(self, point: Vec2) -> Vec2:
        """Transform a point."""
        m = self._m
        return Vec2(
            m[0] * point.x + m[1] * point.y + m[2],
            m[3] * point.x + m[4] * point.y + m[5],
        )

    def apply_rect(self, rect: Rect) -> Rect:
        """The axis-aligned bounding box of a transformed rectangle."""
        corners = [
            self.apply(Vec2(rect.x, rect.y)),
            self.apply(Vec2(rect.x, rect.y + rect.hgt)),
            self.apply(Vec2(rect.x + rect.wd, rect.y)),
            self.apply(Vec2(rect.x + rect.wd, rect.y + rect.hgt)),
        ]
        left = min(p.x for p in corners)
        right = max(p.x for p in corners)
        top = min(p.y for p in corners)
        bottom = max(p.y for p in corners)
        return Rect(left, top, right - left, bottom - top)

    def combine(self, other: Mat3x3) -> Mat3x3:
        """This matrix followed on the right by another."""
        return self * other

    def translate(self, offset: Vec2) -> Mat3x3:
        return self.combine(Mat3x3(1, 0, offset.x, 0, 1, offset.y, 0, 0, 1))

    def rotate(self, angle: float, center: Optional[Vec2] = None) -> Mat3x3:
        """Combine with a rotation by angle radians, optionally about a center."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        if center is None:
            rotation = Mat3x3(cos, -sin, 0, sin, cos, 0, 0, 0, 1)
        else:
            cx, cy = center.x, center.y
            rotation = Mat3x3(
                cos, -sin, cx * (1 - cos) + cy * sin,
                sin, cos, cy * (1 - cos) - cx * sin,
                0, 0, 1,
            )
        return self.combine(rotation)

    def scale(self, factors: Union[Vec2, _Number], center: Optional[Vec2] = None) -> Mat3x3:
        """Combine with a scaling, optionally about a center."""
        if not isinstance(factors, Vec2):
            factors = Vec2(factors, factors)
        sx, sy = factors.x, factors.y
        if center is None:
            scaling = Mat3x3(sx, 0, 0, 0, sy, 0, 0, 0, 1)
        else:
            scaling = Mat3x3(
                sx, 0, center.x * (1 - sx),
                0, sy, center.y * (1 - sy),
                0, 0, 1,
            )
        return self.combine(scaling)

    def __mul__(self, other: object) -> Union[Mat3x3, Vec2]:
        if isinstance(other, Vec2):
            return self.apply(other)
        if isinstance(other, Mat3x3):
            a = self._m
            b = other._m
            return Mat3x3(
                *(
                    sum(a[row * 3 + k] * b[k * 3 + col] for k in range(3))
                    for row in range(3)
                    for col in range(3)
                )
            )
        return NotImplemented

    def __rmul__(self, k: object) -> Mat3x3:
        if not isinstance(k, (int, float)):
            return NotImplemented
        return Mat3x3(*(k * v for v in self._m))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Mat3x3):
            return NotImplemented
        return self._m == other._m

    def __hash__(self) -> int:
        return hash(self._m)

    def __repr__(self) -> str:
        return f"Mat3x3{self._m}"


Mat3x3.IDENTITY = Mat3x3()