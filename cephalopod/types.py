"""Basic value types: colours, 2-D vectors, rectangles and coordinate settings."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class CoordinateMapping(enum.Enum):
    """How logical coordinates are mapped onto the screen."""

    STRETCH_TO_FIT = enum.auto()
    USE_BLACK_BARS = enum.auto()
    PRESERVE_WIDTH = enum.auto()
    PRESERVE_HEIGHT = enum.auto()


class CoordinateSystem(enum.Enum):
    """Placement of the origin and direction of the y axis."""

    UPPER_LEFT_ORIGIN_DESCENDING_Y = enum.auto()
    CENTER_ORIGIN_ASCENDING_Y = enum.auto()
    LOWER_LEFT_ORIGIN_ASCENDING_Y = enum.auto()


@dataclass(frozen=True)
class ColorRGB:
    """An 8-bit-per-channel RGB colour."""

    r: int = 0
    g: int = 0
    b: int = 0


@dataclass(frozen=True)
class ColorRGBA:
    """An 8-bit-per-channel RGBA colour."""

    r: int = 0
    g: int = 0
    b: int = 0
    a: int = 1


@dataclass(frozen=True)
class NormalizedColorRGBA:
    """An RGBA colour with channels in the range [0, 1]."""

    r: float = 0.0
    g: float = 0.0
    b: float = 0.0
    a: float = 1.0

    @classmethod
    def from_rgba(cls, color: ColorRGBA) -> NormalizedColorRGBA:
        """Normalise every channel of an 8-bit RGBA colour."""
        return cls(color.r / 255.0, color.g / 255.0, color.b / 255.0, color.a / 255.0)

    @classmethod
    def from_rgb(cls, color: ColorRGB, alpha: float) -> NormalizedColorRGBA:
        """Normalise an 8-bit RGB colour and attach an already normalised alpha."""
        return cls(color.r / 255.0, color.g / 255.0, color.b / 255.0, alpha)


@dataclass(frozen=True)
class Vec2:
    """A two-component vector."""

    x: float = 0
    y: float = 0

    def __add__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: object) -> Vec2:
        if not isinstance(other, Vec2):
            return NotImplemented
        return Vec2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: object) -> Vec2:
        if not isinstance(k, (int, float)):
            return NotImplemented
        return Vec2(k * self.x, k * self.y)

    def __rmul__(self, k: object) -> Vec2:
        return self.__mul__(k)


@dataclass(frozen=True)
class Rect:
    """An axis-aligned rectangle given by its corner and its extent."""

    x: float = 0
    y: float = 0
    wd: float = 0
    hgt: float = 0

    @classmethod
    def from_location_size(cls, location: Vec2, size: Vec2) -> Rect:
        return cls(location.x, location.y, size.x, size.y)

    @property
    def location(self) -> Vec2:
        return Vec2(self.x, self.y)

    @property
    def size(self) -> Vec2:
        return Vec2(self.wd, self.hgt)

    @property
    def x2(self) -> float:
        return self.x + self.wd

    @property
    def y2(self) -> float:
        return self.y + self.hgt

    @property
    def area(self) -> float:
        return self.wd * self.hgt

    def intersection_of(self, other: Rect) -> Rect:
        """The overlap of two rectangles, or an empty rectangle at the origin."""
        new_x = max(self.x, other.x)
        right = min(self.x2, other.x2)
        new_y = max(self.y, other.y)
        bottom = min(self.y2, other.y2)
        if right >= new_x and bottom >= new_y:
            return Rect(new_x, new_y, right - new_x, bottom - new_y)
        return Rect()

    def union_of(self, other: Rect) -> Rect:
        """The smallest rectangle holding both rectangles."""
        new_x = min(self.x, other.x)
        new_y = min(self.y, other.y)
        new_x2 = max(self.x2, other.x2)
        new_y2 = max(self.y2, other.y2)
        return Rect(new_x, new_y, new_x2 - new_x, new_y2 - new_y)

    def intersects(self, other: Rect) -> bool:
        """True if the interiors of the rectangles overlap."""
        return (
            self.x < other.x2
            and self.x2 > other.x
            and self.y < other.y2
            and self.y2 > other.y
        )

    def inflate(self, horz: float, vert: float) -> Rect:
        """A copy grown by the given amounts on every side."""
        return Rect(
            self.x - horz,
            self.y - vert,
            self.wd + 2 * horz,
            self.hgt + 2 * vert,
        )

    def contains(self, point: Vec2) -> bool:
        """True if the point lies inside or on the border."""
        return (
            self.x <= point.x <= self.x + self.wd
            and self.y <= point.y <= self.y + self.hgt
        )

    def is_empty(self) -> bool:
        return self.area == 0