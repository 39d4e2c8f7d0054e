"""Units and geometry value types: Dp, Density, Size, Offset, Rect, RoundRect.

All types are immutable and compare by value, so they can be used directly
as change-detection keys by the border cache.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True, order=True)
class Dp:
    """Device-independent length. ``Dp.HAIRLINE`` means "thinnest renderable line"."""

    value: float

    HAIRLINE: ClassVar[Dp]

    @property
    def is_hairline(self) -> bool:
        return self == Dp.HAIRLINE

    def to_px(self, density: Density) -> float:
        return self.value * density.density

    def __add__(self, other: Dp) -> Dp:
        return Dp(self.value + other.value)

    def __sub__(self, other: Dp) -> Dp:
        return Dp(self.value - other.value)

    def __mul__(self, factor: float) -> Dp:
        return Dp(self.value * factor)

    __rmul__ = __mul__

    def __truediv__(self, divisor: float) -> Dp:
        return Dp(self.value / divisor)

    def __repr__(self) -> str:
        if self.is_hairline:
            return "Dp.HAIRLINE"
        return f"{self.value:g}.dp"


Dp.HAIRLINE = Dp(0.0)


def dp(value: float) -> Dp:
    return Dp(float(value))


@dataclass(frozen=True)
class Density:
    """Conversion context: ``density`` device pixels per dp."""

    density: float = 1.0
    font_scale: float = 1.0

    def __post_init__(self) -> None:
        if not math.isfinite(self.density) or self.density <= 0:
            raise ValueError(f"Density must be finite and positive, got {self.density}")
        if not math.isfinite(self.font_scale) or self.font_scale <= 0:
            raise ValueError(f"Font scale must be finite and positive, got {self.font_scale}")


@dataclass(frozen=True)
class Offset:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Offset) -> Offset:
        return Offset(self.x + other.x, self.y + other.y)


@dataclass(frozen=True)
class Size:
    """Size in device pixels."""

    width: float
    height: float

    @property
    def min_dimension(self) -> float:
        return min(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def shrink(self, amount: float) -> Size:
        """Shrink both dimensions by ``amount`` (may go negative)."""
        return Size(self.width - amount, self.height - amount)


@dataclass(frozen=True)
class Rect:
    left: float
    top: float
    right: float
    bottom: float

    @classmethod
    def from_size(cls, size: Size, origin: Offset = Offset()) -> Rect:
        return cls(origin.x, origin.y, origin.x + size.width, origin.y + size.height)

    @property
    def width(self) -> float:
        return self.right - self.left

    @property
    def height(self) -> float:
        return self.bottom - self.top

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def is_empty(self) -> bool:
        return self.width <= 0 or self.height <= 0

    def translate(self, dx: float, dy: float) -> Rect:
        return Rect(self.left + dx, self.top + dy, self.right + dx, self.bottom + dy)

    def as_tuple(self) -> tuple[float, float, float, float]:
        return (self.left, self.top, self.right, self.bottom)


@dataclass(frozen=True)
class RoundRect:
    """Rectangle with a circular radius per corner (clockwise from top-left)."""

    rect: Rect
    top_left: float = 0.0
    top_right: float = 0.0
    bottom_right: float = 0.0
    bottom_left: float = 0.0

    @property
    def radii(self) -> tuple[float, float, float, float]:
        return (self.top_left, self.top_right, self.bottom_right, self.bottom_left)

    @property
    def is_rect(self) -> bool:
        return all(r <= 0 for r in self.radii)

    def scaled_radii(self) -> tuple[float, float, float, float]:
        """Radii scaled down uniformly so adjacent corners never overlap."""
        tl, tr, br, bl = (max(0.0, r) for r in self.radii)
        w, h = self.rect.width, self.rect.height
        scale = 1.0
        for span, total in ((w, tl + tr), (w, bl + br), (h, tl + bl), (h, tr + br)):
            if total > span > 0:
                scale = min(scale, span / total)
        return (tl * scale, tr * scale, br * scale, bl * scale)
