"""Brushes: descriptions of how a filled region is colored.

A Brush never owns paint state; ``apply_to`` copies its description onto a
caller-owned Paint right before drawing.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from typing import Optional, Sequence

from borderkit.graphics.color import Color
from borderkit.graphics.paint import Paint
from borderkit.units import Offset


class TileMode(enum.Enum):
    CLAMP = "pad"
    REPEATED = "repeat"
    MIRROR = "reflect"


def _validate_stops(colors: tuple[Color, ...], stops: Optional[tuple[float, ...]]) -> None:
    if len(colors) < 2:
        raise ValueError(f"Gradients need at least 2 colors, got {len(colors)}")
    if stops is None:
        return
    if len(stops) != len(colors):
        raise ValueError(f"Got {len(stops)} stops for {len(colors)} colors")
    if any(not 0.0 <= s <= 1.0 for s in stops):
        raise ValueError(f"Gradient stops must lie in [0, 1]: {stops}")
    if any(b < a for a, b in zip(stops, stops[1:])):
        raise ValueError(f"Gradient stops must be non-decreasing: {stops}")


def _even_stops(n: int) -> tuple[float, ...]:
    return tuple(i / (n - 1) for i in range(n))


# ── Shaders (what a Paint carries) ──


@dataclass(frozen=True)
class Shader:
    colors: tuple[Color, ...]
    stops: tuple[float, ...]
    tile_mode: TileMode


@dataclass(frozen=True)
class LinearGradientShader(Shader):
    start: Offset
    end: Offset


@dataclass(frozen=True)
class RadialGradientShader(Shader):
    center: Offset
    radius: float


# ── Brushes ──


class Brush:
    def apply_to(self, paint: Paint) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class SolidColor(Brush):
    value: Color

    def apply_to(self, paint: Paint) -> None:
        paint.alpha = 1.0
        paint.color = self.value
        paint.shader = None


class ShaderBrush(Brush):
    def create_shader(self) -> Shader:
        raise NotImplementedError

    def apply_to(self, paint: Paint) -> None:
        paint.color = Color.BLACK
        paint.shader = self.create_shader()


@dataclass(frozen=True)
class LinearGradient(ShaderBrush):
    colors: tuple[Color, ...]
    start: Offset
    end: Offset
    stops: Optional[tuple[float, ...]] = None
    tile_mode: TileMode = TileMode.CLAMP

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        if self.stops is not None:
            object.__setattr__(self, "stops", tuple(float(s) for s in self.stops))
        _validate_stops(self.colors, self.stops)

    def create_shader(self) -> Shader:
        return LinearGradientShader(
            colors=self.colors,
            stops=self.stops or _even_stops(len(self.colors)),
            tile_mode=self.tile_mode,
            start=self.start,
            end=self.end,
        )


@dataclass(frozen=True)
class RadialGradient(ShaderBrush):
    colors: tuple[Color, ...]
    center: Offset
    radius: float
    stops: Optional[tuple[float, ...]] = None
    tile_mode: TileMode = TileMode.CLAMP

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        if self.stops is not None:
            object.__setattr__(self, "stops", tuple(float(s) for s in self.stops))
        if self.radius <= 0:
            raise ValueError(f"Radial gradient radius must be positive, got {self.radius}")
        _validate_stops(self.colors, self.stops)

    def create_shader(self) -> Shader:
        return RadialGradientShader(
            colors=self.colors,
            stops=self.stops or _even_stops(len(self.colors)),
            tile_mode=self.tile_mode,
            center=self.center,
            radius=self.radius,
        )


def horizontal_gradient(
    colors: Sequence[Color],
    start_x: float,
    end_x: float,
    tile_mode: TileMode = TileMode.CLAMP,
) -> LinearGradient:
    return LinearGradient(tuple(colors), Offset(start_x, 0.0), Offset(end_x, 0.0), tile_mode=tile_mode)


def vertical_gradient(
    colors: Sequence[Color],
    start_y: float,
    end_y: float,
    tile_mode: TileMode = TileMode.CLAMP,
) -> LinearGradient:
    return LinearGradient(tuple(colors), Offset(0.0, start_y), Offset(0.0, end_y), tile_mode=tile_mode)
