"""Shapes: value descriptors that produce an Outline for a target size.

Every shape returns an empty outline for an empty size (either dimension <= 0),
which is what lets an over-wide border degrade to a filled shape instead of
failing.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Optional, Union

import numpy as np
from matplotlib.path import Path as MplPath
from matplotlib.transforms import Affine2D

from borderkit.graphics.outline import (
    EMPTY_OUTLINE,
    GenericOutline,
    Outline,
    RectangleOutline,
    RoundedOutline,
)
from borderkit.graphics.path import Path, PathOperation
from borderkit.units import Density, Dp, Rect, RoundRect, Size


class Shape:
    """Base class for shapes. Implementations must be comparable by value."""

    def create_outline(self, size: Size, density: Density) -> Outline:
        raise NotImplementedError


# ── Corner sizes ──


class CornerSize:
    def to_px(self, shape_size: Size, density: Density) -> float:
        raise NotImplementedError


@dataclass(frozen=True)
class DpCornerSize(CornerSize):
    size: Dp

    def to_px(self, shape_size: Size, density: Density) -> float:
        return self.size.to_px(density)


@dataclass(frozen=True)
class PxCornerSize(CornerSize):
    size: float

    def to_px(self, shape_size: Size, density: Density) -> float:
        return self.size


@dataclass(frozen=True)
class PercentCornerSize(CornerSize):
    """Percentage of the shape's minimum dimension."""

    percent: float

    def __post_init__(self) -> None:
        if not 0 <= self.percent <= 100:
            raise ValueError(f"Corner percent must be in [0, 100], got {self.percent}")

    def to_px(self, shape_size: Size, density: Density) -> float:
        return shape_size.min_dimension * self.percent / 100


ZERO_CORNER = PxCornerSize(0.0)

CornerLike = Union[CornerSize, Dp, int, float]


def corner_size(value: CornerLike) -> CornerSize:
    """Dp → dp corner, plain number → percent corner, CornerSize passes through."""
    if isinstance(value, CornerSize):
        return value
    if isinstance(value, Dp):
        return DpCornerSize(value)
    if isinstance(value, (int, float)):
        return PercentCornerSize(float(value))
    raise ValueError(f"Unsupported corner size: {value!r}")


# ── Shapes ──


@dataclass(frozen=True)
class RectangleShape(Shape):
    def create_outline(self, size: Size, density: Density) -> Outline:
        if size.is_empty:
            return EMPTY_OUTLINE
        return RectangleOutline(Rect.from_size(size))


@dataclass(frozen=True)
class CornerBasedShape(Shape):
    top_left: CornerSize = ZERO_CORNER
    top_right: CornerSize = ZERO_CORNER
    bottom_right: CornerSize = ZERO_CORNER
    bottom_left: CornerSize = ZERO_CORNER

    def __post_init__(self) -> None:
        for name in ("top_left", "top_right", "bottom_right", "bottom_left"):
            object.__setattr__(self, name, corner_size(getattr(self, name)))

    @classmethod
    def uniform(cls, size: CornerLike):
        c = corner_size(size)
        return cls(c, c, c, c)

    def create_outline(self, size: Size, density: Density) -> Outline:
        if size.is_empty:
            return EMPTY_OUTLINE
        half = size.min_dimension / 2
        radii = tuple(
            min(max(c.to_px(size, density), 0.0), half)
            for c in (self.top_left, self.top_right, self.bottom_right, self.bottom_left)
        )
        return self._outline(size, radii)

    def _outline(self, size: Size, radii: tuple[float, float, float, float]) -> Outline:
        raise NotImplementedError


@dataclass(frozen=True)
class RoundedCornerShape(CornerBasedShape):
    def _outline(self, size: Size, radii: tuple[float, float, float, float]) -> Outline:
        rect = Rect.from_size(size)
        if all(r == 0 for r in radii):
            return RectangleOutline(rect)
        return RoundedOutline(RoundRect(rect, *radii))


@dataclass(frozen=True)
class CutCornerShape(CornerBasedShape):
    """Corners cut by a straight 45° chamfer."""

    def _outline(self, size: Size, radii: tuple[float, float, float, float]) -> Outline:
        if all(r == 0 for r in radii):
            return RectangleOutline(Rect.from_size(size))
        tl, tr, br, bl = radii
        w, h = size.width, size.height
        path = Path()
        path.add_polygon([
            (0.0, tl), (tl, 0.0),
            (w - tr, 0.0), (w, tr),
            (w, h - br), (w - br, h),
            (bl, h), (0.0, h - bl),
        ])
        return GenericOutline(path)


@dataclass(frozen=True)
class GenericShape(Shape):
    """Shape drawn by ``builder(path, size)``. Equal only to a shape with the same builder."""

    builder: Callable[[Path, Size], None]

    def create_outline(self, size: Size, density: Density) -> Outline:
        if size.is_empty:
            return EMPTY_OUTLINE
        path = Path()
        self.builder(path, size)
        return GenericOutline(path)


@dataclass(frozen=True)
class VectorPathShape(Shape):
    """A matplotlib Path mapped from ``viewport`` onto the target size (even-odd fill).

    ``viewport`` defaults to the path's extents. Coordinates are y-down, like
    the rest of borderkit; use the classmethods for y-up unit shapes.
    """

    path: MplPath = field(compare=False)
    viewport: Optional[Rect] = None
    _key: tuple = field(default=(), init=False, repr=False)

    def __post_init__(self) -> None:
        vertices = np.asarray(self.path.vertices, dtype=float)
        if len(vertices) < 3:
            raise ValueError(f"Vector path needs at least 3 vertices, got {len(vertices)}")
        viewport = self.viewport
        if viewport is None:
            ext = self.path.get_extents()
            viewport = Rect(float(ext.x0), float(ext.y0), float(ext.x1), float(ext.y1))
            object.__setattr__(self, "viewport", viewport)
        if viewport.is_empty:
            raise ValueError(f"Viewport must have positive size, got {viewport}")
        codes = self.path.codes
        key = (vertices.tobytes(), None if codes is None else np.asarray(codes).tobytes())
        object.__setattr__(self, "_key", key)

    @classmethod
    def from_points(cls, points, viewport: Optional[Rect] = None) -> VectorPathShape:
        verts = np.asarray(points, dtype=float)
        return cls(MplPath(verts, closed=False), viewport)

    @classmethod
    def regular_polygon(cls, num_vertices: int) -> VectorPathShape:
        return cls(_flip_y(MplPath.unit_regular_polygon(num_vertices)))

    @classmethod
    def star(cls, num_points: int, inner_radius: float = 0.5) -> VectorPathShape:
        return cls(_flip_y(MplPath.unit_regular_star(num_points, inner_radius)))

    def create_outline(self, size: Size, density: Density) -> Outline:
        if size.is_empty:
            return EMPTY_OUTLINE
        vp = self.viewport
        transform = (
            Affine2D()
            .translate(-vp.left, -vp.top)
            .scale(size.width / vp.width, size.height / vp.height)
        )
        path = Path()
        ring_path = Path()
        for ring in self.path.to_polygons(transform=transform, closed_only=True):
            ring_path.reset()
            ring_path.add_polygon(ring)
            path.op(path, ring_path, PathOperation.XOR)
        return GenericOutline(path)


def _flip_y(path: MplPath) -> MplPath:
    """Unit shapes are y-up; mirror them into screen axes."""
    return MplPath(path.vertices * np.array([1.0, -1.0]), path.codes)


RECTANGLE_SHAPE = RectangleShape()
CIRCLE_SHAPE = RoundedCornerShape.uniform(50)
