"""Path: mutable geometric path buffer backed by shapely.

A Path is long-lived storage: callers ``reset()`` and refill it rather than
allocating a new one per frame. Contours are kept as a single shapely area
geometry (nonzero fill), so boolean operations map directly onto shapely's
overlay functions.
"""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Iterable

import numpy as np
from numpy.typing import NDArray
from shapely import affinity
from shapely.geometry import MultiPolygon, Polygon, box
from shapely.geometry.base import BaseGeometry
from shapely.ops import unary_union

from borderkit.config import settings
from borderkit.units import Offset, Rect, RoundRect
from borderkit.utils.geometry import dedupe_consecutive, round_rect_points

if TYPE_CHECKING:
    from borderkit.graphics.outline import Outline


class PathOperation(enum.Enum):
    DIFFERENCE = "difference"
    INTERSECT = "intersect"
    UNION = "union"
    XOR = "xor"
    REVERSE_DIFFERENCE = "reverse_difference"


def _empty() -> BaseGeometry:
    return Polygon()


def _area_only(geom: BaseGeometry) -> BaseGeometry:
    """Keep only polygonal parts; overlays may emit stray lines or points."""
    if geom.is_empty:
        return _empty()
    if isinstance(geom, (Polygon, MultiPolygon)):
        return geom
    polys: list[Polygon] = []
    for part in getattr(geom, "geoms", []):
        if isinstance(part, Polygon) and not part.is_empty:
            polys.append(part)
        elif isinstance(part, MultiPolygon):
            polys.extend(part.geoms)
    if not polys:
        return _empty()
    return unary_union(polys)


class Path:
    """Mutable path buffer."""

    def __init__(self, geometry: BaseGeometry | None = None) -> None:
        self._geometry: BaseGeometry = _empty() if geometry is None else _area_only(geometry)

    # ── Contents ──

    @property
    def geometry(self) -> BaseGeometry:
        return self._geometry

    @property
    def is_empty(self) -> bool:
        return self._geometry.is_empty

    @property
    def bounds(self) -> Rect:
        """Bounding rectangle; all zeros for an empty path."""
        if self._geometry.is_empty:
            return Rect(0.0, 0.0, 0.0, 0.0)
        return Rect(*(float(v) for v in self._geometry.bounds))

    @property
    def area(self) -> float:
        return float(self._geometry.area)

    def reset(self) -> None:
        """Clear all contours, keeping the buffer for reuse."""
        self._geometry = _empty()

    def copy(self) -> Path:
        return Path(self._geometry)

    # ── Appending ──

    def _add(self, geom: BaseGeometry) -> None:
        geom = _area_only(geom)
        if geom.is_empty:
            return
        if self._geometry.is_empty:
            self._geometry = geom
        else:
            self._geometry = unary_union([self._geometry, geom])

    def add_rect(self, rect: Rect) -> None:
        if rect.is_empty:
            return
        self._add(box(rect.left, rect.top, rect.right, rect.bottom))

    def add_round_rect(self, round_rect: RoundRect, segments: int | None = None) -> None:
        rect = round_rect.rect
        if rect.is_empty:
            return
        if round_rect.is_rect:
            self.add_rect(rect)
            return
        pts = round_rect_points(
            rect.left,
            rect.top,
            rect.right,
            rect.bottom,
            round_rect.scaled_radii(),
            segments or settings.curve_segments,
        )
        self.add_polygon(pts)

    def add_polygon(self, points: NDArray[np.float64] | Iterable[tuple[float, float]]) -> None:
        """Append a closed ring. Self-intersecting rings are repaired; fewer than 3 points adds nothing."""
        pts = np.asarray(points if isinstance(points, np.ndarray) else list(points), dtype=float)
        if pts.ndim != 2 or len(pts) < 3:
            return
        pts = dedupe_consecutive(pts)
        if len(pts) < 3:
            return
        poly = Polygon(pts)
        if not poly.is_valid:
            poly = poly.buffer(0)
        if poly.is_empty or poly.area <= 0:
            return
        self._add(poly)

    def add_path(self, path: Path, offset: Offset = Offset()) -> None:
        geom = path.geometry
        if offset != Offset():
            geom = affinity.translate(geom, offset.x, offset.y)
        self._add(geom)

    def add_outline(self, outline: Outline) -> None:
        outline.add_to(self)

    # ── Transforms & boolean ops ──

    def shift(self, offset: Offset) -> None:
        """Translate every contour in place."""
        if self._geometry.is_empty:
            return
        self._geometry = affinity.translate(self._geometry, offset.x, offset.y)

    def op(self, path1: Path, path2: Path, operation: PathOperation) -> Path:
        """Store ``path1 <operation> path2`` in this path. Returns self."""
        a, b = path1.geometry, path2.geometry
        if operation is PathOperation.DIFFERENCE:
            result = a if b.is_empty else a.difference(b)
        elif operation is PathOperation.REVERSE_DIFFERENCE:
            result = b if a.is_empty else b.difference(a)
        elif operation is PathOperation.INTERSECT:
            result = a.intersection(b)
        elif operation is PathOperation.UNION:
            result = unary_union([a, b])
        elif operation is PathOperation.XOR:
            result = a.symmetric_difference(b)
        else:
            raise ValueError(f"Unsupported path operation: {operation}")
        self._geometry = _area_only(result)
        return self

    def __repr__(self) -> str:
        if self.is_empty:
            return "Path(empty)"
        return f"Path(bounds={self.bounds.as_tuple()}, area={self.area:.2f})"
