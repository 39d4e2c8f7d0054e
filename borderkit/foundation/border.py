"""Border: a draw decoration that paints an inner stroke around any Shape.

Shapes only know how to produce a filled outline, so the stroke region is
built as ``outer outline - inner outline``, where the inner outline is the
same shape laid out at ``size - 2 * thickness`` and shifted by
``(thickness, thickness)``.

BorderGeometryCache keeps the three paths alive across frames and rebuilds
only what changed:

    shape / parent size change -> outer + diff rebuilt
    width change               -> diff rebuilt, outer reused
    brush change               -> nothing rebuilt, only the paint is re-bound
"""

from __future__ import annotations

import logging
import time
from typing import Callable, Generic, TypeVar, Union

from borderkit.graphics.brush import Brush
from borderkit.graphics.canvas import Canvas
from borderkit.graphics.color import Color
from borderkit.graphics.paint import Paint
from borderkit.graphics.path import Path, PathOperation
from borderkit.graphics.shapes import Shape
from borderkit.models import BorderSpec
from borderkit.units import Density, Dp, Offset, Size

logger = logging.getLogger(__name__)

T = TypeVar("T")

_UNSET = object()

# Hairline borders are always exactly one device pixel, whatever the density.
HAIRLINE_PX = 1.0


class Tracked(Generic[T]):
    """A remembered value that reports whether an assignment changed it."""

    def __init__(self, value: T = _UNSET) -> None:  # type: ignore[assignment]
        self._value = value

    @property
    def is_set(self) -> bool:
        return self._value is not _UNSET

    @property
    def value(self) -> T:
        if self._value is _UNSET:
            raise ValueError("Tracked value has not been set")
        return self._value  # type: ignore[return-value]

    def update(self, value: T) -> bool:
        if self._value is not _UNSET and self._value == value:
            return False
        self._value = value
        return True


class BorderGeometryCache:
    """Per-decoration geometry state. Owned by exactly one Border for its attached lifetime."""

    def __init__(self, shape: Shape, width: Dp, brush: Brush) -> None:
        self.outer_path = Path()
        self.inner_path = Path()
        self.diff_path = Path()
        self.paint = Paint(anti_alias=True)

        self.outer_valid = False
        self.diff_valid = False

        self._shape: Tracked[Shape] = Tracked(shape)
        self._width: Tracked[Dp] = Tracked(width)
        self._parent_size: Tracked[Size] = Tracked()
        self.brush = brush

        # Recompute counters
        self.outer_computations = 0
        self.diff_computations = 0

    # ── Inputs ──

    @property
    def shape(self) -> Shape:
        return self._shape.value

    @property
    def width(self) -> Dp:
        return self._width.value

    @property
    def parent_size(self) -> Size | None:
        return self._parent_size.value if self._parent_size.is_set else None

    def update_shape(self, shape: Shape) -> bool:
        if self._shape.update(shape):
            self.outer_valid = False
            self.diff_valid = False
            return True
        return False

    def update_width(self, width: Dp) -> bool:
        if self._width.update(width):
            self.diff_valid = False
            return True
        return False

    def update_parent_size(self, size: Size) -> bool:
        if self._parent_size.update(size):
            self.outer_valid = False
            self.diff_valid = False
            return True
        return False

    def update_brush(self, brush: Brush) -> None:
        self.brush = brush

    def update(self, shape: Shape, width: Dp, brush: Brush) -> None:
        self.update_brush(brush)
        self.update_shape(shape)
        self.update_width(width)

    # ── Geometry ──

    def resolve_thickness(self, density: Density) -> float:
        """Stroke thickness in device pixels."""
        width = self.width
        if width.is_hairline:
            return HAIRLINE_PX
        return width.to_px(density)

    def ensure_geometry(self, density: Density, parent_size: Size) -> Path:
        """Bring outer and diff paths up to date for ``parent_size``. Returns the diff path."""
        self.update_parent_size(parent_size)

        if not self.outer_valid:
            t0 = time.perf_counter()
            self.outer_path.reset()
            self.outer_path.add_outline(self.shape.create_outline(parent_size, density))
            self.outer_valid = True
            self.outer_computations += 1
            logger.debug(
                "Outer outline rebuilt for %s at %gx%g in %.2fms",
                type(self.shape).__name__,
                parent_size.width,
                parent_size.height,
                (time.perf_counter() - t0) * 1000,
            )

        if not self.diff_valid:
            t0 = time.perf_counter()
            thickness = self.resolve_thickness(density)
            inset_size = parent_size.shrink(thickness * 2)

            # Lay the shape out smaller, then move it back to the centre
            self.inner_path.reset()
            self.inner_path.add_outline(self.shape.create_outline(inset_size, density))
            self.inner_path.shift(Offset(thickness, thickness))

            self.diff_path.op(self.outer_path, self.inner_path, PathOperation.DIFFERENCE)
            self.diff_valid = True
            self.diff_computations += 1
            logger.debug(
                "Border ring rebuilt: thickness=%gpx inner=%gx%g in %.2fms",
                thickness,
                inset_size.width,
                inset_size.height,
                (time.perf_counter() - t0) * 1000,
            )

        return self.diff_path

    def draw(
        self,
        density: Density,
        parent_size: Size,
        draw_content: Callable[[], None],
        canvas: Canvas,
    ) -> None:
        """Paint ``draw_content`` and then the border ring on top of it."""
        diff = self.ensure_geometry(density, parent_size)
        self.brush.apply_to(self.paint)
        draw_content()
        canvas.draw_path(diff, self.paint)


class Border:
    """Draw decoration returned by :func:`border`; delegates to its cache."""

    def __init__(self, cache: BorderGeometryCache) -> None:
        self.cache = cache

    def draw(
        self,
        density: Density,
        size: Size,
        draw_content: Callable[[], None],
        canvas: Canvas,
    ) -> None:
        self.cache.draw(density, size, draw_content, canvas)

    def __repr__(self) -> str:
        return f"Border(shape={self.cache.shape!r}, width={self.cache.width!r})"


def border(
    shape: Shape,
    width: Dp,
    brush: Union[Brush, Color],
    *,
    cache: BorderGeometryCache | None = None,
) -> Border:
    """Border drawn as an inner stroke of ``width`` following ``shape``.

    Pass the cache retained for this element (see ``retention``) to keep
    geometry across frames; without one a fresh cache is created.
    """
    spec = BorderSpec(shape=shape, width=width, brush=brush)
    if cache is None:
        cache = BorderGeometryCache(spec.shape, spec.width, spec.brush)
    else:
        cache.update(spec.shape, spec.width, spec.brush)
    return Border(cache)
