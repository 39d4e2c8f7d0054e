"""Canvas: the draw target a decoration paints into.

RecordingCanvas keeps an immutable log of draw commands, which is enough for
tests and for exporting a frame as SVG.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol

from shapely.geometry.base import BaseGeometry

from borderkit.graphics.paint import Paint
from borderkit.graphics.path import Path
from borderkit.svg import geometry_to_svg_d, serialize_svg, shader_to_svg_def
from borderkit.units import Size


class Canvas(Protocol):
    def draw_path(self, path: Path, paint: Paint) -> None: ...


@dataclass(frozen=True)
class DrawCommand:
    # Shapely geometries are immutable, so holding the reference is a snapshot.
    geometry: BaseGeometry
    paint: Paint


@dataclass
class RecordingCanvas:
    commands: list[DrawCommand] = field(default_factory=list)

    def draw_path(self, path: Path, paint: Paint) -> None:
        self.commands.append(DrawCommand(path.geometry, paint.snapshot()))

    def clear(self) -> None:
        self.commands.clear()

    @property
    def last(self) -> DrawCommand:
        if not self.commands:
            raise ValueError("Nothing has been drawn")
        return self.commands[-1]

    def to_svg(self, size: Size, title: str = "") -> str:
        elements = []
        defs = []
        for i, cmd in enumerate(self.commands):
            d = geometry_to_svg_d(cmd.geometry)
            if not d:
                continue
            paint = cmd.paint
            if paint.shader is not None:
                gradient_id = f"g{i}"
                defs.append(shader_to_svg_def(paint.shader, gradient_id))
                fill = f"url(#{gradient_id})"
                opacity = paint.alpha
            else:
                fill = paint.color.to_hex()
                opacity = paint.alpha * paint.color.alpha
            elements.append({
                "tag": "path",
                "d": d,
                "fill": fill,
                "fill-opacity": f"{opacity:g}",
                "fill-rule": "evenodd",
                "shape-rendering": "geometricPrecision" if paint.anti_alias else "crispEdges",
            })
        return serialize_svg(elements, size.width, size.height, title=title, defs=defs)
