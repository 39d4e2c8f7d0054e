"""Write SVG markup for recorded paths, for inspecting rendered borders."""

from __future__ import annotations

from typing import Any

from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.base import BaseGeometry

from borderkit.config import settings
from borderkit.graphics.brush import LinearGradientShader, RadialGradientShader, Shader


def _ring_d(coords, precision: int) -> str:
    pts = list(coords)
    if len(pts) > 1 and pts[0] == pts[-1]:
        pts = pts[:-1]
    if not pts:
        return ""
    head, *rest = pts
    cmds = [f"M {head[0]:.{precision}f},{head[1]:.{precision}f}"]
    cmds.extend(f"L {x:.{precision}f},{y:.{precision}f}" for x, y in rest)
    cmds.append("Z")
    return " ".join(cmds)


def geometry_to_svg_d(geom: BaseGeometry, precision: int | None = None) -> str:
    """Exterior and interior rings as closed sub-paths. Render with ``fill-rule="evenodd"``."""
    if precision is None:
        precision = settings.svg_precision
    if geom.is_empty:
        return ""
    if isinstance(geom, Polygon):
        polys = [geom]
    elif isinstance(geom, MultiPolygon):
        polys = list(geom.geoms)
    else:
        polys = [g for g in getattr(geom, "geoms", []) if isinstance(g, Polygon)]

    parts: list[str] = []
    for poly in polys:
        parts.append(_ring_d(poly.exterior.coords, precision))
        parts.extend(_ring_d(ring.coords, precision) for ring in poly.interiors)
    return " ".join(p for p in parts if p)


def path_to_svg_d(path, precision: int | None = None) -> str:
    return geometry_to_svg_d(path.geometry, precision)


def shader_to_svg_def(shader: Shader, gradient_id: str) -> str:
    """Gradient element for a <defs> block. Coordinates are user-space pixels."""
    stops = "".join(
        f'<stop offset="{offset:g}" stop-color="{color.to_hex()}" stop-opacity="{color.alpha:g}"/>'
        for color, offset in zip(shader.colors, shader.stops)
    )
    common = f'id="{gradient_id}" gradientUnits="userSpaceOnUse" spreadMethod="{shader.tile_mode.value}"'
    if isinstance(shader, LinearGradientShader):
        return (
            f'<linearGradient {common} x1="{shader.start.x:g}" y1="{shader.start.y:g}"'
            f' x2="{shader.end.x:g}" y2="{shader.end.y:g}">{stops}</linearGradient>'
        )
    if isinstance(shader, RadialGradientShader):
        return (
            f'<radialGradient {common} cx="{shader.center.x:g}" cy="{shader.center.y:g}"'
            f' r="{shader.radius:g}">{stops}</radialGradient>'
        )
    raise ValueError(f"Unsupported shader: {type(shader).__name__}")


def serialize_svg(
    elements: list[dict[str, Any]],
    canvas_w: float = 24.0,
    canvas_h: float = 24.0,
    title: str = "",
    defs: list[str] | None = None,
) -> str:
    """Generate SVG markup from element definitions."""
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg viewBox="0 0 {canvas_w:g} {canvas_h:g}" width="{canvas_w:g}" height="{canvas_h:g}"'
        f' xmlns="http://www.w3.org/2000/svg">',
    ]

    if title:
        lines.append(f"  <title>{title}</title>")

    if defs:
        lines.append("  <defs>")
        for d in defs:
            lines.append(f"    {d}")
        lines.append("  </defs>")

    for elem in elements:
        tag = elem.get("tag", "path")
        attrs = {k: v for k, v in elem.items() if k != "tag"}
        attr_str = " ".join(f'{k}="{v}"' for k, v in attrs.items())
        lines.append(f"  <{tag} {attr_str} />")

    lines.append("</svg>")
    return "\n".join(lines)
