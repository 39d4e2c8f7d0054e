"""Leaf-node geometry helpers. No graphics imports."""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


def arc_points(
    cx: float,
    cy: float,
    radius: float,
    start_deg: float,
    sweep_deg: float,
    segments: int,
) -> NDArray[np.float64]:
    """Sample a circular arc, endpoints included. Angles in degrees, y-down (screen) axes."""
    if radius <= 0:
        return np.array([[cx, cy]])
    theta = np.radians(np.linspace(start_deg, start_deg + sweep_deg, max(1, segments) + 1))
    return np.column_stack([cx + radius * np.cos(theta), cy + radius * np.sin(theta)])


def round_rect_points(
    left: float,
    top: float,
    right: float,
    bottom: float,
    radii: tuple[float, float, float, float],
    segments: int,
) -> NDArray[np.float64]:
    """Ring of a rounded rectangle, clockwise on screen starting at the top-left arc.

    ``radii`` is (top_left, top_right, bottom_right, bottom_left) and must already
    be scaled to fit.
    """
    tl, tr, br, bl = radii
    parts = [
        arc_points(left + tl, top + tl, tl, 180.0, 90.0, segments),
        arc_points(right - tr, top + tr, tr, 270.0, 90.0, segments),
        arc_points(right - br, bottom - br, br, 0.0, 90.0, segments),
        arc_points(left + bl, bottom - bl, bl, 90.0, 90.0, segments),
    ]
    return dedupe_consecutive(np.vstack(parts))


def dedupe_consecutive(points: NDArray[np.float64], tol: float = 1e-9) -> NDArray[np.float64]:
    """Drop points equal to their predecessor (and a closing duplicate of the first)."""
    if len(points) < 2:
        return points
    keep = np.ones(len(points), dtype=bool)
    keep[1:] = np.any(np.abs(np.diff(points, axis=0)) > tol, axis=1)
    out = points[keep]
    if len(out) > 1 and np.all(np.abs(out[0] - out[-1]) <= tol):
        out = out[:-1]
    return out
