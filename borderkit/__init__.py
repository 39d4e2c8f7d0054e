"""borderkit: inner-stroke border decoration with cached outline geometry."""

from borderkit.foundation.border import Border, BorderGeometryCache, border
from borderkit.foundation.retention import RetainedStore, border_for
from borderkit.graphics.brush import LinearGradient, RadialGradient, SolidColor
from borderkit.graphics.canvas import RecordingCanvas
from borderkit.graphics.color import Color
from borderkit.graphics.path import Path, PathOperation
from borderkit.graphics.shapes import (
    CIRCLE_SHAPE,
    RECTANGLE_SHAPE,
    CutCornerShape,
    GenericShape,
    RoundedCornerShape,
    VectorPathShape,
)
from borderkit.units import Density, Dp, Size, dp

__all__ = [
    "border",
    "border_for",
    "Border",
    "BorderGeometryCache",
    "RetainedStore",
    "SolidColor",
    "LinearGradient",
    "RadialGradient",
    "RecordingCanvas",
    "Color",
    "Path",
    "PathOperation",
    "RECTANGLE_SHAPE",
    "CIRCLE_SHAPE",
    "RoundedCornerShape",
    "CutCornerShape",
    "GenericShape",
    "VectorPathShape",
    "Density",
    "Dp",
    "Size",
    "dp",
]
