"""Validated border inputs."""

from __future__ import annotations

import math
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from borderkit.graphics.brush import Brush, SolidColor
from borderkit.graphics.color import Color
from borderkit.units import Dp


class BorderSpec(BaseModel):
    model_config = ConfigDict(frozen=True)

    shape: Any = Field(..., description="Shape whose outline the border follows")
    width: Any = Field(..., description="Stroke width; Dp.HAIRLINE for a 1px line")
    brush: Any = Field(..., description="Brush the border region is filled with")

    @field_validator("shape")
    @classmethod
    def _check_shape(cls, v: Any) -> Any:
        if not callable(getattr(v, "create_outline", None)):
            raise ValueError(f"{type(v).__name__} has no create_outline(size, density)")
        return v

    @field_validator("width", mode="before")
    @classmethod
    def _check_width(cls, v: Any) -> Any:
        if not isinstance(v, Dp):
            raise ValueError(f"Border width must be Dp, got {type(v).__name__}")
        if not math.isfinite(v.value) or v.value < 0:
            raise ValueError(f"Border width must be finite and non-negative, got {v!r}")
        return v

    @field_validator("brush", mode="before")
    @classmethod
    def _wrap_color(cls, v: Any) -> Any:
        if isinstance(v, Color):
            return SolidColor(v)
        if not isinstance(v, Brush):
            raise ValueError(f"Border brush must be a Brush or Color, got {type(v).__name__}")
        return v
