"""Paint: mutable fill parameters consumed by a Canvas."""

from __future__ import annotations

import enum
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Optional

from borderkit.graphics.color import Color

if TYPE_CHECKING:
    from borderkit.graphics.brush import Shader


class PaintStyle(enum.Enum):
    FILL = "fill"
    STROKE = "stroke"


@dataclass
class Paint:
    color: Color = Color.BLACK
    alpha: float = 1.0
    anti_alias: bool = True
    style: PaintStyle = PaintStyle.FILL
    # Set by gradient brushes; when present it replaces ``color``.
    shader: Optional[Shader] = None

    def snapshot(self) -> Paint:
        """Copy for recording; later mutation of this paint does not affect it."""
        return replace(self)
