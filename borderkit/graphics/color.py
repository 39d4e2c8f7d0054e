"""RGBA color value."""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6})([0-9a-fA-F]{2})?$")


@dataclass(frozen=True)
class Color:
    """Color with float channels in [0, 1]."""

    red: float
    green: float
    blue: float
    alpha: float = 1.0

    BLACK: ClassVar[Color]
    WHITE: ClassVar[Color]
    RED: ClassVar[Color]
    GREEN: ClassVar[Color]
    BLUE: ClassVar[Color]
    GRAY: ClassVar[Color]
    TRANSPARENT: ClassVar[Color]

    def __post_init__(self) -> None:
        for name in ("red", "green", "blue", "alpha"):
            v = getattr(self, name)
            if not 0.0 <= v <= 1.0:
                raise ValueError(f"Color channel {name} out of range [0, 1]: {v}")

    @classmethod
    def from_hex(cls, text: str) -> Color:
        """Parse ``#RRGGBB`` or ``#RRGGBBAA``."""
        m = _HEX_RE.match(text.strip())
        if not m:
            raise ValueError(f"Invalid hex color: {text!r}")
        rgb = m.group(1)
        r, g, b = (int(rgb[i : i + 2], 16) / 255 for i in (0, 2, 4))
        a = int(m.group(2), 16) / 255 if m.group(2) else 1.0
        return cls(r, g, b, a)

    def to_hex(self) -> str:
        """``#RRGGBB`` (alpha is reported separately via :attr:`alpha`)."""
        return "#" + "".join(f"{round(c * 255):02X}" for c in (self.red, self.green, self.blue))

    def copy(self, alpha: float) -> Color:
        return Color(self.red, self.green, self.blue, alpha)


Color.BLACK = Color(0.0, 0.0, 0.0)
Color.WHITE = Color(1.0, 1.0, 1.0)
Color.RED = Color(1.0, 0.0, 0.0)
Color.GREEN = Color(0.0, 1.0, 0.0)
Color.BLUE = Color(0.0, 0.0, 1.0)
Color.GRAY = Color(0.5, 0.5, 0.5)
Color.TRANSPARENT = Color(0.0, 0.0, 0.0, 0.0)
