"""Outline: the closed silhouette a Shape produces for a given size."""

from __future__ import annotations

from dataclasses import dataclass

from borderkit.graphics.path import Path
from borderkit.units import Rect, RoundRect


class Outline:
    """Base outline. Subclasses know how to append themselves to a Path."""

    @property
    def bounds(self) -> Rect:
        raise NotImplementedError

    def add_to(self, path: Path) -> None:
        raise NotImplementedError


@dataclass(frozen=True)
class RectangleOutline(Outline):
    rect: Rect

    @property
    def bounds(self) -> Rect:
        return self.rect

    def add_to(self, path: Path) -> None:
        path.add_rect(self.rect)


@dataclass(frozen=True)
class RoundedOutline(Outline):
    round_rect: RoundRect

    @property
    def bounds(self) -> Rect:
        return self.round_rect.rect

    def add_to(self, path: Path) -> None:
        path.add_round_rect(self.round_rect)


@dataclass(frozen=True, eq=False)
class GenericOutline(Outline):
    path: Path

    @property
    def bounds(self) -> Rect:
        return self.path.bounds

    def add_to(self, path: Path) -> None:
        path.add_path(self.path)


EMPTY_OUTLINE = RectangleOutline(Rect(0.0, 0.0, 0.0, 0.0))
