"""Host-side instance retention: one remembered object per element key.

The host owns element identity. It calls ``remember`` every frame while an
element is attached and ``forget`` when the element is removed; borderkit
only relies on getting the same instance back in between.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Hashable, TypeVar, Union

from borderkit.foundation.border import Border, BorderGeometryCache, border
from borderkit.graphics.brush import Brush
from borderkit.graphics.color import Color
from borderkit.graphics.shapes import Shape
from borderkit.models import BorderSpec
from borderkit.units import Dp

logger = logging.getLogger(__name__)

T = TypeVar("T")


class RetainedStore:
    def __init__(self) -> None:
        self._store: dict[Hashable, Any] = {}

    def remember(self, key: Hashable, factory: Callable[[], T]) -> T:
        if key not in self._store:
            self._store[key] = factory()
            logger.debug("Retained new %s for %r", type(self._store[key]).__name__, key)
        return self._store[key]

    def forget(self, key: Hashable) -> bool:
        """Retire the instance stored under ``key``. Returns False if there was none."""
        if key not in self._store:
            return False
        del self._store[key]
        logger.debug("Released instance for %r", key)
        return True

    def clear(self) -> None:
        self._store.clear()

    def __contains__(self, key: Hashable) -> bool:
        return key in self._store

    def __len__(self) -> int:
        return len(self._store)


def border_for(
    store: RetainedStore,
    key: Hashable,
    shape: Shape,
    width: Dp,
    brush: Union[Brush, Color],
) -> Border:
    """Border whose geometry cache is retained in ``store`` under ``key``."""
    spec = BorderSpec(shape=shape, width=width, brush=brush)
    cache = store.remember(key, lambda: BorderGeometryCache(spec.shape, spec.width, spec.brush))
    return border(spec.shape, spec.width, spec.brush, cache=cache)
