from __future__ import annotations

"""Sampling without replacement.

A :class:`DrawPool` owns a private working copy of a dataset. Every draw picks
a uniform index over the pool's *current* size, removes that row and hands it
back, so the pool shrinks by one per draw and no row can be drawn twice.
Whatever is left when the caller stops drawing is available via
:meth:`DrawPool.remaining`.
"""

import math
from typing import Any, Iterable, List, Optional, Union

from foldkit.errors import InvalidConfigurationError
from foldkit.runtime.random.rng import SeedEngine

Count = Union[int, float]


class DrawPool:
    def __init__(self, rows: Iterable[Any]):
        self._rows: List[Any] = list(rows)

    def __len__(self) -> int:
        return len(self._rows)

    def draw(self, engine: SeedEngine) -> Any:
        if not self._rows:
            raise InvalidConfigurationError("Cannot draw from an empty pool.")
        index = engine.integer(0, len(self._rows) - 1)
        return self._rows.pop(index)

    def take(self, engine: SeedEngine, count: Count, into: Optional[List[Any]] = None) -> List[Any]:
        """Draw until the accumulator holds ``count`` rows and return it.

        ``count`` may be fractional; drawing continues while the accumulator
        is shorter than it. ``into`` lets a caller keep filling an existing
        list.
        """
        out: List[Any] = [] if into is None else into
        needed = max(0, math.ceil(count - len(out)))
        if needed > len(self._rows):
            raise InvalidConfigurationError(
                f"Requested {count} rows but only {len(out) + len(self._rows)} are available."
            )
        while len(out) < count:
            out.append(self.draw(engine))
        return out

    def remaining(self) -> List[Any]:
        """Undrawn rows, in their original relative order."""
        return list(self._rows)
