from __future__ import annotations

from typing import Optional

import numpy as np

_UINT32_RANGE = 0x100000000
_UINT32_MAX = 0xFFFFFFFF


def resolve_seed(seed: Optional[int]) -> int:
    """Return the 32-bit seed actually fed to the generator.

    ``None`` maps to 0 so that unseeded calls stay repeatable.
    """
    return 0 if seed is None else int(seed) & _UINT32_MAX


class SeedEngine:
    """
    Deterministic integer source for sampling.

    Wraps a Mersenne Twister (MT19937) seeded once with the reference
    ``init_genrand`` routine, which is what numpy's legacy ``RandomState``
    uses for a scalar seed. The bounded draw below is a pure function of the
    raw 32-bit stream, so sequences are identical across platforms:

      integer(low, high) with span = high - low
        span <= 0              -> low, no draw consumed
        span == 2**32 - 1      -> low + raw
        span + 1 power of two  -> low + (raw & span)
        otherwise              -> rejection below a multiple of span + 1, then modulo
    """

    def __init__(self, seed: Optional[int] = 0):
        self.seed = resolve_seed(seed)
        self._state = np.random.RandomState(self.seed)
        self.draws = 0

    def next_uint32(self) -> int:
        self.draws += 1
        # high is exclusive; a full-width range returns the raw generator output
        return int(self._state.randint(0, _UINT32_RANGE, dtype=np.uint32))

    def integer(self, low: int, high: int) -> int:
        low = int(low)
        span = int(high) - low
        if span <= 0:
            return low
        if span == _UINT32_MAX:
            return low + self.next_uint32()
        if span > _UINT32_MAX:
            raise ValueError(f"Range [{low}, {high}] exceeds 32 bits.")
        if ((span + 1) & span) == 0:
            return low + (self.next_uint32() & span)

        extended = span + 1
        maximum = extended * (_UINT32_RANGE // extended)
        while True:
            value = self.next_uint32()
            if value < maximum:
                return low + value % extended

    def __repr__(self) -> str:
        return f"SeedEngine(seed={self.seed}, draws={self.draws})"
