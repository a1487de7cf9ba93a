from __future__ import annotations
from typing import Any, Iterator, Protocol, Sequence, runtime_checkable

import pandas as pd

from foldkit.components.splitters.types import Partition


@runtime_checkable
class TrainablePredictor(Protocol):
    """Capability the cross-validator is generic over.

    Concrete learners live outside this package; anything with these two
    methods can be scored.
    """

    def train(self, x: Any, y: Any) -> None:
        ...

    def predict(self, x: Any) -> Sequence[Any]:
        ...


class Splitter(Protocol):
    def split(self, dataset: Sequence[Any]) -> Iterator[Partition]:
        """Yield train/test partitions of ``dataset`` without mutating it."""
        ...


class ItemsetMiner(Protocol):
    def __call__(self, onehot: pd.DataFrame, *, min_support: float) -> pd.DataFrame:
        """Return a frame with ``support`` (fraction) and ``itemsets`` (frozensets)."""
        ...
