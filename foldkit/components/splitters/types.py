from __future__ import annotations

"""Splitter return contracts.

Splitters yield a single, stable partition shape so orchestrators never have
to guess between dict and tuple payloads.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class Partition:
    """A single train/test partition of a dataset.

    ``train`` keeps draw order; ``test`` keeps original order.
    """

    train: List[Any]
    test: List[Any]

    def as_dict(self) -> Dict[str, List[Any]]:
        return {"train": self.train, "test": self.test}

    def as_list(self) -> List[List[Any]]:
        return [self.train, self.test]


@dataclass(frozen=True)
class FoldSet:
    """Folds in draw order plus the rows no fold received."""

    folds: List[List[Any]]
    remainder: List[Any] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.folds)
