from __future__ import annotations

import logging
from dataclasses import dataclass
from itertools import chain
from typing import Any, Iterator, List, Sequence

from foldkit.contracts.split_configs import KFoldConfig, TrainTestSplitConfig
from foldkit.errors import InvalidConfigurationError
from foldkit.runtime.random.rng import SeedEngine

from ..interfaces import Splitter
from .sampler import DrawPool
from .types import FoldSet, Partition

logger = logging.getLogger(__name__)


def train_count_for(cfg: TrainTestSplitConfig, n: int) -> float:
    """Number of rows that go to the train side.

    ``train_size`` takes precedence; otherwise ``1 - test_size``. Truncated
    toward zero unless ``parse_int_train_size`` is off.
    """
    if cfg.train_size is not None:
        length = cfg.train_size * n
    else:
        length = (1 - cfg.test_size) * n
    return int(length) if cfg.parse_int_train_size else length


@dataclass
class HoldOutSplitter(Splitter):
    cfg: TrainTestSplitConfig

    def partition(self, dataset: Sequence[Any]) -> Partition:
        n = len(dataset)
        train_count = train_count_for(self.cfg, n)
        if train_count > n:
            raise InvalidConfigurationError(
                f"train count {train_count} exceeds dataset length {n}"
            )

        engine = SeedEngine(self.cfg.random_state)
        pool = DrawPool(dataset)
        train = pool.take(engine, train_count)
        test = pool.remaining()
        logger.debug(
            "holdout split: n=%d train=%d test=%d seed=%d", n, len(train), len(test), engine.seed
        )
        return Partition(train=train, test=test)

    def split(self, dataset: Sequence[Any]) -> Iterator[Partition]:
        yield self.partition(dataset)


@dataclass
class KFoldSplitter(Splitter):
    cfg: KFoldConfig

    def fold_set(self, dataset: Sequence[Any]) -> FoldSet:
        """Draw ``folds`` equal-size folds from one shared pool.

        A single engine, seeded once, drives every draw, so fold order and
        within-fold order are fixed by the seed and the input length.
        ``n % folds`` rows are never drawn and end up in ``remainder``.
        """
        folds = self.cfg.folds
        if folds <= 0:
            raise InvalidConfigurationError(f"folds must be > 0; got {folds}")

        n = len(dataset)
        foldsize = n // folds
        engine = SeedEngine(self.cfg.random_state)
        pool = DrawPool(dataset)

        out: List[List[Any]] = []
        for _ in range(folds):
            out.append(pool.take(engine, foldsize))

        remainder = pool.remaining()
        if remainder:
            logger.debug("k-fold split dropped %d remainder row(s) (n=%d, folds=%d)", len(remainder), n, folds)
        return FoldSet(folds=out, remainder=remainder)

    def folds(self, dataset: Sequence[Any]) -> List[List[Any]]:
        return self.fold_set(dataset).folds

    def split(self, dataset: Sequence[Any]) -> Iterator[Partition]:
        """Rotate the folds: each one is the test side once, the others train."""
        folds = self.folds(dataset)
        for i, held_out in enumerate(folds):
            train = list(chain.from_iterable(f for j, f in enumerate(folds) if j != i))
            yield Partition(train=train, test=list(held_out))
