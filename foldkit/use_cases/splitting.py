from __future__ import annotations

"""Split use-cases: train/test holdout and k-fold partitioning."""

from typing import Any, Dict, List, Mapping, Optional, Sequence, Union

from foldkit.components.splitters.splitters import HoldOutSplitter, KFoldSplitter
from foldkit.contracts.split_configs import KFoldConfig, TrainTestSplitConfig
from foldkit.core.config import resolve_config

SplitOutput = Union[Dict[str, List[Any]], List[List[Any]]]


def train_test_split(
    dataset: Optional[Sequence[Any]] = None,
    options: Union[TrainTestSplitConfig, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> SplitOutput:
    """Split a dataset into random train and test subsets.

    Example
    -------
    >>> train_test_split([20, 25, 10, 33, 50, 42, 19, 34, 90, 23], test_size=0.2, random_state=0)
    {'train': [50, 20, 34, 33, 10, 23, 90, 42], 'test': [25, 19]}

    Returns ``{"train": ..., "test": ...}`` or ``[train, test]`` when
    ``return_array`` is set. ``test`` is everything the sampler did not draw.
    """
    cfg = resolve_config(TrainTestSplitConfig, options, **overrides)
    part = HoldOutSplitter(cfg=cfg).partition([] if dataset is None else list(dataset))
    return part.as_list() if cfg.return_array else part.as_dict()


def cross_validation_split(
    dataset: Optional[Sequence[Any]] = None,
    options: Union[KFoldConfig, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> List[List[Any]]:
    """Split a dataset into ``folds`` disjoint folds of ``len(dataset) // folds`` rows.

    Example
    -------
    >>> cross_validation_split([20, 25, 10, 33, 50, 42, 19, 34, 90, 23], folds=2, random_state=0)
    [[50, 20, 34, 33, 10], [23, 90, 42, 19, 25]]
    """
    cfg = resolve_config(KFoldConfig, options, **overrides)
    return KFoldSplitter(cfg=cfg).folds([] if dataset is None else list(dataset))


kfolds = cross_validation_split
