from __future__ import annotations

import logging
from typing import Any, List, Mapping, Union

from foldkit.components.evaluation.confusion import ConfusionMatrix
from foldkit.components.interfaces import TrainablePredictor
from foldkit.components.splitters.splitters import KFoldSplitter
from foldkit.contracts.eval_configs import CrossValidateConfig
from foldkit.contracts.split_configs import KFoldConfig
from foldkit.core.config import resolve_config
from foldkit.core.shapes import as_matrix
from foldkit.errors import InvalidConfigurationError
from foldkit.io.dataset import DataSet

logger = logging.getLogger(__name__)


def _score_fold(
    classifier: TrainablePredictor,
    fold: List[Any],
    cfg: CrossValidateConfig,
    x_test: List[List[Any]],
    actuals: List[Any],
) -> float:
    training = DataSet(fold)
    x_train = training.column_matrix(cfg.dependent_features)
    y_train = training.column_matrix(cfg.independent_features)
    x_train_matrix = as_matrix(x_train) if cfg.use_train_x_matrix else x_train
    y_train_matrix = as_matrix(y_train) if cfg.use_train_y_matrix else y_train

    classifier.train(x_train_matrix, y_train_matrix)
    estimates = classifier.predict(x_test)
    return ConfusionMatrix.from_labels(actuals, estimates).get_accuracy()


def cross_validate_score(
    options: Union[CrossValidateConfig, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> List[float]:
    """Train ``classifier`` on every fold of ``dataset`` and score it on ``testingset``.

    The held-out set is built once and reused for every fold; the folds are
    alternative training subsets, not validation slices. Returns one accuracy
    per fold, in fold order.

    Raises
    ------
    NotImplementedError
        If ``regression`` is set.
    InvalidConfigurationError
        On bad options or unknown columns, on an empty ``testingset``, or when
        ``dataset`` has fewer rows than folds.
    """
    cfg = resolve_config(CrossValidateConfig, options, **overrides)
    if cfg.regression:
        raise NotImplementedError("Regression cross-validation is not supported yet.")
    if len(cfg.dataset) < cfg.folds:
        raise InvalidConfigurationError(
            f"dataset has {len(cfg.dataset)} rows; cannot fill {cfg.folds} folds"
        )
    if not cfg.testingset:
        raise InvalidConfigurationError("testingset is empty; there is nothing to score against")

    testing = DataSet(cfg.testingset)
    y_test = testing.column_matrix(cfg.independent_features)
    x_test = testing.column_matrix(cfg.dependent_features)
    # taken row by row so mixed-type label columns keep their python types
    actuals = [row[0] for row in y_test]

    folds = KFoldSplitter(
        cfg=KFoldConfig(folds=cfg.folds, random_state=cfg.random_state)
    ).folds(cfg.dataset)

    scores: List[float] = []
    for fold_id, fold in enumerate(folds, start=1):
        acc = _score_fold(cfg.classifier, fold, cfg, x_test, actuals)
        logger.debug("fold %d/%d: n_train=%d accuracy=%.4f", fold_id, len(folds), len(fold), acc)
        scores.append(float(acc))
    return scores
