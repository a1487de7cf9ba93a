"""Public foldkit API.

This module is the **stable public surface**. Prefer importing from here
instead of reaching into internal subpackages:

    from foldkit.api import train_test_split, cross_validate_score

The underlying implementations live under :mod:`foldkit.use_cases`.
"""

from __future__ import annotations

from foldkit.use_cases.association_rules import association_rule_learning
from foldkit.use_cases.cross_validation import cross_validate_score
from foldkit.use_cases.splitting import cross_validation_split, kfolds, train_test_split
from foldkit.use_cases.transactions import TransactionEncoding, ValuesMap, get_transactions
from foldkit.use_cases.tuning import grid_search

# Non-use-case helpers that are still part of the stable public surface.
from foldkit.components.evaluation.confusion import ConfusionMatrix
from foldkit.components.interfaces import TrainablePredictor
from foldkit.core.logging import enable_console_logging
from foldkit.errors import FoldkitError, InvalidConfigurationError, RuleLearningError
from foldkit.io.dataset import DataSet, load_csv

# camelCase aliases for existing callers.
getTransactions = get_transactions
assocationRuleLearning = association_rule_learning

__all__ = [
    "train_test_split",
    "cross_validation_split",
    "kfolds",
    "cross_validate_score",
    "grid_search",
    "get_transactions",
    "getTransactions",
    "association_rule_learning",
    "assocationRuleLearning",
    "TransactionEncoding",
    "ValuesMap",
    "ConfusionMatrix",
    "TrainablePredictor",
    "DataSet",
    "load_csv",
    "enable_console_logging",
    "FoldkitError",
    "InvalidConfigurationError",
    "RuleLearningError",
]
