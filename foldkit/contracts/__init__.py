"""Configuration and result contracts.

Pydantic models used to validate options once, at the call boundary.

Keep module imports explicit in most of the codebase:
    from foldkit.contracts.split_configs import KFoldConfig
The names re-exported here are a convenience for callers that prefer a single
namespace.
"""

from .eval_configs import CrossValidateConfig
from .results import Itemset, ItemsetSummary, ResultModel
from .rule_configs import RuleLearningConfig, TransactionConfig
from .split_configs import KFoldConfig, TrainTestSplitConfig
from .tuning_configs import GridSearchConfig

__all__ = [
    "TrainTestSplitConfig",
    "KFoldConfig",
    "CrossValidateConfig",
    "GridSearchConfig",
    "TransactionConfig",
    "RuleLearningConfig",
    "ResultModel",
    "Itemset",
    "ItemsetSummary",
]
