from .association_rules import association_rule_learning, summarize_itemsets
from .cross_validation import cross_validate_score
from .splitting import cross_validation_split, kfolds, train_test_split
from .transactions import TransactionEncoding, ValuesMap, get_transactions
from .tuning import grid_search

__all__ = [
    "train_test_split",
    "cross_validation_split",
    "kfolds",
    "cross_validate_score",
    "grid_search",
    "get_transactions",
    "TransactionEncoding",
    "ValuesMap",
    "association_rule_learning",
    "summarize_itemsets",
]
