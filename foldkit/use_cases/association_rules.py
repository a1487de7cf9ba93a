from __future__ import annotations

"""Association rule learning.

Frequent itemsets are mined with FP-Growth (mlxtend) on a one-hot encoding of
the transactions. The summary post-processing labels each itemset through the
values map, adds ``support_percent``, keeps itemsets of two or more items and
ranks them by descending support.
"""

import asyncio
import logging
from typing import Any, List, Mapping, Optional, Sequence, Union

import pandas as pd
from mlxtend.frequent_patterns import fpgrowth
from mlxtend.preprocessing import TransactionEncoder

from foldkit.components.interfaces import ItemsetMiner
from foldkit.contracts.results import Itemset, ItemsetSummary
from foldkit.contracts.rule_configs import RuleLearningConfig
from foldkit.core.config import resolve_config
from foldkit.errors import InvalidConfigurationError, RuleLearningError

logger = logging.getLogger(__name__)

# Itemsets with fewer items than this never make it into a summary.
SUMMARY_MIN_ITEMS = 2


def fpgrowth_miner(onehot: pd.DataFrame, *, min_support: float) -> pd.DataFrame:
    return fpgrowth(onehot, min_support=min_support, use_colnames=True)


def _token_key(token: str):
    return (0, int(token), "") if token.isdigit() else (1, 0, token)


def _normalize_transactions(transactions: Sequence[Sequence[Any]]) -> List[List[str]]:
    if isinstance(transactions, (str, bytes)):
        raise InvalidConfigurationError("transactions must be a sequence of token lists")
    out: List[List[str]] = []
    for i, tx in enumerate(transactions):
        if isinstance(tx, (str, bytes)) or not isinstance(tx, Sequence):
            raise InvalidConfigurationError(f"transaction {i} must be a list of tokens; got {tx!r}")
        out.append(list(dict.fromkeys(str(t) for t in tx)))
    return out


def mine_itemsets(
    transactions: List[List[str]],
    support: float,
    miner: ItemsetMiner = fpgrowth_miner,
) -> List[Itemset]:
    """Run the miner and convert its frame to itemsets with absolute support counts."""
    n = len(transactions)
    if n == 0 or not any(transactions):
        return []

    te = TransactionEncoder()
    onehot = pd.DataFrame(te.fit(transactions).transform(transactions), columns=te.columns_)
    frame = miner(onehot, min_support=support)

    itemsets: List[Itemset] = []
    for frac, items in zip(frame["support"], frame["itemsets"]):
        itemsets.append(
            Itemset(
                items=sorted((str(t) for t in items), key=_token_key),
                support=int(round(float(frac) * n)),
            )
        )
    return itemsets


def _label_for(values_map: Any, token: str) -> Any:
    if values_map is None:
        return token
    if hasattr(values_map, "label"):
        return values_map.label(token)
    if isinstance(values_map, Mapping):
        return values_map.get(token, token)
    raise InvalidConfigurationError(
        f"values_map must be a ValuesMap or a mapping; got {type(values_map).__name__}"
    )


def summarize_itemsets(
    itemsets: Sequence[Itemset],
    transaction_count: int,
    values_map: Optional[Any] = None,
) -> List[ItemsetSummary]:
    """Label, filter and rank mined itemsets.

    ``support_percent`` is the support count over ``transaction_count``. The
    result is ordered by descending raw support; ties keep mining order.
    """
    summaries: List[ItemsetSummary] = []
    for itemset in itemsets:
        if len(itemset.items) < SUMMARY_MIN_ITEMS:
            continue
        summaries.append(
            ItemsetSummary(
                items=list(itemset.items),
                items_labels=[_label_for(values_map, t) for t in itemset.items],
                support=itemset.support,
                support_percent=(itemset.support / transaction_count) if transaction_count else 0.0,
            )
        )
    summaries.sort(key=lambda s: s.support, reverse=True)
    return summaries


async def association_rule_learning(
    transactions: Sequence[Sequence[Any]],
    options: Union[RuleLearningConfig, Mapping[str, Any], None] = None,
    *,
    miner: ItemsetMiner = fpgrowth_miner,
    **overrides: Any,
) -> Union[List[ItemsetSummary], List[Itemset]]:
    """Mine frequent itemsets and optionally summarize them.

    Returns the summary when ``summary`` is set, otherwise the raw itemsets.
    ``min_length`` is accepted but not applied; summaries always require two
    items.

    Raises
    ------
    RuleLearningError
        For any failure, whether in configuration, encoding or mining. The
        original exception is chained.
    """
    try:
        cfg = resolve_config(RuleLearningConfig, options, **overrides)
        rows = _normalize_transactions(transactions)
        itemsets = await asyncio.to_thread(mine_itemsets, rows, cfg.support, miner)
        logger.debug("mined %d itemset(s) from %d transaction(s)", len(itemsets), len(rows))
        if not cfg.summary:
            return itemsets
        return summarize_itemsets(itemsets, len(rows), cfg.values_map)
    except RuleLearningError:
        raise
    except Exception as e:
        raise RuleLearningError(f"association rule learning failed: {type(e).__name__}: {e}") from e
