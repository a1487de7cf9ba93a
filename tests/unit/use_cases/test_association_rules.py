"""
Unit tests for association rule learning.

Coroutines are driven with asyncio.run so no async plugin is needed.
"""
import asyncio

import pandas as pd
import pytest

from foldkit.api import assocationRuleLearning, association_rule_learning, get_transactions
from foldkit.contracts.results import Itemset, ItemsetSummary
from foldkit.errors import RuleLearningError
from foldkit.use_cases.association_rules import mine_itemsets, summarize_itemsets


@pytest.fixture
def transactions():
    # counts: 0:4 1:3 2:3 3:1, {0,1}:3 {0,2}:3 {1,2}:2 {0,1,2}:2
    return [
        ['0', '1', '2'],
        ['0', '1'],
        ['0', '2'],
        ['0', '1', '2'],
        ['3'],
    ]


def run(coro):
    return asyncio.run(coro)


class TestMineItemsets:
    def test_absolute_support_counts(self, transactions):
        itemsets = mine_itemsets(transactions, 0.3)

        found = {tuple(i.items): i.support for i in itemsets}
        assert found == {
            ('0',): 4,
            ('1',): 3,
            ('2',): 3,
            ('0', '1'): 3,
            ('0', '2'): 3,
            ('1', '2'): 2,
            ('0', '1', '2'): 2,
        }

    def test_no_transactions(self):
        assert mine_itemsets([], 0.4) == []
        assert mine_itemsets([[], []], 0.4) == []

    def test_custom_miner(self, transactions):
        def miner(onehot, *, min_support):
            assert list(onehot.columns) == ['0', '1', '2', '3']
            return pd.DataFrame({'support': [0.4], 'itemsets': [frozenset({'2', '1'})]})

        assert mine_itemsets(transactions, 0.5, miner) == [Itemset(items=['1', '2'], support=2)]


class TestSummarizeItemsets:
    def test_filters_singletons_and_sorts(self):
        itemsets = [
            Itemset(items=['0'], support=9),
            Itemset(items=['0', '1'], support=2),
            Itemset(items=['1', '2'], support=5),
        ]

        summary = summarize_itemsets(itemsets, 10, {'0': 'a', '1': 'b', '2': 'c'})

        assert [s.items for s in summary] == [['1', '2'], ['0', '1']]
        assert summary[0].items_labels == ['b', 'c']
        assert summary[0].support_percent == pytest.approx(0.5)


class TestAssociationRuleLearning:
    """Test suite for the async rule-learning use-case."""

    def test_summary(self, transactions):
        summary = run(association_rule_learning(transactions, support=0.3))

        assert all(isinstance(s, ItemsetSummary) for s in summary)
        assert all(len(s.items) >= 2 for s in summary)
        supports = [s.support for s in summary]
        assert supports == sorted(supports, reverse=True)
        assert {tuple(s.items) for s in summary} == {('0', '1'), ('0', '2'), ('1', '2'), ('0', '1', '2')}
        top = summary[0]
        assert top.support == 3
        assert top.support_percent == pytest.approx(0.6)

    def test_raw_result(self, transactions):
        raw = run(association_rule_learning(transactions, {'support': 0.3, 'summary': False}))

        assert all(isinstance(i, Itemset) for i in raw)
        assert len(raw) == 7

    def test_min_length_is_not_applied(self, transactions):
        summary = run(association_rule_learning(transactions, support=0.3, min_length=3))

        assert any(len(s.items) == 2 for s in summary)

    def test_labels_from_encoding(self):
        rows = [['bread', 'milk'], ['bread', 'milk', 'eggs'], ['bread', 'eggs'], ['milk']]
        enc = get_transactions(rows)

        summary = run(
            assocationRuleLearning(enc.transactions, {'support': 0.5, 'valuesMap': enc.values_map})
        )

        assert sorted(s.items_labels for s in summary) == [['bread', 'eggs'], ['bread', 'milk']]
        assert [s.support for s in summary] == [2, 2]

    def test_miner_failure_surfaces_as_rule_learning_error(self, transactions):
        def broken(onehot, *, min_support):
            raise RuntimeError('too many itemsets')

        with pytest.raises(RuleLearningError, match='too many itemsets') as exc_info:
            run(association_rule_learning(transactions, miner=broken))

        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_bad_configuration_surfaces_as_rule_learning_error(self, transactions):
        with pytest.raises(RuleLearningError):
            run(association_rule_learning(transactions, support=1.5))

    def test_bad_transactions_surface_as_rule_learning_error(self):
        with pytest.raises(RuleLearningError, match='list of tokens'):
            run(association_rule_learning([['0'], 'oops']))
