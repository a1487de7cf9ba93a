"""
Unit tests for transaction encoding.
"""
import pytest

from foldkit.api import get_transactions, getTransactions
from foldkit.errors import InvalidConfigurationError
from foldkit.use_cases.transactions import ValuesMap


@pytest.fixture
def basket_rows():
    return [
        ['bread', 'milk'],
        ['bread', 'butter', 'bread'],
        [],
        ['milk', None, ''],
        ['eggs'],
    ]


class TestValuesMap:
    def test_tokens_are_sequential(self):
        vm = ValuesMap()

        assert vm.add('a') == '0'
        assert vm.add('b') == '1'
        assert vm.add('a') == '0'
        assert len(vm) == 2

    def test_lookup_both_directions(self):
        vm = ValuesMap()
        vm.add('x')

        assert vm['0'] == 'x'
        assert vm['x'] == '0'
        assert 'x' in vm and '0' in vm

    def test_unknown_key(self):
        with pytest.raises(KeyError):
            ValuesMap()['missing']

    def test_label_falls_back_to_token(self):
        assert ValuesMap().label('7') == '7'


class TestGetTransactions:
    """Test suite for get_transactions."""

    def test_first_seen_token_order(self, basket_rows):
        enc = get_transactions(basket_rows)

        assert enc.values == ['bread', 'milk', 'butter', 'eggs']
        assert enc.values_map.to_dict() == {'0': 'bread', '1': 'milk', '2': 'butter', '3': 'eggs'}

    def test_bijection(self, basket_rows):
        enc = get_transactions(basket_rows)

        for token in enc.values_map:
            value = enc.values_map.value_for(token)
            assert enc.values_map.token_for(value) == token

    def test_rows_encoded_and_empty_rows_dropped(self, basket_rows):
        enc = get_transactions(basket_rows)

        assert enc.transactions == [['0', '1'], ['0', '2'], ['1'], ['3']]

    def test_keep_empty_rows(self, basket_rows):
        enc = get_transactions(basket_rows, exclude_empty_transactions=False)

        assert enc.transactions == [['0', '1'], ['0', '2'], [], ['1'], ['3']]

    def test_camel_case_option(self, basket_rows):
        enc = getTransactions(basket_rows, {'excludeEmptyTransactions': False})

        assert len(enc.transactions) == 5

    def test_mapping_rows(self):
        rows = [{'colour': 'red', 'size': 'L'}, {'colour': 'blue', 'size': 'L'}]

        enc = get_transactions(rows)

        assert enc.transactions == [['0', '1'], ['2', '1']]

    def test_unhashable_cell(self):
        with pytest.raises(InvalidConfigurationError, match="unhashable"):
            get_transactions([[['nested']]])
