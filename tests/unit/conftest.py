"""
Pytest fixtures for foldkit unit tests.

Provides the reference numeric fixture, a small CSV-like record set and
simple classifier stubs for cross-validation tests.
"""
import sys
from pathlib import Path
from typing import Any, List

import pytest

# Add project root to path
project_root = Path(__file__).parent.parent.parent
sys.path.insert(0, str(project_root))


@pytest.fixture
def test_array():
    """Reference dataset with known seed-0 splits."""
    return [20, 25, 10, 33, 50, 42, 19, 34, 90, 23]


@pytest.fixture
def csv_data():
    """Records as they come out of a CSV reader (all strings, some blanks)."""
    return [
        {'Country': 'Brazil', 'Age': '44', 'Salary': '72000', 'Purchased': 'No'},
        {'Country': 'Mexico', 'Age': '27', 'Salary': '48000', 'Purchased': 'Yes'},
        {'Country': 'Ghana', 'Age': '30', 'Salary': '54000', 'Purchased': 'No'},
        {'Country': 'Mexico', 'Age': '38', 'Salary': '61000', 'Purchased': 'No'},
        {'Country': 'Ghana', 'Age': '40', 'Salary': '', 'Purchased': 'Yes'},
        {'Country': 'Brazil', 'Age': '35', 'Salary': '58000', 'Purchased': 'Yes'},
        {'Country': 'Mexico', 'Age': '', 'Salary': '52000', 'Purchased': 'No'},
        {'Country': 'Brazil', 'Age': '48', 'Salary': '79000', 'Purchased': 'Yes'},
        {'Country': 'Ghana', 'Age': '50', 'Salary': '83000', 'Purchased': 'No'},
        {'Country': 'Brazil', 'Age': '37', 'Salary': '67000', 'Purchased': 'Yes'},
    ]


@pytest.fixture
def labeled_rows():
    """Training pool: X is a number, Y is 'pos' when X >= 5."""
    return [{'X': i, 'Y': 'pos' if i >= 5 else 'neg'} for i in range(12)]


@pytest.fixture
def testing_rows():
    return [
        {'X': 1, 'Y': 'neg'},
        {'X': 2, 'Y': 'neg'},
        {'X': 7, 'Y': 'pos'},
        {'X': 9, 'Y': 'pos'},
    ]


class ThresholdClassifier:
    """Predicts 'pos' when the first feature is at least `threshold`."""

    def __init__(self, threshold: float = 5):
        self.threshold = threshold
        self.train_calls: List[Any] = []
        self.predict_calls: List[Any] = []

    def train(self, x, y):
        self.train_calls.append((x, y))

    def predict(self, x):
        self.predict_calls.append(x)
        return ['pos' if row[0] >= self.threshold else 'neg' for row in x]


class ConstantClassifier:
    """Always predicts the same label."""

    def __init__(self, label: Any):
        self.label = label

    def train(self, x, y):
        pass

    def predict(self, x):
        return [self.label for _ in x]


@pytest.fixture
def threshold_classifier():
    return ThresholdClassifier()


@pytest.fixture
def constant_classifier():
    return ConstantClassifier
