"""Dataset adapters: record loading and column selection."""

from .dataset import DataSet, Replacement, load_csv

__all__ = ["DataSet", "Replacement", "load_csv"]
