from __future__ import annotations

import warnings
from dataclasses import dataclass
from typing import Any, List, Sequence

import numpy as np
from sklearn.metrics import confusion_matrix

from foldkit.errors import InvalidConfigurationError


def _as_list(labels: Any) -> List[Any]:
    arr = np.asarray(labels, dtype=object)
    if arr.ndim == 2 and arr.shape[1] == 1:
        arr = arr[:, 0]
    if arr.ndim != 1:
        raise InvalidConfigurationError(f"labels must be 1D; got shape {arr.shape}")
    return [v.item() if isinstance(v, np.generic) else v for v in arr.tolist()]


@dataclass(frozen=True)
class ConfusionMatrix:
    """Confusion matrix over an explicit label order.

    ``matrix[i, j]`` counts samples whose actual label is ``labels[i]`` and
    whose predicted label is ``labels[j]``.
    """

    labels: List[Any]
    matrix: np.ndarray

    @classmethod
    def from_labels(cls, actuals: Sequence[Any], estimates: Sequence[Any]) -> "ConfusionMatrix":
        y_true = _as_list(actuals)
        y_pred = _as_list(estimates)
        if len(y_true) != len(y_pred):
            raise InvalidConfigurationError(
                f"Length mismatch: actuals({len(y_true)}) vs estimates({len(y_pred)})."
            )

        # first-seen order; labels are compared by value, so mixed types are fine
        labels = list(dict.fromkeys(y_true + y_pred))
        index = {label: i for i, label in enumerate(labels)}
        if not labels:
            return cls(labels=[], matrix=np.zeros((0, 0), dtype=int))

        # a fold that sees one label makes sklearn warn about it; that is expected here
        with warnings.catch_warnings():
            warnings.simplefilter("ignore", UserWarning)
            cm = confusion_matrix(
                [index[v] for v in y_true],
                [index[v] for v in y_pred],
                labels=list(range(len(labels))),
            )
        return cls(labels=labels, matrix=cm)

    @property
    def total(self) -> int:
        return int(self.matrix.sum())

    @property
    def true_count(self) -> int:
        return int(np.trace(self.matrix))

    def get_accuracy(self) -> float:
        total = self.total
        return self.true_count / total if total > 0 else 0.0

    def get_count(self, actual: Any, predicted: Any) -> int:
        return int(self.matrix[self.labels.index(actual), self.labels.index(predicted)])
