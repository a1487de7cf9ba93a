from __future__ import annotations

"""Column selection over record datasets.

A :class:`DataSet` wraps a list of records (mappings) in a pandas DataFrame and
extracts columns either as flat lists (:meth:`DataSet.column_array`) or as a
row-major matrix assembled from several feature groups
(:meth:`DataSet.column_matrix`).
"""

from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Mapping, Optional, Sequence, Union

import numpy as np
import pandas as pd
from sklearn.preprocessing import MinMaxScaler, StandardScaler

from foldkit.errors import InvalidConfigurationError

RowPredicate = Callable[[Mapping[str, Any]], bool]
ValuePredicate = Callable[[Any], bool]

_SCALERS = {
    "standard": lambda: StandardScaler(with_mean=True, with_std=True, copy=True),
    "minmax": lambda: MinMaxScaler(copy=True),
}


@dataclass
class Replacement:
    """Replace values matching ``test`` with ``value``.

    ``value`` may be a constant or a callable ``value(current, row)``.
    """

    test: ValuePredicate
    value: Any

    def apply(self, current: Any, row: Mapping[str, Any]) -> Any:
        if not self.test(current):
            return current
        return self.value(current, row) if callable(self.value) else self.value


def make_scaler(method: str) -> Any:
    key = str(method).lower()
    if key not in _SCALERS:
        raise InvalidConfigurationError(
            f"Unknown scaler method: {method!r}. Supported: {sorted(_SCALERS)}"
        )
    return _SCALERS[key]()


def scale_values(values: Sequence[Any], method: str) -> List[float]:
    if len(values) == 0:
        return []
    arr = np.asarray(values, dtype=float).reshape(-1, 1)
    return make_scaler(method).fit_transform(arr).ravel().tolist()


class DataSet:
    def __init__(self, rows: Union[Sequence[Mapping[str, Any]], pd.DataFrame]):
        if isinstance(rows, pd.DataFrame):
            self.frame = rows.copy()
        else:
            rows = list(rows)
            for i, row in enumerate(rows):
                if not isinstance(row, Mapping):
                    raise InvalidConfigurationError(
                        f"DataSet rows must be mappings; row {i} is {type(row).__name__}"
                    )
            self.frame = pd.DataFrame.from_records(rows)

    def __len__(self) -> int:
        return len(self.frame)

    @property
    def columns(self) -> List[str]:
        return [str(c) for c in self.frame.columns]

    def column_array(
        self,
        name: str,
        *,
        prefilter: Optional[RowPredicate] = None,
        filter: Optional[ValuePredicate] = None,
        replace: Optional[Union[Replacement, Dict[str, Any]]] = None,
        parse_int: bool = False,
        parse_float: bool = False,
        scale: Optional[str] = None,
    ) -> List[Any]:
        """Return one column as a list.

        Steps run in this order: ``prefilter`` on whole rows, ``replace``,
        numeric parsing, ``filter`` on values, then ``scale`` (which implies
        float parsing).
        """
        if name not in self.frame.columns:
            raise InvalidConfigurationError(
                f"Unknown column {name!r}. Available: {self.columns}"
            )
        if isinstance(replace, dict):
            replace = Replacement(**replace)

        records = self.frame.to_dict(orient="records")
        if prefilter is not None:
            records = [r for r in records if prefilter(r)]

        values: List[Any] = []
        for row in records:
            v = row[name]
            if replace is not None:
                v = replace.apply(v, row)
            if parse_int:
                v = int(float(v))
            elif parse_float or scale:
                v = float(v)
            values.append(v)

        if filter is not None:
            values = [v for v in values if filter(v)]
        if scale:
            values = scale_values(values, scale)
        return values

    def column_matrix(self, features: Sequence[Sequence[Any]]) -> List[List[Any]]:
        """Assemble feature groups (``[name]`` or ``[name, options]``) into rows.

        Every group must yield the same number of values; filters that change
        lengths across groups are a configuration error.
        """
        columns: List[List[Any]] = []
        for group in features:
            if not group or not isinstance(group[0], str):
                raise InvalidConfigurationError(f"Malformed feature group: {group!r}")
            options = dict(group[1]) if len(group) > 1 and group[1] else {}
            columns.append(self.column_array(group[0], **options))

        lengths = {len(c) for c in columns}
        if len(lengths) > 1:
            raise InvalidConfigurationError(
                f"Feature groups produced columns of different lengths: {sorted(lengths)}"
            )
        return [list(row) for row in zip(*columns)]


def load_csv(path: Any, **read_kwargs: Any) -> List[Dict[str, Any]]:
    """Read a delimited file into a list of records.

    Empty cells come back as empty strings rather than NaN, so records look
    the way they were written.
    """
    kwargs = {"dtype": str, "keep_default_na": False}
    kwargs.update(read_kwargs)
    df = pd.read_csv(path, **kwargs)
    return df.to_dict(orient="records")
