from __future__ import annotations

"""Transaction encoding.

Raw rows are turned into sparse symbolic transactions: every distinct cell
value gets an integer-string token (``"0"``, ``"1"``, ...) in first-seen order
over the whole batch, and every row becomes the ordered list of tokens for
the values it contains.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, Hashable, Iterable, Iterator, List, Mapping, Sequence, Union

from foldkit.contracts.rule_configs import TransactionConfig
from foldkit.core.config import resolve_config
from foldkit.errors import InvalidConfigurationError

logger = logging.getLogger(__name__)


class ValuesMap:
    """Bijection between raw values and their tokens."""

    def __init__(self) -> None:
        self._token_by_value: Dict[Hashable, str] = {}
        self._value_by_token: Dict[str, Hashable] = {}

    def add(self, value: Hashable) -> str:
        token = self._token_by_value.get(value)
        if token is None:
            token = str(len(self._token_by_value))
            self._token_by_value[value] = token
            self._value_by_token[token] = value
        return token

    def token_for(self, value: Hashable) -> str:
        return self._token_by_value[value]

    def value_for(self, token: str) -> Hashable:
        return self._value_by_token[token]

    def label(self, token: str) -> Any:
        """Value for ``token``, or the token itself when it is unknown."""
        return self._value_by_token.get(token, token)

    def __getitem__(self, key: Hashable) -> Any:
        # tokens first: a raw value may itself look like a token
        if key in self._value_by_token:
            return self._value_by_token[key]
        if key in self._token_by_value:
            return self._token_by_value[key]
        raise KeyError(key)

    def __contains__(self, key: object) -> bool:
        return key in self._value_by_token or key in self._token_by_value

    def __len__(self) -> int:
        return len(self._value_by_token)

    def __iter__(self) -> Iterator[str]:
        return iter(self._value_by_token)

    def values(self) -> List[Hashable]:
        return list(self._value_by_token.values())

    def to_dict(self) -> Dict[str, Hashable]:
        return dict(self._value_by_token)


@dataclass
class TransactionEncoding:
    values: List[Hashable] = field(default_factory=list)
    values_map: ValuesMap = field(default_factory=ValuesMap)
    transactions: List[List[str]] = field(default_factory=list)


def _cells(row: Any) -> Iterable[Any]:
    if isinstance(row, Mapping):
        return row.values()
    if isinstance(row, (str, bytes)) or not isinstance(row, Sequence):
        return [row]
    return row


def _present(value: Any) -> bool:
    return value is not None and value != ""


def get_transactions(
    data: Sequence[Any],
    options: Union[TransactionConfig, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> TransactionEncoding:
    cfg = resolve_config(TransactionConfig, options, **overrides)

    values_map = ValuesMap()
    rows: List[List[Any]] = []
    for i, row in enumerate(data):
        cells = [c for c in _cells(row) if _present(c)]
        for c in cells:
            try:
                values_map.add(c)
            except TypeError as e:
                raise InvalidConfigurationError(f"row {i}: unhashable cell value {c!r}") from e
        rows.append(cells)

    transactions: List[List[str]] = []
    for cells in rows:
        tokens = list(dict.fromkeys(values_map.token_for(c) for c in cells))
        if tokens or not cfg.exclude_empty_transactions:
            transactions.append(tokens)

    logger.debug(
        "encoded %d row(s) into %d transaction(s) over %d distinct value(s)",
        len(rows), len(transactions), len(values_map),
    )
    return TransactionEncoding(
        values=values_map.values(),
        values_map=values_map,
        transactions=transactions,
    )
