from __future__ import annotations

"""Result contracts.

Outputs of the rule-learning use-case. JSON-friendly field types only, with
strict top-level validation so payload drift fails loudly.
"""

from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field


class ResultModel(BaseModel):
    """Base class for result contracts (strict by default)."""

    model_config = ConfigDict(extra="forbid")


class Itemset(ResultModel):
    """A frequent itemset as returned by the miner; support is an absolute count."""

    items: List[str] = Field(default_factory=list)
    support: int


class ItemsetSummary(ResultModel):
    items: List[str] = Field(default_factory=list)
    items_labels: List[Any] = Field(default_factory=list)
    support: int
    support_percent: float
