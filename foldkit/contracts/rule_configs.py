from __future__ import annotations

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field


class TransactionConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    exclude_empty_transactions: bool = Field(default=True, alias="excludeEmptyTransactions")


class RuleLearningConfig(BaseModel):
    """
    Options for association_rule_learning.

    ``min_length`` is accepted for compatibility; summaries always keep
    itemsets with at least two items.
    """
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True, populate_by_name=True)

    support: float = Field(default=0.4, gt=0.0, le=1.0)
    min_length: int = Field(default=2, ge=1, alias="minLength")
    summary: bool = True
    values_map: Optional[Any] = Field(default=None, alias="valuesMap")
