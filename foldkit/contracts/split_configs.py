from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class TrainTestSplitConfig(BaseModel):
    """
    Options for a single train/test partition.

    ``train_size`` wins over ``test_size`` when both are given.
    """
    model_config = ConfigDict(extra="forbid")

    test_size: float = Field(default=0.2, ge=0.0, le=1.0)
    train_size: Optional[float] = Field(default=None, ge=0.0, le=1.0)
    random_state: Optional[int] = 0
    return_array: bool = False
    # Truncate the computed train count to an integer
    parse_int_train_size: bool = True


class KFoldConfig(BaseModel):
    model_config = ConfigDict(extra="forbid")

    folds: int = Field(default=3, gt=0)
    random_state: Optional[int] = 0
