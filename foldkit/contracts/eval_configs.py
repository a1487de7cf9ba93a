from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

# A feature selector is a list of groups; each group is [name] or [name, options].
FeatureGroups = List[List[Any]]


def _default_x() -> FeatureGroups:
    return [["X"]]


def _default_y() -> FeatureGroups:
    return [["Y"]]


class CrossValidateConfig(BaseModel):
    """
    Options for cross_validate_score.

    ``dataset`` is the training pool that gets folded; ``testingset`` is the
    held-out pool evaluated once per fold and never re-split.
    """
    model_config = ConfigDict(
        extra="forbid",
        arbitrary_types_allowed=True,
        populate_by_name=True,
    )

    classifier: Any
    regression: bool = False
    dataset: List[Any] = Field(default_factory=list)
    testingset: List[Any] = Field(default_factory=list)
    dependent_features: FeatureGroups = Field(default_factory=_default_x, alias="dependentFeatures")
    independent_features: FeatureGroups = Field(default_factory=_default_y, alias="independentFeatures")
    folds: int = Field(default=10, gt=0)
    random_state: Optional[int] = 0
    use_train_x_matrix: bool = True
    use_train_y_matrix: bool = False

    @field_validator("classifier")
    @classmethod
    def _check_classifier(cls, v: Any) -> Any:
        for name in ("train", "predict"):
            if not callable(getattr(v, name, None)):
                raise ValueError(f"classifier must expose a callable '{name}' method")
        return v

    @field_validator("dependent_features", "independent_features")
    @classmethod
    def _check_feature_groups(cls, v: FeatureGroups) -> FeatureGroups:
        if not v:
            raise ValueError("feature selector must contain at least one group")
        for group in v:
            if not isinstance(group, (list, tuple)) or not group or len(group) > 2:
                raise ValueError(f"feature group must be [name] or [name, options]; got {group!r}")
            if not isinstance(group[0], str):
                raise ValueError(f"feature name must be a string; got {group[0]!r}")
            if len(group) == 2 and not isinstance(group[1], dict):
                raise ValueError(f"feature options must be a mapping; got {group[1]!r}")
        return [list(g) for g in v]
