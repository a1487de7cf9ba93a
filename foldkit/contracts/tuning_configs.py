from __future__ import annotations

from typing import Any, Callable, Dict, List, Union

from pydantic import BaseModel, ConfigDict, Field


def _no_search(parameters: Any) -> None:
    return None


class GridSearchConfig(BaseModel):
    """
    Grid search extension point.

    ``parameters`` describes the space (a list of candidates or a
    sklearn-style param -> values mapping); ``search`` is the strategy that
    walks it. The default strategy does nothing.
    """
    model_config = ConfigDict(extra="forbid", arbitrary_types_allowed=True)

    parameters: Union[List[Any], Dict[str, List[Any]]] = Field(default_factory=list)
    search: Callable[..., Any] = _no_search
