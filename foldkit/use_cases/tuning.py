from __future__ import annotations

"""Grid search extension point.

No search is built in. The use-case validates the configuration and hands the
parameter space to the configured strategy, which decides what to return.
"""

import logging
from typing import Any, Mapping, Union

from foldkit.contracts.tuning_configs import GridSearchConfig
from foldkit.core.config import resolve_config

logger = logging.getLogger(__name__)


def grid_search(
    options: Union[GridSearchConfig, Mapping[str, Any], None] = None,
    **overrides: Any,
) -> Any:
    cfg = resolve_config(GridSearchConfig, options, **overrides)
    logger.debug("grid search over %d parameter entries", len(cfg.parameters))
    return cfg.search(cfg.parameters)
