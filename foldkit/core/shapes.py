from __future__ import annotations

"""Shape/orientation utilities.

Conventions
-----------
- X is 2D: (n_samples, n_features)
"""

from typing import Any

import numpy as np


def as_matrix(rows: Any) -> np.ndarray:
    """Wrap a row-major selection as a 2-D numpy array.

    - Accepts 1D and reshapes to (n_samples, 1)
    - Enforces 2D.
    """
    arr = np.asarray(rows)
    if arr.ndim == 1:
        arr = arr[:, None]
    if arr.ndim != 2:
        raise ValueError(f"matrix must be 2D; got {arr.shape}")
    return arr
