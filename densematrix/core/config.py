"""Library-wide defaults."""

from dataclasses import dataclass
from typing import Any
import numpy as np


@dataclass(frozen=True)
class MatrixDefaults:
    """Defaults read by the store and the formatter."""

    dtype: Any = np.float64         # storage dtype when none is given
    epsilon: float = 1e-9           # tolerance for is_almost_equal
    empty_placeholder: str = "[Ø]"  # rendering of a 0-row or 0-column matrix
    cell_separator: str = "  "


DEFAULTS = MatrixDefaults()
