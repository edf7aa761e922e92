"""Type definitions for quiver."""

from quiver.types.configs import (
    DEFAULT_HISTOGRAM_CONFIG,
    DEFAULT_SEARCH_CONFIG,
    DEFAULT_STATS_CONFIG,
    HistogramConfig,
    SearchConfig,
    StatsConfig,
)
from quiver.types.arrays import (
    ArrayLike,
    BoolMask,
    Matrix,
    Scalar,
    Vector,
)
from quiver.types.errors import (
    DimensionMismatch,
    DivisionByZero,
    EmptyInput,
    QuiverError,
    ZeroVector,
)
from quiver.types.invariants import (
    as_array,
    as_mask,
    as_matrix,
    as_vector,
    is_ragged,
)

__all__ = [
    "StatsConfig",
    "SearchConfig",
    "HistogramConfig",
    "DEFAULT_STATS_CONFIG",
    "DEFAULT_SEARCH_CONFIG",
    "DEFAULT_HISTOGRAM_CONFIG",
    "ArrayLike",
    "BoolMask",
    "Matrix",
    "Scalar",
    "Vector",
    "QuiverError",
    "DimensionMismatch",
    "DivisionByZero",
    "ZeroVector",
    "EmptyInput",
    "as_array",
    "as_mask",
    "as_matrix",
    "as_vector",
    "is_ragged",
]
