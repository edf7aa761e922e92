"""
Quiver: numeric arrays for vector math, statistics and text similarity on JAX.

Kernel functions live in the subpackages:
- ``quiver.primitives``: element-wise arithmetic, broadcasting, vector and
  matrix algebra, boolean masks, generation
- ``quiver.stats``: reductions, summary statistics, chart data shaping
- ``quiver.semantic``: tokenization, embeddings, similarity search

``Vector`` and ``Matrix`` wrap a JAX array with operator syntax.
"""

import logging

from quiver import primitives, semantic, stats
from quiver.containers import Matrix, Vector
from quiver.info import info, is_matrix_valid, shape
from quiver.types import (
    DEFAULT_HISTOGRAM_CONFIG,
    DEFAULT_SEARCH_CONFIG,
    DEFAULT_STATS_CONFIG,
    DimensionMismatch,
    DivisionByZero,
    EmptyInput,
    HistogramConfig,
    QuiverError,
    SearchConfig,
    StatsConfig,
    ZeroVector,
)

__version__ = "0.1.0"

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "primitives",
    "semantic",
    "stats",
    "Vector",
    "Matrix",
    "info",
    "is_matrix_valid",
    "shape",
    "QuiverError",
    "DimensionMismatch",
    "DivisionByZero",
    "ZeroVector",
    "EmptyInput",
    "StatsConfig",
    "SearchConfig",
    "HistogramConfig",
    "DEFAULT_STATS_CONFIG",
    "DEFAULT_SEARCH_CONFIG",
    "DEFAULT_HISTOGRAM_CONFIG",
]
