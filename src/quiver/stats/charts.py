"""
Chart-oriented data shaping built on the reduction kernels.

Time series helpers (rolling means, differences), distribution summaries
(histograms, percentiles), rescaling, grouping and multi-series stacking.
These functions are lenient: degenerate inputs (empty data, a window of
zero) give empty results rather than errors, because they feed plotting code
that should render nothing instead of failing.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass
from typing import Sequence

import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float

from quiver.stats import reductions
from quiver.types.arrays import ArrayLike
from quiver.types.configs import DEFAULT_HISTOGRAM_CONFIG, HistogramConfig
from quiver.types.errors import DimensionMismatch
from quiver.types.invariants import as_float, as_matrix, as_vector


logger = logging.getLogger(__name__)


class AggregationMethod(enum.Enum):
    SUM = "sum"
    MEAN = "mean"
    COUNT = "count"
    MIN = "min"
    MAX = "max"


@dataclass(frozen=True, slots=True)
class HistogramBin:
    midpoint: float
    count: int


@dataclass(frozen=True, slots=True)
class Quartiles:
    """Five-number summary plus interquartile range."""

    min: float
    q1: float
    median: float
    q3: float
    max: float
    iqr: float


def _floats(x: ArrayLike) -> Float[Array, "n"]:
    return as_float(as_vector(x))


def _empty() -> Float[Array, "0"]:
    return jnp.zeros(0)


def _aggregate(values: np.ndarray, method: AggregationMethod) -> float:
    if method is AggregationMethod.COUNT:
        return float(values.size)
    if values.size == 0:
        return 0.0
    if method is AggregationMethod.SUM:
        return float(values.sum())
    if method is AggregationMethod.MEAN:
        return float(values.mean())
    if method is AggregationMethod.MIN:
        return float(values.min())
    return float(values.max())


# === Time series ===


def rolling_mean(x: ArrayLike, window: int) -> Float[Array, "n"]:
    """
    Trailing moving average with the same length as the input.

    The first ``window - 1`` outputs average the partial window available so
    far. A window longer than the data gives the overall mean everywhere.
    """
    v = _floats(x)
    n = v.shape[0]
    if window <= 0 or n == 0:
        return _empty()
    if window > n:
        return jnp.full(n, jnp.mean(v))
    csum = jnp.concatenate([jnp.zeros(1, dtype=v.dtype), jnp.cumsum(v)])
    idx = jnp.arange(n)
    start = jnp.maximum(0, idx - window + 1)
    return (csum[idx + 1] - csum[start]) / (idx + 1 - start)


def diff(x: ArrayLike, lag: int = 1) -> Float[Array, "m"]:
    """Period-over-period difference ``x[i] - x[i - lag]``, length ``n - lag``."""
    v = _floats(x)
    if lag <= 0 or lag >= v.shape[0]:
        return _empty()
    return v[lag:] - v[:-lag]


def percent_change(x: ArrayLike, lag: int = 1) -> Float[Array, "m"]:
    """
    Percentage change relative to ``lag`` periods earlier.

    A zero earlier value yields 0 for that position.
    """
    v = _floats(x)
    if lag <= 0 or lag >= v.shape[0]:
        return _empty()
    previous = v[:-lag]
    current = v[lag:]
    safe = jnp.where(previous == 0, 1.0, previous)
    return jnp.where(previous == 0, 0.0, (current - previous) / safe * 100)


# === Distribution analysis ===


def histogram(
    x: ArrayLike,
    bins: int | None = None,
    *,
    config: HistogramConfig = DEFAULT_HISTOGRAM_CONFIG,
) -> list[HistogramBin]:
    """
    Equal-width bins between the data minimum and maximum.

    Bins are half-open ``[lower, upper)`` except the last, which is closed so
    the maximum is counted. Constant data gives one bin at that value holding
    every element.
    """
    if bins is None:
        bins = config.bins
    data = np.asarray(_floats(x))
    if bins <= 0 or data.size == 0:
        return []
    low = data.min()
    high = data.max()
    if low == high:
        return [HistogramBin(midpoint=float(low), count=int(data.size))]

    width = (high - low) / bins
    result = []
    for i in range(bins):
        lower = low + i * width
        upper = lower + width
        if i == bins - 1:
            count = np.count_nonzero((data >= lower) & (data <= upper))
        else:
            count = np.count_nonzero((data >= lower) & (data < upper))
        result.append(HistogramBin(midpoint=float((lower + upper) / 2), count=int(count)))
    return result


def percentile(x: ArrayLike, p: float) -> Float[Array, ""] | None:
    """
    Linearly interpolated percentile, ``p`` in ``[0, 100]``.

    Returns ``None`` for empty data or ``p`` out of range.
    """
    v = _floats(x)
    if v.shape[0] == 0 or not 0 <= p <= 100:
        return None
    return jnp.percentile(v, p)


def quartiles(x: ArrayLike) -> Quartiles | None:
    v = _floats(x)
    if v.shape[0] == 0:
        return None
    q1, med, q3 = (float(q) for q in jnp.percentile(v, jnp.asarray([25.0, 50.0, 75.0])))
    return Quartiles(
        min=float(jnp.min(v)),
        q1=q1,
        median=med,
        q3=q3,
        max=float(jnp.max(v)),
        iqr=q3 - q1,
    )


def percentile_rank(x: ArrayLike, value: float) -> Float[Array, ""]:
    """
    Share of the data below ``value``, counting ties as half, in percent.

    0 for empty data.
    """
    v = _floats(x)
    if v.shape[0] == 0:
        return jnp.zeros(())
    below = jnp.sum(v < value)
    equal = jnp.sum(v == value)
    return (below + equal / 2) / v.shape[0] * 100


def percentile_ranks(x: ArrayLike) -> Float[Array, "n"]:
    """Percentile rank of every element within its own data."""
    v = _floats(x)
    if v.shape[0] == 0:
        return _empty()
    below = jnp.sum(v[None, :] < v[:, None], axis=1)
    equal = jnp.sum(v[None, :] == v[:, None], axis=1)
    return (below + equal / 2) / v.shape[0] * 100


# === Normalisation and scaling ===


def scaled(x: ArrayLike, low: float = 0.0, high: float = 1.0) -> Float[Array, "n"]:
    """Min-max rescale into ``[low, high]``; constant data maps to ``low``."""
    v = _floats(x)
    if v.shape[0] == 0:
        return _empty()
    vmin = jnp.min(v)
    data_range = jnp.max(v) - vmin
    if not bool(data_range != 0):
        return jnp.full(v.shape[0], low, dtype=v.dtype)
    return (v - vmin) / data_range * (high - low) + low


def as_percentages(x: ArrayLike) -> Float[Array, "n"]:
    """Each value as a percentage of the total; all zeros if the total is 0."""
    v = _floats(x)
    if v.shape[0] == 0:
        return _empty()
    total = jnp.sum(v)
    if not bool(total != 0):
        return jnp.zeros_like(v)
    return v / total * 100


def standardized(x: ArrayLike) -> Float[Array, "n"]:
    """Z-scores using the population standard deviation; zeros if it is 0."""
    v = _floats(x)
    if v.shape[0] == 0:
        return _empty()
    spread = reductions.std(v)
    if not bool(spread != 0):
        return jnp.zeros_like(v)
    return (v - jnp.mean(v)) / spread


# === Grouping and aggregation ===


def group_by(
    values: ArrayLike,
    categories: Sequence[str],
    method: AggregationMethod,
) -> dict[str, float]:
    """
    Aggregate ``values`` per category label.

    Raises:
        DimensionMismatch: If there is not exactly one label per value.
    """
    data = np.asarray(_floats(values))
    labels = list(categories)
    if len(labels) != data.size:
        raise DimensionMismatch(
            f"Need one category per value, got {len(labels)} categories for {data.size} values"
        )
    groups: dict[str, list[float]] = {}
    for value, label in zip(data.tolist(), labels):
        groups.setdefault(label, []).append(value)
    return {
        label: _aggregate(np.asarray(members), method)
        for label, members in groups.items()
    }


def grouped_data(
    values: ArrayLike,
    categories: Sequence[str],
    method: AggregationMethod,
) -> list[tuple[str, float]]:
    """``group_by`` as ``(category, value)`` pairs sorted by category."""
    return sorted(group_by(values, categories, method).items())


def downsample(x: ArrayLike, factor: int, method: AggregationMethod) -> Float[Array, "m"]:
    """
    Aggregate consecutive chunks of ``factor`` values.

    The final chunk may be shorter. A factor at least as long as the data
    collapses it to a single value.
    """
    data = np.asarray(_floats(x))
    if factor <= 0 or data.size == 0:
        return _empty()
    if factor >= data.size:
        return jnp.asarray([_aggregate(data, method)])
    chunks = [data[i:i + factor] for i in range(0, data.size, factor)]
    return jnp.asarray([_aggregate(chunk, method) for chunk in chunks])


# === Multi-series ===


def stacked_cumulative(series: ArrayLike) -> Float[Array, "s n"]:
    """Running total across series, for stacked area and bar charts."""
    m = as_float(as_matrix(series))
    return jnp.cumsum(m, axis=0)


def stacked_percentage(series: ArrayLike) -> Float[Array, "s n"]:
    """Each series as a percentage of the column total; 0 where the total is 0."""
    m = as_float(as_matrix(series))
    if m.size == 0:
        return m
    totals = jnp.sum(m, axis=0, keepdims=True)
    safe = jnp.where(totals == 0, 1.0, totals)
    return jnp.where(totals == 0, 0.0, m / safe * 100)


@jax.jit
def _pearson_matrix(m: Float[Array, "s n"]) -> Float[Array, "s s"]:
    centered = m - jnp.mean(m, axis=1, keepdims=True)
    cov = centered @ centered.T
    sum_squares = jnp.diag(cov)
    denom = jnp.sqrt(jnp.outer(sum_squares, sum_squares))
    corr = jnp.where(denom > 0, cov / jnp.where(denom > 0, denom, 1.0), 0.0)
    return jnp.where(jnp.eye(m.shape[0], dtype=jnp.bool_), 1.0, corr)


def correlation_matrix(series: ArrayLike) -> Float[Array, "s s"]:
    """
    Pearson correlation between every pair of series.

    The diagonal is 1; a pair involving a constant series correlates as 0.

    Raises:
        DimensionMismatch: If the series differ in length.
    """
    m = as_float(as_matrix(series))
    s, n = m.shape
    logger.debug("correlation_matrix: %d series of length %d", s, n)
    if s == 0:
        return m
    if n == 0:
        return jnp.eye(s, dtype=m.dtype)
    return _pearson_matrix(m)


def heatmap_data(
    series: ArrayLike,
    labels: Sequence[str],
) -> list[tuple[str, str, float]]:
    """
    Flatten the correlation matrix into ``(x, y, value)`` triples.

    Raises:
        DimensionMismatch: If there is not exactly one label per series.
    """
    corr = np.asarray(correlation_matrix(series))
    names = list(labels)
    if len(names) != corr.shape[0]:
        raise DimensionMismatch(
            f"Need one label per series, got {len(names)} labels for {corr.shape[0]} series"
        )
    return [
        (names[i], names[j], float(corr[i, j]))
        for i in range(corr.shape[0])
        for j in range(corr.shape[1])
    ]
