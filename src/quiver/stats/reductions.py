"""
Reductions and summary statistics over vectors.

Undefined results (the mean of nothing, a variance with ``n <= ddof``) are
returned as ``None``. ``sum`` of an empty vector is 0, and so is ``product``:
the empty product deliberately returns 0 rather than 1.
"""

from __future__ import annotations

from typing import Sequence

import jax.numpy as jnp
from jaxtyping import Array, Bool, Float, Num

from quiver.types.arrays import ArrayLike
from quiver.types.configs import DEFAULT_STATS_CONFIG, StatsConfig
from quiver.types.invariants import as_float, as_matrix, as_vector, is_ragged


def sum(x: ArrayLike) -> Num[Array, ""]:
    """Sum of all elements; 0 for the empty vector."""
    return jnp.sum(as_vector(x))


def product(x: ArrayLike) -> Num[Array, ""]:
    """Product of all elements; 0 (not 1) for the empty vector."""
    v = as_vector(x)
    if v.shape[0] == 0:
        return jnp.zeros((), dtype=v.dtype)
    return jnp.prod(v)


def cumulative_sum(x: ArrayLike) -> Num[Array, "n"]:
    """Running sum; ``result[i] = x[0] + ... + x[i]``."""
    return jnp.cumsum(as_vector(x))


def cumulative_product(x: ArrayLike) -> Num[Array, "n"]:
    """Running product; ``result[i] = x[0] * ... * x[i]``."""
    return jnp.cumprod(as_vector(x))


def min(x: ArrayLike) -> Num[Array, ""] | None:
    v = as_vector(x)
    if v.shape[0] == 0:
        return None
    return jnp.min(v)


def max(x: ArrayLike) -> Num[Array, ""] | None:
    v = as_vector(x)
    if v.shape[0] == 0:
        return None
    return jnp.max(v)


def argmin(x: ArrayLike) -> int | None:
    """Index of the first minimum, or ``None`` for the empty vector."""
    v = as_vector(x)
    if v.shape[0] == 0:
        return None
    return int(jnp.argmin(v))


def argmax(x: ArrayLike) -> int | None:
    """Index of the first maximum, or ``None`` for the empty vector."""
    v = as_vector(x)
    if v.shape[0] == 0:
        return None
    return int(jnp.argmax(v))


def mean(x: ArrayLike) -> Float[Array, ""] | None:
    v = as_float(as_vector(x))
    if v.shape[0] == 0:
        return None
    return jnp.mean(v)


def median(x: ArrayLike) -> Float[Array, ""] | None:
    """
    Middle value of the sorted data.

    For an even count this is the average of the two middle values.
    """
    v = as_float(as_vector(x))
    if v.shape[0] == 0:
        return None
    return jnp.median(v)


def variance(x: ArrayLike, ddof: int = 0) -> Float[Array, ""] | None:
    """
    ``sum((x - mean)**2) / (n - ddof)``.

    ``ddof=0`` is the population variance, ``ddof=1`` the sample variance.
    Returns ``None`` when ``n <= ddof``.
    """
    v = as_float(as_vector(x))
    if v.shape[0] <= ddof:
        return None
    return jnp.var(v, ddof=ddof)


def std(x: ArrayLike, ddof: int = 0) -> Float[Array, ""] | None:
    """Square root of ``variance(x, ddof)``."""
    var = variance(x, ddof)
    if var is None:
        return None
    return jnp.sqrt(var)


def outlier_mask(
    data: ArrayLike,
    threshold: float | None = None,
    mean: float | None = None,
    std: float | None = None,
    *,
    config: StatsConfig = DEFAULT_STATS_CONFIG,
) -> Bool[Array, "n"]:
    """
    Flag values further than ``threshold`` standard deviations from the mean.

    ``mask[i] = |x[i] - mean| > threshold * std``.

    Args:
        data: Values to screen.
        threshold: Multiple of the standard deviation. Defaults to
            ``config.outlier_threshold`` (2.0).
        mean: Precomputed mean; computed from ``data`` if omitted.
        std: Precomputed standard deviation; computed from ``data`` with
            ``config.ddof`` if omitted.
        config: Statistics defaults.

    Returns:
        Boolean mask of the same length as ``data``. A single value is never
        an outlier.
    """
    v = as_float(as_vector(data))
    if v.shape[0] == 0:
        return jnp.zeros(0, dtype=jnp.bool_)
    if threshold is None:
        threshold = config.outlier_threshold
    center = jnp.mean(v) if mean is None else mean
    if std is None:
        spread = variance(v, config.ddof)
        spread = jnp.asarray(1.0) if spread is None else jnp.sqrt(spread)
    else:
        spread = std
    return jnp.abs(v - center) > threshold * spread


def mean_vector(vectors: ArrayLike | Sequence[ArrayLike]) -> Float[Array, "d"] | None:
    """
    Column-wise mean of a collection of equal-length vectors.

    Returns ``None`` if the collection is empty or ragged.
    """
    if not hasattr(vectors, "shape"):
        rows = list(vectors)
        if not rows or is_ragged(rows):
            return None
        vectors = rows
    m = as_matrix(vectors)
    if m.shape[0] == 0:
        return None
    return jnp.mean(as_float(m), axis=0)
