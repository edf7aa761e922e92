"""
Similarity search over embedding databases.

A database is a matrix whose rows are embeddings. Similarities are computed
as one vectorised kernel over all rows; validation (matching dimensions, no
zero rows) runs eagerly first so errors name the offending row.
"""

from __future__ import annotations

import heapq
import logging
from dataclasses import dataclass
from typing import Sequence

import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float

from quiver.types.arrays import ArrayLike
from quiver.types.configs import DEFAULT_SEARCH_CONFIG, SearchConfig
from quiver.types.errors import DimensionMismatch, ZeroVector
from quiver.types.invariants import as_float, as_matrix, as_vector


logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RankedIndex:
    index: int
    score: float


@dataclass(frozen=True, slots=True)
class RankedLabel:
    label: str
    score: float


@dataclass(frozen=True, slots=True)
class DuplicatePair:
    """Two database rows whose cosine similarity met the threshold, ``first < second``."""

    first: int
    second: int
    similarity: float


def _rows(database: ArrayLike) -> Float[Array, "n d"]:
    return as_float(as_matrix(database))


def _assert_nonzero_rows(m: Float[Array, "n d"]) -> None:
    norms = np.linalg.norm(np.asarray(m), axis=1)
    zero = np.flatnonzero(norms == 0)
    if zero.size:
        raise ZeroVector(f"Cannot compare zero vector at row {int(zero[0])}")


@jax.jit
def _cosine_rows(m: Float[Array, "n d"], q: Float[Array, "d"]) -> Float[Array, "n"]:
    q_norm = jnp.linalg.norm(q)

    def one(row):
        return jnp.dot(row, q) / (jnp.linalg.norm(row) * q_norm)

    return jax.vmap(one)(m)


@jax.jit
def _similarity_matrix(m: Float[Array, "n d"]) -> Float[Array, "n n"]:
    norms = jnp.linalg.norm(m, axis=1)
    return (m @ m.T) / jnp.outer(norms, norms)


def cosine_similarities(database: ArrayLike, query: ArrayLike) -> Float[Array, "n"]:
    """
    Cosine similarity of ``query`` against every database row, in row order.

    Args:
        database: Matrix of shape (n, d), one embedding per row.
        query: Vector of length d.

    Returns:
        Vector of n similarities. Empty for an empty database.

    Raises:
        DimensionMismatch: If the row length differs from the query length.
        ZeroVector: If the query or any row has zero magnitude.
    """
    m = _rows(database)
    q = as_float(as_vector(query))
    if m.shape[0] == 0:
        return jnp.zeros(0, dtype=q.dtype)
    if m.shape[1] != q.shape[0]:
        raise DimensionMismatch(
            f"Query has dimension {q.shape[0]}, database rows have dimension {m.shape[1]}"
        )
    if not bool(jnp.any(q != 0)):
        raise ZeroVector("Cannot compare against a zero query vector")
    _assert_nonzero_rows(m)
    logger.debug("cosine_similarities: %d rows of dimension %d", m.shape[0], m.shape[1])
    return _cosine_rows(m, q)


def find_duplicates(
    database: ArrayLike,
    threshold: float | None = None,
    *,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[DuplicatePair]:
    """
    Find every pair of rows with cosine similarity at or above ``threshold``.

    Pairs are reported once with ``first < second`` and sorted by similarity,
    highest first; equal similarities keep row order.

    Raises:
        ZeroVector: If any row has zero magnitude.
    """
    if threshold is None:
        threshold = config.duplicate_threshold
    m = _rows(database)
    n = m.shape[0]
    if n < 2:
        return []
    _assert_nonzero_rows(m)
    sim = np.asarray(_similarity_matrix(m))
    first, second = np.triu_indices(n, k=1)
    values = sim[first, second]
    keep = np.flatnonzero(values >= threshold)
    pairs = [
        DuplicatePair(first=int(first[i]), second=int(second[i]), similarity=float(values[i]))
        for i in keep
    ]
    logger.debug("find_duplicates: %d of %d pairs at threshold %.3f", len(pairs), values.size, threshold)
    return sorted(pairs, key=lambda pair: pair.similarity, reverse=True)


def cluster_cohesion(items: ArrayLike | Sequence[ArrayLike]) -> Float[Array, ""]:
    """
    Mean pairwise cosine similarity within a group of vectors.

    Returns 0 for fewer than two items.
    """
    m = _rows(items)
    n = m.shape[0]
    if n < 2:
        return jnp.zeros(())
    _assert_nonzero_rows(m)
    first, second = jnp.triu_indices(n, k=1)
    return jnp.mean(_similarity_matrix(m)[first, second])


def top_indices(
    scores: ArrayLike,
    k: int,
    labels: Sequence[str] | None = None,
) -> list[RankedIndex] | list[RankedLabel]:
    """
    Select the ``k`` highest scores, best first.

    Uses a bounded heap, so selection is O(n log k). Equal scores keep the
    lower index first. Asking for more entries than exist returns them all.

    Args:
        scores: One score per candidate.
        k: Number of entries to keep.
        labels: Optional names, one per score. When given, results carry the
            label instead of the index.

    Raises:
        ValueError: If ``k`` is negative.
        DimensionMismatch: If ``labels`` does not match ``scores`` in length.
    """
    if k < 0:
        raise ValueError(f"k must be non-negative, got {k}")
    values = np.asarray(as_vector(scores)).tolist()
    if labels is not None and len(labels) != len(values):
        raise DimensionMismatch(
            f"Need one label per score, got {len(labels)} labels for {len(values)} scores"
        )
    best = heapq.nlargest(k, range(len(values)), key=values.__getitem__)
    if labels is None:
        return [RankedIndex(index=i, score=float(values[i])) for i in best]
    return [RankedLabel(label=labels[i], score=float(values[i])) for i in best]


def semantic_search(
    query: ArrayLike,
    database: ArrayLike,
    labels: Sequence[str] | None = None,
    *,
    config: SearchConfig = DEFAULT_SEARCH_CONFIG,
) -> list[RankedIndex] | list[RankedLabel]:
    """Rank database rows by cosine similarity to ``query`` and keep ``config.top_k``."""
    return top_indices(cosine_similarities(database, query), config.top_k, labels)
