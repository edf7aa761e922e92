"""Tokenization and word-embedding lookup."""

from __future__ import annotations

import itertools
import logging
import pathlib
from collections.abc import Mapping
from typing import Iterable, Iterator, Sequence

import jax
import jax.numpy as jnp
from jaxtyping import Array, Float

from quiver.stats.reductions import mean_vector
from quiver.types.arrays import ArrayLike
from quiver.types.errors import DimensionMismatch
from quiver.types.invariants import as_float, as_vector


logger = logging.getLogger(__name__)


def tokenize(text: str) -> list[str]:
    """
    Lowercase ``text`` and split it on whitespace, dropping empty tokens.

    >>> tokenize("Comfortable Running\\nShoes")
    ['comfortable', 'running', 'shoes']
    """
    return text.lower().split()


def embed(
    tokens: Sequence[str],
    embeddings: Mapping[str, ArrayLike],
) -> list[jax.Array]:
    """
    Look up each token's vector, in token order.

    Tokens missing from ``embeddings`` are skipped, not reported as errors.
    """
    vectors = [as_vector(embeddings[token]) for token in tokens if token in embeddings]
    skipped = len(tokens) - len(vectors)
    if skipped:
        logger.debug("embed: skipped %d of %d tokens without embeddings", skipped, len(tokens))
    return vectors


def averaged(vectors: Sequence[ArrayLike]) -> Float[Array, "d"] | None:
    """Element-wise mean of the vectors, or ``None`` if empty or ragged."""
    return mean_vector(vectors)


def embed_text(
    text: str,
    embeddings: Mapping[str, ArrayLike],
) -> Float[Array, "d"] | None:
    """Average embedding of the known words in ``text``."""
    return averaged(embed(tokenize(text), embeddings))


class EmbeddingTable(Mapping):
    """
    Read-only word-to-vector mapping with a single fixed dimension.

    Wraps a caller-supplied dictionary (for example pretrained word vectors)
    and validates it once so that downstream averaging and similarity calls
    never see mixed dimensions.
    """

    def __init__(self, embeddings: Mapping[str, ArrayLike]):
        table: dict[str, jax.Array] = {}
        dimension: int | None = None
        for word, vector in embeddings.items():
            v = as_float(as_vector(vector))
            if dimension is None:
                dimension = v.shape[0]
            elif v.shape[0] != dimension:
                raise DimensionMismatch(
                    f"Embedding for {word!r} has dimension {v.shape[0]}, expected {dimension}"
                )
            table[word] = v
        self._table = table
        self._dimension = dimension or 0

    @property
    def dimension(self) -> int:
        return self._dimension

    def __len__(self) -> int:
        return len(self._table)

    def __contains__(self, word: object) -> bool:
        return word in self._table

    def __getitem__(self, word: str) -> jax.Array:
        return self._table[word]

    def __iter__(self) -> Iterator[str]:
        return iter(self._table)

    def words(self) -> list[str]:
        return list(self._table)

    def embed(self, tokens: Sequence[str]) -> list[jax.Array]:
        return embed(tokens, self._table)

    def embed_text(self, text: str) -> Float[Array, "d"] | None:
        return embed_text(text, self._table)


def parse_word_vectors(lines: Iterable[str]) -> EmbeddingTable:
    """
    Parse the plain-text word-vector format: ``word v1 v2 ... vd`` per line,
    fields separated by any run of whitespace.

    Blank lines are ignored. A line whose dimension disagrees with the first
    raises DimensionMismatch.
    """
    entries: dict[str, jax.Array] = {}
    for line in lines:
        parts = line.split()
        if not parts:
            continue
        entries[parts[0]] = jnp.asarray([float(x) for x in parts[1:]])
    return EmbeddingTable(entries)


def load_word_vectors(
    path: pathlib.Path | str,
    limit: int | None = None,
) -> EmbeddingTable:
    """
    Read word vectors from a text file (GloVe layout).

    Args:
        path: File with one ``word v1 ... vd`` entry per line.
        limit: Read at most this many lines.

    Returns:
        EmbeddingTable over the parsed words.
    """
    path = pathlib.Path(path)
    with path.open(encoding="utf-8") as handle:
        table = parse_word_vectors(itertools.islice(handle, limit))
    logger.debug("load_word_vectors: %d words of dimension %d from %s", len(table), table.dimension, path)
    return table
