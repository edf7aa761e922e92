"""Text embedding and similarity search."""

from quiver.semantic.tokenizer import (
    EmbeddingTable,
    tokenize,
    embed,
    averaged,
    embed_text,
    parse_word_vectors,
    load_word_vectors,
)
from quiver.semantic.search import (
    RankedIndex,
    RankedLabel,
    DuplicatePair,
    cosine_similarities,
    find_duplicates,
    cluster_cohesion,
    top_indices,
    semantic_search,
)

__all__ = [
    "EmbeddingTable",
    "tokenize",
    "embed",
    "averaged",
    "embed_text",
    "parse_word_vectors",
    "load_word_vectors",
    "RankedIndex",
    "RankedLabel",
    "DuplicatePair",
    "cosine_similarities",
    "find_duplicates",
    "cluster_cohesion",
    "top_indices",
    "semantic_search",
]
