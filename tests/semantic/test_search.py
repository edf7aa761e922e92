"""Tests for similarity search."""

import jax.numpy as jnp
import pytest

from quiver.semantic.search import (
    DuplicatePair,
    RankedIndex,
    RankedLabel,
    cluster_cohesion,
    cosine_similarities,
    find_duplicates,
    semantic_search,
    top_indices,
)
from quiver.types.configs import SearchConfig
from quiver.types.errors import DimensionMismatch, ZeroVector


class TestCosineSimilarities:

    def test_row_order_preserved(self, database):
        scores = cosine_similarities(database, [1.0, 0.0, 0.0])
        assert scores.shape == (3,)
        assert float(scores[0]) == pytest.approx(1.0, abs=1e-6)
        assert float(scores[2]) == pytest.approx(0.0, abs=1e-6)
        assert float(scores[0]) > float(scores[1]) > float(scores[2])

    def test_integer_database(self):
        scores = cosine_similarities([[1, 0], [0, 2]], [0, 1])
        assert jnp.allclose(scores, jnp.array([0.0, 1.0]))

    def test_empty_database(self):
        assert cosine_similarities([], [1.0, 0.0]).shape == (0,)

    def test_dimension_mismatch(self, database):
        with pytest.raises(DimensionMismatch, match="Query has dimension 2"):
            cosine_similarities(database, [1.0, 0.0])

    def test_zero_query(self, database):
        with pytest.raises(ZeroVector):
            cosine_similarities(database, [0.0, 0.0, 0.0])

    def test_zero_row_named(self):
        with pytest.raises(ZeroVector, match="row 1"):
            cosine_similarities([[1.0, 0.0], [0.0, 0.0]], [1.0, 0.0])


class TestFindDuplicates:

    def test_near_duplicates(self, database):
        pairs = find_duplicates(database)
        assert len(pairs) == 1
        assert (pairs[0].first, pairs[0].second) == (0, 1)
        assert pairs[0].similarity > 0.95

    def test_sorted_descending(self):
        rows = [[1.0, 0.0], [1.0, 0.1], [1.0, 0.3]]
        pairs = find_duplicates(rows, threshold=0.9)
        similarities = [p.similarity for p in pairs]
        assert similarities == sorted(similarities, reverse=True)
        assert all(p.first < p.second for p in pairs)

    def test_ties_keep_row_order(self):
        rows = [[1.0, 0.0], [1.0, 0.0], [1.0, 0.0]]
        pairs = find_duplicates(rows, threshold=0.5)
        assert [(p.first, p.second) for p in pairs] == [(0, 1), (0, 2), (1, 2)]

    def test_threshold_from_config(self, database):
        assert find_duplicates(database, config=SearchConfig(duplicate_threshold=-1.0)) != []
        assert len(find_duplicates(database, config=SearchConfig(duplicate_threshold=-1.0))) == 3

    def test_fewer_than_two_rows(self):
        assert find_duplicates([[1.0, 0.0]]) == []
        assert find_duplicates([]) == []

    def test_result_type(self, database):
        assert isinstance(find_duplicates(database)[0], DuplicatePair)


class TestClusterCohesion:

    def test_identical_items(self):
        assert float(cluster_cohesion([[1.0, 1.0], [2.0, 2.0]])) == pytest.approx(1.0, abs=1e-6)

    def test_orthogonal_items(self):
        assert float(cluster_cohesion([[1.0, 0.0], [0.0, 1.0]])) == pytest.approx(0.0, abs=1e-6)

    def test_mean_over_pairs(self):
        items = [[1.0, 0.0], [1.0, 0.0], [0.0, 1.0]]
        assert float(cluster_cohesion(items)) == pytest.approx(1.0 / 3.0, abs=1e-6)

    def test_fewer_than_two_items(self):
        assert float(cluster_cohesion([[1.0, 2.0]])) == 0.0
        assert float(cluster_cohesion([])) == 0.0


class TestTopIndices:

    def test_best_first(self):
        result = top_indices([0.1, 0.9, 0.5], 2)
        assert result == [RankedIndex(index=1, score=pytest.approx(0.9)), RankedIndex(index=2, score=pytest.approx(0.5))]

    def test_ties_keep_lower_index(self):
        result = top_indices([0.5, 0.7, 0.5, 0.7], 3)
        assert [r.index for r in result] == [1, 3, 0]

    def test_k_larger_than_n(self):
        assert len(top_indices([0.3, 0.2], 10)) == 2

    def test_k_zero(self):
        assert top_indices([0.3, 0.2], 0) == []

    def test_negative_k(self):
        with pytest.raises(ValueError, match="non-negative"):
            top_indices([0.3], -1)

    def test_labels(self):
        result = top_indices([0.2, 0.8], 1, labels=["tea", "coffee"])
        assert result == [RankedLabel(label="coffee", score=pytest.approx(0.8))]

    def test_label_count_mismatch(self):
        with pytest.raises(DimensionMismatch):
            top_indices([0.2, 0.8], 1, labels=["tea"])


class TestSemanticSearch:

    def test_search_with_labels(self, database):
        result = semantic_search(
            [0.0, 0.1, 1.0],
            database,
            labels=["a", "b", "c"],
            config=SearchConfig(top_k=2),
        )
        assert [r.label for r in result] == ["c", "b"]

    def test_search_end_to_end(self, embeddings):
        from quiver.semantic.tokenizer import embed_text

        products = ["running shoes", "coffee mug", "comfortable sneakers"]
        database = jnp.stack([embed_text(p, embeddings) for p in products])
        query = embed_text("sneakers for running", embeddings)
        result = semantic_search(query, database, labels=products, config=SearchConfig(top_k=1))
        assert result[0].label in ("running shoes", "comfortable sneakers")
        assert result[0].label != "coffee mug"
