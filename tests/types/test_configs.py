"""Tests for configuration invariants and coercion helpers."""

import dataclasses

import jax.numpy as jnp
import numpy as np
import pytest

from quiver.types.configs import (
    DEFAULT_SEARCH_CONFIG,
    DEFAULT_STATS_CONFIG,
    HistogramConfig,
    SearchConfig,
    StatsConfig,
)
from quiver.types.errors import DimensionMismatch
from quiver.types.invariants import as_array, as_matrix, as_vector, is_ragged


class TestConfigs:

    def test_defaults(self):
        assert DEFAULT_STATS_CONFIG.ddof == 0
        assert DEFAULT_STATS_CONFIG.outlier_threshold == 2.0
        assert DEFAULT_SEARCH_CONFIG.top_k == 5
        assert DEFAULT_SEARCH_CONFIG.duplicate_threshold == 0.95

    def test_frozen(self):
        with pytest.raises(dataclasses.FrozenInstanceError):
            DEFAULT_SEARCH_CONFIG.top_k = 10

    @pytest.mark.parametrize(
        "factory",
        [
            lambda: StatsConfig(ddof=-1),
            lambda: StatsConfig(outlier_threshold=-0.5),
            lambda: SearchConfig(top_k=-1),
            lambda: SearchConfig(duplicate_threshold=1.5),
            lambda: HistogramConfig(bins=0),
        ],
    )
    def test_invalid_values(self, factory):
        with pytest.raises(ValueError):
            factory()


class TestCoercion:

    def test_as_vector_accepts_sequences_and_arrays(self):
        assert as_vector((1, 2)).shape == (2,)
        assert as_vector(np.array([1.0, 2.0, 3.0])).shape == (3,)

    def test_as_vector_rejects_matrix(self):
        with pytest.raises(DimensionMismatch, match="Expected a vector"):
            as_vector([[1, 2]])

    def test_empty_matrix(self):
        assert as_matrix([]).shape == (0, 0)
        assert as_matrix([[], []]).shape == (2, 0)

    def test_mixed_scalars_and_rows(self):
        with pytest.raises(DimensionMismatch, match="mix"):
            as_array([1, [2, 3]])

    def test_higher_rank_rejected(self):
        with pytest.raises(DimensionMismatch):
            as_array(jnp.zeros((2, 2, 2)))

    def test_is_ragged(self):
        assert is_ragged([[1, 2], [3]])
        assert not is_ragged([[1, 2], [3, 4]])
        assert not is_ragged([1, 2, 3])
        assert not is_ragged([])
