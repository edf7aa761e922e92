"""Tests for shape inspection and summaries."""

import jax.numpy as jnp

from quiver import Vector, info, is_matrix_valid, shape


class TestShape:

    def test_vector_and_matrix(self):
        assert shape([1, 2, 3]) == (3,)
        assert shape([[1, 2, 3], [4, 5, 6]]) == (2, 3)
        assert shape(jnp.zeros((4, 2))) == (4, 2)

    def test_ragged_tolerated(self):
        assert shape([[1, 2], [3]]) == (2, None)

    def test_empty(self):
        assert shape([]) == (0,)

    def test_wrapper(self):
        assert shape(Vector([1.0, 2.0])) == (2,)


class TestIsMatrixValid:

    def test_valid(self):
        assert is_matrix_valid([[1, 2], [3, 4]])
        assert is_matrix_valid([])
        assert is_matrix_valid(jnp.ones((2, 2)))

    def test_invalid(self):
        assert not is_matrix_valid([[1, 2], [3]])
        assert not is_matrix_valid([1, 2, 3])


class TestInfo:

    def test_float_summary(self):
        text = info([1.0, 2.0, 3.0])
        assert text.startswith("Array Information:\n")
        assert "Count: 3" in text
        assert "Shape: (3,)" in text
        assert "Mean: 2.0" in text
        assert "Min: 1.0" in text
        assert "Max: 3.0" in text
        assert "[2]: 3.0" in text

    def test_integer_summary_has_no_statistics(self):
        text = info(jnp.array([1, 2]))
        assert "Type: int32" in text
        assert "Mean" not in text

    def test_preview_limited_to_five(self):
        text = info(list(range(10)))
        assert "First 5 items:" in text
        assert "[4]: 4" in text
        assert "[5]:" not in text

    def test_matrix_preview_shows_rows(self):
        text = info([[1.0, 2.0], [3.0, 4.0]])
        assert "Shape: (2, 2)" in text
        assert "[1]: [3.0, 4.0]" in text

    def test_ragged_summary(self):
        text = info([[1, 2], [3]])
        assert "Shape: (2, None)" in text
        assert "[1]: [3]" in text

    def test_empty(self):
        text = info([])
        assert "Count: 0" in text
        assert "First" not in text
