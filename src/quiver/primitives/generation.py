"""Constructors for vectors and matrices."""

from __future__ import annotations

from typing import Any

import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Float, Num

from quiver.types.arrays import ArrayLike, Scalar
from quiver.types.errors import EmptyInput
from quiver.types.invariants import as_vector


def _check_count(count: int, name: str = "Count") -> None:
    if count < 0:
        raise ValueError(f"{name} must be non-negative, got {count}")


def _check_dims(rows: int, columns: int) -> None:
    if rows < 0 or columns < 0:
        raise ValueError(f"Dimensions must be non-negative, got ({rows}, {columns})")


def zeros(count: int, dtype: Any = None) -> Num[Array, "n"]:
    """Vector of ``count`` zeros."""
    _check_count(count)
    return jnp.zeros(count, dtype=dtype)


def ones(count: int, dtype: Any = None) -> Num[Array, "n"]:
    """Vector of ``count`` ones."""
    _check_count(count)
    return jnp.ones(count, dtype=dtype)


def full(count: int, value: Scalar) -> Num[Array, "n"]:
    """Vector of ``count`` copies of ``value``; dtype follows ``value``."""
    _check_count(count)
    return jnp.full(count, value)


def zeros_matrix(rows: int, columns: int, dtype: Any = None) -> Num[Array, "r c"]:
    """``rows x columns`` matrix of zeros."""
    _check_dims(rows, columns)
    return jnp.zeros((rows, columns), dtype=dtype)


def ones_matrix(rows: int, columns: int, dtype: Any = None) -> Num[Array, "r c"]:
    """``rows x columns`` matrix of ones."""
    _check_dims(rows, columns)
    return jnp.ones((rows, columns), dtype=dtype)


def full_matrix(rows: int, columns: int, value: Scalar) -> Num[Array, "r c"]:
    """``rows x columns`` matrix filled with ``value``."""
    _check_dims(rows, columns)
    return jnp.full((rows, columns), value)


def identity(n: int, dtype: Any = None) -> Num[Array, "n n"]:
    """
    ``n x n`` identity matrix.

    Raises:
        EmptyInput: If ``n`` is not positive.
    """
    if n <= 0:
        raise EmptyInput(f"Matrix dimension must be positive, got {n}")
    return jnp.eye(n, dtype=dtype)


def diag(vector: ArrayLike) -> Num[Array, "n n"]:
    """
    Square matrix with ``vector`` on the diagonal and zeros elsewhere.

    Raises:
        EmptyInput: If ``vector`` is empty.
    """
    v = as_vector(vector)
    if v.shape[0] == 0:
        raise EmptyInput("Vector must not be empty")
    return jnp.diag(v)


def linspace(start: float, stop: float, num: int) -> Float[Array, "n"]:
    """
    ``num`` evenly spaced values from ``start`` to ``stop`` inclusive.

    A single sample is ``[start]``.
    """
    if num <= 0:
        raise ValueError(f"Number of samples must be positive, got {num}")
    if num == 1:
        return jnp.asarray([start], dtype=jnp.result_type(float))
    return jnp.linspace(start, stop, num)


def arange(start: Scalar, stop: Scalar, step: Scalar = 1) -> Num[Array, "n"]:
    """
    Values from ``start`` towards ``stop`` (exclusive) in increments of ``step``.

    A negative step counts down; the dtype follows the arguments.
    """
    if step == 0:
        raise ValueError("Step size cannot be zero")
    return jnp.arange(start, stop, step)


def _uniform(shape: tuple[int, ...]) -> Float[Array, "..."]:
    # Drawn in the result dtype so samples stay strictly below 1.0.
    dtype = np.dtype(jnp.result_type(float))
    return jnp.asarray(np.random.default_rng().random(shape, dtype=dtype))


def random(count: int, *, key: jax.Array | None = None) -> Float[Array, "n"]:
    """
    Vector of uniform samples in ``[0, 1)``.

    Without ``key`` the samples come from NumPy's default generator seeded
    from OS entropy, so results are not reproducible. Passing a
    ``jax.random.PRNGKey`` draws from JAX's generator instead.
    """
    _check_count(count)
    if key is not None:
        return jax.random.uniform(key, (count,))
    return _uniform((count,))


def random_matrix(
    rows: int,
    columns: int,
    *,
    key: jax.Array | None = None,
) -> Float[Array, "r c"]:
    """``rows x columns`` matrix of uniform samples in ``[0, 1)``."""
    if rows <= 0 or columns <= 0:
        raise ValueError(f"Dimensions must be positive, got ({rows}, {columns})")
    if key is not None:
        return jax.random.uniform(key, (rows, columns))
    return _uniform((rows, columns))
