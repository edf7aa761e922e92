"""
Element-wise comparisons, boolean masks and conditional selection.

Every comparison produces a mask with the same length as the array it was
derived from. Two-array forms require equal lengths.
"""

from __future__ import annotations

from numbers import Number
from typing import Any, Callable, Sequence

import jax
import jax.numpy as jnp
import numpy as np
from jaxtyping import Array, Num

from quiver.types.arrays import ArrayLike, BoolMask
from quiver.types.errors import DimensionMismatch
from quiver.types.invariants import (
    as_array,
    as_mask,
    as_vector,
    assert_same_length,
)


Comparison = Callable[[jax.Array, Any], jax.Array]


def _is_scalar(value: Any) -> bool:
    if isinstance(value, Number):
        return True
    return isinstance(value, (jax.Array, np.ndarray)) and value.ndim == 0


def _compare(array: ArrayLike, other: Any, op: Comparison) -> BoolMask:
    a = as_vector(array)
    if _is_scalar(other):
        return op(a, other)
    b = as_vector(other)
    assert_same_length(a, b, "Arrays")
    return op(a, b)


def is_equal(array: ArrayLike, other: Any) -> BoolMask:
    """``array[i] == other`` (scalar) or ``array[i] == other[i]``."""
    return _compare(array, other, jnp.equal)


def is_greater_than(array: ArrayLike, other: Any) -> BoolMask:
    return _compare(array, other, jnp.greater)


def is_less_than(array: ArrayLike, other: Any) -> BoolMask:
    return _compare(array, other, jnp.less)


def is_greater_than_or_equal(array: ArrayLike, other: Any) -> BoolMask:
    return _compare(array, other, jnp.greater_equal)


def is_less_than_or_equal(array: ArrayLike, other: Any) -> BoolMask:
    return _compare(array, other, jnp.less_equal)


def logical_and(lhs: ArrayLike, rhs: ArrayLike) -> BoolMask:
    """
    Element-wise AND of two masks.

    Raises:
        DimensionMismatch: If the masks differ in length.
    """
    a = as_mask(lhs)
    b = as_mask(rhs)
    assert_same_length(a, b, "Masks")
    return jnp.logical_and(a, b)


def logical_or(lhs: ArrayLike, rhs: ArrayLike) -> BoolMask:
    """Element-wise OR of two equal-length masks."""
    a = as_mask(lhs)
    b = as_mask(rhs)
    assert_same_length(a, b, "Masks")
    return jnp.logical_or(a, b)


def logical_not(mask: ArrayLike) -> BoolMask:
    return jnp.logical_not(as_mask(mask))


def true_indices(mask: ArrayLike) -> list[int]:
    """Indices where ``mask`` is true, in ascending order."""
    return [int(i) for i in np.flatnonzero(np.asarray(as_mask(mask)))]


def _is_numeric_sequence(source: Any) -> bool:
    if isinstance(source, (jax.Array, np.ndarray)) or hasattr(source, "__jax_array__"):
        return True
    return all(isinstance(item, (Number, list, tuple)) for item in source)


def masked(source: ArrayLike | Sequence[Any], mask: ArrayLike) -> Num[Array, "k ..."] | list[Any]:
    """
    Keep the entries of ``source`` where ``mask`` is true, preserving order.

    Numeric sources (vectors, or matrices filtered by row) give a JAX array;
    any other sequence, such as a list of labels, gives a list.

    Raises:
        DimensionMismatch: If ``source`` and ``mask`` differ in length.
    """
    m = as_mask(mask)
    if _is_numeric_sequence(source):
        arr = as_array(source)
        if arr.shape[0] != m.shape[0]:
            raise DimensionMismatch(
                f"Array and mask must have the same length, got {arr.shape[0]} and {m.shape[0]}"
            )
        return arr[np.asarray(m)]
    items = list(source)
    if len(items) != m.shape[0]:
        raise DimensionMismatch(
            f"Array and mask must have the same length, got {len(items)} and {m.shape[0]}"
        )
    return [item for item, keep in zip(items, m.tolist()) if keep]


def choose(
    source: ArrayLike,
    condition: ArrayLike,
    otherwise: ArrayLike,
) -> Num[Array, "n"]:
    """
    Element-wise select: ``source[i] if condition[i] else otherwise[i]``.

    Raises:
        DimensionMismatch: Unless all three sequences share one length.
    """
    s = as_vector(source)
    c = as_mask(condition)
    o = as_vector(otherwise)
    if not s.shape[0] == c.shape[0] == o.shape[0]:
        raise DimensionMismatch(
            f"All arrays must have the same length, got {s.shape[0]}, "
            f"{c.shape[0]} and {o.shape[0]}"
        )
    return jnp.where(c, s, o)
