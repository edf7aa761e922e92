"""
Shape inspection and human-readable summaries.

Unlike the kernel, these helpers accept ragged nested lists: they report on
data rather than compute with it.
"""

from __future__ import annotations

from typing import Any

import jax.numpy as jnp
import numpy as np

from quiver.types.arrays import ArrayLike
from quiver.types.invariants import as_array, is_ragged


_PREVIEW = 5


def _is_nested(rows: list) -> bool:
    return bool(rows) and all(hasattr(row, "__len__") for row in rows)


def shape(x: ArrayLike) -> tuple[int, ...] | tuple[int, None]:
    """
    ``(n,)`` for a vector, ``(rows, columns)`` for a matrix.

    A ragged nested list reports ``(rows, None)``.
    """
    if hasattr(x, "shape"):
        return tuple(x.shape)
    rows = list(x)
    if not _is_nested(rows):
        return (len(rows),)
    if is_ragged(rows):
        return (len(rows), None)
    return (len(rows), len(rows[0]))


def is_matrix_valid(x: ArrayLike) -> bool:
    """True for a rank-2 input whose rows all have the same length, including the empty matrix."""
    if hasattr(x, "shape"):
        return len(x.shape) == 2
    rows = list(x)
    if not rows:
        return True
    return _is_nested(rows) and not is_ragged(rows)


def _format(value: Any) -> str:
    if hasattr(value, "tolist"):
        return str(np.asarray(value).tolist())
    return str(value)


def info(x: ArrayLike) -> str:
    """
    Multi-line summary: count, shape, element type and a preview.

    Floating-point data also reports mean, min and max. Ragged input is
    summarised without element type or statistics.
    """
    dims = shape(x)
    lines = ["Array Information:", f"Count: {dims[0]}", f"Shape: {dims}"]
    if None in dims:
        items = list(x)
    else:
        arr = as_array(x)
        items = list(arr)
        lines.append(f"Type: {arr.dtype}")
        if arr.size and jnp.issubdtype(arr.dtype, jnp.floating):
            lines.append(f"Mean: {float(jnp.mean(arr))}")
            lines.append(f"Min: {float(jnp.min(arr))}")
            lines.append(f"Max: {float(jnp.max(arr))}")

    if items:
        preview = items[:_PREVIEW]
        lines.append("")
        lines.append(f"First {len(preview)} items:")
        lines.extend(f"[{i}]: {_format(item)}" for i, item in enumerate(preview))
    return "\n".join(lines) + "\n"
