"""Numeric kernel: arithmetic, broadcasting, vector and matrix algebra."""

from quiver.primitives.arithmetic import add, subtract, multiply, divide
from quiver.primitives.broadcast import (
    add_scalar,
    subtract_scalar,
    multiply_scalar,
    divide_scalar,
    scalar_add,
    scalar_subtract,
    scalar_multiply,
    scalar_divide,
    add_to_each_row,
    add_to_each_column,
    subtract_from_each_row,
    subtract_from_each_column,
    multiply_each_row,
    multiply_each_column,
    divide_each_row,
    divide_each_column,
    broadcast_with,
    broadcast_with_row,
    broadcast_with_column,
)
from quiver.primitives.vector_ops import (
    dot,
    magnitude,
    normalized,
    cosine_of_angle,
    angle,
    angle_in_degrees,
    distance,
    scalar_projection,
    vector_projection,
    orthogonal_component,
)
from quiver.primitives.matrix_ops import (
    transpose,
    multiply_matrix,
    transform,
    transformed_by,
    column,
    row,
)
from quiver.primitives.generation import (
    zeros,
    ones,
    full,
    zeros_matrix,
    ones_matrix,
    full_matrix,
    identity,
    diag,
    linspace,
    arange,
    random,
    random_matrix,
)
from quiver.primitives.boolean import (
    is_equal,
    is_greater_than,
    is_less_than,
    is_greater_than_or_equal,
    is_less_than_or_equal,
    logical_and,
    logical_or,
    logical_not,
    true_indices,
    masked,
    choose,
)
from quiver.primitives import elementwise

__all__ = [
    "add",
    "subtract",
    "multiply",
    "divide",
    "add_scalar",
    "subtract_scalar",
    "multiply_scalar",
    "divide_scalar",
    "scalar_add",
    "scalar_subtract",
    "scalar_multiply",
    "scalar_divide",
    "add_to_each_row",
    "add_to_each_column",
    "subtract_from_each_row",
    "subtract_from_each_column",
    "multiply_each_row",
    "multiply_each_column",
    "divide_each_row",
    "divide_each_column",
    "broadcast_with",
    "broadcast_with_row",
    "broadcast_with_column",
    "dot",
    "magnitude",
    "normalized",
    "cosine_of_angle",
    "angle",
    "angle_in_degrees",
    "distance",
    "scalar_projection",
    "vector_projection",
    "orthogonal_component",
    "transpose",
    "multiply_matrix",
    "transform",
    "transformed_by",
    "column",
    "row",
    "zeros",
    "ones",
    "full",
    "zeros_matrix",
    "ones_matrix",
    "full_matrix",
    "identity",
    "diag",
    "linspace",
    "arange",
    "random",
    "random_matrix",
    "is_equal",
    "is_greater_than",
    "is_less_than",
    "is_greater_than_or_equal",
    "is_less_than_or_equal",
    "logical_and",
    "logical_or",
    "logical_not",
    "true_indices",
    "masked",
    "choose",
    "elementwise",
]
