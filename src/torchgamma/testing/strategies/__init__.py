"""Hypothesis strategies for gamma density testing."""

from ._gamma_parameters import gamma_parameters
from ._gamma_support import inside_support, outside_support
from ._matrix_shapes import matrix_shapes
from ._output_dtypes import floating_output_dtypes

__all__ = [
    # Numeric strategies
    "inside_support",
    "outside_support",
    "gamma_parameters",
    # Tensor strategies
    "matrix_shapes",
    # Dtype strategies
    "floating_output_dtypes",
]
