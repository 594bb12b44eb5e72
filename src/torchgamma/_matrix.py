"""Gamma density over dense matrices."""

from __future__ import annotations

import math

import numpy
from torch import Tensor

from ._dtype import as_tensor, write
from ._exceptions import ShapeMismatchError
from ._partial import bind

Matrix = Tensor | numpy.ndarray


def matrix_pdf(out: Matrix, x: Matrix, alpha: float, beta: float) -> Matrix:
    """Evaluate the gamma density for each element of a matrix.

    ``x`` is read in row-major order and written positionally into ``out``,
    which keeps its own shape and dtype. Only the element counts must agree.

    Parameters
    ----------
    out : Tensor or numpy.ndarray
        Output matrix, written in place.
    x : Tensor or numpy.ndarray
        Input matrix.
    alpha : float
        Shape parameter.
    beta : float
        Rate parameter.

    Returns
    -------
    Tensor or numpy.ndarray
        ``out``.

    Raises
    ------
    ShapeMismatchError
        If ``out`` and ``x`` hold a different number of elements.
    """
    x_t = as_tensor(x)
    out_shape = tuple(out.shape)
    if math.prod(out_shape) != x_t.numel():
        raise ShapeMismatchError(
            f"input and output matrices must have the same number of elements, "
            f"got {tuple(x_t.shape)} and {out_shape}"
        )
    write(out, bind(alpha, beta).evaluate(x_t.reshape(-1)))
    return out
