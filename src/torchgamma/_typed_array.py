"""Gamma density over fixed-width numeric buffers."""

from __future__ import annotations

import numpy
from torch import Tensor

from ._dtype import as_tensor, write
from ._exceptions import ShapeMismatchError
from ._partial import bind

Buffer = Tensor | numpy.ndarray


def typed_array_pdf(out: Buffer, x: Buffer, alpha: float, beta: float) -> Buffer:
    """Evaluate the gamma density for each element of a 1-D buffer.

    Results are written into ``out`` and cast to its dtype; integer outputs
    truncate toward zero. ``out`` may be ``x`` itself.

    Parameters
    ----------
    out : Tensor or numpy.ndarray
        Output buffer, written in place.
    x : Tensor or numpy.ndarray
        Input buffer with the same length as ``out``.
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
        If ``out`` and ``x`` differ in length.
    """
    if len(out) != len(x):
        raise ShapeMismatchError(
            f"input and output buffers must be the same length, "
            f"got {len(x)} and {len(out)}"
        )
    write(out, bind(alpha, beta).evaluate(as_tensor(x)))
    return out
