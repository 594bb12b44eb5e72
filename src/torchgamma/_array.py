"""Gamma density over plain sequences."""

from __future__ import annotations

import math
from typing import Any, MutableSequence, Sequence

import torch
from torch import Tensor

from ._exceptions import ShapeMismatchError
from ._number import as_number
from ._partial import bind


def array_pdf(
    out: MutableSequence[Any] | Tensor,
    x: Sequence[Any],
    alpha: float,
    beta: float,
) -> MutableSequence[Any] | Tensor:
    """Evaluate the gamma density for each element of a sequence.

    Elements that are not real numbers (``None``, booleans, strings,
    containers) evaluate to NaN. ``out`` may be ``x`` itself.

    Parameters
    ----------
    out : MutableSequence or Tensor
        Output, written in place. A 1-D tensor receives values cast to its
        dtype.
    x : Sequence
        Input values.
    alpha : float
        Shape parameter.
    beta : float
        Rate parameter.

    Returns
    -------
    MutableSequence or Tensor
        ``out``.
    """
    if len(out) != len(x):
        raise ShapeMismatchError(
            f"input and output arrays must be the same length, "
            f"got {len(x)} and {len(out)}"
        )
    numbers = [as_number(value) for value in x]
    values = torch.tensor(
        [math.nan if number is None else number for number in numbers],
        dtype=torch.float64,
    )
    result = bind(alpha, beta).evaluate(values)
    if isinstance(out, Tensor):
        out.copy_(result)
        return out
    for i, value in enumerate(result.tolist()):
        out[i] = value
    return out
