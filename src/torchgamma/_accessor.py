"""Gamma density over records addressed by an accessor."""

from __future__ import annotations

import math
from typing import Any, Callable, MutableSequence, Sequence

from ._exceptions import ShapeMismatchError
from ._number import as_finite_number
from ._partial import bind


def accessor_pdf(
    out: MutableSequence[Any],
    records: Sequence[Any],
    alpha: float,
    beta: float,
    accessor: Callable[[Any], Any],
) -> MutableSequence[Any]:
    """Evaluate the gamma density for a value extracted from each record.

    Extracted values that are not finite real numbers evaluate to NaN.

    Parameters
    ----------
    out : MutableSequence
        Output, written in place. Extended when shorter than ``records``.
        May be ``records`` itself.
    records : Sequence
        Arbitrary records.
    alpha : float
        Shape parameter.
    beta : float
        Rate parameter.
    accessor : callable
        Maps a record to its value.

    Returns
    -------
    MutableSequence
        ``out``.
    """
    n = len(records)
    if len(out) > n:
        raise ShapeMismatchError(
            f"output is longer than the input: {len(out)} > {n}"
        )
    pdf = bind(alpha, beta)
    values = []
    for record in records:
        number = as_finite_number(accessor(record))
        if number is None:
            values.append(math.nan)
        else:
            values.append(pdf(number))
    out.extend([math.nan] * (n - len(out)))
    for i, value in enumerate(values):
        out[i] = value
    return out
