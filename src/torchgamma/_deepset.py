"""Gamma density over nested records, written back in place."""

from __future__ import annotations

import math
from typing import Any, Sequence

from ._number import as_finite_number
from ._partial import bind
from ._path import RecordPath


def deepset_pdf(
    records: Sequence[Any],
    alpha: float,
    beta: float,
    path: str,
    sep: str = ".",
) -> Sequence[Any]:
    """Replace the value at ``path`` in each record by its gamma density.

    This mutates ``records``. Every path is resolved before the first write,
    so a :class:`PathError` leaves the records untouched. Leaves that are
    not finite real numbers are set to NaN.

    Parameters
    ----------
    records : Sequence
        Nested records (mappings and sequences).
    alpha : float
        Shape parameter.
    beta : float
        Rate parameter.
    path : str
        Delimited path to the value, e.g. ``"x.1"``.
    sep : str, optional
        Path separator. Default is ``"."``.

    Returns
    -------
    Sequence
        ``records``.

    Examples
    --------
    >>> data = [{"x": [9, 1]}]
    >>> deepset_pdf(data, 1.0, 2.0, "x/1", sep="/")
    [{'x': [9, 0.2706705664732254]}]
    """
    record_path = RecordPath.parse(path, sep)
    slots = [record_path.locate(record) for record in records]
    pdf = bind(alpha, beta)
    for node, key in slots:
        number = as_finite_number(node[key])
        if number is None:
            node[key] = math.nan
        else:
            node[key] = pdf(number)
    return records
