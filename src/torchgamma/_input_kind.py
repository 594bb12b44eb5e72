"""Classification of dispatcher inputs."""

from __future__ import annotations

import enum
import numbers
from collections.abc import Sequence
from typing import Any

import numpy
from torch import Tensor

from ._number import as_number


class InputKind(enum.Enum):
    """Shape of a value passed to :func:`torchgamma.pdf`."""

    NUMBER = "number"
    SEQUENCE = "sequence"
    TYPED_ARRAY = "typed_array"
    MATRIX = "matrix"
    UNSUPPORTED = "unsupported"


def _classify_buffer(value: Tensor | numpy.ndarray) -> InputKind:
    if isinstance(value, Tensor):
        if value.is_complex():
            return InputKind.UNSUPPORTED
    elif value.dtype.kind not in "biuf":
        # Object and string arrays are evaluated element by element.
        return InputKind.SEQUENCE if value.ndim == 1 else InputKind.UNSUPPORTED
    if value.ndim == 0:
        if as_number(value) is None:
            return InputKind.UNSUPPORTED
        return InputKind.NUMBER
    if value.ndim == 1:
        return InputKind.TYPED_ARRAY
    return InputKind.MATRIX


def classify(value: Any) -> InputKind:
    """Classify ``value`` for dispatch.

    Parameters
    ----------
    value : Any
        Candidate input.

    Returns
    -------
    InputKind
        ``NUMBER`` for real scalars (booleans excluded), ``TYPED_ARRAY`` and
        ``MATRIX`` for 1-D and N-D real tensors or arrays, ``SEQUENCE`` for
        other non-string sequences, ``UNSUPPORTED`` otherwise.
    """
    if isinstance(value, (bool, numpy.bool_)):
        return InputKind.UNSUPPORTED
    if isinstance(value, numbers.Real):
        return InputKind.NUMBER
    if isinstance(value, (Tensor, numpy.ndarray)):
        return _classify_buffer(value)
    if isinstance(value, (str, bytes, bytearray)):
        return InputKind.UNSUPPORTED
    if isinstance(value, Sequence):
        return InputKind.SEQUENCE
    return InputKind.UNSUPPORTED
