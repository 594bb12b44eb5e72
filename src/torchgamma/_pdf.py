"""Gamma probability density over numbers, sequences, buffers and matrices."""

from __future__ import annotations

import math
import warnings
from collections.abc import MutableSequence
from typing import Any, Callable

import numpy
import torch
from torch import Tensor

from ._accessor import accessor_pdf
from ._array import array_pdf
from ._deepset import deepset_pdf
from ._dtype import (
    as_tensor,
    check_numpy_dtype,
    check_writable,
    resolve_dtype,
    storage_dtype,
)
from ._exceptions import DTypeMismatchError, UnsupportedDTypeError
from ._input_kind import InputKind, classify
from ._matrix import matrix_pdf
from ._number import as_number, number_pdf
from ._options import UNSET, PDFOptions
from ._typed_array import typed_array_pdf


def pdf(
    input: Any,
    *,
    alpha: float = 1.0,
    beta: float = 1.0,
    copy: bool = True,
    dtype: str | torch.dtype | None = None,
    accessor: Callable[[Any], Any] = UNSET,
    path: str | None = None,
    sep: str = ".",
) -> Any:
    r"""Probability density function of the gamma distribution.

    .. math::
        f(x; \alpha, \beta) = \frac{\beta^\alpha x^{\alpha-1} e^{-\beta x}}{\Gamma(\alpha)}

    Evaluates element-wise over the shape of ``input``:

    - a real number returns a float;
    - a list or tuple returns a new list of floats, or a 1-D tensor when
      ``dtype`` is given;
    - a 1-D tensor or array returns a buffer of the same kind, ``float64``
      unless ``dtype`` says otherwise;
    - a tensor or array with two or more dimensions returns a matrix of the
      same shape, ``float64`` unless ``dtype`` says otherwise;
    - with ``accessor``, a sequence of records returns a list of floats;
    - with ``path``, a sequence of nested records is updated in place;
    - anything else returns NaN.

    Elements that are not real numbers evaluate to NaN.

    Parameters
    ----------
    input : Any
        Values at which to evaluate the density.
    alpha : float, optional
        Shape parameter. Default is 1.
    beta : float, optional
        Rate parameter. Default is 1.
    copy : bool, optional
        If False, results are written into ``input``, which is returned.
        This mutates caller-owned storage. Default is True.
    dtype : str or torch.dtype, optional
        Output element type, e.g. ``"float32"``. With ``copy=False`` it must
        match the input's element type.
    accessor : callable, optional
        Extracts the value from each record of a sequence.
    path : str, optional
        Delimited path to the value inside each record. Records are always
        mutated in place.
    sep : str, optional
        Separator for ``path``. Default is ``"."``.

    Returns
    -------
    Any
        Density values shaped like ``input``.

    Raises
    ------
    TypeError
        If ``accessor`` is not callable or another option has the wrong type.
    UnsupportedDTypeError
        If ``dtype`` is not recognized.
    DTypeMismatchError
        If ``copy=False`` is combined with a ``dtype`` that cannot alias the
        input storage.
    PathError
        If ``path`` does not resolve in every record.

    Examples
    --------
    >>> pdf([-1, 0, 1, 2])
    [0.0, 1.0, 0.36787944117144233, 0.1353352832366127]
    >>> pdf(torch.tensor([[1.0, 2.0], [3.0, 4.0]]), alpha=2.0, beta=1.0)
    tensor([[0.3679, 0.2707],
            [0.1494, 0.0733]], dtype=torch.float64)
    >>> pdf([{"x": [9, 0]}], alpha=1.0, beta=2.0, path="x.1")
    [{'x': [9, 2.0]}]
    """
    options = PDFOptions.validate(
        alpha=alpha,
        beta=beta,
        copy=copy,
        dtype=dtype,
        accessor=accessor,
        path=path,
        sep=sep,
    )
    kind = classify(input)

    if kind is InputKind.NUMBER:
        if not options.copy or options.dtype is not None:
            warnings.warn(
                "copy and dtype are ignored for scalar input",
                UserWarning,
                stacklevel=2,
            )
        return number_pdf(as_number(input), options.alpha, options.beta)
    if kind is InputKind.UNSUPPORTED:
        return math.nan
    if options.accessor is not None:
        return _accessor(input, options)
    if options.path is not None:
        return _deepset(input, options)
    if kind is InputKind.SEQUENCE:
        return _sequence(input, options)
    if kind is InputKind.TYPED_ARRAY:
        return _buffer(input, options, typed_array_pdf)
    return _buffer(input, options, matrix_pdf)


def _accessor(records: Any, options: PDFOptions) -> Any:
    if options.dtype is not None:
        warnings.warn(
            "dtype is ignored when an accessor is provided",
            UserWarning,
            stacklevel=3,
        )
    if options.copy:
        out: list[float] = []
    elif isinstance(records, MutableSequence):
        out = records
    else:
        raise TypeError(
            f"copy=False requires a mutable sequence, got {type(records).__name__}"
        )
    return accessor_pdf(
        out, records, options.alpha, options.beta, options.accessor
    )


def _deepset(records: Any, options: PDFOptions) -> Any:
    if options.dtype is not None:
        warnings.warn(
            "dtype is ignored when a path is provided",
            UserWarning,
            stacklevel=3,
        )
    return deepset_pdf(
        records, options.alpha, options.beta, options.path, options.sep
    )


def _sequence(x: Any, options: PDFOptions) -> Any:
    target = None if options.dtype is None else resolve_dtype(options.dtype)
    if not options.copy:
        if not isinstance(x, MutableSequence):
            raise TypeError(
                f"copy=False requires a mutable sequence, got {type(x).__name__}"
            )
        if target is not None:
            raise DTypeMismatchError(
                f"cannot write {target} values in place into a "
                f"{type(x).__name__}"
            )
        return array_pdf(x, x, options.alpha, options.beta)
    if target is None:
        out: list[float] | Tensor = [math.nan] * len(x)
    else:
        out = torch.empty(len(x), dtype=target)
    return array_pdf(out, x, options.alpha, options.beta)


def _buffer(
    x: Tensor | numpy.ndarray,
    options: PDFOptions,
    evaluate: Callable[..., Any],
) -> Tensor | numpy.ndarray:
    if not options.copy:
        check_writable(x)
    x_t = as_tensor(x)
    if options.dtype is None:
        target = torch.float64 if options.copy else storage_dtype(x)
    else:
        target = resolve_dtype(options.dtype)
        if target is None:
            raise UnsupportedDTypeError(
                f"dtype 'generic' is not supported for {type(x).__name__} input"
            )
    if isinstance(x, numpy.ndarray):
        check_numpy_dtype(target)

    if not options.copy:
        if target != storage_dtype(x):
            raise DTypeMismatchError(
                f"cannot write {target} values in place into {x.dtype} storage"
            )
        evaluate(x, x, options.alpha, options.beta)
        return x

    out = torch.empty(x_t.shape, dtype=target, device=x_t.device)
    evaluate(out, x_t, options.alpha, options.beta)
    if isinstance(x, numpy.ndarray):
        return out.numpy()
    return out
