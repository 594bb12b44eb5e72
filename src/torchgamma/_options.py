"""Option validation for the gamma density dispatcher."""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Any, Callable

import torch

UNSET: Any = object()


def _check_real(name: str, value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, numbers.Real):
        raise TypeError(f"{name} must be a real number, got {value!r}")
    return float(value)


@dataclass(frozen=True)
class PDFOptions:
    """Validated options of a single :func:`torchgamma.pdf` call.

    Parameters
    ----------
    alpha : float
        Shape parameter.
    beta : float
        Rate parameter.
    copy : bool
        If False, results overwrite the input.
    dtype : str or torch.dtype, optional
        Output element type.
    accessor : callable, optional
        Extracts a value from each record.
    path : str, optional
        Delimited path to a value inside each record.
    sep : str
        Path separator.
    """

    alpha: float = 1.0
    beta: float = 1.0
    copy: bool = True
    dtype: str | torch.dtype | None = None
    accessor: Callable[[Any], Any] | None = None
    path: str | None = None
    sep: str = "."

    @classmethod
    def validate(
        cls,
        *,
        alpha: Any = 1.0,
        beta: Any = 1.0,
        copy: Any = True,
        dtype: Any = None,
        accessor: Any = UNSET,
        path: Any = None,
        sep: Any = ".",
    ) -> PDFOptions:
        """Check option types before any input is touched.

        ``accessor`` is left unset by default; any explicitly passed value,
        ``None`` included, must be callable.

        Raises
        ------
        TypeError
            If an option has the wrong type.
        ValueError
            If ``sep`` is empty.
        """
        if accessor is not UNSET and not callable(accessor):
            raise TypeError(f"accessor must be callable, got {accessor!r}")
        if not isinstance(copy, bool):
            raise TypeError(f"copy must be a bool, got {copy!r}")
        if dtype is not None and not isinstance(dtype, (str, torch.dtype)):
            raise TypeError(
                f"dtype must be a string or torch.dtype, got {dtype!r}"
            )
        if path is not None and not isinstance(path, str):
            raise TypeError(f"path must be a string, got {path!r}")
        if not isinstance(sep, str):
            raise TypeError(f"sep must be a string, got {sep!r}")
        if not sep:
            raise ValueError("sep must be a non-empty string")
        return cls(
            alpha=_check_real("alpha", alpha),
            beta=_check_real("beta", beta),
            copy=copy,
            dtype=dtype,
            accessor=None if accessor is UNSET else accessor,
            path=path,
            sep=sep,
        )
