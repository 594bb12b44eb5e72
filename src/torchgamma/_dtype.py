"""Output data types and tensor views of numeric buffers."""

from __future__ import annotations

from typing import Any

import numpy
import torch
from torch import Tensor

from ._exceptions import GammaPDFError, UnsupportedDTypeError

GENERIC = "generic"

DTYPES: dict[str, torch.dtype] = {
    "float16": torch.float16,
    "bfloat16": torch.bfloat16,
    "float32": torch.float32,
    "float64": torch.float64,
    "int8": torch.int8,
    "int16": torch.int16,
    "int32": torch.int32,
    "int64": torch.int64,
    "uint8": torch.uint8,
}


def resolve_dtype(dtype: str | torch.dtype) -> torch.dtype | None:
    """Map an output data type name to a ``torch.dtype``.

    Parameters
    ----------
    dtype : str or torch.dtype
        One of the names in :data:`DTYPES`, ``"generic"``, or a supported
        ``torch.dtype``.

    Returns
    -------
    torch.dtype or None
        None for ``"generic"``, which denotes a plain Python list.

    Raises
    ------
    UnsupportedDTypeError
        If ``dtype`` is not recognized.
    """
    if isinstance(dtype, torch.dtype):
        if dtype in DTYPES.values():
            return dtype
        raise UnsupportedDTypeError(f"unsupported output dtype: {dtype}")
    if dtype == GENERIC:
        return None
    try:
        return DTYPES[dtype]
    except KeyError:
        supported = ", ".join([*DTYPES, GENERIC])
        raise UnsupportedDTypeError(
            f"unrecognized/unsupported output dtype {dtype!r}; "
            f"expected one of: {supported}"
        ) from None


NUMPY_DTYPES: dict[numpy.dtype, torch.dtype] = {
    numpy.dtype("bool"): torch.bool,
    numpy.dtype("uint8"): torch.uint8,
    numpy.dtype("int8"): torch.int8,
    numpy.dtype("int16"): torch.int16,
    numpy.dtype("int32"): torch.int32,
    numpy.dtype("int64"): torch.int64,
    numpy.dtype("float16"): torch.float16,
    numpy.dtype("float32"): torch.float32,
    numpy.dtype("float64"): torch.float64,
}


def storage_dtype(value: Tensor | numpy.ndarray) -> torch.dtype | None:
    """Element type of ``value`` as a ``torch.dtype``.

    None for NumPy dtypes torch cannot view, e.g. ``longdouble`` or
    ``uint32``.
    """
    if isinstance(value, Tensor):
        return value.dtype
    return NUMPY_DTYPES.get(value.dtype)


def as_tensor(value: Tensor | numpy.ndarray) -> Tensor:
    """Tensor holding the values of ``value``, for reading.

    Shares memory with NumPy arrays where torch can view them. Arrays with
    negative strides are made contiguous first, and dtypes without a torch
    counterpart are read as ``float64``.
    """
    if isinstance(value, Tensor):
        return value
    if value.dtype not in NUMPY_DTYPES:
        value = value.astype(numpy.float64)
    elif any(stride < 0 for stride in value.strides):
        value = numpy.ascontiguousarray(value)
    return torch.from_numpy(value)


def write(out: Tensor | numpy.ndarray, values: Tensor) -> None:
    """Write ``values`` into ``out`` positionally, cast to the dtype of ``out``.

    Integer outputs truncate toward zero.
    """
    values = values.reshape(tuple(out.shape))
    if isinstance(out, Tensor):
        out.copy_(values)
    else:
        numpy.copyto(out, values.detach().cpu().numpy(), casting="unsafe")


def check_numpy_dtype(dtype: torch.dtype) -> None:
    """Raise when ``dtype`` has no NumPy counterpart."""
    if dtype == torch.bfloat16:
        raise UnsupportedDTypeError("bfloat16 output is not supported for NumPy input")


def check_writable(value: Any) -> None:
    """Raise when a NumPy buffer cannot be written in place."""
    if isinstance(value, numpy.ndarray) and not value.flags.writeable:
        raise GammaPDFError("cannot evaluate in place: array is read-only")
