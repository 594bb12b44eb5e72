"""torchgamma: gamma probability density over numbers, sequences and tensors.

Example
-------
>>> import torch
>>> from torchgamma import bind, pdf
>>>
>>> pdf(1.0)
0.36787944117144233
>>> pdf(torch.tensor([0.5, 1.0, 2.0]), alpha=2.0, beta=1.0)
tensor([0.3033, 0.3679, 0.2707], dtype=torch.float64)
>>>
>>> density = bind(2.0, 1.0)
>>> density(1.0)
0.36787944117144233
"""

from ._accessor import accessor_pdf
from ._array import array_pdf
from ._deepset import deepset_pdf
from ._dtype import DTYPES, GENERIC, resolve_dtype
from ._exceptions import (
    DTypeMismatchError,
    GammaPDFError,
    PathError,
    ShapeMismatchError,
    UnsupportedDTypeError,
)
from ._input_kind import InputKind, classify
from ._matrix import matrix_pdf
from ._number import number_pdf
from ._options import PDFOptions
from ._partial import GammaDensity, bind
from ._path import RecordPath
from ._pdf import pdf
from ._typed_array import typed_array_pdf

__all__ = [
    "pdf",
    # Element-wise evaluators
    "number_pdf",
    "bind",
    "GammaDensity",
    "array_pdf",
    "typed_array_pdf",
    "accessor_pdf",
    "deepset_pdf",
    "matrix_pdf",
    # Dispatch
    "InputKind",
    "classify",
    "PDFOptions",
    "RecordPath",
    "DTYPES",
    "GENERIC",
    "resolve_dtype",
    # Exceptions
    "GammaPDFError",
    "ShapeMismatchError",
    "UnsupportedDTypeError",
    "DTypeMismatchError",
    "PathError",
]

__version__ = "0.1.0"
