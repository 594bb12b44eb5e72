"""Gamma density exceptions."""

__all__ = [
    "GammaPDFError",
    "ShapeMismatchError",
    "UnsupportedDTypeError",
    "DTypeMismatchError",
    "PathError",
]


class GammaPDFError(ValueError):
    """Base exception for gamma density usage errors."""

    pass


class ShapeMismatchError(GammaPDFError):
    """Raised when output and input element counts differ."""

    pass


class UnsupportedDTypeError(GammaPDFError):
    """Raised when an output data type name is not recognized."""

    pass


class DTypeMismatchError(GammaPDFError):
    """Raised when an in-place evaluation cannot alias the input storage."""

    pass


class PathError(GammaPDFError):
    """Raised when a record path is malformed or cannot be resolved."""

    pass
