"""Testing utilities for torchgamma."""

from . import strategies

__all__ = ["strategies"]
