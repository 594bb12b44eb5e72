"""Gamma density with partially applied parameters."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

import torch
from torch import Tensor

from ._number import as_number, density, log_normalization


@dataclass(frozen=True)
class GammaDensity:
    """Gamma probability density function with fixed parameters.

    The log normalization constant is computed once at construction, so
    repeated evaluation only pays for the ``x``-dependent terms.

    Parameters
    ----------
    alpha : float
        Shape parameter.
    beta : float
        Rate parameter.

    Examples
    --------
    >>> pdf = GammaDensity(alpha=2.0, beta=1.0)
    >>> pdf(1.0)
    0.36787944117144233
    >>> pdf.evaluate(torch.tensor([0.0, 1.0, 2.0]))
    tensor([0.0000, 0.3679, 0.2707], dtype=torch.float64)
    """

    alpha: float
    beta: float
    log_normalization: float = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "log_normalization",
            log_normalization(self.alpha, self.beta),
        )

    def __call__(self, x: float) -> float:
        """Evaluate the density at a single value."""
        number = as_number(x)
        value = torch.tensor(
            math.nan if number is None else number, dtype=torch.float64
        )
        return float(self.evaluate(value))

    def evaluate(self, x: Tensor) -> Tensor:
        """Evaluate the density element-wise, returning a ``float64`` tensor."""
        return density(x, self.alpha, self.beta, self.log_normalization)


def bind(alpha: float, beta: float) -> GammaDensity:
    """Partially apply ``alpha`` and ``beta``.

    Parameters
    ----------
    alpha : float
        Shape parameter.
    beta : float
        Rate parameter.

    Returns
    -------
    GammaDensity
        Reusable single-argument density.
    """
    return GammaDensity(alpha=float(alpha), beta=float(beta))
