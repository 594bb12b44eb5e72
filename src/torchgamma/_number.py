"""Gamma probability density for a single value."""

from __future__ import annotations

import math
import numbers
from typing import Any

import numpy
import torch
from torch import Tensor


def as_number(value: Any) -> float | None:
    """Return ``value`` as a float, or None when it is not a real number.

    Booleans are not numbers here, even though ``bool`` subclasses ``int``.
    Zero-dimensional real tensors and arrays are unwrapped. Integers too
    large for a float become signed infinity.
    """
    if isinstance(value, (bool, numpy.bool_)):
        return None
    if isinstance(value, numbers.Real):
        try:
            return float(value)
        except OverflowError:
            return math.inf if value > 0 else -math.inf
    if isinstance(value, Tensor) and value.ndim == 0:
        if value.dtype == torch.bool or value.is_complex():
            return None
        return float(value.item())
    if isinstance(value, numpy.ndarray) and value.ndim == 0:
        if value.dtype.kind not in "iuf":
            return None
        return float(value.item())
    return None


def as_finite_number(value: Any) -> float | None:
    """Like :func:`as_number`, but None for NaN and infinities as well."""
    number = as_number(value)
    if number is None or not math.isfinite(number):
        return None
    return number


def log_normalization(alpha: float, beta: float) -> float:
    r"""Log of the gamma normalization constant.

    .. math::
        \alpha \log\beta - \log\Gamma(\alpha)

    Invalid parameters yield NaN or infinity rather than raising.
    """
    alpha_t = torch.tensor(float(alpha), dtype=torch.float64)
    beta_t = torch.tensor(float(beta), dtype=torch.float64)
    return float(alpha_t * torch.log(beta_t) - torch.lgamma(alpha_t))


def density(
    x: Tensor, alpha: float, beta: float, log_normalization: float
) -> Tensor:
    r"""Evaluate the gamma density element-wise in double precision.

    .. math::
        f(x; \alpha, \beta) = \exp\left(\alpha \log\beta - \log\Gamma(\alpha)
            + (\alpha - 1) \log x - \beta x\right)

    Negative values map to zero. At ``x == 0`` the term
    :math:`(\alpha - 1) \log x` is taken as zero when :math:`\alpha = 1`, so
    the density evaluates to its limit: infinity for :math:`\alpha < 1`,
    :math:`\beta` for :math:`\alpha = 1` and zero for :math:`\alpha > 1`.

    Parameters
    ----------
    x : Tensor
        Values of any shape and real dtype.
    alpha : float
        Shape parameter.
    beta : float
        Rate parameter.
    log_normalization : float
        Precomputed :func:`log_normalization` of ``alpha`` and ``beta``.

    Returns
    -------
    Tensor
        ``float64`` tensor with the shape of ``x``.
    """
    x = x.to(torch.float64)
    log_pdf = (
        log_normalization
        + torch.special.xlogy(x.new_tensor(float(alpha) - 1.0), x)
        - float(beta) * x
    )
    return torch.where(x < 0, torch.zeros_like(x), torch.exp(log_pdf))


def number_pdf(x: float, alpha: float, beta: float) -> float:
    r"""Probability density function of the gamma distribution at ``x``.

    .. math::
        f(x; \alpha, \beta) = \frac{\beta^\alpha x^{\alpha-1} e^{-\beta x}}{\Gamma(\alpha)}

    Parameters
    ----------
    x : float
        Value at which to evaluate the density.
    alpha : float
        Shape parameter. Should be positive.
    beta : float
        Rate parameter. Should be positive.

    Returns
    -------
    float
        Density value. Zero for ``x < 0``; NaN when ``x`` is NaN.

    Examples
    --------
    >>> number_pdf(1.0, 1.0, 1.0)
    0.36787944117144233
    >>> number_pdf(-1.0, 2.0, 1.0)
    0.0
    """
    number = as_number(x)
    value = torch.tensor(
        math.nan if number is None else number, dtype=torch.float64
    )
    return float(density(value, alpha, beta, log_normalization(alpha, beta)))
