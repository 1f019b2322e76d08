"""Cauchy distribution log-density and cumulative distribution function.

``Cauchy(y | mu, sigma)`` with location ``mu`` and scale ``sigma > 0``:

    log p(y) = -log(pi) - log(sigma) - log1p(((y - mu) / sigma)^2)
    F(y)     = atan2(y - mu, sigma) / pi + 1/2

Arguments may be Python numbers, NumPy scalars/arrays or torch tensors.
They broadcast against each other, and the result takes the promoted type
of all three (see :func:`pycauchy.backend.promote_args`).
"""

from __future__ import annotations

import math

from pycauchy.backend._array_api import promote_args
from pycauchy.distributions._normalization import Normalization
from pycauchy.utils._policy import ErrorPolicy
from pycauchy.utils._validation import (
    ResultHandle,
    check_finite,
    check_not_nan,
    check_positive,
)

NEG_LOG_PI = -math.log(math.pi)

# |y - mu| / sigma above which the squared ratio is not formed; its square
# stays finite in float32.
_LARGE_RATIO = 1e15


def _log1p_square_ratio(xp, d, sigma):
    """log1p((d / sigma)**2), without overflow for large ratios.

    For |d / sigma| > _LARGE_RATIO this uses the equivalent
    2*log|d / sigma| + log1p((sigma / d)**2).
    """
    big = xp.abs(d) / _LARGE_RATIO > sigma
    small = xp.log1p(xp.square(xp.where(big, 0.0, d) / sigma))
    d_big = xp.where(big, d, sigma)
    large = 2.0 * (xp.log(xp.abs(d_big)) - xp.log(sigma)) + xp.log1p(
        xp.square(sigma / d_big)
    )
    return xp.where(big, large, small)


def cauchy_log(
    y,
    mu,
    sigma,
    policy: ErrorPolicy | None = None,
    normalization: Normalization | None = None,
    *,
    propto: bool = False,
):
    """Log of the Cauchy probability density.

    Parameters
    ----------
    y : float, ndarray or Tensor
        Variate. Must not be NaN; infinite values are allowed.
    mu : float, ndarray or Tensor
        Location parameter. Must be finite.
    sigma : float, ndarray or Tensor
        Scale parameter. Must be finite and > 0.
    policy : ErrorPolicy, optional
        Failure policy. Defaults to :func:`~pycauchy.utils.get_default_policy`,
        which raises a :class:`~pycauchy.utils.DomainError`.
    normalization : Normalization, optional
        Terms to include. If None, inferred from ``propto`` and which
        arguments track gradients (see :meth:`Normalization.infer`).
    propto : bool
        Drop terms that are constant with respect to the variable
        arguments. Ignored when ``normalization`` is given.

    Returns
    -------
    lp : scalar, ndarray or Tensor
        Log-density in the promoted type, or the policy sentinel if an
        argument is invalid.

    Examples
    --------
    >>> round(float(cauchy_log(0.0, 0.0, 1.0)), 5)
    -1.14473
    """
    function = "pycauchy.cauchy_log"
    promoted = promote_args(y, mu, sigma)
    y, mu, sigma = (promoted.convert(a) for a in (y, mu, sigma))
    xp = promoted.backend
    result = ResultHandle(promoted, xp.broadcast_shape(y, mu, sigma))

    # y is only checked for NaN: +/-inf is a valid variate.
    if not check_not_nan(function, y, "Random variate, y,", result, policy, stacklevel=2):
        return result.value
    if not check_finite(function, mu, "Location parameter, mu,", result, policy, stacklevel=2):
        return result.value
    if not check_finite(function, sigma, "Scale parameter, sigma,", result, policy, stacklevel=2):
        return result.value
    if not check_positive(function, sigma, "Scale parameter, sigma,", result, policy, stacklevel=2):
        return result.value

    if normalization is None:
        normalization = Normalization.infer(propto, y, mu, sigma)

    lp = promoted.full(result.shape, 0.0)
    if normalization.include_constant:
        lp = lp + NEG_LOG_PI
    if normalization.include_scale_term:
        lp = lp - xp.log(sigma)
    if normalization.include_shape_term:
        lp = lp - _log1p_square_ratio(xp, y - mu, sigma)
    return promoted.finalize(lp)


def cauchy_cdf(y, mu, sigma, policy: ErrorPolicy | None = None):
    """Cauchy cumulative distribution function.

    F(y) = atan2(y - mu, sigma) / pi + 0.5

    The two-argument arctangent keeps the sign of ``y - mu`` near zero and
    stays accurate for extreme ratios; ``F(mu) == 0.5`` exactly.

    Parameters
    ----------
    y : float, ndarray or Tensor
        Variate. Must not be NaN; infinite values are allowed.
    mu : float, ndarray or Tensor
        Location parameter. Must be finite.
    sigma : float, ndarray or Tensor
        Scale parameter. Must be finite and > 0.
    policy : ErrorPolicy, optional
        Failure policy. Defaults to the global default policy.

    Returns
    -------
    p : scalar, ndarray or Tensor
        Probability in [0, 1] in the promoted type, or the policy sentinel.

    Examples
    --------
    >>> float(cauchy_cdf(1.0, 0.0, 1.0))
    0.75
    """
    function = "pycauchy.cauchy_cdf"
    promoted = promote_args(y, mu, sigma)
    y, mu, sigma = (promoted.convert(a) for a in (y, mu, sigma))
    xp = promoted.backend
    result = ResultHandle(promoted, xp.broadcast_shape(y, mu, sigma))

    # y is only checked for NaN: +/-inf is a valid variate.
    if not check_not_nan(function, y, "Random variate, y,", result, policy, stacklevel=2):
        return result.value
    if not check_finite(function, mu, "Location parameter, mu,", result, policy, stacklevel=2):
        return result.value
    if not check_finite(function, sigma, "Scale parameter, sigma,", result, policy, stacklevel=2):
        return result.value
    if not check_positive(function, sigma, "Scale parameter, sigma,", result, policy, stacklevel=2):
        return result.value

    return promoted.finalize(xp.atan2(y - mu, sigma) / xp.pi() + 0.5)


cauchy_p = cauchy_cdf
