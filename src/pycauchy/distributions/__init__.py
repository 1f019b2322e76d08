"""Cauchy distribution log-density and CDF."""

from pycauchy.distributions._cauchy import NEG_LOG_PI, cauchy_cdf, cauchy_log, cauchy_p
from pycauchy.distributions._normalization import Normalization

__all__ = [
    "cauchy_log",
    "cauchy_cdf",
    "cauchy_p",
    "Normalization",
    "NEG_LOG_PI",
]
