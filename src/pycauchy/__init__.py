"""pycauchy: Cauchy log-density and CDF for gradient-based inference.

Evaluates on plain values (NumPy) or derivative-carrying values (PyTorch
tensors with ``requires_grad``), with configurable validation failure
policies and optional dropping of constant log-density terms.
"""

from pycauchy.backend import (
    PromotedType,
    array_namespace,
    get_backend,
    promote_args,
    set_backend,
)
from pycauchy.distributions import (
    NEG_LOG_PI,
    Normalization,
    cauchy_cdf,
    cauchy_log,
    cauchy_p,
)
from pycauchy.utils import (
    DomainError,
    ErrorPolicy,
    NonFiniteError,
    NonPositiveError,
    NotANumberError,
    ResultHandle,
    check_finite,
    check_not_nan,
    check_positive,
    get_default_policy,
    set_default_policy,
)

__version__ = "0.1.0"

__all__ = [
    "cauchy_log",
    "cauchy_cdf",
    "cauchy_p",
    "Normalization",
    "NEG_LOG_PI",
    "ErrorPolicy",
    "get_default_policy",
    "set_default_policy",
    "DomainError",
    "NotANumberError",
    "NonFiniteError",
    "NonPositiveError",
    "ResultHandle",
    "check_not_nan",
    "check_finite",
    "check_positive",
    "PromotedType",
    "promote_args",
    "get_backend",
    "set_backend",
    "array_namespace",
]
