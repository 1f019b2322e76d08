"""Validation, error kinds and failure policies."""

from pycauchy.utils._errors import (
    DomainError,
    NonFiniteError,
    NonPositiveError,
    NotANumberError,
)
from pycauchy.utils._policy import ErrorPolicy, get_default_policy, set_default_policy
from pycauchy.utils._validation import (
    ResultHandle,
    check_finite,
    check_not_nan,
    check_positive,
)

__all__ = [
    "DomainError",
    "NotANumberError",
    "NonFiniteError",
    "NonPositiveError",
    "ErrorPolicy",
    "get_default_policy",
    "set_default_policy",
    "ResultHandle",
    "check_not_nan",
    "check_finite",
    "check_positive",
]
