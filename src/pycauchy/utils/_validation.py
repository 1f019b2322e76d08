"""Input validation checks with policy-driven failure handling.

Each check has the signature ``(function, value, name, result, policy)`` and
returns True when evaluation may continue. On failure the check lets
``policy`` surface a :class:`~pycauchy.utils.DomainError`, stores the
policy's sentinel in ``result`` and returns False; the caller must then
return ``result.value`` without further computation. The ``stacklevel``
keyword places warnings from the ``"warn"`` action: 1 is the code calling the
check, 2 the caller of that code, as for :func:`warnings.warn`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from pycauchy.backend._array_api import PromotedType
from pycauchy.utils._errors import (
    DomainError,
    NonFiniteError,
    NonPositiveError,
    NotANumberError,
)
from pycauchy.utils._policy import ErrorPolicy, get_default_policy


@dataclass
class ResultHandle:
    """Output slot written by a failing check.

    Attributes
    ----------
    promoted : PromotedType
        Result type of the evaluation.
    shape : tuple of int
        Broadcast shape of the result; ``()`` for scalars.
    value : Any
        None until a check fails, then the sentinel in the promoted type.
    """

    promoted: PromotedType
    shape: tuple = ()
    value: Any = None


def _reject(
    result: ResultHandle,
    policy: ErrorPolicy | None,
    error: DomainError,
    stacklevel: int,
) -> bool:
    if policy is None:
        policy = get_default_policy()
    # _reject <- check <- caller of the check
    sentinel = policy.handle(error, stacklevel=stacklevel + 2)
    result.value = result.promoted.finalize(
        result.promoted.full(result.shape, sentinel)
    )
    return False


def check_not_nan(
    function: str,
    value,
    name: str,
    result: ResultHandle,
    policy: ErrorPolicy | None = None,
    *,
    stacklevel: int = 1,
) -> bool:
    """Fail if any element of ``value`` is NaN."""
    xp = result.promoted.backend
    value = result.promoted.convert(value)
    mask = xp.isnan(value)
    if xp.any(mask):
        return _reject(result, policy, NotANumberError(function, name, xp.first(value, mask)), stacklevel)
    return True


def check_finite(
    function: str,
    value,
    name: str,
    result: ResultHandle,
    policy: ErrorPolicy | None = None,
    *,
    stacklevel: int = 1,
) -> bool:
    """Fail if any element of ``value`` is NaN or infinite."""
    xp = result.promoted.backend
    value = result.promoted.convert(value)
    mask = ~xp.isfinite(value)
    if xp.any(mask):
        return _reject(result, policy, NonFiniteError(function, name, xp.first(value, mask)), stacklevel)
    return True


def check_positive(
    function: str,
    value,
    name: str,
    result: ResultHandle,
    policy: ErrorPolicy | None = None,
    *,
    stacklevel: int = 1,
) -> bool:
    """Fail if any element of ``value`` is not strictly positive.

    NaN is not positive. Finiteness is not checked here; callers that
    need it run :func:`check_finite` first.
    """
    xp = result.promoted.backend
    value = result.promoted.convert(value)
    mask = ~(value > 0)
    if xp.any(mask):
        return _reject(result, policy, NonPositiveError(function, name, xp.first(value, mask)), stacklevel)
    return True
