"""Error-handling policy for argument validation.

An :class:`ErrorPolicy` decides what happens when a validation check fails:
raise the :class:`~pycauchy.utils.DomainError`, return a sentinel silently,
warn and return the sentinel, or hand the error to a user callback.
"""

from __future__ import annotations

import math
import warnings
from dataclasses import dataclass
from typing import Callable, Literal

from pycauchy.utils._errors import DomainError

PolicyAction = Literal["raise", "sentinel", "warn", "callback"]

_ACTIONS = ("raise", "sentinel", "warn", "callback")


@dataclass(frozen=True)
class ErrorPolicy:
    """Failure policy passed to every validation check.

    Attributes
    ----------
    action : {"raise", "sentinel", "warn", "callback"}
        ``"raise"`` raises the domain error (default). ``"sentinel"`` returns
        ``sentinel`` silently. ``"warn"`` emits a ``RuntimeWarning`` and
        returns ``sentinel``. ``"callback"`` calls ``callback(error)``; a
        non-None return value replaces ``sentinel``.
    sentinel : float
        Value returned in place of a result on failure.
    callback : callable or None
        Required when ``action="callback"``.
    """

    action: PolicyAction = "raise"
    sentinel: float = math.nan
    callback: Callable[[DomainError], float | None] | None = None

    def __post_init__(self):
        if self.action not in _ACTIONS:
            raise ValueError(
                f"Unknown policy action: {self.action!r}. Use one of {_ACTIONS}."
            )
        if self.action == "callback" and self.callback is None:
            raise ValueError("action='callback' requires a callback")

    def handle(self, error: DomainError, stacklevel: int = 1) -> float:
        """Surface ``error`` and return the value to use as the result.

        ``stacklevel`` is as for :func:`warnings.warn`, counted from the
        caller of ``handle``: 1 attributes a ``"warn"`` warning to that caller.
        """
        if self.action == "raise":
            raise error
        if self.action == "warn":
            warnings.warn(str(error), RuntimeWarning, stacklevel=stacklevel + 1)
        elif self.action == "callback":
            value = self.callback(error)
            if value is not None:
                return value
        return self.sentinel


_default_policy = ErrorPolicy()


def get_default_policy() -> ErrorPolicy:
    """Return the policy used when an evaluator receives ``policy=None``."""
    return _default_policy


def set_default_policy(policy: ErrorPolicy) -> None:
    """Set the default policy globally.

    Parameters
    ----------
    policy : ErrorPolicy
        Policy to use when ``policy`` is not provided.
    """
    global _default_policy
    if not isinstance(policy, ErrorPolicy):
        raise TypeError(f"Expected an ErrorPolicy, got {type(policy).__name__}")
    _default_policy = policy
