"""Selection of the additive terms included in a log-density."""

from __future__ import annotations

from dataclasses import dataclass

from pycauchy.backend._array_api import is_variable


@dataclass(frozen=True)
class Normalization:
    """Which additive terms of the Cauchy log-density to include.

    Terms that depend only on fixed arguments are constant during
    estimation and may be dropped when the caller needs the density only up
    to an additive constant.

    Attributes
    ----------
    include_constant : bool
        The distribution-wide constant ``-log(pi)``.
    include_scale_term : bool
        ``-log(sigma)``.
    include_shape_term : bool
        ``-log1p(((y - mu) / sigma)**2)``.
    """

    include_constant: bool = True
    include_scale_term: bool = True
    include_shape_term: bool = True

    @classmethod
    def full(cls) -> Normalization:
        """All terms: the result is a true log-probability density."""
        return cls()

    @classmethod
    def for_arguments(
        cls,
        propto: bool,
        *,
        y_variable: bool = True,
        mu_variable: bool = True,
        sigma_variable: bool = True,
    ) -> Normalization:
        """Terms needed given which arguments are being estimated.

        With ``propto=False`` every term is included. With ``propto=True``
        the constant is dropped, the scale term is kept only if ``sigma`` is
        variable, and the shape term only if any argument is variable.
        """
        if not propto:
            return cls.full()
        return cls(
            include_constant=False,
            include_scale_term=sigma_variable,
            include_shape_term=y_variable or mu_variable or sigma_variable,
        )

    @classmethod
    def infer(cls, propto: bool, y, mu, sigma) -> Normalization:
        """Like :meth:`for_arguments`, treating gradient-tracking tensors as variable."""
        return cls.for_arguments(
            propto,
            y_variable=is_variable(y),
            mu_variable=is_variable(mu),
            sigma_variable=is_variable(sigma),
        )
