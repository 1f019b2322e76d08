"""Domain errors raised when an argument violates its constraint."""

from __future__ import annotations


class DomainError(ValueError):
    """An argument lies outside the domain of the function being evaluated.

    Attributes
    ----------
    function : str
        Name of the function that rejected the argument.
    name : str
        Human-readable description of the argument, e.g.
        ``"Scale parameter, sigma,"``.
    value : float
        Offending value (first offending element for arrays).
    """

    requirement = "be valid"

    def __init__(self, function: str, name: str, value: float):
        self.function = function
        self.name = name
        self.value = value
        super().__init__(
            f"{function}: {name} is {value}, but must {self.requirement}!"
        )


class NotANumberError(DomainError):
    requirement = "not be nan"


class NonFiniteError(DomainError):
    requirement = "be finite"


class NonPositiveError(DomainError):
    requirement = "be > 0"
