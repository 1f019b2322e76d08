"""Backend abstraction for NumPy/PyTorch numerics and type promotion."""

from pycauchy.backend._array_api import (
    PromotedType,
    array_namespace,
    get_backend,
    is_variable,
    promote_args,
    set_backend,
)

__all__ = [
    "get_backend",
    "set_backend",
    "array_namespace",
    "is_variable",
    "PromotedType",
    "promote_args",
]
