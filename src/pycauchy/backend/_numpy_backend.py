"""NumPy backend implementation."""

from __future__ import annotations

import numpy as np


class NumpyBackend:
    """Backend wrapping NumPy for plain (non-differentiable) values."""

    name = "numpy"

    # --- Promotion ---
    @staticmethod
    def result_dtype(*args):
        """Widest floating dtype among ``args``; integers count as float64."""
        dtypes = []
        for a in args:
            dt = np.asarray(a).dtype
            if not np.issubdtype(dt, np.floating):
                dt = np.dtype(np.float64)
            dtypes.append(dt)
        return np.result_type(*dtypes)

    @staticmethod
    def array(data, dtype=None, device=None):
        return np.asarray(data, dtype=dtype)

    @staticmethod
    def full(shape, fill_value, dtype=np.float64, device=None):
        return np.full(shape, fill_value, dtype=dtype)

    @staticmethod
    def broadcast_shape(*arrays):
        return np.broadcast_shapes(*(np.shape(a) for a in arrays))

    @staticmethod
    def finalize(x):
        """Unwrap 0-d arrays into NumPy scalars."""
        return np.asarray(x)[()]

    # --- Math operations ---
    @staticmethod
    def log(x):
        return np.log(x)

    @staticmethod
    def log1p(x):
        return np.log1p(x)

    @staticmethod
    def square(x):
        return np.square(x)

    @staticmethod
    def abs(x):
        return np.abs(x)

    @staticmethod
    def where(condition, x, y):
        return np.where(condition, x, y)

    @staticmethod
    def atan2(y, x):
        return np.arctan2(y, x)

    @staticmethod
    def pi(self=None):
        return np.pi

    # --- Predicates ---
    @staticmethod
    def isnan(x):
        return np.isnan(x)

    @staticmethod
    def isfinite(x):
        return np.isfinite(x)

    @staticmethod
    def any(mask):
        return bool(np.any(mask))

    @staticmethod
    def first(x, mask):
        """First element of ``x`` selected by ``mask``, as a Python float."""
        x, mask = np.broadcast_arrays(np.asarray(x), np.asarray(mask))
        return float(x[mask].flat[0])
