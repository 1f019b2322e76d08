"""PyTorch backend implementation (optional dependency)."""

from __future__ import annotations

import math
from typing import Any

import numpy as np


def _import_torch():
    """Lazy import of torch."""
    try:
        import torch
        return torch
    except ImportError as e:
        raise ImportError(
            "PyTorch is required for the torch backend. "
            "Install it with: pip install pycauchy[torch]"
        ) from e


class TorchBackend:
    """Backend wrapping PyTorch; tensors with ``requires_grad`` carry derivatives."""

    name = "torch"

    def __init__(self, device: str = "cpu", dtype: Any = None):
        self._torch = _import_torch()
        self.device = device
        self._default_dtype = dtype or self._torch.float64
        self._from_numpy_dtype = {
            np.dtype(np.float16): self._torch.float16,
            np.dtype(np.float32): self._torch.float32,
            np.dtype(np.float64): self._torch.float64,
        }

    # --- Promotion ---
    def result_dtype(self, *args):
        """Widest floating dtype among ``args``.

        Integer and boolean tensors, Python numbers and NumPy integers count
        as ``float64``; floating NumPy values keep their width.
        """
        dtype = None
        for a in args:
            if isinstance(a, self._torch.Tensor):
                dt = a.dtype if a.is_floating_point() else self._torch.float64
            else:
                np_dt = np.asarray(a).dtype
                dt = self._from_numpy_dtype.get(np_dt, self._default_dtype)
            dtype = dt if dtype is None else self._torch.promote_types(dtype, dt)
        return dtype or self._default_dtype

    def device_of(self, *args):
        """Device of the first tensor argument, else the backend device."""
        for a in args:
            if isinstance(a, self._torch.Tensor):
                return a.device
        return self.device

    def array(self, data, dtype=None, device=None):
        dtype = dtype or self._default_dtype
        device = device or self.device
        if isinstance(data, self._torch.Tensor):
            return data.to(device=device, dtype=dtype)
        return self._torch.as_tensor(np.asarray(data), dtype=dtype, device=device)

    def full(self, shape, fill_value, dtype=None, device=None):
        dtype = dtype or self._default_dtype
        return self._torch.full(
            tuple(shape), fill_value, dtype=dtype, device=device or self.device
        )

    def broadcast_shape(self, *arrays):
        return tuple(self._torch.broadcast_shapes(*(a.shape for a in arrays)))

    def finalize(self, x):
        return x

    # --- Math operations ---
    def log(self, x):
        return self._torch.log(x)

    def log1p(self, x):
        return self._torch.log1p(x)

    def square(self, x):
        return self._torch.square(x)

    def abs(self, x):
        return self._torch.abs(x)

    def where(self, condition, x, y):
        return self._torch.where(condition, x, y)

    def atan2(self, y, x):
        return self._torch.atan2(y, x)

    def pi(self):
        return math.pi

    # --- Predicates ---
    def isnan(self, x):
        return self._torch.isnan(x)

    def isfinite(self, x):
        return self._torch.isfinite(x)

    def any(self, mask):
        return bool(mask.any())

    def first(self, x, mask):
        x, mask = self._torch.broadcast_tensors(x.detach(), mask)
        return float(x[mask].flatten()[0])
