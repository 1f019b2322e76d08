"""Backend abstraction: select NumPy or PyTorch and promote argument types."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Literal

import numpy as np

BackendName = Literal["numpy", "torch"]

_DEFAULT_BACKEND: BackendName = "numpy"

# Cached backend instances
_backends: dict[str, Any] = {}


def get_backend(name: BackendName | None = None) -> Any:
    """Return a backend namespace providing array operations.

    Parameters
    ----------
    name : {"numpy", "torch"} or None
        Backend name. If None, returns the current default backend.

    Returns
    -------
    backend : NumpyBackend or TorchBackend
        Object exposing the numeric capabilities used by the evaluators.
    """
    if name is None:
        name = _DEFAULT_BACKEND

    if name not in _backends:
        if name == "numpy":
            from pycauchy.backend._numpy_backend import NumpyBackend
            _backends[name] = NumpyBackend()
        elif name == "torch":
            from pycauchy.backend._torch_backend import TorchBackend
            _backends[name] = TorchBackend()
        else:
            raise ValueError(f"Unknown backend: {name!r}. Use 'numpy' or 'torch'.")

    return _backends[name]


def set_backend(name: BackendName) -> None:
    """Set the default backend globally.

    The default backend is used for arguments that are plain Python
    numbers. NumPy arrays and torch tensors always select their own backend.

    Parameters
    ----------
    name : {"numpy", "torch"}
        Backend to use by default.
    """
    global _DEFAULT_BACKEND
    if name not in ("numpy", "torch"):
        raise ValueError(f"Unknown backend: {name!r}. Use 'numpy' or 'torch'.")
    _DEFAULT_BACKEND = name


def _is_tensor(x: Any) -> bool:
    return type(x).__module__.startswith("torch")


def array_namespace(*arrays: Any) -> Any:
    """Infer the backend from the input arrays.

    If any array is a PyTorch tensor, returns the torch backend. Otherwise,
    if any is a NumPy array or scalar, returns the numpy backend. Plain
    Python numbers fall back to the default backend.

    Parameters
    ----------
    *arrays : array-like
        Input arrays to inspect.

    Returns
    -------
    backend : NumpyBackend or TorchBackend
    """
    arrays = [arr for arr in arrays if arr is not None]
    if any(_is_tensor(arr) for arr in arrays):
        return get_backend("torch")
    if any(isinstance(arr, (np.ndarray, np.generic)) for arr in arrays):
        return get_backend("numpy")
    return get_backend()


def is_variable(x: Any) -> bool:
    """True if ``x`` carries derivative information (a tensor tracking gradients)."""
    return _is_tensor(x) and bool(getattr(x, "requires_grad", False))


@dataclass(frozen=True)
class PromotedType:
    """Common result type of a set of arguments.

    Attributes
    ----------
    backend : NumpyBackend or TorchBackend
        Backend holding the result.
    dtype : numpy.dtype or torch.dtype
        Floating dtype wide enough for every argument.
    device : torch.device or None
        Device of the result for the torch backend.
    """

    backend: Any
    dtype: Any
    device: Any = None

    def convert(self, x):
        """Convert ``x`` to the promoted representation, keeping autograd history."""
        return self.backend.array(x, dtype=self.dtype, device=self.device)

    def full(self, shape, value):
        """Array of ``shape`` filled with ``value`` in the promoted dtype."""
        return self.backend.full(shape, value, dtype=self.dtype, device=self.device)

    def finalize(self, x):
        return self.backend.finalize(x)


def promote_args(*args: Any) -> PromotedType:
    """Resolve the result type of an arithmetic combination of ``args``.

    Integers promote to ``float64``; floating types widen to the largest
    among the arguments. If any argument is a torch tensor the result is a
    tensor; converted arguments keep their autograd history, so the result
    tracks gradients when any argument does.

    Examples
    --------
    >>> promote_args(1, 2.0, np.float32(3.0)).dtype
    dtype('float64')
    >>> promote_args(np.float32(1.0), np.ones(2, dtype=np.float32), np.float32(1.0)).dtype
    dtype('float32')
    """
    xp = array_namespace(*args)
    device = xp.device_of(*args) if xp.name == "torch" else None
    return PromotedType(
        backend=xp,
        dtype=xp.result_dtype(*args),
        device=device,
    )
