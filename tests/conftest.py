"""Shared test fixtures for pycauchy."""

from __future__ import annotations

import numpy as np
import pytest

from pycauchy.backend import get_backend, set_backend
from pycauchy.utils import ErrorPolicy, get_default_policy, set_default_policy


@pytest.fixture(autouse=True)
def _restore_defaults():
    """Reset the global backend and policy after each test."""
    policy = get_default_policy()
    yield
    set_backend("numpy")
    set_default_policy(policy)


@pytest.fixture
def xp_numpy():
    """NumPy backend fixture."""
    return get_backend("numpy")


@pytest.fixture
def xp_torch():
    """PyTorch backend fixture (skips if torch not installed)."""
    pytest.importorskip("torch")
    return get_backend("torch")


@pytest.fixture
def torch():
    """The torch module (skips if torch not installed)."""
    return pytest.importorskip("torch")


@pytest.fixture
def sentinel_policy():
    """Policy returning NaN silently on validation failure."""
    return ErrorPolicy(action="sentinel")


@pytest.fixture
def grid():
    """Variates, locations and scales covering both tails and small scales."""
    return {
        "y": np.array([-1e6, -50.0, -2.5, -1.0, -1e-8, 0.0, 1e-8, 0.3, 1.0, 7.0, 1e6]),
        "mu": np.array([-3.0, 0.0, 0.25, 4.0]),
        "sigma": np.array([1e-3, 0.5, 1.0, 2.0, 100.0]),
    }


def numerical_gradient(f, x, eps=1e-7):
    """Compute numerical gradient via central finite differences.

    Parameters
    ----------
    f : callable
        Scalar-valued function f(x).
    x : ndarray
        Point at which to evaluate the gradient.
    eps : float
        Perturbation size.

    Returns
    -------
    grad : ndarray
        Numerical gradient, same shape as x.
    """
    x = np.asarray(x, dtype=np.float64)
    grad = np.zeros_like(x)
    x_flat = x.ravel()
    for i in range(len(x_flat)):
        x_plus = x_flat.copy()
        x_minus = x_flat.copy()
        x_plus[i] += eps
        x_minus[i] -= eps
        grad.ravel()[i] = (f(x_plus.reshape(x.shape)) - f(x_minus.reshape(x.shape))) / (2 * eps)
    return grad


@pytest.fixture
def num_grad():
    """The central-difference gradient helper."""
    return numerical_gradient
