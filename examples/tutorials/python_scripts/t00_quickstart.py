"""Tutorial T00: Cauchy Log-Density and CDF Quickstart.

What you will learn:
  - cauchy_log and cauchy_cdf on scalars and arrays
  - How ErrorPolicy controls what happens with invalid arguments
  - Dropping constant terms with propto / Normalization
  - Gradients through the torch backend (if PyTorch is installed)

Prerequisites: None (standalone reference).
"""
import os, sys
import numpy as np
np.set_printoptions(precision=4, suppress=True)
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "..", "..", "src"))

from pycauchy import (
    ErrorPolicy,
    Normalization,
    cauchy_cdf,
    cauchy_log,
)

# ============================================================
#  Step 1: Log-density and CDF against scipy
# ============================================================
print("=" * 60)
print("  Step 1: Cauchy(y | mu=0.5, sigma=2)")
print("=" * 60)

from scipy.stats import cauchy as scipy_cauchy

y_vals = np.array([-10.0, -2.0, 0.5, 2.5, 100.0])
mu, sigma = 0.5, 2.0

print(f"\n  {'y':>8s} {'log p(y)':>10s} {'scipy':>10s} {'F(y)':>10s} {'scipy':>10s}")
print(f"  {'-'*52}")
lp = cauchy_log(y_vals, mu, sigma)
cdf = cauchy_cdf(y_vals, mu, sigma)
for y, l, p in zip(y_vals, lp, cdf):
    print(f"  {y:>8.1f} {l:>10.6f} {scipy_cauchy.logpdf(y, mu, sigma):>10.6f}"
          f" {p:>10.6f} {scipy_cauchy.cdf(y, mu, sigma):>10.6f}")

print(f"\n  F(mu) = {float(cauchy_cdf(mu, mu, sigma))}  (exactly 0.5)")
print(f"  F(mu + sigma) = {float(cauchy_cdf(mu + sigma, mu, sigma))}")

# ============================================================
#  Step 2: Failure policies
# ============================================================
print("\n" + "=" * 60)
print("  Step 2: Invalid arguments")
print("=" * 60)

try:
    cauchy_log(0.0, 0.0, -1.0)
except ValueError as err:
    print(f"\n  default policy raised: {err}")

quiet = ErrorPolicy(action="sentinel")
print(f"  sentinel policy returned: {cauchy_log(0.0, 0.0, -1.0, quiet)}")
print(f"  infinite variate is valid: {cauchy_log(np.inf, 0.0, 1.0)}")

# ============================================================
#  Step 3: Dropping constant terms
# ============================================================
print("\n" + "=" * 60)
print("  Step 3: Normalization")
print("=" * 60)

full = cauchy_log(3.0, 0.0, 1.0)
no_const = cauchy_log(3.0, 0.0, 1.0, normalization=Normalization(include_constant=False))
print(f"\n  full:            {full:.6f}")
print(f"  without -log(pi): {no_const:.6f}  (difference {full - no_const:.6f})")
print(f"  propto, all fixed: {cauchy_log(3.0, 0.0, 1.0, propto=True)}")

# ============================================================
#  Step 4: Gradients (torch backend)
# ============================================================
print("\n" + "=" * 60)
print("  Step 4: Gradients")
print("=" * 60)

try:
    import torch
except ImportError:
    print("\n  PyTorch not installed; skipping.")
else:
    y = torch.tensor(1.3, dtype=torch.float64, requires_grad=True)
    mu_t = torch.tensor(-0.4, dtype=torch.float64, requires_grad=True)
    sigma_t = torch.tensor(0.7, dtype=torch.float64, requires_grad=True)
    lp_t = cauchy_log(y, mu_t, sigma_t, propto=True)
    lp_t.backward()
    print(f"\n  log p (propto) = {lp_t.item():.6f}")
    print(f"  d/dy = {y.grad.item():.6f}, d/dmu = {mu_t.grad.item():.6f},"
          f" d/dsigma = {sigma_t.grad.item():.6f}")
