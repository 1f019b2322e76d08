"""Tests for Normalization term selection."""

from __future__ import annotations

import numpy as np
import pytest

from pycauchy import Normalization


class TestNormalization:
    def test_full(self):
        norm = Normalization.full()
        assert norm.include_constant
        assert norm.include_scale_term
        assert norm.include_shape_term
        assert Normalization() == norm

    def test_frozen(self):
        with pytest.raises(AttributeError):
            Normalization().include_constant = False

    def test_not_propto_includes_everything(self):
        norm = Normalization.for_arguments(
            False, y_variable=False, mu_variable=False, sigma_variable=False
        )
        assert norm == Normalization.full()

    def test_propto_defaults_treat_all_as_variable(self):
        assert Normalization.for_arguments(True) == Normalization(False, True, True)

    @pytest.mark.parametrize(
        "y_var,mu_var,sigma_var,expected",
        [
            (False, False, False, Normalization(False, False, False)),
            (True, False, False, Normalization(False, False, True)),
            (False, True, False, Normalization(False, False, True)),
            (False, False, True, Normalization(False, True, True)),
            (True, True, True, Normalization(False, True, True)),
        ],
    )
    def test_propto_rule(self, y_var, mu_var, sigma_var, expected):
        norm = Normalization.for_arguments(
            True, y_variable=y_var, mu_variable=mu_var, sigma_variable=sigma_var
        )
        assert norm == expected

    def test_infer_plain_values_are_constant(self):
        norm = Normalization.infer(True, 0.0, np.zeros(3), 1.0)
        assert norm == Normalization(False, False, False)

    def test_infer_from_gradient_tracking(self, torch):
        sigma = torch.tensor(2.0, dtype=torch.float64, requires_grad=True)
        assert Normalization.infer(True, 0.0, 0.0, sigma) == Normalization(False, True, True)
        mu = torch.tensor(0.0, dtype=torch.float64, requires_grad=True)
        assert Normalization.infer(True, 0.0, mu, 1.0) == Normalization(False, False, True)
