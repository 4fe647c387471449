"""
Tests for solver options, result classes, constants and the package namespace.
"""

import json
import math

import pytest

import statfuncs
from statfuncs.core.constants import BIGX, CHI_EPSILON, CHI_MAX, I_SQRT_PI, LOG_SQRT_PI, ex
from statfuncs.core.errors import ConvergenceError
from statfuncs.core.models.options import SolverOptions
from statfuncs.core.results.results import (
    ConvergenceResult,
    ConvergenceStatus,
    GammaFit,
    TwoSampleResult,
)


class TestConstants:
    """Manifest constants and the guarded exponential."""

    def test_values(self):
        assert CHI_EPSILON == 1e-6
        assert CHI_MAX == 99999.0
        assert BIGX == 20.0
        assert LOG_SQRT_PI == pytest.approx(math.log(math.sqrt(math.pi)), abs=1e-15)
        assert I_SQRT_PI == pytest.approx(1.0 / math.sqrt(math.pi), abs=1e-15)

    def test_ex_underflow_guard(self):
        assert ex(-20.5) == 0.0
        assert ex(-20.0) == math.exp(-20.0)
        assert ex(1.5) == math.exp(1.5)


class TestSolverOptions:
    """SolverOptions configuration."""

    def test_defaults(self):
        opts = SolverOptions.default()
        assert opts.chi_epsilon == CHI_EPSILON
        assert opts.chi_max == CHI_MAX
        assert opts.strict is False

    def test_dict_round_trip(self):
        opts = SolverOptions(max_iterations=50, chi_epsilon=1e-8, strict=True)
        restored = SolverOptions.from_dict(json.loads(json.dumps(opts.to_dict())))
        assert restored == opts

    def test_from_partial_dict(self):
        opts = SolverOptions.from_dict({"max_iterations": 7})
        assert opts.max_iterations == 7
        assert opts.chi_max == CHI_MAX

    def test_high_precision(self):
        opts = SolverOptions.high_precision()
        assert opts.chi_epsilon < CHI_EPSILON
        assert opts.max_iterations > SolverOptions().max_iterations

    @pytest.mark.parametrize(
        "kwargs",
        [
            {"max_iterations": 0},
            {"chi_epsilon": 0.0},
            {"chi_max": -1.0},
            {"z_tolerance": 0.0},
            {"gamma_tolerance": -1e-3},
        ],
    )
    def test_validation(self, kwargs):
        with pytest.raises(ValueError):
            SolverOptions(**kwargs)

    def test_repr(self):
        assert "max_iter=200" in repr(SolverOptions())


class TestResults:
    """Result dataclasses."""

    def test_convergence_result_round_trip(self):
        res = ConvergenceResult(3.5, ConvergenceStatus.CONVERGED, 12)
        restored = ConvergenceResult.from_dict(res.to_dict())
        assert restored == res
        assert restored.converged

    def test_convergence_result_nan_is_json_safe(self):
        res = ConvergenceResult(float("nan"), ConvergenceStatus.MAX_ITERATIONS, 5)
        data = res.to_dict()
        assert data["value"] is None
        json.dumps(data)
        assert math.isnan(ConvergenceResult.from_dict(data).value)

    def test_unwrap(self):
        capped = ConvergenceResult(1.25, ConvergenceStatus.MAX_ITERATIONS, 4)
        assert capped.unwrap() == 1.25
        with pytest.raises(ConvergenceError):
            capped.unwrap(strict=True)
        saturated = ConvergenceResult(CHI_MAX, ConvergenceStatus.SATURATED, 0)
        assert saturated.unwrap(strict=True) == CHI_MAX

    def test_two_sample_result(self):
        res = TwoSampleResult(statistic=0.4, n0=3, n1=5, tail=0.2)
        assert tuple(res) == (0.4, 3, 5, 0.2)
        assert res.to_dict() == {"statistic": 0.4, "n0": 3, "n1": 5, "tail": 0.2}

    def test_gamma_fit(self):
        fit = GammaFit(shape=2.0, rate=4.0)
        assert fit.scale == 0.25
        assert fit.mean == 0.5
        assert fit.to_dict()["converged"] is True


class TestNamespace:
    """Top-level package exports."""

    def test_version(self):
        assert statfuncs.__version__ == "1.0.0"

    @pytest.mark.parametrize(
        "name",
        [
            "medchi", "ks2", "probks", "conchi", "chitest", "hwstat", "binomtail", "binlogtail",
            "nordis", "ntail", "zprob", "rtlchsq", "critchi", "rtlf", "twtail", "twnorm",
            "xlgamma", "psi", "tau", "bernload", "bernum", "dilog", "li2", "bprob", "lbeta",
            "dawson", "mleg", "genlogbin", "ifirstgt", "firstgt",
        ],
    )
    def test_exports(self, name):
        assert name in statfuncs.__all__
        assert callable(getattr(statfuncs, name))
