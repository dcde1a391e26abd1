import numpy as np
import pandas as pd
import pytest
import sklearn.base

from scatter_smoothing import basis
from scatter_smoothing.smoothing import onedim

ALL_SMOOTHERS = [
    onedim.ConstantMeanSmoother,
    onedim.RunningMeanSmoother,
    onedim.LinearRegressionSmoother,
    onedim.PolynomialRidgeSmoother,
    onedim.GaussianKernelSmoother,
    onedim.RunningLineSmoother,
    onedim.CubicSplineSmoother,
    onedim.LocalWeightedRegressionSmoother,
]


# ConstantMeanSmoother

def test_constant_mean_ignores_x():
    smoother = onedim.ConstantMeanSmoother().fit([5.0, -1.0, 0.0], [1.0, 2.0, 3.0])
    np.testing.assert_equal(smoother.predict([-100.0, 0.0, 1.5, 1e6]), [2.0, 2.0, 2.0, 2.0])
    assert smoother.mean_ == 2.0


# RunningMeanSmoother

def test_running_mean_windows():
    x = np.array([0.0, 1.0, 2.0, 3.0, 4.0])
    y = 10 * x
    smoother = onedim.RunningMeanSmoother(k=1).fit(x, y)
    # the insertion position lies right of equal values, so the window
    # around x=2 covers the sample points 2, 3 and 4
    np.testing.assert_allclose(smoother.predict([-1.0, 1.5, 2.0, 10.0]), [5.0, 20.0, 30.0, 40.0])


def test_running_mean_full_window(noisy_sine):
    x, y, _ = noisy_sine
    smoother = onedim.RunningMeanSmoother(k=len(x)).fit(x, y)
    np.testing.assert_allclose(smoother.predict([-1.0, 0.0, 0.3, 0.99, 5.0]), np.mean(y))


def test_running_mean_sorts_sample(small_sample):
    x, y = small_sample
    order = np.argsort(x)
    unsorted = onedim.RunningMeanSmoother(k=3).fit(x, y)
    presorted = onedim.RunningMeanSmoother(k=3).fit(x[order], y[order])
    x_query = np.linspace(-0.1, 1.1, 17)
    np.testing.assert_allclose(unsorted.predict(x_query), presorted.predict(x_query))


def test_running_mean_smooths_sine(noisy_sine):
    x, y, truth = noisy_sine
    smoother = onedim.RunningMeanSmoother(k=3).fit(x, y)
    pred = smoother.predict(x)
    assert np.mean(np.abs(pred - truth)) < 0.075


# LinearRegressionSmoother

def test_linear_regression_perfect_line():
    smoother = onedim.LinearRegressionSmoother().fit([0, 1, 2, 3, 4], [0, 2, 4, 6, 8])
    np.testing.assert_allclose(smoother.predict([0, 2, 4]), [0.0, 4.0, 8.0], rtol=0, atol=1e-9)


def test_linear_regression_recovers_coefficients():
    x = np.linspace(-10, 10, 100)
    smoother = onedim.LinearRegressionSmoother().fit(x, 2.0 - 3.0 * x)
    np.testing.assert_allclose(smoother.alpha_, 2.0)
    np.testing.assert_allclose(smoother.beta_, -3.0)
    assert smoother.score(x, 2.0 - 3.0 * x) == pytest.approx(1.0)


# PolynomialRidgeSmoother

def test_polynomial_degree_one_matches_linear_regression(noisy_sine):
    x, y, _ = noisy_sine
    poly = onedim.PolynomialRidgeSmoother(degree=1, lam=0.0).fit(x, y)
    lin = onedim.LinearRegressionSmoother().fit(x, y)
    np.testing.assert_allclose(poly.coefficients_, [lin.alpha_, lin.beta_], rtol=1e-8, atol=1e-10)
    x_query = np.linspace(-1, 2, 7)
    np.testing.assert_allclose(poly.predict(x_query), lin.predict(x_query), rtol=1e-8, atol=1e-10)


def test_polynomial_recovers_quadratic():
    x = np.linspace(-1, 1, 20)
    y = 1.0 + 2.0 * x - 3.0 * x ** 2
    smoother = onedim.PolynomialRidgeSmoother(degree=2, lam=0.0).fit(x, y)
    np.testing.assert_allclose(smoother.coefficients_, [1.0, 2.0, -3.0], atol=1e-8)


def test_polynomial_shrinkage(noisy_sine):
    x, y, _ = noisy_sine
    norms = [
        np.linalg.norm(onedim.PolynomialRidgeSmoother(degree=5, lam=lam).fit(x, y).coefficients_[1:])
        for lam in [0.0, 0.001, 0.1]
    ]
    assert norms[0] > norms[1] > norms[2]


# GaussianKernelSmoother

def test_gaussian_kernel_single_point():
    smoother = onedim.GaussianKernelSmoother(lam=0.01).fit([0.3], [-2.0])
    np.testing.assert_allclose(smoother.predict([-5.0, 0.0, 0.3, 7.0]), [-2.0] * 4)


def test_gaussian_kernel_weights_use_lambda_as_divisor():
    smoother = onedim.GaussianKernelSmoother(lam=0.5).fit([0.0, 1.0], [0.0, 1.0])
    w0 = np.exp(-(0.25 ** 2) / 0.5)
    w1 = np.exp(-(0.75 ** 2) / 0.5)
    np.testing.assert_allclose(smoother.predict([0.25]), [w1 / (w0 + w1)])


def test_gaussian_kernel_limits():
    x = np.array([0.0, 1.0, 2.0])
    y = np.array([5.0, 6.0, 9.0])
    narrow = onedim.GaussianKernelSmoother(lam=1e-6).fit(x, y)
    np.testing.assert_allclose(narrow.predict([0.1, 1.9]), [5.0, 9.0])
    wide = onedim.GaussianKernelSmoother(lam=1e12).fit(x, y)
    np.testing.assert_allclose(wide.predict([-3.0, 1.0]), [np.mean(y)] * 2)


def test_gaussian_kernel_smooths_sine(noisy_sine):
    x, y, truth = noisy_sine
    smoother = onedim.GaussianKernelSmoother(lam=0.0005).fit(x, y)
    assert np.mean(np.abs(smoother.predict(x) - truth)) < 0.05


# RunningLineSmoother

def test_running_line_reproduces_line():
    x = np.arange(10, dtype=np.float64)
    smoother = onedim.RunningLineSmoother(k=2).fit(x, 3.0 * x - 1.0)
    x_query = np.array([-5.0, 0.0, 4.5, 9.0, 100.0])
    np.testing.assert_allclose(smoother.predict(x_query), 3.0 * x_query - 1.0)


def test_running_line_excludes_upper_window_bound():
    x = np.arange(6, dtype=np.float64)
    y = x ** 2
    # the insertion position of 0.0 is 1; with k=2 the window holds the
    # points 0, 1 and 2 only, not the point 3
    line = onedim.RunningLineSmoother(k=2).fit(x, y)
    np.testing.assert_allclose(line.predict([0.0]), [-1.0 / 3.0])
    # the running mean includes the point 3 in the same window
    mean = onedim.RunningMeanSmoother(k=2).fit(x, y)
    np.testing.assert_allclose(mean.predict([0.0]), [np.mean(y[:4])])


def test_running_line_constant_x_window():
    smoother = onedim.RunningLineSmoother(k=2).fit([1.0, 1.0, 1.0, 1.0], [1.0, 2.0, 3.0, 4.0])
    with np.errstate(divide="ignore", invalid="ignore"):
        assert np.isnan(smoother.predict([1.0])[0])


def test_running_line_smooths_sine(noisy_sine):
    x, y, truth = noisy_sine
    smoother = onedim.RunningLineSmoother(k=5).fit(x, y)
    assert np.mean(np.abs(smoother.predict(x) - truth)) < 0.05


# CubicSplineSmoother

def test_cubic_spline_interpolates():
    x = np.array([0.0, 0.2, 0.4, 0.6, 0.8, 1.0])
    y = np.array([0.3, -1.0, 0.5, 2.0, 1.0, -0.5])
    # 2 knots give 6 basis functions for 6 samples
    smoother = onedim.CubicSplineSmoother(n=2, lam=0.0).fit(x, y)
    np.testing.assert_allclose(smoother.predict(x), y, atol=1e-4)


def test_cubic_spline_interpolates_with_surplus_basis():
    x = np.array([0.1, 0.35, 0.6, 0.9])
    y = np.array([1.0, -0.5, 0.75, 2.0])
    # 6 basis functions for 4 samples; a vanishing shrinkage keeps the
    # normal equations regular
    smoother = onedim.CubicSplineSmoother(n=2, lam=1e-10).fit(x, y)
    np.testing.assert_allclose(smoother.predict(x), y, atol=1e-4)


def test_cubic_spline_fitted_parameters():
    x = np.linspace(0, 1, 50)
    smoother = onedim.CubicSplineSmoother(n=4, lam=0.001).fit(x, np.cos(x))
    np.testing.assert_allclose(smoother.knots_, basis.fixed_knots(4))
    assert len(smoother.basis_) == 8
    assert len(smoother.coefficients_) == 8

    x_query = np.array([0.1, 0.55, 0.9])
    expected = basis.evaluate_spline_basis(smoother.basis_, x_query) @ smoother.coefficients_
    np.testing.assert_allclose(smoother.predict(x_query), expected)


def test_cubic_spline_smooths_sine(noisy_sine):
    x, y, truth = noisy_sine
    smoother = onedim.CubicSplineSmoother(n=5, lam=1e-5).fit(x, y)
    assert np.mean(np.abs(smoother.predict(x) - truth)) < 0.05


# LocalWeightedRegressionSmoother

def test_local_weighted_regression_reproduces_line():
    x = np.arange(20, dtype=np.float64)
    smoother = onedim.LocalWeightedRegressionSmoother(k=7).fit(x, 2.0 * x + 1.0)
    x_query = np.array([0.5, 10.0, 19.0])
    np.testing.assert_allclose(smoother.predict(x_query), 2.0 * x_query + 1.0)


def test_local_weighted_regression_neighbors_at_query():
    smoother = onedim.LocalWeightedRegressionSmoother(k=3).fit([0.0, 0.0, 0.0, 1.0, 2.0], [1.0, 2.0, 3.0, 4.0, 5.0])
    np.testing.assert_allclose(smoother.predict([0.0]), [2.0])


def test_local_weighted_regression_tied_x():
    x = np.repeat(np.arange(10.0), 2)
    y = np.arange(20.0)
    smoother = onedim.LocalWeightedRegressionSmoother(k=3).fit(x, y)
    # the third neighbor is the farthest and gets zero weight, leaving
    # two points at the same x
    result = smoother.predict([0.0, 4.0, 9.0])
    assert np.all(np.isfinite(result))
    np.testing.assert_allclose(result, [0.5, 8.5, 18.5])


def test_local_weighted_regression_smooths_sine(noisy_sine):
    x, y, truth = noisy_sine
    smoother = onedim.LocalWeightedRegressionSmoother(k=15).fit(x, y)
    assert np.mean(np.abs(smoother.predict(x) - truth)) < 0.05


# common behavior

@pytest.mark.parametrize("smoother_class", ALL_SMOOTHERS)
def test_raise_not_fitted_exception(smoother_class):
    smoother = smoother_class()
    with np.testing.assert_raises_regex(ValueError, "has not been fitted!"):
        smoother.predict(np.arange(3.0))


@pytest.mark.parametrize("smoother_class", ALL_SMOOTHERS)
def test_predict_is_idempotent(smoother_class, small_sample):
    x, y = small_sample
    smoother = smoother_class().fit(x, y)
    x_query = np.linspace(-0.2, 1.2, 25)
    first = smoother.predict(x_query)
    second = smoother.predict(x_query)
    assert first.shape == x_query.shape
    np.testing.assert_array_equal(first, second)


@pytest.mark.parametrize("smoother_class", ALL_SMOOTHERS)
def test_fit_does_not_modify_sample(smoother_class, small_sample):
    x, y = small_sample
    x_copy, y_copy = x.copy(), y.copy()
    smoother_class().fit(x, y).predict(x)
    np.testing.assert_array_equal(x, x_copy)
    np.testing.assert_array_equal(y, y_copy)


@pytest.mark.parametrize("smoother_class", ALL_SMOOTHERS)
def test_input_types(smoother_class, small_sample):
    x, y = small_sample
    reference = smoother_class().fit(x, y).predict(x)

    from_pandas = smoother_class().fit(pd.Series(x), pd.Series(y)).predict(pd.Series(x))
    np.testing.assert_allclose(from_pandas, reference)

    from_columns = smoother_class().fit(np.c_[x, np.ones_like(x)], y).predict(np.c_[x])
    np.testing.assert_allclose(from_columns, reference)


def test_clone_keeps_hyperparameters():
    smoother = onedim.CubicSplineSmoother(n=3, lam=0.01)
    cloned = sklearn.base.clone(smoother)
    assert cloned.get_params() == {"n": 3, "lam": 0.01}
    assert not hasattr(cloned, "coefficients_")
