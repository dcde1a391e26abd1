"""
One-dimensional smoothers of scatter data

All smoothers follow the scikit-learn estimator protocol: the hyperparameters
are the constructor arguments, :meth:`fit` receives the sample ``(x, y)`` and
returns the estimator, and :meth:`predict` maps query values of ``x`` to
smoothed values of ``y``. The estimated parameters are stored in attributes
with a trailing underscore and are never changed by :meth:`predict`.
"""
import numpy as np
import scipy.special

from scatter_smoothing.basis import evaluate_spline_basis, fixed_knots, spline_basis
from scatter_smoothing.regression import (
    fit_ridge_regression,
    linear_regression,
    linear_regressor,
    weighted_linear_regressor,
)
from scatter_smoothing.smoothing.base import AbstractSmoother, SortedSampleMixin
from scatter_smoothing.smoothing.neighborhood import WindowClipping, neighborhood_bounds
from scatter_smoothing.utils import expand_into_powers, linear_function, polynomial_function, wmean


class ConstantMeanSmoother(AbstractSmoother):
    """Trivial global mean smoother.

    The prediction is the mean of the ``y`` values of the sample for any
    ``x``.

    **Estimated parameters**

    :param `mean_`: mean of ``y``
    :type `mean_`: :obj:`float`

    >>> from scatter_smoothing.smoothing.onedim import ConstantMeanSmoother
    >>> est = ConstantMeanSmoother().fit([0.0, 1.0, 2.0], [1.0, 2.0, 3.0])
    >>> est.predict([-10.0, 0.5, 42.0]).tolist()
    [2.0, 2.0, 2.0]
    """

    fitted_attribute = "mean_"

    def _fit(self, x, y):
        self.mean_ = np.mean(y)

    def _predict(self, x):
        return np.full(len(x), self.mean_, dtype=np.float64)


class RunningMeanSmoother(SortedSampleMixin, AbstractSmoother):
    """Running mean smoother.

    The smoothed value at ``x`` is the mean of the ``y`` values of the sample
    points in the window ``[pos - k, pos + k]`` of the sample sorted by
    ``x``, where ``pos`` is the insertion position of ``x`` (to the right of
    equal values). The window is clipped at both ends of the sorted sample
    with the upper index included (:attr:`WindowClipping.inclusive`), so
    windows near the boundaries are asymmetric.

    :param k: Number of neighbors included on each side of the window.
    :type k: int
    """

    def __init__(self, k=5):
        self.k = k

    def _predict(self, x):
        start, stop = neighborhood_bounds(self.x_sorted_, x, self.k, WindowClipping.inclusive)
        return np.fromiter(
            (np.mean(self.y_sorted_[i:j]) for i, j in zip(start, stop)),
            dtype=np.float64,
            count=len(x),
        )


class LinearRegressionSmoother(AbstractSmoother):
    r"""Simple linear regression smoother.

    One least squares line :math:`y = \alpha + \beta \cdot x` is fitted to the
    whole sample with :func:`~scatter_smoothing.regression.linear_regression`.

    **Estimated parameters**

    :param `alpha_`: axis interception
    :type `alpha_`: :obj:`float`

    :param `beta_`: slope
    :type `beta_`: :obj:`float`
    """

    fitted_attribute = "beta_"

    def _fit(self, x, y):
        self.alpha_, self.beta_ = linear_regression(x, y)

    def _predict(self, x):
        return linear_function(self.beta_, self.alpha_)(x)


class PolynomialRidgeSmoother(AbstractSmoother):
    """Polynomial regression with ridge shrinkage of all coefficients except
    the constant term.

    The design matrix is the power expansion
    :func:`~scatter_smoothing.utils.expand_into_powers` of ``x``, solved by
    :func:`~scatter_smoothing.regression.fit_ridge_regression`.

    :param degree: Polynomial degree.
    :type degree: int

    :param lam: Ridge shrinkage, ``>= 0``.
    :type lam: float

    **Estimated parameters**

    :param `coefficients_`: polynomial coefficients, constant term first
    :type `coefficients_`: :class:`numpy.ndarray` of length ``degree + 1``
    """

    fitted_attribute = "coefficients_"

    def __init__(self, degree=2, lam=0.0):
        self.degree = degree
        self.lam = lam

    def _fit(self, x, y):
        X = expand_into_powers(x, int(self.degree))
        self.coefficients_ = fit_ridge_regression(X, y, self.lam)

    def _predict(self, x):
        return polynomial_function(self.coefficients_)(x)


class GaussianKernelSmoother(AbstractSmoother):
    r"""Gaussian kernel smoother (Nadaraya-Watson kernel regression).

    Each sample point is weighted by

    .. math::

        w_i(x) = \frac{\exp(-(x - x_i)^2 / \lambda)}
        {\sum_j \exp(-(x - x_j)^2 / \lambda)}

    and the prediction is :math:`\sum_i w_i(x) y_i`. Note that :math:`\lambda`
    divides the squared distance directly, i.e. the standard deviation of the
    kernel is :math:`\sqrt{\lambda / 2}`.

    The weights are normalized with :func:`scipy.special.softmax`, so query
    points far from all sample points still get weights summing to one.

    :param lam: Width of the kernel, ``> 0``.
    :type lam: float

    **Estimated parameters**

    :param `x_`: x values of the sample
    :type `x_`: :class:`numpy.ndarray` (float64, shape `(n_samples,)`)

    :param `y_`: y values of the sample
    :type `y_`: :class:`numpy.ndarray` (float64, shape `(n_samples,)`)
    """

    fitted_attribute = "x_"

    def __init__(self, lam=0.01):
        self.lam = lam

    def _fit(self, x, y):
        self.x_ = x.copy()
        self.y_ = y.copy()

    def _predict(self, x):
        d = x[:, np.newaxis] - self.x_[np.newaxis, :]
        weights = scipy.special.softmax(-d * d / self.lam, axis=1)
        return weights @ self.y_


class RunningLineSmoother(SortedSampleMixin, AbstractSmoother):
    """Running line smoother.

    For the smoothed value at ``x``, a simple linear regression is fitted to
    the sample points in the window ``[pos - k, pos + k)`` of the sample
    sorted by ``x``, where ``pos`` is the insertion position of ``x``, and
    evaluated at ``x``. The upper end of the window is excluded and clipped
    at the sample size (:attr:`WindowClipping.exclusive`), so a window holds
    at most ``2 * k`` points, one less than the windows of
    :class:`RunningMeanSmoother`.

    A window of points with identical ``x`` has no defined slope and yields
    ``nan``.

    :param k: Number of neighbors on each side of the window.
    :type k: int
    """

    def __init__(self, k=5):
        self.k = k

    def _predict(self, x):
        start, stop = neighborhood_bounds(self.x_sorted_, x, self.k, WindowClipping.exclusive)
        return np.fromiter(
            (
                linear_regressor(self.x_sorted_[i:j], self.y_sorted_[i:j])(xi)
                for xi, i, j in zip(x, start, stop)
            ),
            dtype=np.float64,
            count=len(x),
        )


class CubicSplineSmoother(AbstractSmoother):
    """Cubic regression spline with fixed knots and ridge shrinkage.

    ``n`` knots are placed uniformly inside the unit interval (see
    :func:`~scatter_smoothing.basis.fixed_knots`), the truncated power basis
    :func:`~scatter_smoothing.basis.spline_basis` is evaluated on the sample
    and the coefficients are estimated by
    :func:`~scatter_smoothing.regression.fit_ridge_regression`. The constant
    basis function is not shrunk.

    The sample needs at least ``n + 4`` points with distinct ``x`` for an
    unregularized fit.

    :param n: Number of knots.
    :type n: int

    :param lam: Ridge shrinkage, ``>= 0``.
    :type lam: float

    **Estimated parameters**

    :param `knots_`: knot positions
    :type `knots_`: :class:`numpy.ndarray` of length ``n``

    :param `basis_`: basis functions
    :type `basis_`: :obj:`list` of ``n + 4`` callables

    :param `coefficients_`: coefficients of the basis functions
    :type `coefficients_`: :class:`numpy.ndarray` of length ``n + 4``
    """

    fitted_attribute = "coefficients_"

    def __init__(self, n=5, lam=0.0):
        self.n = n
        self.lam = lam

    def _fit(self, x, y):
        self.knots_ = fixed_knots(self.n)
        self.basis_ = spline_basis(self.knots_)
        X = evaluate_spline_basis(self.basis_, x)
        self.coefficients_ = fit_ridge_regression(X, y, self.lam)

    def _predict(self, x):
        X = evaluate_spline_basis(self.basis_, x)
        X[:, 0] = 1.0
        return X @ self.coefficients_


class LocalWeightedRegressionSmoother(AbstractSmoother):
    r"""Locally weighted linear regression smoother.

    For the smoothed value at ``x``, the ``k`` sample points nearest to ``x``
    are weighted with the tricube kernel

    .. math::

        w_i = \left(1 - \left(\frac{d_i}{d_{max}}\right)^3\right)^3,
        \qquad d_i = |x - x_i|

    where :math:`d_{max}` is the largest distance among the ``k`` neighbors.
    A weighted simple linear regression
    (:func:`~scatter_smoothing.regression.weighted_linear_regressor`) is
    fitted to them and evaluated at ``x``. If all neighbors coincide with
    ``x``, they are weighted equally.

    If all neighbors with positive weight share the same ``x`` (e.g. for
    tied sample values), there is no slope to fit and the weighted mean of
    the neighbors' ``y`` values is returned instead.

    Since the farthest neighbor gets zero weight, ``k`` must be at least 3.

    :param k: Number of neighbors.
    :type k: int

    **Estimated parameters**

    :param `x_`: x values of the sample
    :type `x_`: :class:`numpy.ndarray` (float64, shape `(n_samples,)`)

    :param `y_`: y values of the sample
    :type `y_`: :class:`numpy.ndarray` (float64, shape `(n_samples,)`)
    """

    fitted_attribute = "x_"

    def __init__(self, k=7):
        self.k = k

    def _fit(self, x, y):
        self.x_ = x.copy()
        self.y_ = y.copy()

    def _smooth_value(self, x):
        distances = np.abs(self.x_ - x)
        nearest = np.argsort(distances, kind="mergesort")[: int(self.k)]
        d = distances[nearest]
        d_max = np.max(d)
        if d_max > 0:
            weights = (1.0 - (d / d_max) ** 3) ** 3
        else:
            weights = np.ones_like(d)
        x_near = self.x_[nearest]
        y_near = self.y_[nearest]
        x_weighted = x_near[weights > 0]
        if np.all(x_weighted == x_weighted[0]):
            # no slope without spread in x
            return wmean(y_near, weights)
        return weighted_linear_regressor(x_near, y_near, weights)(x)

    def _predict(self, x):
        return np.fromiter((self._smooth_value(xi) for xi in x), dtype=np.float64, count=len(x))


__all__ = [
    "ConstantMeanSmoother",
    "RunningMeanSmoother",
    "LinearRegressionSmoother",
    "PolynomialRidgeSmoother",
    "GaussianKernelSmoother",
    "RunningLineSmoother",
    "CubicSplineSmoother",
    "LocalWeightedRegressionSmoother",
]
