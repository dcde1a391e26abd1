"""
Least squares core: simple (weighted) linear regression and ridge regression
via the regularized normal equations.
"""
import logging

import numpy as np

from scatter_smoothing.utils import linear_function, wmean

_logger = logging.getLogger(__name__)


def linear_regression(x, y, w=None):
    r"""Performs a simple linear regression from the first and second moments
    of the sample, optionally with sample weights.

    :math:`f(x) = y = \alpha + \beta \cdot x`

    .. math::

        \beta = \frac{E[xy] - E[x] E[y]}{E[x^2] - E[x]^2},
        \qquad \alpha = E[y] - \beta E[x]

    With weights all expectations are weighted means (see
    :func:`~scatter_smoothing.utils.wmean`). A sample with constant ``x``
    has no defined slope; the result is then ``nan`` or ``inf``.

    :param x: x vector
    :type x: :class:`numpy.ndarray`

    :param y: y vector
    :type y: :class:`numpy.ndarray`

    :param w: weight vector, `None` for equal weights
    :type w: :class:`numpy.ndarray` or `None`

    :returns: The coefficients `alpha` and `beta`.
    :rtype: :obj:`tuple` of 2 :obj:`float`
    """
    x = np.asarray(x, dtype=np.float64)
    y = np.asarray(y, dtype=np.float64)
    if w is None:
        x_mean = np.mean(x)
        y_mean = np.mean(y)
        xy_mean = np.mean(x * y)
        xsq_mean = np.mean(x * x)
    else:
        x_mean = wmean(x, w)
        y_mean = wmean(y, w)
        xy_mean = wmean(x * y, w)
        xsq_mean = wmean(x * x, w)
    beta = (xy_mean - x_mean * y_mean) / (xsq_mean - x_mean * x_mean)
    alpha = y_mean - beta * x_mean
    return alpha, beta


def linear_regressor(xs, ys):
    """Simple linear regression on the data ``(xs, ys)``.

    :return: the fitted line as a function of ``x``

    >>> from scatter_smoothing.regression import linear_regressor
    >>> f = linear_regressor([0.0, 1.0, 2.0], [1.0, 3.0, 5.0])
    >>> round(float(f(10.0)), 6)
    21.0
    """
    alpha, beta = linear_regression(xs, ys)
    return linear_function(beta, alpha)


def weighted_linear_regressor(xs, ys, ws):
    """Simple linear regression on the data ``(xs, ys)`` with the sample
    weights ``ws``, which do not need to be normalized.

    :return: the fitted line as a function of ``x``
    """
    alpha, beta = linear_regression(xs, ys, ws)
    return linear_function(beta, alpha)


def make_ridge_shrinkage_matrix(n, lam):
    """Diagonal penalty matrix of shape ``(n + 1, n + 1)`` with ``lam`` on
    the diagonal, except for the intercept position ``[0, 0]``, which is
    never shrunk.

    >>> from scatter_smoothing.regression import make_ridge_shrinkage_matrix
    >>> make_ridge_shrinkage_matrix(2, 0.5).tolist()
    [[0.0, 0.0, 0.0], [0.0, 0.5, 0.0], [0.0, 0.0, 0.5]]
    """
    shrink_matrix = np.diag(np.repeat(np.float64(lam), n + 1))
    shrink_matrix[0, 0] = 0.0
    return shrink_matrix


def fit_ridge_regression(X, ys, lam):
    r"""Ridge regression through the regularized normal equations

    .. math::

        (X^T X + \lambda D) \beta = X^T y

    where :math:`D` is the identity with the first diagonal entry set to zero
    so that the intercept column (the first column of ``X``) is not shrunk.

    No fallback is attempted for a singular system; the
    :class:`numpy.linalg.LinAlgError` raised by :func:`numpy.linalg.solve`
    reaches the caller.

    :param X: design matrix, one basis expansion per sample
    :type X: :class:`numpy.ndarray` (float64, shape `(n_samples, n_basis)`)

    :param ys: targets
    :type ys: :class:`numpy.ndarray` (float64, shape `(n_samples,)`)

    :param lam: regularization strength, ``>= 0``
    :type lam: float

    :return: the coefficients :math:`\beta`
    :rtype: :class:`numpy.ndarray` (float64, shape `(n_basis,)`)
    """
    X = np.asarray(X, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    Xt = X.T
    XtX = Xt @ X
    Xty = Xt @ ys
    shrink_matrix = make_ridge_shrinkage_matrix(X.shape[1] - 1, lam)
    _logger.debug("Solving ridge normal equations of shape {0} with lambda={1}".format(XtX.shape, lam))
    betas = np.linalg.solve(XtX + shrink_matrix, Xty)
    return betas


__all__ = [
    "linear_regression",
    "linear_regressor",
    "weighted_linear_regressor",
    "make_ridge_shrinkage_matrix",
    "fit_ridge_regression",
]
