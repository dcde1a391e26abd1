"""
Numeric primitives shared by the regression core and the smoothers
"""
import numpy as np


def as_float_array(x):
    """Convert a sample or a query to a one-dimensional float64 array.

    Lists, tuples, :class:`numpy.ndarray` and :class:`pandas.Series` are
    accepted. For two-dimensional input (e.g. ``np.c_[x]``) the first column
    is used.

    :param x: values to convert
    :type x: array-like

    :rtype: :class:`numpy.ndarray` (float64, ndim=1)

    >>> from scatter_smoothing.utils import as_float_array
    >>> as_float_array([1, 2, 3]).dtype
    dtype('float64')
    >>> as_float_array(np.c_[[1, 2], [3, 4]]).tolist()
    [1.0, 2.0]
    """
    x = np.asarray(x, dtype=np.float64)
    if x.ndim == 2:
        x = x[:, 0]
    return np.atleast_1d(x)


def dot(v1, v2):
    """Sum of the elementwise products of two vectors of equal length."""
    return np.dot(np.asarray(v1, dtype=np.float64), np.asarray(v2, dtype=np.float64))


def expand_into_powers(x, degree):
    """Expand ``x`` into the powers ``[1, x, x**2, ..., x**degree]``.

    :param x: value(s) to expand
    :type x: :obj:`float` or :class:`numpy.ndarray` (float64, ndim=1)

    :param degree: highest power
    :type degree: int

    :return: an array of length ``degree + 1`` for a scalar, or the design
        matrix of shape ``(len(x), degree + 1)`` for an array.
    :rtype: :class:`numpy.ndarray`

    >>> from scatter_smoothing.utils import expand_into_powers
    >>> expand_into_powers(2.0, 3).tolist()
    [1.0, 2.0, 4.0, 8.0]
    >>> expand_into_powers(np.array([1.0, 3.0]), 2).tolist()
    [[1.0, 1.0, 1.0], [1.0, 3.0, 9.0]]
    """
    x = np.asarray(x, dtype=np.float64)
    return x[..., np.newaxis] ** np.arange(int(degree) + 1)


def linear_function(m, b):
    """Wrap a slope ``m`` and an intercept ``b`` into the function
    ``x -> b + m * x``."""

    def f(x):
        return b + m * x

    return f


def polynomial_function(betas):
    """Return the polynomial with the coefficients ``betas`` (constant term
    first) as a function of ``x``.

    >>> from scatter_smoothing.utils import polynomial_function
    >>> p = polynomial_function([1.0, 0.0, 2.0])
    >>> float(p(3.0))
    19.0
    """
    betas = np.asarray(betas, dtype=np.float64)

    def f(x):
        return np.dot(expand_into_powers(x, len(betas) - 1), betas)

    return f


def wmean(x, w):
    r"""Weighted mean of ``x`` with weights ``w``.

    .. math::

        \bar{x}_w = \frac{\sum_i w_i x_i}{\sum_i w_i}

    The weights do not need to be normalized. If they sum to zero, the result
    is ``nan``.

    :param x: values :math:`x_i`
    :type x: :class:`numpy.ndarray` (float64, dim=1)

    :param w: weights :math:`w_i`
    :type w: :class:`numpy.ndarray` (float64, dim=1)
    """
    x = np.asarray(x, dtype=np.float64)
    w = np.asarray(w, dtype=np.float64)
    return np.sum(x * w) / np.sum(w)


def vectorize(f):
    """Convert a function mapping numbers to numbers into one mapping arrays
    to arrays of the same length and order.

    >>> from scatter_smoothing.utils import vectorize
    >>> vectorize(lambda x: x + 1)([1, 2]).tolist()
    [2.0, 3.0]
    """
    vf = np.vectorize(f, otypes=[np.float64])

    def apply(arr):
        return vf(as_float_array(arr))

    return apply


__all__ = [
    "as_float_array",
    "dot",
    "expand_into_powers",
    "linear_function",
    "polynomial_function",
    "wmean",
    "vectorize",
]
