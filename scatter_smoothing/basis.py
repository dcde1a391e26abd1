"""
Basis expansions for regression splines with fixed knots
"""
import functools
import logging

import numpy as np

_logger = logging.getLogger(__name__)


def _constant(x):
    return np.ones_like(np.asarray(x, dtype=np.float64))


def _identity(x):
    return np.asarray(x, dtype=np.float64)


def _square(x):
    x = np.asarray(x, dtype=np.float64)
    return x * x


def _cube(x):
    x = np.asarray(x, dtype=np.float64)
    return x * x * x


def _truncated_cube(knot, x):
    return np.maximum((np.asarray(x, dtype=np.float64) - knot) ** 3, 0.0)


def spline_basis(knots):
    r"""Truncated power basis of cubic splines with knots at a fixed set of
    points.

    The first four entries span the global cubic polynomials
    :math:`1, x, x^2, x^3`, followed by one truncated cubic
    :math:`\max((x - \xi_j)^3, 0)` per knot :math:`\xi_j`.

    :param knots: knot positions
    :type knots: sequence of float

    :return: basis functions, each accepting a scalar or an array
    :rtype: :obj:`list` of callables

    >>> from scatter_smoothing.basis import spline_basis
    >>> basis = spline_basis([0.5])
    >>> len(basis)
    5
    >>> [float(b(1.0)) for b in basis]
    [1.0, 1.0, 1.0, 1.0, 0.125]
    """
    basis = [_constant, _identity, _square, _cube]
    for knot in knots:
        basis.append(functools.partial(_truncated_cube, float(knot)))
    return basis


def evaluate_spline_basis(basis, xs):
    """Evaluate every basis function at every value of ``xs``.

    :return: the design matrix with one row per value of ``xs`` and one column
        per basis function
    :rtype: :class:`numpy.ndarray` (float64, shape `(len(xs), len(basis))`)
    """
    xs = np.asarray(xs, dtype=np.float64).reshape(-1)
    return np.column_stack([s(xs) for s in basis])


def fixed_knots(n):
    """Place ``n`` knots at uniform fractions of the unit interval, leaving
    out both interval ends.

    >>> from scatter_smoothing.basis import fixed_knots
    >>> fixed_knots(3).tolist()
    [0.25, 0.5, 0.75]
    """
    n = int(n)
    knots = np.linspace(0.0, 1.0, n + 2)[1 : n + 1]
    _logger.debug("Placed {0} knots at {1}".format(n, knots))
    return knots


__all__ = ["spline_basis", "evaluate_spline_basis", "fixed_knots"]
