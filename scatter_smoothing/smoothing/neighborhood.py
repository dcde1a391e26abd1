"""
Local neighborhoods in a sample sorted by ``x``, shared by the running
smoothers.
"""
from enum import Enum

import numpy as np

from scatter_smoothing.smoothing import _binary_search as binary_search


class WindowClipping(Enum):
    """How the window ``[pos - k, pos + k]`` around the insertion position
    ``pos`` of a query is clipped at the upper end of the sorted sample of
    length ``n``.

    * inclusive: the upper bound is an index clipped at ``n - 1`` and the
      element at that index belongs to the window. A window contains up to
      ``2 * k + 1`` elements.
    * exclusive: the upper bound is clipped at ``n`` and is the first index
      **after** the window. A window contains up to ``2 * k`` elements.

    The lower bound is always clipped at 0 and belongs to the window.
    """

    inclusive = "inclusive"
    exclusive = "exclusive"


def sort_sample(xs, ys):
    """Reorder ``(xs, ys)`` so that ``xs`` is ascending. Pairs with equal
    ``x`` keep their original order.

    :return: sorted copies of ``xs`` and ``ys``
    :rtype: :obj:`tuple` of 2 :class:`numpy.ndarray` (float64, ndim=1)
    """
    xs = np.asarray(xs, dtype=np.float64)
    ys = np.asarray(ys, dtype=np.float64)
    order = np.argsort(xs, kind="mergesort")
    return xs[order], ys[order]


def neighborhood_bounds(x_sorted, x, k, clipping):
    """Slice bounds of the neighborhoods of the query values ``x`` in the
    sorted sample ``x_sorted``.

    :param x_sorted: ascending x values of the sample
    :type x_sorted: :class:`numpy.ndarray` (float64, ndim=1)

    :param x: query values
    :type x: :class:`numpy.ndarray` (float64, ndim=1)

    :param k: neighbor half-width
    :type k: int

    :param clipping: clipping policy at the upper end
    :type clipping: :class:`WindowClipping`

    :return: arrays ``start`` and ``stop`` such that the neighborhood of
        ``x[i]`` is ``x_sorted[start[i]:stop[i]]``
    :rtype: :obj:`tuple` of 2 :class:`numpy.ndarray` (int64, ndim=1)
    """
    x_sorted = np.ascontiguousarray(x_sorted, dtype=np.float64)
    x = np.ascontiguousarray(x, dtype=np.float64)
    clipping = WindowClipping(clipping)
    n = len(x_sorted)

    start = np.empty(len(x), dtype=np.int64)
    stop = np.empty(len(x), dtype=np.int64)
    if clipping == WindowClipping.inclusive:
        binary_search.window_bounds_multi(x_sorted, x, int(k), n - 1, start, stop)
        stop += 1
    else:
        binary_search.window_bounds_multi(x_sorted, x, int(k), n, start, stop)
    return start, stop


__all__ = ["WindowClipping", "sort_sample", "neighborhood_bounds"]
