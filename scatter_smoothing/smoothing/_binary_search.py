from numba import jit


@jit(nopython=True)
def le(z, z_searched, inclusive):
    """
    Binary search for the **last** element **less than or equal to**
    a given value in a sorted float64 array

    :param z: sorted array to search in; consecutive repetitions of values are
        allowed.
    :type z: :class:`numpy.ndarray` `(float64, ndim=1)`

    :param z_searched: value to look for
    :type z_searched: float64

    :param inclusive: whether to always return a valid index, see below
    :type inclusive: bool

    :return: the index of the last element **less than or equal to**
        ``z_searched``; If ``z_searched`` is less than all elements in ``z``,
        -1 or 0 is returned for ``inclusive=False, True``, respectively.
    :rtype: int64_t
    """
    i_left = 0 if inclusive else -1
    i_right = z.shape[0]
    while i_left < i_right - 1:
        i = (i_left + i_right) // 2
        if z[i] <= z_searched:
            i_left = i
        else:
            i_right = i
    return i_left


@jit(nopython=True)
def bisect_right(z, z_searched):
    """
    Insertion position of ``z_searched`` in a sorted float64 array to the
    right of all elements equal to it, like :func:`bisect.bisect_right`.

    :return: a position between 0 and ``len(z)``, both included.
    :rtype: int64_t
    """
    return le(z, z_searched, False) + 1


@jit(nopython=True)
def window_bounds_multi(z, z_searched, k, upper_limit, lower, upper):
    """
    Bounds of the neighborhoods ``[pos - k, pos + k]`` around the insertion
    positions ``pos`` (see :func:`bisect_right`) of the values in
    ``z_searched``, clipped to ``[0, upper_limit]``.

    :param z: sorted array to search in
    :type z: :class:`numpy.ndarray` (float64, ndim=1)

    :param z_searched: Values to search for.
    :type z_searched: :class:`numpy.ndarray` (float64, ndim=1)

    :param k: half-width of the neighborhood
    :type k: int64_t

    :param upper_limit: largest admissible upper bound
    :type upper_limit: int64_t

    :param lower: where to put the lower bounds
    :type lower: :class:`numpy.ndarray` (int64, ndim=1), same length as
        ``z_searched``

    :param upper: where to put the upper bounds
    :type upper: :class:`numpy.ndarray` (int64, ndim=1), same length as
        ``z_searched``
    """
    n = z_searched.shape[0]
    if lower.shape[0] != n or upper.shape[0] != n:
        raise ValueError("Inconsistent lengths of z_searched and result.")
    for i in range(n):
        pos = bisect_right(z, z_searched[i])
        lower[i] = max(0, pos - k)
        upper[i] = min(upper_limit, pos + k)
