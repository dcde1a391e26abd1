"""
Base classes for smoothers
"""
import logging

import sklearn.base as sklearnb

from scatter_smoothing.smoothing.neighborhood import sort_sample
from scatter_smoothing.utils import as_float_array

_logger = logging.getLogger(__name__)


class AbstractSmoother(sklearnb.RegressorMixin, sklearnb.BaseEstimator):
    """**Abstract base class** for smoothers of one-dimensional scatter data.

    Please implement the methods ``_fit`` and ``_predict``. Both receive
    one-dimensional float64 arrays; :meth:`fit` and :meth:`predict` take care
    of the conversion of lists, :class:`pandas.Series` or two-dimensional
    arrays (of which the first column is used).

    Set the name of an estimated parameter in ``fitted_attribute``; it is used
    to detect a call of :meth:`predict` before :meth:`fit`.
    """

    fitted_attribute = None

    def fit(self, X, y):
        x = as_float_array(X)
        y = as_float_array(y)
        _logger.debug("Fitting {0} on {1} samples".format(self.__class__.__name__, len(x)))
        self._fit(x, y)
        return self

    def predict(self, X):
        if self.fitted_attribute is not None and getattr(self, self.fitted_attribute, None) is None:
            raise ValueError("The {} has not been fitted!".format(self.__class__.__name__))
        return self._predict(as_float_array(X))

    def _fit(self, x, y):
        raise NotImplementedError

    def _predict(self, x):
        raise NotImplementedError


class SortedSampleMixin(object):
    """Mixin for smoothers working on neighborhoods of the sample sorted by
    ``x``.

    **Estimated parameters**

    :param `x_sorted_`: ascending x values of the sample
    :type `x_sorted_`: :class:`numpy.ndarray` (float64, shape `(n_samples,)`)

    :param `y_sorted_`: y values in the order of ``x_sorted_``
    :type `y_sorted_`: :class:`numpy.ndarray` (float64, shape `(n_samples,)`)
    """

    fitted_attribute = "x_sorted_"

    def _fit(self, x, y):
        self.x_sorted_, self.y_sorted_ = sort_sample(x, y)


__all__ = ["AbstractSmoother", "SortedSampleMixin"]
