"""
Catalog of the available smoothers for presentation layers

Every :class:`SmootherKind` maps to a :class:`SmootherEntry` with a display
label, the descriptors of its hyperparameters and a factory:

>>> from scatter_smoothing.smoothing.registry import make_smoother
>>> fit = make_smoother("linear-regression")
>>> predict = fit([0.0, 1.0, 2.0], [1.0, 3.0, 5.0])
>>> [round(float(v), 6) for v in predict([3.0])]
[7.0]

The bounds of the descriptors are hints for input widgets only; they are
not checked when a smoother is configured or fitted.
"""
import logging
import warnings
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Dict, Mapping, Optional, Tuple, Type, Union

import pandas as pd

from scatter_smoothing.smoothing import onedim
from scatter_smoothing.smoothing.base import AbstractSmoother

_logger = logging.getLogger(__name__)


class SmootherKind(Enum):
    """Identifiers of the available smoothers."""

    constant_mean = "constant-mean"
    running_mean = "running-mean"
    linear_regression = "linear-regression"
    polynomial_ridge_regression = "polynomial-ridge-regression"
    gaussian_kernel = "gaussian-kernel"
    running_line = "running-line"
    cubic_spline_fixed_knots = "cubic-spline-fixed-knots"
    local_weighted_regression = "local-weighted-regression"


@dataclass(frozen=True)
class ParameterDescriptor:
    """Description of a hyperparameter for input widgets.

    :param name: key of the parameter in a parameter mapping
    :param label: display label
    :param min: smallest suggested value
    :param max: largest suggested value
    :param step: suggested increment
    :param dtype: ``int`` or ``float``; values are converted to it
    :param argument: name of the estimator's constructor argument, if it
        differs from ``name``
    """

    name: str
    label: str
    min: float
    max: float
    step: float
    dtype: type = float
    argument: Optional[str] = None

    @property
    def keyword(self) -> str:
        return self.argument or self.name

    def convert(self, value: Any) -> Union[int, float]:
        if self.dtype is int:
            return int(float(value))
        return float(value)


FitFunction = Callable[..., Any]


@dataclass(frozen=True)
class SmootherEntry:
    """A smoother in the catalog.

    :param label: display label
    :param estimator: the smoother class, see
        :mod:`scatter_smoothing.smoothing.onedim`
    :param parameters: descriptors of the hyperparameters in display order
    """

    label: str
    estimator: Type[AbstractSmoother]
    parameters: Tuple[ParameterDescriptor, ...] = ()

    def estimator_params(self, parameters: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
        """Translate a mapping from parameter names to values into keyword
        arguments of the estimator.

        Every declared parameter must be present; undeclared names are
        ignored with a warning.
        """
        parameters = dict(parameters or {})
        unknown = sorted(set(parameters) - {p.name for p in self.parameters})
        if unknown:
            warnings.warn("Ignoring unknown parameters {} for the smoother {}".format(unknown, self.label))
        return {p.keyword: p.convert(parameters[p.name]) for p in self.parameters}

    def smoother(self, parameters: Optional[Mapping[str, Any]] = None) -> Callable[[Any, Any], FitFunction]:
        """Configure the smoother.

        :return: a function consuming the sample ``(xs, ys)`` and returning
            the fit function, which maps query values of ``x`` to smoothed
            values of ``y``
        """
        kwargs = self.estimator_params(parameters)

        def fit(xs, ys):
            est = self.estimator(**kwargs)
            est.fit(xs, ys)
            _logger.debug("Fitted {0} with {1}".format(self.label, kwargs))
            return est.predict

        return fit


_NEIGHBORS = "Number of Neighbors"
_RIDGE_SHRINKAGE = "Ridge Shrinkage"

SMOOTHERS: Dict[SmootherKind, SmootherEntry] = {
    SmootherKind.constant_mean: SmootherEntry("Constant Mean", onedim.ConstantMeanSmoother),
    SmootherKind.running_mean: SmootherEntry(
        "Running Mean",
        onedim.RunningMeanSmoother,
        (ParameterDescriptor("k", _NEIGHBORS, 1, 20, 1, int),),
    ),
    SmootherKind.linear_regression: SmootherEntry("Linear Regression", onedim.LinearRegressionSmoother),
    SmootherKind.polynomial_ridge_regression: SmootherEntry(
        "Polynomial Ridge Regression",
        onedim.PolynomialRidgeSmoother,
        (
            ParameterDescriptor("degree", "Polynomial Degree", 1, 20, 1, int),
            ParameterDescriptor("lambda", _RIDGE_SHRINKAGE, 0.0, 0.1, 0.0005, float, "lam"),
        ),
    ),
    SmootherKind.gaussian_kernel: SmootherEntry(
        "Gaussian Kernel Smoother",
        onedim.GaussianKernelSmoother,
        (ParameterDescriptor("lambda", "Width of Kernel", 0.001, 0.05, 0.001, float, "lam"),),
    ),
    SmootherKind.running_line: SmootherEntry(
        "Running Line",
        onedim.RunningLineSmoother,
        (ParameterDescriptor("k", _NEIGHBORS, 2, 20, 1, int),),
    ),
    SmootherKind.cubic_spline_fixed_knots: SmootherEntry(
        "Cubic Spline (Fixed Knots)",
        onedim.CubicSplineSmoother,
        (
            ParameterDescriptor("n", "Number of Knots", 2, 10, 1, int),
            ParameterDescriptor("lambda", _RIDGE_SHRINKAGE, 0.0, 0.01, 0.00001, float, "lam"),
        ),
    ),
    SmootherKind.local_weighted_regression: SmootherEntry(
        "Local Weighted Regression",
        onedim.LocalWeightedRegressionSmoother,
        (ParameterDescriptor("k", _NEIGHBORS, 3, 20, 1, int),),
    ),
}


def check_smoother_kind(kind):
    """Convert ``kind`` to a :class:`SmootherKind`.

    :param kind: a :class:`SmootherKind` or its value, e.g.
        ``"running-mean"``

    :raises KeyError: for unknown smoothers
    """
    try:
        return SmootherKind(kind)
    except ValueError:
        raise KeyError(
            "Only the following smoothers are available: {}".format(", ".join(k.value for k in SmootherKind))
        ) from None


def get_smoother(kind) -> SmootherEntry:
    """Look up the catalog entry of a smoother."""
    return SMOOTHERS[check_smoother_kind(kind)]


def make_smoother(kind, parameters: Optional[Mapping[str, Any]] = None):
    """Configure the smoother ``kind`` with a mapping of hyperparameter
    values, see :meth:`SmootherEntry.smoother`."""
    return get_smoother(kind).smoother(parameters)


def parameter_table() -> pd.DataFrame:
    """All hyperparameter descriptors of the catalog, one row per smoother
    and parameter, in catalog order."""
    rows = [
        {
            "smoother": kind.value,
            "smoother_label": entry.label,
            "name": p.name,
            "label": p.label,
            "min": p.min,
            "max": p.max,
            "step": p.step,
        }
        for kind, entry in SMOOTHERS.items()
        for p in entry.parameters
    ]
    return pd.DataFrame(rows, columns=["smoother", "smoother_label", "name", "label", "min", "max", "step"])


__all__ = [
    "SmootherKind",
    "ParameterDescriptor",
    "SmootherEntry",
    "SMOOTHERS",
    "check_smoother_kind",
    "get_smoother",
    "make_smoother",
    "parameter_table",
]
