"""This package fits smooth curves through noisy scatter data.

Given a sample ``(x_1, y_1), ..., (x_n, y_n)``, a smoother produces a
function mapping any ``x`` to a smoothed estimate of ``y``.

Smoothers

- :class:`~.ConstantMeanSmoother`
- :class:`~.RunningMeanSmoother`
- :class:`~.LinearRegressionSmoother`
- :class:`~.PolynomialRidgeSmoother`
- :class:`~.GaussianKernelSmoother`
- :class:`~.RunningLineSmoother`
- :class:`~.CubicSplineSmoother`
- :class:`~.LocalWeightedRegressionSmoother`

Catalog for presentation layers

- :class:`~.SmootherKind`
- :data:`~.SMOOTHERS`
- :func:`~.make_smoother`
"""

from scatter_smoothing.smoothing.onedim import (
    ConstantMeanSmoother,
    RunningMeanSmoother,
    LinearRegressionSmoother,
    PolynomialRidgeSmoother,
    GaussianKernelSmoother,
    RunningLineSmoother,
    CubicSplineSmoother,
    LocalWeightedRegressionSmoother,
)
from scatter_smoothing.smoothing.registry import (
    SMOOTHERS,
    SmootherKind,
    get_smoother,
    make_smoother,
    parameter_table,
)

__all__ = [
    "ConstantMeanSmoother",
    "RunningMeanSmoother",
    "LinearRegressionSmoother",
    "PolynomialRidgeSmoother",
    "GaussianKernelSmoother",
    "RunningLineSmoother",
    "CubicSplineSmoother",
    "LocalWeightedRegressionSmoother",
    "SMOOTHERS",
    "SmootherKind",
    "get_smoother",
    "make_smoother",
    "parameter_table",
]

__version__ = "0.1"
