"""
Smoothers of one-dimensional scatter data and their catalog.
"""
from scatter_smoothing.smoothing.neighborhood import WindowClipping
from scatter_smoothing.smoothing.registry import SmootherKind

from scatter_smoothing.smoothing import neighborhood
from scatter_smoothing.smoothing import onedim
from scatter_smoothing.smoothing import registry

__all__ = [
    "SmootherKind",
    "WindowClipping",
    "neighborhood",
    "onedim",
    "registry",
]
