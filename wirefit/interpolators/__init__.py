"""Reward interpolation over wires."""

from .base import Interpolator
from .wire_fit import WireFitInterpolator

__all__ = ['Interpolator', 'WireFitInterpolator']
