"""State -> wire-output function approximators."""

from .base import FunctionApproximator
from .mlp import MLPApproximator

__all__ = ['FunctionApproximator', 'MLPApproximator']
