"""Shared utility functions."""

from .reproducibility import set_seeds, set_determinism

__all__ = ['set_seeds', 'set_determinism']
