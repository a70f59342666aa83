"""Reproducibility utilities: seeds and determinism."""

import os
import random

import numpy as np
import torch


def set_seeds(seed: int):
    """Set random seeds for reproducibility across all backends."""
    # PYTHONHASHSEED only affects hash randomization when set before the
    # interpreter starts; it is recorded here for child processes.
    os.environ['PYTHONHASHSEED'] = str(seed)
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)


def set_determinism(enabled: bool = True):
    """Configure torch deterministic algorithm enforcement.

    Learners run on CPU in float64, so this only toggles
    ``torch.use_deterministic_algorithms``.
    """
    torch.use_deterministic_algorithms(enabled)
