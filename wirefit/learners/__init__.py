"""Learners: the choose/reinforce control loop."""

from .base import Learner, UpdateResult
from .wire_fit_qlearn import WireFitQLearn, grid_actions

__all__ = ['Learner', 'UpdateResult', 'WireFitQLearn', 'grid_actions']
