"""Wire-fitted Q-learning for continuous states and actions.

Top-level exports cover the pieces an experiment needs: the learner, its
config, the interpolator and approximator implementations, the wire record
and the registries.
"""

from .approximators import FunctionApproximator, MLPApproximator
from .config import ExperimentConfig, WireFitConfig
from .errors import InvalidArgumentError, InvalidSequenceError
from .experiment_runner import Environment, ExperimentRunner, RunResult, Transition
from .interpolators import Interpolator, WireFitInterpolator
from .learners import Learner, UpdateResult, WireFitQLearn
from .registry import ExperimentRegistry, InterpolatorRegistry, Registry
from .sinks import MetricSink
from .wire import Wire, wires_from_raw, wires_to_raw

__all__ = [
    'FunctionApproximator', 'MLPApproximator',
    'ExperimentConfig', 'WireFitConfig',
    'InvalidArgumentError', 'InvalidSequenceError',
    'Environment', 'ExperimentRunner', 'RunResult', 'Transition',
    'Interpolator', 'WireFitInterpolator',
    'Learner', 'UpdateResult', 'WireFitQLearn',
    'ExperimentRegistry', 'InterpolatorRegistry', 'Registry',
    'MetricSink',
    'Wire', 'wires_from_raw', 'wires_to_raw',
]
