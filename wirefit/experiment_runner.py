"""Experiment runner and the environment contract it drives.

ExperimentRunner owns the episode loop: choose a Boltzmann action, step the
environment, reinforce, decay exploration, report. Experiments never write
the loop; they supply an environment, a config and (optionally) a learner.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Protocol, Sequence, runtime_checkable

from console import WFConsole
from .config import ExperimentConfig
from .learners import Learner, WireFitQLearn
from .sinks import ConsoleSink, MetricSink
from .utils import set_seeds, set_determinism


@dataclass
class Transition:
    """Returned by Environment.step()."""
    reward: float
    state: list[float]
    done: bool = False


@runtime_checkable
class Environment(Protocol):
    """Continuous-state, continuous-action task."""

    state_dimensions: int
    action_dimensions: int
    min_action: list[float]
    max_action: list[float]

    def reset(self) -> list[float]:
        """Start an episode and return its first state."""
        ...

    def step(self, action: Sequence[float]) -> Transition:
        ...

    def evaluation_states(self) -> list[list[float]]:
        """Fixed states used to score the greedy policy."""
        ...

    def score(self, state: Sequence[float], action: Sequence[float]) -> float:
        """Immediate reward of ``action`` in ``state``, without side effects."""
        ...


@dataclass
class RunResult:
    """Summary of one experiment run."""
    episodes: int
    final_greedy_reward: float
    eval_history: list[tuple[int, float]] = field(default_factory=list)   # (episode, mean greedy reward)


class ExperimentRunner(ABC):
    """Base class for all experiments.

    Subclasses implement ``create_environment`` and ``build_config``;
    ``create_learner`` defaults to a ``WireFitQLearn`` sized to the
    environment.
    """

    config_class = ExperimentConfig

    def __init__(self, config: ExperimentConfig, sinks: list[MetricSink] | None = None,
                 interpolator: str = 'wirefit'):
        self.config = config
        self.console = WFConsole()
        self.sinks = sinks if sinks is not None else [ConsoleSink(every=config.eval_every)]
        self.interpolator = interpolator

    # === CLI / Factory classmethods ===

    @classmethod
    def add_args(cls, parser):
        """Add experiment-specific CLI args to parser. Override in subclasses."""
        pass

    @classmethod
    def build_config(cls, args):
        """Build config dataclass from parsed CLI args. Must override."""
        raise NotImplementedError(
            f"{cls.__name__} must implement build_config()"
        )

    @classmethod
    def build_runner(cls, config, args):
        """Factory to create runner instance from config and parsed args."""
        return cls(config=config, interpolator=getattr(args, 'interpolator', 'wirefit'))

    # === Component creation ===

    @abstractmethod
    def create_environment(self) -> Environment:
        ...

    def create_learner(self, env: Environment) -> Learner:
        cfg = self.config
        return WireFitQLearn.from_dimensions(
            state_dimensions=env.state_dimensions,
            action_dimensions=env.action_dimensions,
            hidden_layers=cfg.hidden_layers,
            neurons_per_layer=cfg.neurons_per_layer,
            number_of_wires=cfg.number_of_wires,
            min_action=env.min_action,
            max_action=env.max_action,
            base_of_dimensions=cfg.base_of_dimensions,
            interpolator=self.interpolator,
            learning_rate=cfg.learning_rate,
            devaluation_factor=cfg.devaluation_factor,
            seed=cfg.seed,
        )

    # === Evaluation ===

    def evaluate(self, learner: Learner, env: Environment) -> float:
        """Mean immediate reward of the greedy action over the evaluation states.

        Uses ``best_action`` so evaluation does not disturb the recorded last
        action.
        """
        states = env.evaluation_states()
        return sum(env.score(state, learner.best_action(state)) for state in states) / len(states)

    # === Main loop ===

    def run(self) -> RunResult:
        cfg = self.config
        set_seeds(cfg.seed)
        set_determinism(True)

        env = self.create_environment()
        learner = self.create_learner(env)

        name = cfg.experiment_name or self.__class__.__name__
        self.console.rule(name)
        self.console.print(
            f"[label]Learner:[/label] [metric.value]{learner.name}[/metric.value]  "
            f"[label]Episodes:[/label] [metric.value]{cfg.episodes}[/metric.value]  "
            f"[label]Exploration:[/label] [metric.value]{cfg.exploration}[/metric.value]"
        )

        exploration = cfg.exploration
        eval_history: list[tuple[int, float]] = []
        self.console.create_progress_task("episodes", "Training", total=cfg.episodes)
        try:
            for episode in range(1, cfg.episodes + 1):
                metrics = self._run_episode(learner, env, exploration)
                metrics['episode/exploration'] = exploration

                if episode % cfg.eval_every == 0 or episode == cfg.episodes:
                    greedy = self.evaluate(learner, env)
                    eval_history.append((episode, greedy))
                    metrics['eval/greedy_reward'] = greedy
                    metrics['eval/greedy_action'] = learner.best_action(env.evaluation_states()[0])

                for sink in self.sinks:
                    sink.emit(metrics, episode)

                exploration = max(cfg.min_exploration, exploration * cfg.exploration_decay)
                self.console.update_progress_task("episodes", advance=1)
        finally:
            self.console.remove_progress_task("episodes")
            for sink in self.sinks:
                sink.flush()

        final = eval_history[-1][1]
        self.console.print_complete(f"{name} finished: greedy reward {final:.4f}")
        return RunResult(episodes=cfg.episodes, final_greedy_reward=final, eval_history=eval_history)

    def _run_episode(self, learner: Learner, env: Environment, exploration: float) -> dict:
        state = env.reset()
        total_reward = 0.0
        update_metrics: dict = {}
        for _ in range(self.config.steps_per_episode):
            action = learner.choose_boltzmann_action(state, exploration)
            transition = env.step(action)
            result = learner.apply_reinforcement_to_last_action(transition.reward, transition.state)
            total_reward += transition.reward
            update_metrics = result.metrics
            state = transition.state
            if transition.done:
                break

        metrics = {f'update/{k}': v for k, v in update_metrics.items()}
        metrics['episode/reward'] = total_reward
        return metrics
