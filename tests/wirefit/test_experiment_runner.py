"""Tests for wirefit/experiment_runner.py: ExperimentRunner episode loop."""

import pytest

from wirefit import (
    Environment, ExperimentConfig, ExperimentRunner, Learner, MetricSink, RunResult,
    Transition, UpdateResult, WireFitQLearn,
)


class LineEnv:
    """Fixed state, reward equals the action."""

    state_dimensions = 1
    action_dimensions = 1
    min_action = [0.0]
    max_action = [1.0]

    def __init__(self):
        self.steps = 0

    def reset(self):
        return [0.5]

    def step(self, action):
        self.steps += 1
        return Transition(reward=float(action[0]), state=[0.5])

    def evaluation_states(self):
        return [[0.5]]

    def score(self, state, action):
        return float(action[0])


class RecordingSink(MetricSink):

    def __init__(self):
        self.emitted = []
        self.flushed = False

    def emit(self, metrics, step):
        self.emitted.append((step, dict(metrics)))

    def flush(self):
        self.flushed = True


class LineRunner(ExperimentRunner):

    def create_environment(self):
        self.env = LineEnv()
        return self.env


@pytest.fixture
def sink():
    return RecordingSink()


class TestEnvironmentProtocol:

    def test_line_env_conforms(self):
        assert isinstance(LineEnv(), Environment)


class TestRun:

    def test_emits_once_per_episode(self, sink):
        config = ExperimentConfig(episodes=10, eval_every=5)
        result = LineRunner(config, sinks=[sink]).run()
        assert isinstance(result, RunResult)
        assert [step for step, _ in sink.emitted] == list(range(1, 11))
        assert sink.flushed

    def test_metrics_content(self, sink):
        config = ExperimentConfig(episodes=4, eval_every=2)
        LineRunner(config, sinks=[sink]).run()
        _, first = sink.emitted[0]
        assert {'episode/reward', 'episode/exploration', 'update/q_value',
                'update/gd_iterations'} <= set(first)
        _, second = sink.emitted[1]
        assert 'eval/greedy_reward' in second
        assert 'eval/greedy_action' in second

    def test_eval_history(self, sink):
        config = ExperimentConfig(episodes=7, eval_every=3)
        result = LineRunner(config, sinks=[sink]).run()
        assert [episode for episode, _ in result.eval_history] == [3, 6, 7]
        assert result.final_greedy_reward == result.eval_history[-1][1]

    def test_exploration_decays_to_floor(self, sink):
        config = ExperimentConfig(episodes=5, exploration=1.0, exploration_decay=0.5, min_exploration=0.2)
        LineRunner(config, sinks=[sink]).run()
        explorations = [m['episode/exploration'] for _, m in sink.emitted]
        assert explorations == pytest.approx([1.0, 0.5, 0.25, 0.2, 0.2])

    def test_steps_per_episode(self, sink):
        config = ExperimentConfig(episodes=3, steps_per_episode=4)
        runner = LineRunner(config, sinks=[sink])
        runner.run()
        assert runner.env.steps == 12

    def test_default_learner_sized_to_environment(self):
        config = ExperimentConfig(number_of_wires=3, neurons_per_layer=5)
        learner = LineRunner(config, sinks=[]).create_learner(LineEnv())
        assert isinstance(learner, WireFitQLearn)
        assert learner.config.output_size == 6
        assert learner.config.min_action == [0.0]

    def test_same_seed_same_result(self):
        config = ExperimentConfig(episodes=15, eval_every=5, seed=9)
        a = LineRunner(config, sinks=[]).run()
        b = LineRunner(config, sinks=[]).run()
        assert a.eval_history == b.eval_history


class TestBuildConfig:

    def test_base_runner_requires_build_config(self):
        with pytest.raises(NotImplementedError):
            LineRunner.build_config(None)


class ConstantLearner(Learner):
    """Always proposes the same action; only best_action is used by evaluate."""

    def __init__(self, action):
        self.action = list(action)
        self.selections = 0

    def choose_best_action(self, state):
        self.selections += 1
        return list(self.action)

    def best_action(self, state):
        return list(self.action)

    def choose_boltzmann_action(self, state, exploration_constant):
        self.selections += 1
        return list(self.action)

    def apply_reinforcement_to_last_action(self, reward, new_state):
        return UpdateResult(q_value=reward)

    def reset(self):
        pass


class TestEvaluate:

    def test_scores_best_action_of_any_learner(self):
        learner = ConstantLearner([0.75])
        runner = LineRunner(ExperimentConfig(), sinks=[])
        assert runner.evaluate(learner, LineEnv()) == pytest.approx(0.75)
        assert learner.selections == 0

    def test_learner_must_define_best_action(self):
        class NoBestAction(Learner):
            choose_best_action = ConstantLearner.choose_best_action
            choose_boltzmann_action = ConstantLearner.choose_boltzmann_action
            apply_reinforcement_to_last_action = ConstantLearner.apply_reinforcement_to_last_action
            reset = ConstantLearner.reset

        with pytest.raises(TypeError):
            NoBestAction()
