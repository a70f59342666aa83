"""Shared fixtures for wirefit unit tests."""

import pytest

from wirefit import WireFitConfig, Wire, wires_to_raw


# ---- Console singleton: force NULL mode before any test touches it ----

@pytest.fixture(autouse=True, scope="session")
def _silence_console():
    """Initialize WFConsole in NULL mode to suppress all output during tests.

    Must run before any code that calls WFConsole(). Session-scoped so
    the singleton is set once for the entire test run.
    """
    from console.config import ConsoleConfig, ConsoleMode
    from console.wfconsole import WFConsole
    WFConsole(ConsoleConfig(mode=ConsoleMode.NULL))


@pytest.fixture(autouse=True)
def _restore_null_console():
    """Put the console back into NULL mode after tests that reconfigure it
    (CLI error paths switch it to NORMAL)."""
    yield
    from console.config import ConsoleConfig, ConsoleMode
    from console.wfconsole import WFConsole
    console = WFConsole()
    if console.get_console_config().mode != ConsoleMode.NULL:
        console._initialize(ConsoleConfig(mode=ConsoleMode.NULL))


# ---- Approximator test double ----

class FixedWireApproximator:
    """Returns the same raw output for every state.

    ``train`` moves the stored output the fraction ``rate`` of the way to
    the target and records the call; ``reset`` restores the initial output.
    """

    def __init__(self, raw):
        self.initial = [float(v) for v in raw]
        self.raw = list(self.initial)
        self.train_calls = []

    def predict(self, state):
        return list(self.raw)

    def train(self, state, target, rate):
        self.train_calls.append((list(state), list(target), rate))
        self.raw = [c + rate * (t - c) for c, t in zip(self.raw, target)]
        return 0.0

    def reset(self):
        self.raw = list(self.initial)


@pytest.fixture
def fixed_wires():
    """Four 1-D wires; the best one sits at action 0.66."""
    return [
        Wire([0.0], 0.1),
        Wire([0.33], 0.5),
        Wire([0.66], 0.9),
        Wire([1.0], 0.2),
    ]


@pytest.fixture
def fixed_approximator(fixed_wires):
    return FixedWireApproximator(wires_to_raw(fixed_wires))


@pytest.fixture
def one_d_config():
    """1-D state, 1-D action in [0, 1], four wires."""
    return WireFitConfig(
        state_dimensions=1,
        action_dimensions=1,
        number_of_wires=4,
        min_action=[0.0],
        max_action=[1.0],
    )


@pytest.fixture
def make_approximator():
    """Factory for FixedWireApproximator over arbitrary raw output."""
    return FixedWireApproximator
