"""Multilayer perceptron approximator.

Sigmoid hidden layers and a linear output layer, trained by SGD on summed
squared error. The output layer starts with zero weights and a bias of
``output_bias``, so the untrained network produces exactly ``output_bias``
for every state. Learners use this to start from a known wire layout.
"""

from __future__ import annotations

from typing import Sequence

import torch
import torch.nn as nn
from torch.optim import SGD

from ..errors import InvalidArgumentError


class MLPApproximator:
    """State -> raw wire output network with an in-place trainer.

    Args:
        input_size: Length of the state vector.
        output_size: Length of the raw output vector.
        hidden_layers: Number of sigmoid hidden layers (0 gives a linear model).
        neurons_per_layer: Width of every hidden layer.
        output_bias: Initial output for every state. Defaults to zeros.
        seed: Seed for weight initialization; ``reset()`` reuses it, so a
            reset network is identical to a freshly built one.
        train_lr: SGD step size used by ``train``.
        train_epochs: Maximum SGD steps per ``train`` call.
        train_error_target: ``train`` stops once the loss drops below this.
    """

    def __init__(
        self,
        input_size: int,
        output_size: int,
        hidden_layers: int = 1,
        neurons_per_layer: int = 12,
        output_bias: Sequence[float] | None = None,
        seed: int = 0,
        train_lr: float = 0.05,
        train_epochs: int = 200,
        train_error_target: float = 1e-8,
    ):
        if input_size <= 0:
            raise InvalidArgumentError(f"input_size must be > 0, got {input_size}")
        if output_size <= 0:
            raise InvalidArgumentError(f"output_size must be > 0, got {output_size}")
        if hidden_layers < 0:
            raise InvalidArgumentError(f"hidden_layers must be >= 0, got {hidden_layers}")
        if neurons_per_layer <= 0:
            raise InvalidArgumentError(f"neurons_per_layer must be > 0, got {neurons_per_layer}")
        if train_lr <= 0:
            raise InvalidArgumentError(f"train_lr must be > 0, got {train_lr}")
        if train_epochs <= 0:
            raise InvalidArgumentError(f"train_epochs must be > 0, got {train_epochs}")

        self.input_size = input_size
        self.output_size = output_size
        self.seed = seed
        self.train_lr = train_lr
        self.train_epochs = train_epochs
        self.train_error_target = train_error_target

        if output_bias is None:
            self.output_bias = torch.zeros(output_size, dtype=torch.float64)
        else:
            self.output_bias = torch.as_tensor(output_bias, dtype=torch.float64).reshape(-1)
            if self.output_bias.shape[0] != output_size:
                raise InvalidArgumentError(
                    f"output_bias must have {output_size} values, got {self.output_bias.shape[0]}"
                )

        layers: list[nn.Module] = []
        width = input_size
        for _ in range(hidden_layers):
            layers.append(nn.Linear(width, neurons_per_layer))
            layers.append(nn.Sigmoid())
            width = neurons_per_layer
        layers.append(nn.Linear(width, output_size))
        self.network = nn.Sequential(*layers).to(torch.float64)
        self.optimizer = None
        self.reset()

    def reset(self) -> None:
        with torch.random.fork_rng(devices=[]):
            torch.manual_seed(self.seed)
            for module in self.network:
                if isinstance(module, nn.Linear):
                    module.reset_parameters()
        output_layer = self.network[-1]
        with torch.no_grad():
            output_layer.weight.zero_()
            output_layer.bias.copy_(self.output_bias)
        # Fresh optimizer so no state survives a reset
        self.optimizer = SGD(self.network.parameters(), lr=self.train_lr)

    def predict(self, state: Sequence[float]) -> list[float]:
        inputs = self._as_input(state)
        with torch.no_grad():
            return self.network(inputs).squeeze(0).tolist()

    def train(self, state: Sequence[float], target: Sequence[float], rate: float = 1.0) -> float:
        """Fit the output for ``state`` to ``current + rate * (target - current)``.

        Runs up to ``train_epochs`` SGD steps and returns the last loss.
        """
        if not 0 < rate <= 1:
            raise InvalidArgumentError(f"rate must be in (0, 1], got {rate}")
        inputs = self._as_input(state)
        target_t = torch.as_tensor(target, dtype=torch.float64).reshape(1, -1)
        if target_t.shape[1] != self.output_size:
            raise InvalidArgumentError(
                f"target must have {self.output_size} values, got {target_t.shape[1]}"
            )

        with torch.no_grad():
            current = self.network(inputs)
        goal = current + rate * (target_t - current)

        loss_value = float('inf')
        for _ in range(self.train_epochs):
            self.optimizer.zero_grad()
            loss = 0.5 * ((self.network(inputs) - goal) ** 2).sum()
            loss_value = loss.item()
            if loss_value < self.train_error_target:
                break
            loss.backward()
            self.optimizer.step()
        return loss_value

    def parameter_count(self) -> int:
        return sum(p.numel() for p in self.network.parameters())

    def _as_input(self, state: Sequence[float]) -> torch.Tensor:
        inputs = torch.as_tensor(state, dtype=torch.float64).reshape(1, -1)
        if inputs.shape[1] != self.input_size:
            raise InvalidArgumentError(
                f"state must have {self.input_size} values, got {inputs.shape[1]}"
            )
        return inputs
