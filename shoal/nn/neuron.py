from __future__ import annotations

from typing import Iterator, Sequence

import numpy as np

from .errors import NotEnoughWeightsError


class Neuron:
    __slots__ = ("bias", "weights")

    def __init__(self, bias: float, weights: Sequence[float]) -> None:
        self.bias = float(bias)
        self.weights = np.array(weights, dtype=np.float64).reshape(-1)
        self.weights.flags.writeable = False

    @property
    def inputs(self) -> int:
        return int(self.weights.shape[0])

    def propagate(self, inputs: np.ndarray) -> float:
        if inputs.shape[0] != self.inputs:
            raise ValueError(f"neuron expects {self.inputs} inputs, got {inputs.shape[0]}")
        return max(0.0, float(np.dot(inputs, self.weights)) + self.bias)

    @classmethod
    def random(cls, rng: np.random.Generator, inputs: int) -> "Neuron":
        bias = rng.uniform(-1.0, 1.0)
        weights = rng.uniform(-1.0, 1.0, size=inputs)
        return cls(bias, weights)

    @classmethod
    def from_weights(cls, inputs: int, weights: Iterator[float]) -> "Neuron":
        """Consume ``1 + inputs`` values: the bias, then one weight per input."""
        values = []
        for _ in range(1 + inputs):
            try:
                values.append(next(weights))
            except StopIteration:
                raise NotEnoughWeightsError("got not enough weights") from None
        return cls(values[0], values[1:])

    def __repr__(self) -> str:
        return f"Neuron(bias={self.bias!r}, weights={self.weights.tolist()!r})"
