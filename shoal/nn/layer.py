from __future__ import annotations

from typing import Iterator, List

import numpy as np

from .neuron import Neuron


class Layer:
    __slots__ = ("neurons",)

    def __init__(self, neurons: List[Neuron]) -> None:
        if neurons and len({n.inputs for n in neurons}) != 1:
            raise ValueError("all neurons of a layer must share the same input count")
        self.neurons = list(neurons)

    @property
    def inputs(self) -> int:
        return self.neurons[0].inputs if self.neurons else 0

    @property
    def outputs(self) -> int:
        return len(self.neurons)

    def propagate(self, inputs: np.ndarray) -> np.ndarray:
        return np.array([n.propagate(inputs) for n in self.neurons], dtype=np.float64)

    @classmethod
    def random(cls, rng: np.random.Generator, inputs: int, outputs: int) -> "Layer":
        return cls([Neuron.random(rng, inputs) for _ in range(outputs)])

    @classmethod
    def from_weights(cls, inputs: int, outputs: int, weights: Iterator[float]) -> "Layer":
        return cls([Neuron.from_weights(inputs, weights) for _ in range(outputs)])
