from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Sequence, Union

import numpy as np

from .errors import InvalidTopologyError, TooManyWeightsError
from .layer import Layer


@dataclass(frozen=True)
class LayerTopology:
    neurons: int


TopologyLike = Sequence[Union[LayerTopology, int]]

_EXHAUSTED = object()


def layer_sizes(topology: TopologyLike) -> List[int]:
    """Normalise a topology into plain neuron counts, validating its shape."""
    sizes = [t.neurons if isinstance(t, LayerTopology) else int(t) for t in topology]
    if len(sizes) < 2:
        raise InvalidTopologyError(f"topology needs at least 2 layers, got {len(sizes)}")
    if any(n <= 0 for n in sizes):
        raise InvalidTopologyError(f"every layer needs at least one neuron, got {sizes}")
    return sizes


class Network:
    """
    Feed-forward ReLU network.

    The topology lists the neuron count of every layer, input layer included,
    so a topology of N entries yields N - 1 weighted layers.
    """

    __slots__ = ("layers",)

    def __init__(self, layers: List[Layer]) -> None:
        if not layers:
            raise InvalidTopologyError("network needs at least 2 layers (input + output)")
        for prev, layer in zip(layers, layers[1:]):
            if layer.inputs != prev.outputs:
                raise InvalidTopologyError(
                    f"layer expects {layer.inputs} inputs but previous layer yields {prev.outputs}"
                )
        self.layers = list(layers)

    @property
    def inputs(self) -> int:
        return self.layers[0].inputs

    @property
    def outputs(self) -> int:
        return self.layers[-1].outputs

    def propagate(self, inputs: Sequence[float]) -> np.ndarray:
        values = np.asarray(inputs, dtype=np.float64)
        if values.shape != (self.inputs,):
            raise ValueError(f"network expects {self.inputs} inputs, got shape {values.shape}")
        for layer in self.layers:
            values = layer.propagate(values)
        return values

    @classmethod
    def random(cls, topology: TopologyLike, rng: np.random.Generator) -> "Network":
        sizes = layer_sizes(topology)
        return cls([Layer.random(rng, n_in, n_out) for n_in, n_out in zip(sizes, sizes[1:])])

    def weights(self) -> Iterator[float]:
        # layer-major, neuron-major, bias before weights
        for layer in self.layers:
            for neuron in layer.neurons:
                yield neuron.bias
                for w in neuron.weights:
                    yield float(w)

    @classmethod
    def from_weights(cls, topology: TopologyLike, weights: Iterable[float]) -> "Network":
        sizes = layer_sizes(topology)
        it = iter(weights)
        layers = [Layer.from_weights(n_in, n_out, it) for n_in, n_out in zip(sizes, sizes[1:])]
        if next(it, _EXHAUSTED) is not _EXHAUSTED:
            raise TooManyWeightsError("got too many weights")
        return cls(layers)

    @staticmethod
    def weight_count(topology: TopologyLike) -> int:
        sizes = layer_sizes(topology)
        return sum(n_out * (n_in + 1) for n_in, n_out in zip(sizes, sizes[1:]))
