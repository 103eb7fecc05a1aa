# SPDX-License-Identifier: MIT
"""
Feed-forward neural network with a flat weight encoding.
"""

from .errors import (  # noqa: F401
    InvalidTopologyError,
    NetworkError,
    NotEnoughWeightsError,
    TooManyWeightsError,
)
from .layer import Layer  # noqa: F401
from .network import LayerTopology, Network, layer_sizes  # noqa: F401
from .neuron import Neuron  # noqa: F401
