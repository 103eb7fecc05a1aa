import numpy as np
import pytest

from shoal.nn import (
    InvalidTopologyError,
    Layer,
    LayerTopology,
    Network,
    Neuron,
    NotEnoughWeightsError,
    TooManyWeightsError,
)


def test_neuron_propagate_relu():
    neuron = Neuron(0.5, [-0.3, 0.8])

    assert neuron.propagate(np.array([-10.0, -10.0])) == 0.0
    assert neuron.propagate(np.array([0.5, 1.0])) == pytest.approx((-0.3 * 0.5) + (0.8 * 1.0) + 0.5)


def test_neuron_weights_are_read_only():
    neuron = Neuron(0.0, [1.0, 2.0])
    with pytest.raises(ValueError):
        neuron.weights[0] = 3.0


def test_network_propagate():
    network = Network(
        [
            Layer([Neuron(0.0, [1.0, 1.0]), Neuron(-1.0, [1.0, 0.0])]),
            Layer([Neuron(0.1, [0.5, -2.0])]),
        ]
    )
    # hidden = [relu(0.2 + 0.3), relu(-1.0 + 0.2)] = [0.5, 0.0]
    out = network.propagate([0.2, 0.3])
    assert out.shape == (1,)
    assert out[0] == pytest.approx(0.5 * 0.5 + 0.1)


def test_network_propagate_rejects_wrong_input_length():
    network = Network.from_weights([2, 1], [0.0, 1.0, 1.0])
    with pytest.raises(ValueError):
        network.propagate([1.0, 2.0, 3.0])


def test_random_draws_bias_then_weights_in_order():
    network = Network.random([LayerTopology(4), LayerTopology(1)], np.random.default_rng(42))

    expected = np.random.default_rng(42)
    bias = expected.uniform(-1.0, 1.0)
    weights = expected.uniform(-1.0, 1.0, size=4)

    neuron = network.layers[0].neurons[0]
    assert neuron.bias == bias
    np.testing.assert_array_equal(neuron.weights, weights)


def test_random_values_within_unit_range(rng):
    network = Network.random([9, 18, 2], rng)
    values = np.array(list(network.weights()))
    assert values.shape == (Network.weight_count([9, 18, 2]),)
    assert np.all(values >= -1.0) and np.all(values <= 1.0)


def test_weights_canonical_order():
    network = Network(
        [
            Layer([Neuron(0.1, [0.2, 0.3, 0.4])]),
            Layer([Neuron(0.5, [0.6])]),
        ]
    )
    assert list(network.weights()) == pytest.approx([0.1, 0.2, 0.3, 0.4, 0.5, 0.6])


def test_weights_is_restartable():
    network = Network.from_weights([3, 2], [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8])
    assert list(network.weights()) == list(network.weights())


def test_from_weights_round_trip():
    topology = [LayerTopology(3), LayerTopology(2)]
    weights = [0.1, 0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.8]

    network = Network.from_weights(topology, weights)

    assert list(network.weights()) == pytest.approx(weights)


@pytest.mark.parametrize("topology", [[1, 1], [3, 2], [4, 8, 2], [2, 3, 3, 1]])
def test_from_weights_round_trip_random(topology, rng):
    weights = rng.uniform(-5.0, 5.0, size=Network.weight_count(topology)).tolist()
    assert list(Network.from_weights(topology, weights).weights()) == weights


def test_from_weights_accepts_iterators():
    network = Network.from_weights([2, 1], iter([0.5, -0.3, 0.8]))
    # bias 0.5, weights -0.3 and 0.8
    assert network.propagate([0.5, 1.0])[0] == pytest.approx(-0.3 * 0.5 + 0.8 * 1.0 + 0.5)


@pytest.mark.parametrize("topology", [[1, 1], [3, 2], [4, 8, 2]])
def test_from_weights_too_few(topology):
    weights = [0.0] * (Network.weight_count(topology) - 1)
    with pytest.raises(NotEnoughWeightsError):
        Network.from_weights(topology, weights)


@pytest.mark.parametrize("topology", [[1, 1], [3, 2], [4, 8, 2]])
def test_from_weights_too_many(topology):
    weights = [0.0] * (Network.weight_count(topology) + 1)
    with pytest.raises(TooManyWeightsError):
        Network.from_weights(topology, weights)


@pytest.mark.parametrize("topology", [[], [3], [3, 0], [0, 2]])
def test_invalid_topology(topology, rng):
    with pytest.raises(InvalidTopologyError):
        Network.random(topology, rng)
    with pytest.raises(InvalidTopologyError):
        Network.from_weights(topology, [])


def test_network_needs_a_layer():
    with pytest.raises(InvalidTopologyError):
        Network([])


def test_network_rejects_mismatched_layers():
    with pytest.raises(InvalidTopologyError):
        Network([Layer([Neuron(0.0, [1.0])]), Layer([Neuron(0.0, [1.0, 2.0])])])


def test_weight_count():
    assert Network.weight_count([9, 18, 2]) == 18 * 10 + 2 * 19
