import numpy as np
import pytest

from shoal.core.config import SimulationConfig


@pytest.fixture
def rng():
    return np.random.default_rng(0)


@pytest.fixture
def small_config():
    """A world small enough that a generation runs in a few milliseconds."""
    config = SimulationConfig()
    config.world.animals = 6
    config.world.foods = 8
    config.evolution.generation_length = 5
    return config
