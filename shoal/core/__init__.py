# SPDX-License-Identifier: MIT
"""
Services that drive the simulation for front ends: configuration and the
headless backend.
"""

from .config import (  # noqa: F401
    DEFAULT_CONFIG,
    EvolutionConfig,
    EyesConfig,
    PhysicsConfig,
    SimulationConfig,
    WorldConfig,
    load_config,
)
from .simulation_backend import (  # noqa: F401
    ShoalSimulationBackend,
    SimulationBackend,
    SimulationState,
)
