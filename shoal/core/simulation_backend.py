from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Dict, Optional, Protocol

import numpy as np

from .config import SimulationConfig

if TYPE_CHECKING:
    from ..sim import Simulation


@dataclass
class SimulationState:
    tick: int = 0
    generation: int = 0
    age: int = 0
    population: int = 0
    food_count: int = 0
    mean_satiation: float = 0.0
    statistics: Optional[Dict] = None
    frame: Dict | None = None
    telemetry: Dict = field(default_factory=dict)


class SimulationBackend(Protocol):
    """Interface a front end uses to drive a simulation implementation."""

    def configure(self, config: SimulationConfig) -> None:
        ...

    def start(self) -> None:
        ...

    def stop(self) -> None:
        ...

    def step(self) -> SimulationState:
        ...

    def snapshot(self) -> Dict:
        ...


class ShoalSimulationBackend:
    """
    Owns the random generator and the `Simulation`, and exposes them through
    the backend protocol so a viewer or the CLI can run the world headlessly.
    """

    def __init__(self, seed: Optional[int] = None, *, substeps: int = 1) -> None:
        self._seed = seed
        self._substeps = max(1, int(substeps))
        self._config = SimulationConfig()
        self._rng = np.random.default_rng(seed)
        self._simulation: Optional[Simulation] = None
        self._state = SimulationState()
        self._running = False

    @property
    def config(self) -> SimulationConfig:
        return self._config

    @property
    def substeps(self) -> int:
        return self._substeps

    @property
    def simulation(self) -> Simulation:
        return self._ensure_simulation()

    def configure(self, config: SimulationConfig) -> None:
        self._config = config
        self._rng = np.random.default_rng(self._seed)
        self._simulation = self._build_simulation(config)
        self._state = SimulationState()

    def start(self) -> None:
        self._ensure_simulation()
        self._running = True

    def stop(self) -> None:
        self._running = False

    def step(self) -> SimulationState:
        simulation = self._ensure_simulation()
        if self._running:
            for _ in range(self._substeps):
                simulation.step(self._rng)
                self._state.tick += 1
        self._refresh_state(simulation)
        return self._state

    def snapshot(self) -> Dict:
        simulation = self._ensure_simulation()
        self._refresh_state(simulation)
        return {
            "config": self._config.to_dict(),
            "state": {
                "tick": self._state.tick,
                "generation": self._state.generation,
                "age": self._state.age,
                "population": self._state.population,
                "mean_satiation": self._state.mean_satiation,
            },
            "resources": {
                "food": self._state.food_count,
            },
            "statistics": self._state.statistics,
            "frame": self._state.frame,
        }

    # ----- internals -----
    def _ensure_simulation(self) -> Simulation:
        if self._simulation is None:
            self._simulation = self._build_simulation(self._config)
        return self._simulation

    def _build_simulation(self, config: SimulationConfig) -> Simulation:
        # shoal.sim imports core.config, so load it on first use
        from ..sim import Simulation

        return Simulation.random(self._rng, config)

    def _refresh_state(self, simulation: Simulation) -> None:
        animals = simulation.world.animals
        population = len(animals)
        self._state.generation = simulation.generation
        self._state.age = simulation.age
        self._state.population = population
        self._state.food_count = len(simulation.world.foods)
        self._state.mean_satiation = (
            sum(a.satiation for a in animals) / population if population > 0 else 0.0
        )
        stats = simulation.last_statistics
        self._state.statistics = stats.to_dict() if stats is not None else None
        self._state.frame = simulation.world_snapshot()
        self._state.telemetry = {"best_satiation": max((a.satiation for a in animals), default=0)}
