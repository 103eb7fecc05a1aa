from __future__ import annotations

import json
import math
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, Tuple, Union


@dataclass
class WorldConfig:
    animals: int = 40
    foods: int = 60


@dataclass
class EyesConfig:
    fov_range: float = 0.25
    fov_angle: float = math.pi + math.pi / 4
    cells: int = 9


@dataclass
class PhysicsConfig:
    speed_min: float = 0.0006
    speed_max: float = 0.0012
    speed_accel: float = 0.2
    rotation_accel: float = math.pi / 2
    eat_radius: float = 0.01


@dataclass
class EvolutionConfig:
    generation_length: int = 2500
    mutation_chance: float = 0.01
    mutation_coeff: float = 0.3
    hidden_scale: int = 2  # hidden layer width = hidden_scale * eye cells


@dataclass
class SimulationConfig:
    world: WorldConfig = field(default_factory=WorldConfig)
    eyes: EyesConfig = field(default_factory=EyesConfig)
    physics: PhysicsConfig = field(default_factory=PhysicsConfig)
    evolution: EvolutionConfig = field(default_factory=EvolutionConfig)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    def update_from_mapping(self, data: Mapping[str, Any]) -> None:
        """Merge settings from a nested mapping into the config."""
        for section_name, section_values in data.items():
            section = getattr(self, section_name, None)
            if section is None:
                continue
            if not isinstance(section_values, Mapping):
                continue
            for key, value in section_values.items():
                if hasattr(section, key):
                    setattr(section, key, value)

    def iter_sections(self) -> Iterable[Tuple[str, Any]]:
        yield "world", self.world
        yield "eyes", self.eyes
        yield "physics", self.physics
        yield "evolution", self.evolution

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "SimulationConfig":
        config = cls()
        config.update_from_mapping(data)
        return config


def load_config(path: Union[str, Path]) -> SimulationConfig:
    path = Path(path).expanduser()
    try:
        data = json.loads(path.read_text())
    except json.JSONDecodeError as exc:
        raise ValueError(f"Failed to parse config {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise ValueError(f"Config {path} must hold a JSON object, got {type(data).__name__}")
    return SimulationConfig.from_mapping(data)


DEFAULT_CONFIG = SimulationConfig()
