# SPDX-License-Identifier: MIT
"""
World model and stepper: animals, food, vision and generational evolution.
"""

from .animal import Animal  # noqa: F401
from .brain import Brain  # noqa: F401
from .eyes import Eyes  # noqa: F401
from .food import Food  # noqa: F401
from .individual import AnimalIndividual  # noqa: F401
from .simulation import Simulation  # noqa: F401
from .world import World  # noqa: F401

__all__ = [
    "Animal",
    "AnimalIndividual",
    "Brain",
    "Eyes",
    "Food",
    "Simulation",
    "World",
]
