# SPDX-License-Identifier: MIT
"""
Domain-agnostic genetic algorithm over flat real-valued chromosomes.
"""

from .algorithm import GeneticAlgorithm  # noqa: F401
from .chromosome import Chromosome  # noqa: F401
from .crossover import CrossoverMethod, UniformCrossover  # noqa: F401
from .individual import Individual  # noqa: F401
from .mutation import GaussianMutation, MutationMethod  # noqa: F401
from .selection import RouletteWheelSelection, SelectionMethod  # noqa: F401
from .statistics import Statistics  # noqa: F401
