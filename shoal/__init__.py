# SPDX-License-Identifier: MIT
"""
Neuro-evolution of foraging animals on a toroidal world.

`shoal.nn` holds the feed-forward network, `shoal.ga` the genetic algorithm,
`shoal.sim` the world and its stepper, and `shoal.core` the configuration and
the headless backend. `shoal.main` is the command-line entry point.
"""

__all__ = ["main"]
