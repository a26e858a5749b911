"""
Genetic Operator Configuration

This module contains the default parameters for the binary genetic operators.
"""

import numbers
from dataclasses import dataclass
from typing import Optional

import numpy as np

from ..exceptions import InvalidArgumentError
from ..utils.random_utils import RandomSource


def _is_integer(value) -> bool:
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


@dataclass
class OperatorConfig:
    """Configuration parameters for mutation, crossover and selection"""

    # Mutation parameters
    mutation_rate: float = 0.01
    elitism_count: int = 0  # Top rows excluded from mutation and selection

    # Crossover parameters
    crossover_points: int = 1

    # Selection parameters
    tournament_size: int = 3

    # Reproducibility
    random_seed: Optional[int] = None

    def validate(self) -> None:
        """Validate configuration parameters"""
        if not isinstance(self.mutation_rate, numbers.Real) or isinstance(self.mutation_rate, bool):
            raise InvalidArgumentError("Mutation rate must be a number",
                                       argument='mutation_rate', value=self.mutation_rate)
        if not 0 <= self.mutation_rate <= 1:
            raise InvalidArgumentError("Mutation rate must be between 0 and 1",
                                       argument='mutation_rate', value=self.mutation_rate)
        for name in ('elitism_count', 'crossover_points', 'tournament_size'):
            if not _is_integer(getattr(self, name)):
                raise InvalidArgumentError(f"{name} must be an integer",
                                           argument=name, value=getattr(self, name))
        if self.elitism_count < 0:
            raise InvalidArgumentError("Elitism count must be non-negative",
                                       argument='elitism_count', value=self.elitism_count)
        if self.crossover_points < 1:
            raise InvalidArgumentError("Crossover points must be at least 1",
                                       argument='crossover_points', value=self.crossover_points)
        if self.tournament_size < 1:
            raise InvalidArgumentError("Tournament size must be positive",
                                       argument='tournament_size', value=self.tournament_size)
        if self.random_seed is not None and not _is_integer(self.random_seed):
            raise InvalidArgumentError("Random seed must be an integer",
                                       argument='random_seed', value=self.random_seed)

    def create_source(self) -> RandomSource:
        """Create a random source seeded with random_seed"""
        return RandomSource(self.random_seed)

    def to_dict(self) -> dict:
        """Convert configuration to dictionary"""
        return {
            'mutation_rate': self.mutation_rate,
            'elitism_count': self.elitism_count,
            'crossover_points': self.crossover_points,
            'tournament_size': self.tournament_size,
            'random_seed': self.random_seed
        }
