"""
Stochastic operators for binary-encoded genetic algorithms

Bit-flip mutation, N-point crossover and k-tournament selection over boolean
population matrices, sharing one injectable random source.
"""

__version__ = "0.1.0"

from .exceptions import OperatorError, InvalidArgumentError
from .config import OperatorConfig
from .utils import RandomSource, get_default_source, set_seed, setup_logger
from .genetic import (
    Population,
    BitFlipMutation,
    NPointCrossover,
    TournamentSelection,
    bitflip_mutation,
    npoint_crossover,
    tournament_selection,
)

__all__ = [
    'OperatorError',
    'InvalidArgumentError',
    'OperatorConfig',
    'RandomSource',
    'get_default_source',
    'set_seed',
    'setup_logger',
    'Population',
    'BitFlipMutation',
    'NPointCrossover',
    'TournamentSelection',
    'bitflip_mutation',
    'npoint_crossover',
    'tournament_selection'
]
