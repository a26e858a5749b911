"""Genetic algorithm components module"""

from .population import Population
from .operators import (
    BitFlipMutation,
    NPointCrossover,
    TournamentSelection,
    bitflip_mutation,
    npoint_crossover,
    tournament_selection,
)

__all__ = [
    'Population',
    'BitFlipMutation',
    'NPointCrossover',
    'TournamentSelection',
    'bitflip_mutation',
    'npoint_crossover',
    'tournament_selection'
]
