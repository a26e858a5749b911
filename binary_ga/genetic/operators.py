"""
Genetic operators for binary chromosomes

This module contains bit-flip mutation, N-point crossover and k-tournament
selection. Each operator exists as a plain function working on matrices and as
a class that holds its parameters and works on Population objects.

All parameters are checked before any random draw is made or any output is
allocated; violations raise InvalidArgumentError.
"""

import logging
import operator
from typing import List, Optional, Tuple

import numpy as np

from ..config import OperatorConfig
from ..exceptions import InvalidArgumentError
from ..utils.random_utils import RandomSource, resolve_source
from .population import Population, as_fitness_vector, as_gene_matrix

logger = logging.getLogger(__name__)


def _as_int(value, name: str) -> int:
    try:
        return operator.index(value)
    except TypeError:
        raise InvalidArgumentError(f"{name} must be an integer, got {value!r}",
                                   argument=name, value=value) from None


def _check_probability(value, name: str) -> float:
    try:
        probability = float(value)
    except (TypeError, ValueError):
        raise InvalidArgumentError(f"{name} must be a number, got {value!r}",
                                   argument=name, value=value) from None
    if not 0 <= probability <= 1:
        raise InvalidArgumentError(f"{name} must be between 0 and 1, got {value}",
                                   argument=name, value=value)
    return probability


def bitflip_mutation(population, mutation_rate: float, elitism_no: int,
                     source: Optional[RandomSource] = None) -> np.ndarray:
    """
    Flip each non-elite gene independently with probability mutation_rate

    Args:
        population: m x n boolean matrix, one individual per row
        mutation_rate: Per-gene flip probability Pm in [0, 1]
        elitism_no: Number of top rows copied verbatim, in [0, m]
        source: Random source. If None, the process-wide source is used

    Returns:
        New m x n boolean matrix with the mutated population
    """
    genes = as_gene_matrix(population)
    num_rows, num_genes = genes.shape
    mutation_rate = _check_probability(mutation_rate, 'mutation_rate')
    elitism_no = _as_int(elitism_no, 'elitism_no')
    if not 0 <= elitism_no <= num_rows:
        raise InvalidArgumentError(
            f"elitism_no must be between 0 and {num_rows}, got {elitism_no}",
            argument='elitism_no', value=elitism_no
        )

    source = resolve_source(source)
    mutated = genes.copy()

    # One independent trial per non-elite gene
    flips = source.uniform_unit((num_rows - elitism_no, num_genes)) < mutation_rate
    mutated[elitism_no:] ^= flips

    logger.debug(f"Bit-flip mutation on {num_rows}x{num_genes} (Pm={mutation_rate}, "
                 f"elites={elitism_no}): {int(flips.sum())} genes flipped")
    return mutated


def _draw_parents(source: RandomSource, num_rows: int) -> Tuple[int, int]:
    """Draw two distinct parent indices from [0, num_rows - 1]"""
    first = source.uniform_int(0, num_rows - 1)
    second = source.uniform_int(0, num_rows - 1)
    while second == first:
        second = source.uniform_int(0, num_rows - 1)
    return first, second


def npoint_crossover(parent_pool, num_points: int, num_children: int,
                     source: Optional[RandomSource] = None) -> np.ndarray:
    """
    Generate children by N-point crossover of randomly paired parents

    Every child gets its own parent pair and crossover points. A point p
    starts a new segment at locus p; even segments are copied from the first
    parent and odd segments from the second.

    Args:
        parent_pool: m x n boolean matrix of parents, m >= 2
        num_points: Number of crossover points N in [1, n]
        num_children: Number of children to generate
        source: Random source. If None, the process-wide source is used

    Returns:
        New num_children x n boolean matrix
    """
    parents = as_gene_matrix(parent_pool, 'parent_pool')
    num_rows, num_genes = parents.shape
    num_points = _as_int(num_points, 'num_points')
    num_children = _as_int(num_children, 'num_children')
    if not 1 <= num_points <= num_genes:
        raise InvalidArgumentError(
            f"Crossover point count out of range: {num_points} not in [1, {num_genes}]",
            argument='num_points', value=num_points
        )
    if num_children < 0:
        raise InvalidArgumentError(f"num_children must be non-negative, got {num_children}",
                                   argument='num_children', value=num_children)
    if num_rows < 2:
        raise InvalidArgumentError(
            f"Crossover needs at least 2 parents to pick distinct pairs, got {num_rows}",
            argument='parent_pool', value=num_rows
        )

    source = resolve_source(source)
    children = np.empty((num_children, num_genes), dtype=bool)
    loci = np.arange(num_genes)

    for child in range(num_children):
        first, second = _draw_parents(source, num_rows)
        points = sorted(source.sample_distinct(num_points, 0, num_genes - 1))

        # Segment of each locus = number of points at or before it
        segment = np.searchsorted(points, loci, side='right')
        children[child] = np.where(segment % 2 == 0, parents[first], parents[second])

    logger.debug(f"{num_points}-point crossover produced {num_children} children "
                 f"from {num_rows} parents")
    return children


def tournament_selection(tournament_size: int, fitness, population, num_survivors: int,
                         elite_rows: int, source: Optional[RandomSource] = None
                         ) -> Tuple[np.ndarray, np.ndarray]:
    """
    Select survivors by repeated k-tournaments over the non-elite rows

    Args:
        tournament_size: Number of distinct contenders k per tournament
        fitness: Fitness of each row, higher is better
        population: m x n boolean matrix
        num_survivors: Number of tournaments to hold
        elite_rows: Number of top rows that never enter a tournament
        source: Random source. If None, the process-wide source is used

    Returns:
        Tuple of (survivors matrix, survivor fitness vector) in tournament order
    """
    genes = as_gene_matrix(population)
    num_rows, num_genes = genes.shape
    scores = as_fitness_vector(fitness, num_rows)
    tournament_size = _as_int(tournament_size, 'tournament_size')
    num_survivors = _as_int(num_survivors, 'num_survivors')
    elite_rows = _as_int(elite_rows, 'elite_rows')
    if not 0 <= elite_rows <= num_rows:
        raise InvalidArgumentError(
            f"elite_rows must be between 0 and {num_rows}, got {elite_rows}",
            argument='elite_rows', value=elite_rows
        )
    eligible = num_rows - elite_rows
    if not 1 <= tournament_size <= eligible:
        raise InvalidArgumentError(
            f"Tournament size must be between 1 and {eligible} eligible individuals, "
            f"got {tournament_size}",
            argument='tournament_size', value=tournament_size
        )
    if num_survivors < 0:
        raise InvalidArgumentError(f"num_survivors must be non-negative, got {num_survivors}",
                                   argument='num_survivors', value=num_survivors)

    source = resolve_source(source)
    survivors = np.empty((num_survivors, num_genes), dtype=bool)
    survivor_fitness = np.empty(num_survivors, dtype=float)
    winners: List[int] = []

    for tournament in range(num_survivors):
        contenders = source.sample_distinct(tournament_size, elite_rows, num_rows - 1)

        # Strict comparison: ties go to the earliest drawn contender
        winner = contenders[0]
        for contender in contenders[1:]:
            if scores[contender] > scores[winner]:
                winner = contender

        survivors[tournament] = genes[winner]
        survivor_fitness[tournament] = scores[winner]
        winners.append(winner)

    logger.debug(f"Held {num_survivors} tournaments of size {tournament_size} "
                 f"({elite_rows} elite rows excluded), winners: {winners}")
    return survivors, survivor_fitness


class BitFlipMutation:
    """Bit-flip mutation operator"""

    def __init__(self, mutation_rate: float, elitism_no: int = 0,
                 source: Optional[RandomSource] = None):
        self.mutation_rate = _check_probability(mutation_rate, 'mutation_rate')
        self.elitism_no = _as_int(elitism_no, 'elitism_no')
        if self.elitism_no < 0:
            raise InvalidArgumentError("elitism_no must be non-negative",
                                       argument='elitism_no', value=elitism_no)
        self.source = source

    @classmethod
    def from_config(cls, config: OperatorConfig,
                    source: Optional[RandomSource] = None) -> 'BitFlipMutation':
        config.validate()
        return cls(config.mutation_rate, config.elitism_count, source)

    def mutate(self, population: Population) -> Population:
        """
        Apply bit-flip mutation to a population

        Rows that changed lose their fitness (set to NaN); unchanged rows keep it.
        """
        genes = bitflip_mutation(population.genes, self.mutation_rate,
                                 self.elitism_no, self.source)
        fitness = None
        if population.fitness is not None:
            fitness = population.fitness.copy()
            fitness[np.any(genes != population.genes, axis=1)] = np.nan
        return Population(genes, fitness)


class NPointCrossover:
    """N-point crossover with N crossover points per child"""

    def __init__(self, num_points: int = 1, source: Optional[RandomSource] = None):
        self.num_points = _as_int(num_points, 'num_points')
        if self.num_points < 1:
            raise InvalidArgumentError(
                f"Crossover point count out of range: {num_points} < 1",
                argument='num_points', value=num_points
            )
        self.source = source

    @classmethod
    def from_config(cls, config: OperatorConfig,
                    source: Optional[RandomSource] = None) -> 'NPointCrossover':
        config.validate()
        return cls(config.crossover_points, source)

    def crossover(self, parent_pool: Population, num_children: int) -> Population:
        """Generate num_children unevaluated children from the parent pool"""
        children = npoint_crossover(parent_pool.genes, self.num_points,
                                    num_children, self.source)
        return Population(children)


class TournamentSelection:
    """Tournament selection with tournament size k, higher fitness wins"""

    def __init__(self, tournament_size: int = 3, elite_rows: int = 0,
                 source: Optional[RandomSource] = None):
        self.tournament_size = _as_int(tournament_size, 'tournament_size')
        self.elite_rows = _as_int(elite_rows, 'elite_rows')
        if self.tournament_size < 1:
            raise InvalidArgumentError("Tournament size must be positive",
                                       argument='tournament_size', value=tournament_size)
        if self.elite_rows < 0:
            raise InvalidArgumentError("elite_rows must be non-negative",
                                       argument='elite_rows', value=elite_rows)
        self.source = source

    @classmethod
    def from_config(cls, config: OperatorConfig,
                    source: Optional[RandomSource] = None) -> 'TournamentSelection':
        config.validate()
        return cls(config.tournament_size, config.elitism_count, source)

    def select(self, population: Population, num_survivors: int) -> Population:
        """Select num_survivors individuals together with their fitness"""
        if population.fitness is None:
            raise InvalidArgumentError("Tournament selection requires fitness values",
                                       argument='fitness')
        survivors, survivor_fitness = tournament_selection(
            self.tournament_size, population.fitness, population.genes,
            num_survivors, self.elite_rows, self.source
        )
        return Population(survivors, survivor_fitness)
