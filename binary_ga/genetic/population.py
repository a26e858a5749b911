"""
Population model for the binary genetic operators

A population is an m x n boolean matrix, one chromosome per row, with an
optional fitness vector aligned to the rows.
"""

import numpy as np
from typing import Any, Dict, Iterator, Optional

from ..exceptions import InvalidArgumentError
from ..utils.random_utils import RandomSource, resolve_source


def as_gene_matrix(genes, name: str = 'population') -> np.ndarray:
    """Convert genes to a 2-D boolean array, raising InvalidArgumentError otherwise"""
    matrix = np.asarray(genes)
    if matrix.ndim != 2:
        raise InvalidArgumentError(
            f"{name} must be a 2-D matrix, got {matrix.ndim} dimension(s)",
            argument=name, value=matrix.shape
        )
    return matrix.astype(bool, copy=False)


def as_fitness_vector(fitness, num_rows: int) -> np.ndarray:
    """Convert fitness to a float vector of length num_rows"""
    vector = np.asarray(fitness, dtype=float)
    if vector.ndim != 1 or vector.shape[0] != num_rows:
        raise InvalidArgumentError(
            f"fitness must be a vector of length {num_rows}, got shape {vector.shape}",
            argument='fitness', value=vector.shape
        )
    return vector


class Population:
    """Boolean chromosome matrix with an optional row-aligned fitness vector"""

    def __init__(self, genes, fitness=None):
        """
        Initialize population

        Args:
            genes: m x n matrix of booleans (or 0/1 values)
            fitness: Optional sequence of m fitness values, higher is better
        """
        self.genes = as_gene_matrix(genes)
        self.fitness: Optional[np.ndarray] = (
            as_fitness_vector(fitness, self.genes.shape[0]) if fitness is not None else None
        )

    @classmethod
    def random(cls, size: int, num_genes: int,
               source: Optional[RandomSource] = None) -> 'Population':
        """Create a population where every gene is a fair coin flip"""
        if size < 0 or num_genes < 0:
            raise InvalidArgumentError("Population dimensions must be non-negative",
                                       argument='size', value=(size, num_genes))
        source = resolve_source(source)
        return cls(source.uniform_unit((size, num_genes)) < 0.5)

    @property
    def size(self) -> int:
        """Number of individuals (rows)"""
        return self.genes.shape[0]

    @property
    def num_genes(self) -> int:
        """Chromosome length (columns)"""
        return self.genes.shape[1]

    def chromosome(self, index: int) -> np.ndarray:
        """Return a copy of the chromosome at row index"""
        return self.genes[index].copy()

    def best_index(self) -> int:
        """Index of the first evaluated individual with the highest fitness"""
        if self.fitness is None or np.all(np.isnan(self.fitness)):
            raise InvalidArgumentError("Population has no fitness values", argument='fitness')
        return int(np.nanargmax(self.fitness))

    def copy(self) -> 'Population':
        """Create a deep copy of the population"""
        fitness = self.fitness.copy() if self.fitness is not None else None
        return Population(self.genes.copy(), fitness)

    def get_statistics(self) -> Dict[str, Any]:
        """
        Calculate population statistics

        Returns:
            Dictionary with population statistics
        """
        evaluated = (self.fitness[~np.isnan(self.fitness)]
                     if self.fitness is not None else np.empty(0))

        if evaluated.size == 0:
            return {
                'best_fitness': None,
                'worst_fitness': None,
                'avg_fitness': None,
                'std_fitness': None,
                'diversity': self._calculate_diversity(),
                'evaluated_count': 0
            }

        return {
            'best_fitness': float(np.max(evaluated)),
            'worst_fitness': float(np.min(evaluated)),
            'avg_fitness': float(np.mean(evaluated)),
            'std_fitness': float(np.std(evaluated)),
            'diversity': self._calculate_diversity(),
            'evaluated_count': int(evaluated.size)
        }

    def _calculate_diversity(self) -> float:
        """Calculate population diversity as average normalized Hamming distance"""
        if self.size < 2 or self.num_genes == 0:
            return 0.0

        # Per locus, ones * zeros counts the pairs that differ there
        ones = self.genes.sum(axis=0).astype(float)
        differing_pairs = np.sum(ones * (self.size - ones))
        comparisons = self.size * (self.size - 1) / 2
        return float(differing_pairs / self.num_genes / comparisons)

    def __len__(self) -> int:
        return self.size

    def __iter__(self) -> Iterator[np.ndarray]:
        return iter(self.genes)

    def __str__(self) -> str:
        best_fitness = self.get_statistics()['best_fitness']
        best = f"{best_fitness:.4f}" if best_fitness is not None else "None"
        return f"Population(size={self.size}, genes={self.num_genes}, best_fitness={best})"
