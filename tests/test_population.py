"""
Tests for the population model.
"""

import unittest

import numpy as np

from binary_ga.exceptions import InvalidArgumentError
from binary_ga.genetic import Population
from binary_ga.utils import RandomSource


class TestPopulation(unittest.TestCase):
    """Test construction, accessors and statistics."""

    def setUp(self):
        self.population = Population([[1, 0], [0, 1], [1, 1]], fitness=[1.0, 3.0, 2.0])

    def test_genes_are_boolean(self):
        """0/1 input is stored as a boolean matrix."""
        self.assertEqual(self.population.genes.dtype, np.bool_)
        self.assertEqual(self.population.size, 3)
        self.assertEqual(self.population.num_genes, 2)
        self.assertEqual(len(self.population), 3)

    def test_rejects_non_matrix(self):
        """Genes must be two-dimensional."""
        with self.assertRaises(InvalidArgumentError):
            Population([1, 0, 1])

    def test_rejects_misaligned_fitness(self):
        """Fitness must have one value per row."""
        with self.assertRaises(InvalidArgumentError):
            Population([[1, 0], [0, 1]], fitness=[1.0])
        with self.assertRaises(InvalidArgumentError):
            Population([[1, 0], [0, 1]], fitness=[[1.0, 2.0]])

    def test_chromosome_is_copy(self):
        """Editing a returned chromosome leaves the population alone."""
        row = self.population.chromosome(0)
        row[0] = False
        self.assertTrue(self.population.genes[0, 0])

    def test_iteration_yields_rows(self):
        """Iterating walks the chromosomes in row order."""
        rows = [row.tolist() for row in self.population]
        self.assertEqual(rows, [[True, False], [False, True], [True, True]])

    def test_copy_is_independent(self):
        """A copy shares no arrays with the original."""
        clone = self.population.copy()
        clone.genes[0, 0] = False
        clone.fitness[0] = 100.0

        self.assertTrue(self.population.genes[0, 0])
        self.assertEqual(self.population.fitness[0], 1.0)

    def test_best_index(self):
        """The first row with the maximum fitness is the best."""
        self.assertEqual(self.population.best_index(), 1)
        tied = Population([[1], [0], [1]], fitness=[0.2, 0.7, 0.7])
        self.assertEqual(tied.best_index(), 1)

    def test_best_index_without_fitness(self):
        """best_index needs fitness values."""
        with self.assertRaises(InvalidArgumentError):
            Population([[1, 0]]).best_index()

    def test_best_index_skips_unevaluated(self):
        """NaN fitness never counts as the best."""
        population = Population([[1, 0], [0, 0], [1, 1]], fitness=[1.0, np.nan, np.nan])

        self.assertEqual(population.best_index(), 0)
        self.assertEqual(population.get_statistics()['best_fitness'],
                         population.fitness[population.best_index()])

    def test_best_index_all_unevaluated(self):
        """A population with only NaN fitness has no best individual."""
        with self.assertRaises(InvalidArgumentError):
            Population([[1, 0], [0, 1]], fitness=[np.nan, np.nan]).best_index()

    def test_statistics(self):
        """Fitness summary and Hamming diversity."""
        stats = self.population.get_statistics()

        self.assertEqual(stats['best_fitness'], 3.0)
        self.assertEqual(stats['worst_fitness'], 1.0)
        self.assertAlmostEqual(stats['avg_fitness'], 2.0)
        self.assertAlmostEqual(stats['std_fitness'], np.std([1.0, 3.0, 2.0]))
        self.assertAlmostEqual(stats['diversity'], 2.0 / 3.0)
        self.assertEqual(stats['evaluated_count'], 3)

    def test_statistics_skip_unevaluated(self):
        """NaN fitness values are not counted."""
        population = Population([[1], [0]], fitness=[np.nan, 0.5])
        stats = population.get_statistics()

        self.assertEqual(stats['evaluated_count'], 1)
        self.assertEqual(stats['best_fitness'], 0.5)

    def test_statistics_without_fitness(self):
        """Without fitness only diversity is reported."""
        stats = Population([[1, 1], [1, 1]]).get_statistics()

        self.assertIsNone(stats['best_fitness'])
        self.assertEqual(stats['diversity'], 0.0)
        self.assertEqual(stats['evaluated_count'], 0)

    def test_random_population(self):
        """Random populations have the requested shape and are reproducible."""
        first = Population.random(20, 16, RandomSource(seed=5))
        second = Population.random(20, 16, RandomSource(seed=5))

        self.assertEqual(first.genes.shape, (20, 16))
        self.assertIsNone(first.fitness)
        np.testing.assert_array_equal(first.genes, second.genes)

    def test_str(self):
        """String form names size and best fitness."""
        self.assertEqual(str(self.population), "Population(size=3, genes=2, best_fitness=3.0000)")
        self.assertIn("best_fitness=None", str(Population([[1]])))


if __name__ == '__main__':
    unittest.main()
