"""
Tests for the evolution engine and the generational loop.
"""

import unittest
import numpy as np

from rosenbrock_ga.config import GAConfig, ConfigValidationError
from rosenbrock_ga.engine import EvolutionEngine, EngineState, run_ga
from rosenbrock_ga.objective import evaluate
from rosenbrock_ga.reporting import HistoryReporter

from tests.helpers import ScriptedRandom


FIXED_POINTS = [(0.0, 0.0), (1.0, 1.0), (2.0, 2.0), (3.0, 3.0)]


class TestEngineLifecycle(unittest.TestCase):
    """Test engine state transitions."""

    def setUp(self):
        self.config = GAConfig(population_size=10, max_generations=3, random_seed=1)

    def test_initial_state(self):
        engine = EvolutionEngine(self.config)
        self.assertEqual(engine.state, EngineState.UNINITIALIZED)
        self.assertIsNone(engine.population)
        self.assertIsNone(engine.global_best)

    def test_initialize(self):
        engine = EvolutionEngine(self.config)
        population = engine.initialize()

        self.assertEqual(engine.state, EngineState.INITIALIZED)
        self.assertEqual(len(population), 10)

    def test_initialize_twice_raises(self):
        engine = EvolutionEngine(self.config)
        engine.initialize()
        with self.assertRaises(RuntimeError):
            engine.initialize()

    def test_step_before_initialize_raises(self):
        engine = EvolutionEngine(self.config)
        with self.assertRaises(RuntimeError):
            engine.step()

    def test_runs_exact_generation_count(self):
        engine = EvolutionEngine(self.config)
        result = engine.run()

        self.assertEqual(engine.state, EngineState.COMPLETED)
        self.assertEqual(result.generations_run, 3)
        self.assertEqual([s.generation for s in result.history], [0, 1, 2])

    def test_step_after_completion_raises(self):
        engine = EvolutionEngine(self.config)
        engine.run()
        with self.assertRaises(RuntimeError):
            engine.step()

    def test_step_by_step(self):
        engine = EvolutionEngine(self.config)
        engine.initialize()

        stats = engine.step()
        self.assertEqual(stats.generation, 0)
        self.assertEqual(engine.state, EngineState.RUNNING)

        engine.step()
        engine.step()
        self.assertEqual(engine.state, EngineState.COMPLETED)

    def test_invalid_population_size(self):
        with self.assertRaises(ConfigValidationError):
            EvolutionEngine(GAConfig(population_size=0))


class TestGenerationalLoop(unittest.TestCase):
    """Test generational invariants."""

    def test_population_size_constant(self):
        """Population size holds every generation, including odd sizes."""
        for size in (1, 2, 7, 10):
            for crossover_rate in (0.0, 0.5, 1.0):
                config = GAConfig(population_size=size, crossover_rate=crossover_rate,
                                  mutation_rate=0.5, max_generations=5)
                engine = EvolutionEngine(config, rng=np.random.default_rng(size))
                for _ in engine.generations():
                    self.assertEqual(len(engine.population), size)

    def test_fitness_up_to_date(self):
        config = GAConfig(population_size=20, mutation_rate=1.0, max_generations=10)
        engine = EvolutionEngine(config, rng=np.random.default_rng(0))
        for _ in engine.generations():
            for candidate in engine.population:
                self.assertEqual(candidate.fitness, evaluate(candidate.x, candidate.y))

    def test_global_best_monotone(self):
        config = GAConfig(population_size=30, mutation_rate=0.3, max_generations=40)
        engine = EvolutionEngine(config, rng=np.random.default_rng(123))

        previous = None
        for stats in engine.generations():
            current = engine.global_best.fitness
            self.assertLessEqual(current, stats.best.fitness)
            if previous is not None:
                self.assertLessEqual(current, previous)
            previous = current

        result = engine.result()
        self.assertEqual(result.global_best.fitness, min(result.best_fitness_history()))

    def test_candidates_not_shared(self):
        """Each slot owns its own candidate, even when parents repeat."""
        config = GAConfig(population_size=6, crossover_rate=0.0, mutation_rate=0.0,
                          max_generations=2)
        engine = EvolutionEngine(config, rng=ScriptedRandom(indices=(0,)))
        engine.run()

        ids = {id(candidate) for candidate in engine.population}
        self.assertEqual(len(ids), 6)

    def test_odd_size_keeps_first_children(self):
        """The buffer overshoots by one and the last child is dropped."""
        config = GAConfig(population_size=3, crossover_rate=1.0, mutation_rate=0.0,
                          max_generations=1)
        # Pairs: (0,0) x (1,1) then (1,1) x (2,2), both with alpha = 0.25
        rng = ScriptedRandom(indices=(0, 0, 1, 1, 1, 1, 2, 2), randoms=(0.0, 0.25))
        engine = EvolutionEngine(config, rng=rng,
                                 initial_population=[(0.0, 0.0), (1.0, 1.0), (2.0, 2.0)])
        engine.run()

        self.assertEqual(len(engine.population), 3)
        expected = [0.75, 0.25, 1.75]
        for candidate, value in zip(engine.population, expected):
            self.assertAlmostEqual(candidate.x, value)
            self.assertAlmostEqual(candidate.y, value)
            self.assertEqual(candidate.fitness, evaluate(candidate.x, candidate.y))

    def test_carried_over_parents_are_mutated(self):
        magnitude = 0.01
        config = GAConfig(population_size=4, crossover_rate=0.0, mutation_rate=1.0,
                          mutation_magnitude=magnitude, max_generations=1)
        engine = EvolutionEngine(config, rng=np.random.default_rng(31),
                                 initial_population=FIXED_POINTS)
        engine.run()

        for candidate in engine.population:
            self.assertNotIn(candidate.position(), FIXED_POINTS)
            nearest = min(FIXED_POINTS, key=lambda p: abs(p[0] - candidate.x))
            self.assertLessEqual(abs(candidate.x - nearest[0]), magnitude + 1e-12)
            self.assertLessEqual(abs(candidate.y - nearest[1]), magnitude + 1e-12)
            self.assertEqual(candidate.fitness, evaluate(candidate.x, candidate.y))

    def test_snapshots_unaffected_by_later_generations(self):
        config = GAConfig(population_size=10, mutation_rate=1.0, mutation_magnitude=0.5,
                          max_generations=5)
        engine = EvolutionEngine(config, rng=np.random.default_rng(9))

        first = next(engine.generations())
        position = first.best.position()
        for _ in engine.generations():
            pass

        self.assertEqual(first.best.position(), position)
        self.assertEqual(first.best.fitness, evaluate(*position))

    def test_reproducible_with_seed(self):
        config = GAConfig(population_size=20, max_generations=15, random_seed=2024)
        first = run_ga(config)
        second = run_ga(config)

        self.assertEqual(first.global_best.position(), second.global_best.position())
        self.assertEqual(first.average_fitness_history(), second.average_fitness_history())

    def test_default_run_improves(self):
        result = run_ga(GAConfig(random_seed=42))

        self.assertEqual(result.generations_run, 100)
        self.assertLess(result.global_best.fitness, 0.5)
        self.assertLessEqual(result.global_best.fitness, result.history[0].best.fitness)


class TestFixedPopulationScenario(unittest.TestCase):
    """No crossover and no mutation: only tournament re-selection of fixed points."""

    def setUp(self):
        self.config = GAConfig(population_size=4, crossover_rate=0.0, mutation_rate=0.0,
                               max_generations=5)

    def test_scripted_selection(self):
        engine = EvolutionEngine(self.config, rng=ScriptedRandom(indices=(0, 1, 2, 3)),
                                 initial_population=FIXED_POINTS)
        result = engine.run()

        self.assertEqual(result.generations_run, 5)
        self.assertEqual(result.history[0].best.position(), (1.0, 1.0))
        self.assertEqual(result.history[0].best.fitness, 0.0)
        self.assertEqual(result.global_best.position(), (1.0, 1.0))
        self.assertEqual(result.global_best.fitness, 0.0)

        for stats in result.history:
            self.assertEqual(stats.best.fitness, 0.0)

    def test_population_stays_on_fixed_points(self):
        engine = EvolutionEngine(self.config, rng=np.random.default_rng(77),
                                 initial_population=FIXED_POINTS)
        for stats in engine.generations():
            for candidate in engine.population:
                self.assertIn(candidate.position(), FIXED_POINTS)
            self.assertIn(stats.best.position(), FIXED_POINTS)

        self.assertIn(engine.global_best.position(), FIXED_POINTS)
        self.assertEqual(engine.global_best.fitness, engine.result().history[0].best.fitness)

    def test_initial_population_from_config(self):
        config = GAConfig(population_size=4, crossover_rate=0.0, mutation_rate=0.0,
                          max_generations=1, initial_population=FIXED_POINTS)
        engine = EvolutionEngine(config)
        population = engine.initialize()
        self.assertEqual([c.position() for c in population], FIXED_POINTS)

    def test_initial_population_size_mismatch(self):
        with self.assertRaises(ConfigValidationError):
            EvolutionEngine(GAConfig(population_size=5), initial_population=FIXED_POINTS)


class TestZeroGenerations(unittest.TestCase):
    """A run with no generations reports no result."""

    def test_no_statistics_and_no_best(self):
        reporter = HistoryReporter()
        engine = EvolutionEngine(GAConfig(population_size=10, max_generations=0),
                                 rng=np.random.default_rng(0))
        result = engine.run(reporter)

        self.assertFalse(result.has_result)
        self.assertIsNone(result.global_best)
        self.assertEqual(result.history, [])
        self.assertEqual(reporter.history, [])
        self.assertIs(reporter.result, result)
        self.assertEqual(engine.state, EngineState.COMPLETED)

    def test_negative_generations_no_result(self):
        engine = EvolutionEngine(GAConfig(population_size=4, max_generations=-1),
                                 rng=np.random.default_rng(0))
        result = engine.run()

        self.assertFalse(result.has_result)
        self.assertIsNone(result.global_best)
        self.assertEqual(result.history, [])
        self.assertEqual(engine.state, EngineState.COMPLETED)
        self.assertEqual(len(engine.warnings), 1)

    def test_non_integer_generations_rejected(self):
        with self.assertRaises(ConfigValidationError):
            EvolutionEngine(GAConfig(max_generations=2.5))


if __name__ == '__main__':
    unittest.main()
