"""
Evolution engine for the genetic algorithm.

Drives the generational loop (selection, crossover, mutation, replacement)
and tracks per-generation statistics and the best candidate seen so far.
"""

from enum import Enum
from typing import Iterator, List, Optional, Sequence, Tuple

import numpy as np

from .config import GAConfig, validate_ga_config
from .crossover import blend_crossover
from .data_models import Candidate, RunResult, RunStatistics
from .mutation import mutate_population
from .population import Population


class EngineState(Enum):
    UNINITIALIZED = "uninitialized"
    INITIALIZED = "initialized"
    RUNNING = "running"
    COMPLETED = "completed"


class EvolutionEngine:
    """
    Generational genetic algorithm over the Rosenbrock surface.

    The engine runs exactly config.max_generations generations; there is no
    early stopping. Randomness comes only from the injected generator.

    Args:
        config: GA parameters
        rng: Random number generator (defaults to one seeded from config.random_seed)
        initial_population: Optional fixed starting points, overrides
            config.initial_population
    """

    def __init__(
        self,
        config: GAConfig,
        rng: Optional[np.random.Generator] = None,
        initial_population: Optional[Sequence[Tuple[float, float]]] = None
    ):
        if initial_population is not None:
            config = GAConfig(**{**config.to_dict(), 'initial_population': list(initial_population)})
        self.warnings = validate_ga_config(config)

        self.config = config
        self.rng = rng if rng is not None else np.random.default_rng(config.random_seed)
        self.population: Optional[Population] = None
        self.global_best: Optional[Candidate] = None
        self.history: List[RunStatistics] = []
        self.generation = 0
        self.state = EngineState.UNINITIALIZED

    def initialize(self) -> Population:
        """
        Build the starting population.

        Returns:
            The initial population

        Raises:
            RuntimeError: If the engine was already initialized
        """
        if self.state != EngineState.UNINITIALIZED:
            raise RuntimeError(f"Engine already initialized (state: {self.state.value})")

        if self.config.initial_population is not None:
            self.population = Population.from_points(self.config.initial_population)
        else:
            self.population = Population.initialize_random(self.config.population_size, self.rng)

        self.state = EngineState.INITIALIZED
        if self.config.max_generations <= 0:
            self.state = EngineState.COMPLETED
        return self.population

    def _breed(self) -> List[Candidate]:
        """Fill a new buffer from the current population."""
        size = self.config.population_size
        buffer: List[Candidate] = []

        while len(buffer) < size:
            parent1 = self.population.select_parent(self.rng)
            parent2 = self.population.select_parent(self.rng)

            if self.rng.random() < self.config.crossover_rate:
                buffer.extend(blend_crossover(parent1, parent2, self.rng))
            else:
                # Copies keep each slot the sole owner of its candidate
                buffer.append(parent1.copy())
                buffer.append(parent2.copy())

        return buffer

    def step(self) -> RunStatistics:
        """
        Run one generation.

        Returns:
            Statistics for the generation just completed

        Raises:
            RuntimeError: If the engine is not initialized or already completed
        """
        if self.state == EngineState.UNINITIALIZED:
            raise RuntimeError("Engine must be initialized before stepping")
        if self.state == EngineState.COMPLETED:
            raise RuntimeError("Engine has already completed all generations")

        self.state = EngineState.RUNNING

        buffer = self._breed()
        mutate_population(buffer, self.config.mutation_rate, self.rng,
                          self.config.mutation_magnitude)

        # Odd sizes overshoot by one; the last child is dropped
        self.population = Population(buffer[:self.config.population_size])

        best = self.population.best()
        average_fitness = self.population.average_fitness()

        if self.global_best is None or best.fitness < self.global_best.fitness:
            self.global_best = best.copy()

        stats = RunStatistics(
            generation=self.generation,
            best=best.copy(),
            average_fitness=average_fitness
        )
        self.history.append(stats)

        self.generation += 1
        if self.generation >= self.config.max_generations:
            self.state = EngineState.COMPLETED

        return stats

    def generations(self) -> Iterator[RunStatistics]:
        """Yield statistics for each generation until the run completes."""
        if self.state == EngineState.UNINITIALIZED:
            self.initialize()

        while self.state != EngineState.COMPLETED:
            yield self.step()

    def result(self) -> RunResult:
        return RunResult(global_best=self.global_best, history=list(self.history))

    def run(self, reporter=None) -> RunResult:
        """
        Run all generations.

        Args:
            reporter: Optional object with on_generation(stats) and
                on_complete(result) methods

        Returns:
            RunResult; global_best is None when max_generations <= 0
        """
        for stats in self.generations():
            if reporter is not None:
                reporter.on_generation(stats)

        result = self.result()
        if reporter is not None:
            reporter.on_complete(result)
        return result


def run_ga(config: GAConfig, rng: Optional[np.random.Generator] = None, reporter=None) -> RunResult:
    """
    Convenience wrapper: build an engine and run it to completion.

    Raises:
        ConfigValidationError: If config is invalid
    """
    engine = EvolutionEngine(config, rng=rng)
    return engine.run(reporter)
