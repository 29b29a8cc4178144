"""
Data models for the genetic algorithm.

Core data structures representing candidates, per-generation statistics,
and the outcome of a run.
"""

from dataclasses import dataclass, field
from typing import List, Optional

import numpy as np

from .objective import evaluate

DEFAULT_MUTATION_MAGNITUDE = 0.01


@dataclass
class Candidate:
    """
    A single point in the search space (individual in GA population).

    Attributes:
        x: X coordinate
        y: Y coordinate
        fitness: Cached objective value, recomputed whenever x or y change
    """
    x: float
    y: float
    fitness: float = field(init=False)

    def __post_init__(self):
        """Coerce coordinates and compute fitness."""
        self.x = float(self.x)
        self.y = float(self.y)
        self.fitness = evaluate(self.x, self.y)

    def __lt__(self, other: "Candidate") -> bool:
        return self.fitness < other.fitness

    def copy(self) -> "Candidate":
        """Return an independent copy of this candidate."""
        return Candidate(self.x, self.y)

    def position(self) -> tuple:
        return (self.x, self.y)

    def mutate(
        self,
        mutation_rate: float,
        rng: np.random.Generator,
        mutation_magnitude: float = DEFAULT_MUTATION_MAGNITUDE
    ) -> bool:
        """
        Perturb this candidate in place with probability mutation_rate.

        Both coordinates are shifted independently by a value drawn uniformly
        from [-mutation_magnitude, +mutation_magnitude], then fitness is
        recomputed.

        Args:
            mutation_rate: Probability of applying the perturbation
            rng: Random number generator
            mutation_magnitude: Half-width of the perturbation

        Returns:
            True if the candidate was perturbed, False otherwise
        """
        if rng.random() >= mutation_rate:
            return False

        self.x += (rng.random() * 2 - 1) * mutation_magnitude
        self.y += (rng.random() * 2 - 1) * mutation_magnitude
        self.fitness = evaluate(self.x, self.y)
        return True


@dataclass(frozen=True)
class RunStatistics:
    """
    Summary of a single generation.

    Attributes:
        generation: Zero-based generation index
        best: Snapshot of the fittest candidate of this generation
        average_fitness: Mean fitness over the population
    """
    generation: int
    best: Candidate
    average_fitness: float


@dataclass
class RunResult:
    """
    Outcome of a complete run.

    global_best is None when no generation was run.
    """
    global_best: Optional[Candidate]
    history: List[RunStatistics] = field(default_factory=list)

    @property
    def has_result(self) -> bool:
        return self.global_best is not None

    @property
    def generations_run(self) -> int:
        return len(self.history)

    def average_fitness_history(self) -> List[float]:
        return [stats.average_fitness for stats in self.history]

    def best_fitness_history(self) -> List[float]:
        return [stats.best.fitness for stats in self.history]
