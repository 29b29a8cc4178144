"""
Population container and selection for the genetic algorithm.
"""

from typing import Iterable, Iterator, List, Sequence, Tuple

import numpy as np

from .data_models import Candidate


class Population:
    """Ordered collection of candidates with ranking and selection helpers."""

    def __init__(self, candidates: Iterable[Candidate]):
        self.candidates: List[Candidate] = list(candidates)

    @classmethod
    def initialize_random(cls, size: int, rng: np.random.Generator) -> "Population":
        """
        Create a population of uniformly random candidates.

        Both coordinates are drawn independently from [0, 1).

        Args:
            size: Number of candidates
            rng: Random number generator

        Returns:
            New Population

        Raises:
            ValueError: If size is not positive
        """
        if size <= 0:
            raise ValueError(f"Population size must be positive, got {size}")

        candidates = []
        for _ in range(size):
            x = rng.random()
            y = rng.random()
            candidates.append(Candidate(x, y))
        return cls(candidates)

    @classmethod
    def from_points(cls, points: Sequence[Tuple[float, float]]) -> "Population":
        """Create a population from fixed (x, y) points."""
        if not points:
            raise ValueError("Population requires at least one point")
        return cls(Candidate(x, y) for x, y in points)

    def __len__(self) -> int:
        return len(self.candidates)

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self.candidates)

    def __getitem__(self, index: int) -> Candidate:
        return self.candidates[index]

    def select_parent(self, rng: np.random.Generator) -> Candidate:
        """
        Binary tournament selection.

        Two candidates are drawn independently and uniformly (with
        replacement); the one with strictly lower fitness wins, otherwise the
        second draw is returned.

        Args:
            rng: Random number generator

        Returns:
            The selected candidate (not a copy)
        """
        size = len(self.candidates)
        candidate1 = self.candidates[rng.integers(0, size)]
        candidate2 = self.candidates[rng.integers(0, size)]
        return candidate1 if candidate1.fitness < candidate2.fitness else candidate2

    def best(self) -> Candidate:
        """Return the candidate with minimum fitness (first one on ties)."""
        if not self.candidates:
            raise ValueError("Cannot take the best of an empty population")
        return min(self.candidates, key=lambda candidate: candidate.fitness)

    def average_fitness(self) -> float:
        if not self.candidates:
            return 0.0
        return float(np.mean([candidate.fitness for candidate in self.candidates]))

    def ranked(self) -> List[Candidate]:
        """Candidates sorted by ascending fitness (stable)."""
        return sorted(self.candidates, key=lambda candidate: candidate.fitness)

    def positions(self) -> np.ndarray:
        """Coordinates as an (n, 2) array."""
        return np.array([[candidate.x, candidate.y] for candidate in self.candidates], dtype=float)
