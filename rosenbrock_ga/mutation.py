"""
Mutation operators for the genetic algorithm.
"""

from typing import Iterable

import numpy as np

from .data_models import Candidate, DEFAULT_MUTATION_MAGNITUDE


def mutate_population(
    candidates: Iterable[Candidate],
    mutation_rate: float,
    rng: np.random.Generator,
    mutation_magnitude: float = DEFAULT_MUTATION_MAGNITUDE
) -> int:
    """
    Apply mutation to every candidate, in order.

    Args:
        candidates: Candidates to mutate in place
        mutation_rate: Per-candidate mutation probability
        rng: Random number generator
        mutation_magnitude: Half-width of the uniform perturbation

    Returns:
        Number of candidates that were perturbed
    """
    mutated = 0
    for candidate in candidates:
        if candidate.mutate(mutation_rate, rng, mutation_magnitude):
            mutated += 1
    return mutated
