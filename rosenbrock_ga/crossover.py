"""
Crossover operators for the genetic algorithm.

Implements blend (linear) crossover: both children are convex combinations
of the two parents' coordinates.
"""

from typing import Tuple

import numpy as np

from .data_models import Candidate


def blend_with_alpha(
    parent1: Candidate,
    parent2: Candidate,
    alpha: float
) -> Tuple[Candidate, Candidate]:
    """
    Combine two parents with a fixed blend weight.

    child1 takes alpha of parent1 and (1 - alpha) of parent2; child2 takes
    the mirrored weights. Each child's fitness is computed on creation.

    Args:
        parent1: First parent
        parent2: Second parent
        alpha: Blend weight in [0, 1]

    Returns:
        Tuple of (child1, child2)
    """
    child1 = Candidate(
        alpha * parent1.x + (1 - alpha) * parent2.x,
        alpha * parent1.y + (1 - alpha) * parent2.y
    )
    child2 = Candidate(
        (1 - alpha) * parent1.x + alpha * parent2.x,
        (1 - alpha) * parent1.y + alpha * parent2.y
    )
    return child1, child2


def blend_crossover(
    parent1: Candidate,
    parent2: Candidate,
    rng: np.random.Generator
) -> Tuple[Candidate, Candidate]:
    """
    Blend crossover with a single alpha drawn uniformly from [0, 1).

    Args:
        parent1: First parent
        parent2: Second parent
        rng: Random number generator

    Returns:
        Tuple of (child1, child2)
    """
    alpha = rng.random()
    return blend_with_alpha(parent1, parent2, alpha)
