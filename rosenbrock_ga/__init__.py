"""
Rosenbrock Genetic Algorithm

A minimal genetic algorithm that minimizes the Rosenbrock function
f(x, y) = (1 - x)^2 + 100 * (y - x^2)^2 over two real variables.

Modules:
- objective: The fitness function
- data_models: Core data structures (Candidate, RunStatistics, RunResult)
- population: Population container, tournament selection, ranking
- crossover: Blend crossover operator
- mutation: Uniform perturbation mutation
- engine: Generational loop and run bookkeeping
- config: YAML configuration loading and validation
- reporting: Console and history reporters
- visualization: Convergence and population charts
"""

__version__ = "0.1.0"

from .data_models import Candidate, RunStatistics, RunResult
from .objective import evaluate
from .population import Population
from .config import GAConfig, ConfigValidationError
from .engine import EvolutionEngine, EngineState, run_ga

__all__ = [
    "Candidate",
    "RunStatistics",
    "RunResult",
    "evaluate",
    "Population",
    "GAConfig",
    "ConfigValidationError",
    "EvolutionEngine",
    "EngineState",
    "run_ga",
]
