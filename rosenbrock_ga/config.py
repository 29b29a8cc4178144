"""
Configuration module for the genetic algorithm.

Handles run configuration loading, validation, and summary printing.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple
import yaml


class ConfigValidationError(Exception):
    """Raised when run configuration is invalid."""
    pass


@dataclass
class GAConfig:
    """
    Genetic algorithm parameters.

    Attributes:
        population_size: Number of candidates per generation
        crossover_rate: Probability that two selected parents undergo crossover
        mutation_rate: Per-candidate probability of perturbation each generation
        mutation_magnitude: Half-width of the uniform perturbation
        max_generations: Number of generations to run
        random_seed: Seed for the random number generator (None for fresh entropy)
        initial_population: Optional fixed starting points instead of random ones
    """
    population_size: int = 100
    crossover_rate: float = 0.8
    mutation_rate: float = 0.01
    mutation_magnitude: float = 0.01
    max_generations: int = 100
    random_seed: Optional[int] = None
    initial_population: Optional[List[Tuple[float, float]]] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "GAConfig":
        """
        Build a GAConfig from the 'ga' section of a run configuration.

        Unknown keys are rejected so that typos do not silently fall back
        to defaults.
        """
        known = set(cls.__dataclass_fields__)
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigValidationError(f"Unknown 'ga' field(s): {', '.join(unknown)}")

        config = cls(**data)
        if config.initial_population is not None:
            config.initial_population = _parse_points(config.initial_population)
        return config

    def to_dict(self) -> Dict[str, Any]:
        return {
            'population_size': self.population_size,
            'crossover_rate': self.crossover_rate,
            'mutation_rate': self.mutation_rate,
            'mutation_magnitude': self.mutation_magnitude,
            'max_generations': self.max_generations,
            'random_seed': self.random_seed,
            'initial_population': self.initial_population,
        }


@dataclass
class OutputConfig:
    """Console and chart output settings."""
    verbose: bool = True
    plot: bool = False
    plot_path: Optional[str] = None


@dataclass
class RunConfig:
    ga: GAConfig = field(default_factory=GAConfig)
    output: OutputConfig = field(default_factory=OutputConfig)


def _parse_points(points: Any) -> List[Tuple[float, float]]:
    if not isinstance(points, (list, tuple)):
        raise ConfigValidationError("'initial_population' must be a list of [x, y] pairs")

    parsed = []
    for point in points:
        if not isinstance(point, (list, tuple)) or len(point) != 2:
            raise ConfigValidationError(
                f"'initial_population' entries must be [x, y] pairs, got: {point}"
            )
        x, y = point
        if isinstance(x, bool) or isinstance(y, bool) or \
                not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
            raise ConfigValidationError(
                f"'initial_population' coordinates must be numbers, got: {point}"
            )
        parsed.append((float(x), float(y)))
    return parsed


def load_run_config(config_path: str) -> Dict[str, Any]:
    """
    Load run configuration from YAML file.

    Args:
        config_path: Path to run configuration YAML file

    Returns:
        Dictionary containing run configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ConfigValidationError: If config is invalid
    """
    config_file = Path(config_path)

    if not config_file.exists():
        raise FileNotFoundError(f"Configuration file not found: {config_path}")

    try:
        with open(config_file, 'r') as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigValidationError(f"Invalid YAML in configuration file: {e}")

    if config is None:
        raise ConfigValidationError("Configuration file is empty")

    if not isinstance(config, dict):
        raise ConfigValidationError("Configuration file must contain a mapping")

    return config


def validate_ga_config(config: GAConfig) -> List[str]:
    """
    Validate GA parameters.

    Probabilities outside [0, 1] are accepted: they behave as "always" or
    "never" and are reported as warnings.

    Args:
        config: GA configuration

    Returns:
        List of warnings (empty if none)

    Raises:
        ConfigValidationError: If a parameter makes the run impossible
    """
    warnings = []

    size = config.population_size
    if isinstance(size, bool) or not isinstance(size, int) or size <= 0:
        raise ConfigValidationError(
            f"'population_size' must be a positive integer, got: {size}"
        )

    generations = config.max_generations
    if isinstance(generations, bool) or not isinstance(generations, int):
        raise ConfigValidationError(
            f"'max_generations' must be an integer, got: {generations}"
        )
    if generations <= 0:
        warnings.append(f"'max_generations' is {generations}: no generations will be run")

    for name in ('crossover_rate', 'mutation_rate', 'mutation_magnitude'):
        value = getattr(config, name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise ConfigValidationError(f"'{name}' must be a number, got: {value}")

    for name in ('crossover_rate', 'mutation_rate'):
        value = getattr(config, name)
        if not 0.0 <= value <= 1.0:
            warnings.append(f"'{name}' = {value} is outside [0, 1]")

    if config.mutation_magnitude < 0:
        raise ConfigValidationError(
            f"'mutation_magnitude' must be non-negative, got: {config.mutation_magnitude}"
        )

    seed = config.random_seed
    if seed is not None and (isinstance(seed, bool) or not isinstance(seed, int) or seed < 0):
        raise ConfigValidationError(f"'random_seed' must be a non-negative integer, got: {seed}")

    if config.initial_population is not None:
        points = _parse_points(config.initial_population)
        if len(points) != size:
            raise ConfigValidationError(
                f"'initial_population' has {len(points)} points, "
                f"expected population_size={size}"
            )

    return warnings


def parse_run_config(data: Dict[str, Any]) -> RunConfig:
    """
    Convert a raw configuration dictionary into a RunConfig.

    Args:
        data: Dictionary as loaded from YAML

    Returns:
        RunConfig with validated GA parameters

    Raises:
        ConfigValidationError: If configuration is invalid
    """
    ga_section = data.get('ga', {}) or {}
    if not isinstance(ga_section, dict):
        raise ConfigValidationError("'ga' must be a dictionary")

    output_section = data.get('output', {}) or {}
    if not isinstance(output_section, dict):
        raise ConfigValidationError("'output' must be a dictionary")

    try:
        output = OutputConfig(**output_section)
    except TypeError as e:
        raise ConfigValidationError(f"Invalid 'output' section: {e}")

    ga = GAConfig.from_dict(ga_section)
    validate_ga_config(ga)

    return RunConfig(ga=ga, output=output)


def print_config_summary(config: GAConfig, warnings: Optional[List[str]] = None) -> None:
    """Print a summary of the configuration"""
    print("=" * 50)
    print("CONFIGURATION SUMMARY")
    print("=" * 50)
    print(f"Population size: {config.population_size}")
    print(f"Generations: {config.max_generations}")
    print(f"Crossover rate: {config.crossover_rate}")
    print(f"Mutation rate: {config.mutation_rate}")
    print(f"Mutation magnitude: {config.mutation_magnitude}")
    print(f"Random seed: {config.random_seed if config.random_seed is not None else 'random'}")
    if config.initial_population is not None:
        print(f"Initial population: {len(config.initial_population)} fixed points")

    if warnings:
        print(f"\nValidation Warnings ({len(warnings)}):")
        for warning in warnings:
            print(f"  - {warning}")
    else:
        print("\nConfiguration is valid ✓")

    print("=" * 50)
