#!/usr/bin/env python3
"""
Rosenbrock Genetic Algorithm

Main entry point. Loads a YAML configuration, runs the genetic algorithm,
prints progress and optionally saves a convergence chart.
"""

import sys
import argparse
import time
from pathlib import Path

from rosenbrock_ga.config import (
    ConfigValidationError,
    RunConfig,
    load_run_config,
    parse_run_config,
    print_config_summary,
    validate_ga_config
)
from rosenbrock_ga.engine import EvolutionEngine
from rosenbrock_ga.reporting import ConsoleReporter


def build_run_config(args) -> RunConfig:
    """Load the YAML configuration (if any) and apply command-line overrides"""
    if args.config and Path(args.config).exists():
        run_config = parse_run_config(load_run_config(args.config))
    elif args.config != 'config.yaml':
        raise FileNotFoundError(f"Configuration file not found: {args.config}")
    else:
        run_config = RunConfig()

    ga = run_config.ga
    if args.seed is not None:
        ga.random_seed = args.seed
    if args.generations is not None:
        ga.max_generations = args.generations
    if args.population_size is not None:
        ga.population_size = args.population_size
        # A fixed start only fits the size it was written for
        if ga.initial_population is not None and len(ga.initial_population) != args.population_size:
            ga.initial_population = None
    if args.plot:
        run_config.output.plot = True
        run_config.output.plot_path = args.plot
    if args.quiet:
        run_config.output.verbose = False

    return run_config


def run(run_config: RunConfig, every: int = 1):
    """Run the genetic algorithm and report results"""
    warnings = validate_ga_config(run_config.ga)
    if run_config.output.verbose:
        print_config_summary(run_config.ga, warnings)

    print("\nRunning genetic algorithm...")
    start_time = time.time()

    engine = EvolutionEngine(run_config.ga)
    reporter = ConsoleReporter(every=every, verbose=run_config.output.verbose)
    result = engine.run(reporter)

    elapsed_time = time.time() - start_time
    print(f"Completed {result.generations_run} generations in {elapsed_time:.3f} seconds")

    if run_config.output.plot:
        if not result.has_result:
            print("Skipping chart: no generations were run")
        else:
            from rosenbrock_ga.visualization import plot_run_summary

            save_path = run_config.output.plot_path or "convergence.png"
            print("\nGenerating convergence chart...")
            plot_run_summary(result, engine.population, save_path=save_path, close=True)
            print(f"  ✓ Chart: {save_path}")

    return result


def main():
    """Main entry point with command-line argument parsing"""
    parser = argparse.ArgumentParser(
        description="Rosenbrock Genetic Algorithm",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python3 main.py                               # Defaults (or config.yaml if present)
  python3 main.py --seed 42                     # Reproducible run
  python3 main.py -g 500 -p 200                 # More generations, larger population
  python3 main.py --plot convergence.png        # Save convergence chart
  python3 main.py --config custom.yaml          # Custom config file
        """
    )

    parser.add_argument(
        '--config', '-c',
        default='config.yaml',
        help='Configuration file path (default: config.yaml)'
    )

    parser.add_argument(
        '--seed', '-s',
        type=int,
        help='Random seed'
    )

    parser.add_argument(
        '--generations', '-g',
        type=int,
        metavar='N',
        help='Number of generations'
    )

    parser.add_argument(
        '--population-size', '-p',
        type=int,
        metavar='N',
        help='Number of candidates per generation'
    )

    parser.add_argument(
        '--every', '-e',
        type=int,
        default=1,
        metavar='N',
        help='Print progress every N generations (default: 1)'
    )

    parser.add_argument(
        '--plot',
        type=str,
        metavar='PATH',
        help='Save convergence chart to PATH'
    )

    parser.add_argument(
        '--quiet', '-q',
        action='store_true',
        help='Only print the final result'
    )

    args = parser.parse_args()

    try:
        run_config = build_run_config(args)
        run(run_config, every=args.every)

    except KeyboardInterrupt:
        print("\nOperation cancelled by user.")
        sys.exit(1)
    except ConfigValidationError as e:
        print(f"Configuration Error: {e}")
        sys.exit(1)
    except Exception as e:
        print(f"Error: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
