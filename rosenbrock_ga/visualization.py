"""
Visualization for the genetic algorithm.

Convergence chart (fitness per generation) and the final population drawn
over the Rosenbrock surface.
"""

from typing import Optional, Tuple

import matplotlib.pyplot as plt
import numpy as np

from .data_models import RunResult
from .objective import OPTIMUM, evaluate
from .population import Population

CHART_TITLE = "Genetic Algorithm Optimization"
FIGSIZE = (8, 6)


def plot_convergence(result: RunResult, ax=None, save_path: Optional[str] = None):
    """
    Plot average and best fitness per generation.

    Args:
        result: Completed run
        ax: Optional matplotlib axes to draw into
        save_path: Optional path to save the figure

    Returns:
        The axes drawn into

    Raises:
        ValueError: If the run has no generations
    """
    if not result.has_result:
        raise ValueError("Cannot plot convergence of a run with no generations")

    if ax is None:
        _, ax = plt.subplots(figsize=FIGSIZE)

    generations = np.arange(result.generations_run)
    averages = np.array(result.average_fitness_history())
    bests = np.array(result.best_fitness_history())

    ax.plot(generations, averages, label="Average Fitness", color="tab:blue")
    ax.plot(generations, bests, label="Best Fitness", color="tab:red", linestyle="--")

    # Log scale only makes sense for strictly positive values
    if np.all(averages > 0) and np.all(bests > 0):
        ax.set_yscale("log")

    ax.set_title(CHART_TITLE)
    ax.set_xlabel("Generation")
    ax.set_ylabel("Fitness")
    ax.legend()
    ax.grid(True, alpha=0.3)

    if save_path:
        ax.figure.savefig(save_path, dpi=150, bbox_inches='tight')

    return ax


def plot_population(
    population: Population,
    ax=None,
    bounds: Optional[Tuple[float, float, float, float]] = None,
    resolution: int = 200
):
    """
    Draw candidates over a contour of the fitness surface.

    Args:
        population: Population to draw
        ax: Optional matplotlib axes
        bounds: (x_min, x_max, y_min, y_max); derived from the population if None
        resolution: Grid points per axis for the contour

    Returns:
        The axes drawn into
    """
    if ax is None:
        _, ax = plt.subplots(figsize=FIGSIZE)

    positions = population.positions()
    if bounds is None:
        xs = np.append(positions[:, 0], OPTIMUM[0])
        ys = np.append(positions[:, 1], OPTIMUM[1])
        margin = 0.5
        bounds = (xs.min() - margin, xs.max() + margin, ys.min() - margin, ys.max() + margin)

    x_min, x_max, y_min, y_max = bounds
    grid_x, grid_y = np.meshgrid(
        np.linspace(x_min, x_max, resolution),
        np.linspace(y_min, y_max, resolution)
    )
    surface = evaluate(grid_x, grid_y)

    ax.contourf(grid_x, grid_y, np.log1p(surface), levels=30, cmap="viridis", alpha=0.8)
    ax.scatter(positions[:, 0], positions[:, 1], s=12, color="white",
               edgecolors="black", linewidths=0.5, label="Candidates")
    ax.scatter([OPTIMUM[0]], [OPTIMUM[1]], marker="*", s=150, color="red", label="Optimum")

    ax.set_xlim(x_min, x_max)
    ax.set_ylim(y_min, y_max)
    ax.set_xlabel("x")
    ax.set_ylabel("y")
    ax.set_title("Population on log(1 + f(x, y))")
    ax.legend(loc="upper left")

    return ax


def plot_run_summary(
    result: RunResult,
    population: Population,
    save_path: Optional[str] = None,
    show: bool = False,
    close: bool = False
):
    """
    Two-panel figure: convergence chart and final population.

    The caller owns the returned figure and must close it unless close=True.

    Args:
        result: Completed run
        population: Final population
        save_path: Optional path to save the figure
        show: Display the figure interactively
        close: Close the figure once saved or shown

    Returns:
        The matplotlib figure
    """
    if save_path and not show:
        # Non-interactive backend avoids display issues when only saving
        import matplotlib
        matplotlib.use('Agg')

    fig, (ax_conv, ax_pop) = plt.subplots(1, 2, figsize=(14, 6))
    plot_convergence(result, ax_conv)
    plot_population(population, ax_pop)
    fig.tight_layout()

    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')
    if show:
        plt.show()
    if close:
        plt.close(fig)

    return fig
