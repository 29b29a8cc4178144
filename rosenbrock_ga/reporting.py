"""
Progress reporting for the genetic algorithm.

Reporters receive one RunStatistics per generation and the final RunResult.
"""

from typing import List

from .data_models import RunResult, RunStatistics


class ConsoleReporter:
    """Prints one line per generation and the final best candidate."""

    def __init__(self, every: int = 1, verbose: bool = True):
        self.every = max(1, every)
        self.verbose = verbose

    def on_generation(self, stats: RunStatistics) -> None:
        if not self.verbose or stats.generation % self.every != 0:
            return
        best = stats.best
        print(f"Generation {stats.generation}: x = {best.x:.6f}, y = {best.y:.6f}, "
              f"fitness = {best.fitness:.6e}, avg = {stats.average_fitness:.6e}")

    def on_complete(self, result: RunResult) -> None:
        print()
        if not result.has_result:
            print("No generations were run - no best candidate to report")
            return
        best = result.global_best
        print(f"Best Candidate: x = {best.x:.6f}, y = {best.y:.6f} "
              f"(fitness = {best.fitness:.6e}, {result.generations_run} generations)")


class HistoryReporter:
    """Collects statistics for later analysis or charting."""

    def __init__(self):
        self.history: List[RunStatistics] = []
        self.result = None

    def on_generation(self, stats: RunStatistics) -> None:
        self.history.append(stats)

    def on_complete(self, result: RunResult) -> None:
        self.result = result


class CompositeReporter:
    """Forwards every event to several reporters."""

    def __init__(self, *reporters):
        self.reporters = list(reporters)

    def on_generation(self, stats: RunStatistics) -> None:
        for reporter in self.reporters:
            reporter.on_generation(stats)

    def on_complete(self, result: RunResult) -> None:
        for reporter in self.reporters:
            reporter.on_complete(result)
