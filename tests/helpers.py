"""
Shared test doubles.
"""

import itertools


class ScriptedRandom:
    """Generator stand-in cycling through fixed indices and uniform draws."""

    def __init__(self, indices=(0,), randoms=(0.5,)):
        self._indices = itertools.cycle(indices)
        self._randoms = itertools.cycle(randoms)

    def integers(self, low, high):
        return low + next(self._indices) % (high - low)

    def random(self):
        return next(self._randoms)
