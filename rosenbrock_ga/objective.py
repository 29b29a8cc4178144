"""
Objective function for the genetic algorithm.

The search surface is the Rosenbrock "banana" function. Lower values are
better; the global minimum is 0 at (1, 1).
"""

OPTIMUM = (1.0, 1.0)


def evaluate(x, y):
    """
    Evaluate the Rosenbrock function at (x, y).

    Works on plain floats as well as numpy arrays (elementwise), which is
    what the contour plot relies on.

    Args:
        x: X coordinate(s)
        y: Y coordinate(s)

    Returns:
        Fitness value(s), always >= 0
    """
    return (1 - x) * (1 - x) + 100 * (y - x * x) * (y - x * x)
