"""
Solver Package - Generic breadth-first search for puzzle states.

The solver knows nothing about any particular puzzle. Each puzzle supplies
its states as Configuration subclasses; the solver returns a shortest path
to a solution together with search counters.

Public API:
    - Configuration: Abstract base for puzzle states
    - Solver: Breadth-first search engine
    - solve(): Convenience wrapper running a fresh Solver
    - Solution: Path and counters returned by a search
    - SolutionMetrics: Performance statistics

Usage:
    from puzzles.solver import solve
    from puzzles.clock import ClockConfig

    solution = solve(ClockConfig(hours=12, current=9, goal=3))
    print(solution.total_expansions, solution.unique_states)
    for step, config in enumerate(solution.path):
        print(f"Step {step}: {config.current}")
"""

from .base import Configuration
from .solution import Solution, SolutionMetrics
from .engine import Solver, solve

__all__ = [
    "Configuration",
    "Solution",
    "SolutionMetrics",
    "Solver",
    "solve",
]
