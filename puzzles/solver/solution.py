"""
Solution Module - Result of a breadth-first search.
"""

from dataclasses import dataclass, field
from typing import List, Optional

from .base import Configuration


@dataclass
class SolutionMetrics:
    """
    Performance metrics for solution computation.

    Attributes:
        computation_time_ms: Time taken in milliseconds
        puzzle_name: Class name of the searched configuration
    """
    computation_time_ms: float = 0.0
    puzzle_name: str = ""


@dataclass
class Solution:
    """
    Result of a solver run.

    Attributes:
        path: States from the initial configuration to a solution,
              inclusive. Empty when no solution is reachable.
        total_expansions: Number of configurations generated, counting the
                          initial one and every neighbor seen, repeats included
        unique_states: Number of distinct configurations discovered
        metrics: Performance statistics
    """
    path: List[Configuration] = field(default_factory=list)
    total_expansions: int = 1
    unique_states: int = 1
    metrics: SolutionMetrics = field(default_factory=SolutionMetrics)

    @property
    def is_solved(self) -> bool:
        """Check if a solution was found."""
        return len(self.path) > 0

    @property
    def step_count(self) -> int:
        """Number of moves in the path (0 if unsolved or already solved)."""
        return max(0, len(self.path) - 1)

    @property
    def next_step(self) -> Optional[Configuration]:
        """
        Get the state one move along the path.

        Returns:
            Second state of the path, or None if there is no move to make
        """
        if len(self.path) > 1:
            return self.path[1]
        return None

    @property
    def final_state(self) -> Optional[Configuration]:
        """Get the solution state, or None if unsolved."""
        return self.path[-1] if self.path else None
