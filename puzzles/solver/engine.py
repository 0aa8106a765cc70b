"""
Solver Engine - Breadth-first search over any Configuration.

Finds a shortest sequence of moves from a start configuration to one that
satisfies is_solution(). The state graph is implicit: it is generated on
demand from each configuration's neighbors().
"""

import logging
import time
from collections import deque
from typing import Deque, Dict, List, Optional

from .base import Configuration
from .solution import Solution, SolutionMetrics

logger = logging.getLogger(__name__)


class Solver:
    """
    Breadth-first solver.

    Every state is marked as discovered when it is enqueued, so each
    distinct state enters the queue at most once. The first solution
    dequeued is therefore reached by a minimum number of moves; among
    equally short paths, the one found first in neighbor order wins.

    The counters of the most recent run stay readable on the instance.

    Example:
        solver = Solver()
        solution = solver.solve(ClockConfig(12, 9, 3))
        for step, config in enumerate(solution.path):
            print(f"Step {step}: {config}")
    """

    def __init__(self):
        self.total_expansions = 0
        self.unique_states = 0

    def solve(self, initial: Configuration) -> Solution:
        """
        Search for a shortest path from initial to a solution.

        Args:
            initial: Start configuration

        Returns:
            Solution with the path (empty if unreachable) and counters
        """
        start_time = time.perf_counter()

        queue: Deque[Configuration] = deque([initial])
        predecessor: Dict[Configuration, Optional[Configuration]] = {initial: None}
        total = 1
        end: Optional[Configuration] = None

        while queue:
            current = queue.popleft()
            if current.is_solution():
                end = current
                break

            for neighbor in current.neighbors():
                total += 1
                if neighbor not in predecessor:
                    predecessor[neighbor] = current
                    queue.append(neighbor)

        self.total_expansions = total
        self.unique_states = len(predecessor)
        path = self._build_path(predecessor, end)

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.debug(
            f"Search finished in {elapsed_ms:.1f}ms: "
            f"{'solved in ' + str(len(path) - 1) + ' moves' if path else 'no solution'}, "
            f"total={total}, unique={self.unique_states}"
        )

        return Solution(
            path=path,
            total_expansions=total,
            unique_states=self.unique_states,
            metrics=SolutionMetrics(
                computation_time_ms=elapsed_ms,
                puzzle_name=type(initial).__name__
            )
        )

    @staticmethod
    def _build_path(
        predecessor: Dict[Configuration, Optional[Configuration]],
        end: Optional[Configuration]
    ) -> List[Configuration]:
        """Walk back from the solution to the start and reverse."""
        if end is None:
            return []

        path: List[Configuration] = []
        current: Optional[Configuration] = end
        while current is not None:
            path.append(current)
            current = predecessor[current]
        path.reverse()
        return path


def solve(initial: Configuration) -> Solution:
    """
    Run a fresh breadth-first search from initial.

    Args:
        initial: Start configuration

    Returns:
        Solution with path and counters
    """
    return Solver().solve(initial)
