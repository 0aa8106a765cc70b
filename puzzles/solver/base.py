"""
Configuration Module - Abstract base class for puzzle states.
"""

from abc import ABC, abstractmethod
from typing import Iterable, List


class Configuration(ABC):
    """
    Abstract base class for every puzzle state the solver can search.

    Subclasses must be immutable and compare by value: two configurations
    describing the same puzzle state must be equal and hash the same, so
    they collapse to one entry in the solver's predecessor map.

    Subclasses implement is_solution() and successors(); neighbors() is
    derived from successors() and removes duplicates.
    """

    @abstractmethod
    def is_solution(self) -> bool:
        """
        Check whether this configuration solves the puzzle.

        Returns:
            True if this state is a goal state
        """
        pass

    @abstractmethod
    def successors(self) -> Iterable["Configuration"]:
        """
        Generate the states reachable by one atomic move.

        Order matters: the solver expands successors in the order they are
        produced, which decides which shortest path is returned.

        Returns:
            Iterable of candidate configurations (may contain duplicates)
        """
        pass

    def neighbors(self) -> List["Configuration"]:
        """
        Get the distinct states reachable by one atomic move.

        Returns:
            List of configurations in generation order, duplicates removed
        """
        return list(dict.fromkeys(self.successors()))
