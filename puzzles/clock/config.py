"""
Clock Configuration - Turning a clock hand one hour at a time.
"""

from dataclasses import dataclass
from typing import List

from puzzles.solver import Configuration


@dataclass(frozen=True)
class ClockConfig(Configuration):
    """
    Immutable clock state.

    Hours run from 1 to hours. Each move turns the hand back or forward
    by one hour, wrapping around the dial.

    Attributes:
        hours: Number of hours on the dial
        current: Hour the hand points at
        goal: Hour the hand must reach
    """
    hours: int
    current: int
    goal: int

    def is_solution(self) -> bool:
        """Check if the hand points at the goal hour."""
        return self.current == self.goal

    def successors(self) -> List["ClockConfig"]:
        """Turn back one hour, then forward one hour."""
        back = self.current - 1 if self.current > 1 else self.hours
        forward = self.current + 1 if self.current < self.hours else 1
        return [
            ClockConfig(self.hours, back, self.goal),
            ClockConfig(self.hours, forward, self.goal),
        ]

    def __str__(self) -> str:
        return f"Hours: {self.hours}, Start: {self.current}, End: {self.goal}"
