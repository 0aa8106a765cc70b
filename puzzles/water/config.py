"""
Water Buckets Configuration - Measuring an amount with fixed-size buckets.
"""

from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

from puzzles.solver import Configuration


@dataclass(frozen=True)
class WaterConfig(Configuration):
    """
    Immutable bucket state.

    Equality compares every field, including every bucket's contents.

    Attributes:
        amount: Amount of water to measure
        capacities: Size of each bucket
        contents: Water currently in each bucket
    """
    amount: int
    capacities: Tuple[int, ...]
    contents: Tuple[int, ...]

    @classmethod
    def create(cls, amount: int, capacities: Sequence[int],
               contents: Sequence[int] = ()) -> 'WaterConfig':
        """
        Create a WaterConfig from lists.

        Args:
            amount: Amount of water to measure
            capacities: Size of each bucket
            contents: Starting contents; all buckets empty if omitted

        Returns:
            WaterConfig instance

        Raises:
            ValueError: If contents and capacities differ in length or
                        a bucket holds more than it can
        """
        capacities = tuple(capacities)
        contents = tuple(contents) if contents else (0,) * len(capacities)
        if len(contents) != len(capacities):
            raise ValueError("One starting amount is needed per bucket")
        if any(c < 0 or c > cap for c, cap in zip(contents, capacities)):
            raise ValueError("Bucket contents must be between 0 and its capacity")
        return cls(amount=amount, capacities=capacities, contents=contents)

    def is_solution(self) -> bool:
        """Check if any bucket holds exactly the target amount."""
        return self.amount in self.contents

    def _with(self, contents: List[int]) -> 'WaterConfig':
        return WaterConfig(self.amount, self.capacities, tuple(contents))

    def successors(self) -> Iterator['WaterConfig']:
        """
        Generate moves: the state itself, then per bucket fill, empty, and
        pour into each other bucket starting with the next one.
        """
        yield self

        count = len(self.contents)
        for i in range(count):
            held = self.contents[i]

            if held != self.capacities[i]:
                filled = list(self.contents)
                filled[i] = self.capacities[i]
                yield self._with(filled)

            if held == 0:
                continue

            emptied = list(self.contents)
            emptied[i] = 0
            yield self._with(emptied)

            for offset in range(1, count):
                j = (i + offset) % count
                room = self.capacities[j] - self.contents[j]
                if room == 0:
                    continue
                poured = list(self.contents)
                volume = min(held, room)
                poured[i] -= volume
                poured[j] += volume
                yield self._with(poured)

    def __str__(self) -> str:
        return str(list(self.contents))
