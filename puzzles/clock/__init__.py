"""
Clock puzzle: reach a goal hour on a modular clock.
"""

from .config import ClockConfig

__all__ = ["ClockConfig"]
