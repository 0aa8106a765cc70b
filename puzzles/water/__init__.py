"""
Water buckets puzzle: measure an amount using buckets of fixed sizes.
"""

from .config import WaterConfig

__all__ = ["WaterConfig"]
