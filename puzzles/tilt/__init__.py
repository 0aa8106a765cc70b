"""
Tilt Package - Sliding disk puzzle.
"""

from .config import TiltConfig
from .model import TiltModel
from .ptui import TiltPTUI

__all__ = ["TiltConfig", "TiltModel", "TiltPTUI"]
