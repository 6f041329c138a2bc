"""
GERG-2008 equation of state (AGA8 Part 2).
"""

from .gerg import Gerg
from ._lib_gerg_engine import GERG_MODEL, GergReduction
