"""
AGA8 Part 1 (2017) DETAIL equation of state.
"""

from .detail import Detail
from ._lib_detail_engine import DETAIL_MODEL, DetailReduction
