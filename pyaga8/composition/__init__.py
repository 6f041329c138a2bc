"""
Molar compositions of the 21 AGA8 / GERG-2008 components.
"""

from .composition import Composition, CompositionError, CompositionEmpty, CompositionBadSum, as_composition
