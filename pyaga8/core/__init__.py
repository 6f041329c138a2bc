"""
Method independent machinery: residual term summation, ideal gas Helmholtz energy,
density solver and property calculator.
"""

from .core import EosModel, EosCalculation, EosFacade, EquationOfState, PreconditionViolation
from ._lib_expansion import ExpansionState, TermBlock
from ._lib_ideal_gas import IdealState
from ._lib_properties import PropertySet, calc_properties
from ._lib_density_solver import DensitySolver, DensityError, ConvergenceFailure, PressureTooLow, solve_density
