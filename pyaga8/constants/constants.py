#!/usr/bin/python3
# -*- coding: utf-8 -*-

"""
    pyAGA8 - Natural gas properties from the AGA8 DETAIL and GERG-2008 equations of state
              Copyright (C) 2022, Mark Burgoyne

    This program is free software: you can redistribute it and/or modify
    it under the terms of the GNU General Public License as published by
    the Free Software Foundation, either version 3 of the License, or
    (at your option) any later version.

    This program is distributed in the hope that it will be useful,
    but WITHOUT ANY WARRANTY; without even the implied warranty of
    MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
    GNU General Public License for more details.

    The GNU General Public License can be found in the LICENSE directory,
    and at  <https://www.gnu.org/licenses/>.

          Contact author at mark.w.burgoyne@gmail.com
"""


# Constants
R_DETAIL = 8.31451  # Gas constant used by AGA8 DETAIL, J/(mol.K)
R_GERG = 8.314472  # Gas constant used by GERG-2008, J/(mol.K)
R_IDEAL_REF = 8.31451  # Gas constant the GERG-2004 ideal-gas coefficients were fitted with
T_REF = 298.15  # Ideal gas reference temperature (K)
P_REF = 101.325  # Ideal gas reference pressure (kPa)
EPSILON = 1e-15
NC = 21  # Number of components

# Component order used by every coefficient table and composition vector
COMPONENTS = (
    'methane', 'nitrogen', 'carbon_dioxide', 'ethane', 'propane',
    'isobutane', 'n_butane', 'isopentane', 'n_pentane', 'hexane',
    'heptane', 'octane', 'nonane', 'decane', 'hydrogen',
    'oxygen', 'carbon_monoxide', 'water', 'hydrogen_sulfide', 'helium',
    'argon',
)

# Chemical formula aliases accepted when building compositions from dicts
FORMULAS = (
    'CH4', 'N2', 'CO2', 'C2H6', 'C3H8',
    'iC4H10', 'nC4H10', 'iC5H12', 'nC5H12', 'nC6H14',
    'nC7H16', 'nC8H18', 'nC9H20', 'nC10H22', 'H2',
    'O2', 'CO', 'H2O', 'H2S', 'He',
    'Ar',
)

# Composition checks
COMP_EMPTY_TOL = 1e-10  # |sum| below this is an empty composition
COMP_SUM_TOL = 1e-5  # |sum - 1| above this is a bad sum

# Density solver
MAX_ITER = 50  # Total Newton iterations over all branches
BRANCH_ITER_FIRST = 20  # Iteration budget of the first branch
BRANCH_ITER = 10  # Iteration budget of each dense-branch restart
DENSE_FACTORS = (3.0, 2.5, 2.0)  # Dense-branch guesses, multiples of pseudo-critical density
TOL_VLOG = 1e-7  # Convergence on |d ln(v)|
TOL_PRES = 1e-10  # Convergence on relative pressure residual
VLOG_MIN = -7.0  # ln(v) window, v in L/mol
VLOG_MAX = 100.0
VLOG_NUDGE = 0.1  # ln(v) step taken inside the unstable region
MAX_HALVINGS = 10  # Step halvings before a branch is abandoned
BRACKET_POINTS = 200  # Density grid points scanned by the bracketing fallback
BRACKET_MAX_FACTOR = 4.0  # Upper end of the scan, multiple of pseudo-critical density

JT_IDEAL = 1e20  # Joule-Thomson placeholder at zero density
