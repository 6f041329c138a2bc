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

from enum import Enum

class eos_method(Enum):  # Equation of state
    DETAIL = 0
    GERG = 1

class expansion_order(Enum):  # Derivatives requested from the residual expansion
    DENSITY = 1  # a00, a01, a02 only (density solver)
    FULL = 2  # All first and second derivatives (property calculation)

class solver_state(Enum):  # Density solver states
    INITIAL_GUESS = 0
    ITERATING = 1
    BRANCH_SWITCH = 2
    CONVERGED = 3
    FAILED = 4

class_dic = {
    "eosmethod": eos_method,
}
