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

from typing import Tuple

from pyaga8.classes import eos_method
from pyaga8.core.core import EosFacade
from pyaga8.gerg._lib_gerg_engine import GERG_MODEL, GergReduction


class Gerg(EosFacade):
    """
    GERG-2008 equation of state (AGA8 Part 2) for 21 component natural gas mixtures.
    Covers gas, liquid and supercritical states from 90 to 450 K and up to 35 MPa, with
    extended validity beyond that range.

    Units: pressure kPa, temperature K, density mol/L.

    Example:
        eos = Gerg(composition, p=50000, t=400)
        eos.compute_density()
        >>> 12.79828626082062
        eos.compute_properties().z
        >>> 1.174690666383717

    composition: Optional Composition, dict of fractions or 21 element sequence
    p: Optional pressure (kPa)
    t: Optional temperature (K)
    """
    model = GERG_MODEL
    method = eos_method.GERG

    def reduction(self) -> GergReduction:
        return self._calc.reduction()

    def reducing_parameters(self) -> Tuple[float, float]:
        """ Mixture reducing density (mol/L) and temperature (K)"""
        red = self._calc.reduction()
        return red.rho_r, red.t_r
