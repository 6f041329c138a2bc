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

from pyaga8.classes import eos_method
from pyaga8.core.core import EosFacade
from pyaga8.detail._lib_detail_engine import DETAIL_MODEL, DetailReduction


class Detail(EosFacade):
    """
    AGA8 Part 1 (2017) DETAIL equation of state for 21 component natural gas mixtures.
    Valid for the gas phase from roughly 90 to 450 K and up to 70 MPa.

    Units: pressure kPa, temperature K, density mol/L.

    Example:
        eos = Detail()
        eos.set_composition(Composition(methane=0.77824, nitrogen=0.02, carbon_dioxide=0.06, ...))
        eos.set_state(p=50000, t=400)
        eos.compute_density()
        >>> 12.807924036488
        props = eos.compute_properties()
        props.z
        >>> 1.17380136414733

    composition: Optional Composition, dict of fractions or 21 element sequence
    p: Optional pressure (kPa)
    t: Optional temperature (K)
    """
    model = DETAIL_MODEL
    method = eos_method.DETAIL

    def reduction(self) -> DetailReduction:
        """ Mixture size, energy and orientation parameters with the composition dependent term coefficients"""
        return self._calc.reduction()
