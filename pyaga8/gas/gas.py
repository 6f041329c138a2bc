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

import numpy as np
import numpy.typing as npt
from typing import Union

import pandas as pd
from tabulate import tabulate
from pyaga8.classes import eos_method
from pyaga8.core import PropertySet, EquationOfState
from pyaga8.detail import Detail
from pyaga8.gerg import Gerg
from pyaga8.shared_fns import convert_to_numpy, process_output, check_2_inputs, parse_pressure, parse_temperature
from pyaga8.validate import validate_methods

_EOS_CLASSES = {
    eos_method.DETAIL: Detail,
    eos_method.GERG: Gerg,
}

def gas_eos(method: eos_method = eos_method.DETAIL, composition=None) -> EquationOfState:
    """ Returns an equation of state instance
        method: 'DETAIL' AGA8 Part 1 (2017) DETAIL equation of state (default)
                'GERG' GERG-2008 equation of state (AGA8 Part 2)
        composition: Optional composition to set on the instance. Composition, dict of
                     fractions keyed by component name or formula, or 21 element sequence
    """
    method = validate_methods(["eosmethod"], [method])
    return _EOS_CLASSES[method](composition)

def gas_mw(composition, method: eos_method = eos_method.DETAIL) -> float:
    """ Returns molar mass of the mixture (g/mol)
        composition: Composition, dict of fractions or 21 element sequence
        method: 'DETAIL' or 'GERG', each carries its own molar mass table
    """
    return gas_eos(method, composition).molar_mass()

def _state_points(p, t, punits, tunits):
    p, p_list = convert_to_numpy(p)
    t, t_list = convert_to_numpy(t)
    p, t = check_2_inputs(parse_pressure(p, punits), parse_temperature(t, tunits))
    return p, t, p_list or t_list

def gas_density(
    p: npt.ArrayLike,
    t: npt.ArrayLike,
    composition,
    method: eos_method = eos_method.DETAIL,
    punits: str = 'kPa',
    tunits: str = 'K',
    dense_start: bool = False,
    check_phase: bool = False,
) -> Union[float, np.ndarray]:
    """ Returns molar density (mol/L)
          p: Pressure, scalar, list or array
          t: Temperature, scalar, list or array. Either p or t may be a scalar, otherwise lengths must match
          composition: Composition, dict of fractions or 21 element sequence
          method: 'DETAIL' (default) or 'GERG'
          punits: Pressure units, 'kPa' (default), 'Pa', 'MPa', 'bar' or 'psia'
          tunits: Temperature units, 'K' (default), 'C', 'F' or 'R'
          dense_start: Begin the density search from the liquid-like side
          check_phase: Raise ConvergenceFailure for states that look two phase or liquid
    """
    p, t, is_list = _state_points(p, t, punits, tunits)
    eos = gas_eos(method, composition)
    d = np.zeros(len(p))
    for i in range(len(p)):
        eos.set_state(p[i], t[i])
        d[i] = eos.compute_density(dense_start=dense_start, check_phase=check_phase)
    return process_output(d, is_list)

def gas_z(
    p: npt.ArrayLike,
    t: npt.ArrayLike,
    composition,
    method: eos_method = eos_method.DETAIL,
    punits: str = 'kPa',
    tunits: str = 'K',
) -> Union[float, np.ndarray]:
    """ Returns compressibility factor Z
          p: Pressure, scalar, list or array
          t: Temperature, scalar, list or array
          composition: Composition, dict of fractions or 21 element sequence
          method: 'DETAIL' (default) or 'GERG'
          punits: Pressure units, 'kPa' (default), 'Pa', 'MPa', 'bar' or 'psia'
          tunits: Temperature units, 'K' (default), 'C', 'F' or 'R'
    """
    p, t, is_list = _state_points(p, t, punits, tunits)
    eos = gas_eos(method, composition)
    zee = np.zeros(len(p))
    for i in range(len(p)):
        eos.set_state(p[i], t[i])
        eos.compute_density()
        zee[i] = eos.compute_properties().z
    return process_output(zee, is_list)

def gas_pressure(
    d: npt.ArrayLike,
    t: npt.ArrayLike,
    composition,
    method: eos_method = eos_method.DETAIL,
    tunits: str = 'K',
) -> Union[float, np.ndarray]:
    """ Returns pressure (kPa) at a known molar density
          d: Molar density (mol/L), scalar, list or array
          t: Temperature, scalar, list or array
          composition: Composition, dict of fractions or 21 element sequence
          method: 'DETAIL' (default) or 'GERG'
          tunits: Temperature units, 'K' (default), 'C', 'F' or 'R'
    """
    d, d_list = convert_to_numpy(d)
    t, t_list = convert_to_numpy(t)
    d, t = check_2_inputs(d, parse_temperature(t, tunits))
    eos = gas_eos(method, composition)
    p = np.zeros(len(d))
    for i in range(len(d)):
        eos.set_density(d[i], t[i])
        p[i] = eos.pressure()
    return process_output(p, d_list or t_list)

def gas_props(
    p: npt.ArrayLike,
    t: npt.ArrayLike,
    composition,
    method: eos_method = eos_method.DETAIL,
    punits: str = 'kPa',
    tunits: str = 'K',
) -> pd.DataFrame:
    """ Returns a DataFrame with the full property set, one row per state point.
        Columns are labelled with units, plus the input temperature (K).
          p: Pressure, scalar, list or array
          t: Temperature, scalar, list or array
          composition: Composition, dict of fractions or 21 element sequence
          method: 'DETAIL' (default) or 'GERG'
          punits: Pressure units, 'kPa' (default), 'Pa', 'MPa', 'bar' or 'psia'
          tunits: Temperature units, 'K' (default), 'C', 'F' or 'R'
    """
    p, t, _ = _state_points(p, t, punits, tunits)
    eos = gas_eos(method, composition)
    rows = []
    for i in range(len(p)):
        eos.set_state(p[i], t[i])
        eos.compute_density()
        rows.append(eos.compute_properties().to_frame())
    df = pd.concat(rows, ignore_index=True)
    df.insert(0, 'T (K)', t)
    return df

def gas_props_table(
    p: npt.ArrayLike,
    t: npt.ArrayLike,
    composition,
    method: eos_method = eos_method.DETAIL,
    punits: str = 'kPa',
    tunits: str = 'K',
) -> str:
    """ Returns gas_props() formatted as a text table"""
    df = gas_props(p, t, composition, method, punits, tunits)
    return tabulate(df, headers='keys', showindex=False, floatfmt='.6g')

def _properties_at(eos, p: float, t: float) -> PropertySet:
    eos.set_state(p, t)
    eos.compute_density()
    return eos.compute_properties()

def aga8_2017(composition, p: float, t: float) -> PropertySet:
    """ Full AGA8 DETAIL property set at pressure p (kPa) and temperature t (K)"""
    return _properties_at(Detail(composition), p, t)

def gerg_2008(composition, p: float, t: float) -> PropertySet:
    """ Full GERG-2008 property set at pressure p (kPa) and temperature t (K)"""
    return _properties_at(Gerg(composition), p, t)
