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
from typing import Tuple

def convert_to_numpy(input_data) -> Tuple[np.ndarray, bool]:
    # Convert input data to a 1D float numpy array, flagging whether more than a scalar was passed
    is_list = not np.isscalar(input_data)
    arr = np.atleast_1d(np.asarray(input_data, dtype=float))
    if arr.ndim > 1:
        raise ValueError("Only scalar or 1D inputs are supported")
    return arr, is_list

def process_output(output_data: np.ndarray, is_list: bool):
    # Return a float for scalar inputs, otherwise the numpy array
    if not is_list and output_data.size == 1:
        return float(output_data[0])
    return output_data

def check_2_inputs(x: np.ndarray, y: np.ndarray) -> Tuple[np.ndarray, np.ndarray]:
    """ Broadcast two 1D arrays against each other. Either may be length 1, otherwise lengths must match"""
    if len(x) == len(y):
        return x, y
    if len(x) == 1:
        return np.full(len(y), x[0]), y
    if len(y) == 1:
        return x, np.full(len(x), y[0])
    raise ValueError(f"Input lengths do not match ({len(x)} vs {len(y)})")

# =============================================================================
# Unit Conversions
# =============================================================================
def parse_temperature(value: npt.ArrayLike, unit: str) -> npt.ArrayLike:
    """
    Convert temperature to Kelvin.

    Args:
        value: Temperature value
        unit: Unit string ('K', 'C', 'F', 'R', 'degC', 'degF', 'celsius', 'fahrenheit', 'kelvin', 'rankine')

    Returns:
        Temperature in Kelvin
    """
    unit_lower = unit.lower().strip()
    if unit_lower in ('k', 'kelvin'):
        return value
    elif unit_lower in ('c', 'degc', 'celsius'):
        return value + 273.15
    elif unit_lower in ('f', 'degf', 'fahrenheit'):
        return (value - 32) * 5 / 9 + 273.15
    elif unit_lower in ('r', 'degr', 'rankine'):
        return value * 5 / 9
    else:
        raise ValueError(f"Unknown temperature unit: {unit}. Use 'K', 'C', 'F' or 'R'")

def parse_pressure(value: npt.ArrayLike, unit: str) -> npt.ArrayLike:
    """
    Convert pressure to kPa.

    Args:
        value: Pressure value
        unit: Unit string ('kPa', 'Pa', 'MPa', 'bar', 'bara', 'psia', 'psi')

    Returns:
        Pressure in kPa
    """
    unit_lower = unit.lower().strip()
    if unit_lower == 'kpa':
        return value
    elif unit_lower in ('pa', 'pascal'):
        return value / 1e3
    elif unit_lower == 'mpa':
        return value * 1e3
    elif unit_lower in ('bar', 'bara'):
        return value * 100
    elif unit_lower in ('psia', 'psi'):
        return value * 6.894757
    else:
        raise ValueError(f"Unknown pressure unit: {unit}. Use 'kPa', 'Pa', 'MPa', 'bar' or 'psia'")
