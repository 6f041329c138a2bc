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

from pyaga8.classes import class_dic

def validate_methods(names, variables):
    """ Maps method names given as strings onto their Enum members.
        names: List of class_dic keys, e.g. ["eosmethod"]
        variables: List of values, each either a string or already an Enum member
        Returns the single converted value, or the converted list if more than one was passed
    """
    variables = list(variables)
    for m, method in enumerate(names):
        if method not in class_dic:
            raise ValueError(f"Unknown method class: {method}")
        if isinstance(variables[m], str):
            try:
                variables[m] = class_dic[method][variables[m].upper()]
            except KeyError:
                options = [e.name for e in class_dic[method]]
                raise ValueError(f"An incorrect {method} was specified: '{variables[m]}'. Use one of {options}") from None
        elif not isinstance(variables[m], class_dic[method]):
            raise ValueError(f"An incorrect {method} was specified: {variables[m]!r}")
    if len(variables) == 1:
        return variables[0]
    else:
        return variables
