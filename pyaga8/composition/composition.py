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

from dataclasses import dataclass, fields, astuple
import numpy as np
import numpy.typing as npt
from typing import Dict, Mapping, Union

from pyaga8.constants import COMPONENTS, FORMULAS, NC, COMP_EMPTY_TOL, COMP_SUM_TOL


class CompositionError(ValueError):
    """Composition cannot be used for a calculation."""


class CompositionEmpty(CompositionError):
    """All mole fractions are zero."""


class CompositionBadSum(CompositionError):
    """Mole fractions do not sum to 1.0."""


_ALIASES = {name: i for i, name in enumerate(COMPONENTS)}
_ALIASES.update({formula.lower(): i for i, formula in enumerate(FORMULAS)})


@dataclass(frozen=True)
class Composition:
    """
    Molar composition of the 21 AGA8 / GERG-2008 components, as mole fractions.

    Fields are in the fixed table order. Instances are immutable; use
    normalize() or from_dict() to build a new one.

    Example:
        comp = Composition(methane=0.965, nitrogen=0.003, carbon_dioxide=0.006, ethane=0.018,
                           propane=0.0045, isobutane=0.001, n_butane=0.001, isopentane=0.0005,
                           n_pentane=0.0003, hexane=0.0007)
        comp.check()
    """
    methane: float = 0.0
    nitrogen: float = 0.0
    carbon_dioxide: float = 0.0
    ethane: float = 0.0
    propane: float = 0.0
    isobutane: float = 0.0
    n_butane: float = 0.0
    isopentane: float = 0.0
    n_pentane: float = 0.0
    hexane: float = 0.0
    heptane: float = 0.0
    octane: float = 0.0
    nonane: float = 0.0
    decane: float = 0.0
    hydrogen: float = 0.0
    oxygen: float = 0.0
    carbon_monoxide: float = 0.0
    water: float = 0.0
    hydrogen_sulfide: float = 0.0
    helium: float = 0.0
    argon: float = 0.0

    def sum(self) -> float:
        """Sum of all mole fractions."""
        return float(sum(astuple(self)))

    def normalize(self) -> 'Composition':
        """Returns a new Composition scaled so the fractions sum to 1.0."""
        total = self.sum()
        if abs(total) < COMP_EMPTY_TOL:
            raise CompositionEmpty("Cannot normalize an empty composition")
        return Composition(*[v / total for v in astuple(self)])

    def check(self) -> None:
        """
        Raises a CompositionError subclass if the composition is unusable:
            CompositionEmpty if the sum is ~zero
            CompositionBadSum if the sum differs from 1.0 by more than 1e-5
            CompositionError for negative or non-finite fractions
        """
        values = np.array(astuple(self), dtype=float)
        if not np.all(np.isfinite(values)):
            raise CompositionError("Composition contains non-finite mole fractions")
        if np.any(values < 0):
            bad = [f.name for f, v in zip(fields(self), values) if v < 0]
            raise CompositionError(f"Negative mole fraction for {', '.join(bad)}")
        total = values.sum()
        if abs(total) < COMP_EMPTY_TOL:
            raise CompositionEmpty("Composition is empty")
        if abs(total - 1.0) > COMP_SUM_TOL:
            raise CompositionBadSum(f"Mole fractions sum to {total:.8f}, not 1.0")

    def to_array(self) -> np.ndarray:
        """Mole fractions as a length 21 numpy array in table order."""
        return np.array(astuple(self), dtype=float)

    def as_dict(self) -> Dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    @classmethod
    def from_array(cls, x: npt.ArrayLike) -> 'Composition':
        """Build from a sequence of 21 mole fractions in table order."""
        x = np.asarray(x, dtype=float)
        if x.shape != (NC,):
            raise CompositionError(f"Expected {NC} mole fractions, got shape {x.shape}")
        return cls(*[float(v) for v in x])

    @classmethod
    def from_dict(cls, fractions: Mapping[str, float]) -> 'Composition':
        """
        Build from a mapping of component name to mole fraction. Keys may be
        field names ('n_butane') or formulas ('nC4H10', 'CO2'), case-insensitive.
        Components not given are zero.
        """
        x = np.zeros(NC)
        for key, value in fractions.items():
            idx = _ALIASES.get(key.lower().strip())
            if idx is None:
                raise CompositionError(f"Unknown component: {key}. Supported: {list(COMPONENTS)}")
            x[idx] += value
        return cls.from_array(x)


def as_composition(composition: Union[Composition, Mapping[str, float], npt.ArrayLike]) -> Composition:
    """ Coerce a Composition, dict of fractions or 21 element sequence into a Composition"""
    if isinstance(composition, Composition):
        return composition
    if isinstance(composition, Mapping):
        return Composition.from_dict(composition)
    return Composition.from_array(composition)
