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

import logging
from dataclasses import dataclass, fields
import numpy as np
from typing import Callable, Optional, Tuple, Protocol, runtime_checkable

from pyaga8.composition import Composition, as_composition
from pyaga8.core._lib_density_solver import solve_density, eos_pressure
from pyaga8.core._lib_properties import PropertySet, calc_properties

logger = logging.getLogger(__name__)


class PreconditionViolation(RuntimeError):
    """ A calculation was requested without the inputs it depends on, e.g. properties before a
        density has been computed for the current composition and state, or a negative density.
    """


@dataclass(frozen=True)
class EosModel:
    """ Functions binding one equation of state to the shared solver and property calculator

        name: Method name
        r_gas: Gas constant, J/(mol.K)
        reduce: x -> reduction parameters (object with rho_r, t_r and reduced(d, t))
        residual: (delta, tau, x, reduction, order) -> ExpansionState
        ideal: (d, t, x) -> IdealState
        virial: (tau, x, reduction) -> (B L/mol, C (L/mol)^2)
        molar_mass: x -> g/mol
        pseudo_critical: (x, reduction) -> (rho_cx mol/L, T_cx K)
    """
    name: str
    r_gas: float
    reduce: Callable
    residual: Callable
    ideal: Callable
    virial: Callable
    molar_mass: Callable
    pseudo_critical: Callable


@runtime_checkable
class EquationOfState(Protocol):
    """ Capability interface shared by the Detail and Gerg facades"""
    p: Optional[float]
    t: Optional[float]
    d: Optional[float]

    def set_composition(self, composition, check: bool = True) -> None: ...

    def set_state(self, p: float, t: float) -> None: ...

    def compute_density(self, initial_density: Optional[float] = None, dense_start: bool = False,
                        check_phase: bool = False) -> float: ...

    def compute_properties(self) -> PropertySet: ...

    def set_density(self, d: float, t: Optional[float] = None) -> None: ...

    def pressure(self) -> float: ...

    def molar_mass(self) -> float: ...


class EosCalculation:
    """ Composition, state point and cached results of one equation of state instance.
        Owned by a facade; density is only valid for the composition and state it was computed at.
    """
    def __init__(self, model: EosModel):
        self.model = model
        self.composition: Optional[Composition] = None
        self.x: Optional[np.ndarray] = None
        self.p: Optional[float] = None
        self.t: Optional[float] = None
        self.d: Optional[float] = None
        self.properties: Optional[PropertySet] = None
        self._reduction = None

    def set_composition(self, composition, check: bool = True) -> None:
        comp = as_composition(composition)
        if check:
            comp.check()
        self.composition = comp
        self.x = comp.to_array()
        self._reduction = None
        self.d = None
        self.properties = None
        logger.debug("%s composition reset, sum of fractions %.10f", self.model.name, comp.sum())

    def set_state(self, p: float, t: float) -> None:
        self.p = float(p)
        self.t = float(t)
        self.invalidate()

    def invalidate(self) -> None:
        """ Discards the stored density and properties"""
        self.d = None
        self.properties = None

    def reduction(self):
        self._require_composition()
        if self._reduction is None:
            self._reduction = self.model.reduce(self.x)
        return self._reduction

    def compute_density(self, initial_density: Optional[float] = None, dense_start: bool = False,
                        check_phase: bool = False) -> float:
        self._require_composition()
        if self.p is None or self.t is None:
            raise PreconditionViolation("State point not set, call set_state(p, t) first")
        self.d = solve_density(self.model, self.p, self.t, self.x, self.reduction(), initial_density=initial_density,
                               dense_start=dense_start, check_phase=check_phase)
        self.properties = None
        return self.d

    def set_density(self, d: float, t: Optional[float] = None) -> None:
        self._require_composition()
        if d < 0 or not np.isfinite(d):
            raise PreconditionViolation(f"Density must be finite and non-negative, got {d}")
        if t is not None:
            self.t = float(t)
        if self.t is None:
            raise PreconditionViolation("Temperature not set")
        self.d = float(d)
        self.properties = None

    def pressure(self) -> float:
        self._require_density()
        p, _ = eos_pressure(self.model, self.d, self.t, self.x, self.reduction())
        return float(p)

    def compute_properties(self) -> PropertySet:
        self._require_density()
        self.properties = calc_properties(self.model, self.d, self.t, self.x, self.reduction())
        return self.properties

    def molar_mass(self) -> float:
        self._require_composition()
        return float(self.model.molar_mass(self.x))

    def virial(self) -> Tuple[float, float]:
        self._require_composition()
        if self.t is None:
            raise PreconditionViolation("Temperature not set")
        _, tau = self.reduction().reduced(0.0, self.t)
        return self.model.virial(tau, self.x, self.reduction())

    def pseudo_critical(self) -> Tuple[float, float]:
        self._require_composition()
        return self.model.pseudo_critical(self.x, self.reduction())

    def _require_composition(self):
        if self.x is None:
            raise PreconditionViolation("Composition not set, call set_composition() first")

    def _require_density(self):
        self._require_composition()
        if self.d is None:
            raise PreconditionViolation("No density for the current composition and state, call compute_density() or set_density() first")


_PUBLISHED_FIELDS = frozenset(f.name for f in fields(PropertySet)) - {"p", "d"}


class EosFacade:
    """ Public interface shared by the Detail and Gerg classes. Subclasses bind an EosModel.

        p, t and d read and write the owned EosCalculation. Assigning p or t discards the stored
        density and properties; assigning d validates it as set_density() does.
        After compute_properties() every PropertySet field other than p and d is also readable as
        an attribute (eos.z, eos.h, eos.w, ...). eos.p stays the state pressure, the pressure
        recomputed at the stored density is eos.properties.p.

        composition: Optional Composition, dict of fractions or 21 element sequence
        p: Optional pressure (kPa)
        t: Optional temperature (K)
    """
    model: EosModel = None
    method = None

    def __init__(self, composition=None, p: Optional[float] = None, t: Optional[float] = None):
        self._calc = EosCalculation(self.model)
        if composition is not None:
            self.set_composition(composition)
        if p is not None and t is not None:
            self.set_state(p, t)

    @property
    def p(self) -> Optional[float]:
        """ Pressure (kPa)"""
        return self._calc.p

    @p.setter
    def p(self, value: Optional[float]) -> None:
        self._calc.p = None if value is None else float(value)
        self._calc.invalidate()

    @property
    def t(self) -> Optional[float]:
        """ Temperature (K)"""
        return self._calc.t

    @t.setter
    def t(self, value: Optional[float]) -> None:
        self._calc.t = None if value is None else float(value)
        self._calc.invalidate()

    @property
    def d(self) -> Optional[float]:
        """ Molar density (mol/L), None until computed or set"""
        return self._calc.d

    @d.setter
    def d(self, value: Optional[float]) -> None:
        if value is None:
            self._calc.invalidate()
        else:
            self._calc.set_density(value)

    @property
    def properties(self) -> Optional[PropertySet]:
        return self._calc.properties

    @property
    def composition(self) -> Optional[Composition]:
        return self._calc.composition

    def __getattr__(self, name):
        # Only reached when normal lookup fails
        if name in _PUBLISHED_FIELDS:
            calc = self.__dict__.get("_calc")
            if calc is not None and calc.properties is not None:
                return getattr(calc.properties, name)
            raise AttributeError(f"'{name}' is not available until compute_properties() has been called")
        raise AttributeError(f"'{type(self).__name__}' object has no attribute '{name}'")

    def set_composition(self, composition, check: bool = True) -> None:
        """ Replaces the composition and clears any stored density.
            check: Raise CompositionError for empty, negative or non-normalized compositions.
                   With check=False such compositions are used as given.
        """
        self._calc.set_composition(composition, check=check)

    def set_state(self, p: float, t: float) -> None:
        """ Sets pressure (kPa) and temperature (K)"""
        self._calc.set_state(p, t)

    def compute_density(self, initial_density: Optional[float] = None, dense_start: bool = False,
                        check_phase: bool = False) -> float:
        """ Solves for density (mol/L) at the current pressure and temperature.

            initial_density: Starting guess (mol/L), ideal gas density if None
            dense_start: Start from the liquid-like side of the pseudo-critical density
            check_phase: Raise ConvergenceFailure when the converged state has a non-positive
                         pressure, dp/dd, d2p/dTdd, Cv, Cp or speed of sound (two phase or liquid)

            Raises ConvergenceFailure if no density reproduces the pressure, PressureTooLow at zero pressure.
        """
        return self._calc.compute_density(initial_density=initial_density, dense_start=dense_start,
                                          check_phase=check_phase)

    def set_density(self, d: float, t: Optional[float] = None) -> None:
        """ Sets density (mol/L), and optionally temperature (K), for evaluations at known density"""
        self._calc.set_density(d, t)

    def pressure(self) -> float:
        """ Pressure (kPa) at the stored density and temperature"""
        return self._calc.pressure()

    def compute_properties(self) -> PropertySet:
        """ Full property set at the stored density and temperature"""
        return self._calc.compute_properties()

    def molar_mass(self) -> float:
        """ Molar mass (g/mol) from the method's molar mass table"""
        return self._calc.molar_mass()

    def reduction(self):
        return self._calc.reduction()

    def pseudo_critical(self) -> Tuple[float, float]:
        """ Pseudo-critical density (mol/L) and temperature (K) from linear mixing rules"""
        return self._calc.pseudo_critical()

    def virial(self) -> Tuple[float, float]:
        """ Second (L/mol) and third ((L/mol)^2) virial coefficients at the stored temperature"""
        return self._calc.virial()
