"""
Density solver: inverts p(rho, T) for rho at fixed pressure and temperature.

Newton iteration on ln(v) with ln(p) as the known variable, run as an explicit state machine:

    INITIAL_GUESS -> ITERATING -> CONVERGED
                        |   ^
                        v   |
                    BRANCH_SWITCH -> FAILED

The first branch starts from a warm start density, the ideal gas density, or three times the
pseudo-critical density when a dense start is requested. When a branch leaves the ln(v)
window or spends its iteration budget, the solver restarts from 3.0, 2.5 and 2.0 times the
pseudo-critical density in turn. Inside the mechanically unstable region (dp/drho <= 0 or
p <= 0) ln(v) is nudged towards the side of the pseudo-critical density it sits on.

When every branch fails, a bracketing scan of p(rho) - p with scipy's brentq is tried
before ConvergenceFailure is raised.
"""

import logging
import numpy as np
from scipy.optimize import brentq
from typing import Callable, Optional, Tuple

from pyaga8.classes import solver_state, expansion_order
from pyaga8.core._lib_properties import calc_properties
from pyaga8.constants import (EPSILON, MAX_ITER, BRANCH_ITER_FIRST, BRANCH_ITER, DENSE_FACTORS, TOL_VLOG,
                              TOL_PRES, VLOG_MIN, VLOG_MAX, VLOG_NUDGE, MAX_HALVINGS, BRACKET_POINTS,
                              BRACKET_MAX_FACTOR)

logger = logging.getLogger(__name__)


class DensityError(RuntimeError):
    """Density could not be computed."""


class PressureTooLow(DensityError):
    """Pressure is zero (|p| < 1e-15), so no density can be solved for."""


class ConvergenceFailure(DensityError):
    """ Iteration budget exhausted on every branch, or the converged state failed the phase check.
        Carries the pressure (kPa), temperature (K), iterations spent and the ideal gas density (mol/L)
    """
    def __init__(self, p: float, t: float, iterations: int, ideal_density: float, reason: str = 'iteration failed to converge'):
        self.p = p
        self.t = t
        self.iterations = iterations
        self.ideal_density = ideal_density
        self.reason = reason
        super().__init__(f"Density calculation failed at p={p} kPa, T={t} K after {iterations} iterations ({reason}). "
                         f"Ideal gas density is {ideal_density:.6g} mol/L")


def eos_pressure(model, d: float, t: float, x: np.ndarray, reduction) -> Tuple[float, float]:
    """ Pressure (kPa) and dp/drho (kPa.L/mol) at density d (mol/L) and temperature t (K)"""
    delta, tau = reduction.reduced(d, t)
    ar = model.residual(delta, tau, x, reduction, expansion_order.DENSITY)
    rt = model.r_gas * t
    return d * rt * (1.0 + ar.a01), rt * (1.0 + 2.0 * ar.a01 + ar.a02)


class DensitySolver:
    """ Solves pressure_fn(rho) = p for rho.

        pressure_fn: callable d -> (p, dp/drho), kPa and kPa.L/mol
        r_gas: Gas constant of the method, J/(mol.K)
        t: Temperature (K)
        rho_cx: Pseudo-critical density (mol/L), seeds the dense branches
        phase_check: Optional callable d -> bool, False marks a converged density as not single phase
        bracket: Try the brentq bracketing fallback once every Newton branch has failed

        After solve(), state, iterations and branch record how the solution was reached.
    """
    def __init__(self, pressure_fn: Callable[[float], Tuple[float, float]], r_gas: float, t: float, rho_cx: float,
                 phase_check: Optional[Callable[[float], bool]] = None, bracket: bool = True):
        self.pressure_fn = pressure_fn
        self.r_gas = r_gas
        self.t = t
        self.rho_cx = rho_cx
        self.phase_check = phase_check
        self.bracket = bracket
        self.state = solver_state.INITIAL_GUESS
        self.p = 0.0
        self.plog = 0.0
        self.ideal_density = 0.0
        self.reason = 'iteration failed to converge'
        self.iterations = 0
        self.branch = 0
        self.branch_iterations = 0
        self.budget = BRANCH_ITER_FIRST
        self.vlog = 0.0
        self.d = 0.0

    def solve(self, p: float, initial_density: Optional[float] = None, dense_start: bool = False) -> float:
        """ Returns the density (mol/L) at pressure p (kPa)
            initial_density: Warm start density (mol/L); its absolute value is used
            dense_start: Start from three times the pseudo-critical density instead of the ideal gas density
        """
        if abs(p) < EPSILON:
            raise PressureTooLow(f"Pressure too low to solve for density: {p} kPa")
        self.p = p
        self.ideal_density = p / (self.r_gas * self.t)
        self.iterations = 0
        self.branch = 0
        self.state = solver_state.INITIAL_GUESS
        self.reason = 'iteration failed to converge'
        if p < 0:
            self.reason = 'negative pressure'
            self._raise()
        self.plog = np.log(p)

        while True:
            if self.state == solver_state.INITIAL_GUESS:
                self._initial_guess(initial_density, dense_start)
            elif self.state == solver_state.ITERATING:
                self._iterate()
            elif self.state == solver_state.BRANCH_SWITCH:
                self._switch_branch()
            elif self.state == solver_state.CONVERGED:
                return float(self.d)
            else:
                self._fail()

    # =============================================================================
    # States
    # =============================================================================
    def _initial_guess(self, initial_density, dense_start):
        if initial_density is not None and abs(initial_density) > EPSILON:
            d = abs(initial_density)
        elif dense_start:
            d = DENSE_FACTORS[0] * self.rho_cx
        else:
            d = self.ideal_density
        self._start_branch(d, BRANCH_ITER_FIRST)

    def _start_branch(self, d, budget):
        self.vlog = -np.log(d)
        self.budget = budget
        self.branch_iterations = 0
        self.state = solver_state.ITERATING

    def _iterate(self):
        if self.iterations >= MAX_ITER:
            self.state = solver_state.FAILED
            return
        if not VLOG_MIN <= self.vlog <= VLOG_MAX or self.branch_iterations >= self.budget:
            self.state = solver_state.BRANCH_SWITCH
            return
        self.iterations += 1
        self.branch_iterations += 1
        self.d = np.exp(-self.vlog)
        p2, dp_dd = self.pressure_fn(self.d)

        if not (dp_dd >= EPSILON and p2 >= EPSILON):
            self.vlog += self._nudge()
            return

        if abs(p2 - self.p) < TOL_PRES * abs(self.p):
            self._converged()
            return

        dpdlv = -self.d * dp_dd  # dp/d(ln v)
        vdiff = (np.log(p2) - self.plog) * p2 / dpdlv
        step = -vdiff
        for _ in range(MAX_HALVINGS):
            if VLOG_MIN <= self.vlog + step <= VLOG_MAX:
                break
            step /= 2.0
        self.vlog += step
        if abs(vdiff) < TOL_VLOG:
            self.d = np.exp(-self.vlog)
            self._converged()

    def _nudge(self):
        # Step out of the unstable region, towards gas below the pseudo-critical density and liquid above it
        vinc = -VLOG_NUDGE if self.d > self.rho_cx else VLOG_NUDGE
        if self.iterations > 5:
            vinc /= 2.0
        if 10 < self.iterations < 20:
            vinc /= 5.0
        return vinc

    def _converged(self):
        if self.phase_check is not None and not self.phase_check(self.d):
            self.reason = 'converged state is possibly two-phase or liquid'
            logger.debug("Phase check failed at d=%.8g mol/L, T=%.6g K", self.d, self.t)
            self._raise()
        self.state = solver_state.CONVERGED
        logger.debug("Density converged to %.12g mol/L in %d iterations (branch %d)", self.d, self.iterations, self.branch)

    def _switch_branch(self):
        if self.branch >= len(DENSE_FACTORS):
            self.state = solver_state.FAILED
            return
        factor = DENSE_FACTORS[self.branch]
        self.branch += 1
        logger.debug("Restarting density iteration at %.2f x pseudo-critical density (p=%.6g kPa, T=%.6g K)",
                     factor, self.p, self.t)
        self._start_branch(factor * self.rho_cx, BRANCH_ITER)

    def _fail(self):
        if self.bracket:
            d = self._bracket_root()
            if d is not None:
                self.d = d
                self._converged()
                return
        self._raise()

    def _raise(self):
        self.state = solver_state.FAILED
        logger.debug("Density iteration failed: p=%.6g kPa, T=%.6g K, %d iterations", self.p, self.t, self.iterations)
        raise ConvergenceFailure(self.p, self.t, self.iterations, self.ideal_density, self.reason)

    # =============================================================================
    # Bracketing fallback
    # =============================================================================
    def _bracket_root(self) -> Optional[float]:
        """ Scans p(rho) - p from low to high density and returns the first mechanically stable root, or None"""
        d_lo = min(self.ideal_density, self.rho_cx) * 1e-3
        d_hi = BRACKET_MAX_FACTOR * max(self.rho_cx, self.ideal_density)
        if not (np.isfinite(d_lo) and np.isfinite(d_hi)) or d_lo <= 0 or d_hi <= d_lo:
            return None

        def residual(d):
            return self.pressure_fn(d)[0] - self.p

        grid = np.geomspace(d_lo, d_hi, BRACKET_POINTS)
        f_prev = residual(grid[0])
        for a, b in zip(grid[:-1], grid[1:]):
            f_next = residual(b)
            if np.isfinite(f_prev) and np.isfinite(f_next) and f_prev < 0 <= f_next:
                root = brentq(residual, a, b, xtol=1e-14, rtol=1e-14)
                if self.pressure_fn(root)[1] > 0:
                    logger.debug("Bracketing fallback found d=%.12g mol/L", root)
                    return root
            f_prev = f_next
        return None


def solve_density(model, p: float, t: float, x: np.ndarray, reduction, initial_density: Optional[float] = None,
                  dense_start: bool = False, check_phase: bool = False) -> float:
    """ Density (mol/L) of the mixture x at pressure p (kPa) and temperature t (K)

        model: EosModel of the method
        reduction: Reduction parameters of x for the model
        initial_density: Optional warm start density (mol/L)
        dense_start: Begin from the dense branch (3 x pseudo-critical density)
        check_phase: Reject converged states whose pressure, dp/drho, d2p/dTdrho, Cv, Cp or
                     speed of sound is not positive (possible two-phase or liquid state)
    """
    def pressure_fn(d):
        return eos_pressure(model, d, t, x, reduction)

    phase_check = None
    if check_phase:
        def phase_check(d):
            props = calc_properties(model, d, t, x, reduction)
            return min(props.p, props.dp_dd, props.d2p_dtd, props.cv, props.cp, props.w) > 0

    rho_cx, _ = model.pseudo_critical(x, reduction)
    solver = DensitySolver(pressure_fn, model.r_gas, t, rho_cx, phase_check=phase_check)
    return solver.solve(p, initial_density=initial_density, dense_start=dense_start)
