#!/usr/bin/env python3
"""
Validation tests for the density solver, run against synthetic pressure functions.
Run with: python3 -m pytest pyaga8/tests/ -v
Or standalone: python3 pyaga8/tests/test_solver.py
"""

import sys
import os
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyaga8.classes import solver_state
from pyaga8.constants import MAX_ITER
from pyaga8.core import DensitySolver, ConvergenceFailure, PressureTooLow, DensityError

R = 8.314
T = 150.0
RT = R * T

# van der Waals fluid, three roots at 1000 kPa and 150 K (gas ~0.92, liquid ~15.0 mol/L)
VDW_A = 230.0  # kPa.(L/mol)^2
VDW_B = 0.043  # L/mol

def ideal_gas(d):
    return d * RT, RT

def vdw(d):
    p = RT * d / (1 - VDW_B * d) - VDW_A * d * d
    dp_dd = RT / (1 - VDW_B * d) ** 2 - 2 * VDW_A * d
    return p, dp_dd

def test_ideal_gas():
    """Ideal gas converges to p/RT on the first branch"""
    solver = DensitySolver(ideal_gas, R, T, rho_cx=10.0)
    d = solver.solve(5000.0)
    assert abs(d - 5000.0 / RT) / (5000.0 / RT) < 1e-10
    assert solver.state == solver_state.CONVERGED
    assert solver.branch == 0
    assert solver.iterations <= 3

def test_warm_start():
    """A warm start density is used as the first guess and its sign ignored"""
    solver = DensitySolver(ideal_gas, R, T, rho_cx=10.0)
    d = solver.solve(2000.0, initial_density=-3.0)
    assert abs(d - 2000.0 / RT) / (2000.0 / RT) < 1e-10

def test_vdw_gas_root():
    """Default start finds the vapour root"""
    solver = DensitySolver(vdw, R, T, rho_cx=6.0)
    d = solver.solve(1000.0)
    assert d < 2.0, f"Expected vapour root, got {d}"
    p, dp_dd = vdw(d)
    assert abs(p - 1000.0) / 1000.0 < 1e-8
    assert dp_dd > 0

def test_vdw_dense_root():
    """Dense start finds the liquid root"""
    solver = DensitySolver(vdw, R, T, rho_cx=6.0)
    d = solver.solve(1000.0, dense_start=True)
    assert d > 10.0, f"Expected liquid root, got {d}"
    p, dp_dd = vdw(d)
    assert abs(p - 1000.0) / 1000.0 < 1e-8
    assert dp_dd > 0

def test_zero_pressure():
    """Zero pressure raises PressureTooLow"""
    solver = DensitySolver(ideal_gas, R, T, rho_cx=10.0)
    try:
        solver.solve(0.0)
        assert False, "Should have raised PressureTooLow"
    except PressureTooLow:
        pass

def test_negative_pressure():
    """Negative pressure fails with a reason"""
    solver = DensitySolver(ideal_gas, R, T, rho_cx=10.0)
    try:
        solver.solve(-100.0)
        assert False, "Should have raised ConvergenceFailure"
    except ConvergenceFailure as e:
        assert e.reason == 'negative pressure'
        assert e.p == -100.0

def test_unreachable_pressure():
    """A pressure the fluid can never reach exhausts every branch"""
    def saturating(d):
        return 500.0 * (1.0 - np.exp(-d)), 500.0 * np.exp(-d)

    solver = DensitySolver(saturating, R, T, rho_cx=5.0)
    try:
        solver.solve(1000.0)
        assert False, "Should have raised ConvergenceFailure"
    except ConvergenceFailure as e:
        assert e.iterations <= MAX_ITER
        assert e.t == T
        assert abs(e.ideal_density - 1000.0 / RT) < 1e-12
        assert isinstance(e, DensityError)
    assert solver.state == solver_state.FAILED

def test_bracketing_fallback():
    """When Newton never takes a step, the bracketing scan still finds the root"""
    def flat_derivative(d):
        return d * RT, 1e-16

    solver = DensitySolver(flat_derivative, R, T, rho_cx=10.0)
    d = solver.solve(5000.0)
    assert abs(d - 5000.0 / RT) / (5000.0 / RT) < 1e-10
    assert solver.iterations == MAX_ITER
    assert solver.state == solver_state.CONVERGED

    solver = DensitySolver(flat_derivative, R, T, rho_cx=10.0, bracket=False)
    try:
        solver.solve(5000.0)
        assert False, "Should have raised ConvergenceFailure"
    except ConvergenceFailure:
        pass

def test_phase_check_rejects():
    """A failing phase check turns a converged root into ConvergenceFailure"""
    solver = DensitySolver(ideal_gas, R, T, rho_cx=10.0, phase_check=lambda d: False)
    try:
        solver.solve(5000.0)
        assert False, "Should have raised ConvergenceFailure"
    except ConvergenceFailure as e:
        assert 'two-phase' in e.reason

if __name__ == '__main__':
    print("=" * 70)
    print("DENSITY SOLVER VALIDATION TESTS")
    print("=" * 70)

    tests = [v for k, v in globals().items() if k.startswith('test_')]
    passed = 0
    failed = 0

    for test in tests:
        try:
            test()
            passed += 1
            print(f"  PASS: {test.__name__}")
        except Exception as e:
            failed += 1
            print(f"  FAIL: {test.__name__}: {e}")

    print(f"\n{'=' * 70}")
    print(f"Results: {passed} passed, {failed} failed out of {passed + failed}")
    print("=" * 70)
    sys.exit(1 if failed > 0 else 0)
