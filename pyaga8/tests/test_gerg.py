#!/usr/bin/env python3
"""
Validation tests for the GERG-2008 equation of state.
Reference values are the published GERG-2008 (AGA8 Part 2) example output at 400 K and 50 MPa,
plus density and pressure checks on a lean gas at 18 degC.
Run with: python3 -m pytest pyaga8/tests/ -v
Or standalone: python3 pyaga8/tests/test_gerg.py
"""

import sys
import os

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyaga8.composition import Composition, CompositionEmpty
from pyaga8.core import EquationOfState, PreconditionViolation
from pyaga8.gerg import Gerg, GergReduction
from pyaga8.gerg._lib_gerg_engine import reducing_parameters

RTOL = 1e-5

COMP_FULL = Composition(methane=0.77824, nitrogen=0.02, carbon_dioxide=0.06, ethane=0.08, propane=0.03,
                        isobutane=0.0015, n_butane=0.003, isopentane=0.0005, n_pentane=0.00165,
                        hexane=0.00215, heptane=0.00088, octane=0.00024, nonane=0.00015, decane=0.00009,
                        hydrogen=0.004, oxygen=0.005, carbon_monoxide=0.002, water=0.0001,
                        hydrogen_sulfide=0.0025, helium=0.007, argon=0.001)

COMP_PARTIAL = Composition(methane=0.965, nitrogen=0.003, carbon_dioxide=0.006, ethane=0.018, propane=0.0045,
                           isobutane=0.001, n_butane=0.001, isopentane=0.0005, n_pentane=0.0003, hexane=0.0007)

AIR = Composition(nitrogen=0.78, oxygen=0.21, argon=0.009, carbon_dioxide=0.0004, water=0.0006)

REFERENCE = {
    'mm': 20.5427445016,
    'd': 12.79828626082062,
    'p': 50000.0,
    'z': 1.174690666383717,
    'dp_dd': 7000.694030193327,
    'd2p_dd2': 1129.526655214841,
    'dp_dt': 235.9832292593096,
    'u': -2746.49290121253,
    'h': 1160.280160510973,
    's': -38.57590392409089,
    'cv': 39.02948218156372,
    'cp': 58.45522051000366,
    'w': 714.4248840596024,
    'g': 16590.64173014733,
    'jt': 7.155629581480913e-05,
    'kappa': 2.683820255058032,
}

def rel_err(a, b):
    return abs(a - b) / abs(b)

def test_reference_point():
    """Full property set at 400 K, 50000 kPa matches the published example"""
    eos = Gerg(COMP_FULL, p=50000.0, t=400.0)
    d = eos.compute_density()
    assert abs(d - REFERENCE['d']) < 1e-3, f"d={d}"
    props = eos.compute_properties()
    for key, ref in REFERENCE.items():
        value = getattr(props, key)
        assert rel_err(value, ref) < RTOL, f"{key}={value}, expected {ref}"

def test_lean_gas_density():
    """Lean gas at 18 degC and 14601.325 kPa"""
    eos = Gerg(COMP_PARTIAL, p=14601.325, t=291.15)
    d = eos.compute_density()
    assert rel_err(d, 7.730483295277388) < RTOL, f"d={d}"
    assert abs(eos.molar_mass() - 16.803030286) < 1e-8

def test_pressure_at_density():
    """Pressure from a known density and temperature"""
    eos = Gerg(COMP_FULL)
    eos.set_density(7.558334, t=291.15)
    p = eos.pressure()
    assert rel_err(p, 13050.037472144) < RTOL, f"p={p}"

def test_air_molar_mass():
    """Air molar mass from the GERG-2008 table"""
    eos = Gerg(AIR)
    assert abs(eos.molar_mass() - 28.958) < 1e-3

def test_interface():
    """Gerg satisfies the EquationOfState capability interface"""
    assert isinstance(Gerg(), EquationOfState)

def test_pure_component_reducing_point():
    """For a pure fluid the reducing point is its critical point"""
    eos = Gerg(Composition(methane=1.0))
    rho_r, t_r = eos.reducing_parameters()
    assert abs(rho_r - 10.139342719) < 1e-9
    assert abs(t_r - 190.564) < 1e-9
    rho_cx, t_cx = eos.pseudo_critical()
    assert abs(rho_cx - rho_r) < 1e-9 and abs(t_cx - t_r) < 1e-9

def test_trace_components_skipped():
    """Fractions at or below 1e-15 do not change the reducing functions"""
    x = Composition(methane=0.9, ethane=0.1).to_array()
    y = x.copy()
    y[5] = 1e-16
    assert reducing_parameters(x) == reducing_parameters(y)

def test_reduction():
    """Reduction maps density and temperature onto delta and tau"""
    red = Gerg(COMP_FULL).reduction()
    assert isinstance(red, GergReduction)
    delta, tau = red.reduced(red.rho_r, red.t_r)
    assert abs(delta - 1.0) < 1e-14 and abs(tau - 1.0) < 1e-14

def test_pseudo_critical():
    """Pseudo-critical point lies within the component critical ranges"""
    rho_cx, t_cx = Gerg(COMP_FULL).pseudo_critical()
    assert 8.0 < rho_cx < 11.0
    assert 150.0 < t_cx < 260.0

def test_dense_start_liquid():
    """Dense start on a propane-rich mixture at low temperature returns the liquid root"""
    comp = Composition(propane=0.9, n_butane=0.1)
    eos = Gerg(comp, p=2000.0, t=250.0)
    d_liq = eos.compute_density(dense_start=True)
    assert d_liq > 9.0, f"d={d_liq}"
    assert rel_err(eos.pressure(), 2000.0) < 1e-8

def test_phase_check_passes_gas():
    """Single phase gas passes the phase check"""
    eos = Gerg(COMP_FULL, p=5000.0, t=300.0)
    d = eos.compute_density(check_phase=True)
    assert d > 0

def test_empty_composition():
    """Empty composition is rejected"""
    try:
        Gerg(Composition())
        assert False, "Should have raised CompositionEmpty"
    except CompositionEmpty:
        pass

def test_properties_require_density():
    """Properties before a density raise PreconditionViolation"""
    eos = Gerg(COMP_FULL, p=5000.0, t=300.0)
    try:
        eos.compute_properties()
        assert False, "Should have raised PreconditionViolation"
    except PreconditionViolation:
        pass

def test_density_increases_with_pressure():
    """Density is monotonic in pressure along an isotherm"""
    eos = Gerg(COMP_FULL)
    densities = []
    for p in [100, 1000, 5000, 10000, 20000, 50000]:
        eos.set_state(p, 350.0)
        densities.append(eos.compute_density())
    assert all(b > a for a, b in zip(densities, densities[1:]))

def test_compute_density_repeatable():
    """Solving twice at the same state gives the same density"""
    eos = Gerg(COMP_FULL, p=50000.0, t=400.0)
    assert eos.compute_density() == eos.compute_density()

def test_state_assignment():
    """Assigning t discards the density, the new state is solved on the next call"""
    eos = Gerg(COMP_FULL, p=50000.0, t=300.0)
    eos.compute_density()
    eos.t = 400.0
    assert eos.d is None
    d = eos.compute_density()
    assert abs(d - REFERENCE['d']) < 1e-3, f"d={d}"
    eos.compute_properties()
    assert eos.p == 50000.0 and rel_err(eos.z, REFERENCE['z']) < RTOL

def test_methane_with_traces():
    """0.999 methane with trace components stays close to pure methane"""
    pure = Gerg({'CH4': 1.0}, p=5000.0, t=300.0).compute_density()
    comp = Composition(methane=0.999, nitrogen=0.0002, carbon_dioxide=0.0002, ethane=0.0002,
                       propane=0.0002, hydrogen=0.0002)
    d = Gerg(comp, p=5000.0, t=300.0).compute_density()
    assert d != pure
    assert rel_err(d, pure) < 2e-3, f"d={d}, pure={pure}"

def test_methods_agree():
    """DETAIL and GERG-2008 agree closely inside the natural gas range"""
    from pyaga8.detail import Detail
    for p, t in [(1000.0, 280.0), (10000.0, 300.0), (30000.0, 350.0)]:
        g = Gerg(COMP_PARTIAL, p=p, t=t)
        d = Detail(COMP_PARTIAL, p=p, t=t)
        assert rel_err(g.compute_density(), d.compute_density()) < 5e-3

if __name__ == '__main__':
    print("=" * 70)
    print("GERG-2008 MODULE VALIDATION TESTS")
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
