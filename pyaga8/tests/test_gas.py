#!/usr/bin/env python3
"""
Validation tests for gas module entry points.
Run with: python3 -m pytest pyaga8/tests/ -v
Or standalone: python3 pyaga8/tests/test_gas.py
"""

import sys
import os
import numpy as np
import pandas as pd

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
import pyaga8.gas as gas
from pyaga8.classes import eos_method
from pyaga8.core import PropertySet
from pyaga8.detail import Detail
from pyaga8.gerg import Gerg

RTOL = 1e-9

LEAN = {'CH4': 0.965, 'N2': 0.003, 'CO2': 0.006, 'C2H6': 0.018, 'C3H8': 0.0045, 'iC4H10': 0.001,
        'nC4H10': 0.001, 'iC5H12': 0.0005, 'nC5H12': 0.0003, 'nC6H14': 0.0007}

def test_gas_eos_methods():
    """gas_eos builds the requested method from strings or enums"""
    assert isinstance(gas.gas_eos(), Detail)
    assert isinstance(gas.gas_eos('gerg'), Gerg)
    assert isinstance(gas.gas_eos(eos_method.GERG), Gerg)

def test_gas_eos_invalid_method():
    """Unknown method names raise ValueError"""
    try:
        gas.gas_eos('PENG_ROBINSON')
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

def test_gas_mw():
    """Molar mass per method"""
    air = {'N2': 0.78, 'O2': 0.21, 'Ar': 0.009, 'CO2': 0.0004, 'H2O': 0.0006}
    assert abs(gas.gas_mw(air, method='GERG') - 28.958) < 1e-3
    assert abs(gas.gas_mw(LEAN, method='GERG') - 16.803030286) < 1e-8

def test_gas_density_scalar():
    """Scalar inputs return a float equal to the facade result"""
    d = gas.gas_density(p=10000, t=300, composition=LEAN)
    assert isinstance(d, float), f"Expected float, got {type(d)}"
    eos = Detail(LEAN, p=10000, t=300)
    assert abs(d - eos.compute_density()) < 1e-12

def test_gas_density_array():
    """Array pressures return an array, one density per pressure"""
    pressures = np.array([500, 2000, 8000, 20000])
    d = gas.gas_density(p=pressures, t=300, composition=LEAN, method='GERG')
    assert isinstance(d, np.ndarray), f"Expected ndarray, got {type(d)}"
    assert len(d) == len(pressures)
    assert np.all(np.diff(d) > 0)

def test_gas_density_units():
    """Pressure and temperature units are converted before solving"""
    d_si = gas.gas_density(p=5000, t=288.15, composition=LEAN)
    d_bar = gas.gas_density(p=50, t=15, composition=LEAN, punits='bar', tunits='C')
    d_mpa = gas.gas_density(p=5, t=59, composition=LEAN, punits='MPa', tunits='F')
    assert abs(d_bar - d_si) / d_si < RTOL
    assert abs(d_mpa - d_si) / d_si < RTOL

def test_gas_density_bad_units():
    """Unknown units raise ValueError"""
    try:
        gas.gas_density(p=50, t=300, composition=LEAN, punits='atm')
        assert False, "Should have raised ValueError"
    except ValueError:
        pass

def test_gas_z():
    """Z factor list input, bounded and consistent with density"""
    z = gas.gas_z(p=[1000, 10000], t=[280, 320], composition=LEAN)
    assert isinstance(z, np.ndarray)
    assert all(0.7 < zi < 1.0 for zi in z), f"Z values outside physical bounds: {z}"
    d = gas.gas_density(p=10000, t=320, composition=LEAN)
    assert abs(z[1] - 10000 / (d * 8.31451 * 320)) / z[1] < RTOL

def test_gas_pressure_round_trip():
    """Pressure at the solved density reproduces the input pressure"""
    d = gas.gas_density(p=12000, t=310, composition=LEAN, method='GERG')
    p = gas.gas_pressure(d=d, t=310, composition=LEAN, method='GERG')
    assert abs(p - 12000) / 12000 < 1e-8

def test_gas_props_frame():
    """gas_props returns one DataFrame row per state point"""
    df = gas.gas_props(p=[1000, 5000, 9000], t=300, composition=LEAN)
    assert isinstance(df, pd.DataFrame)
    assert len(df) == 3
    assert 'T (K)' in df.columns and 'z (-)' in df.columns
    assert np.allclose(df['p (kPa)'], [1000, 5000, 9000], rtol=1e-8)

def test_gas_props_table():
    """gas_props_table renders a text table"""
    text = gas.gas_props_table(p=[1000, 5000], t=300, composition=LEAN, method='GERG')
    assert isinstance(text, str)
    assert 'w (m/s)' in text

def test_one_shot_calls():
    """aga8_2017 and gerg_2008 return a full PropertySet"""
    props = gas.aga8_2017(LEAN, 14601.325, 291.15)
    assert isinstance(props, PropertySet)
    assert abs(props.p - 14601.325) / 14601.325 < 1e-8
    props = gas.gerg_2008(LEAN, 14601.325, 291.15)
    assert abs(props.d - 7.730483295277388) / 7.730483295277388 < 1e-5

if __name__ == '__main__':
    print("=" * 70)
    print("GAS MODULE VALIDATION TESTS")
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
