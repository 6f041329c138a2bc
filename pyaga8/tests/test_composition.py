#!/usr/bin/env python3
"""
Validation tests for composition module.
Run with: python3 -m pytest pyaga8/tests/ -v
Or standalone: python3 pyaga8/tests/test_composition.py
"""

import sys
import os
import dataclasses
import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', '..'))
from pyaga8.composition import Composition, CompositionError, CompositionEmpty, CompositionBadSum, as_composition
from pyaga8.constants import COMPONENTS, NC
from pyaga8.detail import Detail
from pyaga8.gerg import Gerg

AIR = Composition(nitrogen=0.78, oxygen=0.21, argon=0.009, carbon_dioxide=0.0004, water=0.0006)

def test_air_sums_to_one():
    """Air composition sums to 1"""
    assert abs(AIR.sum() - 1.0) < 1e-10

def test_field_order():
    """Fields follow the fixed table order"""
    names = [f.name for f in dataclasses.fields(Composition)]
    assert tuple(names) == COMPONENTS
    assert len(names) == NC

def test_to_array_order():
    """to_array places each fraction at its table index"""
    x = AIR.to_array()
    assert x.shape == (NC,)
    assert x[COMPONENTS.index('nitrogen')] == 0.78
    assert x[COMPONENTS.index('argon')] == 0.009
    assert x[0] == 0.0

def test_from_array_wrong_length():
    """Sequences that are not 21 long are rejected"""
    try:
        Composition.from_array([0.5, 0.5])
        assert False, "Should have raised CompositionError"
    except CompositionError:
        pass

def test_from_dict_formulas_and_names():
    """Dict keys may be field names or formulas, case-insensitive"""
    comp = Composition.from_dict({'CH4': 0.9, 'ethane': 0.05, 'co2': 0.03, 'nC4H10': 0.02})
    assert comp.methane == 0.9
    assert comp.ethane == 0.05
    assert comp.carbon_dioxide == 0.03
    assert comp.n_butane == 0.02
    assert comp.isobutane == 0.0

def test_from_dict_unknown_component():
    """Unknown keys raise CompositionError"""
    try:
        Composition.from_dict({'unobtainium': 1.0})
        assert False, "Should have raised CompositionError"
    except CompositionError:
        pass

def test_as_composition_passthrough():
    """as_composition accepts Composition, dict and sequence"""
    assert as_composition(AIR) is AIR
    assert as_composition(AIR.as_dict()) == AIR
    assert as_composition(list(AIR.to_array())) == AIR

def test_frozen():
    """Compositions are immutable"""
    try:
        AIR.methane = 0.5
        assert False, "Should have raised FrozenInstanceError"
    except dataclasses.FrozenInstanceError:
        pass

def test_check_empty():
    """All zero composition raises CompositionEmpty"""
    try:
        Composition().check()
        assert False, "Should have raised CompositionEmpty"
    except CompositionEmpty:
        pass

def test_check_bad_sum():
    """Sum away from 1 by more than 1e-5 raises CompositionBadSum"""
    try:
        Composition(methane=0.9, ethane=0.05).check()
        assert False, "Should have raised CompositionBadSum"
    except CompositionBadSum:
        pass
    # Within tolerance passes
    Composition(methane=0.999995).check()

def test_check_negative():
    """Negative fractions raise CompositionError"""
    try:
        Composition(methane=1.1, ethane=-0.1).check()
        assert False, "Should have raised CompositionError"
    except CompositionError:
        pass

def test_errors_are_value_errors():
    """Composition errors can be caught as ValueError"""
    assert issubclass(CompositionEmpty, ValueError)
    assert issubclass(CompositionBadSum, CompositionError)

def test_normalize():
    """normalize scales to unit sum and keeps proportions"""
    comp = Composition(methane=0.9, ethane=0.06).normalize()
    assert abs(comp.sum() - 1.0) < 1e-12
    assert abs(comp.methane / comp.ethane - 15.0) < 1e-12
    try:
        Composition().normalize()
        assert False, "Should have raised CompositionEmpty"
    except CompositionEmpty:
        pass

def test_facades_validate_by_default():
    """Detail and Gerg reject bad compositions unless check=False"""
    bad = Composition(methane=0.5)
    for cls in (Detail, Gerg):
        eos = cls()
        try:
            eos.set_composition(bad)
            assert False, "Should have raised CompositionBadSum"
        except CompositionBadSum:
            pass
        eos.set_composition(bad, check=False)
        assert np.isfinite(eos.molar_mass())

if __name__ == '__main__':
    print("=" * 70)
    print("COMPOSITION MODULE VALIDATION TESTS")
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
