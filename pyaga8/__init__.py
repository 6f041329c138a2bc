"""
pyaga8
===================================

-----------------------------------------------------------------
Natural gas properties from the AGA8 and GERG-2008 equations of state
-----------------------------------------------------------------

Thermodynamic properties of 21 component natural gas mixtures from a molar composition,
pressure and temperature, using either;

- AGA8 Part 1 (2017) DETAIL equation of state
- GERG-2008 equation of state (AGA8 Part 2)

Includes;

- Density solution at given pressure and temperature
- Compressibility factor, molar mass, second and third virial coefficients
- Internal energy, enthalpy, entropy, Gibbs and Helmholtz energies
- Heat capacities, speed of sound, Joule-Thomson coefficient and isentropic exponent
- Pressure derivatives with respect to density and temperature
- Vectorised entry points returning numpy arrays or pandas DataFrames

Units are kPa, K and mol/L throughout, with unit conversion at the gas module entry points.

Example:
    from pyaga8.detail import Detail
    from pyaga8.composition import Composition

    eos = Detail(Composition(methane=0.9, ethane=0.06, nitrogen=0.04), p=5000, t=300)
    eos.compute_density()
    props = eos.compute_properties()
    print(props.summary())
"""

submodules = [
    'classes',
    'composition',
    'constants',
    'core',
    'detail',
    'gas',
    'gerg',
    'shared_fns',
    'validate'
]

__all__ = submodules

import importlib

def __dir__():
    return __all__


def __getattr__(name):
    if name in submodules:
        return importlib.import_module(f'pyaga8.{name}')
    else:
        try:
            return globals()[name]
        except KeyError:
            raise AttributeError(
                f"Module 'pyaga8' has no attribute '{name}'"
            )
