"""
Thermodynamic property calculator.

Combines the ideal gas state, the residual expansion and the virial series of an equation
of state at a known (density, temperature, composition) into a full PropertySet. No
iteration is performed. A density <= 0 is a precondition violation the caller must avoid;
the facades enforce it before calling in here.
"""

from dataclasses import dataclass, fields
import numpy as np
import pandas as pd
from tabulate import tabulate

from pyaga8.classes import expansion_order
from pyaga8.constants import EPSILON, JT_IDEAL

UNITS = {
    'd': 'mol/L',
    'p': 'kPa',
    'z': '-',
    'mm': 'g/mol',
    'dp_dd': 'kPa.L/mol',
    'd2p_dd2': 'kPa.(L/mol)^2',
    'd2p_dtd': 'kPa.L/(mol.K)',
    'dp_dt': 'kPa/K',
    'u': 'J/mol',
    'h': 'J/mol',
    'g': 'J/mol',
    'a': 'J/mol',
    's': 'J/(mol.K)',
    'cv': 'J/(mol.K)',
    'cp': 'J/(mol.K)',
    'w': 'm/s',
    'jt': 'K/kPa',
    'kappa': '-',
    'b_virial': 'L/mol',
    'c_virial': '(L/mol)^2',
}

DESCRIPTIONS = {
    'd': 'Molar density',
    'p': 'Pressure',
    'z': 'Compressibility factor',
    'mm': 'Molar mass',
    'dp_dd': 'dP/dD at constant T',
    'd2p_dd2': 'd2P/dD2 at constant T',
    'd2p_dtd': 'd2P/dTdD',
    'dp_dt': 'dP/dT at constant D',
    'u': 'Internal energy',
    'h': 'Enthalpy',
    'g': 'Gibbs energy',
    'a': 'Helmholtz energy',
    's': 'Entropy',
    'cv': 'Isochoric heat capacity',
    'cp': 'Isobaric heat capacity',
    'w': 'Speed of sound',
    'jt': 'Joule-Thomson coefficient',
    'kappa': 'Isentropic exponent',
    'b_virial': 'Second virial coefficient',
    'c_virial': 'Third virial coefficient',
}


@dataclass
class PropertySet:
    d: float = 0.0
    p: float = 0.0
    z: float = 0.0
    mm: float = 0.0
    dp_dd: float = 0.0
    d2p_dd2: float = 0.0
    d2p_dtd: float = 0.0
    dp_dt: float = 0.0
    u: float = 0.0
    h: float = 0.0
    g: float = 0.0
    a: float = 0.0
    s: float = 0.0
    cv: float = 0.0
    cp: float = 0.0
    w: float = 0.0
    jt: float = 0.0
    kappa: float = 0.0
    b_virial: float = 0.0
    c_virial: float = 0.0

    def as_dict(self):
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def to_frame(self) -> pd.DataFrame:
        """ One row DataFrame, columns labelled with units"""
        return pd.DataFrame([{f"{k} ({UNITS[k]})": v for k, v in self.as_dict().items()}])

    def summary(self) -> str:
        """ Text table of every property with description and units"""
        table = [[DESCRIPTIONS[k], k, v, UNITS[k]] for k, v in self.as_dict().items()]
        return tabulate(table, headers=['Property', 'Field', 'Value', 'Units'], floatfmt='.10g')


def calc_properties(model, d: float, t: float, x: np.ndarray, reduction) -> PropertySet:
    """ Full property set at density d (mol/L), temperature t (K) and mole fractions x.
        model: EosModel of the method, reduction: its reduction parameters for x
    """
    r = model.r_gas
    rt = r * t
    mm = model.molar_mass(x)
    a0 = model.ideal(d, t, x)
    delta, tau = reduction.reduced(d, t)
    ar = model.residual(delta, tau, x, reduction, expansion_order.FULL)
    b_virial, c_virial = model.virial(tau, x, reduction)

    props = PropertySet(d=d, mm=mm, b_virial=b_virial, c_virial=c_virial)
    props.z = 1.0 + ar.a01
    props.p = d * rt * props.z
    props.dp_dd = rt * (1.0 + 2.0 * ar.a01 + ar.a02)
    props.dp_dt = d * r * (1.0 + ar.a01 - ar.a11)
    props.d2p_dtd = r * (1.0 + 2.0 * ar.a01 + ar.a02 - 2.0 * ar.a11 - ar.a12)
    props.a = rt * (a0.a00 + ar.a00)
    props.g = rt * (1.0 + ar.a01 + a0.a00 + ar.a00)
    props.u = rt * (a0.a10 + ar.a10)
    props.h = rt * (1.0 + ar.a01 + a0.a10 + ar.a10)
    props.s = r * (a0.a10 + ar.a10 - a0.a00 - ar.a00)
    props.cv = -r * (a0.a20 + ar.a20)
    if d > EPSILON:
        props.cp = props.cv + t * (props.dp_dt / d) ** 2 / props.dp_dd
        props.d2p_dd2 = rt * (2.0 * ar.a01 + 4.0 * ar.a02 + ar.a03) / d
        props.jt = (t / d * props.dp_dt / props.dp_dd - 1.0) / props.cp / d
    else:  # Ideal gas limits
        props.cp = props.cv + r
        props.d2p_dd2 = 0.0
        props.jt = JT_IDEAL
    w2 = 1000.0 * props.cp / props.cv * props.dp_dd / mm
    props.w = float(np.sqrt(max(w2, 0.0)))
    props.kappa = props.w ** 2 * mm / (rt * 1000.0 * props.z)
    return props
