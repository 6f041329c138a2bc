"""
Ideal gas Helmholtz energy of the 21 component mixture (GERG-2004 Planck-Einstein form),
shared by the DETAIL and GERG-2008 equations of state.

For each component the ideal contribution is
    alpha0_i = ln(x_i d) + c0 + c1/T - c2 ln(T) + n3 ln|sinh(th3/T)| - n4 ln cosh(th4/T)
                                                + n5 ln|sinh(th5/T)| - n6 ln cosh(th6/T)
after the reference-state shift applied by ideal_coefficients(). The mixture value is the mole
fraction weighted sum. Reduced derivatives are returned in the tau form used by the residual
expansion, with tau proportional to 1/T:
    a10 = -T d(alpha0)/dT,   a20 = T^2 d2(alpha0)/dT2 + 2 T d(alpha0)/dT  (= tau^2 d2/dtau2)
"""

from dataclasses import dataclass
import numpy as np

from pyaga8.constants import T_REF, P_REF, EPSILON, R_IDEAL_REF

# Raw coefficients per component: c0, c1 (K), c2, n3, n4, n5, n6
N0I = np.array([
    [29.83843397, -15999.69151, 4.00088, 0.76315, 0.0046, 8.74432, -4.46921],  # Methane
    [17.56770785, -2801.729072, 3.50031, 0.13732, -0.1466, 0.90066, 0.0],  # Nitrogen
    [20.65844696, -4902.171516, 3.50002, 2.04452, -1.06044, 2.03366, 0.01393],  # Carbon dioxide
    [36.73005938, -23639.65301, 4.00263, 4.33939, 1.23722, 13.1974, -6.01989],  # Ethane
    [44.70909619, -31236.63551, 4.02939, 6.60569, 3.197, 19.1921, -8.37267],  # Propane
    [34.30180349, -38525.50276, 4.06714, 8.97575, 5.25156, 25.1423, 16.1388],  # Isobutane
    [36.53237783, -38957.80933, 4.33944, 9.44893, 6.89406, 24.4618, 14.7824],  # n-Butane
    [43.17218626, -51198.30946, 4.0, 11.7618, 20.1101, 33.1688, 0.0],  # Isopentane
    [42.67837089, -45215.83, 4.0, 8.95043, 21.836, 33.4032, 0.0],  # n-Pentane
    [46.99717188, -52746.83318, 4.0, 11.6977, 26.8142, 38.6164, 0.0],  # Hexane
    [52.07631631, -57104.81056, 4.0, 13.7266, 30.4707, 43.5561, 0.0],  # Heptane
    [57.25830934, -60546.76385, 4.0, 15.6865, 33.8029, 48.1731, 0.0],  # Octane
    [62.09646901, -66600.12837, 4.0, 18.0241, 38.1235, 53.3415, 0.0],  # Nonane
    [65.93909154, -74131.45483, 4.0, 21.0069, 43.4931, 58.3657, 0.0],  # Decane
    [13.07520288, -5836.943696, 2.47906, 0.95806, 0.45444, 1.56039, -1.3756],  # Hydrogen
    [16.8017173, -2318.32269, 3.50146, 1.07558, 1.01334, 0.0, 0.0],  # Oxygen
    [17.45786899, -2635.244116, 3.50055, 1.02865, 0.00493, 0.0, 0.0],  # Carbon monoxide
    [21.57882705, -7766.733078, 4.00392, 0.01059, 0.98763, 3.06904, 0.0],  # Water
    [21.5830944, -6069.035869, 4.0, 3.11942, 1.00243, 0.0, 0.0],  # Hydrogen sulfide
    [10.04639507, -745.375, 2.5, 0.0, 0.0, 0.0, 0.0],  # Helium
    [10.04639507, -745.375, 2.5, 0.0, 0.0, 0.0, 0.0],  # Argon
])
N0I.flags.writeable = False

# Characteristic temperatures (K) of the sinh, cosh, sinh, cosh terms
TH0I = np.array([
    [820.659, 178.41, 1062.82, 1090.53],
    [662.738, 680.562, 1740.06, 0.0],
    [919.306, 865.07, 483.553, 341.109],
    [559.314, 223.284, 1031.38, 1071.29],
    [479.856, 200.893, 955.312, 1027.29],
    [438.27, 198.018, 1905.02, 893.765],
    [468.27, 183.636, 1914.1, 903.185],
    [292.503, 910.237, 1919.37, 0.0],
    [178.67, 840.538, 1774.25, 0.0],
    [182.326, 859.207, 1826.59, 0.0],
    [169.789, 836.195, 1760.46, 0.0],
    [158.922, 815.064, 1693.07, 0.0],
    [156.854, 814.882, 1693.79, 0.0],
    [164.947, 836.264, 1750.24, 0.0],
    [228.734, 326.843, 1651.71, 1671.69],
    [2235.71, 1116.69, 0.0, 0.0],
    [1550.45, 704.525, 0.0, 0.0],
    [268.795, 1141.41, 2507.37, 0.0],
    [1833.63, 847.181, 0.0, 0.0],
    [0.0, 0.0, 0.0, 0.0],
    [0.0, 0.0, 0.0, 0.0],
])
TH0I.flags.writeable = False

_SINH = np.array([True, False, True, False])


@dataclass
class IdealState:
    """ Reduced ideal gas Helmholtz energy alpha0 = A0/RT and its tau derivatives"""
    a00: float = 0.0
    a10: float = 0.0
    a20: float = 0.0


def ideal_coefficients(r_gas: float, rescale: bool = False) -> np.ndarray:
    """ Returns the N0I table shifted to the ideal gas reference state (T_REF, P_REF) of an
        equation of state with gas constant r_gas.
        rescale: multiply every coefficient by R_IDEAL_REF / r_gas, as GERG-2008 does
    """
    coefs = N0I.copy()
    coefs[:, 2] -= 1.0
    if rescale:
        coefs *= R_IDEAL_REF / r_gas
    coefs[:, 0] -= np.log(P_REF / (r_gas * T_REF))
    coefs.flags.writeable = False
    return coefs


def alpha0(d: float, t: float, x: np.ndarray, coefs: np.ndarray) -> IdealState:
    """ Ideal gas reduced Helmholtz energy of the mixture
        d: Molar density (mol/L)
        t: Temperature (K)
        x: Mole fractions (21)
        coefs: Table from ideal_coefficients()
    """
    logd = np.log(d) if d > EPSILON else np.log(EPSILON)
    logt = np.log(t)
    state = IdealState()
    for i in np.nonzero(x > EPSILON)[0]:
        xi = x[i]
        c0, c1, c2 = coefs[i, :3]
        n = coefs[i, 3:]
        active = TH0I[i] > EPSILON
        th0t = TH0I[i, active] / t
        n = n[active]
        sinh = _SINH[active]
        hsn = np.sinh(th0t)
        hcn = np.cosh(th0t)
        loghyp = np.where(sinh, np.log(np.abs(hsn)), -np.log(np.abs(hcn)))
        dhyp = np.where(sinh, th0t * hcn / hsn, -th0t * hsn / hcn)
        d2hyp = np.where(sinh, (th0t / hsn) ** 2, (th0t / hcn) ** 2)
        state.a00 += xi * (logd + np.log(xi) + c0 + c1 / t - c2 * logt + np.sum(n * loghyp))
        state.a10 += xi * (c2 + c1 / t + np.sum(n * dhyp))
        state.a20 -= xi * (c2 + np.sum(n * d2hyp))
    state.a00 = float(state.a00)
    state.a10 = float(state.a10)
    state.a20 = float(state.a20)
    return state
