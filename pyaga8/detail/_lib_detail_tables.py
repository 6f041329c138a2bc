"""
Coefficient tables of the AGA8 Part 1 (2017) DETAIL equation of state.

Component order follows pyaga8.constants.COMPONENTS. Binary parameters are stored sparsely,
only pairs (i < j) that differ from 1.0 are listed. All arrays are read-only.
"""

import numpy as np

from pyaga8.constants import NC

NTERMS = 58

def _frozen(values, dtype=float):
    arr = np.array(values, dtype=dtype)
    arr.flags.writeable = False
    return arr

def _flags(indices):
    flags = np.zeros(NTERMS, dtype=int)
    flags[list(indices)] = 1
    flags.flags.writeable = False
    return flags

def _binary(pairs):
    # Symmetric NC x NC matrix of ones with the listed pairs set
    mat = np.ones((NC, NC))
    for (i, j), value in pairs.items():
        mat[i, j] = value
        mat[j, i] = value
    mat.flags.writeable = False
    return mat

# Molar masses (g/mol)
MMI = _frozen([
    16.043, 28.0135, 44.01, 30.07, 44.097, 58.123, 58.123, 72.15, 72.15, 86.177, 100.204,
    114.231, 128.258, 142.285, 2.0159, 31.9988, 28.01, 18.0153, 34.082, 4.0026, 39.948,
])

# Equation of state coefficients
AN = _frozen([
    0.1538326, 1.341953, -2.998583, -0.04831228, 0.3757965, -1.589575, -0.05358847, 0.88659463,
    -0.71023704, -1.471722, 1.32185035, -0.78665925, 0.00000000229129, 0.1576724, -0.4363864,
    -0.04408159, -0.003433888, 0.03205905, 0.02487355, 0.07332279, -0.001600573, 0.6424706,
    -0.4162601, -0.06689957, 0.2791795, -0.6966051, -0.002860589, -0.008098836, 3.150547,
    0.007224479, -0.7057529, 0.5349792, -0.07931491, -1.418465, -5.99905e-17, 0.1058402,
    0.03431729, -0.007022847, 0.02495587, 0.04296818, 0.7465453, -0.2919613, 7.294616,
    -9.936757, -0.005399808, -0.2432567, 0.04987016, 0.003733797, 1.874951, 0.002168144,
    -0.6587164, 0.000205518, 0.009776195, -0.02048708, 0.01557322, 0.006862415, -0.001226752,
    0.002850908,
])

# Density exponents
BN = _frozen([
    1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 1, 2, 2, 2, 2, 2, 2, 2, 2, 2, 3, 3, 3, 3, 3,
    3, 3, 3, 3, 3, 4, 4, 4, 4, 4, 4, 4, 5, 5, 5, 5, 5, 6, 6, 7, 7, 8, 8, 8, 9, 9,
])

# Density exponents in exp(-D^kn), no damping when kn == 0
KN = _frozen([
    0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 0, 3, 2, 2, 2, 4, 4, 0, 0, 2, 2, 2, 4, 4, 4, 4, 0, 1, 1, 2, 2,
    3, 3, 4, 4, 4, 0, 0, 2, 2, 2, 4, 4, 0, 2, 2, 4, 4, 0, 2, 0, 2, 1, 2, 2, 2, 2,
])

# Temperature exponents
UN = _frozen([
    0.0, 0.5, 1.0, 3.5, -0.5, 4.5, 0.5, 7.5, 9.5, 6.0, 12.0, 12.5, -6.0, 2.0, 3.0, 2.0, 2.0, 11.0,
    -0.5, 0.5, 0.0, 4.0, 6.0, 21.0, 23.0, 22.0, -1.0, -0.5, 7.0, -1.0, 6.0, 4.0, 1.0, 9.0, -13.0,
    21.0, 8.0, -0.5, 0.0, 2.0, 7.0, 9.0, 22.0, 23.0, 1.0, 9.0, 3.0, 8.0, 23.0, 1.5, 5.0, -0.5, 4.0,
    7.0, 3.0, 0.0, 1.0, 0.0,
])

# Term flags: high temperature (F), orientation (G), quadrupole (Q), dipole (S), association (W)
FN = _flags([12, 26, 29, 34])
GN = _flags([4, 5, 24, 28, 31, 32, 33, 50, 53, 55])
QN = _flags([6, 15, 25, 27, 36, 41, 46, 48, 51, 57])
SN = _flags([7, 8])
WN = _flags([9, 10, 11])

# Energy parameters
EI = _frozen([
    151.3183, 99.73778, 241.9606, 244.1667, 298.1183, 324.0689, 337.6389, 365.5999, 370.6823,
    402.636293, 427.72263, 450.325022, 470.840891, 489.558373, 26.95794, 122.7667, 105.5348,
    514.0156, 296.355, 2.610111, 119.6299,
])

# Size parameters
KI = _frozen([
    0.4619255, 0.4479153, 0.4557489, 0.5279209, 0.583749, 0.6406937, 0.6341423, 0.6738577,
    0.6798307, 0.7175118, 0.7525189, 0.784955, 0.8152731, 0.8437826, 0.3514916, 0.4186954,
    0.4533894, 0.3825868, 0.4618263, 0.3589888, 0.4216551,
])

# Orientation parameters
GI = _frozen([
    0.0, 0.027815, 0.189065, 0.0793, 0.141239, 0.256692, 0.281835, 0.332267, 0.366911,
    0.289731, 0.337542, 0.383381, 0.427354, 0.469659, 0.034369, 0.021, 0.038953, 0.3325,
    0.0885, 0.0, 0.0,
])

# Quadrupole parameters
QI = _frozen([0.0] * 2 + [0.69] + [0.0] * 14 + [1.06775, 0.633276, 0.0, 0.0])

FI = _frozen([0.0] * 14 + [1.0] + [0.0] * 6)  # High temperature parameter (hydrogen)
SI = _frozen([0.0] * 17 + [1.5822, 0.39, 0.0, 0.0])  # Dipole parameters (water, H2S)
WI = _frozen([0.0] * 17 + [1.0, 0.0, 0.0, 0.0])  # Association parameter (water)

# Binary energy parameters
EIJ = _binary({
    (0, 1): 0.97164, (0, 2): 0.960644, (0, 4): 0.994635, (0, 5): 1.01953, (0, 6): 0.989844,
    (0, 7): 1.00235, (0, 8): 0.999268, (0, 9): 1.107274, (0, 10): 0.88088, (0, 11): 0.880973,
    (0, 12): 0.881067, (0, 13): 0.881161, (0, 14): 1.17052, (0, 16): 0.990126, (0, 17): 0.708218,
    (0, 18): 0.931484,
    (1, 2): 1.02274, (1, 3): 0.97012, (1, 4): 0.945939, (1, 5): 0.946914, (1, 6): 0.973384,
    (1, 7): 0.95934, (1, 8): 0.94552, (1, 14): 1.08632, (1, 15): 1.021, (1, 16): 1.00571,
    (1, 17): 0.746954, (1, 18): 0.902271,
    (2, 3): 0.925053, (2, 4): 0.960237, (2, 5): 0.906849, (2, 6): 0.897362, (2, 7): 0.726255,
    (2, 8): 0.859764, (2, 9): 0.855134, (2, 10): 0.831229, (2, 11): 0.80831, (2, 12): 0.786323,
    (2, 13): 0.765171, (2, 14): 1.28179, (2, 16): 1.5, (2, 17): 0.849408, (2, 18): 0.955052,
    (3, 4): 1.02256, (3, 6): 1.01306, (3, 8): 1.00532, (3, 14): 1.16446, (3, 17): 0.693168,
    (3, 18): 0.946871,
    (4, 6): 1.0049, (4, 14): 1.034787, (5, 14): 1.3, (6, 14): 1.3,
    (9, 18): 1.008692, (10, 18): 1.010126, (11, 18): 1.011501, (12, 18): 1.012821,
    (13, 18): 1.014089, (14, 16): 1.1,
})

# Binary conformal parameters
UIJ = _binary({
    (0, 1): 0.886106, (0, 2): 0.963827, (0, 4): 0.990877, (0, 6): 0.992291, (0, 8): 1.00367,
    (0, 9): 1.302576, (0, 10): 1.191904, (0, 11): 1.205769, (0, 12): 1.219634, (0, 13): 1.233498,
    (0, 14): 1.15639, (0, 18): 0.736833,
    (1, 2): 0.835058, (1, 3): 0.816431, (1, 4): 0.915502, (1, 6): 0.993556, (1, 14): 0.408838,
    (1, 18): 0.993476,
    (2, 3): 0.96987, (2, 9): 1.066638, (2, 10): 1.077634, (2, 11): 1.088178, (2, 12): 1.098291,
    (2, 13): 1.108021, (2, 16): 0.9, (2, 18): 1.04529,
    (3, 4): 1.065173, (3, 5): 1.25, (3, 6): 1.25, (3, 7): 1.25, (3, 8): 1.25, (3, 14): 1.61666,
    (3, 18): 0.971926,
    (9, 18): 1.028973, (10, 18): 1.033754, (11, 18): 1.038338, (12, 18): 1.042735,
    (13, 18): 1.046966,
})

# Binary size parameters
KIJ = _binary({
    (0, 1): 1.00363, (0, 2): 0.995933, (0, 4): 1.007619, (0, 6): 0.997596, (0, 8): 1.002529,
    (0, 9): 0.982962, (0, 10): 0.983565, (0, 11): 0.982707, (0, 12): 0.981849, (0, 13): 0.980991,
    (0, 14): 1.02326, (0, 18): 1.00008,
    (1, 2): 0.982361, (1, 3): 1.00796, (1, 14): 1.03227, (1, 18): 0.942596,
    (2, 3): 1.00851, (2, 9): 0.910183, (2, 10): 0.895362, (2, 11): 0.881152, (2, 12): 0.86752,
    (2, 13): 0.854406, (2, 18): 1.00779,
    (3, 4): 0.986893, (3, 14): 1.02034, (3, 18): 0.999969,
    (9, 18): 0.96813, (10, 18): 0.96287, (11, 18): 0.957828, (12, 18): 0.952441,
    (13, 18): 0.948338,
})

# Binary orientation parameters
GIJ = _binary({
    (0, 2): 0.807653, (0, 14): 1.95731, (1, 2): 0.982746, (2, 3): 0.370296, (2, 17): 1.67309,
})
