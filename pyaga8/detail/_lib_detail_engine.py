"""
AGA8 Part 1 (2017) DETAIL equation of state engine.

The DETAIL compressibility expansion is written in the reduced Helmholtz form shared with
GERG-2008, with delta = K^3 * rho and tau = U / T:

    alpha_r = sum_{n<18}  (Bs_n / (K^3 U^u_n) - C_n) * delta * tau^u_n
            + sum_{n>=12} C_n * delta^b_n * tau^u_n * exp(-delta^k_n)

where Bs_n are the mixture second virial sums and C_n = a_n G^g_n Q^(2 q_n) F^f_n. The terms
12..17 appear in both sums and cancel at first order in delta, leaving the second virial
coefficient B = sum Bs_n T^-u_n.

Mixing rules (AGA8 2017):
    K^3 = [(sum x_i K_i^2.5)^2 + sum_{i<j} 2 x_i x_j (K_ij^5 - 1)(K_i K_j)^2.5]^0.6
    U   = [(sum x_i E_i^2.5)^2 + sum_{i<j} 2 x_i x_j (U_ij^5 - 1)(E_i E_j)^2.5]^0.2
    G   = sum x_i G_i + sum_{i<j} 2 x_i x_j (G_ij - 1)(G_i + G_j)/2
    Q   = sum x_i Q_i,   F = sum x_i^2 F_i
    Bs_n = sum_i sum_j x_i x_j a_n (E_ij sqrt(E_i E_j))^u_n (K_i K_j)^1.5 B*_nij
"""

from dataclasses import dataclass
import numpy as np
from typing import Tuple

from pyaga8.classes import expansion_order
from pyaga8.constants import R_DETAIL
from pyaga8.core._lib_expansion import ExpansionState, TermBlock, make_block, sum_terms, virial_series
from pyaga8.core._lib_ideal_gas import IdealState, ideal_coefficients, alpha0
from pyaga8.core.core import EosModel
from pyaga8.detail._lib_detail_tables import (MMI, AN, BN, KN, UN, FN, GN, QN, SN, WN, EI, KI, GI, QI, FI, SI,
                                              WI, EIJ, UIJ, KIJ, GIJ)

# =============================================================================
# Composition independent precalculation
# =============================================================================
def _setup():
    ki25 = KI ** 2.5
    ei25 = EI ** 2.5
    nb = 18
    an, un = AN[:nb], UN[:nb]
    gn, qn, fn, sn, wn = GN[:nb], QN[:nb], FN[:nb], SN[:nb], WN[:nb]

    # B*_nij flag products, shape (i, j, n)
    gij = GIJ * (GI[:, None] + GI[None, :]) / 2
    bstar = np.where(gn == 1, gij[:, :, None], 1.0)
    bstar = bstar * np.where(qn == 1, np.outer(QI, QI)[:, :, None], 1.0)
    bstar = bstar * np.where(fn == 1, np.outer(FI, FI)[:, :, None], 1.0)
    bstar = bstar * np.where(sn == 1, np.outer(SI, SI)[:, :, None], 1.0)
    bstar = bstar * np.where(wn == 1, np.outer(WI, WI)[:, :, None], 1.0)

    eij = EIJ * np.sqrt(np.outer(EI, EI))
    bsnij = an * eij[:, :, None] ** un * np.outer(KI, KI)[:, :, None] ** 1.5 * bstar

    kij5 = (KIJ ** 5 - 1.0) * np.outer(ki25, ki25)
    uij5 = (UIJ ** 5 - 1.0) * np.outer(ei25, ei25)
    gij5 = (GIJ - 1.0) * (GI[:, None] + GI[None, :]) / 2
    for arr in (ki25, ei25, bsnij, kij5, uij5, gij5):
        arr.flags.writeable = False
    return ki25, ei25, bsnij, kij5, uij5, gij5

KI25, EI25, BSNIJ, KIJ5, UIJ5, GIJ5 = _setup()
IDEAL_COEFS = ideal_coefficients(R_DETAIL)


@dataclass(frozen=True)
class DetailReduction:
    """ Composition dependent DETAIL parameters
        k3: Mixture size parameter K^3 (L/mol)
        u: Mixture energy parameter U (K)
        g, q, f: Orientation, quadrupole and high temperature parameters
        bs: Second virial sums Bs_n, n < 18
        cn: Term coefficients C_n, n >= 12 (zero below)
        blocks: Residual term blocks in reduced form
    """
    k3: float
    u: float
    g: float
    q: float
    f: float
    bs: np.ndarray
    cn: np.ndarray
    blocks: Tuple[TermBlock, ...]

    @property
    def rho_r(self) -> float:
        return 1.0 / self.k3

    @property
    def t_r(self) -> float:
        return self.u

    def reduced(self, d: float, t: float) -> Tuple[float, float]:
        """ Reduced density and inverse reduced temperature (delta, tau)"""
        return self.k3 * d, self.u / t


def reduce(x: np.ndarray) -> DetailReduction:
    """ DETAIL mixing rules for mole fractions x (21)"""
    x = np.asarray(x, dtype=float)
    k3 = (np.dot(x, KI25) ** 2 + x @ KIJ5 @ x) ** 0.6
    u = (np.dot(x, EI25) ** 2 + x @ UIJ5 @ x) ** 0.2
    g = np.dot(x, GI) + x @ GIJ5 @ x
    q = np.dot(x, QI)
    f = np.dot(x * x, FI)
    bs = np.einsum('i,j,ijn->n', x, x, BSNIJ)

    cn = AN * g ** GN * q ** (2 * QN) * f ** FN
    cn[:12] = 0.0
    bs_red = bs / (k3 * u ** UN[:18])
    blocks = (
        make_block('poly', bs_red - cn[:18], np.ones(18), UN[:18]),
        make_block('exp', cn[12:], BN[12:], UN[12:], c=KN[12:]),
    )
    return DetailReduction(float(k3), float(u), float(g), float(q), float(f), bs, cn, blocks)


def residual(delta: float, tau: float, x: np.ndarray, reduction: DetailReduction,
             order: expansion_order = expansion_order.FULL) -> ExpansionState:
    return sum_terms(delta, tau, reduction.blocks, order)


def virial(tau: float, x: np.ndarray, reduction: DetailReduction) -> Tuple[float, float]:
    """ Second (L/mol) and third ((L/mol)^2) virial coefficients"""
    c1, c2 = virial_series(tau, reduction.blocks)
    return c1 * reduction.k3, 2.0 * c2 * reduction.k3 ** 2


def ideal(d: float, t: float, x: np.ndarray) -> IdealState:
    return alpha0(d, t, x, IDEAL_COEFS)


def molar_mass(x: np.ndarray) -> float:
    return float(np.dot(x, MMI))


def pseudo_critical(x: np.ndarray, reduction: DetailReduction) -> Tuple[float, float]:
    """ The DETAIL reducing point (1/K^3, U) stands in for the pseudo-critical point"""
    return reduction.rho_r, reduction.t_r


DETAIL_MODEL = EosModel(
    name='DETAIL',
    r_gas=R_DETAIL,
    reduce=reduce,
    residual=residual,
    ideal=ideal,
    virial=virial,
    molar_mass=molar_mass,
    pseudo_critical=pseudo_critical,
)
