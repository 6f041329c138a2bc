"""
GERG-2008 equation of state engine.

alpha_r = sum_i x_i alpha_or_i(delta, tau) + sum_{i<j} x_i x_j F_ij alpha_r_ij(delta, tau)

with delta = rho / rho_r and tau = T_r / T. The reducing functions are

    1/rho_r = sum_i sum_j x_i x_j beta_v,ij gamma_v,ij (x_i + x_j)/(beta_v,ij^2 x_i + x_j) / 8 (rho_c,i^-1/3 + rho_c,j^-1/3)^3
    T_r     = sum_i sum_j x_i x_j beta_T,ij gamma_T,ij (x_i + x_j)/(beta_T,ij^2 x_i + x_j) (T_c,i T_c,j)^0.5

summed over the upper triangle (i <= j) with the off-diagonal terms doubled. Components with
fractions at or below EPSILON are left out of both sums.
"""

from dataclasses import dataclass
import numpy as np
from typing import Tuple

from pyaga8.classes import expansion_order
from pyaga8.constants import EPSILON, NC, R_GERG
from pyaga8.core._lib_expansion import ExpansionState, TermBlock, make_block, concat_blocks, sum_terms, virial_series
from pyaga8.core._lib_ideal_gas import IdealState, ideal_coefficients, alpha0
from pyaga8.core.core import EosModel
from pyaga8.gerg._lib_gerg_tables import (MMI_GERG, TC, DC, PURE, DEPARTURE, DEPARTURE_PAIRS,
                                          BINARY_REDUCING)

# =============================================================================
# Composition independent precalculation
# =============================================================================
def _setup():
    bv = np.ones((NC, NC))
    gv = np.ones((NC, NC))
    bt = np.ones((NC, NC))
    gt = np.ones((NC, NC))
    for (i, j), (beta_v, gamma_v, beta_t, gamma_t) in BINARY_REDUCING.items():
        bv[i, j], gv[i, j], bt[i, j], gt[i, j] = beta_v, gamma_v, beta_t, gamma_t

    dc3 = DC ** (-1.0 / 3.0)
    vc = (dc3[:, None] + dc3[None, :]) ** 3 / 8.0
    tc = np.sqrt(np.outer(TC, TC))

    # Arranged so that x_ij * G / (B x_i + x_j) gives each reducing sum term
    rv = (bv * gv * vc, bv ** 2)
    rt = (bt * gt * tc, bt ** 2)
    for arr in rv + rt:
        arr.flags.writeable = False

    pure = tuple(make_block('exp', n, d, t, c=c) for n, d, t, c in PURE)

    departure = {}
    for name, terms in DEPARTURE.items():
        blocks = []
        if terms['poly']:
            d, t, n = zip(*terms['poly'])
            blocks.append(make_block('poly', n, d, t))
        if terms['gauss']:
            d, t, n, eta, beta = zip(*terms['gauss'])
            half = [0.5] * len(n)
            blocks.append(make_block('gauss', n, d, t, eta=eta, beta=beta, eps=half, gamma=half))
        departure[name] = tuple(blocks)
    return rv, rt, pure, departure

(GV, BV), (GT, BT), PURE_BLOCKS, DEPARTURE_BLOCKS = _setup()
IDEAL_COEFS = ideal_coefficients(R_GERG, rescale=True)


@dataclass(frozen=True)
class GergReduction:
    """ Composition dependent GERG-2008 parameters
        rho_r: Reducing density (mol/L)
        t_r: Reducing temperature (K)
        blocks: Composition weighted pure fluid and departure terms
    """
    rho_r: float
    t_r: float
    blocks: Tuple[TermBlock, ...]

    def reduced(self, d: float, t: float) -> Tuple[float, float]:
        """ Reduced density and inverse reduced temperature (delta, tau)"""
        return d / self.rho_r, self.t_r / t


def reducing_parameters(x: np.ndarray) -> Tuple[float, float]:
    """ Reducing density (mol/L) and temperature (K) of the mixture"""
    x = np.asarray(x, dtype=float)
    idx = np.nonzero(x > EPSILON)[0]
    xs = x[idx]
    xi = xs[:, None]
    xj = xs[None, :]
    factor = np.triu(np.full((len(idx), len(idx)), 2.0), 1) + np.eye(len(idx))
    xij = factor * xi * xj * (xi + xj)
    sub = np.ix_(idx, idx)
    vr = np.sum(xij * GV[sub] / (BV[sub] * xi + xj))
    tr = np.sum(xij * GT[sub] / (BT[sub] * xi + xj))
    return 1.0 / vr, tr


def reduce(x: np.ndarray) -> GergReduction:
    """ GERG-2008 reducing functions and composition weighted term blocks for mole fractions x (21)"""
    x = np.asarray(x, dtype=float)
    rho_r, t_r = reducing_parameters(x)
    blocks = [PURE_BLOCKS[i].scaled(x[i]) for i in range(NC) if x[i] > EPSILON]
    for (i, j), (name, fij) in DEPARTURE_PAIRS.items():
        if x[i] > EPSILON and x[j] > EPSILON:
            blocks.extend(b.scaled(x[i] * x[j] * fij) for b in DEPARTURE_BLOCKS[name])
    return GergReduction(float(rho_r), float(t_r), concat_blocks(blocks))


def residual(delta: float, tau: float, x: np.ndarray, reduction: GergReduction,
             order: expansion_order = expansion_order.FULL) -> ExpansionState:
    return sum_terms(delta, tau, reduction.blocks, order)


def virial(tau: float, x: np.ndarray, reduction: GergReduction) -> Tuple[float, float]:
    """ Second (L/mol) and third ((L/mol)^2) virial coefficients"""
    c1, c2 = virial_series(tau, reduction.blocks)
    return c1 / reduction.rho_r, 2.0 * c2 / reduction.rho_r ** 2


def ideal(d: float, t: float, x: np.ndarray) -> IdealState:
    return alpha0(d, t, x, IDEAL_COEFS)


def molar_mass(x: np.ndarray) -> float:
    return float(np.dot(x, MMI_GERG))


def pseudo_critical(x: np.ndarray, reduction: GergReduction = None) -> Tuple[float, float]:
    """ Linear mixing of the component critical points, (rho_cx mol/L, T_cx K).
        Starting point of the dense density searches.
    """
    x = np.asarray(x, dtype=float)
    return float(1.0 / np.dot(x, 1.0 / DC)), float(np.dot(x, TC))


GERG_MODEL = EosModel(
    name='GERG',
    r_gas=R_GERG,
    reduce=reduce,
    residual=residual,
    ideal=ideal,
    virial=virial,
    molar_mass=molar_mass,
    pseudo_critical=pseudo_critical,
)
