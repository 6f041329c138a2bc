"""
Residual Helmholtz expansion term summation shared by the DETAIL and GERG-2008 engines.

Every residual term has the form  n * delta^d * tau^t * damping(delta)  with one of three
damping kinds:
    polynomial   damping = 1
    exponential  damping = exp(-delta^c), or 1 when c == 0
    gaussian     damping = exp(-eta*(delta - eps)^2 - beta*(delta - gamma))

Each kind reduces to a term value T, the temperature exponent t, and the density
log-derivatives
    ex   = delta * dln(T)/d(delta)
    dex  = delta * d(ex)/d(delta)
    ddex = delta * d(dex)/d(delta)
from which all eight reduced derivatives aij = tau^i delta^j d^(i+j)alpha_r/dtau^i ddelta^j
follow analytically:
    a00 = sum T            a10 = sum T t
    a01 = sum T ex         a11 = sum T t ex
    a02 = sum T E2         a12 = sum T t E2
    a03 = sum T E3         a20 = sum T t (t - 1)
with E2 = ex^2 - ex + dex and E3 = (ex - 2) E2 + (2 ex - 1) dex + ddex.

The low-density series of the same terms gives the second and third virial coefficients
(alpha_r = c1 delta + c2 delta^2 + ..., B = c1 / rho_r, C = 2 c2 / rho_r^2).
"""

from dataclasses import dataclass, fields
import numpy as np
from typing import Tuple

from pyaga8.classes import expansion_order


@dataclass
class ExpansionState:
    """ Reduced residual Helmholtz energy and its derivatives, all dimensionless.
        aij = tau^i * delta^j * d^(i+j) alpha_r / d tau^i d delta^j
    """
    a00: float = 0.0
    a01: float = 0.0
    a02: float = 0.0
    a03: float = 0.0
    a10: float = 0.0
    a11: float = 0.0
    a12: float = 0.0
    a20: float = 0.0

    def __add__(self, other: 'ExpansionState') -> 'ExpansionState':
        if not isinstance(other, ExpansionState):
            return NotImplemented
        return ExpansionState(*[getattr(self, f.name) + getattr(other, f.name) for f in fields(self)])


@dataclass(frozen=True)
class TermBlock:
    """ A block of residual terms sharing one damping kind.
        kind: 'poly', 'exp' or 'gauss'
        n, d, t: coefficient, density exponent and temperature exponent arrays
        c: exponential damping power (exp blocks)
        eta, beta, eps, gamma: gaussian bell parameters (gauss blocks)
    """
    kind: str
    n: np.ndarray
    d: np.ndarray
    t: np.ndarray
    c: np.ndarray = None
    eta: np.ndarray = None
    beta: np.ndarray = None
    eps: np.ndarray = None
    gamma: np.ndarray = None

    def scaled(self, weight: float) -> 'TermBlock':
        """ Same block with every coefficient multiplied by weight (composition weighting)"""
        return TermBlock(self.kind, self.n * weight, self.d, self.t, self.c, self.eta, self.beta, self.eps, self.gamma)

    def __len__(self):
        return len(self.n)


def make_block(kind, n, d, t, **kwargs) -> TermBlock:
    """ Builds a read-only TermBlock from sequences"""
    arrays = {}
    for key, value in [('n', n), ('d', d), ('t', t)] + list(kwargs.items()):
        arr = np.array(value, dtype=float)
        arr.flags.writeable = False
        arrays[key] = arr
    return TermBlock(kind, **arrays)


def concat_blocks(blocks) -> Tuple[TermBlock, ...]:
    """ Merges blocks of the same kind, so that each kind is evaluated in a single vectorised pass"""
    merged = []
    for kind in ('poly', 'exp', 'gauss'):
        same = [b for b in blocks if b.kind == kind and len(b) > 0]
        if not same:
            continue
        names = ['n', 'd', 't'] + {'poly': [], 'exp': ['c'], 'gauss': ['eta', 'beta', 'eps', 'gamma']}[kind]
        merged.append(TermBlock(kind, **{name: np.concatenate([getattr(b, name) for b in same]) for name in names}))
    return tuple(merged)


# =============================================================================
# Term log-derivatives per damping kind
# =============================================================================
def _poly_terms(delta, tau, block):
    value = block.n * delta ** block.d * tau ** block.t
    zeros = np.zeros_like(value)
    return value, block.d, zeros, zeros

def _exp_terms(delta, tau, block):
    dc = delta ** block.c
    damping = np.where(block.c > 0, np.exp(-dc), 1.0)
    value = block.n * delta ** block.d * tau ** block.t * damping
    cdc = block.c * dc
    ex = block.d - cdc
    dex = -block.c * cdc
    ddex = -block.c * block.c * cdc
    return value, ex, dex, ddex

def _gauss_terms(delta, tau, block):
    # exp(-eta(delta-eps)^2 - beta(delta-gamma)) = exp(c delta^2 + e delta + g)
    c = -block.eta
    e = 2 * block.eta * block.eps - block.beta
    g = block.beta * block.gamma - block.eta * block.eps ** 2
    cd2 = c * delta ** 2
    ed = e * delta
    value = block.n * delta ** block.d * tau ** block.t * np.exp(cd2 + ed + g)
    ex = block.d + 2 * cd2 + ed
    dex = 4 * cd2 + ed
    ddex = 8 * cd2 + ed
    return value, ex, dex, ddex

_TERM_FNS = {'poly': _poly_terms, 'exp': _exp_terms, 'gauss': _gauss_terms}


def sum_terms(delta: float, tau: float, blocks, order: expansion_order = expansion_order.FULL) -> ExpansionState:
    """ Sums a collection of TermBlocks into an ExpansionState.
        order: expansion_order.DENSITY fills a00, a01 and a02 only, FULL fills all eight fields
    """
    state = ExpansionState()
    for block in blocks:
        if len(block) == 0:
            continue
        value, ex, dex, ddex = _TERM_FNS[block.kind](delta, tau, block)
        e2 = ex * ex - ex + dex
        state.a00 += float(np.sum(value))
        state.a01 += float(np.sum(value * ex))
        state.a02 += float(np.sum(value * e2))
        if order == expansion_order.FULL:
            vt = value * block.t
            e3 = (ex - 2) * e2 + (2 * ex - 1) * dex + ddex
            state.a03 += float(np.sum(value * e3))
            state.a10 += float(np.sum(vt))
            state.a11 += float(np.sum(vt * ex))
            state.a12 += float(np.sum(vt * e2))
            state.a20 += float(np.sum(vt * (block.t - 1)))
    return state


def virial_series(tau: float, blocks) -> Tuple[float, float]:
    """ Coefficients c1, c2 of the low density series alpha_r = c1*delta + c2*delta^2 + ...

        Polynomial terms contribute when d is 1 or 2. exp(-delta^c) terms contribute n tau^t
        when d is 1 or 2, and -n tau^t to c2 when d == 1 and c == 1. Gaussian terms expand as
        exp(g)(1 + e delta + ...).
    """
    c1 = 0.0
    c2 = 0.0
    for block in blocks:
        if len(block) == 0:
            continue
        nt = block.n * tau ** block.t
        d1 = block.d == 1
        d2 = block.d == 2
        if block.kind == 'gauss':
            e = 2 * block.eta * block.eps - block.beta
            g = block.beta * block.gamma - block.eta * block.eps ** 2
            nt = nt * np.exp(g)
            c1 += float(np.sum(nt[d1]))
            c2 += float(np.sum(nt[d2])) + float(np.sum((nt * e)[d1]))
        else:
            c1 += float(np.sum(nt[d1]))
            c2 += float(np.sum(nt[d2]))
            if block.kind == 'exp':
                c2 -= float(np.sum(nt[d1 & (block.c == 1)]))
    return c1, c2
