"""statfuncs.core.special.dawson

Dawson's integral F(t) = exp(-t^2) * integral_0^t exp(s^2) ds.

Small arguments use the Taylor series; otherwise Rybicki's method, which
samples exp(-s^2) on a grid of spacing H and is accurate to about 2e-7.
"""

from __future__ import annotations

import math

from ..constants import I_SQRT_PI

_H = 0.4
_A1 = 2.0 / 3.0
_A2 = 0.4
_A3 = 2.0 / 7.0
_NMAX = 6

_COEF = tuple(math.exp(-((2.0 * i + 1.0) * _H) ** 2) for i in range(_NMAX))


def dawson(t: float) -> float:
    """Dawson's integral F(t); odd in t, F(t) ~ 1/(2t) for large |t|."""
    t = float(t)
    if abs(t) < 0.2:
        x2 = t * t
        return t * (1.0 - _A1 * x2 * (1.0 - _A2 * x2 * (1.0 - _A3 * x2)))

    xx = abs(t)
    n0 = 2 * int(0.5 * xx / _H + 0.5)
    xp = xx - float(n0) * _H
    e1 = math.exp(2.0 * xp * _H)
    e2 = e1 * e1
    d1 = float(n0 + 1)
    d2 = d1 - 2.0
    total = 0.0
    for c in _COEF:
        total += c * (e1 / d1 + 1.0 / (d2 * e1))
        d1 += 2.0
        d2 -= 2.0
        e1 *= e2

    return math.copysign(I_SQRT_PI, t) * math.exp(-xp * xp) * total
