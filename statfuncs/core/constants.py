"""statfuncs.core.constants

Numeric constants shared by the distribution and special-function routines.

CHI_EPSILON and CHI_MAX define the accuracy and upper bracket of the
chi-square critical value search. BIGX bounds the exponent below which
``exp`` is treated as zero.
"""

from __future__ import annotations

import math

CHI_EPSILON = 0.000001  # accuracy of critchi approximation
CHI_MAX = 99999.0  # maximum chi-square value

LOG_SQRT_PI = 0.5723649429247000870717135  # log(sqrt(pi))
I_SQRT_PI = 0.5641895835477562869480795  # 1 / sqrt(pi)
BIGX = 20.0  # max value to represent exp(x)

LOG_SQRT_2PI = 0.5 * math.log(2.0 * math.pi)


def ex(x: float) -> float:
    """exp(x), returning 0.0 when x < -BIGX."""
    if x < -BIGX:
        return 0.0
    return math.exp(x)
