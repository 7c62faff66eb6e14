from __future__ import annotations

import math

TWO_PI: float = 2.0 * math.pi

# Kepler solver convergence threshold (close to double-precision epsilon)
KEPLER_PRECISION: float = 9e-16

# Iteration cap; only reached for e ~ 1 and M ~ 0
KEPLER_MAX_ITER: int = 100

# Modulus applied to each Newton correction to keep high-e iterations bounded
KEPLER_DAMPING_BOUND: float = 1.4
