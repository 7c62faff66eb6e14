# Elliptic Kepler equation

from __future__ import annotations

import logging
import math
from typing import NamedTuple

from kepler_orbit.core.constants import (
    KEPLER_DAMPING_BOUND,
    KEPLER_MAX_ITER,
    KEPLER_PRECISION,
    TWO_PI,
)

logger = logging.getLogger(__name__)


class KeplerSolution(NamedTuple):
    """Eccentric anomaly plus how the iteration ended."""
    E_rad: float
    iterations: int
    converged: bool


def wrap_angle(angle_rad: float) -> float:
    """
    Reduce an angle by 2π using a truncated remainder.

    The result keeps the sign of the input, so it lies in (-2π, 2π).
    """
    return math.fmod(angle_rad, TWO_PI)


def solve_keplers_equation_detailed(
    M_rad: float,
    e: float,
    tol: float = KEPLER_PRECISION,
    max_iter: int = KEPLER_MAX_ITER,
) -> KeplerSolution:
    """
    Solve Kepler's equation for elliptic orbits:
        M = E - e sin(E)
    with a fixed-point / Newton hybrid whose corrections are damped by
    a remainder of KEPLER_DAMPING_BOUND.

    Args:
        M_rad: Mean anomaly (rad), any finite value
        e: eccentricity (0 <= e < 1)
        tol: convergence tolerance on successive estimates
        max_iter: iteration cap

    Returns:
        KeplerSolution. When the cap is hit the last estimate is returned
        with converged=False; it is still a usable approximation.
    """
    if not (0.0 <= e < 1.0):
        raise ValueError(f"Elliptic Kepler solver requires 0 <= e < 1. Got: {e}")
    if not math.isfinite(M_rad):
        raise ValueError(f"Mean anomaly must be finite. Got: {M_rad}")

    M = wrap_angle(M_rad)
    E = M
    E_next = M

    for i in range(1, max_iter + 1):
        E_next = M + e * math.sin(E)
        diff = E_next - E
        if abs(diff) < tol:
            return KeplerSolution(E_next, i, True)

        # Newton step (derivative of the fixed-point residual), wrapped
        step = 1.0 / (1.0 - e * math.cos(E))
        E = E + math.fmod(step * diff, KEPLER_DAMPING_BOUND)

    logger.debug(
        "Kepler solver hit %d iterations (e=%.17g, M=%.17g); returning E=%.17g",
        max_iter, e, M, E_next,
    )
    return KeplerSolution(E_next, max_iter, False)


def solve_keplers_equation(
    M_rad: float,
    e: float,
    tol: float = KEPLER_PRECISION,
    max_iter: int = KEPLER_MAX_ITER,
) -> float:
    """
    Eccentric anomaly E (rad) for mean anomaly M_rad and eccentricity e.

    Never fails for 0 <= e < 1: non-convergence yields the best estimate.
    """
    return solve_keplers_equation_detailed(M_rad, e, tol, max_iter).E_rad
