"""
Iteration-count profiling for the Kepler solver.

Sweeps mean anomaly over one revolution at a fixed eccentricity and
accumulates how many iterations each solve needed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from kepler_orbit.analysis.statistics import RunningStat
from kepler_orbit.core.constants import TWO_PI
from kepler_orbit.physics.kepler import solve_keplers_equation_detailed

logger = logging.getLogger(__name__)


@dataclass
class SolverProfile:
    eccentricity: float
    iterations: RunningStat = field(default_factory=RunningStat)
    non_converged: int = 0


def profile_solver_iterations(e: float, n_samples: int = 1000) -> SolverProfile:
    """
    Solve Kepler's equation at n_samples evenly spaced mean anomalies in [0, 2π).

    Returns:
        SolverProfile with iteration statistics and the number of solves
        that stopped at the iteration cap.
    """
    if n_samples <= 0:
        raise ValueError(f"n_samples must be positive. Got: {n_samples}")

    profile = SolverProfile(eccentricity=e)
    for k in range(n_samples):
        sol = solve_keplers_equation_detailed(k * TWO_PI / n_samples, e)
        profile.iterations.entry(float(sol.iterations))
        if not sol.converged:
            profile.non_converged += 1

    logger.info(
        "Kepler solver profile e=%.6f: mean=%.3f max=%d non_converged=%d/%d",
        e, profile.iterations.mean(), int(profile.iterations.max), profile.non_converged, n_samples,
    )
    return profile


def profile_eccentricities(eccentricities: List[float], n_samples: int = 1000) -> List[SolverProfile]:
    return [profile_solver_iterations(e, n_samples) for e in eccentricities]
