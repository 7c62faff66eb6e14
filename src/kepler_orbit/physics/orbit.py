from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Iterable, List, Tuple

from kepler_orbit.core.constants import TWO_PI
from kepler_orbit.core.frames import Vector3, perifocal_to_reference
from kepler_orbit.physics.kepler import solve_keplers_equation


def semiminor_axis(e: float, a: float) -> float:
    """b = a sqrt(1 - e^2)."""
    return a * math.sqrt(1.0 - e * e)


def semimajor_axis(e: float, b: float) -> float:
    """a = b / sqrt(1 - e^2)."""
    return b * math.sqrt(1.0 / (1.0 - e * e))


def eccentricity(a: float, b: float) -> float:
    """e = sqrt(1 - b^2 / a^2)."""
    return math.sqrt(1.0 - (b * b) / (a * a))


@dataclass(frozen=True)
class Orbit:
    """
    Keplerian orbital elements of an elliptic orbit.

    Units are whatever the caller uses for length; angles are radians.
        eccentricity: 0 <= e < 1
        semimajor_axis: a > 0
        inclination: i
        longitude_of_ascending_node: Ω
        argument_of_periapsis: ω
        epoch_of_periapsis: t0, time of periapsis passage (stored only;
            mapping time to mean anomaly is left to the caller)

    semiminor_axis is derived from (e, a) once at construction. The
    instance is frozen, so b can never drift from e and a.
    """
    eccentricity: float
    semimajor_axis: float
    inclination: float
    longitude_of_ascending_node: float
    argument_of_periapsis: float
    epoch_of_periapsis: float = 0.0
    semiminor_axis: float = field(init=False)

    def __post_init__(self):
        if not (0.0 <= self.eccentricity < 1.0):
            raise ValueError(f"Eccentricity must be in range [0, 1). Got: {self.eccentricity}")
        if not (self.semimajor_axis > 0.0 and math.isfinite(self.semimajor_axis)):
            raise ValueError(f"Semi-major axis must be positive and finite. Got: {self.semimajor_axis}")
        for name in ("inclination", "longitude_of_ascending_node", "argument_of_periapsis", "epoch_of_periapsis"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite. Got: {value}")

        object.__setattr__(self, "semiminor_axis", semiminor_axis(self.eccentricity, self.semimajor_axis))

    @classmethod
    def from_semiminor_axis(
        cls,
        eccentricity: float,
        semiminor_axis: float,
        inclination: float,
        longitude_of_ascending_node: float,
        argument_of_periapsis: float,
        epoch_of_periapsis: float = 0.0,
    ) -> "Orbit":
        """Build an orbit from e and b instead of e and a."""
        if not (0.0 <= eccentricity < 1.0):
            raise ValueError(f"Eccentricity must be in range [0, 1). Got: {eccentricity}")
        return cls(
            eccentricity=eccentricity,
            semimajor_axis=semimajor_axis(eccentricity, semiminor_axis),
            inclination=inclination,
            longitude_of_ascending_node=longitude_of_ascending_node,
            argument_of_periapsis=argument_of_periapsis,
            epoch_of_periapsis=epoch_of_periapsis,
        )

    def eccentric_anomaly(self, M_rad: float) -> float:
        return solve_keplers_equation(M_rad, self.eccentricity)

    def position_in_plane(self, E_rad: float) -> Vector3:
        """
        Position in the orbital plane for eccentric anomaly E.
        Reference direction is +x (toward periapsis), 'up' is +z.
        """
        x = self.semimajor_axis * (math.cos(E_rad) - self.eccentricity)
        y = self.semiminor_axis * math.sin(E_rad)
        return (x, y, 0.0)

    def position(self, M_rad: float) -> Vector3:
        """
        Reference-frame position at mean anomaly M_rad.
        """
        E = self.eccentric_anomaly(M_rad)
        r_pqw = self.position_in_plane(E)
        return perifocal_to_reference(
            r_pqw,
            self.longitude_of_ascending_node,
            self.inclination,
            self.argument_of_periapsis,
        )

    def periapsis(self) -> float:
        return (self.semimajor_axis - self.semimajor_axis * self.eccentricity) / 2.0

    def apoapsis(self) -> float:
        return self.semimajor_axis - self.periapsis()


def sample_positions(orbit: Orbit, mean_anomalies: Iterable[float]) -> List[Tuple[float, Vector3]]:
    """
    Evaluate an orbit at a sequence of mean anomalies.
    Returns list of (M, r).
    """
    out: List[Tuple[float, Vector3]] = []
    for M in mean_anomalies:
        out.append((M, orbit.position(M)))
    return out


def orbit_track(orbit: Orbit, n_samples: int = 360) -> List[Vector3]:
    """
    Positions over one full revolution, evenly spaced in mean anomaly.
    The first and last samples coincide so the track closes.
    """
    if n_samples < 2:
        raise ValueError(f"n_samples must be at least 2. Got: {n_samples}")
    step = TWO_PI / (n_samples - 1)
    return [r for (_M, r) in sample_positions(orbit, [k * step for k in range(n_samples)])]
