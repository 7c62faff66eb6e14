from __future__ import annotations

import math
from typing import Tuple

Vector3 = Tuple[float, float, float]


def rotate_x(point: Vector3, angle_rad: float) -> Vector3:
    """
    Rotate a point about the x-axis (right-handed, y toward z).

    The (y, z) pair is taken to polar form, the angle is added and the
    pair rebuilt from the unchanged radius.
    """
    if angle_rad == 0.0:
        return point
    x, y, z = point
    r = math.hypot(y, z)
    theta = math.atan2(z, y) + angle_rad
    return (x, r * math.cos(theta), r * math.sin(theta))


def rotate_y(point: Vector3, angle_rad: float) -> Vector3:
    """
    Rotate a point about the y-axis (right-handed, z toward x).
    """
    if angle_rad == 0.0:
        return point
    x, y, z = point
    r = math.hypot(x, z)
    theta = math.atan2(x, z) + angle_rad
    return (r * math.sin(theta), y, r * math.cos(theta))


def rotate_z(point: Vector3, angle_rad: float) -> Vector3:
    """
    Rotate a point about the z-axis (right-handed, x toward y).
    """
    if angle_rad == 0.0:
        return point
    x, y, z = point
    r = math.hypot(x, y)
    theta = math.atan2(y, x) + angle_rad
    return (r * math.cos(theta), r * math.sin(theta), z)


def dot(a: Vector3, b: Vector3) -> float:
    return a[0]*b[0] + a[1]*b[1] + a[2]*b[2]


def sub(a: Vector3, b: Vector3) -> Vector3:
    return (a[0]-b[0], a[1]-b[1], a[2]-b[2])


def norm(a: Vector3) -> float:
    return math.sqrt(dot(a, a))


def perifocal_to_reference(r_pqw: Vector3, raan_rad: float, inc_rad: float, argp_rad: float) -> Vector3:
    """
    Rotate a position from the perifocal (orbital-plane) frame into the reference frame.

    Args:
        r_pqw: Position in the perifocal frame (+x toward periapsis, +z orbit normal)
        raan_rad: Longitude of the ascending node (radians)
        inc_rad: Inclination (radians)
        argp_rad: Argument of periapsis (radians)

    Returns:
        Position in the reference frame
    """
    # Order matters: periapsis within the plane, then tilt, then node
    r = rotate_z(r_pqw, argp_rad)
    r = rotate_x(r, inc_rad)
    return rotate_z(r, raan_rad)
