import math
import pytest

from kepler_orbit.physics.orbit import Orbit
from kepler_orbit.visualization.plotly_viewer import build_orbit_figure


@pytest.fixture
def orbits():
    return {
        "LEO": Orbit(0.001, 7000.0, math.radians(51.6), math.radians(30.0), math.radians(40.0)),
        "MOLNIYA": Orbit(0.74, 26600.0, math.radians(63.4), 0.0, math.radians(270.0)),
    }


def test_figure_traces(orbits):
    fig = build_orbit_figure(orbits, n_samples=20)
    names = [t.name for t in fig.data]
    assert names == ["focus", "LEO track", "LEO periapsis", "MOLNIYA track", "MOLNIYA periapsis"]
    assert len(fig.data[1].x) == 20


def test_periapsis_marker_matches_position(orbits):
    fig = build_orbit_figure(orbits, n_samples=10)
    x, y, z = orbits["MOLNIYA"].position(0.0)
    marker = fig.data[4]
    assert marker.x[0] == x
    assert marker.y[0] == y
    assert marker.z[0] == z


def test_without_periapsis_markers(orbits):
    fig = build_orbit_figure(orbits, n_samples=10, show_periapsis=False)
    assert len(fig.data) == 3


def test_empty_mapping_raises():
    with pytest.raises(ValueError, match="No orbits"):
        build_orbit_figure({})
