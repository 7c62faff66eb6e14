"""
Tests for the running statistics accumulator and solver profiling.
"""
import logging
import sys
import pytest

from kepler_orbit.analysis.statistics import RunningStat
from kepler_orbit.analysis.solver_profile import profile_eccentricities, profile_solver_iterations


class TestRunningStat:
    def test_initial_state(self):
        stat = RunningStat()
        assert stat.total == 0.0
        assert stat.count == 0
        assert stat.max == -sys.float_info.max
        assert stat.min == sys.float_info.max

    def test_entries(self):
        stat = RunningStat()
        for v in [3.0, -1.0, 4.0, 1.0]:
            stat.entry(v)
        assert stat.total == 7.0
        assert stat.count == 4
        assert stat.max == 4.0
        assert stat.min == -1.0
        assert stat.mean() == 1.75

    def test_weighted_entry(self):
        # One entry standing for several samples
        stat = RunningStat()
        stat.entry(10.0, count=4)
        stat.entry(2.0)
        assert stat.count == 5
        assert stat.mean() == 12.0 / 5

    def test_mean_without_entries(self):
        with pytest.raises(ValueError, match="No entries"):
            RunningStat().mean()


class TestSolverProfile:
    def test_circular_orbit_one_iteration_each(self):
        profile = profile_solver_iterations(0.0, n_samples=64)
        assert profile.iterations.count == 64
        assert profile.iterations.max == 1.0
        assert profile.iterations.min == 1.0
        assert profile.non_converged == 0

    def test_eccentric_orbit_needs_more_work(self):
        low = profile_solver_iterations(0.1, n_samples=100)
        high = profile_solver_iterations(0.9, n_samples=100)
        assert high.iterations.mean() > low.iterations.mean()
        assert high.iterations.max <= 100

    def test_logs_summary(self, caplog):
        with caplog.at_level(logging.INFO, logger="kepler_orbit.analysis.solver_profile"):
            profile_solver_iterations(0.5, n_samples=10)
        assert "Kepler solver profile e=0.500000" in caplog.text

    def test_multiple_eccentricities(self):
        profiles = profile_eccentricities([0.0, 0.5], n_samples=8)
        assert [p.eccentricity for p in profiles] == [0.0, 0.5]

    def test_rejects_empty_sweep(self):
        with pytest.raises(ValueError, match="n_samples"):
            profile_solver_iterations(0.5, n_samples=0)
