"""
Tests for the watt density calculator and the chart data generators.
"""
import logging
import math

import pytest

from coronaanalysis.controller.calculations import (
    DecayPoint,
    SpeedPoint,
    dyne_decay,
    material_decay,
    speed_sweep,
    sweep_speeds,
    watt_density,
)
from coronaanalysis.model.materials import MaterialNotFoundError
from coronaanalysis.model.state import LineConfig, ProjectState


class TestWattDensity:
    """Test the single-line watt density formula."""

    def test_default_line(self):
        """48 in, 100 FPM, 1 kW, one side -> 1000 / (4 ft * 100 * 1)."""
        assert watt_density(LineConfig()) == pytest.approx(2.5)

    @pytest.mark.parametrize("width,speed,power,sides", [
        (48, 100, 1, 1),
        (60, 250, 12, 2),
        (30.5, 80, 3.5, 1),
    ])
    def test_matches_closed_form(self, width, speed, power, sides):
        line = LineConfig(width=width, speed=speed, power=power, sides=sides)
        assert watt_density(line) == pytest.approx(12000 * power / (width * speed * sides))

    def test_two_sides_halves_density(self):
        one = watt_density(LineConfig(sides=1))
        two = watt_density(LineConfig(sides=2))
        assert two == pytest.approx(one / 2)

    @pytest.mark.parametrize("field", ["width", "speed", "sides"])
    def test_zero_divisor_is_infinity(self, field):
        line = LineConfig()
        setattr(line, field, 0)
        assert watt_density(line) == math.inf

    def test_zero_over_zero_is_nan(self):
        assert math.isnan(watt_density(LineConfig(width=0, power=0)))

    def test_nan_input_propagates(self):
        assert math.isnan(watt_density(LineConfig(speed=math.nan)))

    def test_returns_builtin_float(self):
        assert type(watt_density(LineConfig())) is float


class TestSpeedSweep:
    """Test the watt density vs line speed data."""

    def test_default_lines(self):
        """extended max 125, step 7 -> speeds 10, 17, ..., 122."""
        points = speed_sweep(LineConfig(), LineConfig())

        assert len(points) == 17
        assert points[0] == SpeedPoint(speed=10, line1=25.0, line4=25.0)
        assert points[-1].speed == 122
        assert [p.speed for p in points] == list(range(10, 123, 7))

    def test_densities_are_rounded(self):
        points = speed_sweep(LineConfig(), LineConfig())
        # 1000 / (4 * 122) = 2.04918...
        assert points[-1].line1 == 2.05

    def test_lines_keep_their_own_settings(self):
        line1 = LineConfig()
        line4 = LineConfig(width=24, power=2, sides=2)
        first = speed_sweep(line1, line4)[0]

        assert first.line1 == 25.0
        # 2000 / (2 ft * 10 * 2)
        assert first.line4 == 50.0

    def test_uses_faster_line_for_range(self):
        points = speed_sweep(LineConfig(speed=100), LineConfig(speed=200))

        # extended max 250, step 13
        assert len(points) == 19
        assert points[-1].speed == 244
        assert points == speed_sweep(LineConfig(speed=200), LineConfig(speed=100))

    def test_own_speed_is_ignored(self):
        slow = speed_sweep(LineConfig(speed=100), LineConfig(speed=100))
        other = speed_sweep(LineConfig(speed=50), LineConfig(speed=100))
        assert slow == other

    def test_length_formula(self):
        for max_speed in (8, 9.5, 37, 100, 333, 1200):
            extended = math.ceil(max_speed * 1.25)
            step = math.ceil(extended / 20)
            expected = (extended - 10) // step + 1
            assert len(speed_sweep(LineConfig(speed=max_speed), LineConfig(speed=1))) == expected

    def test_smallest_speed_gives_single_point(self):
        assert sweep_speeds(8).tolist() == [10]

    def test_zero_step_is_clamped(self, caplog):
        with caplog.at_level(logging.WARNING, logger="coronaanalysis"):
            speeds = sweep_speeds(0)

        assert speeds.size == 0
        assert "clamped" in caplog.text

    def test_zero_speed_terminates(self):
        assert speed_sweep(LineConfig(speed=0), LineConfig(speed=0)) == []

    @pytest.mark.parametrize("bad", [math.nan, math.inf])
    def test_non_finite_speed_gives_empty_sweep(self, bad):
        assert speed_sweep(LineConfig(speed=bad), LineConfig()) == []
        assert speed_sweep(LineConfig(), LineConfig(speed=bad)) == []

    def test_huge_finite_speed_is_swept(self):
        """ceil(1e300 * 1.25) is far beyond int64; the sweep still has ~20 points."""
        points = speed_sweep(LineConfig(speed=1e300), LineConfig())

        assert 20 <= len(points) <= 21
        assert points[0] == SpeedPoint(speed=10.0, line1=25.0, line4=25.0)
        assert points[-1].speed <= 1.25e300 * (1 + 1e-12)
        assert all(math.isfinite(p.speed) for p in points)
        assert all(b.speed > a.speed for a, b in zip(points, points[1:]))

    def test_speeds_are_floats(self):
        assert all(type(p.speed) is float for p in speed_sweep(LineConfig(), LineConfig()))

    def test_zero_width_gives_infinite_points(self):
        points = speed_sweep(LineConfig(width=0), LineConfig())
        assert all(p.line1 == math.inf for p in points)
        assert points[0].line4 == 25.0

    def test_idempotent(self):
        line1 = LineConfig(width=52, speed=180, power=4, sides=2)
        line4 = LineConfig(width=36, speed=90, power=2.5, sides=1)
        assert speed_sweep(line1, line4) == speed_sweep(line1, line4)


class TestDyneDecay:
    """Test the projected dyne level curve."""

    def test_first_days(self):
        points = dyne_decay(0.03, 42)

        assert points[0] == DecayPoint(day=0, dyne=42.0)
        assert points[1].dyne == 40.74
        assert points[2].dyne == 39.52

    def test_thirty_one_points(self):
        points = dyne_decay(0.03, 42)
        assert [p.day for p in points] == list(range(31))

    def test_last_day(self):
        assert dyne_decay(0.03, 42)[30].dyne == pytest.approx(42 * 0.97 ** 30, abs=0.006)

    def test_running_value_is_not_rounded(self):
        """1, .5, .25, .125, .0625 ... carrying 0.13 forward would give 0.07 on day 4."""
        points = dyne_decay(0.5, 1.0)

        assert points[3].dyne == 0.13
        assert points[4].dyne == 0.06
        assert points[6].dyne == 0.02
        assert points[8].dyne == 0.0

    def test_zero_rate_is_constant(self):
        assert {p.dyne for p in dyne_decay(0.0, 42)} == {42.0}

    def test_full_rate_drops_to_zero(self):
        points = dyne_decay(1.0, 42)
        assert points[0].dyne == 42.0
        assert all(p.dyne == 0.0 for p in points[1:])

    def test_rate_above_one_flips_sign(self):
        points = dyne_decay(1.5, 40)
        assert len(points) == 31
        assert points[1].dyne == -20.0
        assert points[2].dyne == 10.0

    def test_negative_rate_grows(self):
        points = dyne_decay(-0.1, 40)
        assert points[1].dyne == 44.0

    def test_nan_rate_does_not_raise(self):
        points = dyne_decay(math.nan, 42)
        assert points[0].dyne == 42.0
        assert all(math.isnan(p.dyne) for p in points[1:])

    def test_idempotent(self):
        assert dyne_decay(0.025, 44) == dyne_decay(0.025, 44)


class TestMaterialDecay:
    """Test the decay curve of the selected material."""

    def test_uses_desired_dyne_and_selected_rate(self):
        project = ProjectState()
        project.selected_material = "HDPE"
        project.desired_dyne = 50

        assert material_decay(project) == dyne_decay(0.02, 50)

    def test_orphaned_selection_raises(self):
        project = ProjectState()
        project.remove_material("TPO")

        with pytest.raises(MaterialNotFoundError):
            material_decay(project)

    def test_no_selection_raises(self):
        project = ProjectState()
        project.selected_material = None

        with pytest.raises(KeyError):
            material_decay(project)
