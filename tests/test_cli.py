"""Tests for the geomath command line."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from geomath.cli import cli

LONDON_PARIS = ["51.5074", "-0.1278", "48.8566", "2.3522"]


@pytest.fixture
def runner():
    return CliRunner()


class TestDistanceCommand:
    def test_kilometers(self, runner):
        result = runner.invoke(cli, ["distance", *LONDON_PARIS])
        assert result.exit_code == 0, result.output
        text = result.output.strip()
        assert text.endswith("km")
        assert 342.5 < float(text[:-2]) < 344.5

    def test_nautical_miles(self, runner):
        result = runner.invoke(cli, ["distance", *LONDON_PARIS, "--nm", "--precision", "0"])
        assert result.exit_code == 0, result.output
        text = result.output.strip()
        assert text.endswith("nmi")
        assert 184 <= int(text[:-3]) <= 187

    def test_short_distance_in_meters(self, runner):
        result = runner.invoke(cli, ["distance", "0", "0", "0", "0.0001"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() == "11m"

    def test_strict_rejects_out_of_range(self, runner):
        result = runner.invoke(cli, ["--strict", "distance", "95", "0", "0", "0"])
        assert result.exit_code == 2
        assert "latitude 95.0 out of range" in result.output

    def test_lenient_accepts_out_of_range(self, runner):
        result = runner.invoke(cli, ["distance", "95", "0", "0", "0"])
        assert result.exit_code == 0, result.output

    def test_nautical_miles_negative_precision(self, runner):
        result = runner.invoke(cli, ["distance", *LONDON_PARIS, "--nm", "--precision", "-1"])
        assert result.exit_code == 0, result.output
        assert result.output.strip() in ("180nmi", "190nmi")

    def test_rejects_nan_without_strict(self, runner):
        result = runner.invoke(cli, ["distance", "nan", "0", "0", "0"])
        assert result.exit_code == 2
        assert "not a finite number" in result.output


class TestBearingCommand:
    def test_london_paris(self, runner):
        result = runner.invoke(cli, ["bearing", *LONDON_PARIS])
        assert result.exit_code == 0, result.output
        value, direction = result.output.split()
        assert 146 < float(value.rstrip("°")) < 150
        assert direction == "SE"

    def test_rejects_nan(self, runner):
        result = runner.invoke(cli, ["bearing", "nan", "0", "0", "0"])
        assert result.exit_code == 2
        assert "not a finite number" in result.output
        assert result.exception is None or isinstance(result.exception, SystemExit)


class TestWithinCommand:
    def test_inside(self, runner):
        result = runner.invoke(cli, ["within", "0", "0", "0", "0.001", "--radius", "1"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("yes")

    def test_outside(self, runner):
        result = runner.invoke(cli, ["within", "0", "0", "10", "10", "--radius", "1"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("no")

    def test_default_radius(self, runner):
        # Amsterdam to Utrecht, ~34 km, outside the 25 km default
        result = runner.invoke(cli, ["within", "52.3676", "4.9041", "52.0907", "5.1214"])
        assert result.exit_code == 0, result.output
        assert result.output.startswith("no")
        assert "of 25km" in result.output

    def test_strict_rejects_negative_radius(self, runner):
        result = runner.invoke(cli, ["--strict", "within", "0", "0", "0", "0", "--radius", "-1"])
        assert result.exit_code == 2
        assert "negative" in result.output


class TestLegCommand:
    def test_table(self, runner):
        result = runner.invoke(cli, ["leg", *LONDON_PARIS])
        assert result.exit_code == 0, result.output
        assert "Direction" in result.output
        assert "SE" in result.output
        assert "51.5074, -0.1278" in result.output

    def test_rejects_nan(self, runner):
        result = runner.invoke(cli, ["leg", "nan", "0", "0", "0"])
        assert result.exit_code == 2
        assert "not a finite number" in result.output

    def test_rejects_infinity(self, runner):
        result = runner.invoke(cli, ["leg", "0", "0", "inf", "0"])
        assert result.exit_code == 2
