"""Tests for the geo-distance command line."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from geo_distance.cli import cli
from geo_distance.presets import PRESETS


class TestDistanceCommand:
    def test_default_pair_json(self):
        result = CliRunner().invoke(cli, ["distance", "--json"])
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["geodesic_km"] == pytest.approx(9131.77, abs=0.05)
        assert payload["euclidean_km"] < payload["geodesic_km"]

    def test_explicit_pair(self):
        result = CliRunner().invoke(
            cli, ["distance", "--lat1=0", "--lon1=0", "--lat2=0", "--lon2=0", "--json"],
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["geodesic_km"] == 0.0
        assert payload["euclidean_km"] == 0.0

    def test_antipodal_pair(self):
        result = CliRunner().invoke(
            cli, ["distance", "--lat1=-82", "--lon1=-180", "--lat2=82", "--lon2=0", "--json"],
        )
        assert result.exit_code == 0, result.output
        payload = json.loads(result.output)
        assert payload["geodesic_km"] == pytest.approx(20015.09, abs=0.01)
        assert payload["euclidean_km"] == pytest.approx(12742.0, abs=0.01)

    def test_table_output(self):
        result = CliRunner().invoke(cli, ["distance"])
        assert result.exit_code == 0, result.output
        assert "Geodesic" in result.output
        assert "Euclidean" in result.output

    def test_invalid_pair(self):
        result = CliRunner().invoke(cli, ["distance", "--lat1=95", "--json"])
        assert result.exit_code != 0
        assert "Invalid coordinates" in result.output


class TestPresetsCommand:
    def test_json_history_in_preset_order(self):
        result = CliRunner().invoke(cli, ["--log-level", "WARNING", "presets", "--json"])
        assert result.exit_code == 0, result.output
        records = json.loads(result.output)
        assert len(records) == len(PRESETS)
        dests = [(r["lat2"], r["lon2"]) for r in records]
        assert dests == [p.pair.destination.as_tuple() for p in PRESETS.values()]
        assert all(r["euclidean_km"] < r["geodesic_km"] for r in records)

    def test_table_output(self):
        result = CliRunner().invoke(cli, ["presets"])
        assert result.exit_code == 0, result.output
        assert "Preset Routes" in result.output
