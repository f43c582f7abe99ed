"""Tests for the track-geo command line."""

from __future__ import annotations

import json

import click
import pytest
from click.testing import CliRunner

from track_geo.cli import cli


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TRACK_GEO_THRESHOLD_FT", "TRACK_GEO_LOG_LEVEL", "TRACK_GEO_STRICT"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def runner():
    return CliRunner()


def _out(result) -> str:
    return click.unstyle(result.output)


def _write_path(tmp_path, data) -> str:
    path_file = tmp_path / "path.json"
    path_file.write_text(json.dumps(data), encoding="utf-8")
    return str(path_file)


# ── distance ─────────────────────────────────────────────────────────────


class TestDistanceCommand:
    def test_meters(self, runner):
        result = runner.invoke(cli, ["distance", "--from", "0,0", "--to", "0,1"])
        assert result.exit_code == 0, result.output
        assert "111194.9 m" in _out(result)

    def test_kilometers_with_negative_coordinates(self, runner):
        result = runner.invoke(
            cli, ["distance", "--from=-33.8688,151.2093", "--to=-37.8136,144.9631", "--unit", "km"]
        )
        assert result.exit_code == 0, result.output
        assert " km" in _out(result)

    def test_bad_point(self, runner):
        result = runner.invoke(cli, ["distance", "--from", "abc", "--to", "0,1"])
        assert result.exit_code == 2

    def test_strict_rejects_out_of_range(self, runner):
        result = runner.invoke(cli, ["--strict", "distance", "--from", "95,0", "--to", "0,0"])
        assert result.exit_code == 2
        assert "latitude" in _out(result)

    def test_lenient_accepts_out_of_range(self, runner):
        result = runner.invoke(cli, ["distance", "--from", "0,370", "--to", "0,10"])
        assert result.exit_code == 0, result.output
        assert "0.0 m" in _out(result)


# ── near ─────────────────────────────────────────────────────────────────


class TestNearCommand:
    def test_within_default(self, runner):
        result = runner.invoke(cli, ["near", "--from", "40,-74", "--to", "40.0009,-74"])
        assert result.exit_code == 0, result.output
        assert "within 350 ft" in _out(result)
        assert "not within" not in _out(result)

    def test_threshold_option(self, runner):
        result = runner.invoke(
            cli, ["near", "--from", "40,-74", "--to", "40.0009,-74", "--threshold", "300"]
        )
        assert result.exit_code == 0, result.output
        assert "not within 300 ft" in _out(result)

    def test_threshold_from_environment(self, runner, monkeypatch):
        monkeypatch.setenv("TRACK_GEO_THRESHOLD_FT", "300")
        result = runner.invoke(cli, ["near", "--from", "40,-74", "--to", "40.0009,-74"])
        assert result.exit_code == 0, result.output
        assert "not within 300 ft" in _out(result)


# ── elapsed ──────────────────────────────────────────────────────────────


class TestElapsedCommand:
    def test_iso(self, runner):
        result = runner.invoke(cli, ["elapsed", "2024-01-15T12:00:00Z", "2024-01-15T12:00:30Z"])
        assert result.exit_code == 0, result.output
        assert "30.000 s" in _out(result)

    def test_epoch_millis(self, runner):
        result = runner.invoke(cli, ["elapsed", "0", "1500"])
        assert result.exit_code == 0, result.output
        assert "1.500 s" in _out(result)

    def test_unparseable_prints_nan(self, runner):
        result = runner.invoke(cli, ["elapsed", "yesterday", "2024-01-15T12:00:00Z"])
        assert result.exit_code == 0, result.output
        assert "nan s" in _out(result)

    def test_unparseable_strict_fails(self, runner):
        result = runner.invoke(cli, ["--strict", "elapsed", "yesterday", "2024-01-15T12:00:00Z"])
        assert result.exit_code == 1
        assert "cannot parse" in _out(result)


# ── nearest ──────────────────────────────────────────────────────────────


class TestNearestCommand:
    def test_list_path(self, runner, tmp_path):
        path_file = _write_path(tmp_path, [
            {"lat": 0.0, "lon": 0.0},
            {"lat": 0.0, "lon": 1.0},
            {"lat": 0.0, "lon": 2.0},
        ])
        result = runner.invoke(cli, ["nearest", path_file, "--to", "0.1,1.1"])
        assert result.exit_code == 0, result.output
        assert "Nearest vertex (3 in path)" in _out(result)
        assert "1.000000" in _out(result)

    def test_keyed_path(self, runner, tmp_path):
        path_file = _write_path(tmp_path, {
            "-Nabc": {"lat": 10.0, "lon": 10.0},
            "-Nabd": {"lat": 20.0, "lon": 20.0},
            "-Nabe": None,
            "count": 2,
        })
        result = runner.invoke(cli, ["nearest", path_file, "--to", "19,19"])
        assert result.exit_code == 0, result.output
        assert "Nearest vertex (3 in path)" in _out(result)
        assert "20.000000" in _out(result)

    def test_empty_path(self, runner, tmp_path):
        path_file = _write_path(tmp_path, [])
        result = runner.invoke(cli, ["nearest", path_file, "--to", "0,0"])
        assert result.exit_code == 0, result.output
        assert "nearest index 0" in _out(result)

    def test_invalid_json(self, runner, tmp_path):
        path_file = tmp_path / "path.json"
        path_file.write_text("{not json", encoding="utf-8")
        result = runner.invoke(cli, ["nearest", str(path_file), "--to", "0,0"])
        assert result.exit_code == 2
        assert "invalid JSON" in _out(result)

    def test_strict_rejects_bad_vertex(self, runner, tmp_path):
        path_file = _write_path(tmp_path, [{"lat": 0.0, "lon": 0.0}, {"lat": 100.0, "lon": 0.0}])
        result = runner.invoke(cli, ["--strict", "nearest", path_file, "--to", "0,0"])
        assert result.exit_code == 2
        assert "PATH_FILE[1]" in _out(result)
