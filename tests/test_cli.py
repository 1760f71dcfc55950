"""
Test Layer CLI

End-to-end runs on synthetic Norway data into a temporary directory.
"""
import json

import geopandas as gpd
import pytest

from windscout.cli import main

NORWAY_ARGS = ["--region", "norway", "--synthetic", "--seed", "1", "--resolutions", "3", "4"]


def test_geojson_output(tmp_path, capsys):
    assert main(NORWAY_ARGS + ["--out", str(tmp_path)]) == 0

    assert sorted(p.name for p in tmp_path.iterdir()) == [
        "hex_r3.geojson", "hex_r4.geojson", "summary.json", "turbines.geojson",
    ]
    hexes = json.loads((tmp_path / "hex_r3.geojson").read_text())
    assert hexes["type"] == "FeatureCollection"
    assert sum(f["properties"]["turbine_count"] for f in hexes["features"]) == 1800

    turbines = json.loads((tmp_path / "turbines.geojson").read_text())
    assert len(turbines["features"]) == 1800

    summary = json.loads((tmp_path / "summary.json").read_text())
    assert summary["region"] == "norway"
    assert summary["count"] == 1800
    assert [r["res"] for r in summary["resolutions"]] == [3, 4]
    assert summary["resolutions"][0]["cells"] == len(hexes["features"])

    out = capsys.readouterr().out
    assert "[ok] res=3" in out
    assert "1800 turbines" in out


def test_ndjson_output(tmp_path):
    assert main(NORWAY_ARGS + ["--format", "ndjson", "--out", str(tmp_path)]) == 0

    summary = json.loads((tmp_path / "summary.json").read_text())
    for entry in summary["resolutions"]:
        lines = (tmp_path / f"hex_r{entry['res']}.ndjson").read_text().splitlines()
        assert len(lines) == entry["cells"]
        assert json.loads(lines[0])["type"] == "Feature"


def test_parquet_output(tmp_path):
    assert main(NORWAY_ARGS + ["--format", "parquet", "--out", str(tmp_path)]) == 0

    gdf = gpd.read_parquet(tmp_path / "hex_r4.parquet")
    assert gdf["h3_id"].dtype == "uint64"
    assert gdf["res"].dtype == "int32"
    assert (gdf["res"] == 4).all()
    assert gdf["turbine_count"].sum() == 1800


def test_same_seed_same_output(tmp_path):
    first, second = tmp_path / "a", tmp_path / "b"
    assert main(NORWAY_ARGS + ["--out", str(first)]) == 0
    assert main(NORWAY_ARGS + ["--out", str(second)]) == 0
    assert (first / "hex_r4.geojson").read_text() == (second / "hex_r4.geojson").read_text()


def test_unknown_region(tmp_path, capsys):
    assert main(["--region", "atlantis", "--out", str(tmp_path)]) == 1
    assert "Unknown region" in capsys.readouterr().out


def test_out_of_range_resolution(tmp_path, capsys):
    assert main(["--region", "us", "--synthetic", "--seed", "1", "--resolutions", "16", "--out", str(tmp_path)]) == 1
    assert "Invalid H3 resolution" in capsys.readouterr().out
    assert not any(tmp_path.iterdir())


def test_missing_out(capsys):
    assert main(["--region", "norway", "--synthetic"]) == 1
    assert "--out is required" in capsys.readouterr().out


def test_list_regions(capsys):
    assert main(["--list-regions"]) == 0
    out = capsys.readouterr().out
    assert "norway" in out
    assert "us" in out


def test_build_failure_exit_code(tmp_path, monkeypatch):
    from windscout import cli

    def broken(*args, **kwargs):
        raise RuntimeError("disk on fire")

    monkeypatch.setattr(cli, "build_region_layers", broken)
    assert main(["--region", "norway", "--out", str(tmp_path)]) == 2


def test_bad_format_rejected_by_parser(tmp_path):
    with pytest.raises(SystemExit):
        main(NORWAY_ARGS + ["--format", "csv", "--out", str(tmp_path)])
