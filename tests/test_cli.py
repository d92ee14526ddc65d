"""Tests for the command line interface."""
import json
import os
import sys

import pytest

# Ensure examples can be imported
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from neontycoon.catalog import default_catalog
from neontycoon.cli import build_strategy, load_catalog, main
from neontycoon.strategy import GreedyCheapest, GreedyROI


def test_load_default_catalog():
    assert load_catalog(None) == default_catalog()


def test_load_example_catalog():
    catalog = load_catalog("examples.tiny_catalog")
    assert catalog.validate() == []
    assert [b.name for b in catalog.get_buildings()] == ["Script Kiddie", "Botnet"]


def test_load_module_without_define_catalog():
    with pytest.raises(SystemExit):
        load_catalog("neontycoon.prestige")


def test_build_strategy():
    assert isinstance(build_strategy("greedy_cheapest", 0), GreedyCheapest)
    roi = build_strategy("greedy_roi", 3.0, "first_opportunity")
    assert isinstance(roi, GreedyROI)
    assert roi.click_profile.clicks_per_second == 3.0
    assert roi.prestige_mode == "first_opportunity"


def test_no_command_prints_help(capsys):
    with pytest.raises(SystemExit) as exc:
        main([])
    assert exc.value.code == 0
    assert "simulate" in capsys.readouterr().out


def test_simulate(capsys):
    main(["simulate", "--terminal-time", "60", "--cps", "5"])
    out = capsys.readouterr().out
    assert "Neon Tycoon Simulation Report" in out
    assert "Data Miner" in out


def test_simulate_example_catalog_with_export(tmp_path, capsys):
    json_path = tmp_path / "out.json"
    main([
        "simulate",
        "--catalog", "examples.tiny_catalog",
        "--strategy", "greedy_roi",
        "--terminal-time", "120",
        "--cps", "5",
        "--export-json", str(json_path),
    ])
    assert "Script Kiddie" in capsys.readouterr().out
    data = json.loads(json_path.read_text())
    assert data["purchase_count"] > 0
