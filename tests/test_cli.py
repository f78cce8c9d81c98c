"""Tests for the hyperweave command line."""

import json

import pytest
from click.testing import CliRunner

from hyperweave import DiEdge, Graph, UnDiEdge, load_graph, save_graph
from hyperweave.cli.main import cli


@pytest.fixture()
def runner():
    return CliRunner()


@pytest.fixture()
def cycle_file(tmp_path):
    """Undirected 4-cycle saved as JSON."""
    path = tmp_path / "cycle.json"
    save_graph(
        Graph.from_(edges=[UnDiEdge(1, 2), UnDiEdge(2, 3), UnDiEdge(3, 4), UnDiEdge(4, 1)]),
        path,
    )
    return str(path)


class TestGenerate:
    """Tests for the generate command."""

    def test_prints_json(self, runner):
        result = runner.invoke(
            cli, ["generate", "--order", "5", "--min-degree", "2", "--max-degree", "4", "--seed", "1"]
        )
        assert result.exit_code == 0, result.output
        data = json.loads(result.output)
        assert len(data["nodes"]) == 5
        assert all(edge["kind"] == "DiEdge" for edge in data["edges"])

    def test_writes_file(self, runner, tmp_path):
        path = tmp_path / "out.json"
        result = runner.invoke(
            cli,
            ["generate", "--order", "8", "--kind", "TripleEdge", "--seed", "2", "--output", str(path)],
        )
        assert result.exit_code == 0, result.output
        assert "Wrote graph with 8 nodes" in result.output
        g = load_graph(path)
        assert g.order == 8
        assert g.is_connected

    def test_seed_is_reproducible(self, runner):
        args = ["generate", "--order", "6", "--seed", "9"]
        assert runner.invoke(cli, args).output == runner.invoke(cli, args).output

    def test_invalid_degree_range(self, runner):
        result = runner.invoke(cli, ["generate", "--order", "5", "--min-degree", "4", "--max-degree", "2"])
        assert result.exit_code != 0
        assert "must not exceed" in result.output

    def test_unknown_kind(self, runner):
        result = runner.invoke(cli, ["generate", "--order", "5", "--kind", "Bogus"])
        assert result.exit_code != 0

    def test_exhaustion_reported(self, runner):
        result = runner.invoke(cli, ["generate", "--order", "2", "--kind", "TripleEdge"])
        assert result.exit_code == 1
        assert "No edge kind" in result.output


class TestStats:
    """Tests for the stats command."""

    def test_stats(self, runner, cycle_file):
        result = runner.invoke(cli, ["stats", cycle_file])
        assert result.exit_code == 0, result.output
        assert "Order: 4  Size: 4  Total degree: 8" in result.output
        assert "Connected: True" in result.output
        assert "UnDiEdge: 4" in result.output

    def test_scan_incidences(self, runner, cycle_file):
        result = runner.invoke(cli, ["--scan-incidences", "stats", cycle_file])
        assert result.exit_code == 0, result.output
        assert "Degrees: 2..2" in result.output


class TestCheck:
    """Tests for the check command."""

    def test_passes(self, runner, cycle_file):
        result = runner.invoke(cli, ["check", cycle_file, "--min-degree", "2", "--max-degree", "2"])
        assert result.exit_code == 0, result.output
        assert "meets the metrics" in result.output

    def test_fails(self, runner, tmp_path):
        path = tmp_path / "split.json"
        save_graph(Graph.from_(edges=[DiEdge(1, 2), DiEdge(3, 4)]), path)
        result = runner.invoke(cli, ["check", str(path), "--min-degree", "2", "--max-degree", "3"])
        assert result.exit_code == 1
        assert "ERROR: graph has 2 components" in result.output
