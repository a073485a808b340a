"""
Tests for the command-line interface.
"""

import json

import pytest
from click.testing import CliRunner

from tileurl.cli import main


@pytest.fixture
def runner():
    return CliRunner()


def test_expand_command(runner):
    """Test that expand prints one template per line."""
    result = runner.invoke(main, ["expand", "https://{a-c}.tile.example/{z}/{x}/{y}.png"])

    assert result.exit_code == 0
    assert result.output.splitlines() == [
        "https://a.tile.example/{z}/{x}/{y}.png",
        "https://b.tile.example/{z}/{x}/{y}.png",
        "https://c.tile.example/{z}/{x}/{y}.png",
    ]


def test_resolve_command(runner):
    """Test resolving a top-left origin tile."""
    result = runner.invoke(main, ["resolve", "https://tile.example/{z}/{x}/{y}.png", "3", "4", "2"])

    assert result.exit_code == 0
    assert result.output.strip() == "https://tile.example/3/4/2.png"


def test_resolve_inverted_y(runner):
    """Test that {-y} counts rows from the bottom."""
    result = runner.invoke(main, ["resolve", "{z}/{x}/{-y}", "3", "4", "2"])

    assert result.exit_code == 0
    assert result.output.strip() == "3/4/5"


def test_resolve_tms_row(runner):
    """Test that --tms rows map back to the same tile."""
    result = runner.invoke(main, ["resolve", "{z}/{x}/{y}/{-y}", "3", "4", "5", "--tms"])

    assert result.exit_code == 0
    assert result.output.strip() == "3/4/2/5"


def test_resolve_sharded(runner):
    """Test that resolve picks one endpoint from an expanded url."""
    result = runner.invoke(main, ["resolve", "{a-b}/{z}/{x}/{y}", "1", "1", "0", "-v"])

    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert "Templates: 2" in lines[0]
    assert "Endpoint: 1" in lines[1]
    assert lines[-1] == "b/1/1/0"


def test_resolve_inverted_y_beyond_grid(runner):
    """Test that {-y} outside the grid aborts with a message."""
    result = runner.invoke(main, ["resolve", "{z}/{x}/{-y}", "3", "0", "0", "--max-zoom", "2"])

    assert result.exit_code == 1
    assert "placeholder requires" in result.output


def test_resolve_rejects_negative_zoom(runner):
    """Test that zoom levels must not be negative."""
    result = runner.invoke(main, ["resolve", "{z}", "--", "-1", "0", "0"])

    assert result.exit_code == 2


def test_shard_command(runner):
    """Test the endpoint distribution for a small zoom level."""
    result = runner.invoke(main, ["shard", "{a-b}/{z}/{x}/{y}", "--zoom", "1"])

    assert result.exit_code == 0
    assert "Endpoints at z1" in result.output
    assert "Distribution over 4 tiles" in result.output
    assert "0: 2" in result.output
    assert "1: 2" in result.output


def test_shard_limit(runner):
    """Test that --limit bounds the listed tiles."""
    result = runner.invoke(main, ["shard", "{a-d}/{z}/{x}/{y}", "-z", "2", "--limit", "3"])

    assert result.exit_code == 0
    assert "2/0/0" in result.output
    assert "2/2/0" in result.output
    assert "2/3/0" not in result.output


def test_sources_command(runner, tmp_path):
    """Test resolving a tile against a definition file."""
    path = tmp_path / "sources.json"
    path.write_text(json.dumps({
        "sources": [
            {"name": "plain", "url": "t/{z}/{x}/{y}"},
            {"name": "nogrid", "url": "u/{-y}"},
        ]
    }), encoding="utf-8")

    result = runner.invoke(main, ["sources", str(path), "1", "1", "0"])

    assert result.exit_code == 0
    assert "plain" in result.output
    assert "t/1/1/0" in result.output
    assert "nogrid" in result.output
    assert "requires" in result.output


def test_sources_command_bad_file(runner, tmp_path):
    """Test that invalid definition files abort."""
    path = tmp_path / "sources.json"
    path.write_text(json.dumps({"sources": [{"name": "a"}]}), encoding="utf-8")

    result = runner.invoke(main, ["sources", str(path), "0", "0", "0"])

    assert result.exit_code == 1
    assert "Failed to load sources" in result.output


def test_resolve_empty_range(runner):
    """Test that a range expanding to nothing aborts."""
    result = runner.invoke(main, ["resolve", "t{3-1}/{z}", "0", "0", "0"])

    assert result.exit_code == 1
    assert "expands to no templates" in result.output


def test_shard_rejects_negative_limit(runner):
    """Test that --limit must not be negative."""
    result = runner.invoke(main, ["shard", "{a-b}/{z}", "-z", "1", "--limit", "-1"])

    assert result.exit_code == 2
    assert "Invalid value" in result.output


def test_sources_command_not_gzip(runner, tmp_path):
    """Test that a broken gzip definition file aborts with a message."""
    path = tmp_path / "sources.json.gz"
    path.write_bytes(b"not gzip at all")

    result = runner.invoke(main, ["sources", str(path), "0", "0", "0"])

    assert result.exit_code == 1
    assert "Failed to load sources" in result.output
