"""Tests for the command line interface."""

import pytest
from click.testing import CliRunner

from turtlesoup.cli import main
from turtlesoup.config import CanvasConfig, Config


@pytest.fixture
def runner():
    return CliRunner()


def test_artwork(runner, tmp_path):
    out = tmp_path / "art.html"
    result = runner.invoke(main, ["artwork", "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert "Navigation Path Details:" in result.output
    assert result.output.count("Move ") == 2
    assert f"Visualization exported to {out}" in result.output
    assert out.read_text().count("<line ") == 5 * sum(range(3, 9)) + 2


def test_artwork_stats(runner, tmp_path):
    result = runner.invoke(main, ["artwork", "--stats", "-o", str(tmp_path / "a.html")])

    assert result.exit_code == 0, result.output
    assert "Stats: {'segments': 167" in result.output


def test_polygon(runner, tmp_path):
    out = tmp_path / "hex.html"
    result = runner.invoke(main, ["polygon", "40", "6", "--color", "gold", "-o", str(out)])

    assert result.exit_code == 0, result.output
    html = out.read_text()
    assert html.count('stroke="gold"') == 6


def test_polygon_zero_sides_fails(runner, tmp_path):
    out = tmp_path / "bad.html"
    result = runner.invoke(main, ["polygon", "40", "0", "-o", str(out)])

    assert result.exit_code == 1
    assert "num_sides" in result.output
    assert not out.exists()


def test_spiral(runner, tmp_path):
    out = tmp_path / "spiral.html"
    result = runner.invoke(main, ["spiral", "30", "24", "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert out.read_text().count("<line ") == 24


def test_spiral_zero_iterations_fails(runner, tmp_path):
    result = runner.invoke(main, ["spiral", "30", "0", "-o", str(tmp_path / "s.html")])
    assert result.exit_code == 1
    assert "iterations" in result.output


def test_path(runner, tmp_path):
    result = runner.invoke(main, ["path", "0,0", "3,4", "-o", str(tmp_path / "p.html")])

    assert result.exit_code == 0, result.output
    assert "Turn 53.13 degrees" in result.output
    assert "Move 5.00 units" in result.output


def test_path_negative_coordinates(runner, tmp_path):
    result = runner.invoke(
        main, ["path", "-o", str(tmp_path / "p.html"), "--", "0,0", "-3,-4"]
    )

    assert result.exit_code == 0, result.output
    assert "Move 5.00 units" in result.output


def test_path_bad_point(runner):
    result = runner.invoke(main, ["path", "0,0", "nope"])
    assert result.exit_code == 2
    assert "expected X,Y" in result.output


def test_export_failure(runner, tmp_path):
    result = runner.invoke(main, ["artwork", "-o", str(tmp_path / "missing" / "a.html")])
    assert result.exit_code == 1
    assert "cannot write" in result.output


def test_validate(runner):
    result = runner.invoke(main, ["validate", "--stats"])

    assert result.exit_code == 0, result.output
    assert "OK" in result.output
    assert "Stats:" in result.output


def test_config_option(runner, tmp_path):
    config_path = tmp_path / "render.json"
    Config(canvas=CanvasConfig(width=300, height=200)).save(config_path)
    out = tmp_path / "sq.html"

    result = runner.invoke(main, ["-c", str(config_path), "polygon", "10", "4", "-o", str(out)])

    assert result.exit_code == 0, result.output
    assert '<svg width="300" height="200">' in out.read_text()


@pytest.mark.parametrize(
    "content", ["{not json", '{"stroke": {"opacity": 3}}', "[1, 2]"]
)
def test_bad_config_is_a_usage_error(runner, tmp_path, content):
    config_path = tmp_path / "render.json"
    config_path.write_text(content)

    result = runner.invoke(main, ["-c", str(config_path), "polygon", "10", "4"])

    assert result.exit_code == 2
    assert "--config" in result.output
    assert result.exception is None or isinstance(result.exception, SystemExit)
