"""Tests for the litmarkup CLI."""

import json

import pytest
from typer.testing import CliRunner

from litmarkup import __version__
from litmarkup.cli import typer_app

runner = CliRunner()


@pytest.fixture
def page(tmp_path):
    path = tmp_path / "page.xml"
    path.write_text('<p class="[[[1]]]">\n  Hello [[[0]]]\n</p>\n', encoding="utf-8")
    return path


def test_version():
    result = runner.invoke(typer_app, ["--version"])
    assert result.exit_code == 0
    assert f"litmarkup {__version__}" in result.output


def test_render_with_values(page, tmp_path):
    values = tmp_path / "values.yaml"
    values.write_text("- world\n- greeting\n")
    result = runner.invoke(typer_app, ["render", str(page), "--values", str(values)])
    assert result.exit_code == 0
    assert result.stdout.strip() == '<p class="greeting"> Hello world </p>'


def test_render_missing_values_uses_settings(page, tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("missing_substitution: empty\n")
    result = runner.invoke(typer_app, ["render", str(page), "--config", str(config)])
    assert result.exit_code == 0
    assert result.stdout.strip() == '<p class=""> Hello  </p>'


def test_render_missing_values_errors(page, tmp_path):
    config = tmp_path / "settings.yaml"
    config.write_text("missing_substitution: error\n")
    result = runner.invoke(typer_app, ["render", str(page), "--config", str(config)])
    assert result.exit_code == 1
    assert "Error:" in result.output


def test_parse_prints_ir_json(page):
    result = runner.invoke(typer_app, ["parse", str(page)])
    assert result.exit_code == 0
    data = json.loads(result.stdout)
    assert data["type"] == "element"
    assert data["name"] == {"type": "tag", "name": "p"}
    assert data["attributes"]["class"] == {"type": "marker", "index": 1}


def test_check_ok(page):
    result = runner.invoke(typer_app, ["check", str(page)])
    assert result.exit_code == 0
    assert "ok" in result.output


def test_check_reports_syntax_error(tmp_path):
    path = tmp_path / "bad.xml"
    path.write_text("<p><b></p>")
    result = runner.invoke(typer_app, ["check", str(path)])
    assert result.exit_code == 1
    assert "mismatched tag" in result.output


def test_check_reports_unknown_component(tmp_path):
    path = tmp_path / "component.xml"
    path.write_text("<div><CliNowhere/></div>")
    result = runner.invoke(typer_app, ["check", str(path)])
    assert result.exit_code == 1
    assert 'Couldn\'t find definition for "CliNowhere"' in result.output


def test_missing_file(tmp_path):
    result = runner.invoke(typer_app, ["render", str(tmp_path / "absent.xml")])
    assert result.exit_code == 1
    assert "not found" in result.output
