"""Tests for the visionaid CLI."""

import json

import pytest
from PIL import Image
from typer.testing import CliRunner

from visionaid import __version__
from visionaid.cli import app

runner = CliRunner()


@pytest.fixture(autouse=True)
def quiet_env(tmp_path, monkeypatch):
    """Run from an empty directory with warning-level logs."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("VISIONAID_DEVICE__LOG_LEVEL", "WARNING")
    monkeypatch.delenv("VISIONAID_MOCK_MODE", raising=False)


@pytest.fixture
def image_path(tmp_path):
    """Two-tone PNG: red on the left, blue on the right."""
    image = Image.new("RGB", (40, 10), color=(255, 0, 0))
    image.paste((0, 0, 255), (20, 0, 40, 10))
    path = tmp_path / "two_tone.png"
    image.save(path)
    return path


class TestColorsCommand:
    """Tests for the colors command."""

    def test_json(self, image_path):
        result = runner.invoke(app, ["colors", str(image_path), "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert [c["name"] for c in data["colors"]] == ["Red", "Blue"]
        assert data["summary"] == "The main colors are: Red, Blue"
        assert data["analysis"] is None

    def test_table(self, image_path):
        result = runner.invoke(app, ["colors", str(image_path)])

        assert result.exit_code == 0, result.output
        assert "Dominant Colors" in result.stdout
        assert "#e00000" in result.stdout
        assert "The main colors are: Red, Blue" in result.stdout

    def test_describe_in_mock_mode(self, image_path, monkeypatch):
        monkeypatch.setenv("VISIONAID_MOCK_MODE", "1")

        result = runner.invoke(app, ["colors", str(image_path), "--describe", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["analysis"]

    def test_missing_file(self, tmp_path):
        result = runner.invoke(app, ["colors", str(tmp_path / "missing.png")])

        assert result.exit_code == 1


class TestPickCommand:
    """Tests for the pick command."""

    def test_json(self, image_path):
        result = runner.invoke(app, ["pick", str(image_path), "30", "5", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["name"] == "Blue"
        assert data["rgb"] == "rgb(0,0,255)"
        assert data["hsl"] == "hsl(240,100%,50%)"

    def test_announcement(self, image_path):
        result = runner.invoke(app, ["pick", str(image_path), "0", "0"])

        assert result.exit_code == 0, result.output
        assert "Color detected: Red." in result.stdout

    def test_out_of_bounds(self, image_path):
        result = runner.invoke(app, ["pick", str(image_path), "40", "0"])

        assert result.exit_code == 1
        assert "Unable to detect color" in result.stdout


class TestOtherCommands:
    """Tests for config and version commands."""

    def test_config_json(self):
        result = runner.invoke(app, ["config", "--json"])

        assert result.exit_code == 0, result.output
        data = json.loads(result.stdout)
        assert data["colors"]["sample_stride"] == 10

    def test_config_from_file(self, tmp_path):
        path = tmp_path / "custom.yaml"
        path.write_text("colors:\n  max_colors: 2\n")

        result = runner.invoke(app, ["--config", str(path), "config", "--json"])

        assert result.exit_code == 0, result.output
        assert json.loads(result.stdout)["colors"]["max_colors"] == 2

    def test_version(self):
        result = runner.invoke(app, ["version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout
