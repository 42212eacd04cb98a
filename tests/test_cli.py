"""Tests for the command-line interface."""

import json
import os

import pytest

from strokeshape.cli import main


@pytest.fixture
def stroke_file(tmp_path, square_stroke):
    """Write the square stroke to a JSON file."""
    path = tmp_path / "stroke.json"
    path.write_text(json.dumps({"points": square_stroke, "style": "#123456"}))
    return str(path)


class TestCli:
    """Tests for the CLI commands."""

    def test_no_command_prints_help(self, capsys):
        """Test running without a command shows usage."""
        assert main([]) == 0
        assert "usage" in capsys.readouterr().out

    def test_recognize_to_stdout(self, stroke_file, capsys):
        """Test the result is printed as JSON."""
        assert main(["recognize", "--input", stroke_file]) == 0

        result = json.loads(capsys.readouterr().out)
        assert result["kind"] == "rectangle"
        assert result["style"] == "#123456"

    def test_style_override(self, stroke_file, capsys):
        """Test --style replaces the file's style."""
        main(["recognize", "--input", stroke_file, "--style", "red"])

        assert json.loads(capsys.readouterr().out)["style"] == "red"

    def test_bare_point_list(self, tmp_path, triangle_stroke, capsys):
        """Test files holding only a point list are accepted."""
        path = tmp_path / "triangle.json"
        path.write_text(json.dumps(triangle_stroke))

        assert main(["recognize", "-i", str(path)]) == 0
        assert json.loads(capsys.readouterr().out)["kind"] == "triangle"

    def test_explain(self, stroke_file, capsys):
        """Test --explain lists every family's candidate."""
        main(["recognize", "--input", stroke_file, "--explain"])

        result = json.loads(capsys.readouterr().out)
        assert result["shape"]["kind"] == "rectangle"
        assert [c["kind"] for c in result["candidates"]] == ["rectangle", "circle", "triangle"]

    def test_out_file(self, stroke_file, tmp_path):
        """Test --out writes the result to disk."""
        out = os.path.join(tmp_path, "results", "shape.json")

        assert main(["recognize", "--input", stroke_file, "--out", out]) == 0

        with open(out, "r", encoding="utf-8") as f:
            assert json.load(f)["kind"] == "rectangle"

    def test_missing_input(self, tmp_path, capsys):
        """Test a missing file is reported with exit code 1."""
        assert main(["recognize", "--input", str(tmp_path / "nope.json")]) == 1
        assert "not found" in capsys.readouterr().err

    def test_invalid_stroke(self, tmp_path, capsys):
        """Test malformed points are reported with exit code 1."""
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"points": []}))

        assert main(["recognize", "--input", str(path)]) == 1
        assert "Invalid stroke" in capsys.readouterr().err

    def test_config_changes_result(self, stroke_file, tmp_path, capsys):
        """Test a YAML config is applied to recognition."""
        config_path = tmp_path / "config.yaml"
        config_path.write_text("arbitration:\n  confidence_floor: 0.95\n")

        main(["recognize", "--input", stroke_file, "--config", str(config_path)])

        assert json.loads(capsys.readouterr().out)["kind"] == "freeform"

    def test_init_config(self, tmp_path):
        """Test init-config writes a loadable YAML file."""
        from strokeshape.config import RecognizerConfig, load_config

        out = str(tmp_path / "defaults.yaml")

        assert main(["init-config", "--out", out]) == 0
        assert load_config(out) == RecognizerConfig()
