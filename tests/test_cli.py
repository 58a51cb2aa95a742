"""CLI smoke tests using typer's CliRunner."""

import json

import pytest
from typer.testing import CliRunner

from iconsmith import config as config_module
from iconsmith.cli.app import app
from iconsmith.cli.commands import config_cmd
from iconsmith.core.models import create_dna

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep the CLI away from the real ~/.config/iconsmith."""
    config_dir = tmp_path / "config"
    config_file = config_dir / "config.json"
    monkeypatch.setattr(config_module, "CONFIG_DIR", config_dir)
    monkeypatch.setattr(config_module, "CONFIG_FILE", config_file)
    monkeypatch.setattr(config_cmd, "CONFIG_FILE", config_file)
    for var in ("ICONSMITH_DEFAULT_STYLE", "ICONSMITH_DNA_PROFILE", "ICONSMITH_CLI_MODE"):
        monkeypatch.delenv(var, raising=False)
    config_module.reset_config()
    yield config_file
    config_module.reset_config()


@pytest.fixture
def dna_file(tmp_path):
    path = tmp_path / "brand.yaml"
    dna = create_dna("brand", "Brand", {"color_mode": "fixed", "primary_color": "#ff0000"})
    path.write_text(dna.to_yaml_str())
    return path


class TestVersionFlag:
    """Test the --version flag."""

    def test_version_output(self):
        result = runner.invoke(app, ["--version"])
        assert result.exit_code == 0
        assert "iconsmith" in result.output


class TestArchetypesCommand:
    """Tests for archetypes and params."""

    def test_list(self):
        result = runner.invoke(app, ["archetypes"])
        assert result.exit_code == 0
        assert "search" in result.output

    def test_list_json(self):
        result = runner.invoke(app, ["--json", "archetypes"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert len(data["archetypes"]) == 16
        assert data["archetypes"][0] == {
            "Id": "home",
            "Name": "Home",
            "Category": "navigation",
            "Parameters": "3",
        }

    def test_params_json(self):
        result = runner.invoke(app, ["--json", "params", "settings"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["archetype"] == "settings"
        teeth = data["parameters"][0]
        assert teeth["Id"] == "toothCount"
        assert (teeth["Min"], teeth["Max"], teeth["Default"]) == ("6", "12", "8")

    def test_params_unknown(self):
        result = runner.invoke(app, ["params", "rocket"])
        assert result.exit_code == 4
        assert "Unknown archetype" in result.output


class TestCompileCommand:
    """Tests for the compile command."""

    def test_defaults_to_stdout(self):
        result = runner.invoke(app, ["compile", "search"])
        assert result.exit_code == 0
        assert result.output.startswith("<svg ")
        assert "</svg>" in result.output

    def test_param_override(self):
        result = runner.invoke(app, ["--json", "compile", "search", "-p", "lensRadius=6"])
        assert result.exit_code == 0
        data = json.loads(result.output)
        assert data["icon"]["parameters"]["lensRadius"] == 6
        assert data["svg"].startswith("<svg ")

    def test_style(self):
        result = runner.invoke(app, ["--json", "compile", "play", "--style", "filled"])
        assert result.exit_code == 0
        assert json.loads(result.output)["icon"]["style"] == "filled"

    def test_out_of_range(self):
        result = runner.invoke(app, ["compile", "settings", "-p", "toothCount=14"])
        assert result.exit_code == 1
        assert "must be <= 12" in result.output

    def test_unknown_parameter(self):
        result = runner.invoke(app, ["compile", "search", "-p", "zoom=2"])
        assert result.exit_code == 1
        assert "zoom" in result.output

    def test_bad_value(self):
        result = runner.invoke(app, ["compile", "search", "-p", "lensRadius=big"])
        assert result.exit_code == 1

    def test_malformed_param(self):
        result = runner.invoke(app, ["compile", "search", "-p", "lensRadius"])
        assert result.exit_code == 1

    def test_unknown_archetype(self):
        result = runner.invoke(app, ["compile", "rocket"])
        assert result.exit_code == 4

    def test_missing_dna(self, tmp_path):
        result = runner.invoke(app, ["compile", "search", "--dna", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 3

    def test_dna_profile(self, dna_file):
        result = runner.invoke(app, ["compile", "search", "--dna", str(dna_file)])
        assert result.exit_code == 0
        assert 'stroke="#ff0000"' in result.output
        assert '"dnaId":"brand"' in result.output

    def test_writes_output_file(self, tmp_path):
        out = tmp_path / "icons" / "trash.svg"
        result = runner.invoke(app, ["compile", "trash", "-o", str(out)])
        assert result.exit_code == 0
        assert out.read_text().startswith("<svg ")

    def test_overwrite_warns(self, tmp_path):
        out = tmp_path / "trash.svg"
        out.write_text("stale")
        result = runner.invoke(app, ["--json", "compile", "trash", "-o", str(out)])
        assert result.exit_code == 0
        payload = json.loads(result.output)
        assert payload["warnings"] == [{"message": f"Overwriting {out}"}]
        assert out.read_text().startswith("<svg ")

    def test_non_finite_param(self):
        result = runner.invoke(app, ["compile", "settings", "-p", "toothCount=nan"])
        assert result.exit_code == 1
        assert "must be a finite number" in result.output

    def test_config_default_style(self, isolated_config):
        isolated_config.parent.mkdir(parents=True)
        isolated_config.write_text(json.dumps({"defaults": {"style": "filled"}}))
        result = runner.invoke(app, ["--json", "compile", "pause"])
        assert result.exit_code == 0
        assert json.loads(result.output)["icon"]["style"] == "filled"

    def test_agent_mode_emits_json(self, monkeypatch):
        monkeypatch.setenv("ICONSMITH_CLI_MODE", "agent")
        result = runner.invoke(app, ["compile", "remove"])
        assert result.exit_code == 0
        assert json.loads(result.output)["status"] == "success"


class TestDnaCommand:
    """Tests for dna show and dna validate."""

    def test_show_default(self):
        result = runner.invoke(app, ["dna", "show"])
        assert result.exit_code == 0
        assert "stroke_width: 1.5" in result.output

    def test_show_file_json(self, dna_file):
        result = runner.invoke(app, ["--json", "dna", "show", str(dna_file)])
        assert result.exit_code == 0
        assert json.loads(result.output)["dna"]["primary_color"] == "#ff0000"

    def test_validate_ok(self, dna_file):
        result = runner.invoke(app, ["dna", "validate", str(dna_file)])
        assert result.exit_code == 0

    def test_validate_invalid(self, tmp_path):
        path = tmp_path / "bad.yaml"
        data = create_dna("bad", "Bad").model_dump(mode="json")
        data["stroke_width"] = 0
        path.write_text(json.dumps(data))

        result = runner.invoke(app, ["--json", "dna", "validate", str(path)])
        assert result.exit_code == 1
        payload = json.loads(result.output)
        assert payload["valid"] is False
        assert payload["errors"][0]["field"] == "stroke_width"

    def test_validate_missing(self, tmp_path):
        result = runner.invoke(app, ["dna", "validate", str(tmp_path / "nope.yaml")])
        assert result.exit_code == 3


class TestConfigCommand:
    """Tests for the config command."""

    def test_config_show(self):
        result = runner.invoke(app, ["config", "show"])
        assert result.exit_code == 0
        assert "Defaults" in result.output
        assert "CLI" in result.output

    def test_config_set_and_reset(self, isolated_config):
        result = runner.invoke(app, ["config", "set", "defaults.style", "filled"])
        assert result.exit_code == 0
        assert json.loads(isolated_config.read_text())["defaults"]["style"] == "filled"

        result = runner.invoke(app, ["config", "reset"])
        assert result.exit_code == 0
        assert not isolated_config.exists()

    def test_config_set_invalid_key(self):
        result = runner.invoke(app, ["config", "set", "invalid.key", "value"])
        assert result.exit_code == 1
        assert "Unknown key" in result.output

    def test_config_set_invalid_value(self):
        result = runner.invoke(app, ["config", "set", "defaults.style", "bold"])
        assert result.exit_code == 1
        assert "Invalid value" in result.output

    def test_config_set_missing_args(self):
        result = runner.invoke(app, ["config", "set"])
        assert result.exit_code == 1

    def test_config_unknown_action(self):
        result = runner.invoke(app, ["config", "unknown_action"])
        assert result.exit_code == 1
        assert "Unknown action" in result.output
