"""Tests for configuration, logging and the command line."""

import json
import logging

import pytest

from form_engine import cli
from form_engine.config import FormEngineConfig, get_config, update_config
from form_engine.logger import get_engine_logger
from form_engine.orchestrator import compute_form_state
from form_engine.rules.constants import REQUIRED_MESSAGE


@pytest.fixture
def restore_config():
    """Restore global config values changed by a test."""
    saved = dict(vars(get_config()))
    yield get_config()
    update_config(**saved)


class TestFormEngineConfig:
    """Tests for FormEngineConfig."""

    def test_defaults(self):
        """Test default values."""
        config = FormEngineConfig()
        assert config.debug is False
        assert config.logger_name == "form_engine"
        assert config.indent_json_output == 2

    def test_from_env(self, monkeypatch):
        """Test reading environment variables."""
        monkeypatch.setenv("FORM_ENGINE_DEBUG", "TRUE")
        monkeypatch.setenv("FORM_ENGINE_LOG_LEVEL", "info")
        monkeypatch.setenv("FORM_ENGINE_JSON_INDENT", "4")
        config = FormEngineConfig.from_env()
        assert config.debug is True
        assert config.log_level == "INFO"
        assert config.indent_json_output == 4

    def test_update_config_ignores_unknown_keys(self, restore_config):
        """Test that update_config only sets known settings."""
        config = update_config(indent_json_output=4, bogus=1)
        assert config.indent_json_output == 4
        assert not hasattr(config, "bogus")

    def test_required_message_is_not_configurable(self, monkeypatch, restore_config):
        """Test that config changes never alter the required error."""
        monkeypatch.setenv("FORM_ENGINE_REQUIRED_MESSAGE", "changed")
        update_config(**vars(FormEngineConfig.from_env()), required_message="changed")
        assert not hasattr(get_config(), "required_message")
        schema = {
            "fields": {
                "reason": {
                    "label": "Reason",
                    "widget": "text",
                    "rules": {
                        "effect": "REQUIRE",
                        "condition": {"field": "reason", "operator": "empty"},
                    },
                }
            }
        }
        state = compute_form_state(schema, {})
        assert state.fields["reason"].error == REQUIRED_MESSAGE == "This field is required"


class TestEngineLogger:
    """Tests for the gated engine logger."""

    def test_silent_without_debug(self, caplog):
        """Test that nothing is emitted unless debug was requested."""
        caplog.set_level(logging.DEBUG, logger="form_engine")
        get_engine_logger("probe", is_debug=False).debug("hidden")
        assert not caplog.records

    def test_prefixed_when_debug(self, caplog):
        """Test prefixed output with debug enabled."""
        caplog.set_level(logging.DEBUG, logger="form_engine")
        get_engine_logger("probe", is_debug=True).debug("visible")
        assert caplog.records[0].name == "form_engine.probe"
        assert caplog.records[0].getMessage() == "[probe] visible"

    def test_config_default(self, caplog, restore_config):
        """Test that is_debug falls back to config.debug."""
        caplog.set_level(logging.DEBUG, logger="form_engine")
        update_config(debug=True)
        get_engine_logger("probe").debug("from config")
        assert len(caplog.records) == 1


class TestCli:
    """Tests for the command line entry point."""

    SCHEMA = {
        "fields": {
            "name": {"label": "Name", "widget": "text", "autoSave": True},
            "age": {"label": "Age", "widget": "number-input"},
        }
    }

    def _run(self, monkeypatch, capsys, *argv):
        monkeypatch.setattr("sys.argv", ["form-engine", *argv])
        cli.main()
        return json.loads(capsys.readouterr().out)

    @pytest.fixture
    def files(self, tmp_path):
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps(self.SCHEMA))
        data = tmp_path / "data.json"
        data.write_text(json.dumps({"name": "Ada", "age": "30"}))
        return str(schema), str(data)

    def test_state(self, monkeypatch, capsys, files):
        """Test the state command."""
        output = self._run(monkeypatch, capsys, "state", *files)
        assert output["isValid"] is True
        assert output["fields"]["age"]["value"] == 30

    def test_submit(self, monkeypatch, capsys, files):
        """Test the submit command."""
        output = self._run(monkeypatch, capsys, "submit", *files)
        assert output["success"] is True
        assert output["data"] == {"name": "Ada", "age": 30}

    def test_autosave(self, monkeypatch, capsys, files):
        """Test the autosave command."""
        output = self._run(monkeypatch, capsys, "autosave", *files)
        assert output == {"shouldSave": True, "payload": {"name": "Ada"}}

    def test_lint(self, monkeypatch, capsys, files):
        """Test the lint command."""
        assert self._run(monkeypatch, capsys, "lint", files[0]) == []

    def test_bad_schema_exits(self, monkeypatch, capsys, tmp_path):
        """Test that schema errors exit with status 1."""
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps({"fields": ["x"]}))
        monkeypatch.setattr("sys.argv", ["form-engine", "lint", str(schema)])
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_lint_reports_skipped_fields(self, monkeypatch, capsys, tmp_path):
        """Test that a malformed field is reported rather than fatal."""
        schema = tmp_path / "schema.json"
        schema.write_text(json.dumps({"fields": {"x": {"widget": 5}, "y": {"label": "Y"}}}))
        output = self._run(monkeypatch, capsys, "lint", str(schema))
        assert [(issue["path"], issue["severity"]) for issue in output] == [("x", "error")]
