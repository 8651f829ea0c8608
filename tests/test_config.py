"""Unit tests for ocenv.config."""

import json
from unittest.mock import patch

import pytest

from ocenv.config import load_config
from ocenv.models import DEFAULT_ENVS_ROOT


class TestLoadConfig:
    @patch.dict("os.environ", {}, clear=True)
    def test_missing_file_gives_defaults(self, tmp_path):
        config = load_config(tmp_path / "config.json")
        assert config.envs_root == DEFAULT_ENVS_ROOT.absolute()
        assert config.shell is None

    @patch.dict("os.environ", {}, clear=True)
    def test_reads_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"envs_root": str(tmp_path / "envs"), "shell": "/bin/zsh"}))
        config = load_config(path)
        assert config.envs_root == tmp_path / "envs"
        assert config.shell == "/bin/zsh"

    def test_environment_overrides_file(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"envs_root": "/from/file", "shell": "/bin/zsh"}))
        with patch.dict(
            "os.environ", {"OCENV_ROOT": str(tmp_path / "env"), "OCENV_SHELL": "/bin/bash"}
        ):
            config = load_config(path)
        assert config.envs_root == tmp_path / "env"
        assert config.shell == "/bin/bash"

    @patch.dict("os.environ", {}, clear=True)
    def test_invalid_json_raises_value_error(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text("{not json")
        with pytest.raises(ValueError, match="Could not read"):
            load_config(path)

    @patch.dict("os.environ", {}, clear=True)
    def test_invalid_field_raises_value_error(self, tmp_path):
        path = tmp_path / "config.json"
        path.write_text(json.dumps({"shell": ["not", "a", "string"]}))
        with pytest.raises(ValueError, match="Invalid configuration"):
            load_config(path)
