"""Unit tests for ocenv.shell."""

from pathlib import Path
from unittest.mock import patch

import pytest

from ocenv.errors import ProcessLaunchError
from ocenv.models import Environment
from ocenv.shell import (
    _classify_shell,
    _detect_shell,
    _shell_candidates,
    build_shell_launch_config,
)


class TestShellDetection:
    def test_classifies_shell_names(self):
        assert _classify_shell("bash") == "bash"
        assert _classify_shell("/bin/zsh") == "zsh"
        assert _classify_shell("/usr/bin/fish") == "other"

    @patch.dict("os.environ", {"OCENV_SHELL": "zsh", "SHELL": "/bin/bash"}, clear=False)
    def test_candidates_prefer_override_then_env(self):
        assert _shell_candidates() == ["zsh", "/bin/bash", "bash", "sh"]

    @patch.dict("os.environ", {"SHELL": "/bin/bash"}, clear=True)
    def test_explicit_override_comes_first(self):
        assert _shell_candidates("/opt/fish")[:2] == ["/opt/fish", "/bin/bash"]

    @patch.dict("os.environ", {"SHELL": "/bin/zsh"}, clear=True)
    @patch("ocenv.shell._resolve_executable", side_effect=lambda value: value)
    def test_detect_shell_uses_shell_env(self, _resolve):
        assert _detect_shell() == ("zsh", "/bin/zsh")

    @patch.dict("os.environ", {"SHELL": "/usr/local/bin/missing"}, clear=True)
    @patch(
        "ocenv.shell._resolve_executable",
        side_effect=lambda value: {"bash": "/bin/bash"}.get(value),
    )
    def test_detect_shell_falls_back_to_bash(self, _resolve):
        assert _detect_shell() == ("bash", "/bin/bash")

    @patch.dict("os.environ", {}, clear=True)
    @patch("ocenv.shell._resolve_executable", return_value=None)
    def test_no_shell_raises_launch_error(self, _resolve):
        with pytest.raises(ProcessLaunchError, match="OCENV_SHELL"):
            _detect_shell()


class TestBuildShellLaunchConfig:
    env = Environment(alias="test", path=Path("/home/user/ocenv/test"))

    @patch("ocenv.shell._detect_shell", return_value=("zsh", "/bin/zsh"))
    def test_zsh_reads_startup_files_from_workspace(self, _detect):
        launch = build_shell_launch_config(self.env, {"FOO": "bar"})
        assert launch.argv == ["/bin/zsh"]
        assert launch.env["ZDOTDIR"] == "/home/user/ocenv/test"
        assert launch.env["FOO"] == "bar"
        assert launch.env["OCENV_ALIAS"] == "test"

    @patch("ocenv.shell._detect_shell", return_value=("bash", "/bin/bash"))
    def test_bash_uses_workspace_rcfile(self, _detect):
        launch = build_shell_launch_config(self.env, {})
        assert launch.argv == ["/bin/bash", "--rcfile", "/home/user/ocenv/test/.bashrc"]
        assert "ZDOTDIR" not in launch.env or launch.env["ZDOTDIR"] != str(self.env.path)

    @patch.dict("os.environ", {"INHERITED": "yes", "PATH": "/usr/bin"}, clear=True)
    @patch("ocenv.shell._detect_shell", return_value=("other", "/bin/sh"))
    def test_workspace_variables_override_inherited_ones(self, _detect):
        launch = build_shell_launch_config(self.env, {"PATH": "/ws/bin:/usr/bin"})
        assert launch.argv == ["/bin/sh"]
        assert launch.env["INHERITED"] == "yes"
        assert launch.env["PATH"] == "/ws/bin:/usr/bin"
