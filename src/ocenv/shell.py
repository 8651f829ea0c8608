"""Shell detection and launch configuration."""

import os
import shutil

from ocenv.errors import ProcessLaunchError
from ocenv.models import Environment, ShellLaunchConfig

FALLBACK_SHELLS = ["bash", "zsh", "sh"]


def _classify_shell(candidate: str) -> str:
    """Return the startup-file flavour for a candidate executable/path."""
    name = os.path.basename(candidate).lower()
    if name == "bash":
        return "bash"
    if name == "zsh":
        return "zsh"
    return "other"


def _resolve_executable(candidate: str) -> str | None:
    """Resolve an executable name or path to a runnable command path."""
    if os.path.sep in candidate:
        if os.path.isfile(candidate) and os.access(candidate, os.X_OK):
            return candidate
        return None
    return shutil.which(candidate)


def _shell_candidates(override: str | None = None) -> list[str]:
    """Return shell candidates in preference order."""
    candidates: list[str] = []
    if override and override.strip():
        candidates.append(override.strip())

    env_override = os.environ.get("OCENV_SHELL", "").strip()
    if env_override:
        candidates.append(env_override)

    env_shell = os.environ.get("SHELL", "").strip()
    if env_shell:
        candidates.append(env_shell)

    candidates.extend(FALLBACK_SHELLS)

    deduped: list[str] = []
    seen: set[str] = set()
    for item in candidates:
        if item in seen:
            continue
        seen.add(item)
        deduped.append(item)
    return deduped


def _detect_shell(override: str | None = None) -> tuple[str, str]:
    """Detect the user's shell and return (kind, executable path)."""
    for candidate in _shell_candidates(override):
        executable = _resolve_executable(candidate)
        if executable:
            return _classify_shell(executable), executable
    raise ProcessLaunchError(
        "No usable shell found. Set SHELL or OCENV_SHELL to an installed shell, "
        "or install bash."
    )


def build_shell_launch_config(
    env: Environment,
    variables: dict[str, str],
    override: str | None = None,
) -> ShellLaunchConfig:
    """Build the launch configuration for a shell scoped to ``env``."""
    kind, executable = _detect_shell(override)
    launch_env = dict(os.environ)
    launch_env.update(variables)
    launch_env["OCENV_ALIAS"] = env.alias

    if kind == "bash":
        return ShellLaunchConfig(
            kind=kind,
            executable=executable,
            argv=[executable, "--rcfile", str(env.bashrc_file)],
            env=launch_env,
        )
    if kind == "zsh":
        launch_env["ZDOTDIR"] = str(env.path)
        return ShellLaunchConfig(
            kind=kind,
            executable=executable,
            argv=[executable],
            env=launch_env,
        )
    return ShellLaunchConfig(
        kind=kind,
        executable=executable,
        argv=[executable],
        env=launch_env,
    )
