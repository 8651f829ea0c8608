"""Write the kubeconfig and shell variable files into a workspace."""

import logging
import os
import shlex
import shutil
import sys
from pathlib import Path
from typing import TextIO

from ocenv.errors import SetupError
from ocenv.models import Environment
from ocenv.workspace import ensure_file

log = logging.getLogger(__name__)

KUBECONFIG_PERMISSIONS = 0o600


def create_kubeconfig(env: Environment) -> None:
    """Copy the supplied kubeconfig into the workspace, owner-only."""
    if env.kubeconfig_source is None:
        log.debug("no kubeconfig source for %s, login script will be used", env.alias)
        return
    target = env.kubeconfig_path
    try:
        with open(env.kubeconfig_source, "rb") as src:
            fd = os.open(target, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, KUBECONFIG_PERMISSIONS)
            with os.fdopen(fd, "wb") as dst:
                # An existing file keeps its old mode through O_CREAT.
                os.fchmod(dst.fileno(), KUBECONFIG_PERMISSIONS)
                shutil.copyfileobj(src, dst)
    except OSError as e:
        raise SetupError(
            f"Could not copy kubeconfig {env.kubeconfig_source} to {target}: {e}"
        ) from e
    log.debug("copied kubeconfig to %s", target)


def env_variables(env: Environment) -> dict[str, str]:
    """Return the variables a fresh workspace exports, in file order."""
    variables = {
        "KUBECONFIG": str(env.kubeconfig_path),
        "OCM_CONFIG": str(env.ocm_config_path),
        "PS1": f"[{env.alias} $(kube_ps1)] $ ",
        "PATH": f"{env.bin_path}{os.pathsep}{os.environ.get('PATH', '')}",
    }
    if env.cluster_id:
        variables["CLUSTERID"] = env.cluster_id
    if env.external_id:
        variables["EXTERNALID"] = env.external_id
    if env.base_domain:
        variables["BASEDOMAIN"] = env.base_domain
    return variables


def ensure_env_variables(env: Environment) -> None:
    """Write .ocenv and the shell startup files that source it.

    Files that already exist are left alone, so repeated setup of the same
    workspace never duplicates lines.
    """
    env_file = ensure_file(env.env_file)
    if env_file is not None:
        with env_file:
            for key, value in env_variables(env).items():
                env_file.write(f"{key}={shlex.quote(value)}\n")

    zshenv = ensure_file(env.zshenv_file)
    if zshenv is not None:
        with zshenv:
            zshenv.write('setopt PROMPT_SUBST 2>/dev/null\nsource "${ZDOTDIR:-.}/.ocenv"\n')

    bashrc = ensure_file(env.bashrc_file)
    if bashrc is not None:
        with bashrc:
            bashrc.write(
                # Keep the user's usual bash setup, then let the workspace win.
                "[ -f ~/.bashrc ] && source ~/.bashrc\n"
                f"source {shlex.quote(str(env.env_file))}\n"
            )


def read_env_file(path: Path) -> dict[str, str]:
    """Parse KEY=value lines written by ensure_env_variables."""
    variables: dict[str, str] = {}
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.readlines()
    except FileNotFoundError:
        return variables

    for raw in lines:
        line = raw.strip()
        if not line or line.startswith("#"):
            continue
        if line.startswith("export "):
            line = line[len("export "):].lstrip()
        key, sep, value = line.partition("=")
        if not sep or not key:
            log.debug("skipping malformed line in %s: %r", path, raw)
            continue
        try:
            variables[key] = "".join(shlex.split(value))
        except ValueError:
            variables[key] = value
    return variables


def print_kubeconfig_export(env: Environment, out: TextIO | None = None) -> None:
    """Print the export line for using the workspace kubeconfig elsewhere."""
    stream = sys.stdout if out is None else out
    stream.write(f"export KUBECONFIG={env.kubeconfig_path}\n")
