"""Set up, enter and tear down a cluster environment."""

import logging
import re
from dataclasses import dataclass
from pathlib import Path
from typing import TextIO

from ocenv.credentials import create_kubeconfig, ensure_env_variables
from ocenv.errors import ContractViolation
from ocenv.models import Environment, OcenvConfig, resolve_credentials
from ocenv.scripts import create_bins
from ocenv.supervisor import Supervisor
from ocenv.workspace import delete, ensure_directory

log = logging.getLogger(__name__)

API_URL_RE = re.compile(r"^https?://api\.([a-zA-Z0-9\-.]+?)(?::6443)?(?:/.*)?$")


@dataclass
class EnvOptions:
    """Options resolved by the CLI and the cluster lookup."""

    alias: str | None = None
    cluster_id: str | None = None
    external_id: str | None = None
    base_domain: str | None = None
    username: str | None = None
    password: str | None = None
    url: str | None = None
    kubeconfig: str | None = None
    reset: bool = False
    temporary: bool = False


def derive_alias(alias: str | None, cluster_id: str | None, url: str | None) -> str:
    """Pick a workspace alias: explicit, else the cluster id, else the API host."""
    if alias:
        return alias
    if cluster_id:
        return cluster_id
    if url:
        match = API_URL_RE.match(url)
        if match:
            return match.group(1)
    raise ContractViolation("an alias, a cluster id or an API URL is required")


def build_environment(options: EnvOptions, config: OcenvConfig) -> Environment:
    """Resolve options into an Environment rooted under the configured envs root."""
    alias = derive_alias(options.alias, options.cluster_id, options.url)
    if alias in {".", ".."} or "/" in alias:
        raise ContractViolation(f"invalid environment alias: {alias!r}")
    credentials = resolve_credentials(
        cluster_id=options.cluster_id,
        username=options.username,
        password=options.password,
        url=options.url,
    )
    kubeconfig = Path(options.kubeconfig).expanduser().absolute() if options.kubeconfig else None
    return Environment(
        alias=alias,
        path=config.envs_root / alias,
        credentials=credentials,
        external_id=options.external_id,
        base_domain=options.base_domain,
        kubeconfig_source=kubeconfig,
        reset=options.reset,
        temporary=options.temporary,
    )


def setup(env: Environment) -> None:
    """Create and populate the workspace for ``env``."""
    if env.reset:
        log.info("resetting environment %s", env.alias)
        delete(env.path)
    ensure_directory(env.path)
    ensure_directory(env.bin_path)
    ensure_env_variables(env)
    create_bins(env)
    create_kubeconfig(env)


def run(env: Environment, out: TextIO | None = None, shell: str | None = None) -> int:
    """Set up the workspace, run a shell in it, and remove it if temporary."""
    try:
        setup(env)
        return Supervisor(env, out=out, shell=shell).start()
    finally:
        if env.temporary:
            delete(env.path)
