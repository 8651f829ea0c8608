"""Model package for ocenv."""

from ocenv.models.credentials import (
    Credentials,
    IndividualClusterCredentials,
    KubeconfigCredentials,
    TokenCredentials,
    resolve_credentials,
)
from ocenv.models.environment import Environment
from ocenv.models.ocenv_config import DEFAULT_ENVS_ROOT, OcenvConfig
from ocenv.models.shell_launch_config import ShellLaunchConfig

__all__ = [
    "Credentials",
    "DEFAULT_ENVS_ROOT",
    "Environment",
    "IndividualClusterCredentials",
    "KubeconfigCredentials",
    "OcenvConfig",
    "ShellLaunchConfig",
    "TokenCredentials",
    "resolve_credentials",
]
