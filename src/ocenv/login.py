"""Build the shell command that authenticates a workspace against its cluster."""

import shlex

from ocenv.errors import ContractViolation
from ocenv.models import (
    Credentials,
    IndividualClusterCredentials,
    KubeconfigCredentials,
    TokenCredentials,
)


def generate_login_command(credentials: Credentials) -> str:
    """Return the login command line for the active credential mode."""
    if isinstance(credentials, TokenCredentials):
        # The token itself is fetched by ocm when the script runs.
        return f"ocm cluster login --token {shlex.quote(credentials.cluster_id)}"
    if isinstance(credentials, IndividualClusterCredentials):
        return _individual_cluster_login(credentials)
    if isinstance(credentials, KubeconfigCredentials):
        raise ContractViolation("kubeconfig environments have no login command")
    raise ContractViolation(f"unknown credential mode: {credentials!r}")


def _individual_cluster_login(credentials: IndividualClusterCredentials) -> str:
    if not credentials.url:
        raise ContractViolation("individual cluster login requires an API URL")
    if not credentials.username:
        raise ContractViolation("individual cluster login requires a username")
    parts = ["oc", "login", "-u", credentials.username]
    if credentials.password:
        parts += ["-p", credentials.password]
    parts.append(credentials.url)
    return shlex.join(parts)


def has_login_command(credentials: Credentials) -> bool:
    """Return whether a fresh login is needed for this credential mode."""
    return not isinstance(credentials, KubeconfigCredentials)
