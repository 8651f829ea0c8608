"""Credential modes for logging into a cluster.

Exactly one mode is active per environment. Invalid combinations are
rejected when the model is built, so downstream code never has to guess
which endpoint to authenticate against.
"""

from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, model_validator

from ocenv.errors import ContractViolation


class TokenCredentials(BaseModel):
    """Log in with a cluster-scoped token fetched by cluster id."""

    mode: Literal["token"] = "token"
    cluster_id: str

    @model_validator(mode="after")
    def _require_cluster_id(self) -> "TokenCredentials":
        if not self.cluster_id.strip():
            raise ContractViolation("token login requires a cluster id")
        return self


class IndividualClusterCredentials(BaseModel):
    """Log in directly against an API server with a username."""

    mode: Literal["individual"] = "individual"
    url: str = ""
    username: str = ""
    password: str | None = None

    @model_validator(mode="after")
    def _require_url_and_username(self) -> "IndividualClusterCredentials":
        if not self.url.strip():
            raise ContractViolation(
                "individual cluster login requires an API URL; refusing to guess one"
            )
        if not self.username.strip():
            raise ContractViolation("individual cluster login requires a username")
        return self


class KubeconfigCredentials(BaseModel):
    """No login; the workspace kubeconfig is used as-is."""

    mode: Literal["kubeconfig"] = "kubeconfig"


Credentials = Annotated[
    Union[TokenCredentials, IndividualClusterCredentials, KubeconfigCredentials],
    Field(discriminator="mode"),
]


def resolve_credentials(
    cluster_id: str | None = None,
    username: str | None = None,
    password: str | None = None,
    url: str | None = None,
) -> TokenCredentials | IndividualClusterCredentials | KubeconfigCredentials:
    """Pick the credential mode for a set of resolved options.

    A cluster id takes precedence over username/password.
    """
    if cluster_id:
        return TokenCredentials(cluster_id=cluster_id)
    if url or username:
        return IndividualClusterCredentials(
            url=url or "",
            username=username or "",
            password=password or None,
        )
    return KubeconfigCredentials()
