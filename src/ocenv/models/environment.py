"""Environment model: one workspace per cluster alias."""

from pathlib import Path

from pydantic import BaseModel

from ocenv.models.credentials import Credentials, KubeconfigCredentials, TokenCredentials

ENV_FILE = ".ocenv"
ZSHENV_FILE = ".zshenv"
BASHRC_FILE = ".bashrc"
KUBECONFIG_FILE = "kubeconfig.json"
KILLPIDS_FILE = ".killpids"
OCM_CONFIG_FILE = "ocm.json"
BIN_DIR = "bin"


class Environment(BaseModel):
    """Resolved options for one workspace."""

    alias: str
    path: Path
    credentials: Credentials = KubeconfigCredentials()
    external_id: str | None = None
    base_domain: str | None = None
    kubeconfig_source: Path | None = None
    reset: bool = False
    temporary: bool = False

    @property
    def cluster_id(self) -> str | None:
        if isinstance(self.credentials, TokenCredentials):
            return self.credentials.cluster_id
        return None

    @property
    def bin_path(self) -> Path:
        return self.path / BIN_DIR

    @property
    def env_file(self) -> Path:
        return self.path / ENV_FILE

    @property
    def zshenv_file(self) -> Path:
        return self.path / ZSHENV_FILE

    @property
    def bashrc_file(self) -> Path:
        return self.path / BASHRC_FILE

    @property
    def kubeconfig_path(self) -> Path:
        return self.path / KUBECONFIG_FILE

    @property
    def killpids_file(self) -> Path:
        return self.path / KILLPIDS_FILE

    @property
    def ocm_config_path(self) -> Path:
        return self.path / OCM_CONFIG_FILE
