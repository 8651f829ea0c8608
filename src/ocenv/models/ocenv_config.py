"""Configuration model for ocenv."""

from pathlib import Path

from pydantic import BaseModel

DEFAULT_ENVS_ROOT = Path.home() / "ocenv"


class OcenvConfig(BaseModel):
    """Runtime configuration for ocenv."""

    envs_root: Path = DEFAULT_ENVS_ROOT
    shell: str | None = None
