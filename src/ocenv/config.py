"""Configuration loading for ocenv."""

import json
import logging
import os
from pathlib import Path

from pydantic import ValidationError

from ocenv.models import OcenvConfig

log = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".ocenv"
CONFIG_FILE = CONFIG_DIR / "config.json"


def load_config(config_file: Path | None = None) -> OcenvConfig:
    """Load config from disk, then apply environment variable overrides."""
    path = CONFIG_FILE if config_file is None else config_file
    data: dict = {}
    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Could not read {path}: {e}") from e
        if not isinstance(data, dict):
            raise ValueError(f"Invalid configuration in {path}: expected a JSON object")
        log.debug("loaded config from %s", path)

    root = os.environ.get("OCENV_ROOT", "").strip()
    if root:
        data["envs_root"] = root
    shell = os.environ.get("OCENV_SHELL", "").strip()
    if shell:
        data["shell"] = shell

    try:
        config = OcenvConfig.model_validate(data)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration in {path}: {e}") from e
    config.envs_root = config.envs_root.expanduser().absolute()
    return config
