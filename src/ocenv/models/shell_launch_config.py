"""Shell launch model for the process supervisor."""

from dataclasses import dataclass


@dataclass
class ShellLaunchConfig:
    """How to launch the interactive shell inside a workspace."""

    kind: str
    executable: str
    argv: list[str]
    env: dict[str, str]
