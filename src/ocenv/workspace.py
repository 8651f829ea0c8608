"""Directory tree owned by one environment.

Setup failures raise SetupError; teardown failures are logged and
swallowed, since the interactive session is already over by then.
"""

import logging
import os
import shutil
from pathlib import Path
from typing import TextIO

from ocenv.errors import CleanupWarning, SetupError

log = logging.getLogger(__name__)

FILE_PERMISSIONS = 0o644


def ensure_directory(path: Path) -> None:
    """Create ``path`` and its parents if they do not exist."""
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise SetupError(f"Could not create directory {path}: {e}") from e


def ensure_file(path: Path) -> TextIO | None:
    """Create ``path`` and return it open for append.

    Returns None, without touching the file, when it already exists. Callers
    use that to skip writes that would otherwise be duplicated.
    """
    try:
        fd = os.open(path, os.O_WRONLY | os.O_APPEND | os.O_CREAT | os.O_EXCL, FILE_PERMISSIONS)
    except FileExistsError:
        log.debug("%s already exists, leaving it untouched", path)
        return None
    except OSError as e:
        raise SetupError(f"Could not create file {path}: {e}") from e
    return os.fdopen(fd, "a", encoding="utf-8")


def delete(path: Path) -> bool:
    """Remove the workspace tree. Returns whether it is gone afterwards."""
    try:
        shutil.rmtree(path)
    except FileNotFoundError:
        return True
    except OSError as e:
        log.warning("%s: could not delete %s: %s", CleanupWarning.__name__, path, e)
        return False
    log.debug("deleted %s", path)
    return True
