"""Run an interactive shell inside a workspace and clean up after it.

The shell is started in its own process group and, when we own a terminal,
made the terminal's foreground group so job control and Ctrl-C behave as in
a normal login shell. Once the shell exits the whole group is signalled and
any PIDs recorded in the workspace's .killpids file are terminated, which
covers background jobs that the shell moved into groups of their own.
"""

import logging
import os
import signal
import subprocess
import sys
from typing import TextIO

from ocenv.credentials import read_env_file
from ocenv.errors import CleanupWarning, ProcessLaunchError
from ocenv.models import Environment
from ocenv.shell import build_shell_launch_config

log = logging.getLogger(__name__)


def _controlling_tty(stream: TextIO) -> int | None:
    """Return the fd of ``stream`` if it is a terminal we own the foreground of."""
    try:
        if not stream.isatty():
            return None
        fd = stream.fileno()
        if os.tcgetpgrp(fd) != os.getpgrp():
            return None
    except (AttributeError, OSError, ValueError):
        return None
    return fd


def _give_terminal(fd: int, pgid: int) -> None:
    """Make ``pgid`` the foreground process group of the terminal ``fd``."""
    # A background group writing tcsetpgrp gets SIGTTOU unless it is ignored.
    previous = signal.signal(signal.SIGTTOU, signal.SIG_IGN)
    try:
        os.tcsetpgrp(fd, pgid)
    except OSError as e:
        log.debug("could not hand terminal to process group %d: %s", pgid, e)
    finally:
        signal.signal(signal.SIGTTOU, previous)


class Supervisor:
    """Foreground shell session for one environment."""

    def __init__(
        self,
        env: Environment,
        out: TextIO | None = None,
        shell: str | None = None,
        stdin: TextIO | None = None,
    ) -> None:
        self.env = env
        self.out = sys.stdout if out is None else out
        self.shell = shell
        self.stdin = sys.stdin if stdin is None else stdin

    def _print(self, message: str) -> None:
        self.out.write(message + "\n")
        self.out.flush()

    def start(self) -> int:
        """Launch the shell, block until it exits, then clean up.

        Returns the shell's exit status.
        """
        variables = read_env_file(self.env.env_file)
        launch = build_shell_launch_config(self.env, variables, self.shell)
        tty_fd = _controlling_tty(self.stdin)
        isolate = os.name == "posix"

        log.debug("launching %s in %s", launch.argv, self.env.path)
        try:
            proc = subprocess.Popen(
                launch.argv,
                cwd=self.env.path,
                env=launch.env,
                process_group=0 if isolate else None,
            )
        except OSError as e:
            raise ProcessLaunchError(
                f"Could not start shell {launch.executable}: {e}. "
                "Set OCENV_SHELL to a working shell."
            ) from e
        self._print(f"Switching to OpenShift environment {self.env.alias}")

        if tty_fd is not None:
            _give_terminal(tty_fd, proc.pid)
            # The shell may have stopped itself on SIGTTIN before it got the terminal.
            self._signal_group(proc.pid, signal.SIGCONT)

        try:
            self._wait_for_exit(proc)
        finally:
            if isolate:
                self._signal_group(proc.pid, signal.SIGTERM)
            returncode = proc.wait()
            if tty_fd is not None:
                _give_terminal(tty_fd, os.getpgrp())
            self._print("Exited OpenShift environment")
            self.kill_children()

        if returncode < 0:
            return 128 - returncode
        return returncode

    @staticmethod
    def _wait_for_exit(proc: subprocess.Popen) -> None:
        """Block until the shell exits, leaving it unreaped where possible.

        An unreaped shell keeps its process group id reserved, so the group
        signal that follows cannot hit an unrelated process.
        """
        if hasattr(os, "waitid"):
            try:
                os.waitid(os.P_PID, proc.pid, os.WEXITED | os.WNOWAIT)
                return
            except ChildProcessError:
                return
        proc.wait()

    @staticmethod
    def _signal_group(pgid: int, signum: int) -> None:
        try:
            os.killpg(pgid, signum)
        except ProcessLookupError:
            pass
        except OSError as e:
            log.warning("%s: could not signal process group %d: %s", CleanupWarning.__name__, pgid, e)

    def kill_children(self) -> None:
        """Terminate every PID recorded in .killpids, then remove the file."""
        path = self.env.killpids_file
        try:
            with open(path, encoding="utf-8") as f:
                lines = f.read().splitlines()
        except FileNotFoundError:
            return
        except OSError as e:
            log.warning("%s: could not read %s: %s", CleanupWarning.__name__, path, e)
            lines = []

        for line in lines:
            entry = line.strip()
            if not entry:
                continue
            try:
                pid = int(entry)
            except ValueError:
                log.warning("%s: ignoring malformed pid %r in %s", CleanupWarning.__name__, entry, path)
                continue
            if pid <= 1 or pid == os.getpid():
                log.warning("%s: refusing to signal pid %d", CleanupWarning.__name__, pid)
                continue
            try:
                os.kill(pid, signal.SIGTERM)
            except ProcessLookupError:
                log.debug("pid %d already exited", pid)
            except OSError as e:
                log.warning("%s: could not kill pid %d: %s", CleanupWarning.__name__, pid, e)
            else:
                log.debug("sent SIGTERM to pid %d", pid)

        try:
            path.unlink()
        except FileNotFoundError:
            pass
        except OSError as e:
            log.warning("%s: could not remove %s: %s", CleanupWarning.__name__, path, e)
