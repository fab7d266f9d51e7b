"""Thin wrapper around ``npm config`` for reading and writing the registry."""

from __future__ import annotations

import logging
import shutil
import subprocess

from regswitch.config import NPM_COMMAND
from regswitch.errors import NpmConfigError

logger = logging.getLogger(__name__)


class NpmConfig:
    """Get/set npm's configured registry by shelling out to npm."""

    def __init__(self, command: str = NPM_COMMAND):
        self.command = command

    def get_registry(self) -> str:
        """Return the configured registry URL, trimmed."""
        return self._run("get", "registry").strip()

    def set_registry(self, url: str) -> None:
        self._run("config", "set", "registry", url)

    def executable(self) -> str:
        """Full path of the command on PATH (picks up npm.cmd on Windows)."""
        return shutil.which(self.command) or self.command

    def _run(self, *args: str) -> str:
        argv = [self.executable(), *args]
        logger.debug("Running %s", " ".join(argv))
        try:
            proc = subprocess.run(argv, capture_output=True, text=True)
        except OSError as e:
            raise NpmConfigError(f"Cannot run {self.command}: {e}") from e

        if proc.returncode != 0:
            stderr = proc.stderr.strip()
            raise NpmConfigError(
                f"`{' '.join(argv)}` exited with code {proc.returncode}"
                + (f": {stderr}" if stderr else ""),
                returncode=proc.returncode,
                stderr=stderr,
            )
        return proc.stdout
