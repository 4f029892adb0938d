"""Local invoker - runs commands as blocking subprocesses."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Sequence

from epithet.core.exceptions import SpawnError
from epithet.core.result import ExitStatus
from epithet.runner.base import BaseInvoker

logger = logging.getLogger(__name__)


class LocalInvoker(BaseInvoker):
    """Execute commands directly, inheriting stdin, stdout and stderr."""

    name = "local"

    def invoke(self, tokens: Sequence[str]) -> ExitStatus:
        """Run one command and wait for it."""
        if not tokens:
            raise SpawnError("No command provided")

        executable = os.path.expanduser(tokens[0])
        argv = [executable, *tokens[1:]]
        logger.debug("Spawning %s", argv)

        try:
            result = subprocess.run(argv)
        except FileNotFoundError as e:
            raise SpawnError(f"Failed to execute command: {tokens[0]}: command not found") from e
        except OSError as e:
            raise SpawnError(f"Failed to execute command: {tokens[0]}: {e.strerror or e}") from e

        status = ExitStatus.from_returncode(result.returncode)
        logger.debug("%s finished with %s", tokens[0], status)
        return status
