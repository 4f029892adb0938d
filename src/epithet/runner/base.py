"""Abstract base class for process invokers."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from epithet.core.result import ExitStatus


class BaseInvoker(ABC):
    """Spawns one child process per call and waits for it.

    Implementations must:
    - treat the first token as the executable and the rest as argv
    - never re-interpret tokens through a shell
    - raise SpawnError when the child cannot be started
    """

    name: str

    @abstractmethod
    def invoke(self, tokens: Sequence[str]) -> ExitStatus:
        """Run ``tokens`` to completion.

        Args:
            tokens: Non-empty token list, executable first

        Returns:
            Termination status of the child
        """
