"""Exit status and execution result types."""

from dataclasses import dataclass
from enum import Enum, auto

# Exit code reported when a child has none (killed by a signal)
DEFAULT_FAILURE_CODE = 1


@dataclass(frozen=True)
class ExitStatus:
    """Termination status of one child process.

    Exactly one of ``code`` and ``signal`` is set.
    """

    code: int | None = None
    signal: int | None = None

    @classmethod
    def from_returncode(cls, returncode: int) -> "ExitStatus":
        """Build from a :mod:`subprocess` return code (negative = signal)."""
        if returncode < 0:
            return cls(signal=-returncode)
        return cls(code=returncode)

    @property
    def success(self) -> bool:
        return self.code == 0

    @property
    def exit_code(self) -> int:
        """Exit code to propagate, falling back to 1 for signals."""
        if self.code is None:
            return DEFAULT_FAILURE_CODE
        return self.code

    def __str__(self) -> str:
        if self.signal is not None:
            return f"killed by signal {self.signal}"
        return f"exit code {self.code}"


class Outcome(Enum):
    """Overall outcome of running an execution."""

    SUCCEEDED = auto()  # Every required item succeeded
    FAILED = auto()  # Stopped on a failing item
    NOOP = auto()  # Nothing to run


@dataclass(frozen=True)
class ExecutionResult:
    """Result of running an execution.

    Attributes:
        outcome: How the run ended
        exit_code: Exit code the whole program should terminate with
        attempted: Number of items that were spawned
    """

    outcome: Outcome
    exit_code: int = 0
    attempted: int = 0

    @property
    def success(self) -> bool:
        return self.outcome is not Outcome.FAILED
