"""Core models and abstractions for epithet."""

from .exceptions import (
    AliasNotFoundError,
    ConfigError,
    ConfigNotFoundError,
    EpithetError,
    ExecutionError,
    InstallError,
    PipelineUnsupportedError,
    SpawnError,
)
from .result import ExecutionResult, ExitStatus, Outcome
from .types import Alias, AliasSet, And, Command, Execution, Or, Pipeline, SubAlias

__all__ = [
    # Exceptions
    "AliasNotFoundError",
    "ConfigError",
    "ConfigNotFoundError",
    "EpithetError",
    "ExecutionError",
    "InstallError",
    "PipelineUnsupportedError",
    "SpawnError",
    # Types
    "Alias",
    "AliasSet",
    "And",
    "Command",
    "Execution",
    "Or",
    "Pipeline",
    "SubAlias",
    "ExecutionResult",
    "ExitStatus",
    "Outcome",
]
