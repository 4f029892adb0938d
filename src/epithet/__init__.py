"""epithet: declarative command aliases invoked by name or symlink."""

from epithet.core.config import EpithetConfig, load_config
from epithet.core.exceptions import (
    AliasNotFoundError,
    ConfigError,
    ConfigNotFoundError,
    EpithetError,
    ExecutionError,
    InstallError,
    PipelineUnsupportedError,
    SpawnError,
)
from epithet.core.expansion import expand, merge_expansions
from epithet.core.resolver import Resolution, resolve
from epithet.core.result import ExecutionResult, ExitStatus, Outcome
from epithet.core.tokenize import tokenize
from epithet.core.types import Alias, And, Command, Execution, Or, Pipeline, SubAlias
from epithet.runner import BaseInvoker, LocalInvoker, Sequencer, run_alias

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Model
    "Alias",
    "SubAlias",
    "Execution",
    "Command",
    "And",
    "Or",
    "Pipeline",
    # Engine
    "tokenize",
    "expand",
    "merge_expansions",
    "resolve",
    "Resolution",
    # Running
    "BaseInvoker",
    "LocalInvoker",
    "Sequencer",
    "run_alias",
    "ExecutionResult",
    "ExitStatus",
    "Outcome",
    # Config
    "load_config",
    "EpithetConfig",
    # Exceptions
    "EpithetError",
    "ConfigError",
    "ConfigNotFoundError",
    "AliasNotFoundError",
    "ExecutionError",
    "InstallError",
    "SpawnError",
    "PipelineUnsupportedError",
]
