"""Custom exceptions for epithet."""


class EpithetError(Exception):
    """Base exception for epithet."""


class ConfigError(EpithetError):
    """Error in configuration."""


class ConfigNotFoundError(ConfigError):
    """Configuration file not found."""


class AliasNotFoundError(EpithetError):
    """Alias name is not defined in the configuration."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(f"Alias not found: {name}")


class ExecutionError(EpithetError):
    """Error while turning an execution into child processes."""


class SpawnError(ExecutionError):
    """Child process could not be started.

    Distinct from a child that started and exited non-zero, which is
    reported through its exit status rather than raised.
    """


class PipelineUnsupportedError(ExecutionError):
    """Pipe-connected executions are not implemented."""


class InstallError(EpithetError):
    """Alias entry point could not be installed."""
