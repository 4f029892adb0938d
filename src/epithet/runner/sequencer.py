"""Run an execution as a sequence of child processes."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import TYPE_CHECKING

from epithet.core.exceptions import ExecutionError, PipelineUnsupportedError, SpawnError
from epithet.core.expansion import expand
from epithet.core.result import DEFAULT_FAILURE_CODE, ExecutionResult, ExitStatus, Outcome
from epithet.core.types import And, Command, Execution, Or, Pipeline
from epithet.runner.base import BaseInvoker
from epithet.runner.local import LocalInvoker

if TYPE_CHECKING:
    from epithet.core.config import EpithetConfig

logger = logging.getLogger(__name__)


class Sequencer:
    """Interprets executions using an invoker.

    The sequencer never terminates the process itself; it returns an
    :class:`ExecutionResult` whose ``exit_code`` the caller exits with.

    Example:
        sequencer = Sequencer(LocalInvoker())
        result = sequencer.run(And(("make", "make test")), [], {})
        sys.exit(result.exit_code)
    """

    def __init__(self, invoker: BaseInvoker) -> None:
        self.invoker = invoker

    def run(
        self,
        execution: Execution | None,
        args: Sequence[str],
        expansions: Mapping[str, str],
    ) -> ExecutionResult:
        """Run ``execution`` with the caller's remaining ``args``.

        Raises:
            SpawnError: A child could not be started
            PipelineUnsupportedError: ``execution`` is a Pipeline
        """
        if execution is None:
            return ExecutionResult(Outcome.NOOP)

        match execution:
            case Command(template=template):
                return self._run_all([template], args, expansions)
            case And(templates=templates):
                return self._run_all(templates, args, expansions)
            case Or(templates=templates):
                return self._run_any(templates, args, expansions)
            case Pipeline():
                raise PipelineUnsupportedError(
                    f"Pipelines are not supported yet: {execution}"
                )
            case _:
                raise ExecutionError(f"Unknown execution type: {type(execution).__name__}")

    def _invoke(self, template: str, args: Sequence[str], expansions: Mapping[str, str]) -> ExitStatus:
        tokens = expand(template, args, expansions)
        if not tokens:
            raise SpawnError(f"No command provided by template {template!r}")
        logger.debug("Running %s", tokens)
        return self.invoker.invoke(tokens)

    def _run_all(
        self,
        templates: Sequence[str],
        args: Sequence[str],
        expansions: Mapping[str, str],
    ) -> ExecutionResult:
        """Run every template, stopping at the first failure."""
        for attempted, template in enumerate(templates, start=1):
            status = self._invoke(template, args, expansions)
            if not status.success:
                logger.debug("Stopping after %r: %s", template, status)
                return ExecutionResult(Outcome.FAILED, status.exit_code, attempted)
        return ExecutionResult(Outcome.SUCCEEDED, 0, len(templates))

    def _run_any(
        self,
        templates: Sequence[str],
        args: Sequence[str],
        expansions: Mapping[str, str],
    ) -> ExecutionResult:
        """Run templates until one succeeds; fail with the last status otherwise."""
        last_status: ExitStatus | None = None
        for attempted, template in enumerate(templates, start=1):
            last_status = self._invoke(template, args, expansions)
            if last_status.success:
                logger.debug("Short-circuiting after %r succeeded", template)
                return ExecutionResult(Outcome.SUCCEEDED, 0, attempted)

        exit_code = last_status.exit_code if last_status else DEFAULT_FAILURE_CODE
        return ExecutionResult(Outcome.FAILED, exit_code, len(templates))


def run_alias(
    config: EpithetConfig,
    name: str,
    args: Sequence[str],
    invoker: BaseInvoker | None = None,
) -> ExecutionResult:
    """Resolve ``name`` in ``config`` and run it.

    Raises:
        AliasNotFoundError: ``name`` is not defined
        ExecutionError: A command could not be run
    """
    resolution = config.resolve(name, list(args))
    sequencer = Sequencer(invoker or LocalInvoker())
    return sequencer.run(resolution.execution, resolution.args, resolution.expansions)
