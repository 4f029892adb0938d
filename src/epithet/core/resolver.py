"""Alias resolution: pick the execution an alias invocation refers to."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field

from epithet.core.exceptions import AliasNotFoundError
from epithet.core.expansion import merge_expansions
from epithet.core.types import AliasSet, Execution

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Resolution:
    """Outcome of resolving an alias invocation.

    Attributes:
        execution: Execution to run, or None when the alias resolves to nothing
        args: Arguments left after sub-alias dispatch
        expansions: Global expansions merged with the alias-local ones
        sub_alias: Name of the dispatched sub-alias, if any
    """

    execution: Execution | None
    args: list[str] = field(default_factory=list)
    expansions: dict[str, str] = field(default_factory=dict)
    sub_alias: str | None = None

    @property
    def is_noop(self) -> bool:
        return self.execution is None


def resolve(
    aliases: AliasSet,
    name: str,
    args: Sequence[str],
    global_expansions: Mapping[str, str] | None = None,
) -> Resolution:
    """Resolve ``name`` invoked with ``args``.

    A sub-alias whose name equals the first argument wins and consumes
    that argument. Otherwise the alias's direct command is used with all
    arguments. An alias with neither resolves to a no-op.

    Raises:
        AliasNotFoundError: ``name`` is not defined
    """
    alias = aliases.get(name)
    if alias is None:
        raise AliasNotFoundError(name)

    expansions = merge_expansions(global_expansions, alias.expansions)

    if args:
        sub_alias = alias.find_sub_alias(args[0])
        if sub_alias is not None:
            logger.debug("Alias %r dispatched to sub-alias %r", name, sub_alias.name)
            return Resolution(
                execution=sub_alias.execution,
                args=list(args[1:]),
                expansions=expansions,
                sub_alias=sub_alias.name,
            )

    if alias.command is not None:
        logger.debug("Alias %r resolved to its direct command", name)
        return Resolution(execution=alias.command, args=list(args), expansions=expansions)

    logger.debug("Alias %r has no matching command, nothing to run", name)
    return Resolution(execution=None, args=list(args), expansions=expansions)
