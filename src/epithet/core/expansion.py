"""Expansion tables and command template substitution."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence

from epithet.core.tokenize import tokenize

logger = logging.getLogger(__name__)

EXPANSION_PREFIX = "@"

# {N} with N a non-negative integer; no sign, no whitespace
_POSITIONAL = re.compile(r"^\{([0-9]+)\}$")


def merge_expansions(
    global_expansions: Mapping[str, str] | None,
    local_expansions: Mapping[str, str] | None,
) -> dict[str, str]:
    """Merge alias-local expansions over global ones.

    Local keys take precedence on collision. Neither input is modified.
    """
    merged = dict(global_expansions or {})
    if local_expansions:
        merged.update(local_expansions)
    return merged


def resolve_argument(arg: str, expansions: Mapping[str, str]) -> list[str]:
    """Resolve one caller argument into its token group.

    ``@key`` arguments are replaced by the tokenized value of ``key``.
    Unknown keys, and arguments without the prefix, stay a single
    literal token.
    """
    if arg.startswith(EXPANSION_PREFIX):
        key = arg[len(EXPANSION_PREFIX):]
        if key in expansions:
            return tokenize(expansions[key])
        logger.debug("No expansion named %r, keeping %r literally", key, arg)
    return [arg]


def positional_index(token: str) -> int | None:
    """Return N for a ``{N}`` token, or None if the token is not positional."""
    match = _POSITIONAL.match(token)
    if match is None:
        return None
    return int(match.group(1))


def expand(
    template: str,
    args: Sequence[str],
    expansions: Mapping[str, str],
) -> list[str]:
    """Expand a command template into the final token list.

    Every caller argument is first resolved against ``expansions``
    (see :func:`resolve_argument`). Template tokens of the form ``{N}``,
    where N indexes the raw ``args``, are replaced by argument N's token
    group. Arguments not placed by a ``{N}`` are appended, in order,
    after the template tokens.

    Args:
        template: Command template, e.g. ``"yarn workspace {0} build"``
        args: Raw caller arguments
        expansions: Merged expansion table

    Returns:
        Tokens to execute, first token being the executable
    """
    resolved = [resolve_argument(arg, expansions) for arg in args]
    consumed: set[int] = set()
    tokens: list[str] = []

    for token in tokenize(template):
        index = positional_index(token)
        if index is not None and index < len(args):
            tokens.extend(resolved[index])
            consumed.add(index)
        else:
            tokens.append(token)

    for index, group in enumerate(resolved):
        if index not in consumed:
            tokens.extend(group)

    return tokens
