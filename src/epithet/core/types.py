"""Alias definitions and execution variants."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TypeAlias


@dataclass(frozen=True)
class Command:
    """A single command template."""

    template: str

    @property
    def templates(self) -> tuple[str, ...]:
        return (self.template,)

    def __str__(self) -> str:
        return self.template


@dataclass(frozen=True)
class And:
    """Templates run in order, stopping at the first failure."""

    templates: tuple[str, ...]

    def __str__(self) -> str:
        return " && ".join(self.templates)


@dataclass(frozen=True)
class Or:
    """Templates run in order, stopping at the first success."""

    templates: tuple[str, ...]

    def __str__(self) -> str:
        return " || ".join(self.templates)


@dataclass(frozen=True)
class Pipeline:
    """Templates connected stdout to stdin (not supported for execution)."""

    templates: tuple[str, ...]

    def __str__(self) -> str:
        return " | ".join(self.templates)


Execution: TypeAlias = Command | And | Or | Pipeline

# Config keys for each variant, in the order they are checked
EXECUTION_KEYS: dict[str, type] = {
    "command": Command,
    "and": And,
    "or": Or,
    "pipeline": Pipeline,
}


@dataclass(frozen=True)
class SubAlias:
    """A named alternative reached when the first argument matches its name."""

    name: str
    execution: Execution


@dataclass(frozen=True)
class Alias:
    """A named alias.

    Attributes:
        name: Alias name (also the symlink name created by ``install``)
        command: Direct execution, used when no sub-alias matches
        sub_aliases: Sub-aliases in declaration order
        expansions: Alias-local expansions, overriding global ones by key
    """

    name: str
    command: Execution | None = None
    sub_aliases: tuple[SubAlias, ...] = ()
    expansions: dict[str, str] = field(default_factory=dict)

    def find_sub_alias(self, name: str) -> SubAlias | None:
        """Return the first sub-alias called ``name``."""
        for sub_alias in self.sub_aliases:
            if sub_alias.name == name:
                return sub_alias
        return None


AliasSet: TypeAlias = dict[str, Alias]
