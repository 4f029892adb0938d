"""CLI for epithet."""

from epithet.cli.main import cli, main

__all__ = ["cli", "main"]
