"""Subcommand modules for aggregen.

Provides register_commands() which uses deferred imports to keep
``aggregen --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all standalone commands on the root CLI group."""
    from aggregen.commands.generate import generate
    from aggregen.commands.library import library

    cli.add_command(generate)
    cli.add_command(library)
