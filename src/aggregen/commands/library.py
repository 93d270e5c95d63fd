"""Command: summarize a lexis file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import click

from aggregen.commands._base import AggCommand
from aggregen.services.library import LibraryService

if TYPE_CHECKING:
    from aggregen.commands._context import AppContext


@click.command(
    cls=AggCommand,
    examples="""\
  aggregen library lexis.yaml
  aggregen --json library lexis.yaml""",
)
@click.argument("lexis", type=click.Path(path_type=Path))
@click.pass_obj
def library(app: AppContext, lexis: Path) -> None:
    """List connectors, section counts and pole pairs of LEXIS."""
    app.emit(LibraryService(app.settings.to_config(), app.plugins).describe(lexis))
