"""Command: run an aggregation over a lexis file."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING, Any

import click

from aggregen.commands._base import AggCommand
from aggregen.services.generate import GenerateService

if TYPE_CHECKING:
    from aggregen.commands._context import AppContext


@click.command(
    cls=AggCommand,
    examples="""\
  aggregen generate lexis.yaml A
  aggregen generate lexis.yaml A B --max-solutions 3 --seed 42
  aggregen generate lexis.yaml A --strategy first-fit --no-reuse-open
  aggregen --json generate lexis.yaml A --allow-self-loops""",
)
@click.argument("lexis", type=click.Path(path_type=Path))
@click.argument("roots", nargs=-1, required=True)
@click.option("--max-solutions", type=int, default=None, help="Solution budget.")
@click.option("--seed", type=int, default=None, help="Seed for reproducible runs.")
@click.option("--strategy", default=None, help="Strategy name (random, first-fit, ...).")
@click.option(
    "--allow-self-loops/--no-self-loops",
    default=None,
    help="Permit edges between two connectors of the same section.",
)
@click.option(
    "--reuse-open/--no-reuse-open",
    default=None,
    help="Prefer attaching to already-placed sections before drawing new ones.",
)
@click.pass_obj
def generate(
    app: AppContext,
    lexis: Path,
    roots: tuple[str, ...],
    max_solutions: int | None,
    seed: int | None,
    strategy: str | None,
    allow_self_loops: bool | None,
    reuse_open: bool | None,
) -> None:
    """Assemble graphs grown from the ROOTS points of LEXIS."""
    config = app.settings.to_config()

    search: dict[str, Any] = {}
    if max_solutions is not None:
        search["max_solutions"] = max_solutions
    if seed is not None:
        search["seed"] = seed
    selection: dict[str, Any] = {}
    if allow_self_loops is not None:
        selection["allow_self_loops"] = allow_self_loops
    if reuse_open is not None:
        selection["reuse_open_connections"] = reuse_open

    update: dict[str, Any] = {
        "search": config.search.model_copy(update=search),
        "selection": config.selection.model_copy(update=selection),
    }
    if strategy is not None:
        update["strategy"] = config.strategy.model_copy(update={"name": strategy})
    config = config.model_copy(update=update)

    app.emit(GenerateService(config, app.plugins).generate(lexis, list(roots)))
