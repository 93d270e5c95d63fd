"""Pluggy hook specifications for aggregen strategies and solution events."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from aggregen.engine.callback import GenerateCallback
    from aggregen.engine.solutions import Solution

hookspec = pluggy.HookspecMarker("aggregen")
hookimpl = pluggy.HookimplMarker("aggregen")


class AggregenHookSpec:
    """Hook specifications for the aggregen plugin system."""

    @hookspec
    def register_strategies(self) -> dict[str, type[GenerateCallback]] | None:
        """Return strategy name -> callback class mappings."""

    @hookspec
    def post_solution(self, index: int, solution: Solution) -> None:
        """Called once per recorded solution, in order."""

    @hookspec
    def post_generate(self, roots: list[str], solutions_found: int) -> None:
        """Called after a generate run completes."""
