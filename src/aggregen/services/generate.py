"""GenerateService: load a lexis, run a strategy, report the solutions."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import numpy as np

from aggregen.engine.solutions import LinkStyle
from aggregen.library.dictionary import Dictionary
from aggregen.search.aggregate import Aggregate
from aggregen.search.parameters import Parameters
from aggregen.services.base import BaseService
from aggregen.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path

    from aggregen.domain.types import Section

logger = logging.getLogger(__name__)


class GenerateService(BaseService):
    """Runs aggregation requests."""

    def generate(self, lexis_path: Path, roots: list[str]) -> ServiceResult:
        """Assemble graphs grown from the points named in *roots*.

        Each root name must match a section in the lexis; when a point has
        several sections the first one is used and a warning is reported.
        """
        op = "generate"
        loaded = self._load(op, lexis_path)
        if isinstance(loaded, ServiceResult):
            return loaded
        dictionary: Dictionary = loaded

        warnings: list[str] = []
        root_sects: list[Section] = []
        for name in roots:
            candidates = dictionary.roots(name)
            if not candidates:
                return ServiceResult.failure(
                    op, "UNKNOWN_ROOT", f"No section for root point '{name}'", root=name
                )
            if len(candidates) > 1:
                warnings.append(f"Point '{name}' has {len(candidates)} sections; using the first")
            root_sects.append(candidates[0])

        strategy = self._config.strategy.name
        callback_cls = self._plugins.get_strategy(strategy)
        if callback_cls is None:
            return ServiceResult.failure(
                op,
                "UNKNOWN_STRATEGY",
                f"Unknown strategy '{strategy}'",
                available=sorted(self._plugins.strategies()),
            )

        search = self._config.search
        params = Parameters.from_config(search, self._config.selection)
        callback = callback_cls(
            dictionary,
            selection=self._config.selection,
            max_solutions=search.max_solutions,
            continuation=params.step,
            connect_existing=params.connect_existing,
            rng=np.random.default_rng(search.seed),
        )
        found = Aggregate(dictionary, callback, params).aggregate(root_sects)
        logger.debug("Strategy %s found %d solutions", strategy, found)

        solutions = callback.solutions if isinstance(callback, LinkStyle) else []
        items: list[dict[str, Any]] = []
        for index, solution in enumerate(solutions):
            self._dispatch_event("post_solution", warnings, index=index, solution=solution)
            g = solution.to_graph()
            items.append(
                {
                    "index": index,
                    "node_count": g.number_of_nodes(),
                    "edge_count": g.number_of_edges(),
                    **solution.to_dict(),
                }
            )
        self._dispatch_event("post_generate", warnings, roots=list(roots), solutions_found=found)

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "roots": list(roots),
                "strategy": strategy,
                "seed": search.seed,
                "steps": params.steps_taken,
                "count": len(items),
                "items": items,
            },
            warnings=warnings,
        )
