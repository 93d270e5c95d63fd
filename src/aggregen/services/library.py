"""LibraryService: summarize a lexis file."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from aggregen.services.base import BaseService
from aggregen.services.result import ServiceResult

if TYPE_CHECKING:
    from pathlib import Path


class LibraryService(BaseService):
    """Read-only inspection of a lexis."""

    def describe(self, lexis_path: Path) -> ServiceResult:
        """List each connector with the sections offering it and their weight."""
        op = "library"
        loaded = self._load(op, lexis_path)
        if isinstance(loaded, ServiceResult):
            return loaded
        dictionary = loaded

        items: list[dict[str, Any]] = []
        for con in dictionary.connectors:
            sects = dictionary.sections(con)
            items.append(
                {
                    "connector": str(con),
                    "sections": len(sects),
                    "total_weight": sum(dictionary.weight_of(s) for s in sects),
                    "mates": [str(m) for m in dictionary.mates(con)],
                }
            )

        return ServiceResult(
            ok=True,
            op=op,
            data={
                "sections": len(dictionary.all_sections),
                "pole_pairs": [f"{p0} -> {p1}" for p0, p1 in dictionary.pole_pairs],
                "count": len(items),
                "items": items,
            },
        )
