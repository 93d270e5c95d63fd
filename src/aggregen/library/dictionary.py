"""Dictionary: pole pairing plus a connector-indexed lexis.

The lexis is consulted, never modified, by the selection engine. Once
loaded, the sections it hands out are templates: callers materialize a
copy before placing one in a graph.
"""

from __future__ import annotations

import logging
from collections import defaultdict
from typing import TYPE_CHECKING

from aggregen.domain.types import Connector

if TYPE_CHECKING:
    from collections.abc import Iterable

    from aggregen.domain.types import Section

logger = logging.getLogger(__name__)


class Dictionary:
    """Library of sections indexed by the connectors they carry.

    Parameters:
        default_weight: Weight reported for sections without one.
    """

    def __init__(self, *, default_weight: float = 0.0) -> None:
        self.default_weight = default_weight
        self._poles: dict[str, list[str]] = defaultdict(list)
        self._lexis: dict[Connector, list[Section]] = defaultdict(list)
        self._sections: list[Section] = []

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------

    def add_pole_pair(self, from_pole: str, to_pole: str, *, unordered: bool = False) -> None:
        """Declare that *from_pole* connectors mate *to_pole* connectors.

        With *unordered*, the reverse direction is declared as well.
        """
        if to_pole not in self._poles[from_pole]:
            self._poles[from_pole].append(to_pole)
        if unordered and from_pole != to_pole:
            self.add_pole_pair(to_pole, from_pole)

    def add_to_lexis(self, sections: Iterable[Section]) -> None:
        """Index each section under every distinct connector it carries."""
        for sect in sections:
            self._sections.append(sect)
            for con in dict.fromkeys(sect.connectors):
                self._lexis[con].append(sect)
        logger.debug(
            "Lexis holds %d sections over %d connectors",
            len(self._sections),
            len(self._lexis),
        )

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def sections(self, connector: Connector) -> tuple[Section, ...]:
        """Return the library sections exposing *connector*, in load order."""
        return tuple(self._lexis.get(connector, ()))

    sections_with_connector = sections

    def mates(self, connector: Connector) -> list[Connector]:
        """Return the connectors that may be joined to *connector*."""
        return [Connector(connector.label, pole) for pole in self._poles.get(connector.pole, [])]

    def weight_of(self, section: Section) -> float:
        """Return the section's weight, or the default when it has none."""
        if section.weight is None:
            return self.default_weight
        return section.weight

    def roots(self, name: str) -> list[Section]:
        """Return the library sections whose point is named *name*."""
        return [s for s in self._sections if s.point.name == name]

    @property
    def all_sections(self) -> tuple[Section, ...]:
        return tuple(self._sections)

    @property
    def connectors(self) -> list[Connector]:
        return list(self._lexis)

    @property
    def pole_pairs(self) -> list[tuple[str, str]]:
        return [(p0, p1) for p0, targets in self._poles.items() for p1 in targets]
