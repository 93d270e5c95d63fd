"""RandomCallback: weighted random choice of the next section to attach.

For each unsatisfied connector the driver asks for a section carrying the
mating connector. Already-placed open sections are tried first (when the
selection policy allows reuse), then a fresh copy is drawn from the
library, weighted by the templates' declared weights.

Library samplers live for the whole run; the lexis never changes once
loaded. Open-section candidates and their samplers are frame-scoped and
kept on a :class:`FrameStack` that follows the driver's push/pop calls.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from aggregen.engine.callback import BasicCallback
from aggregen.engine.frames import FrameStack
from aggregen.engine.sampling import DistributionCache

if TYPE_CHECKING:
    from aggregen.domain.frame import Frame
    from aggregen.domain.types import Connector, Section
    from aggregen.engine.sampling import Sampler

logger = logging.getLogger(__name__)

# Rejection draws before falling back to an explicit non-self pick.
# Only reachable when every non-self candidate carries zero weight.
MAX_REJECTIONS = 1000


class RandomCallback(BasicCallback):
    """Randomized strategy. See :class:`BasicCallback` for parameters."""

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.lexis_samplers = DistributionCache()
        self.frames = FrameStack()

    # ------------------------------------------------------------------
    # Selection
    # ------------------------------------------------------------------

    def select_from_lexis(self, connector: Connector) -> Section | None:
        """Draw a fresh copy of a library section carrying *connector*."""
        to_sects = self.dictionary.sections(connector)
        if not to_sects:
            logger.debug("Dead end: no library section carries %s", connector)
            return None

        sampler = self.lexis_samplers.sampler_for(connector, to_sects, self.dictionary.weight_of)
        return to_sects[sampler.draw(self.rng)].materialize()

    def select_from_open(
        self,
        frame: Frame,
        from_section: Section,
        connector: Connector,
    ) -> Section | None:
        """Pick an open section in *frame* carrying *connector*.

        Never returns *from_section* unless self-loops are allowed.
        """
        level = self.frames.current
        to_sects = level.candidates.get(connector)
        if to_sects is None:
            to_sects = frame.exposing(connector)
            level.candidates[connector] = to_sects

        if not to_sects:
            return None

        allow_self = self.selection.allow_self_loops
        if not allow_self and all(s is from_section for s in to_sects):
            return None

        sampler = level.samplers.sampler_for(connector, to_sects, self._open_weight)
        if allow_self:
            return to_sects[sampler.draw(self.rng)]
        return self._draw_excluding(to_sects, sampler, from_section)

    def select(self, frame: Frame, from_section: Section, connector: Connector) -> Section | None:
        """Attach to open material when allowed, else draw from the library."""
        if self.reuse_open(frame):
            open_sect = self.select_from_open(frame, from_section, connector)
            if open_sect is not None:
                return open_sect
        return self.select_from_lexis(connector)

    def _open_weight(self, section: Section) -> float:
        # Weights are not copied onto materialized sections, so the
        # default policy treats all open candidates alike.
        if self.selection.open_weighting == "template":
            return self.dictionary.weight_of(section.template or section)
        return 1.0

    def _draw_excluding(
        self,
        to_sects: list[Section],
        sampler: Sampler,
        excluded: Section,
    ) -> Section:
        for _ in range(MAX_REJECTIONS):
            choice = to_sects[sampler.draw(self.rng)]
            if choice is not excluded:
                return choice

        others = [s for s in to_sects if s is not excluded]
        assert others, "all-self candidate lists are rejected before sampling"
        logger.debug("Rejection sampling exhausted; picking among %d others", len(others))
        return others[int(self.rng.integers(len(others)))]

    # ------------------------------------------------------------------
    # Frame protocol
    # ------------------------------------------------------------------

    def push_frame(self, frame: Frame) -> None:
        self.frames.push()

    def pop_frame(self, frame: Frame) -> None:
        self.frames.pop()
